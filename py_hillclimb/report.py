"""Run report models."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .core.elevation_grid import ElevationGrid


class DistanceReport(BaseModel):
    """Outcome of one search run."""

    input_path: str
    width: int = Field(..., ge=1, description="Grid width in cells")
    height: int = Field(..., ge=1, description="Grid height in cells")
    start: List[int] = Field(..., description="Start cell as [x, y]")
    end: List[int] = Field(..., description="End cell as [x, y]")
    engine: str
    steps: Optional[int] = Field(None, ge=0, description="Fewest steps, None if unreachable")
    reachable: bool
    elapsed_us: int = Field(..., ge=0, description="Search time in microseconds")

    @classmethod
    def from_run(
        cls,
        input_path: str,
        grid: ElevationGrid,
        engine: str,
        steps: Optional[int],
        elapsed_us: int,
    ) -> "DistanceReport":
        return cls(
            input_path=input_path,
            width=grid.width,
            height=grid.height,
            start=grid.start.as_list(),
            end=grid.end.as_list(),
            engine=engine,
            steps=steps,
            reachable=steps is not None,
            elapsed_us=elapsed_us,
        )
