"""
py_hillclimb: fewest-steps hiking search over letter heightmaps.
"""

__version__ = "0.1.0"
