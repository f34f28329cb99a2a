"""
Configuration for the hill-climbing runner.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
