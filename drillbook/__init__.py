"""Small programming drills usable as library functions and console commands."""

__version__ = "0.1.0"