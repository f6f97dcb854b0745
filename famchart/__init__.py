"""famchart - pedigree chart layout and interactive editing core."""

__version__ = "0.1.0"
