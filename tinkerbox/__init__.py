"""Small worked exercises, two console games and a line-based TCP chat."""

__version__ = "0.1.0"