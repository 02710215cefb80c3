"""patterndocs - a small browser for design-pattern articles."""

__version__ = "0.1.0"
