"""Design pattern examples and a generator of pattern skeleton directories."""

__version__ = "0.1.0"