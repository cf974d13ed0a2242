"""Building blocks for linting Protocol Buffer files."""

__version__ = "0.1.0"