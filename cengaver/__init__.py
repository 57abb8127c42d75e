"""A tile-based side-scrolling platform game built on pygame."""

__version__ = "0.1.0"