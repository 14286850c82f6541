"""Download, install, select and remove Zig compilers."""

__version__ = "2.0.1"

__all__ = ["__version__"]