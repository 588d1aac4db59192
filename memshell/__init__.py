"""An in-memory hierarchical file system with an interactive shell."""

__version__ = "1.0.0"
__all__ = ["__version__"]