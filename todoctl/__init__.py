"""Command-line client and library layers for a remote JSON-over-HTTP todo service."""

__version__ = "0.1.0"

__all__ = ["__version__"]