"""Encoding-aware byte strings and slices for ASCII and UTF-8 text."""

__version__ = "0.1.0"
__all__ = ["ascii", "utf8", "errors", "nstr", "ops"]