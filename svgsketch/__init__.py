"""Build SVG documents from circles, polylines, text and drawable shapes."""

__version__ = "0.1.0"
__all__ = ["shapes", "svg"]