"""Terminal drawing helpers: colour codes, box-drawing lines, bubbles and text values."""

__version__ = "0.1.0"
__all__ = ["palette", "text", "console"]