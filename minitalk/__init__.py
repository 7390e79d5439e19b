"""printf-style formatting, per-descriptor line reading and C-style string helpers."""

__version__ = "0.1.0"

__all__ = [
    "charclass",
    "convert",
    "formatting",
    "layout",
    "linereader",
    "numconv",
    "printf_spec",
    "strings",
    "transform",
]