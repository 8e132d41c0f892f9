"""Interactive trainer for binary, octal, hexadecimal, two's complement and bitwise arithmetic."""

__version__ = "0.1.0"