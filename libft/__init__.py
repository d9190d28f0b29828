"""ASCII character, byte-buffer, string, integer conversion and file-descriptor output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "convert", "strtools", "output"]