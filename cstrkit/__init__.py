"""C-style string, memory, error-message, formatting and scanning routines."""

__version__ = "0.1.0"
__all__ = ["memory", "strings", "transform", "errors", "printf", "scanf"]