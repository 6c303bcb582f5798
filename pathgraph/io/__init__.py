from .text import dumps, loads, read_text, write_text

__all__ = ["read_text", "write_text", "loads", "dumps"]
