"""Builtin commands, an ordered environment store and string helpers for a minimal shell."""

__version__ = "0.1.0"
__all__ = ["libft", "printf", "errors", "environment", "builtins", "exports"]