"""A small, strict JSON parser and generator with an editable value tree."""

__version__ = "0.1.0"
__all__ = ["errors", "value", "parser", "stringify"]