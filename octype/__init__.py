"""Type registry, reference-counted base objects and type-aware equality."""

__version__ = "0.1.0"
__all__ = ["core"]