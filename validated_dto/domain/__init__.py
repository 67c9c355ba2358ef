"""Domain layer: pure type inference and rendering, no I/O."""

__all__ = []
