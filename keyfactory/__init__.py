"""String-keyed object factories with class registration by key."""

__version__ = "0.1.0"
__all__ = ["bclass", "factory", "messages"]