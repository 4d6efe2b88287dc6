"""Core model of a point-and-click adventure toolkit: geometry, walk boxes,
resource references, script callbacks, objects and rooms."""

__version__ = "0.1.0"
__all__ = ["space", "walkbox", "resources", "script", "objects", "room"]