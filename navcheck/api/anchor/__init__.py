"""Anchor resolution domain."""

from .resolve_anchors import resolve_anchors
from .slugify import slugify

__all__ = ["resolve_anchors", "slugify"]
