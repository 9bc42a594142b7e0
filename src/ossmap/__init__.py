"""Compact text outlines of object-storage hierarchies for prompt context."""

from ossmap.structure.describe import build_hierarchy_description

__all__ = ["build_hierarchy_description"]
