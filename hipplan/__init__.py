"""Radiograph-based planning of osteotomies for hip dysplasia."""

__version__ = "0.1.0"
__all__ = ["geometry", "scene", "intake", "correction", "planner", "cli"]