"""
Linear timeline module.

Flattens a plan into ordered (item, set) steps for progress display,
independent of superset grouping.
"""
from .builder import TimelineStep, build_timeline

__all__ = ["TimelineStep", "build_timeline"]
