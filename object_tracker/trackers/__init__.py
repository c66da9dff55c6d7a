"""Tracking facades"""

from .object_tracker import ObjectTracker, batch_estimate

__all__ = ["ObjectTracker", "batch_estimate"]
