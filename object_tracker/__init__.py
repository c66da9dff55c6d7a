# object_tracker/__init__.py

"""
Object Tracker: Bounding-Box Kalman Tracking
============================================

Estimates the position of a tracked object from noisy axis-aligned
bounding-box measurements with two independent discrete-time Kalman
filters, one on the x coordinate and one on the y coordinate of the box
center.

Key Features:
- Damped position/velocity model discretized once at a fixed sample time
- Scalar innovation covariance with a guard against near-zero values
- Separate predict/update stages or a fused estimate per measurement
- YAML/JSON configuration with validation
- Line-oriented command line driver for replaying measurement sessions

License: MIT
"""

from object_tracker.__version__ import __version__
from object_tracker.config import TrackerConfig
from object_tracker.core import BoundingBox
from object_tracker.filters import AxisKalmanFilter, DiscreteModel, NoiseModel
from object_tracker.trackers import ObjectTracker, batch_estimate

__all__ = [
    "__version__",
    "TrackerConfig",
    "BoundingBox",
    "AxisKalmanFilter",
    "DiscreteModel",
    "NoiseModel",
    "ObjectTracker",
    "batch_estimate",
]
