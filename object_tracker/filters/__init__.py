"""Axis Kalman filters and the discrete model they share"""

from .kalman import AxisKalmanFilter, AxisState, estimate, predict, update
from .model import DiscreteModel, NoiseModel, default_model, default_noise

__all__ = [
    "AxisKalmanFilter",
    "AxisState",
    "DiscreteModel",
    "NoiseModel",
    "default_model",
    "default_noise",
    "predict",
    "update",
    "estimate",
]
