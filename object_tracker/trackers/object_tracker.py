"""Two-axis object tracker built from independent axis filters"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..config import TrackerConfig
from ..core import BoundingBox
from ..core.matrix import MatrixLike
from ..filters import AxisKalmanFilter, DiscreteModel, NoiseModel
from ..filters.kalman import DEFAULT_INNOVATION_THRESHOLD


class ObjectTracker:
    """
    Tracks the center of a bounding box with one Kalman filter per axis

    The x and y filters share no state. A combined call succeeds only when
    both axes succeed; x runs first and y is skipped when x is rejected.
    An x update is kept even when the following y update is rejected.
    """

    def __init__(self, x_top: float, y_top: float, x_bot: float, y_bot: float,
                 u_x: float = 0.0, u_y: float = 0.0,
                 model: Optional[DiscreteModel] = None,
                 noise: Optional[NoiseModel] = None,
                 innovation_threshold: float = DEFAULT_INNOVATION_THRESHOLD):
        """
        Initialize tracker from the initial bounding box

        Args:
            x_top: First corner x
            y_top: First corner y
            x_bot: Opposite corner x
            y_bot: Opposite corner y
            u_x: Initial velocity/input on x
            u_y: Initial velocity/input on y
            model: Discrete model, the process-wide default when None
            noise: Noise covariances, the process-wide default when None
            innovation_threshold: Guard on the innovation covariance magnitude
        """
        self.logger = logging.getLogger(f"{__name__}.ObjectTracker")

        self.x = AxisKalmanFilter((x_top + x_bot) / 2.0, u_x, model, noise,
                                  innovation_threshold)
        self.y = AxisKalmanFilter((y_top + y_bot) / 2.0, u_y, model, noise,
                                  innovation_threshold)

        self.logger.debug(
            f"Tracker created at ({self.x.position:.3f}, {self.y.position:.3f})"
        )

    @classmethod
    def from_bbox(cls, bbox: BoundingBox, u_x: float = 0.0, u_y: float = 0.0,
                  **kwargs) -> "ObjectTracker":
        """Create tracker from a BoundingBox"""
        x_top, y_top, x_bot, y_bot = (float(v) for v in bbox.tlbr)
        return cls(x_top, y_top, x_bot, y_bot, u_x, u_y, **kwargs)

    @classmethod
    def from_config(cls, bbox: BoundingBox, config: TrackerConfig,
                    u_x: float = 0.0, u_y: float = 0.0) -> "ObjectTracker":
        """Create tracker whose model and noise come from a configuration"""
        return cls.from_bbox(
            bbox, u_x, u_y,
            model=config.build_model(),
            noise=config.build_noise(),
            innovation_threshold=config.innovation_threshold,
        )

    def estimate(self, x_measure: MatrixLike, y_measure: MatrixLike,
                 u_x: float = 0.0, u_y: float = 0.0) -> bool:
        """
        Predict and update both axes with a position measurement

        Args:
            x_measure: 1x1 x position measurement
            y_measure: 1x1 y position measurement
            u_x: Input on x
            u_y: Input on y

        Returns:
            True when both axes incorporated their measurement
        """
        success = self.x.estimate(x_measure, u_x) and self.y.estimate(y_measure, u_y)
        if not success:
            self.logger.debug("Estimate rejected on at least one axis")
        return success

    def predict(self, u_x: float = 0.0, u_y: float = 0.0) -> None:
        """Stage a prediction on both axes"""
        self.x.predict(u_x)
        self.y.predict(u_y)

    def update(self, x_measure: MatrixLike, y_measure: MatrixLike) -> bool:
        """Correct the staged predictions; True when both axes succeed"""
        return self.x.update(x_measure) and self.y.update(y_measure)

    def get_position(self) -> Tuple[float, float]:
        """Current (x, y) position estimate"""
        return self.x.position, self.y.position

    def get_velocity(self) -> Tuple[float, float]:
        """Current (x, y) velocity/input estimate"""
        return self.x.velocity, self.y.velocity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            "position": list(self.get_position()),
            "velocity": list(self.get_velocity()),
            "x": self.x.to_dict(),
            "y": self.y.to_dict(),
        }


def batch_estimate(trackers: List[ObjectTracker],
                   boxes: Sequence[BoundingBox]) -> Tuple[np.ndarray, List[bool]]:
    """
    Run one estimate per tracker with its matching bounding box

    Args:
        trackers: ObjectTracker instances
        boxes: Measured boxes, in the same order as trackers

    Returns:
        Array of positions (N, 2) and the success flag of each tracker
    """
    if len(trackers) != len(boxes):
        raise ValueError(
            f"Got {len(boxes)} boxes for {len(trackers)} trackers"
        )

    if not trackers:
        return np.zeros((0, 2)), []

    positions = np.zeros((len(trackers), 2))
    flags = []

    for i, (tracker, bbox) in enumerate(zip(trackers, boxes)):
        x_measure, y_measure = bbox.measurement()
        flags.append(tracker.estimate(x_measure, y_measure))
        positions[i] = tracker.get_position()

    return positions, flags
