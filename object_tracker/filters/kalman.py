"""Kalman filter for a single coordinate axis

State vector: [position, velocity/input term]
Measurement: position only

The observation matrix has a single row, so the innovation covariance is a
1x1 matrix and the gain only ever needs a scalar reciprocal.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import numpy as np

from ..core.matrix import (
    MatrixLike,
    add,
    as_matrix,
    identity,
    multiply,
    subtract,
    transpose,
)
from .model import DiscreteModel, NoiseModel, default_model, default_noise

DEFAULT_INNOVATION_THRESHOLD = 1e-5

logger = logging.getLogger(__name__)


def predict(state: MatrixLike, P: MatrixLike, model: DiscreteModel,
            noise: NoiseModel, u: float = 0.0) -> Tuple[np.ndarray, np.ndarray]:
    """
    Propagate state and covariance one sample forward

    Args:
        state: 2x1 state vector
        P: 2x2 state covariance
        model: Discrete model
        noise: Noise covariances
        u: Input applied during the step

    Returns:
        Tuple of (prior state, prior covariance)
    """
    prior_state = add(multiply(model.A, state), multiply(model.B, u))
    prior_P = add(multiply(model.A, P, transpose(model.A)), noise.Q)
    return prior_state, prior_P


def innovation_covariance(prior_P: MatrixLike, model: DiscreteModel,
                          noise: NoiseModel) -> np.ndarray:
    """S = C * P_prior * C^T + R"""
    return add(multiply(model.C, prior_P, transpose(model.C)), noise.R)


def update(prior_state: MatrixLike, prior_P: MatrixLike, measurement: MatrixLike,
           model: DiscreteModel, noise: NoiseModel,
           threshold: float = DEFAULT_INNOVATION_THRESHOLD
           ) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """
    Correct a predicted state with a position measurement

    Args:
        prior_state: Predicted 2x1 state
        prior_P: Predicted 2x2 covariance
        measurement: 1x1 position measurement (a plain number is accepted)
        model: Discrete model
        noise: Noise covariances
        threshold: Smallest innovation covariance magnitude that is inverted

    Returns:
        Tuple of (posterior state, posterior covariance), or None when the
        innovation covariance is too close to zero to invert
    """
    S = innovation_covariance(prior_P, model, noise)
    if abs(S[0, 0]) < threshold:
        logger.warning(
            f"Innovation covariance {S[0, 0]:.3g} is below {threshold:g}, "
            f"measurement rejected"
        )
        return None

    K = multiply(prior_P, transpose(model.C), 1.0 / S[0, 0])
    residual = subtract(measurement, multiply(model.C, prior_state))
    state = add(prior_state, multiply(K, residual))
    P = multiply(subtract(identity(2), multiply(K, model.C)), prior_P)
    return state, P


def estimate(state: MatrixLike, P: MatrixLike, measurement: MatrixLike,
             model: DiscreteModel, noise: NoiseModel, u: float = 0.0,
             threshold: float = DEFAULT_INNOVATION_THRESHOLD
             ) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """Predict followed by update, without exposing the prior"""
    prior_state, prior_P = predict(state, P, model, noise, u)
    return update(prior_state, prior_P, measurement, model, noise, threshold)


@dataclass
class AxisState:
    """State, covariance and prediction staging area of one axis"""

    state: np.ndarray = field(default_factory=lambda: np.zeros((2, 1)))
    P: np.ndarray = field(default_factory=lambda: np.zeros((2, 2)))
    prior_state: np.ndarray = field(default_factory=lambda: np.zeros((2, 1)))
    prior_P: np.ndarray = field(default_factory=lambda: np.zeros((2, 2)))

    @classmethod
    def initial(cls, position: float, velocity: float = 0.0) -> "AxisState":
        """State seeded with position and velocity, zero covariance"""
        return cls(state=as_matrix([[position], [velocity]]))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            "state": self.state.tolist(),
            "P": self.P.tolist(),
            "prior_state": self.prior_state.tolist(),
            "prior_P": self.prior_P.tolist(),
        }


class AxisKalmanFilter:
    """
    Kalman filter on one coordinate axis

    predict() stages the propagated values, update() consumes them. The
    fused estimate() path skips the staging area and writes the posterior
    directly.
    """

    def __init__(self, position: float, velocity: float = 0.0,
                 model: Optional[DiscreteModel] = None,
                 noise: Optional[NoiseModel] = None,
                 innovation_threshold: float = DEFAULT_INNOVATION_THRESHOLD):
        """
        Initialize the axis filter

        Args:
            position: Initial position estimate
            velocity: Initial velocity/input estimate
            model: Discrete model, the process-wide default when None
            noise: Noise covariances, the process-wide default when None
            innovation_threshold: Guard on the innovation covariance magnitude
        """
        self.model = model if model is not None else default_model()
        self.noise = noise if noise is not None else default_noise()
        self.innovation_threshold = innovation_threshold
        self.axis = AxisState.initial(position, velocity)

    @property
    def state(self) -> np.ndarray:
        return self.axis.state

    @property
    def P(self) -> np.ndarray:
        return self.axis.P

    @property
    def position(self) -> float:
        """Current position estimate"""
        return float(self.axis.state[0, 0])

    @property
    def velocity(self) -> float:
        """Current velocity/input estimate"""
        return float(self.axis.state[1, 0])

    def predict(self, u: float = 0.0) -> None:
        """Propagate into the staging area; state and P are not touched"""
        self.axis.prior_state, self.axis.prior_P = predict(
            self.axis.state, self.axis.P, self.model, self.noise, u
        )

    def update(self, measurement: MatrixLike) -> bool:
        """
        Correct the staged prediction with a measurement

        Returns:
            True when state and P were overwritten, False when the
            measurement was rejected and nothing changed
        """
        result = update(self.axis.prior_state, self.axis.prior_P, measurement,
                        self.model, self.noise, self.innovation_threshold)
        if result is None:
            return False

        self.axis.state, self.axis.P = result
        return True

    def estimate(self, measurement: MatrixLike, u: float = 0.0) -> bool:
        """Fused predict and update; False when the measurement was rejected"""
        result = estimate(self.axis.state, self.axis.P, measurement,
                          self.model, self.noise, u, self.innovation_threshold)
        if result is None:
            return False

        self.axis.state, self.axis.P = result
        return True

    def innovation_covariance(self) -> float:
        """Innovation covariance of the staged prediction"""
        return float(innovation_covariance(self.axis.prior_P, self.model, self.noise)[0, 0])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        data = self.axis.to_dict()
        data["position"] = self.position
        data["velocity"] = self.velocity
        return data
