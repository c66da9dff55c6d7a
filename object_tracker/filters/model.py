"""Discrete-time linear model shared by the axis filters

The physical model per axis is a damped first-order system

    dx/dt = -gamma * x + v,   dv/dt = u,   y = x

which is converted once to a discrete model at a fixed sample time.
The conversion truncates the series of the matrix exponential after the
second-order term. For small gamma * T the error is negligible; it grows
with gamma * T and is measured by discretization_error().
"""

from dataclasses import dataclass
from functools import lru_cache

import numpy as np
from scipy.linalg import expm

from ..core.matrix import add, as_matrix, identity, multiply

DEFAULT_GAMMA = 0.01
DEFAULT_SAMPLE_TIME = 0.1
DEFAULT_PROCESS_NOISE = (1.0, 0.1)
DEFAULT_MEASUREMENT_NOISE = 1.0


def _frozen(value) -> np.ndarray:
    matrix = as_matrix(value)
    matrix.setflags(write=False)
    return matrix


@dataclass(frozen=True, eq=False)
class ContinuousModel:
    """Continuous-time state space model (A, B, C, D)"""

    A: np.ndarray
    B: np.ndarray
    C: np.ndarray
    D: np.ndarray

    def __post_init__(self):
        for name in ("A", "B", "C", "D"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    @classmethod
    def from_damping(cls, gamma: float = DEFAULT_GAMMA) -> "ContinuousModel":
        """Position/velocity model with damping gamma and direct position output"""
        return cls(
            A=[[-gamma, 1.0], [0.0, 0.0]],
            B=[[0.0], [1.0]],
            C=[[1.0, 0.0]],
            D=[[0.0]],
        )


@dataclass(frozen=True, eq=False)
class DiscreteModel:
    """
    Discrete-time model x[k+1] = A x[k] + B u[k], y[k] = C x[k] + D u[k]

    D is carried for completeness and not used by the filter.
    """

    A: np.ndarray
    B: np.ndarray
    C: np.ndarray
    D: np.ndarray
    sample_time: float = DEFAULT_SAMPLE_TIME

    def __post_init__(self):
        for name in ("A", "B", "C", "D"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    @classmethod
    def from_continuous(cls, gamma: float = DEFAULT_GAMMA,
                        sample_time: float = DEFAULT_SAMPLE_TIME) -> "DiscreteModel":
        """Discretize the damped model for the given gamma and sample time"""
        return discretize(ContinuousModel.from_damping(gamma), sample_time)


@dataclass(frozen=True, eq=False)
class NoiseModel:
    """Process noise covariance Q (2x2) and measurement noise covariance R (1x1)"""

    Q: np.ndarray
    R: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "Q", _frozen(self.Q))
        object.__setattr__(self, "R", _frozen(self.R))

    @classmethod
    def from_variances(cls, position: float = DEFAULT_PROCESS_NOISE[0],
                       velocity: float = DEFAULT_PROCESS_NOISE[1],
                       measurement: float = DEFAULT_MEASUREMENT_NOISE) -> "NoiseModel":
        """Diagonal process noise and scalar measurement noise"""
        return cls(Q=[[position, 0.0], [0.0, velocity]], R=[[measurement]])


def truncated_psi(A: np.ndarray, sample_time: float) -> np.ndarray:
    """Psi = I + A*T/2 + A^2*T^2/6"""
    return add(
        identity(2),
        multiply(A, sample_time / 2.0),
        multiply(A, A, sample_time * sample_time / 6.0),
    )


def discretize(continuous: ContinuousModel, sample_time: float) -> DiscreteModel:
    """
    Convert a continuous model with the truncated series approximation

    Args:
        continuous: Continuous-time model
        sample_time: Sample interval T

    Returns:
        Discrete model with A_d = I + A*Psi*T, B_d = Psi*B*T, C and D unchanged
    """
    psi = truncated_psi(continuous.A, sample_time)
    return DiscreteModel(
        A=add(identity(2), multiply(continuous.A, psi, sample_time)),
        B=multiply(psi, continuous.B, sample_time),
        C=continuous.C,
        D=continuous.D,
        sample_time=sample_time,
    )


def discretize_exact(continuous: ContinuousModel, sample_time: float) -> DiscreteModel:
    """
    Zero-order-hold discretization through the matrix exponential

    Reference for checking the accuracy of discretize().
    """
    n_states = continuous.A.shape[0]
    n_inputs = continuous.B.shape[1]

    augmented = np.zeros((n_states + n_inputs, n_states + n_inputs))
    augmented[:n_states, :n_states] = continuous.A
    augmented[:n_states, n_states:] = continuous.B
    exponential = expm(augmented * sample_time)

    return DiscreteModel(
        A=exponential[:n_states, :n_states],
        B=exponential[:n_states, n_states:],
        C=continuous.C,
        D=continuous.D,
        sample_time=sample_time,
    )


def discretization_error(gamma: float = DEFAULT_GAMMA,
                         sample_time: float = DEFAULT_SAMPLE_TIME,
                         relative: bool = False) -> float:
    """
    Largest difference between truncated and exact A_d / B_d

    Args:
        gamma: Damping coefficient
        sample_time: Sample interval T
        relative: Divide by the largest element of the exact A_d / B_d

    Returns:
        Absolute (or relative) element error
    """
    continuous = ContinuousModel.from_damping(gamma)
    approx = discretize(continuous, sample_time)
    exact = discretize_exact(continuous, sample_time)
    error = float(max(np.max(np.abs(approx.A - exact.A)),
                      np.max(np.abs(approx.B - exact.B))))
    if relative:
        error /= float(max(np.max(np.abs(exact.A)), np.max(np.abs(exact.B))))
    return error


@lru_cache(maxsize=None)
def default_model() -> DiscreteModel:
    """Process-wide discrete model, computed on first use"""
    return DiscreteModel.from_continuous(DEFAULT_GAMMA, DEFAULT_SAMPLE_TIME)


@lru_cache(maxsize=None)
def default_noise() -> NoiseModel:
    """Process-wide noise covariances, computed on first use"""
    return NoiseModel.from_variances()
