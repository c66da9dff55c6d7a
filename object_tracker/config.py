# object_tracker/config.py

"""Configuration for the object tracker"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .filters.model import (
    DEFAULT_GAMMA,
    DEFAULT_MEASUREMENT_NOISE,
    DEFAULT_PROCESS_NOISE,
    DEFAULT_SAMPLE_TIME,
    DiscreteModel,
    NoiseModel,
    default_model,
    default_noise,
)
from .filters.kalman import DEFAULT_INNOVATION_THRESHOLD


@dataclass
class TrackerConfig:
    """Model and noise parameters shared by both axis filters"""

    # === CONTINUOUS MODEL ===
    gamma: float = DEFAULT_GAMMA  # Damping coefficient
    sample_time: float = DEFAULT_SAMPLE_TIME  # Seconds between samples

    # === NOISE ===
    process_noise_position: float = DEFAULT_PROCESS_NOISE[0]  # Q[0, 0]
    process_noise_input: float = DEFAULT_PROCESS_NOISE[1]  # Q[1, 1]
    measurement_noise: float = DEFAULT_MEASUREMENT_NOISE  # R[0, 0]

    # === UPDATE GUARD ===
    innovation_threshold: float = DEFAULT_INNOVATION_THRESHOLD

    @classmethod
    def create_default(cls) -> "TrackerConfig":
        """Configuration matching the process-wide default model"""
        return cls()

    def is_default(self) -> bool:
        """True when the model and noise match the process-wide constants"""
        return (
            self.gamma == DEFAULT_GAMMA
            and self.sample_time == DEFAULT_SAMPLE_TIME
            and self.process_noise_position == DEFAULT_PROCESS_NOISE[0]
            and self.process_noise_input == DEFAULT_PROCESS_NOISE[1]
            and self.measurement_noise == DEFAULT_MEASUREMENT_NOISE
        )

    def build_model(self) -> DiscreteModel:
        """Discrete model for these parameters"""
        if self.is_default():
            return default_model()
        return DiscreteModel.from_continuous(self.gamma, self.sample_time)

    def build_noise(self) -> NoiseModel:
        """Noise covariances for these parameters"""
        if self.is_default():
            return default_noise()
        return NoiseModel.from_variances(
            self.process_noise_position,
            self.process_noise_input,
            self.measurement_noise,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return asdict(self)
