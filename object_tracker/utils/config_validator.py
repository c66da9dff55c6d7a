"""Configuration validation utilities"""

import json
import logging
from dataclasses import MISSING, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..config import TrackerConfig
from ..exceptions import ConfigurationError
from ..filters.model import discretization_error

# Relative difference between the truncated and the exact discrete model
# above which a warning is logged
MAX_DISCRETIZATION_ERROR = 1e-3

logger = logging.getLogger(__name__)


class ConfigValidator:
    """Validate and sanitize configuration parameters"""

    @staticmethod
    def validate_tracker_config(config: TrackerConfig) -> List[str]:
        """
        Validate tracker configuration

        Args:
            config: TrackerConfig instance

        Returns:
            List of validation errors
        """
        errors = []

        # Validate model parameters
        if config.sample_time <= 0:
            errors.append(f"sample_time must be positive, got {config.sample_time}")

        if config.gamma < 0:
            errors.append(f"gamma must be non-negative, got {config.gamma}")

        # Validate noise variances
        for name in ("process_noise_position", "process_noise_input", "measurement_noise"):
            value = getattr(config, name)
            if value < 0:
                errors.append(f"{name} must be non-negative, got {value}")

        if config.innovation_threshold <= 0:
            errors.append(
                f"innovation_threshold must be positive, got {config.innovation_threshold}"
            )

        # The truncated series is only trusted while gamma * T stays small
        if config.sample_time > 0 and config.gamma >= 0:
            error = discretization_error(config.gamma, config.sample_time, relative=True)
            if error > MAX_DISCRETIZATION_ERROR:
                logger.warning(
                    f"gamma={config.gamma} and sample_time={config.sample_time} give a "
                    f"relative discretization error of {error:.2e} "
                    f"(limit {MAX_DISCRETIZATION_ERROR:.0e})"
                )

        return errors

    @staticmethod
    def sanitize_config(config_dict: Dict[str, Any],
                        config_class: type) -> Dict[str, Any]:
        """
        Sanitize configuration dictionary

        Args:
            config_dict: Raw configuration dictionary
            config_class: Target configuration class

        Returns:
            Sanitized configuration dictionary
        """
        valid_fields = {f.name for f in fields(config_class)}

        sanitized = {
            k: v for k, v in config_dict.items()
            if k in valid_fields
        }

        for field in fields(config_class):
            if field.name not in sanitized and field.default is not MISSING:
                sanitized[field.name] = field.default

        return sanitized

    @staticmethod
    def merge_configs(base_config: Dict[str, Any],
                      override_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge two configuration dictionaries

        Args:
            base_config: Base configuration
            override_config: Override configuration

        Returns:
            Merged configuration
        """
        return {**base_config, **override_config}


class ConfigLoader:
    """Load and validate configuration from various sources"""

    @staticmethod
    def load_from_file(filepath: str) -> Dict[str, Any]:
        """
        Load configuration from file

        Args:
            filepath: Path to configuration file (.yaml, .yml or .json)

        Returns:
            Configuration dictionary
        """
        path = Path(filepath)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        if path.suffix in ['.yaml', '.yml']:
            with open(filepath, 'r') as f:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ConfigurationError(f"Malformed YAML in {filepath}: {e}") from e
        elif path.suffix == '.json':
            with open(filepath, 'r') as f:
                try:
                    data = json.load(f)
                except json.JSONDecodeError as e:
                    raise ConfigurationError(f"Malformed JSON in {filepath}: {e}") from e
        else:
            raise ConfigurationError(f"Unsupported configuration format: {path.suffix}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must hold a mapping: {filepath}")
        return data

    @staticmethod
    def create_tracker_config(config_source: Optional[str] = None,
                              overrides: Optional[Dict[str, Any]] = None) -> TrackerConfig:
        """
        Create validated TrackerConfig

        Args:
            config_source: Path to configuration file
            overrides: Dictionary of override values

        Returns:
            Validated TrackerConfig instance
        """
        if config_source:
            config_dict = ConfigLoader.load_from_file(config_source)
        else:
            config_dict = {}

        if overrides:
            config_dict = ConfigValidator.merge_configs(config_dict, overrides)

        config_dict = ConfigValidator.sanitize_config(config_dict, TrackerConfig)

        try:
            config = TrackerConfig(**{k: float(v) for k, v in config_dict.items()})
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration value: {e}") from e

        errors = ConfigValidator.validate_tracker_config(config)
        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")

        return config
