"""Test module for configuration loading and validation"""

import json
import logging

import pytest
import yaml

from object_tracker import TrackerConfig
from object_tracker.exceptions import ConfigurationError
from object_tracker.filters.model import default_model, default_noise
from object_tracker.utils import ConfigLoader, ConfigValidator


class TestTrackerConfig:
    """Test TrackerConfig"""

    def test_defaults(self):
        """Test default parameter values"""
        config = TrackerConfig.create_default()
        assert config.gamma == 0.01
        assert config.sample_time == 0.1
        assert config.process_noise_position == 1.0
        assert config.process_noise_input == 0.1
        assert config.measurement_noise == 1.0
        assert config.innovation_threshold == 1e-5

    def test_default_reuses_shared_model(self):
        """Test that the default configuration returns the shared constants"""
        config = TrackerConfig()
        assert config.is_default()
        assert config.build_model() is default_model()
        assert config.build_noise() is default_noise()

    def test_custom_builds_new_model(self):
        """Test that changed parameters build their own model"""
        config = TrackerConfig(sample_time=0.05, process_noise_position=2.0)
        assert not config.is_default()
        assert config.build_model() is not default_model()
        assert config.build_model().sample_time == 0.05
        assert config.build_noise().Q[0, 0] == 2.0

    def test_threshold_does_not_affect_model(self):
        """Test that only model and noise fields decide sharing"""
        config = TrackerConfig(innovation_threshold=1e-3)
        assert config.build_model() is default_model()

    def test_to_dict(self):
        """Test dictionary conversion"""
        data = TrackerConfig().to_dict()
        assert data["gamma"] == 0.01
        assert set(data) == {
            "gamma", "sample_time", "process_noise_position",
            "process_noise_input", "measurement_noise", "innovation_threshold",
        }


class TestConfigValidator:
    """Test ConfigValidator"""

    def test_valid_default(self):
        """Test that defaults validate"""
        assert ConfigValidator.validate_tracker_config(TrackerConfig()) == []

    def test_invalid_values(self):
        """Test each invalid parameter is reported"""
        config = TrackerConfig(
            gamma=-1.0,
            sample_time=0.0,
            measurement_noise=-1.0,
            innovation_threshold=0.0,
        )
        errors = ConfigValidator.validate_tracker_config(config)
        assert any("sample_time" in e for e in errors)
        assert any("gamma" in e for e in errors)
        assert any("measurement_noise" in e for e in errors)
        assert any("innovation_threshold" in e for e in errors)

    def test_inaccurate_discretization_warns(self, caplog):
        """Test that a large gamma * T is logged but still valid"""
        config = TrackerConfig(gamma=10.0, sample_time=0.5)

        with caplog.at_level(logging.WARNING):
            errors = ConfigValidator.validate_tracker_config(config)

        assert errors == []
        assert "discretization error" in caplog.text

    def test_long_sample_time_with_small_gamma(self, caplog):
        """Test that gamma * T = 0.01 validates without a warning"""
        config = TrackerConfig(sample_time=1.0)

        with caplog.at_level(logging.WARNING):
            errors = ConfigValidator.validate_tracker_config(config)

        assert errors == []
        assert "discretization error" not in caplog.text

    def test_sanitize_config(self):
        """Test unknown keys are dropped and missing keys filled"""
        sanitized = ConfigValidator.sanitize_config(
            {"gamma": 0.02, "unknown": 1}, TrackerConfig
        )
        assert "unknown" not in sanitized
        assert sanitized["gamma"] == 0.02
        assert sanitized["sample_time"] == 0.1

    def test_merge_configs(self):
        """Test that override values replace base values"""
        merged = ConfigValidator.merge_configs(
            {"gamma": 0.02, "sample_time": 0.2},
            {"sample_time": 0.05, "measurement_noise": 2.0},
        )
        assert merged == {"gamma": 0.02, "sample_time": 0.05, "measurement_noise": 2.0}


class TestConfigLoader:
    """Test ConfigLoader"""

    def test_load_yaml(self, tmp_path):
        """Test YAML configuration"""
        path = tmp_path / "tracker.yaml"
        path.write_text(yaml.safe_dump({"gamma": 0.02, "measurement_noise": 2.0}))

        config = ConfigLoader.create_tracker_config(str(path))
        assert config.gamma == 0.02
        assert config.measurement_noise == 2.0
        assert config.sample_time == 0.1

    def test_load_json(self, tmp_path):
        """Test JSON configuration"""
        path = tmp_path / "tracker.json"
        path.write_text(json.dumps({"sample_time": 0.05}))

        config = ConfigLoader.create_tracker_config(str(path))
        assert config.sample_time == 0.05

    def test_empty_yaml(self, tmp_path):
        """Test that an empty file gives the defaults"""
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert ConfigLoader.create_tracker_config(str(path)).is_default()

    def test_overrides(self, tmp_path):
        """Test overrides on top of a file"""
        path = tmp_path / "tracker.yaml"
        path.write_text(yaml.safe_dump({"gamma": 0.02}))

        config = ConfigLoader.create_tracker_config(str(path), {"gamma": 0.03})
        assert config.gamma == 0.03

    def test_no_source(self):
        """Test defaults without a file"""
        assert ConfigLoader.create_tracker_config().is_default()

    def test_missing_file(self):
        """Test missing configuration file"""
        with pytest.raises(FileNotFoundError):
            ConfigLoader.load_from_file("does/not/exist.yaml")

    def test_unsupported_format(self, tmp_path):
        """Test unsupported file suffix"""
        path = tmp_path / "tracker.ini"
        path.write_text("gamma=0.1")
        with pytest.raises(ConfigurationError):
            ConfigLoader.load_from_file(str(path))

    def test_malformed_yaml(self, tmp_path):
        """Test a YAML file that does not parse"""
        path = tmp_path / "tracker.yaml"
        path.write_text("gamma: [0.1, 0.2\n")
        with pytest.raises(ConfigurationError, match="Malformed YAML"):
            ConfigLoader.load_from_file(str(path))

    def test_malformed_json(self, tmp_path):
        """Test a JSON file that does not parse"""
        path = tmp_path / "tracker.json"
        path.write_text("{\"gamma\": 0.1,")
        with pytest.raises(ConfigurationError, match="Malformed JSON"):
            ConfigLoader.load_from_file(str(path))

    def test_non_mapping(self, tmp_path):
        """Test a file whose top level is not a mapping"""
        path = tmp_path / "tracker.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.load_from_file(str(path))

    def test_validation_failure(self):
        """Test that invalid values raise ConfigurationError"""
        with pytest.raises(ConfigurationError):
            ConfigLoader.create_tracker_config(overrides={"sample_time": -0.1})

    def test_non_numeric_value(self):
        """Test that a non-numeric value raises ConfigurationError"""
        with pytest.raises(ConfigurationError):
            ConfigLoader.create_tracker_config(overrides={"gamma": "fast"})
