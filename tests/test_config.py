"""
Tests for configuration dataclasses and config file loading.
"""

import json

import pytest

from emergence.core.config import (
    ConfigError,
    PARAMETER_CONTROLS,
    SimulationConfig,
    SimulationParameters,
    load_config,
    split_overrides,
)


class TestParameters:
    """SimulationParameters defaults and conversion."""

    def test_defaults(self):
        params = SimulationParameters()
        assert params.alignmentWeight == 1.0
        assert params.cohesionWeight == 1.0
        assert params.separationWeight == 1.5
        assert params.perceptionRadius == 50
        assert params.maxSpeed == 5
        assert params.maxForce == 0.2
        assert params.populationSize == 100

    def test_round_trip(self):
        params = SimulationParameters(alignmentWeight=2.5, populationSize=7)
        assert SimulationParameters.from_dict(params.to_dict()) == params

    def test_from_dict_ignores_unknown_keys(self):
        params = SimulationParameters.from_dict({"maxSpeed": 8, "bogus": 1})
        assert params.maxSpeed == 8

    def test_negative_weights_accepted(self):
        assert SimulationParameters(separationWeight=-1).separationWeight == -1


class TestConfig:
    """SimulationConfig conversion."""

    def test_round_trip(self):
        config = SimulationConfig(screenWidth=640, autopilot=False, seed=3)
        assert SimulationConfig.from_dict(config.to_dict()) == config

    def test_mutable_defaults_not_shared(self):
        a, b = SimulationConfig(), SimulationConfig()
        a.backgroundColor[0] = 0
        assert b.backgroundColor[0] == 17


class TestControls:
    """Control surface ranges."""

    def test_every_control_maps_to_a_parameter(self):
        params = SimulationParameters()
        for control in PARAMETER_CONTROLS:
            assert hasattr(params, control.key)
            assert control.minimum < control.maximum

    def test_max_force_not_user_tunable(self):
        assert "maxForce" not in {c.key for c in PARAMETER_CONTROLS}

    def test_clamp(self):
        perception = next(c for c in PARAMETER_CONTROLS if c.key == "perceptionRadius")
        assert perception.clamp(400) == 300
        assert perception.clamp(-5) == 0
        assert perception.clamp(120) == 120


class TestLoadConfig:
    """load_config()"""

    def test_split_overrides(self):
        config_data, param_data = split_overrides(
            {"screenWidth": 500, "maxSpeed": 7, "unknown": True}
        )
        assert config_data == {"screenWidth": 500}
        assert param_data == {"maxSpeed": 7}

    def test_loads_both_kinds_of_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"screenWidth": 640, "autopilot": False,
                                    "cohesionWeight": 3.0, "populationSize": 20}))
        config, params = load_config(str(path))
        assert config.screenWidth == 640
        assert config.autopilot is False
        assert params.cohesionWeight == 3.0
        assert params.populationSize == 20
        assert params.maxSpeed == 5.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(str(path))

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)
