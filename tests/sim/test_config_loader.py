import textwrap

import pytest

from microgridsim.config import config_from_dict, load_config
from microgridsim.core.battery.config import CycleCalendarAgingConfig, ThroughputAgingConfig
from microgridsim.errors import ConfigurationError


def test_empty_mapping_gives_defaults():
    # Act
    config = config_from_dict({})

    # Assert
    assert config.horizon_days == 1
    assert isinstance(config.aging, CycleCalendarAgingConfig)


def test_yaml_text_with_lists_and_ints_is_cast():
    # Arrange
    text = textwrap.dedent(
        """
        horizon_days: 2
        time_step_hours: 1
        initial_soc_range: [0.4, 0.6]
        battery:
          capacity_kwh: 200
          power_rating_kw: 80
        reward:
          soc_comfort_band: [0.25, 0.75]
        signals:
          horizon_hours: 48
          weather_pattern: sunny
        """
    )

    # Act
    config = load_config(text)

    # Assert
    assert config.horizon_days == 2
    assert config.initial_soc_range == (0.4, 0.6)
    assert config.battery.capacity_kwh == 200.0
    assert isinstance(config.battery.capacity_kwh, float)
    assert config.reward.soc_comfort_band == (0.25, 0.75)
    assert config.signals.weather_pattern == "sunny"


def test_aging_type_selects_model_config():
    # Act
    config = config_from_dict({"aging": {"type": "throughput", "rate_constant": 0.001}})

    # Assert
    assert isinstance(config.aging, ThroughputAgingConfig)
    assert config.aging.rate_constant == 0.001


def test_profile_key_is_overridden_by_other_keys():
    # Act
    config = config_from_dict({"profile": "research", "horizon_days": 30, "battery": {"capacity_kwh": 150}})

    # Assert
    assert config.record_history is True
    assert config.battery.capacity_kwh == 150.0
    assert config.battery.efficiency == 0.95
    assert config.reward.stability_mode == "healthy_band"


def test_profile_aging_type_can_be_replaced():
    # Act
    config = config_from_dict({"profile": "default", "aging": {"type": "throughput"}})

    # Assert
    assert isinstance(config.aging, ThroughputAgingConfig)


def test_load_config_reads_yaml_file(tmp_path):
    # Arrange
    path = tmp_path / "sim.yaml"
    path.write_text("horizon_days: 3\nsignals:\n  horizon_hours: 72\n")

    # Act
    config = load_config(path)

    # Assert
    assert config.horizon_days == 3
    assert config.signals.horizon_hours == 72


def test_non_mapping_yaml_raises_configuration_error():
    # Act & Assert
    with pytest.raises(ConfigurationError, match="mapping"):
        load_config("- 1\n- 2\n")


def test_invalid_value_surfaces_configuration_error():
    # Act & Assert
    with pytest.raises(ConfigurationError, match="horizon_days"):
        config_from_dict({"horizon_days": 0})
