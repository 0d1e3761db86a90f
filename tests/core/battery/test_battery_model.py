"""Tests for the battery SOC transition."""

import pytest

from microgridsim.core.battery.config import BatteryConfig
from microgridsim.core.battery.model import BatteryModel


def make_battery(**overrides):
    params = dict(capacity_kwh=100.0, power_rating_kw=50.0, efficiency=0.95, soc_min=0.1, soc_max=0.9)
    params.update(overrides)
    return BatteryModel(BatteryConfig(**params))


def test_charge_past_soc_max_clamps_exactly():
    # Arrange
    battery = make_battery()

    # Act
    transition = battery.apply_power(soc=0.85, power_kw=50.0, dt_hours=1.0)

    # Assert
    assert transition.soc_after == 0.9
    assert transition.soc_clipped is True
    assert transition.power_clipped is False
    assert transition.delta_energy_kwh == pytest.approx(47.5)


def test_small_charge_is_not_clamped():
    # Arrange
    battery = make_battery(power_rating_kw=2.0)

    # Act
    transition = battery.apply_power(soc=0.85, power_kw=2.0, dt_hours=1.0)

    # Assert
    assert transition.soc_after == pytest.approx(min(0.9, 0.85 + 2.0 * 0.95 / 100))
    assert transition.soc_clipped is False


def test_discharge_divides_by_efficiency():
    # Arrange
    battery = make_battery()

    # Act
    transition = battery.apply_power(soc=0.5, power_kw=-10.0, dt_hours=1.0)

    # Assert
    assert transition.soc_after == pytest.approx(0.5 - 10.0 / 0.95 / 100)
    assert transition.cycle_depth == pytest.approx(10.0 / 0.95 / 100)


def test_discharge_below_soc_min_clamps():
    # Arrange
    battery = make_battery()

    # Act
    transition = battery.apply_power(soc=0.12, power_kw=-50.0, dt_hours=1.0)

    # Assert
    assert transition.soc_after == 0.1
    assert transition.soc_clipped is True


@pytest.mark.parametrize("command,applied", [(1e6, 50.0), (-1e6, -50.0), (25.0, 25.0)])
def test_command_is_clamped_to_power_rating(command, applied):
    # Arrange
    battery = make_battery()

    # Act
    transition = battery.apply_power(soc=0.5, power_kw=command, dt_hours=1.0)

    # Assert
    assert transition.applied_power_kw == applied
    assert transition.commanded_power_kw == command
    assert transition.power_clipped is (command != applied)


def test_half_hour_step_moves_half_the_energy():
    # Arrange
    battery = make_battery()

    # Act
    transition = battery.apply_power(soc=0.5, power_kw=20.0, dt_hours=0.5)

    # Assert
    assert transition.delta_energy_kwh == pytest.approx(20.0 * 0.5 * 0.95)


def test_zero_power_leaves_soc_unchanged():
    # Arrange
    battery = make_battery()

    # Act
    transition = battery.apply_power(soc=0.4, power_kw=0.0, dt_hours=1.0)

    # Assert
    assert transition.soc_after == 0.4
    assert transition.cycle_depth == 0.0
