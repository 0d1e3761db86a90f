"""Tests for the microgrid reward layers."""

import pytest

from microgridsim.reward.contexts import RewardContext
from microgridsim.reward.layers import (
    DegradationCostLayer,
    EconomicCostLayer,
    GridConnectionCostLayer,
    SelfSufficiencyLayer,
    SocManagementLayer,
    StabilityLayer,
)


def make_context(**overrides) -> RewardContext:
    params = dict(
        grid_power_kw=10.0,
        price=1.5,
        soh_decrement=1e-5,
        soc_after=0.5,
        soh_after=0.99,
        load_kw=40.0,
        dt_hours=1.0,
        time_step=1,
        steps_per_day=24,
        battery_capacity_kwh=100.0,
    )
    params.update(overrides)
    return RewardContext(**params)


def test_economic_cost_on_import():
    # Arrange
    layer = EconomicCostLayer()

    # Act
    reward = layer.calculate_reward(make_context(grid_power_kw=10.0, price=1.5))

    # Assert
    assert reward == pytest.approx(-15.0)


def test_economic_cost_charges_export_with_its_own_multiplier():
    # Arrange
    layer = EconomicCostLayer(import_price_multiplier=1.0, export_price_multiplier=0.8)

    # Act
    reward = layer.calculate_reward(make_context(grid_power_kw=-10.0, price=1.5))

    # Assert
    assert reward == pytest.approx(-12.0)


def test_economic_cost_scales_with_step_length():
    # Arrange
    layer = EconomicCostLayer()

    # Act
    reward = layer.calculate_reward(make_context(grid_power_kw=10.0, price=1.0, dt_hours=0.5))

    # Assert
    assert reward == pytest.approx(-5.0)


def test_degradation_cost_uses_capacity_lost():
    # Arrange
    layer = DegradationCostLayer(cost_per_unit=0.25)

    # Act
    reward = layer.calculate_reward(make_context(soh_decrement=1e-3, battery_capacity_kwh=100.0))

    # Assert
    assert reward == pytest.approx(-0.025)


def test_grid_connection_cost():
    # Arrange
    layer = GridConnectionCostLayer(rate=0.05)

    # Act
    reward = layer.calculate_reward(make_context(grid_power_kw=-20.0))

    # Assert
    assert reward == pytest.approx(-1.0)


@pytest.mark.parametrize(
    "soc,expected", [(0.5, 5.0), (0.2, 0.0), (0.8, 0.0), (0.21, 5.0), (0.9, 0.0)]
)
def test_soc_management_band_is_strict(soc, expected):
    # Arrange
    layer = SocManagementLayer(comfort_band=(0.2, 0.8), bonus=5.0)

    # Act
    reward = layer.calculate_reward(make_context(soc_after=soc))

    # Assert
    assert reward == expected


def test_stability_is_inactive_during_first_day():
    # Arrange
    layer = StabilityLayer(mode="quadratic")

    # Act
    reward = layer.calculate_reward(make_context(soc_after=0.9, time_step=24))

    # Assert
    assert reward == 0.0


def test_quadratic_stability_penalizes_deviation_after_first_day():
    # Arrange
    layer = StabilityLayer(mode="quadratic", target_soc=0.5, penalty_scale=10.0)

    # Act
    reward = layer.calculate_reward(make_context(soc_after=0.8, time_step=25))

    # Assert
    assert reward == pytest.approx(-0.9)


@pytest.mark.parametrize(
    "soc,soh,expected", [(0.5, 0.95, 5.0), (0.5, 0.85, 0.0), (0.75, 0.95, 0.0)]
)
def test_healthy_band_stability(soc, soh, expected):
    # Arrange
    layer = StabilityLayer(mode="healthy_band", healthy_band=(0.3, 0.7), min_soh=0.9, band_bonus=5.0)

    # Act
    reward = layer.calculate_reward(make_context(soc_after=soc, soh_after=soh, time_step=30))

    # Assert
    assert reward == expected


@pytest.mark.parametrize(
    "grid,load,expected", [(0.0, 40.0, 10.0), (3.9, 40.0, 10.0), (-4.0, 40.0, 0.0), (0.0, 0.0, 0.0)]
)
def test_self_sufficiency_bonus(grid, load, expected):
    # Arrange
    layer = SelfSufficiencyLayer(fraction=0.1, bonus=10.0)

    # Act
    reward = layer.calculate_reward(make_context(grid_power_kw=grid, load_kw=load))

    # Assert
    assert reward == expected


@pytest.mark.parametrize(
    "soc,expected", [(0.1, -20.0), (0.9, -20.0), (0.5, 5.0), (0.2, 0.0), (0.8, 0.0)]
)
def test_soc_management_penalizes_leaving_the_band(soc, expected):
    # Arrange
    layer = SocManagementLayer(comfort_band=(0.2, 0.8), bonus=5.0, out_of_band_penalty=50.0, target_soc=0.5)

    # Act
    reward = layer.calculate_reward(make_context(soc_after=soc))

    # Assert
    assert reward == pytest.approx(expected)


def test_soc_management_has_no_penalty_by_default():
    # Arrange
    layer = SocManagementLayer()

    # Act
    reward = layer.calculate_reward(make_context(soc_after=0.1))

    # Assert
    assert reward == 0.0
