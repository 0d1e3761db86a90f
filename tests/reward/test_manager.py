"""Tests for reward manager implementation."""
from unittest.mock import Mock

import pytest

from microgridsim.errors import ConfigurationError
from microgridsim.reward.contexts import RewardContext
from microgridsim.reward.layers.base import RewardLayer
from microgridsim.reward.manager import RewardManager
from microgridsim.reward.metrics import RewardBreakdown


class FixedRewardLayer(RewardLayer):
    def __init__(self, component, reward_value=1.0, **kwargs):
        super().__init__(**kwargs)
        self.component = component
        self.reward_value = reward_value

    def calculate_reward(self, context: RewardContext) -> float:
        return self.reward_value


def test_reward_manager_initialization():
    # Arrange & Act
    manager = RewardManager("TestManager")

    # Assert
    assert manager.name == "TestManager"
    assert manager.layers == {}


def test_layer_is_keyed_by_its_component():
    # Arrange
    manager = RewardManager()
    layer = FixedRewardLayer("economic_cost", reward_value=-2.0)

    # Act
    manager.add_layer(layer)

    # Assert
    assert manager.layers == {"economic_cost": layer}


def test_adding_same_component_twice_replaces_layer():
    # Arrange
    manager = RewardManager()
    first = FixedRewardLayer("stability_bonus", reward_value=1.0)
    second = FixedRewardLayer("stability_bonus", reward_value=2.0)

    # Act
    manager.add_layer(first)
    manager.add_layer(second)

    # Assert
    assert len(manager.layers) == 1
    assert manager.layers["stability_bonus"] is second


def test_unknown_component_raises_configuration_error():
    # Arrange
    manager = RewardManager()

    # Act & Assert
    with pytest.raises(ConfigurationError, match="comfort_cost"):
        manager.add_layer(FixedRewardLayer("comfort_cost"))


def test_calculate_reward_returns_total_and_breakdown():
    # Arrange
    manager = RewardManager()
    manager.add_layer(FixedRewardLayer("economic_cost", reward_value=-3.0, weight=2.0))
    manager.add_layer(FixedRewardLayer("soc_management_bonus", reward_value=5.0))
    context = Mock(spec=RewardContext)
    context.time_step = 1

    # Act
    total, breakdown = manager.calculate_reward(context)

    # Assert
    assert total == -1.0
    assert isinstance(breakdown, RewardBreakdown)
    assert breakdown.economic_cost == 6.0
    assert breakdown.soc_management_bonus == 5.0
    assert breakdown.total == total


def test_disabled_layer_contributes_zero():
    # Arrange
    manager = RewardManager()
    manager.add_layer(FixedRewardLayer("stability_bonus", reward_value=4.0, enabled=False))
    manager.add_layer(FixedRewardLayer("self_sufficiency_bonus", reward_value=1.0))
    context = Mock(spec=RewardContext)
    context.time_step = 1

    # Act
    total, breakdown = manager.calculate_reward(context)

    # Assert
    assert total == 1.0
    assert breakdown.stability_bonus == 0.0


def test_empty_manager_returns_zero():
    # Arrange
    manager = RewardManager()

    # Act
    total, breakdown = manager.calculate_reward(Mock(spec=RewardContext))

    # Assert
    assert total == 0.0
    assert breakdown == RewardBreakdown()
