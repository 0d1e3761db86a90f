"""Tests for the reward layer base class."""
from unittest.mock import Mock

from microgridsim.reward.contexts import RewardContext
from microgridsim.reward.layers.base import RewardLayer


class ConcreteRewardLayer(RewardLayer):
    component = "stability_bonus"

    def calculate_reward(self, context: RewardContext) -> float:
        return 2.0


def test_layer_defaults():
    # Arrange & Act
    layer = ConcreteRewardLayer()

    # Assert
    assert layer.weight == 1.0
    assert layer.enabled is True
    assert layer.name == "ConcreteRewardLayer"
    assert layer.logger.name.endswith("ConcreteRewardLayer")


def test_weighted_reward_applies_weight():
    # Arrange
    layer = ConcreteRewardLayer(weight=0.5)
    context = Mock(spec=RewardContext)
    context.time_step = 3

    # Act
    reward = layer.get_weighted_reward(context)

    # Assert
    assert reward == 1.0


def test_disabled_layer_skips_calculation():
    # Arrange
    layer = ConcreteRewardLayer(weight=3.0, enabled=False)
    layer.calculate_reward = Mock(return_value=2.0)

    # Act
    reward = layer.get_weighted_reward(Mock(spec=RewardContext))

    # Assert
    assert reward == 0.0
    layer.calculate_reward.assert_not_called()
