from typing import Dict, Tuple

from microgridsim.errors import ConfigurationError
from microgridsim.reward.contexts import RewardContext
from microgridsim.reward.layers import RewardLayer
from microgridsim.reward.metrics import BONUS_COMPONENTS, COST_COMPONENTS, RewardBreakdown


class RewardManager:
    """Holds at most one layer per breakdown component and sums their weighted rewards."""

    def __init__(self, name: str = "RewardManager"):
        self.name = name
        self.layers: Dict[str, RewardLayer] = {}

    def add_layer(self, layer: RewardLayer) -> None:
        """Register a layer under its component, replacing any layer already there."""
        if layer.component not in COST_COMPONENTS + BONUS_COMPONENTS:
            raise ConfigurationError(
                f"Layer {layer.name} fills unknown reward component '{layer.component}'."
            )
        self.layers[layer.component] = layer

    def calculate_reward(self, context: RewardContext) -> Tuple[float, RewardBreakdown]:
        """Return the scalar step reward and its per-component breakdown."""
        layer_rewards = {
            component: layer.get_weighted_reward(context)
            for component, layer in self.layers.items()
        }
        return sum(layer_rewards.values(), 0.0), RewardBreakdown.from_layer_rewards(layer_rewards)
