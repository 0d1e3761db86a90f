from microgridsim.reward.layers.base import RewardLayer
from microgridsim.reward.layers.costs import (
    DegradationCostLayer,
    EconomicCostLayer,
    GridConnectionCostLayer,
)
from microgridsim.reward.layers.bonuses import (
    SelfSufficiencyLayer,
    SocManagementLayer,
    StabilityLayer,
)

__all__ = [
    "RewardLayer",
    "EconomicCostLayer",
    "DegradationCostLayer",
    "GridConnectionCostLayer",
    "SocManagementLayer",
    "StabilityLayer",
    "SelfSufficiencyLayer",
]
