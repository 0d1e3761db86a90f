from dataclasses import asdict, dataclass
from typing import Dict, Mapping

COST_COMPONENTS = ("economic_cost", "degradation_cost", "grid_connection_cost")
BONUS_COMPONENTS = ("soc_management_bonus", "stability_bonus", "self_sufficiency_bonus")


@dataclass(frozen=True)
class RewardBreakdown:
    """Weighted reward components of one step. Costs are stored as positive magnitudes."""

    economic_cost: float = 0.0
    degradation_cost: float = 0.0
    grid_connection_cost: float = 0.0
    soc_management_bonus: float = 0.0
    stability_bonus: float = 0.0
    self_sufficiency_bonus: float = 0.0

    @classmethod
    def from_layer_rewards(cls, layer_rewards: Mapping[str, float]) -> "RewardBreakdown":
        """Build from signed per-layer rewards keyed by component name."""
        values = {name: -layer_rewards.get(name, 0.0) for name in COST_COMPONENTS}
        values.update({name: layer_rewards.get(name, 0.0) for name in BONUS_COMPONENTS})
        return cls(**values)

    @property
    def total_cost(self) -> float:
        return self.economic_cost + self.degradation_cost + self.grid_connection_cost

    @property
    def total_bonus(self) -> float:
        return self.soc_management_bonus + self.stability_bonus + self.self_sufficiency_bonus

    @property
    def total(self) -> float:
        return self.total_bonus - self.total_cost

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)
