from typing import Tuple

from microgridsim.reward.contexts import RewardContext
from microgridsim.reward.layers.base import RewardLayer


class SocManagementLayer(RewardLayer):
    """
    Constant bonus while SOC stays strictly inside the comfort band, and a
    penalty proportional to the distance from ``target_soc`` once SOC leaves it.
    """

    component = "soc_management_bonus"

    def __init__(
        self,
        weight: float = 1.0,
        comfort_band: Tuple[float, float] = (0.2, 0.8),
        bonus: float = 5.0,
        out_of_band_penalty: float = 0.0,
        target_soc: float = 0.5,
        enabled: bool = True,
    ):
        super().__init__(weight, enabled)
        self.comfort_band = comfort_band
        self.bonus = bonus
        self.out_of_band_penalty = out_of_band_penalty
        self.target_soc = target_soc

    def calculate_reward(self, context: RewardContext) -> float:
        low, high = self.comfort_band
        if low < context.soc_after < high:
            return self.bonus
        if context.soc_after < low or context.soc_after > high:
            return -self.out_of_band_penalty * abs(context.soc_after - self.target_soc)
        return 0.0


class StabilityLayer(RewardLayer):
    """
    Long-horizon SOC stability, only active after the first full day.

    ``quadratic`` penalizes squared deviation from the target SOC;
    ``healthy_band`` pays a bonus while SOC sits in a narrow band and SOH is high.
    """

    component = "stability_bonus"

    def __init__(
        self,
        weight: float = 1.0,
        mode: str = "quadratic",
        target_soc: float = 0.5,
        penalty_scale: float = 10.0,
        healthy_band: Tuple[float, float] = (0.3, 0.7),
        min_soh: float = 0.9,
        band_bonus: float = 5.0,
        enabled: bool = True,
    ):
        super().__init__(weight, enabled)
        self.mode = mode
        self.target_soc = target_soc
        self.penalty_scale = penalty_scale
        self.healthy_band = healthy_band
        self.min_soh = min_soh
        self.band_bonus = band_bonus

    def calculate_reward(self, context: RewardContext) -> float:
        if not context.past_first_day:
            return 0.0
        if self.mode == "healthy_band":
            low, high = self.healthy_band
            if low < context.soc_after < high and context.soh_after > self.min_soh:
                return self.band_bonus
            return 0.0
        return -self.penalty_scale * (context.soc_after - self.target_soc) ** 2


class SelfSufficiencyLayer(RewardLayer):
    """Bonus when grid exchange is a small fraction of the load."""

    component = "self_sufficiency_bonus"

    def __init__(
        self,
        weight: float = 1.0,
        fraction: float = 0.1,
        bonus: float = 10.0,
        enabled: bool = True,
    ):
        super().__init__(weight, enabled)
        self.fraction = fraction
        self.bonus = bonus

    def calculate_reward(self, context: RewardContext) -> float:
        if abs(context.grid_power_kw) < self.fraction * context.load_kw:
            return self.bonus
        return 0.0
