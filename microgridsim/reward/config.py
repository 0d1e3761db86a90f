from dataclasses import dataclass
from typing import Literal, Tuple

from microgridsim.errors import ConfigurationError


def _check_band(name: str, band: Tuple[float, float]) -> None:
    low, high = band
    if not (0 <= low < high <= 1):
        raise ConfigurationError(f"{name} must satisfy 0 <= low < high <= 1")


@dataclass(frozen=True, slots=True, kw_only=True)
class RewardConfig:
    """Weights and constants of the microgrid reward layers (0.0 weight = disabled)."""

    # Layer weights
    economic_weight: float = 1.0
    degradation_weight: float = 1.0
    grid_connection_weight: float = 1.0
    soc_management_weight: float = 1.0
    stability_weight: float = 1.0
    self_sufficiency_weight: float = 1.0

    # Economic cost
    import_price_multiplier: float = 1.0
    export_price_multiplier: float = 1.0

    # Degradation cost, per kWh of capacity lost
    degradation_cost_per_unit: float = 0.25

    # Grid connection friction, per kWh exchanged
    connection_cost_rate: float = 0.05

    # SOC management
    soc_comfort_band: Tuple[float, float] = (0.2, 0.8)
    soc_management_bonus: float = 5.0
    soc_out_of_band_penalty: float = 0.0  # per unit of |soc - soc_band_target| outside the band
    soc_band_target: float = 0.5

    # Stability, active after the first full day
    stability_mode: Literal["quadratic", "healthy_band"] = "quadratic"
    stability_target_soc: float = 0.5
    stability_penalty_scale: float = 10.0
    healthy_soc_band: Tuple[float, float] = (0.3, 0.7)
    healthy_min_soh: float = 0.9
    healthy_band_bonus: float = 5.0

    # Self-sufficiency
    self_sufficiency_fraction: float = 0.1
    self_sufficiency_bonus: float = 10.0

    def __post_init__(self) -> None:
        for name in (
            "economic_weight",
            "degradation_weight",
            "grid_connection_weight",
            "soc_management_weight",
            "stability_weight",
            "self_sufficiency_weight",
        ):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be non-negative")

        if self.import_price_multiplier < 0 or self.export_price_multiplier < 0:
            raise ConfigurationError("price multipliers must be non-negative")
        if self.degradation_cost_per_unit < 0:
            raise ConfigurationError("degradation_cost_per_unit must be non-negative")
        if self.soc_out_of_band_penalty < 0:
            raise ConfigurationError("soc_out_of_band_penalty must be non-negative")
        if self.connection_cost_rate < 0:
            raise ConfigurationError("connection_cost_rate must be non-negative")

        _check_band("soc_comfort_band", self.soc_comfort_band)
        _check_band("healthy_soc_band", self.healthy_soc_band)
        if self.stability_mode not in ("quadratic", "healthy_band"):
            raise ConfigurationError(
                f"Unknown stability_mode '{self.stability_mode}'. Expected 'quadratic' or 'healthy_band'."
            )
        if not (0 <= self.soc_band_target <= 1):
            raise ConfigurationError("soc_band_target must be between 0 and 1")
        if not (0 <= self.stability_target_soc <= 1):
            raise ConfigurationError("stability_target_soc must be between 0 and 1")
        if self.self_sufficiency_fraction < 0:
            raise ConfigurationError("self_sufficiency_fraction must be non-negative")
