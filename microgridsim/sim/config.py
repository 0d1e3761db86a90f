from dataclasses import dataclass, field
from typing import Optional, Tuple

from microgridsim.core.battery.config import (
    AgingModelConfig,
    BatteryConfig,
    CycleCalendarAgingConfig,
)
from microgridsim.core.data.calendar import HOURS_PER_DAY
from microgridsim.core.data.config import ExogenousSignalConfig
from microgridsim.errors import ConfigurationError
from microgridsim.reward.config import RewardConfig


@dataclass(frozen=True, slots=True, kw_only=True)
class SimulationConfig:
    """Everything needed to build and run one MicrogridSimulation."""

    horizon_days: int = 1
    time_step_hours: float = 1.0

    initial_soc_range: Tuple[float, float] = (0.3, 0.8)
    initial_soh_range: Tuple[float, float] = (1.0, 1.0)
    carry_over_soh: bool = False

    start_day_of_year: int = 1
    randomize_day_of_year: bool = False
    seasonal_adjustment: bool = False

    random_seed: Optional[int] = 42
    record_history: bool = False

    battery: BatteryConfig = field(default_factory=BatteryConfig)
    aging: AgingModelConfig = field(default_factory=CycleCalendarAgingConfig)
    reward: RewardConfig = field(default_factory=RewardConfig)
    signals: ExogenousSignalConfig = field(default_factory=ExogenousSignalConfig)

    def __post_init__(self):
        if self.horizon_days <= 0:
            raise ConfigurationError("horizon_days must be positive.")
        if self.time_step_hours <= 0:
            raise ConfigurationError("time_step_hours must be positive.")
        steps = HOURS_PER_DAY / self.time_step_hours
        if abs(steps - round(steps)) > 1e-9:
            raise ConfigurationError("time_step_hours must divide 24 hours evenly.")

        low, high = self.initial_soc_range
        if low > high:
            raise ConfigurationError("initial_soc_range must be ordered (low, high).")
        if low < self.battery.soc_min or high > self.battery.soc_max:
            raise ConfigurationError("initial_soc_range must lie within [soc_min, soc_max].")

        low, high = self.initial_soh_range
        if low > high:
            raise ConfigurationError("initial_soh_range must be ordered (low, high).")
        if low < self.battery.soh_floor or high > 1.0:
            raise ConfigurationError("initial_soh_range must lie within [soh_floor, 1].")

        if not (1 <= self.start_day_of_year <= 365):
            raise ConfigurationError("start_day_of_year must be between 1 and 365.")

    @property
    def steps_per_day(self) -> int:
        return round(HOURS_PER_DAY / self.time_step_hours)

    @property
    def horizon_steps(self) -> int:
        return self.horizon_days * self.steps_per_day

    @property
    def horizon_hours(self) -> int:
        return self.horizon_days * HOURS_PER_DAY
