from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import numpy as np

from microgridsim.core.battery.config import CycleCalendarAgingConfig, ThroughputAgingConfig
from microgridsim.core.battery.registry import register_model
from microgridsim.core.data.calendar import DAYS_PER_YEAR


@dataclass(frozen=True, slots=True)
class DegradationEvent:
    """Outcome of one aging evaluation. Ephemeral, consumed to update SOH."""

    cycle_depth: float
    temperature_stress: float
    ambient_temperature_c: Optional[float]
    cycle_aging: float
    calendar_aging: float

    @property
    def soh_decrement(self) -> float:
        return self.cycle_aging + self.calendar_aging


def temperature_stress(ambient_c: float, threshold_c: float = 30.0, coefficient: float = 0.05) -> float:
    if ambient_c <= threshold_c:
        return 1.0
    return 1.0 + coefficient * (ambient_c - threshold_c)


class AgingModelBase(ABC):
    """SOH decrement for one step. Always finite and non-negative."""

    materiality_threshold: float

    @abstractmethod
    def evaluate(
        self,
        cycle_depth: float,
        elapsed_hours: float,
        day_of_year: int,
        hour_of_day: int = 12,
        power_fraction: float = 0.0,
    ) -> DegradationEvent:
        pass

    def soh_decrement(
        self,
        cycle_depth: float,
        elapsed_hours: float,
        day_of_year: int,
        hour_of_day: int = 12,
        power_fraction: float = 0.0,
    ) -> float:
        return self.evaluate(
            cycle_depth, elapsed_hours, day_of_year, hour_of_day, power_fraction
        ).soh_decrement

    def is_material(self, cycle_depth: float) -> bool:
        """Whether a SOC swing is large enough to count toward the cycle accumulator."""
        return abs(cycle_depth) > self.materiality_threshold


@register_model(CycleCalendarAgingConfig)
class CycleCalendarAgingModel(AgingModelBase):
    """
    Linear cycle and calendar aging.

    cycle_aging = cycle_rate * depth * stress, calendar_aging = calendar_rate * hours.
    The stress factor grows linearly once ambient temperature exceeds the
    stress threshold. Both terms are memoryless, so repeated identical calls
    accumulate exactly linearly.
    """

    def __init__(self, config: CycleCalendarAgingConfig):
        self._config = config
        self.materiality_threshold = config.materiality_threshold

    def ambient_temperature_c(self, day_of_year: int, hour_of_day: int = 12) -> float:
        cfg = self._config
        seasonal = cfg.seasonal_amplitude_c * np.sin(2 * np.pi * (day_of_year - 80) / DAYS_PER_YEAR)
        diurnal = cfg.diurnal_amplitude_c * np.sin(2 * np.pi * (hour_of_day - 12) / 24)
        return float(cfg.base_temperature_c + seasonal + diurnal)

    def evaluate(
        self,
        cycle_depth: float,
        elapsed_hours: float,
        day_of_year: int,
        hour_of_day: int = 12,
        power_fraction: float = 0.0,
    ) -> DegradationEvent:
        cfg = self._config
        depth = abs(cycle_depth)
        ambient = self.ambient_temperature_c(day_of_year, hour_of_day)
        stress = temperature_stress(ambient, cfg.stress_threshold_c, cfg.stress_coefficient)
        return DegradationEvent(
            cycle_depth=depth,
            temperature_stress=stress,
            ambient_temperature_c=ambient,
            cycle_aging=cfg.cycle_rate_constant * depth * stress,
            calendar_aging=cfg.calendar_rate_constant * max(0.0, elapsed_hours),
        )


@register_model(ThroughputAgingConfig)
class ThroughputAgingModel(AgingModelBase):
    """SOH loss proportional to |P| / P_rated per hour; no temperature or calendar term."""

    def __init__(self, config: ThroughputAgingConfig):
        self._config = config
        self.materiality_threshold = config.materiality_threshold

    def evaluate(
        self,
        cycle_depth: float,
        elapsed_hours: float,
        day_of_year: int,
        hour_of_day: int = 12,
        power_fraction: float = 0.0,
    ) -> DegradationEvent:
        aging = self._config.rate_constant * abs(power_fraction) * max(0.0, elapsed_hours)
        return DegradationEvent(
            cycle_depth=abs(cycle_depth),
            temperature_stress=1.0,
            ambient_temperature_c=None,
            cycle_aging=aging,
            calendar_aging=0.0,
        )
