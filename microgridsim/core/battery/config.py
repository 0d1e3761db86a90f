from dataclasses import dataclass
from typing import Literal, Union

from microgridsim.errors import ConfigurationError


@dataclass(frozen=True, slots=True, kw_only=True)
class BatteryConfig:
    """Battery sizing and operating window."""

    capacity_kwh: float = 100.0
    power_rating_kw: float = 50.0
    efficiency: float = 0.95  # applied once per direction
    soc_min: float = 0.1
    soc_max: float = 0.9
    soh_floor: float = 0.5
    soh_failure_threshold: float = 0.6

    def __post_init__(self):
        if self.capacity_kwh <= 0 or self.power_rating_kw <= 0:
            raise ConfigurationError("Capacity and power rating must be positive.")
        if not (0 < self.efficiency <= 1):
            raise ConfigurationError("Efficiency must be between 0 and 1.")
        if not (0 <= self.soc_min < self.soc_max <= 1):
            raise ConfigurationError("SoC bounds must satisfy 0 <= soc_min < soc_max <= 1.")
        if not (0 <= self.soh_floor < 1):
            raise ConfigurationError("soh_floor must be in [0, 1).")
        if not (0 <= self.soh_failure_threshold <= 1):
            raise ConfigurationError("soh_failure_threshold must be between 0 and 1.")


@dataclass(frozen=True, slots=True, kw_only=True)
class CycleCalendarAgingConfig:
    """Cycle plus calendar aging with temperature stress on the cycle term."""

    cycle_rate_constant: float = 2e-6  # SOH per unit cycle depth
    calendar_rate_constant: float = 1e-7  # SOH per hour
    materiality_threshold: float = 0.01

    # ambient model: base + seasonal and diurnal sinusoids
    base_temperature_c: float = 25.0
    seasonal_amplitude_c: float = 0.0
    diurnal_amplitude_c: float = 10.0
    stress_threshold_c: float = 30.0
    stress_coefficient: float = 0.05  # per deg C above the threshold

    type: Literal["cycle_calendar"] = "cycle_calendar"

    def __post_init__(self):
        if self.cycle_rate_constant < 0 or self.calendar_rate_constant < 0:
            raise ConfigurationError("Aging rate constants must be non-negative.")
        if self.materiality_threshold < 0:
            raise ConfigurationError("materiality_threshold must be non-negative.")
        if self.stress_coefficient < 0:
            raise ConfigurationError("stress_coefficient must be non-negative.")


@dataclass(frozen=True, slots=True, kw_only=True)
class ThroughputAgingConfig:
    """SOH loss proportional to the fraction of rated power used."""

    rate_constant: float = 1e-4  # SOH per hour at rated power
    materiality_threshold: float = 0.01

    type: Literal["throughput"] = "throughput"

    def __post_init__(self):
        if self.rate_constant < 0:
            raise ConfigurationError("Degradation rate must be non-negative.")
        if self.materiality_threshold < 0:
            raise ConfigurationError("materiality_threshold must be non-negative.")


AgingModelConfig = Union[CycleCalendarAgingConfig, ThroughputAgingConfig]
