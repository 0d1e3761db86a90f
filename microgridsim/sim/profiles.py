"""Named simulation profiles.

The short 1-day setup, the continuous 30-day setup and the research setup
with history recording are one state machine with different horizons, aging
constants and reward modes.
"""

import logging
from typing import Callable, Dict

from microgridsim.core.battery.config import (
    BatteryConfig,
    CycleCalendarAgingConfig,
    ThroughputAgingConfig,
)
from microgridsim.core.data.config import ExogenousSignalConfig
from microgridsim.errors import ConfigurationError
from microgridsim.reward.config import RewardConfig
from microgridsim.sim.config import SimulationConfig

logger = logging.getLogger(__name__)


def _signals(days: int, **overrides) -> ExogenousSignalConfig:
    return ExogenousSignalConfig(horizon_hours=days * 24, **overrides)


def quick_1day() -> SimulationConfig:
    return SimulationConfig(
        horizon_days=1,
        time_step_hours=0.5,
        signals=_signals(1),
    )


def basic_1day() -> SimulationConfig:
    """Single day, 500 kW converter, SOH loss proportional to power throughput."""
    return SimulationConfig(
        horizon_days=1,
        battery=BatteryConfig(capacity_kwh=100.0, power_rating_kw=500.0, efficiency=0.95),
        aging=ThroughputAgingConfig(rate_constant=1e-4),
        signals=_signals(1, weather_pattern="sunny", load_pattern="mixed", price_pattern="time_of_use"),
    )


def default_7day() -> SimulationConfig:
    return SimulationConfig(horizon_days=7, signals=_signals(7))


def continuous_30day() -> SimulationConfig:
    """Month-long episodes starting on a random day with seasonal adjustment and cycle-only aging."""
    return SimulationConfig(
        horizon_days=30,
        initial_soh_range=(0.95, 1.0),
        randomize_day_of_year=True,
        seasonal_adjustment=True,
        battery=BatteryConfig(power_rating_kw=500.0, efficiency=0.96),
        aging=CycleCalendarAgingConfig(
            cycle_rate_constant=1e-6,
            calendar_rate_constant=0.0,
            seasonal_amplitude_c=15.0,
            diurnal_amplitude_c=0.0,
        ),
        signals=_signals(30),
    )


def research_30day() -> SimulationConfig:
    """Month-long episodes with cycle and calendar aging and full history recording."""
    return SimulationConfig(
        horizon_days=30,
        initial_soc_range=(0.45, 0.55),
        record_history=True,
        battery=BatteryConfig(efficiency=0.95),
        aging=CycleCalendarAgingConfig(cycle_rate_constant=2e-6, calendar_rate_constant=1e-7),
        reward=RewardConfig(
            stability_mode="healthy_band",
            export_price_multiplier=0.8,
            degradation_cost_per_unit=0.5,
            grid_connection_weight=0.0,
            soc_management_bonus=0.0,
            soc_out_of_band_penalty=50.0,
        ),
        signals=_signals(30),
    )


def extended_90day() -> SimulationConfig:
    return SimulationConfig(
        horizon_days=90,
        record_history=True,
        signals=_signals(90),
    )


PROFILES: Dict[str, Callable[[], SimulationConfig]] = {
    "quick_1day": quick_1day,
    "basic_1day": basic_1day,
    "default_7day": default_7day,
    "continuous_30day": continuous_30day,
    "research_30day": research_30day,
    "extended_90day": extended_90day,
}

LEGACY_PROFILE_NAMES = {
    "quick": "quick_1day",
    "default": "default_7day",
    "research": "research_30day",
    "extended": "extended_90day",
}


def get_profile(name: str) -> SimulationConfig:
    """Return a fresh SimulationConfig for a named profile (legacy names accepted)."""
    if name in LEGACY_PROFILE_NAMES:
        resolved = LEGACY_PROFILE_NAMES[name]
        logger.info(f"Profile '{name}' resolved to '{resolved}'")
        name = resolved
    if name not in PROFILES:
        raise ConfigurationError(
            f"Unknown profile '{name}'. Available profiles: {', '.join(PROFILES)}."
        )
    return PROFILES[name]()
