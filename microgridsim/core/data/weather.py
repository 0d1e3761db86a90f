"""Solar geometry, seasonal modulation and the Markov cloud model."""

from typing import Optional

import numpy as np

from microgridsim.core.data.calendar import DAYS_PER_YEAR
from microgridsim.errors import ConfigurationError

SUMMER_PHASE_DAY = 80  # sin(2*pi*(doy - 80)/365) peaks near the summer solstice
SOLSTICE_DAY = 172
STANDARD_TEST_TEMPERATURE_C = 25.0
MIN_TEMPERATURE_EFFICIENCY = 0.7


def _annual(day_of_year, phase_day: float):
    return np.sin(2 * np.pi * (np.asarray(day_of_year) - phase_day) / DAYS_PER_YEAR)


def declination_deg(day_of_year):
    return 23.45 * np.sin(2 * np.pi * (284 + np.asarray(day_of_year)) / DAYS_PER_YEAR)


def solar_elevation_deg(hour_of_day, day_of_year, latitude_deg: float = 39.9):
    """Solar elevation angle in degrees for the given local hour and day of year."""
    declination = np.radians(declination_deg(day_of_year))
    latitude = np.radians(latitude_deg)
    hour_angle = np.radians(15.0 * (np.asarray(hour_of_day) - 12))
    sin_elevation = np.sin(declination) * np.sin(latitude) + np.cos(declination) * np.cos(
        latitude
    ) * np.cos(hour_angle)
    return np.degrees(np.arcsin(np.clip(sin_elevation, -1.0, 1.0)))


def seasonal_pv_factor(day_of_year):
    return 0.8 + 0.4 * _annual(day_of_year, SUMMER_PHASE_DAY)


def seasonal_load_factor(day_of_year):
    # higher at both temperature extremes
    return 0.9 + 0.2 * np.abs(_annual(day_of_year, SUMMER_PHASE_DAY))


def seasonal_cloud_factor(day_of_year):
    return 0.8 + 0.2 * _annual(day_of_year, SOLSTICE_DAY)


def seasonal_price_factor(day_of_year):
    # summer and winter peaks
    return 0.9 + 0.25 * _annual(day_of_year, SUMMER_PHASE_DAY) + 0.15 * _annual(day_of_year, 355)


def ambient_temperature_c(hour_of_day, day_of_year, noise=0.0):
    """Annual plus diurnal ambient temperature; ``noise`` is in standard deviations of 3 deg C."""
    annual = 15.0 + 15.0 * _annual(day_of_year, SUMMER_PHASE_DAY)
    diurnal = 8.0 * np.sin(2 * np.pi * (np.asarray(hour_of_day) - 6) / 24)
    return annual + diurnal + 3.0 * np.asarray(noise)


def temperature_efficiency(temperature_c, coefficient: float):
    return np.maximum(
        MIN_TEMPERATURE_EFFICIENCY,
        1.0 + coefficient * (np.asarray(temperature_c) - STANDARD_TEST_TEMPERATURE_C),
    )


class CloudStateChain:
    """
    Two-state (cloudy/clear) Markov chain with an explicitly carried state.

    The first hour is cloudy with ``initial_probability``. Afterwards a cloudy
    hour stays cloudy with ``persistence`` and a clear hour turns cloudy with
    ``(1 - persistence) * initial_probability``.
    """

    def __init__(self, persistence: float = 0.7, initial_probability: float = 0.3):
        if not (0 <= persistence <= 1):
            raise ConfigurationError("persistence must be between 0 and 1.")
        if not (0 <= initial_probability <= 1):
            raise ConfigurationError("initial_probability must be between 0 and 1.")
        self.persistence = persistence
        self.initial_probability = initial_probability
        self.cloud_state: Optional[bool] = None

    def reset(self) -> None:
        self.cloud_state = None

    def cloudy_probability(self) -> float:
        if self.cloud_state is None:
            return self.initial_probability
        if self.cloud_state:
            return self.persistence
        return (1.0 - self.persistence) * self.initial_probability

    def step(self, rng: np.random.Generator) -> bool:
        self.cloud_state = bool(rng.random() < self.cloudy_probability())
        return self.cloud_state
