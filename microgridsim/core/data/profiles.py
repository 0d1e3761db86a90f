"""Categorical daily shapes for load and price."""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from microgridsim.core.data.config import LoadPattern, PricePattern

# (first_hour, last_hour, multiplier), hours of day are 1..24 and inclusive
HourBand = Tuple[int, int, float]


@dataclass(frozen=True)
class DailyShape:
    """Piecewise-constant multiplier over the hour of day; first matching band wins."""

    bands: Tuple[HourBand, ...]
    default: float

    def multiplier(self, hour_of_day: np.ndarray) -> np.ndarray:
        hour_of_day = np.asarray(hour_of_day)
        values = np.full(hour_of_day.shape, self.default, dtype=np.float64)
        assigned = np.zeros(hour_of_day.shape, dtype=bool)
        for first, last, value in self.bands:
            in_band = (hour_of_day >= first) & (hour_of_day <= last) & ~assigned
            values[in_band] = value
            assigned |= in_band
        return values


@dataclass(frozen=True)
class LoadProfile:
    shape: DailyShape
    base_fraction: float  # base load as a fraction of PV capacity
    weekend_factor: float = 1.0


LOAD_PROFILES = {
    LoadPattern.RESIDENTIAL: LoadProfile(
        shape=DailyShape(bands=((6, 8, 0.65), (18, 22, 0.85), (9, 17, 0.30)), default=0.20),
        base_fraction=0.50,
    ),
    LoadPattern.COMMERCIAL: LoadProfile(
        shape=DailyShape(bands=((8, 12, 0.75), (13, 18, 0.80), (19, 21, 0.45)), default=0.25),
        base_fraction=0.60,
        weekend_factor=0.7,
    ),
    LoadPattern.INDUSTRIAL: LoadProfile(
        shape=DailyShape(bands=((8, 17, 0.85), (18, 22, 0.60)), default=0.35),
        base_fraction=0.70,
        weekend_factor=0.7,
    ),
    LoadPattern.MIXED: LoadProfile(
        shape=DailyShape(bands=((8, 18, 0.70), (19, 22, 0.40)), default=0.25),
        base_fraction=0.55,
    ),
}

# Tariff levels in CNY/kWh
PEAK_PRICE = 1.2
STANDARD_PRICE = 0.86
VALLEY_PRICE = 0.48

PRICE_SHAPES = {
    PricePattern.FLAT: DailyShape(bands=(), default=STANDARD_PRICE),
    PricePattern.TIME_OF_USE: DailyShape(
        bands=(
            (8, 11, PEAK_PRICE),
            (18, 21, PEAK_PRICE),
            (12, 17, STANDARD_PRICE),
            (22, 23, STANDARD_PRICE),
            (7, 7, STANDARD_PRICE),
        ),
        default=VALLEY_PRICE,
    ),
}

PRICE_WEEKEND_FACTOR = 0.85

# Real-world band that is mapped onto the normalized [0, 2] range
PRICE_BAND_LOW = 0.48
PRICE_BAND_HIGH = 1.8
NORMALIZED_PRICE_MAX = 2.0


def normalize_price(raw_price):
    """Clamp raw prices to the tariff band and rescale linearly onto [0, 2]."""
    clamped = np.clip(raw_price, PRICE_BAND_LOW, PRICE_BAND_HIGH)
    scaled = NORMALIZED_PRICE_MAX * (clamped - PRICE_BAND_LOW) / (PRICE_BAND_HIGH - PRICE_BAND_LOW)
    return np.clip(scaled, 0.0, NORMALIZED_PRICE_MAX)
