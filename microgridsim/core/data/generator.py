"""Synthetic hourly PV, load and price series."""

import logging
from typing import Tuple

import numpy as np

from microgridsim.core.data.calendar import HourCalendar
from microgridsim.core.data.config import (
    ExogenousSignalConfig,
    LoadPattern,
    PricePattern,
    WeatherPattern,
)
from microgridsim.core.data.profiles import (
    LOAD_PROFILES,
    PRICE_BAND_HIGH,
    PRICE_BAND_LOW,
    PRICE_SHAPES,
    PRICE_WEEKEND_FACTOR,
    STANDARD_PRICE,
    normalize_price,
)
from microgridsim.core.data.series import ExogenousSeries
from microgridsim.core.data.weather import (
    CloudStateChain,
    ambient_temperature_c,
    seasonal_cloud_factor,
    seasonal_load_factor,
    seasonal_price_factor,
    seasonal_pv_factor,
    solar_elevation_deg,
    temperature_efficiency,
)

logger = logging.getLogger(__name__)


class ExogenousSignalGenerator:
    """
    Produces deterministic-given-seed hourly series for PV power, load power
    and normalized electricity price.

    All randomness comes from one ``numpy.random.Generator`` owned by the
    instance. ``generate`` re-seeds it, so repeated calls return identical
    series. PV, load and price are drawn in that order.
    """

    def __init__(self, config: ExogenousSignalConfig):
        self.config = config
        self.weather_pattern = WeatherPattern(config.weather_pattern)
        self.load_pattern = LoadPattern(config.load_pattern)
        self.price_pattern = PricePattern(config.price_pattern)
        self.calendar = HourCalendar.build(config.horizon_hours, config.start_day_of_year)
        self.cloud_chain = CloudStateChain(
            persistence=config.cloud_persistence,
            initial_probability=config.initial_cloud_probability,
        )
        self._rng = np.random.default_rng(config.random_seed)

    def generate(self) -> ExogenousSeries:
        self._rng = np.random.default_rng(self.config.random_seed)
        pv_kw, temperature_c, cloudy = self.generate_pv()
        load_kw = self.generate_load()
        raw_price = self.generate_raw_price()
        series = ExogenousSeries(
            pv_kw=pv_kw,
            load_kw=load_kw,
            price=normalize_price(raw_price),
            raw_price=np.clip(raw_price, PRICE_BAND_LOW, PRICE_BAND_HIGH),
            ambient_temperature_c=temperature_c,
            cloudy=cloudy,
            start_day_of_year=self.config.start_day_of_year,
        )
        stats = series.summary()
        logger.info(
            f"Generated {len(series)} h of exogenous signals "
            f"(weather={self.weather_pattern}, load={self.load_pattern}, price={self.price_pattern}): "
            f"PV {stats['pv_kw_min']:.1f}-{stats['pv_kw_max']:.1f} kW, "
            f"load {stats['load_kw_min']:.1f}-{stats['load_kw_max']:.1f} kW, "
            f"price {stats['price_min']:.3f}-{stats['price_max']:.3f}"
        )
        return series

    # ------------------------------------------------------------------ PV

    def base_irradiance(self) -> np.ndarray:
        """Clear-sky irradiance fraction per hour; zero at night and outside daylight hours."""
        cal = self.calendar
        elevation = solar_elevation_deg(cal.hour_of_day, cal.day_of_year, self.config.latitude_deg)
        first, last = self.config.daylight_hours
        daylight = (cal.hour_of_day >= first) & (cal.hour_of_day <= last) & (elevation > 0)
        irradiance = np.maximum(0.0, np.sin(np.radians(elevation))) * self.config.atmospheric_loss_factor
        return np.where(daylight, irradiance, 0.0)

    def weather_factor(self) -> Tuple[np.ndarray, np.ndarray]:
        """Per-hour weather multiplier and whether the hour was cloudy."""
        n = len(self.calendar)
        cloudy = np.zeros(n, dtype=bool)

        if self.weather_pattern is WeatherPattern.SUNNY:
            return 0.92 + 0.06 * self._rng.random(n), cloudy
        if self.weather_pattern is WeatherPattern.CLOUDY:
            return 0.25 + 0.35 * self._rng.random(n), np.ones(n, dtype=bool)
        if self.weather_pattern is WeatherPattern.MIXED:
            return 0.55 + 0.40 * self._rng.random(n), cloudy

        cloud_scale = seasonal_cloud_factor(self.calendar.day_of_year)
        if not self.config.cloud_intermittency:
            return cloud_scale * (0.7 + 0.25 * self._rng.random(n)), cloudy

        factor = np.empty(n)
        self.cloud_chain.reset()
        for i in range(n):
            cloudy[i] = self.cloud_chain.step(self._rng)
            if cloudy[i]:
                factor[i] = cloud_scale[i] * (0.2 + 0.3 * self._rng.random())
            else:
                factor[i] = cloud_scale[i] * (0.8 + 0.15 * self._rng.random())
        return factor, cloudy

    def generate_pv(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """PV power in kW, ambient temperature and cloudy flags for every hour."""
        cal = self.calendar
        capacity = self.config.pv_capacity_kw

        seasonal = seasonal_pv_factor(cal.day_of_year) if self.config.seasonal_variation else 1.0
        weather, cloudy = self.weather_factor()

        noise = self._rng.standard_normal(len(cal))
        temperature = ambient_temperature_c(cal.hour_of_day, cal.day_of_year, noise)
        if self.config.temperature_variation:
            temperature_factor = temperature_efficiency(temperature, self.config.temperature_coefficient)
        else:
            temperature_factor = 1.0

        pv_kw = capacity * self.base_irradiance() * seasonal * weather * temperature_factor
        return np.clip(pv_kw, 0.0, capacity), temperature, cloudy

    # ---------------------------------------------------------------- load

    def generate_load(self) -> np.ndarray:
        cal = self.calendar
        profile = LOAD_PROFILES[self.load_pattern]

        base_load = profile.base_fraction * self.config.pv_capacity_kw
        load = base_load * profile.shape.multiplier(cal.hour_of_day)
        load = np.where(cal.weekend, load * profile.weekend_factor, load)
        if self.config.seasonal_variation:
            load = load * seasonal_load_factor(cal.day_of_year)
        load = load * (0.9 + 0.2 * self._rng.random(len(cal)))
        return np.maximum(load, 0.0)

    # --------------------------------------------------------------- price

    def generate_raw_price(self) -> np.ndarray:
        """Unclamped price in CNY/kWh before normalization."""
        cal = self.calendar
        n = len(cal)

        if self.price_pattern is PricePattern.REAL_TIME:
            swing = 0.8 + 0.4 * np.sin(2 * np.pi * cal.hour_of_day / 24) + 0.2 * self._rng.random(n)
            price = STANDARD_PRICE * swing
        else:
            price = PRICE_SHAPES[self.price_pattern].multiplier(cal.hour_of_day)

        price = np.where(cal.weekend, price * PRICE_WEEKEND_FACTOR, price)
        if self.config.seasonal_variation:
            price = price * seasonal_price_factor(cal.day_of_year)
        return price * (0.95 + 0.1 * self._rng.random(n))


def generate_series(config: ExogenousSignalConfig) -> ExogenousSeries:
    """Build a generator for ``config`` and materialize its series."""
    return ExogenousSignalGenerator(config).generate()
