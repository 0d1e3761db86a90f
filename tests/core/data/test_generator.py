"""Tests for the synthetic exogenous signal generator."""

import itertools

import numpy as np
import pytest

from microgridsim.core.data.config import ExogenousSignalConfig
from microgridsim.core.data.generator import ExogenousSignalGenerator, generate_series
from microgridsim.core.data.weather import solar_elevation_deg
from microgridsim.errors import ConfigurationError, InvalidArgument

WEATHER = ["sunny", "cloudy", "seasonal", "mixed"]
LOADS = ["residential", "commercial", "industrial", "mixed"]
PRICES = ["flat", "time_of_use", "real_time"]


@pytest.mark.parametrize(
    "weather,load,price", list(itertools.product(WEATHER, LOADS, PRICES))
)
def test_price_stays_in_normalized_range(weather, load, price):
    # Arrange
    config = ExogenousSignalConfig(
        horizon_hours=1008,
        weather_pattern=weather,
        load_pattern=load,
        price_pattern=price,
        random_seed=3,
    )

    # Act
    series = generate_series(config)

    # Assert
    assert len(series) == 1008
    assert np.all(series.price >= 0.0)
    assert np.all(series.price <= 2.0)
    assert np.all(series.load_kw >= 0.0)
    assert np.all(series.pv_kw >= 0.0)


def test_seasonal_month_pv_is_bounded_and_zero_at_night():
    # Arrange
    config = ExogenousSignalConfig(
        horizon_hours=30 * 24, weather_pattern="seasonal", pv_capacity_kw=120.0, random_seed=11
    )
    generator = ExogenousSignalGenerator(config)

    # Act
    series = generator.generate()

    # Assert
    cal = generator.calendar
    elevation = solar_elevation_deg(cal.hour_of_day, cal.day_of_year, config.latitude_deg)
    assert np.all(series.pv_kw >= 0.0)
    assert np.all(series.pv_kw <= 120.0)
    assert np.all(series.pv_kw[elevation <= 0] == 0.0)
    assert series.pv_kw.max() > 0.0


def test_pv_is_zero_outside_daylight_window():
    # Arrange
    config = ExogenousSignalConfig(horizon_hours=7 * 24, weather_pattern="sunny", random_seed=1)
    generator = ExogenousSignalGenerator(config)

    # Act
    series = generator.generate()

    # Assert
    hours = generator.calendar.hour_of_day
    outside = (hours < 6) | (hours > 18)
    assert np.all(series.pv_kw[outside] == 0.0)


def test_same_seed_gives_identical_series():
    # Arrange
    config = ExogenousSignalConfig(horizon_hours=240, weather_pattern="seasonal", random_seed=5)

    # Act
    first = generate_series(config)
    second = generate_series(config)

    # Assert
    assert np.array_equal(first.pv_kw, second.pv_kw)
    assert np.array_equal(first.load_kw, second.load_kw)
    assert np.array_equal(first.price, second.price)
    assert np.array_equal(first.cloudy, second.cloudy)


def test_repeated_generate_calls_are_identical():
    # Arrange
    generator = ExogenousSignalGenerator(ExogenousSignalConfig(horizon_hours=96, random_seed=9))

    # Act
    first = generator.generate()
    second = generator.generate()

    # Assert
    assert np.array_equal(first.pv_kw, second.pv_kw)
    assert np.array_equal(first.price, second.price)


def test_different_seeds_give_different_series():
    # Arrange
    base = dict(horizon_hours=96, price_pattern="real_time")

    # Act
    first = generate_series(ExogenousSignalConfig(random_seed=1, **base))
    second = generate_series(ExogenousSignalConfig(random_seed=2, **base))

    # Assert
    assert not np.array_equal(first.load_kw, second.load_kw)
    assert not np.array_equal(first.price, second.price)


def test_sunny_weather_produces_more_pv_than_cloudy():
    # Arrange
    base = dict(horizon_hours=72, random_seed=4)

    # Act
    sunny = generate_series(ExogenousSignalConfig(weather_pattern="sunny", **base))
    cloudy = generate_series(ExogenousSignalConfig(weather_pattern="cloudy", **base))

    # Assert
    assert sunny.pv_kw.sum() > cloudy.pv_kw.sum()
    assert np.all(sunny.pv_kw >= cloudy.pv_kw)


def test_commercial_load_is_discounted_on_weekends():
    # Arrange
    config = ExogenousSignalConfig(
        horizon_hours=7 * 24, load_pattern="commercial", seasonal_variation=False, random_seed=2
    )

    # Act
    series = generate_series(config)

    # Assert
    monday_10h = series.at_hour(10).load_kw
    saturday_10h = series.at_hour(5 * 24 + 10).load_kw
    assert saturday_10h < monday_10h


def test_time_of_use_peak_is_more_expensive_than_valley():
    # Arrange
    config = ExogenousSignalConfig(
        horizon_hours=24, price_pattern="time_of_use", seasonal_variation=False, random_seed=0
    )

    # Act
    series = generate_series(config)

    # Assert
    assert series.at_hour(9).price > series.at_hour(14).price > series.at_hour(3).price


def test_flat_price_is_constant_up_to_market_noise():
    # Arrange
    config = ExogenousSignalConfig(
        horizon_hours=24, price_pattern="flat", seasonal_variation=False, random_seed=0
    )

    # Act
    series = generate_series(config)

    # Assert
    assert np.all(series.raw_price >= 0.86 * 0.95 - 1e-12)
    assert np.all(series.raw_price <= 0.86 * 1.05 + 1e-12)


def test_cloud_intermittency_marks_cloudy_hours():
    # Arrange
    config = ExogenousSignalConfig(horizon_hours=30 * 24, weather_pattern="seasonal", random_seed=8)

    # Act
    series = generate_series(config)

    # Assert
    assert series.cloudy.any()
    assert not series.cloudy.all()


def test_unknown_weather_pattern_raises_configuration_error():
    # Act & Assert
    with pytest.raises(ConfigurationError, match="hailstorm"):
        ExogenousSignalConfig(weather_pattern="hailstorm")


@pytest.mark.parametrize(
    "field", ["load_pattern", "price_pattern"]
)
def test_unknown_load_or_price_pattern_raises_configuration_error(field):
    # Act & Assert
    with pytest.raises(ConfigurationError, match="bogus"):
        ExogenousSignalConfig(**{field: "bogus"})


@pytest.mark.parametrize("horizon", [0, -24])
def test_non_positive_horizon_raises_invalid_argument(horizon):
    # Act & Assert
    with pytest.raises(InvalidArgument, match="horizon_hours must be positive"):
        ExogenousSignalConfig(horizon_hours=horizon)
