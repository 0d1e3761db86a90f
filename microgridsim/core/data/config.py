from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Tuple, Type

from microgridsim.errors import ConfigurationError, InvalidArgument


class WeatherPattern(StrEnum):
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    SEASONAL = "seasonal"
    MIXED = "mixed"


class LoadPattern(StrEnum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    MIXED = "mixed"


class PricePattern(StrEnum):
    FLAT = "flat"
    TIME_OF_USE = "time_of_use"
    REAL_TIME = "real_time"


def _check_pattern(field_name: str, value: str, choices: Type[StrEnum]) -> None:
    allowed = [member.value for member in choices]
    if value not in allowed:
        raise ConfigurationError(
            f"Unknown {field_name} '{value}'. Expected one of: {', '.join(allowed)}."
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ExogenousSignalConfig:
    """Configuration of the synthetic PV/load/price generator."""

    horizon_hours: int = 24
    weather_pattern: str = WeatherPattern.SEASONAL.value
    load_pattern: str = LoadPattern.COMMERCIAL.value
    price_pattern: str = PricePattern.TIME_OF_USE.value
    random_seed: Optional[int] = 42
    pv_capacity_kw: float = 120.0
    start_day_of_year: int = 1

    # solar geometry
    latitude_deg: float = 39.9
    atmospheric_loss_factor: float = 0.9
    daylight_hours: Tuple[int, int] = (6, 18)

    # modulation switches
    seasonal_variation: bool = True
    temperature_variation: bool = True
    temperature_coefficient: float = -0.004  # per deg C above 25 deg C

    # Markov cloud model, used by the seasonal weather pattern
    cloud_intermittency: bool = True
    cloud_persistence: float = 0.7
    initial_cloud_probability: float = 0.3

    def __post_init__(self):
        if self.horizon_hours <= 0:
            raise InvalidArgument("horizon_hours must be positive.")
        _check_pattern("weather_pattern", self.weather_pattern, WeatherPattern)
        _check_pattern("load_pattern", self.load_pattern, LoadPattern)
        _check_pattern("price_pattern", self.price_pattern, PricePattern)
        if self.pv_capacity_kw < 0:
            raise ConfigurationError("pv_capacity_kw must be non-negative.")
        if not (1 <= self.start_day_of_year <= 365):
            raise ConfigurationError("start_day_of_year must be between 1 and 365.")
        if not (-90.0 <= self.latitude_deg <= 90.0):
            raise ConfigurationError("latitude_deg must be between -90 and 90.")
        if not (0 < self.atmospheric_loss_factor <= 1):
            raise ConfigurationError("atmospheric_loss_factor must be between 0 and 1.")
        first, last = self.daylight_hours
        if not (1 <= first <= last <= 24):
            raise ConfigurationError("daylight_hours must be an ordered pair within 1..24.")
        if not (0 <= self.cloud_persistence <= 1):
            raise ConfigurationError("cloud_persistence must be between 0 and 1.")
        if not (0 <= self.initial_cloud_probability <= 1):
            raise ConfigurationError("initial_cloud_probability must be between 0 and 1.")
