from microgridsim.core.data.config import (
    ExogenousSignalConfig,
    LoadPattern,
    PricePattern,
    WeatherPattern,
)
from microgridsim.core.data.generator import ExogenousSignalGenerator, generate_series
from microgridsim.core.data.series import ExogenousSeries

__all__ = [
    "ExogenousSignalConfig",
    "ExogenousSignalGenerator",
    "ExogenousSeries",
    "LoadPattern",
    "PricePattern",
    "WeatherPattern",
    "generate_series",
]
