from dataclasses import dataclass
from typing import Dict, Iterator, Optional

import numpy as np
import pandas as pd

from microgridsim.core.data.data_column import DataColumn
from microgridsim.core.timestep_data import ExogenousSample
from microgridsim.errors import InvalidArgument


def _read_only(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class ExogenousSeries:
    """
    Materialized hourly PV, load and price series for one horizon.

    Arrays are stored read-only. ``at_hour`` takes a 1-based absolute hour and
    wraps around when the simulation runs longer than the series.
    """

    pv_kw: np.ndarray
    load_kw: np.ndarray
    price: np.ndarray
    raw_price: Optional[np.ndarray] = None
    ambient_temperature_c: Optional[np.ndarray] = None
    cloudy: Optional[np.ndarray] = None
    start_day_of_year: int = 1

    def __post_init__(self):
        object.__setattr__(self, "pv_kw", _read_only(self.pv_kw))
        object.__setattr__(self, "load_kw", _read_only(self.load_kw))
        object.__setattr__(self, "price", _read_only(self.price))
        n = len(self.pv_kw)
        if n == 0:
            raise InvalidArgument("Exogenous series must contain at least one hour.")
        if len(self.load_kw) != n or len(self.price) != n:
            raise InvalidArgument("pv_kw, load_kw and price must have the same length.")
        for name in ("raw_price", "ambient_temperature_c", "cloudy"):
            values = getattr(self, name)
            if values is None:
                continue
            if len(values) != n:
                raise InvalidArgument(f"{name} must have the same length as pv_kw.")
            object.__setattr__(self, name, _read_only(values))

    def __len__(self) -> int:
        return len(self.pv_kw)

    def __getitem__(self, idx: int) -> ExogenousSample:
        return ExogenousSample(
            hour_index=idx + 1 if idx >= 0 else len(self) + idx + 1,
            pv_kw=float(self.pv_kw[idx]),
            load_kw=float(self.load_kw[idx]),
            price=float(self.price[idx]),
        )

    def __iter__(self) -> Iterator[ExogenousSample]:
        for idx in range(len(self)):
            yield self[idx]

    def at_hour(self, hour_index: int) -> ExogenousSample:
        """Sample for 1-based absolute ``hour_index``, wrapping modulo the series length."""
        sample = self[(hour_index - 1) % len(self)]
        return ExogenousSample(
            hour_index=hour_index,
            pv_kw=sample.pv_kw,
            load_kw=sample.load_kw,
            price=sample.price,
        )

    @property
    def horizon_hours(self) -> int:
        return len(self)

    def to_frame(self) -> pd.DataFrame:
        columns: Dict[str, np.ndarray] = {
            DataColumn.PV: self.pv_kw,
            DataColumn.LOAD: self.load_kw,
            DataColumn.PRICE: self.price,
        }
        if self.raw_price is not None:
            columns[DataColumn.RAW_PRICE] = self.raw_price
        if self.ambient_temperature_c is not None:
            columns[DataColumn.AMBIENT_TEMPERATURE] = self.ambient_temperature_c
        if self.cloudy is not None:
            columns[DataColumn.CLOUDY] = self.cloudy.astype(bool)
        frame = pd.DataFrame({str(k): v for k, v in columns.items()})
        frame.index = pd.RangeIndex(1, len(self) + 1, name="hour")
        return frame

    def summary(self) -> Dict[str, float]:
        return {
            "pv_kw_min": float(self.pv_kw.min()),
            "pv_kw_max": float(self.pv_kw.max()),
            "pv_kw_mean": float(self.pv_kw.mean()),
            "load_kw_min": float(self.load_kw.min()),
            "load_kw_max": float(self.load_kw.max()),
            "load_kw_mean": float(self.load_kw.mean()),
            "price_min": float(self.price.min()),
            "price_max": float(self.price.max()),
            "pv_energy_kwh": float(self.pv_kw.sum()),
            "load_energy_kwh": float(self.load_kw.sum()),
        }
