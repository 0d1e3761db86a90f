from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExogenousSample:
    """
    Exogenous conditions for a single absolute hour.

    This is the container that flows from the materialized series into the
    simulation step. Power values are in kW, price is normalized to [0, 2].
    """

    hour_index: int
    pv_kw: float
    load_kw: float
    price: float

    @property
    def net_load_kw(self) -> float:
        return self.load_kw - self.pv_kw
