from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RewardContext:
    """
    Physical outcome of one step, as seen by the reward layers.

    ``grid_power_kw`` is load - pv - battery power: positive imports from the grid.
    """

    grid_power_kw: float
    price: float
    soh_decrement: float
    soc_after: float
    soh_after: float
    load_kw: float
    dt_hours: float = 1.0
    time_step: int = 1
    steps_per_day: int = 24
    battery_capacity_kwh: float = 100.0

    @property
    def is_importing(self) -> bool:
        return self.grid_power_kw > 0

    @property
    def past_first_day(self) -> bool:
        return self.time_step > self.steps_per_day
