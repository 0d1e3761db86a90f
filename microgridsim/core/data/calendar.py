"""Hour/day bookkeeping shared by the signal generator and the simulation."""

from dataclasses import dataclass

import numpy as np

HOURS_PER_DAY = 24
DAYS_PER_YEAR = 365
DAYS_PER_WEEK = 7


def wrap_day_of_year(start_day_of_year: int, day_offset: int) -> int:
    """Day of year reached ``day_offset`` days after ``start_day_of_year``."""
    return (start_day_of_year - 1 + day_offset) % DAYS_PER_YEAR + 1


def is_weekend(day_index):
    """Day 1 of an episode is a Monday; days 6 and 7 of each week are the weekend."""
    return (day_index - 1) % DAYS_PER_WEEK + 1 >= 6


@dataclass(frozen=True)
class HourCalendar:
    """Calendar arrays for a horizon of absolute hours ``1..horizon_hours``."""

    hour_index: np.ndarray
    hour_of_day: np.ndarray
    day_index: np.ndarray
    day_of_year: np.ndarray
    weekend: np.ndarray

    @classmethod
    def build(cls, horizon_hours: int, start_day_of_year: int = 1) -> "HourCalendar":
        hour_index = np.arange(1, horizon_hours + 1)
        hour_of_day = (hour_index - 1) % HOURS_PER_DAY + 1
        day_index = (hour_index - 1) // HOURS_PER_DAY + 1
        day_of_year = wrap_day_of_year(start_day_of_year, day_index - 1)
        weekend = is_weekend(day_index)
        return cls(
            hour_index=hour_index,
            hour_of_day=hour_of_day,
            day_index=day_index,
            day_of_year=day_of_year,
            weekend=weekend,
        )

    def __len__(self) -> int:
        return len(self.hour_index)
