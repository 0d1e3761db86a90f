import logging
import math
from dataclasses import replace
from enum import StrEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np

from microgridsim.core.battery.aging import AgingModelBase
from microgridsim.core.battery.model import BatteryModel
from microgridsim.core.data.calendar import wrap_day_of_year
from microgridsim.core.data.series import ExogenousSeries
from microgridsim.core.data.weather import seasonal_load_factor, seasonal_pv_factor
from microgridsim.core.state import SimulationState
from microgridsim.core.timestep_data import ExogenousSample
from microgridsim.errors import InvalidArgument, InvalidState
from microgridsim.reward.calculators import GridExchangeCalculator
from microgridsim.reward.contexts import RewardContext
from microgridsim.reward.manager import RewardManager
from microgridsim.sim.config import SimulationConfig

logger = logging.getLogger(__name__)

OBSERVATION_FIELDS = (
    "pv_power_kw",
    "load_power_kw",
    "soc",
    "soh",
    "price_normalized",
    "hour_of_day",
    "day_index",
)


class SimulationPhase(StrEnum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    RUNNING = "running"
    TERMINAL = "terminal"


class TerminationReason(StrEnum):
    HORIZON = "horizon"
    SOH_FAILURE = "soh_failure"


class MicrogridSimulation:
    """
    Discrete-time battery dispatch state machine.

    Each ``step`` consumes one exogenous sample and one commanded battery
    power (kW, positive=charge), advances SOC and SOH, and returns
    ``(observation, reward, done, info)``. The observation always describes
    the time step the next action will act on:

        [pv_kw, load_kw, soc, soh, price_normalized, hour_of_day, day_index]

    Out-of-range commands are clamped, never rejected. Stepping before
    ``reset`` or after a terminal step raises ``InvalidState``.
    """

    def __init__(
        self,
        config: SimulationConfig,
        series: ExogenousSeries,
        aging_model: AgingModelBase,
        reward_manager: RewardManager,
    ):
        self.config = config
        self.series = series
        self.aging_model = aging_model
        self.reward_manager = reward_manager
        self.battery = BatteryModel(config.battery)

        self._rng = np.random.default_rng(config.random_seed)
        self._state: Optional[SimulationState] = None
        self._day_origin: int = config.start_day_of_year
        self.phase = SimulationPhase.UNINITIALIZED

    @property
    def state(self) -> SimulationState:
        if self._state is None:
            raise InvalidState("Simulation has not been reset yet.")
        return self._state

    def seed(self, seed: Optional[int]) -> None:
        """Re-seed the random source used for initial conditions."""
        self._rng = np.random.default_rng(seed)

    # ------------------------------------------------------------------ reset

    def reset(
        self,
        initial_soc: Optional[float] = None,
        initial_soh: Optional[float] = None,
        day_of_year: Optional[int] = None,
    ) -> np.ndarray:
        """Start a new episode and return the first observation."""
        battery_cfg = self.config.battery

        if initial_soc is None:
            soc = float(self._rng.uniform(*self.config.initial_soc_range))
        else:
            soc = self.battery.clamp_soc(float(initial_soc))

        if initial_soh is not None:
            soh = min(1.0, max(battery_cfg.soh_floor, float(initial_soh)))
        elif self.config.carry_over_soh and self._state is not None:
            soh = self._state.soh
        else:
            soh = float(self._rng.uniform(*self.config.initial_soh_range))

        if day_of_year is not None:
            if not (1 <= day_of_year <= 365):
                raise InvalidArgument("day_of_year must be between 1 and 365.")
            self._day_origin = int(day_of_year)
        elif self.config.randomize_day_of_year:
            self._day_origin = int(self._rng.integers(1, 366))
        else:
            self._day_origin = self.config.start_day_of_year

        self._state = SimulationState.initial(soc=soc, soh=soh, day_of_year=self._day_origin)
        self.phase = SimulationPhase.READY
        logger.debug(
            f"Episode reset: soc={soc:.3f}, soh={soh:.4f}, day_of_year={self._day_origin}"
        )
        return self._observation()

    # ------------------------------------------------------------------- step

    def step(self, commanded_power_kw: float) -> Tuple[np.ndarray, float, bool, Dict[str, Any]]:
        if self.phase is SimulationPhase.UNINITIALIZED:
            raise InvalidState("step() called before reset().")
        if self.phase is SimulationPhase.TERMINAL:
            raise InvalidState("step() called after the episode terminated; call reset() first.")

        power = float(commanded_power_kw)
        if not math.isfinite(power):
            raise InvalidArgument(f"Commanded power must be finite, got {power}.")

        cfg = self.config
        state = self._state
        dt = cfg.time_step_hours
        sample = self._sample_at(state.time_step)

        transition = self.battery.apply_power(state.soc, power, dt)

        event = self.aging_model.evaluate(
            cycle_depth=transition.cycle_depth,
            elapsed_hours=dt,
            day_of_year=state.day_of_year,
            hour_of_day=self._hour_of_day(state.time_step),
            power_fraction=abs(transition.applied_power_kw) / self.battery.max_power,
        )
        soh_after = max(cfg.battery.soh_floor, state.soh - event.soh_decrement)

        grid_power_kw = sample.net_load_kw - transition.applied_power_kw

        context = RewardContext(
            grid_power_kw=grid_power_kw,
            price=sample.price,
            soh_decrement=event.soh_decrement,
            soc_after=transition.soc_after,
            soh_after=soh_after,
            load_kw=sample.load_kw,
            dt_hours=dt,
            time_step=state.time_step,
            steps_per_day=cfg.steps_per_day,
            battery_capacity_kwh=cfg.battery.capacity_kwh,
        )
        reward, breakdown = self.reward_manager.calculate_reward(context)
        # operating cost is tracked independently of the reward weights
        energy_cost = GridExchangeCalculator.energy_cost(
            context, cfg.reward.import_price_multiplier, cfg.reward.export_price_multiplier
        )

        state.record_soc(transition.soc_after)
        state.soh = soh_after
        if self.aging_model.is_material(transition.cycle_depth):
            state.cycle_accumulator += transition.cycle_depth
        state.total_energy_traded += abs(grid_power_kw) * dt
        state.total_cost += energy_cost
        state.time_step += 1
        state.day_of_year = self._day_of_year(state.time_step)

        termination = self._termination_reason(soh_after)
        done = termination is not None
        self.phase = SimulationPhase.TERMINAL if done else SimulationPhase.RUNNING
        if done:
            logger.debug(
                f"Episode terminated ({termination}) after {state.time_step - 1} steps, "
                f"soh={state.soh:.4f}, total_cost={state.total_cost:.2f}"
            )

        info = {
            "grid_power_exchange": grid_power_kw,
            "reward_breakdown": breakdown.as_dict(),
            "cycle_count": state.cycle_accumulator,
            "total_energy_traded": state.total_energy_traded,
            "total_cost": state.total_cost,
            "pv_power_kw": sample.pv_kw,
            "load_power_kw": sample.load_kw,
            "price": sample.price,
            "battery_power_kw": transition.applied_power_kw,
            "power_clipped": transition.power_clipped,
            "soc_clipped": transition.soc_clipped,
            "soh_decrement": event.soh_decrement,
            "temperature_stress": event.temperature_stress,
            "time_step": state.time_step,
            "day_of_year": state.day_of_year,
            "termination_reason": termination.value if done else None,
        }
        return self._observation(), float(reward), done, info

    # ---------------------------------------------------------------- helpers

    def _termination_reason(self, soh_after: float) -> Optional[TerminationReason]:
        if soh_after < self.config.battery.soh_failure_threshold:
            return TerminationReason.SOH_FAILURE
        if self._state.time_step > self.config.horizon_steps:
            return TerminationReason.HORIZON
        return None

    def _hour_of_day(self, time_step: int) -> int:
        cfg = self.config
        return int(((time_step - 1) % cfg.steps_per_day) * cfg.time_step_hours) + 1

    def _day_index(self, time_step: int) -> int:
        """1-based day within the episode; wraps for the observation after the last step."""
        cfg = self.config
        return ((time_step - 1) // cfg.steps_per_day) % cfg.horizon_days + 1

    def _day_of_year(self, time_step: int) -> int:
        return wrap_day_of_year(self._day_origin, (time_step - 1) // self.config.steps_per_day)

    def _sample_at(self, time_step: int) -> ExogenousSample:
        hour_index = int((time_step - 1) * self.config.time_step_hours) + 1
        sample = self.series.at_hour(hour_index)
        if not self.config.seasonal_adjustment:
            return sample
        day_of_year = self._day_of_year(time_step)
        return replace(
            sample,
            pv_kw=sample.pv_kw * float(seasonal_pv_factor(day_of_year)),
            load_kw=sample.load_kw * float(seasonal_load_factor(day_of_year)),
        )

    def _observation(self) -> np.ndarray:
        state = self._state
        sample = self._sample_at(state.time_step)
        return np.array(
            [
                sample.pv_kw,
                sample.load_kw,
                state.soc,
                state.soh,
                sample.price,
                self._hour_of_day(state.time_step),
                self._day_index(state.time_step),
            ],
            dtype=np.float64,
        )

    def observation_bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Lower and upper bounds of every observation element."""
        battery = self.config.battery
        low = np.array(
            [0.0, 0.0, battery.soc_min, battery.soh_floor, 0.0, 1.0, 1.0], dtype=np.float64
        )
        high = np.array(
            [np.inf, np.inf, battery.soc_max, 1.0, 2.0, 24.0, float(self.config.horizon_days)],
            dtype=np.float64,
        )
        return low, high
