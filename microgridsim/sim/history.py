from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from microgridsim.core.data.calendar import HOURS_PER_DAY
from microgridsim.sim.simulation import MicrogridSimulation


STATE_HISTORY_COLUMNS = ("soc", "soh", "pv_power_kw", "load_power_kw", "price", "grid_power_kw")


class HistoryRecordingSimulation:
    """
    Records per-step states, actions and rewards of a wrapped simulation.

    Exposes the same ``reset``/``step`` contract as MicrogridSimulation and
    forwards every other attribute to it. Histories are cleared on ``reset``.
    """

    def __init__(self, simulation: MicrogridSimulation):
        self.simulation = simulation
        self.state_history: List[Tuple[float, ...]] = []
        self.action_history: List[float] = []
        self.reward_history: List[float] = []
        self.info_history: List[Dict[str, Any]] = []

    def __getattr__(self, name: str):
        # lookups during copy and unpickling happen before __init__ has run
        if name == "simulation":
            raise AttributeError(name)
        return getattr(self.simulation, name)

    def reset(self, *args, **kwargs) -> np.ndarray:
        observation = self.simulation.reset(*args, **kwargs)
        self.state_history.clear()
        self.action_history.clear()
        self.reward_history.clear()
        self.info_history.clear()
        return observation

    def step(self, commanded_power_kw: float):
        observation, reward, done, info = self.simulation.step(commanded_power_kw)
        state = self.simulation.state
        self.state_history.append(
            (
                state.soc,
                state.soh,
                info["pv_power_kw"],
                info["load_power_kw"],
                info["price"],
                info["grid_power_exchange"],
            )
        )
        self.action_history.append(info["battery_power_kw"])
        self.reward_history.append(reward)
        self.info_history.append(info)
        return observation, reward, done, info

    def to_frame(self) -> pd.DataFrame:
        """One row per recorded step, indexed by the 1-based step number."""
        frame = pd.DataFrame(self.state_history, columns=list(STATE_HISTORY_COLUMNS))
        frame["battery_power_kw"] = self.action_history
        frame["reward"] = self.reward_history
        frame.index = pd.RangeIndex(1, len(frame) + 1, name="step")
        return frame

    def summary(self) -> Dict[str, Optional[float]]:
        """Episode-level performance summary for analysis."""
        state = self.simulation.state
        total_steps = len(self.reward_history)
        summary: Dict[str, Optional[float]] = {
            "total_steps": total_steps,
            "simulation_days": total_steps * self.simulation.config.time_step_hours / HOURS_PER_DAY,
            "final_soc": state.soc,
            "final_soh": state.soh,
            "soh_degradation": state.soh_degradation,
            "total_energy_traded_kwh": state.total_energy_traded,
            "total_cost": state.total_cost,
            "equivalent_cycles": state.cycle_accumulator,
            "max_soc_reached": state.max_soc_reached,
            "min_soc_reached": state.min_soc_reached,
        }
        if self.reward_history:
            rewards = np.asarray(self.reward_history)
            summary.update(
                total_reward=float(rewards.sum()),
                average_reward=float(rewards.mean()),
                reward_std_dev=float(rewards.std()),
            )
        if self.state_history:
            soc = np.asarray([row[0] for row in self.state_history])
            summary.update(
                soc_mean=float(soc.mean()),
                soc_std_dev=float(soc.std()),
                soc_min=float(soc.min()),
                soc_max=float(soc.max()),
            )
        return summary
