from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
from gymnasium import Env, spaces

from microgridsim.sim.history import HistoryRecordingSimulation
from microgridsim.sim.simulation import MicrogridSimulation


class EpisodeController(Env):
    """
    Gymnasium environment over a MicrogridSimulation.

    The action is a battery power command in kW (positive=charge) as a
    one-element Box; the observation is the simulation's 7-element vector.
    Episodes end through ``terminated`` (horizon reached or SOH failure);
    ``truncated`` is left to wrappers such as TimeLimit.
    """

    metadata = {"render_modes": []}

    def __init__(self, simulation: Union[MicrogridSimulation, HistoryRecordingSimulation]):
        super().__init__()
        self.simulation = simulation

        rating = simulation.config.battery.power_rating_kw
        self.action_space = spaces.Box(low=-rating, high=rating, shape=(1,), dtype=np.float64)
        low, high = simulation.observation_bounds()
        self.observation_space = spaces.Box(low=low, high=high, dtype=np.float64)

    def reset(
        self, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new episode.

        ``seed`` re-seeds the initial-condition random source. ``options`` may
        pin ``soc``, ``soh`` and ``day_of_year`` for the new episode.
        """
        super().reset(seed=seed)
        if seed is not None:
            self.simulation.seed(seed)
        options = options or {}
        observation = self.simulation.reset(
            initial_soc=options.get("soc"),
            initial_soh=options.get("soh"),
            day_of_year=options.get("day_of_year"),
        )
        state = self.simulation.state
        info = {"soc": state.soc, "soh": state.soh, "day_of_year": state.day_of_year}
        return observation, info

    def step(self, action) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        power_kw = float(np.asarray(action, dtype=np.float64).reshape(()))
        observation, reward, done, info = self.simulation.step(power_kw)
        return observation, reward, done, False, info
