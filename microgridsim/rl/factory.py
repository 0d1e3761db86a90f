import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import gymnasium as gym

from microgridsim.core.data.series import ExogenousSeries
from microgridsim.rl.episode import EpisodeController
from microgridsim.rl.wrappers import NormalizedPowerWrapper
from microgridsim.sim.config import SimulationConfig
from microgridsim.sim.factory import build_simulation

logger = logging.getLogger(__name__)


@dataclass
class EnvironmentConfig:
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    wrappers: Optional[Dict[str, Dict[str, Any]]] = None  # Optional wrappers to apply


class EnvironmentFactory:
    @staticmethod
    def create_environment(
        config: EnvironmentConfig, series: Optional[ExogenousSeries] = None
    ) -> gym.Env:
        """Create the episode controller and apply the configured wrappers."""
        simulation = build_simulation(config.simulation, series=series)
        env: gym.Env = EpisodeController(simulation)

        if not config.wrappers:
            logger.info(f"Successfully created environment: {env}")
            return env

        # Observation wrappers innermost, action wrappers outermost
        misc_wrapper_config = config.wrappers.get("misc", {})
        if "max_episode_steps" in misc_wrapper_config:
            env = gym.wrappers.TimeLimit(env, max_episode_steps=misc_wrapper_config["max_episode_steps"])
        if misc_wrapper_config.get("record_statistics"):
            env = gym.wrappers.RecordEpisodeStatistics(env)

        observation_wrapper_config = config.wrappers.get("observation_space", {})
        if observation_wrapper_config.get("normalize"):
            env = gym.wrappers.NormalizeObservation(env, epsilon=1e-8)

        action_wrapper_config = config.wrappers.get("action_space", {})
        if action_wrapper_config.get("clip_actions"):
            env = gym.wrappers.ClipAction(env)
        if action_wrapper_config.get("normalized"):
            env = NormalizedPowerWrapper(env)

        logger.info(f"Successfully created environment. Final wrapped env: {env}")
        return env
