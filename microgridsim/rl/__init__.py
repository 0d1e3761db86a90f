from microgridsim.rl.episode import EpisodeController
from microgridsim.rl.factory import EnvironmentFactory, EnvironmentConfig

__all__ = [
    "EpisodeController",
    "EnvironmentFactory",
    "EnvironmentConfig",
]
