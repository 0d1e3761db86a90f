from microgridsim.errors import ConfigurationError, InvalidArgument, InvalidState
from microgridsim.sim.config import SimulationConfig
from microgridsim.sim.simulation import MicrogridSimulation
from microgridsim.sim.factory import build_simulation
from microgridsim.sim.profiles import get_profile
from microgridsim.rl.episode import EpisodeController
from microgridsim.rl.factory import EnvironmentFactory, EnvironmentConfig

__all__ = [
    "ConfigurationError",
    "InvalidArgument",
    "InvalidState",
    "SimulationConfig",
    "MicrogridSimulation",
    "build_simulation",
    "get_profile",
    "EpisodeController",
    "EnvironmentFactory",
    "EnvironmentConfig",
]
