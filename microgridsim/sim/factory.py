from typing import Optional, Union

from microgridsim.core.battery.factory import build_aging_model
from microgridsim.core.data.generator import generate_series
from microgridsim.core.data.series import ExogenousSeries
from microgridsim.reward.factory import RewardManagerFactory
from microgridsim.sim.config import SimulationConfig
from microgridsim.sim.history import HistoryRecordingSimulation
from microgridsim.sim.simulation import MicrogridSimulation


def build_simulation(
    config: SimulationConfig, series: Optional[ExogenousSeries] = None
) -> Union[MicrogridSimulation, HistoryRecordingSimulation]:
    """
    Wire a simulation from its configuration.

    The exogenous series is generated from ``config.signals`` unless one is
    passed in. With ``record_history`` the simulation comes back wrapped in a
    HistoryRecordingSimulation.
    """
    if series is None:
        series = generate_series(config.signals)
    simulation = MicrogridSimulation(
        config=config,
        series=series,
        aging_model=build_aging_model(config.aging),
        reward_manager=RewardManagerFactory.create(config.reward),
    )
    if config.record_history:
        return HistoryRecordingSimulation(simulation)
    return simulation
