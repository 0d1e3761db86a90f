from dataclasses import dataclass


@dataclass(slots=True)
class SimulationState:
    """
    Mutable state of one episode, owned by exactly one MicrogridSimulation.

    ``time_step`` counts steps from 1; ``soh`` never increases within an episode.
    """

    soc: float
    soh: float
    time_step: int = 1
    day_of_year: int = 1
    cycle_accumulator: float = 0.0
    total_energy_traded: float = 0.0  # kWh exchanged with the grid
    total_cost: float = 0.0
    initial_soh: float = 1.0
    max_soc_reached: float = 0.0
    min_soc_reached: float = 1.0

    @classmethod
    def initial(cls, soc: float, soh: float, day_of_year: int) -> "SimulationState":
        return cls(
            soc=soc,
            soh=soh,
            day_of_year=day_of_year,
            initial_soh=soh,
            max_soc_reached=soc,
            min_soc_reached=soc,
        )

    def record_soc(self, soc: float) -> None:
        self.soc = soc
        self.max_soc_reached = max(self.max_soc_reached, soc)
        self.min_soc_reached = min(self.min_soc_reached, soc)

    @property
    def soh_degradation(self) -> float:
        return self.initial_soh - self.soh
