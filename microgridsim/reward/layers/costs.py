from microgridsim.reward.calculators import DegradationCostCalculator, GridExchangeCalculator
from microgridsim.reward.contexts import RewardContext
from microgridsim.reward.layers.base import RewardLayer


class EconomicCostLayer(RewardLayer):
    """Penalizes the priced energy exchanged with the grid."""

    component = "economic_cost"

    def __init__(
        self,
        weight: float = 1.0,
        import_price_multiplier: float = 1.0,
        export_price_multiplier: float = 1.0,
        enabled: bool = True,
    ):
        super().__init__(weight, enabled)
        self.import_price_multiplier = import_price_multiplier
        self.export_price_multiplier = export_price_multiplier

    def calculate_reward(self, context: RewardContext) -> float:
        cost = GridExchangeCalculator.energy_cost(
            context, self.import_price_multiplier, self.export_price_multiplier
        )
        return -cost


class DegradationCostLayer(RewardLayer):
    component = "degradation_cost"

    def __init__(self, weight: float = 1.0, cost_per_unit: float = 0.25, enabled: bool = True):
        super().__init__(weight, enabled)
        self.cost_per_unit = cost_per_unit

    def calculate_reward(self, context: RewardContext) -> float:
        return -DegradationCostCalculator.cost(context, self.cost_per_unit)


class GridConnectionCostLayer(RewardLayer):
    """Small friction term on any grid exchange."""

    component = "grid_connection_cost"

    def __init__(self, weight: float = 1.0, rate: float = 0.05, enabled: bool = True):
        super().__init__(weight, enabled)
        self.rate = rate

    def calculate_reward(self, context: RewardContext) -> float:
        return -GridExchangeCalculator.connection_cost(context, self.rate)
