"""Cost terms derived from a step's grid exchange and aging."""

from microgridsim.reward.contexts import RewardContext


class GridExchangeCalculator:
    """Energy-based costs of exchanging power with the grid."""

    @staticmethod
    def exchanged_energy_kwh(context: RewardContext) -> float:
        return abs(context.grid_power_kw) * context.dt_hours

    @staticmethod
    def energy_cost(
        context: RewardContext,
        import_multiplier: float = 1.0,
        export_multiplier: float = 1.0,
    ) -> float:
        """
        Cost of the exchanged energy at the step's price.

        Exports are charged too (the network is not a free sink); a separate
        multiplier lets callers discount them.
        """
        multiplier = import_multiplier if context.is_importing else export_multiplier
        return GridExchangeCalculator.exchanged_energy_kwh(context) * context.price * multiplier

    @staticmethod
    def connection_cost(context: RewardContext, rate: float) -> float:
        return GridExchangeCalculator.exchanged_energy_kwh(context) * rate


class DegradationCostCalculator:
    @staticmethod
    def capacity_loss_kwh(context: RewardContext) -> float:
        return context.soh_decrement * context.battery_capacity_kwh

    @staticmethod
    def cost(context: RewardContext, cost_per_unit: float) -> float:
        return DegradationCostCalculator.capacity_loss_kwh(context) * cost_per_unit
