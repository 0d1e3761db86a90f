"""Class-level factory for reward manager creation."""

import logging

from microgridsim.reward.config import RewardConfig
from microgridsim.reward.layers import (
    DegradationCostLayer,
    EconomicCostLayer,
    GridConnectionCostLayer,
    SelfSufficiencyLayer,
    SocManagementLayer,
    StabilityLayer,
)
from microgridsim.reward.manager import RewardManager


class RewardManagerFactory:
    """Class-level factory for creating RewardManager instances."""

    logger = logging.getLogger("RewardManagerFactory")

    @classmethod
    def create(cls, config: RewardConfig, name: str = "MicrogridRewards") -> RewardManager:
        """
        Create a RewardManager configured according to the given RewardConfig.

        Layers are added in a fixed order, costs first, and keyed by the
        RewardBreakdown component they produce. A layer whose weight is zero
        is left out.

        Args:
            config: Reward configuration
            name: Name for the reward system

        Returns:
            Configured RewardManager instance
        """
        manager = RewardManager(name)

        if config.economic_weight > 0:
            manager.add_layer(
                EconomicCostLayer(
                    weight=config.economic_weight,
                    import_price_multiplier=config.import_price_multiplier,
                    export_price_multiplier=config.export_price_multiplier,
                ),
            )
            cls.logger.info(f"Added economic cost layer with weight {config.economic_weight}")

        if config.degradation_weight > 0:
            manager.add_layer(
                DegradationCostLayer(
                    weight=config.degradation_weight,
                    cost_per_unit=config.degradation_cost_per_unit,
                ),
            )
            cls.logger.info(f"Added degradation cost layer with weight {config.degradation_weight}")

        if config.grid_connection_weight > 0:
            manager.add_layer(
                GridConnectionCostLayer(
                    weight=config.grid_connection_weight,
                    rate=config.connection_cost_rate,
                ),
            )
            cls.logger.info(
                f"Added grid connection layer with weight {config.grid_connection_weight}"
            )

        if config.soc_management_weight > 0:
            manager.add_layer(
                SocManagementLayer(
                    weight=config.soc_management_weight,
                    comfort_band=config.soc_comfort_band,
                    bonus=config.soc_management_bonus,
                    out_of_band_penalty=config.soc_out_of_band_penalty,
                    target_soc=config.soc_band_target,
                ),
            )
            cls.logger.info(
                f"Added SOC management layer with weight {config.soc_management_weight}"
            )

        if config.stability_weight > 0:
            manager.add_layer(
                StabilityLayer(
                    weight=config.stability_weight,
                    mode=config.stability_mode,
                    target_soc=config.stability_target_soc,
                    penalty_scale=config.stability_penalty_scale,
                    healthy_band=config.healthy_soc_band,
                    min_soh=config.healthy_min_soh,
                    band_bonus=config.healthy_band_bonus,
                ),
            )
            cls.logger.info(
                f"Added {config.stability_mode} stability layer with weight {config.stability_weight}"
            )

        if config.self_sufficiency_weight > 0:
            manager.add_layer(
                SelfSufficiencyLayer(
                    weight=config.self_sufficiency_weight,
                    fraction=config.self_sufficiency_fraction,
                    bonus=config.self_sufficiency_bonus,
                ),
            )
            cls.logger.info(
                f"Added self-sufficiency layer with weight {config.self_sufficiency_weight}"
            )

        return manager
