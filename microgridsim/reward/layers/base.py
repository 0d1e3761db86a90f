from abc import ABC, abstractmethod
import logging

from microgridsim.reward.contexts import RewardContext


class RewardLayer(ABC):
    """
    One term of the microgrid reward.

    Each subclass fills exactly one RewardBreakdown field, named by its
    ``component`` class attribute. Cost layers return negative rewards.
    """

    component: str

    def __init__(self, weight: float = 1.0, enabled: bool = True):
        self.weight = weight
        self.enabled = enabled
        self.name = self.__class__.__name__
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    @abstractmethod
    def calculate_reward(self, context: RewardContext) -> float:
        pass

    def get_weighted_reward(self, context: RewardContext) -> float:
        if not self.enabled:
            return 0.0
        reward = self.calculate_reward(context) * self.weight
        self.logger.debug(f"step {context.time_step}: {self.component}={reward:.4f}")
        return reward
