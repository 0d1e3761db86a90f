import gymnasium as gym
import numpy as np
from gymnasium import spaces
from gymnasium.core import ActType, ObsType, WrapperActType
from gymnasium.wrappers import TransformAction


class NormalizedPowerWrapper(
    TransformAction[ObsType, WrapperActType, ActType],
    gym.utils.RecordConstructorArgs,
):
    """Exposes the battery command as a fraction of rated power in [-1, 1].

    Example:
        >>> env = NormalizedPowerWrapper(EpisodeController(simulation))
        >>> env.action_space
        Box(-1.0, 1.0, (1,), float64)
        >>> env.step(np.array([0.5]))  # charge at half the rated power
    """

    def __init__(self, env: gym.Env):
        gym.utils.RecordConstructorArgs.__init__(self)
        if not (isinstance(env.action_space, spaces.Box) and env.action_space.shape == (1,)):
            raise ValueError(f"Expected a Box action space with shape (1,). Got {env.action_space}.")

        self.power_rating_kw = float(env.action_space.high[0])
        TransformAction.__init__(
            self,
            env=env,
            func=lambda normalized: np.asarray(normalized, dtype=np.float64) * self.power_rating_kw,
            action_space=spaces.Box(low=-1.0, high=1.0, shape=(1,), dtype=np.float64),
        )
