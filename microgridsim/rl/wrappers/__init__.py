from microgridsim.rl.wrappers.normalized_power import NormalizedPowerWrapper

__all__ = ["NormalizedPowerWrapper"]
