from dataclasses import dataclass

from microgridsim.core.battery.config import BatteryConfig


@dataclass(frozen=True, slots=True)
class BatteryTransition:
    """One step of SOC evolution under a commanded power (positive=charge)."""

    commanded_power_kw: float
    applied_power_kw: float
    soc_before: float
    soc_after: float
    delta_energy_kwh: float
    power_clipped: bool
    soc_clipped: bool

    @property
    def cycle_depth(self) -> float:
        return abs(self.soc_after - self.soc_before)


class BatteryModel:
    """Stateless SOC transition; the SOC itself lives in the simulation state."""

    def __init__(self, config: BatteryConfig):
        self._config = config

    @property
    def config(self) -> BatteryConfig:
        return self._config

    @property
    def max_power(self) -> float:
        return self._config.power_rating_kw

    def clamp_power(self, power_kw: float) -> float:
        return min(self.max_power, max(-self.max_power, power_kw))

    def clamp_soc(self, soc: float) -> float:
        return min(self._config.soc_max, max(self._config.soc_min, soc))

    def energy_change_kwh(self, power_kw: float, dt_hours: float) -> float:
        """Energy added to storage; losses are applied on the way in and on the way out."""
        if power_kw > 0:
            return power_kw * dt_hours * self._config.efficiency
        return power_kw * dt_hours / self._config.efficiency

    def apply_power(self, soc: float, power_kw: float, dt_hours: float) -> BatteryTransition:
        applied = self.clamp_power(power_kw)
        delta_energy = self.energy_change_kwh(applied, dt_hours)
        unclamped_soc = soc + delta_energy / self._config.capacity_kwh
        soc_after = self.clamp_soc(unclamped_soc)
        return BatteryTransition(
            commanded_power_kw=power_kw,
            applied_power_kw=applied,
            soc_before=soc,
            soc_after=soc_after,
            delta_energy_kwh=delta_energy,
            power_clipped=applied != power_kw,
            soc_clipped=soc_after != unclamped_soc,
        )
