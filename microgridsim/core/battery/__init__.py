from microgridsim.core.battery.aging import (
    AgingModelBase,
    CycleCalendarAgingModel,
    DegradationEvent,
    ThroughputAgingModel,
)
from microgridsim.core.battery.config import (
    AgingModelConfig,
    BatteryConfig,
    CycleCalendarAgingConfig,
    ThroughputAgingConfig,
)
from microgridsim.core.battery.factory import build_aging_model
from microgridsim.core.battery.model import BatteryModel, BatteryTransition

__all__ = [
    "AgingModelBase",
    "AgingModelConfig",
    "BatteryConfig",
    "BatteryModel",
    "BatteryTransition",
    "CycleCalendarAgingConfig",
    "CycleCalendarAgingModel",
    "DegradationEvent",
    "ThroughputAgingConfig",
    "ThroughputAgingModel",
    "build_aging_model",
]
