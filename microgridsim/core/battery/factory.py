from microgridsim.core.battery import aging  # noqa: F401  registers the built-in models
from microgridsim.core.battery.aging import AgingModelBase
from microgridsim.core.battery.config import AgingModelConfig
from microgridsim.core.battery.registry import registry
from microgridsim.errors import ConfigurationError


def build_aging_model(config: AgingModelConfig) -> AgingModelBase:
    """Builds the aging model registered for the given config type."""
    name = config.__class__.__name__
    if name not in registry.models:
        raise ConfigurationError(f"Aging model config '{name}' not found in registry.")
    return registry.models[name](config)
