from dataclasses import dataclass, field


@dataclass
class Registry:
    """Maps aging model config class names to model classes."""

    models: dict = field(default_factory=dict)


registry = Registry()


def register_model(config_cls):
    """Decorator to register a model class with its config class."""

    def decorator(cls):
        registry.models[config_cls.__name__] = cls
        return cls

    return decorator
