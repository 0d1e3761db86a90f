"""Loading SimulationConfig from YAML or plain mappings."""

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml
from dacite import Config, from_dict

from microgridsim.errors import ConfigurationError
from microgridsim.sim.config import SimulationConfig
from microgridsim.sim.profiles import get_profile

logger = logging.getLogger(__name__)

# YAML gives lists for tuples and ints for whole-number floats
DACITE_CONFIG = Config(cast=[tuple, float])


def _merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            # a different model type replaces the whole sub-config
            if "type" in value and value["type"] != current.get("type"):
                merged[key] = dict(value)
            else:
                merged[key] = _merge(current, value)
        else:
            merged[key] = value
    return merged


def config_from_dict(data: Mapping[str, Any]) -> SimulationConfig:
    """
    Build a SimulationConfig from a mapping.

    A top-level ``profile`` key selects a named profile as the base; the
    remaining keys override it.
    """
    data = dict(data)
    profile = data.pop("profile", None)
    if profile is not None:
        data = _merge(asdict(get_profile(profile)), data)
        logger.info(f"Loaded configuration from profile '{profile}' with overrides {sorted(data)}")
    return from_dict(data_class=SimulationConfig, data=data, config=DACITE_CONFIG)


def load_config(source: Union[str, Path, Mapping[str, Any]]) -> SimulationConfig:
    """Load a SimulationConfig from a mapping, a YAML file path or a YAML string."""
    if isinstance(source, Mapping):
        return config_from_dict(source)

    path = Path(source)
    if isinstance(source, Path) or (path.suffix in (".yaml", ".yml") and path.exists()):
        logger.info(f"Reading configuration from {path}")
        text = path.read_text()
    else:
        text = str(source)

    data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigurationError("Configuration YAML must contain a mapping at the top level.")
    return config_from_dict(data)
