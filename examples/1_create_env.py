import logging

import yaml

from microgridsim.config import config_from_dict
from microgridsim.rl.factory import EnvironmentConfig, EnvironmentFactory

logging.basicConfig(level=logging.INFO)

yaml_str = """
simulation:
  profile: default_7day
  horizon_days: 3
  random_seed: 7
  battery:
    capacity_kwh: 100
    power_rating_kw: 50
    efficiency: 0.95
    soc_min: 0.1
    soc_max: 0.9
  aging:
    type: cycle_calendar
    cycle_rate_constant: 2.0e-6
    calendar_rate_constant: 1.0e-7
  reward:
    stability_mode: quadratic
    soc_comfort_band: [0.2, 0.8]
  signals:
    horizon_hours: 72
    weather_pattern: seasonal
    load_pattern: commercial
    price_pattern: time_of_use
    pv_capacity_kw: 120
wrappers:
  misc:
    record_statistics: true
  action_space:
    clip_actions: true
    normalized: true
"""

yaml_cfg = yaml.safe_load(yaml_str)

env_config = EnvironmentConfig(
    simulation=config_from_dict(yaml_cfg["simulation"]),
    wrappers=yaml_cfg["wrappers"],
)

print("Environment configuration loaded successfully.")
print(env_config)

environment = EnvironmentFactory.create_environment(env_config)
print("Environment created successfully.")

obs, info = environment.reset(seed=7)
print(f"Environment reset successfully. Initial observation: {obs}")

terminated = truncated = False
while not (terminated or truncated):
    action = environment.action_space.sample()
    obs, reward, terminated, truncated, info = environment.step(action)
    print(
        f"Step {info['time_step'] - 1}: reward {reward:.3f}, soc {obs[2]:.3f}, soh {obs[3]:.6f}, "
        f"grid {info['grid_power_exchange']:.1f} kW"
    )
print(f"Episode finished ({info['termination_reason']}), total cost {info['total_cost']:.2f}")
