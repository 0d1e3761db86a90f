import logging

import numpy as np

from microgridsim.sim.factory import build_simulation
from microgridsim.sim.profiles import get_profile

logging.basicConfig(level=logging.DEBUG)

config = get_profile("research")
simulation = build_simulation(config)

obs = simulation.reset()
done = False
while not done:
    # charge on cheap hours, discharge on expensive ones
    price = obs[4]
    power_kw = config.battery.power_rating_kw * float(np.clip(1.0 - price, -1.0, 1.0))
    obs, reward, done, info = simulation.step(power_kw)

for key, value in simulation.summary().items():
    print(f"{key:>24}: {value}")

print(simulation.to_frame().describe())
