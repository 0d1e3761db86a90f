import argparse
import logging

from microgridsim.core.data.config import ExogenousSignalConfig
from microgridsim.core.data.generator import generate_series

logging.basicConfig(level=logging.INFO)

parser = argparse.ArgumentParser(description="Generate synthetic PV/load/price series and write them to CSV.")
parser.add_argument("--days", type=int, default=30)
parser.add_argument("--weather", default="seasonal")
parser.add_argument("--load", default="commercial")
parser.add_argument("--price", default="time_of_use")
parser.add_argument("--seed", type=int, default=42)
parser.add_argument("--output", default="signals.csv")
args = parser.parse_args()

config = ExogenousSignalConfig(
    horizon_hours=args.days * 24,
    weather_pattern=args.weather,
    load_pattern=args.load,
    price_pattern=args.price,
    random_seed=args.seed,
)
frame = generate_series(config).to_frame()
frame.to_csv(args.output)
print(f"Wrote {len(frame)} hours of signals to {args.output}")
