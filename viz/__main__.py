"""Allow running as `python -m viz`."""

import argparse

from viz.examples import DEFAULT_ORDERS, OUTPUT_DIR, main

parser = argparse.ArgumentParser()
parser.add_argument(
    "--orders",
    type=int,
    nargs="+",
    default=DEFAULT_ORDERS,
    help="Curve orders to draw, one panel each (default: 1-6)",
)
parser.add_argument(
    "--smooth",
    type=int,
    default=0,
    help="Chaikin corner-cutting iterations (default: 0, sharp corners)",
)
parser.add_argument(
    "-o", "--output-dir",
    default=OUTPUT_DIR,
    help="Directory for the PNG (default: viz/output)",
)
args = parser.parse_args()
main(orders=args.orders, smooth=args.smooth, output_dir=args.output_dir)
