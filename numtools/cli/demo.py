# cli/demo.py   (external demo script)

import argparse
import logging

import pandas as pd

from numtools import geomspace, linspace, LogInterpolationExplorer
from numtools.constants import DEFAULT_NUM
from numtools.facade.explorer import sqrtm1_table
from numtools.visualization import plots


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(description="numtools demo")
    parser.add_argument("--num", type=int, default=DEFAULT_NUM, help="grid size")
    parser.add_argument("--no-plot", action="store_true", help="only print the tables")
    return parser


def main(argv=None) -> None:
    args = create_argument_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    pd.set_option("display.width", 120)

    print("linspace(0, 1, 5)    =", linspace(0.0, 1.0, 5))
    print("geomspace(1, 1e4, 5) =", geomspace(1, 1e4, 5))

    table = sqrtm1_table(geomspace(1e-20, 1.0, 21))
    print(table)

    # power law y = x^-2 cut off to zero at the last sample
    x = geomspace(1.0, 100.0, 9)
    y = x ** -2.0
    y[-1] = 0.0
    explorer = LogInterpolationExplorer(x, y)
    df = explorer.tabulate(args.num)
    print(df)
    print("loglog at x = 0:", explorer.evaluate("loglog", 0.0))

    if not args.no_plot:
        plots.plot_sqrtm1(table)
        explorer.plot(args.num)


if __name__ == "__main__":
    main()
