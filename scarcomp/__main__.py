"""
scarcomp/__main__.py

Command line entry point of the scarcity comparison framework.

Example
-------
    python -m scarcomp --data-dir data --region BE --first-years 3 \\
        --solar 20 --wind-on 10 -n 10 --plot be.png
"""

import argparse
import logging
import sys
from typing import Hashable, List, Optional

import pandas as pd

from .constants import DEFAULT_REGIONS
from .exceptions import InvalidParameterError, ScarcityError
from .input import ReaderConfig, TimeSeriesReader
from .input.reader import year_id
from .interfaces import YearSelection, build_series_store
from .logs import get_logger
from .run import run

logger = logging.getLogger("scarcomp.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_years(text: str) -> List[Hashable]:
    """
    Parse a year selection: ``'1-5'`` (inclusive range), ``'1,3,7'`` or a
    single id. Ranges and lists may be combined: ``'1-3,10'``.
    """
    years: List[Hashable] = []
    for part in text.split(','):
        part = part.strip()
        if not part:
            continue
        start, sep, stop = part.partition('-')
        if sep and start.strip().isdigit() and stop.strip().isdigit():
            first, last = int(start), int(stop)
            if first > last:
                raise InvalidParameterError("years", text, f"range {part} is descending")
            years.extend(range(first, last + 1))
        else:
            years.append(year_id(part))
    if not years:
        raise InvalidParameterError("years", text, "selection must not be empty")
    return years


def create_argparser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.
    Returns configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="scarcomp",
        description="Compare scarcity time steps of the load and the residual load",
    )
    parser.add_argument("--config", type=str, help="YAML reader config file.")
    parser.add_argument("--data-dir", type=str, help="Directory with the time series CSV files.")
    parser.add_argument("--region", type=str, required=True,
                        help=f"Region identifier (default data set: {', '.join(DEFAULT_REGIONS)}).")

    selection = parser.add_mutually_exclusive_group()
    selection.add_argument("--years", type=str, help="Years to consider, e.g. '1-5' or '1,3,7'.")
    selection.add_argument("--first-years", type=int, help="Consider the first K years of the data.")

    parser.add_argument("--solar", type=float, default=0.0, help="Installed solar capacity [GW].")
    parser.add_argument("--wind-on", type=float, default=0.0, help="Installed onshore wind capacity [GW].")
    parser.add_argument("--wind-off", type=float, default=0.0, help="Installed offshore wind capacity [GW].")
    parser.add_argument("-n", type=int, default=10, help="Number of scarcity time steps.")

    parser.add_argument("--delimiter", type=str, help="CSV field delimiter (default ';').")
    parser.add_argument("--decimal", type=str, help="CSV decimal mark (default ',').")
    parser.add_argument("--plot", type=str, help="Save the duration curve and scatter figure here.")
    parser.add_argument("--loglevel", type=str.upper, default="INFO", choices=LOG_LEVELS,
                        help="Set logging level.")
    parser.add_argument("--log-dir", type=str, help="Write a log file to this directory.")
    return parser


def _reader_config(args: argparse.Namespace) -> ReaderConfig:
    overrides = {
        'data_dir': args.data_dir,
        'delimiter': args.delimiter,
        'decimal': args.decimal,
    }
    if args.config:
        return ReaderConfig.from_yaml(args.config, **overrides)
    if args.data_dir is None:
        raise InvalidParameterError("data_dir", None, "--data-dir or --config is required")
    return ReaderConfig.from_dict({}, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = create_argparser().parse_args(argv)
    try:
        get_logger(run_name="scarcomp", region=args.region, log_dir=args.log_dir, level=args.loglevel)
    except OSError as e:
        logger.error(f"Cannot write log file to {args.log_dir}: {e}")
        return 2

    try:
        config = _reader_config(args)
        store = build_series_store(args.region, TimeSeriesReader(config))
        if args.first_years is not None:
            years = YearSelection.first(store, args.first_years)
        elif args.years is not None:
            years = parse_years(args.years)
        else:
            years = None
        capacities = {'Solar': args.solar, 'WindOn': args.wind_on, 'WindOff': args.wind_off}
        analysis = run(store, years=years, capacities=capacities, n=args.n)
    except (ScarcityError, FileNotFoundError, ValueError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 2

    summary = analysis.summary()
    print(pd.Series(summary, dtype=object).to_string())
    print()
    print(analysis.scatter_frame().to_string(index=False))

    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        from .visualization import ScarcityPlotter
        ScarcityPlotter(analysis).plot(save_path=args.plot)
        logger.info(f"Figure saved to {args.plot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
