#!/usr/bin/env python3
"""
Command-line interface for the POTD generator.
"""

import argparse
import platform
import sys
from typing import Any, List, Optional

import tqdm

from potd.core.dates import CalendarDate, date_range, parse_date
from potd.core.engine import PotdEngine, PotdRecord
from potd.core.worker import ParallelRangeRunner
from potd.formatter import FORMATS, ResultFormatter, emit
from potd.utils.config import Config, verbosity_to_level
from potd.utils.exceptions import ConfigError, PotdError
from potd.utils.logger import Logger


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="potd",
        description="ARRIS/CommScope password-of-the-day generator",
    )

    generation_group = parser.add_argument_group("Generation Options")
    generation_group.add_argument(
        "-s",
        "--seed",
        help="String of 4-8 characters, used in password generation to mutate output",
    )
    mode_group = generation_group.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-d", "--date", help="Generate a password for the given date (default: today)"
    )
    mode_group.add_argument(
        "-r",
        "--range",
        nargs=2,
        metavar=("START", "END"),
        help="Generate a list of passwords given start and end dates",
    )
    mode_group.add_argument(
        "-D", "--des", action="store_true", help="Output DES representation of seed"
    )
    generation_group.add_argument(
        "--date-format",
        help="strftime format for parsing input dates and printing output dates "
        "(default: %%Y-%%m-%%d)",
    )

    performance_group = parser.add_argument_group("Performance Options")
    performance_group.add_argument(
        "-p",
        "--processes",
        type=_positive_int,
        help="Number of processes to use for date ranges",
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        help="Password output format, either text or json",
    )
    output_group.add_argument(
        "-o", "--output", help="Password or list will be written to given filename"
    )
    output_group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print output to console even when writing to file",
    )
    output_group.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not show a progress bar while writing a range to file",
    )
    output_group.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity level",
    )
    output_group.add_argument("--log-file", help="Save log output to this file")
    output_group.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress log messages on the console"
    )

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument("--config", help="Path to configuration file")
    config_group.add_argument(
        "--save-config",
        action="store_true",
        help="Save current settings as default configuration",
    )

    return parser


def _option(args, name: str, config: Config, key: Optional[str] = None) -> Any:
    """Command-line value if given, otherwise the configured one"""
    value = getattr(args, name, None)
    if value is not None:
        return value
    return config.get(key or name)


def setup_logger(args, config: Config) -> Logger:
    """Set up logging based on command-line arguments and config"""
    return Logger(
        name="potd",
        log_file=_option(args, "log_file", config),
        level=verbosity_to_level(_option(args, "log_level", config, "verbosity")),
        console=not args.quiet,
    )


def log_system_info(logger) -> None:
    """Log system information useful for debugging"""
    logger.debug(f"Python version: {platform.python_version()}")
    logger.debug(f"Platform: {platform.platform()}")
    logger.debug(f"tqdm version: {tqdm.__version__}")


def save_config_from_args(args, config: Config) -> None:
    """Save configuration from command-line arguments"""
    if args.seed is not None:
        config.set("seed", args.seed)
    if args.format is not None:
        config.set("format", args.format)
    if args.date_format is not None:
        config.set("date_format", args.date_format)
    if args.processes is not None:
        config.set("processes", args.processes)
    if args.log_level is not None:
        config.set("verbosity", args.log_level)
    if args.log_file is not None:
        config.set("log_file", args.log_file)
    if args.no_progress:
        config.set("show_progress", False)

    config.save()


def generate_range_records(seed: str, start: CalendarDate, end: CalendarDate,
                           processes: Optional[int], show_progress: bool,
                           logger) -> List[PotdRecord]:
    """Generate every record of a range, optionally in parallel with a progress bar"""
    if processes is not None and processes < 1:
        raise ConfigError(f"processes must be at least 1, got {processes}")
    total = len(date_range(start, end))

    with tqdm.tqdm(total=total, unit="day", file=sys.stderr,
                   disable=not show_progress) as progress_bar:
        if processes is None or processes > 1:
            runner = ParallelRangeRunner(seed, processes=processes, logger=logger)
            return runner.run(start, end, progress_callback=progress_bar.update)

        engine = PotdEngine(seed, logger=logger)
        records = []
        for record in engine.generate_range(start, end):
            records.append(record)
            progress_bar.update(1)
        return records


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the POTD generator CLI

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except PotdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger = setup_logger(args, config).get_logger()

    try:
        log_system_info(logger)

        if args.save_config:
            save_config_from_args(args, config)
            logger.info(f"Configuration saved to {config.config_path}")

        seed = _option(args, "seed", config)
        date_format = _option(args, "date_format", config)
        formatter = ResultFormatter(_option(args, "format", config), date_format)

        if args.des:
            engine = PotdEngine(seed, logger=logger)
            text = formatter.render_des(seed, engine.describe_key())
        elif args.range:
            start = parse_date(args.range[0], date_format)
            end = parse_date(args.range[1], date_format)
            show_progress = (
                bool(args.output)
                and not args.no_progress
                and not args.quiet
                and bool(config.get("show_progress", True))
            )
            records = generate_range_records(
                seed,
                start,
                end,
                processes=_option(args, "processes", config),
                show_progress=show_progress,
                logger=logger,
            )
            text = formatter.render_records(records)
        else:
            date = parse_date(args.date, date_format) if args.date else CalendarDate.today()
            engine = PotdEngine(seed, logger=logger)
            text = formatter.render_record(engine.generate(date))

        emit(text, output_file=args.output, verbose=args.verbose)
        if args.output:
            logger.info(f"Output written to {args.output}")
        return 0

    except PotdError as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error(f"Error: {str(e)}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
