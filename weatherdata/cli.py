"""
Command line interface

Loads the weather CSV once, then either answers a single query
(average, above, rainy) or runs the interactive numbered menu.
"""
import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from weatherdata import __version__
from weatherdata.analytics import (
    count_rainy_days,
    monthly_average_temperature,
    temperatures_above,
)
from weatherdata.config import AnalysisConfig, get_config
from weatherdata.exceptions import ParseError, QueryError
from weatherdata.models import MonthlyAverage, WeatherRecord
from weatherdata.parser import WeatherCSVParser

logger = logging.getLogger(__name__)


MENU = (
    "Select one of the following options by entering a number from the list:\n"
    "0 - Exit\n"
    "1 - Show average temperature of a month\n"
    "2 - Show days that are above a given temperature\n"
    "3 - Show number of rainy days"
)


def render_monthly_average(result: MonthlyAverage, source: str) -> str:
    """Format a monthly average as a report block."""
    return (
        "[Average Temperature]\n"
        f"Based on the data from the {source} file,\n"
        "\n"
        f"The average temperature in {result.month_name} is,\n"
        f"{result.average:f} Celsius.\n"
    )


def render_temperatures_above(threshold: float, dates: Sequence[date], source: str) -> str:
    """Format the dates above a threshold as a report block, one date per line."""
    if dates:
        listing = "\n".join(d.isoformat() for d in dates)
    else:
        listing = "(none)"
    return (
        "[Temperatures Above]\n"
        f"Based on the data from the {source} file,\n"
        "\n"
        f"The dates with temperatures above {threshold:f} Celsius are,\n"
        f"{listing}\n"
    )


def render_rainy_days(count: int, source: str) -> str:
    """Format the rainy-day count as a report block."""
    return (
        "[Rainy Days]\n"
        f"Based on the data from the {source} file,\n"
        "\n"
        f"There are {count} rainy days in the {source} file.\n"
    )


def _prompt_number(
    prompt: str,
    convert: Callable[[str], float],
    input_func: Callable[[str], str]
):
    """Ask until the answer converts; EOFError propagates to the caller."""
    while True:
        answer = input_func(prompt + "\n").strip()
        try:
            return convert(answer)
        except ValueError:
            print(f"Not a valid number: {answer!r}")


def run_menu(
    records: Sequence[WeatherRecord],
    source: str,
    input_func: Optional[Callable[[str], str]] = None
) -> None:
    """
    Interactive menu loop

    Query errors are reported and the loop continues. Ends on choice 0
    or end of input.

    Args:
        records: Parsed weather records
        source: File name shown in the report blocks
        input_func: Reads one line of user input (default: builtin input)
    """
    input_func = input_func or input

    while True:
        try:
            choice = input_func(MENU + "\n").strip()

            if choice == "0":
                print("Successfully exited")
                return
            elif choice == "1":
                month = _prompt_number("Enter a month as a number from 1 to 12", int, input_func)
                try:
                    result = monthly_average_temperature(month, records)
                except QueryError as e:
                    print(e)
                    continue
                print(render_monthly_average(result, source))
            elif choice == "2":
                threshold = _prompt_number("Enter a minimum temperature", float, input_func)
                dates = temperatures_above(threshold, records)
                print(render_temperatures_above(threshold, dates, source))
            elif choice == "3":
                print(render_rainy_days(count_rainy_days(records), source))
            else:
                print("Invalid choice")
        except EOFError:
            logger.debug("End of input, leaving menu")
            return


def build_arg_parser(config: AnalysisConfig) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from config"""
    parser = argparse.ArgumentParser(
        prog="weatherdata",
        description="Analyze daily weather observations from a CSV file"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--file",
        default=config.data_file,
        help=f"Path to the weather CSV file (default: {config.data_file})"
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level (default: {config.log_level})"
    )
    parser.add_argument(
        "--skip-malformed",
        action=argparse.BooleanOptionalAction,
        default=config.skip_malformed,
        help="Skip malformed rows instead of stopping at the first one"
    )

    subparsers = parser.add_subparsers(dest="command")

    average = subparsers.add_parser("average", help="Average temperature of a month")
    average.add_argument("month", type=int, help="Month number, 1 to 12")

    above = subparsers.add_parser("above", help="Dates above a temperature")
    above.add_argument("threshold", type=float, help="Temperature in Celsius")

    subparsers.add_parser("rainy", help="Number of rainy days")
    subparsers.add_parser("menu", help="Interactive menu (default)")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI"""
    try:
        config = get_config()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    args = build_arg_parser(config).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    parser = WeatherCSVParser(
        encoding=config.file_encoding,
        skip_malformed=args.skip_malformed
    )
    source = Path(args.file).name

    try:
        records = parser.parse_file(args.file)
    except ParseError as e:
        print(f"No weather data found: {e}", file=sys.stderr)
        return 1

    command = args.command or "menu"
    logger.info(f"Running '{command}' over {len(records)} records")

    if command == "menu":
        run_menu(records, source)
        return 0

    try:
        if command == "average":
            print(render_monthly_average(
                monthly_average_temperature(args.month, records), source
            ))
        elif command == "above":
            print(render_temperatures_above(
                args.threshold, temperatures_above(args.threshold, records), source
            ))
        elif command == "rainy":
            print(render_rainy_days(count_rainy_days(records), source))
    except QueryError as e:
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
