"""
Weather CSV parser

Reads a comma-delimited file of daily observations
(date, temperature, humidity, precipitation), skips the header line
and converts each data line to a WeatherRecord.
"""
import logging
import re
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from weatherdata.analytics import categorize_temperature
from weatherdata.config import AnalysisConfig, get_config
from weatherdata.exceptions import DataFileError, MalformedRowError
from weatherdata.models import WeatherRecord

logger = logging.getLogger(__name__)


FIELDS = ("date", "temperature", "humidity", "precipitation")

ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

INTEGER = re.compile(r"[+-]?[0-9]+")

# ASCII decimal with optional exponent, plus the non-finite spellings float() accepts
DECIMAL = re.compile(
    r"[ \t]*[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf|infinity)[ \t]*",
    re.IGNORECASE
)


class WeatherCSVParser:
    """Parser for daily weather observation CSV files"""

    def __init__(self, encoding: str = "utf-8", skip_malformed: bool = False):
        """
        Initialize parser

        Args:
            encoding: Text encoding of the input file
            skip_malformed: Drop malformed rows with a warning instead of
                aborting the parse
        """
        self.encoding = encoding
        self.skip_malformed = skip_malformed

    def parse_file(self, path: Union[str, Path]) -> Tuple[WeatherRecord, ...]:
        """
        Parse a weather CSV file

        Args:
            path: Path to the CSV file; the first line is a header

        Returns:
            Records in file order

        Raises:
            DataFileError: If the file cannot be opened or decoded
            MalformedRowError: On the first bad row, unless skipping
        """
        logger.info(f"Parsing file: {path}")

        try:
            with open(path, encoding=self.encoding, newline="") as f:
                records = self.parse_lines(f)
        except MalformedRowError as e:
            logger.error(f"Failed to parse {path}: {e}")
            raise
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise DataFileError(str(path), reason=str(e)) from e

        logger.info(f"Parsed {len(records)} records from {path}")
        if not records:
            logger.warning(f"No data rows found in {path}")

        return records

    def parse_lines(self, lines: Iterable[str]) -> Tuple[WeatherRecord, ...]:
        """
        Parse CSV lines, the first of which is a header

        Args:
            lines: Raw text lines, with or without line terminators

        Returns:
            Records in input order
        """
        records: List[WeatherRecord] = []
        skipped = 0

        for line_number, raw in enumerate(lines, start=1):
            if line_number == 1:
                continue

            line = raw.rstrip("\r\n")
            try:
                records.append(self.parse_row(line, line_number))
            except MalformedRowError as e:
                if not self.skip_malformed:
                    raise
                skipped += 1
                logger.warning(f"Skipping {e}")

        if skipped:
            logger.warning(f"Skipped {skipped} malformed rows")

        return tuple(records)

    def parse_row(self, line: str, line_number: int = 0) -> WeatherRecord:
        """
        Convert one data line to a record

        Fields past the fourth are ignored.

        Args:
            line: Data line without its terminator
            line_number: 1-based position in the file, for diagnostics

        Returns:
            WeatherRecord with its temperature category filled in
        """
        fields = line.split(",")
        if len(fields) < len(FIELDS):
            raise MalformedRowError(
                line_number, line,
                f"expected {len(FIELDS)} fields, got {len(fields)}"
            )

        date_str, temp_str, humidity_str, precip_str = fields[:len(FIELDS)]

        try:
            if not ISO_DATE.fullmatch(date_str):
                raise ValueError(date_str)
            observed = date.fromisoformat(date_str)
        except ValueError:
            raise MalformedRowError(line_number, line, f"invalid date: {date_str!r}") from None

        try:
            if not DECIMAL.fullmatch(temp_str):
                raise ValueError(temp_str)
            temperature = float(temp_str)
        except ValueError:
            raise MalformedRowError(line_number, line, f"invalid temperature: {temp_str!r}") from None

        try:
            if not INTEGER.fullmatch(humidity_str):
                raise ValueError(humidity_str)
            humidity = int(humidity_str)
        except ValueError:
            raise MalformedRowError(line_number, line, f"invalid humidity: {humidity_str!r}") from None

        try:
            if not DECIMAL.fullmatch(precip_str):
                raise ValueError(precip_str)
            precipitation = float(precip_str)
        except ValueError:
            raise MalformedRowError(line_number, line, f"invalid precipitation: {precip_str!r}") from None

        return WeatherRecord(
            date=observed,
            temperature=temperature,
            humidity=humidity,
            precipitation=precipitation,
            category=categorize_temperature(temperature),
        )


def create_parser(config: Optional[AnalysisConfig] = None) -> WeatherCSVParser:
    """
    Factory function to create a parser instance

    Args:
        config: Settings to take encoding and malformed-row policy from
            (default: global config)

    Returns:
        WeatherCSVParser instance
    """
    config = config or get_config()
    return WeatherCSVParser(
        encoding=config.file_encoding,
        skip_malformed=config.skip_malformed,
    )


def parse(path: Union[str, Path]) -> Tuple[WeatherRecord, ...]:
    """Parse a weather CSV file using the global configuration."""
    return create_parser().parse_file(path)
