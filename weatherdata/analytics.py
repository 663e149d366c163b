"""
Weather data queries

Pure functions over a parsed record sequence: monthly average
temperature, dates above a temperature threshold, rainy-day count,
plus the temperature categorization used while parsing.
"""
import logging
import math
from datetime import date
from typing import List, Sequence, Tuple

from weatherdata.exceptions import InvalidMonthError, NoDataForMonthError
from weatherdata.models import MonthlyAverage, TemperatureCategory, WeatherRecord

logger = logging.getLogger(__name__)


MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# (low, high, category), bounds inclusive, checked in order
CATEGORY_RULES: Tuple[Tuple[int, int, TemperatureCategory], ...] = (
    (26, 35, TemperatureCategory.HOT),
    (10, 25, TemperatureCategory.WARM),
    (-20, 9, TemperatureCategory.COLD),
)


def categorize_temperature(temperature: float) -> TemperatureCategory:
    """
    Categorize a temperature by its value truncated toward zero

    Args:
        temperature: Degrees Celsius

    Returns:
        HOT for 26..35, WARM for 10..25, COLD for -20..9, else UNKNOWN
    """
    if not math.isfinite(temperature):
        return TemperatureCategory.UNKNOWN

    truncated = math.trunc(temperature)
    for low, high, category in CATEGORY_RULES:
        if low <= truncated <= high:
            return category
    return TemperatureCategory.UNKNOWN


def month_name(month: int) -> str:
    """Return the English name of a month number (1 = January)."""
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidMonthError(month)
    return MONTH_NAMES[month - 1]


def monthly_average_temperature(
    month: int,
    records: Sequence[WeatherRecord]
) -> MonthlyAverage:
    """
    Average temperature over all records in a calendar month

    Records from every year in the data set count toward the month.

    Args:
        month: Month number, 1 (January) to 12 (December)
        records: Parsed weather records

    Returns:
        MonthlyAverage(month_name, average)

    Raises:
        InvalidMonthError: If month is outside 1..12
        NoDataForMonthError: If no record falls in the month
    """
    name = month_name(month)

    temperatures = [r.temperature for r in records if r.date.month == month]
    if not temperatures:
        logger.info(f"No records found for {name}")
        raise NoDataForMonthError(month, name)

    average = sum(temperatures) / len(temperatures)
    logger.debug(f"Average over {len(temperatures)} records in {name}: {average}")

    return MonthlyAverage(name, average)


def temperatures_above(
    threshold: float,
    records: Sequence[WeatherRecord]
) -> List[date]:
    """
    Dates whose temperature is strictly greater than threshold

    Args:
        threshold: Temperature in degrees Celsius
        records: Parsed weather records

    Returns:
        Dates in record order; empty if none qualify
    """
    dates = [r.date for r in records if r.temperature > threshold]
    logger.debug(f"{len(dates)}/{len(records)} records above {threshold}")
    return dates


def count_rainy_days(records: Sequence[WeatherRecord]) -> int:
    """Number of records with precipitation strictly greater than zero."""
    return sum(1 for r in records if r.precipitation > 0)
