"""
WeatherData Analysis

Parses a CSV file of daily weather observations and answers
monthly average, temperature threshold and rainy-day queries.
"""

from weatherdata.analytics import (
    MONTH_NAMES,
    categorize_temperature,
    count_rainy_days,
    monthly_average_temperature,
    temperatures_above,
)
from weatherdata.exceptions import (
    DataFileError,
    InvalidMonthError,
    MalformedRowError,
    NoDataForMonthError,
    ParseError,
    QueryError,
    WeatherDataError,
)
from weatherdata.models import MonthlyAverage, TemperatureCategory, WeatherRecord
from weatherdata.parser import WeatherCSVParser, create_parser, parse

__version__ = "0.1.0"

__all__ = [
    "MONTH_NAMES",
    "DataFileError",
    "InvalidMonthError",
    "MalformedRowError",
    "MonthlyAverage",
    "NoDataForMonthError",
    "ParseError",
    "QueryError",
    "TemperatureCategory",
    "WeatherCSVParser",
    "WeatherDataError",
    "WeatherRecord",
    "categorize_temperature",
    "count_rainy_days",
    "create_parser",
    "monthly_average_temperature",
    "parse",
    "temperatures_above",
]
