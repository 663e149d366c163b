"""Weather record model and query result types."""

import datetime
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class TemperatureCategory(str, Enum):
    """Temperature label assigned to each record at parse time."""
    
    HOT = "Hot"
    WARM = "Warm"
    COLD = "Cold"
    UNKNOWN = "Unknown"
    
    def __str__(self) -> str:
        return self.value


class WeatherRecord(BaseModel):
    """One daily weather observation. Immutable once created."""
    
    model_config = ConfigDict(frozen=True)
    
    date: datetime.date
    temperature: float = Field(..., description="Degrees Celsius")
    humidity: int = Field(..., description="Relative humidity (%)")
    precipitation: float = Field(..., description="Precipitation amount")
    category: TemperatureCategory


class MonthlyAverage(NamedTuple):
    """Result of a monthly average temperature query."""
    
    month_name: str
    average: float
