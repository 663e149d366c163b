"""Configuration management for weather data analysis."""

from typing import Literal, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings


class AnalysisConfig(BaseSettings):
    """Analysis configuration, read from WEATHERDATA_* environment variables."""
    
    # Input data
    data_file: str = "weatherdata.csv"
    file_encoding: str = "utf-8"
    
    # What to do with a row that fails to parse
    malformed_rows: Literal["abort", "skip"] = "abort"
    
    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    
    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value
    
    @property
    def skip_malformed(self) -> bool:
        """Whether malformed rows are dropped instead of aborting the parse."""
        return self.malformed_rows == "skip"
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "WEATHERDATA_"
        case_sensitive = False


# Global config instance
_config: Optional[AnalysisConfig] = None


def get_config() -> AnalysisConfig:
    """Get or create global configuration instance."""
    global _config
    if _config is None:
        _config = AnalysisConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next lookup re-reads the environment."""
    global _config
    _config = None
