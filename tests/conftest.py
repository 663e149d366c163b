"""Shared fixtures for weather data tests."""
import pytest

from weatherdata.config import reset_config
from weatherdata.parser import WeatherCSVParser


HEADER = "date,temperature,humidity,precipitation"

SAMPLE_ROWS = [
    "2023-01-10,-5.0,70,0.0",
    "2023-01-20,8.0,65,1.2",
    "2023-07-04,30.1,45,2.3",
]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate each test from WEATHERDATA_* variables and the cached config"""
    for var in ("DATA_FILE", "FILE_ENCODING", "MALFORMED_ROWS", "LOG_LEVEL"):
        monkeypatch.delenv(f"WEATHERDATA_{var}", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def write_csv(tmp_path):
    """Write a CSV file with the standard header and the given data rows"""
    def _write(rows, name="weatherdata.csv", header=HEADER):
        path = tmp_path / name
        path.write_text("\n".join([header] + list(rows)) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_csv(write_csv):
    """Three-row sample: two January days and one July day"""
    return write_csv(SAMPLE_ROWS)


@pytest.fixture
def sample_records(sample_csv):
    """Records parsed from the sample CSV"""
    return WeatherCSVParser().parse_file(sample_csv)
