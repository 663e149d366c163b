"""
Tests for the command line interface
"""
from datetime import date

import pytest

from weatherdata.cli import (
    main,
    render_monthly_average,
    render_rainy_days,
    render_temperatures_above,
    run_menu,
)
from weatherdata.models import MonthlyAverage


def scripted_input(*answers):
    """Return an input function that replays answers, then signals end of input"""
    remaining = list(answers)

    def _input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input


def test_render_monthly_average():
    text = render_monthly_average(MonthlyAverage("January", 1.5), "weatherdata.csv")

    assert text.startswith("[Average Temperature]\n")
    assert "Based on the data from the weatherdata.csv file," in text
    assert "The average temperature in January is,\n1.500000 Celsius." in text


def test_render_temperatures_above():
    text = render_temperatures_above(
        10.0, [date(2023, 7, 4), date(2023, 7, 5)], "weatherdata.csv"
    )

    assert text.startswith("[Temperatures Above]\n")
    assert "above 10.000000 Celsius are," in text
    assert "2023-07-04\n2023-07-05\n" in text


def test_render_temperatures_above_none():
    text = render_temperatures_above(50.0, [], "weatherdata.csv")
    assert "(none)" in text


def test_render_rainy_days():
    text = render_rainy_days(2, "weatherdata.csv")

    assert text.startswith("[Rainy Days]\n")
    assert "There are 2 rainy days in the weatherdata.csv file." in text


class TestMainSubcommands:
    """One-shot query mode"""

    def test_average(self, sample_csv, capsys):
        assert main(["--file", str(sample_csv), "average", "1"]) == 0

        out = capsys.readouterr().out
        assert "The average temperature in January is,\n1.500000 Celsius." in out

    def test_average_no_data(self, sample_csv, capsys):
        assert main(["--file", str(sample_csv), "average", "3"]) == 1
        assert "No weather data for March" in capsys.readouterr().err

    def test_average_invalid_month(self, sample_csv, capsys):
        assert main(["--file", str(sample_csv), "average", "13"]) == 1
        assert "Invalid month number: 13" in capsys.readouterr().err

    def test_above(self, sample_csv, capsys):
        assert main(["--file", str(sample_csv), "above", "10"]) == 0

        out = capsys.readouterr().out
        assert "2023-07-04" in out
        assert "2023-01-20" not in out

    def test_rainy(self, sample_csv, capsys):
        assert main(["--file", str(sample_csv), "rainy"]) == 0
        assert "There are 2 rainy days in the weatherdata.csv file." in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["--file", str(tmp_path / "missing.csv"), "rainy"]) == 1
        assert "No weather data found" in capsys.readouterr().err

    def test_malformed_row(self, write_csv, capsys):
        path = write_csv(["2023-02-01,abc,50,0.0"])

        assert main(["--file", str(path), "rainy"]) == 1
        assert "2023-02-01,abc,50,0.0" in capsys.readouterr().err

    def test_skip_malformed_flag(self, write_csv, capsys):
        path = write_csv(["2023-02-01,abc,50,0.0", "2023-07-04,30.1,45,2.3"])

        assert main(["--file", str(path), "--skip-malformed", "rainy"]) == 0
        assert "There are 1 rainy days" in capsys.readouterr().out

    def test_no_skip_malformed_overrides_environment(self, write_csv, monkeypatch, capsys):
        monkeypatch.setenv("WEATHERDATA_MALFORMED_ROWS", "skip")
        path = write_csv(["2023-02-01,abc,50,0.0", "2023-07-04,30.1,45,2.3"])

        assert main(["--file", str(path), "rainy"]) == 0
        capsys.readouterr()

        assert main(["--file", str(path), "--no-skip-malformed", "rainy"]) == 1
        assert "2023-02-01,abc,50,0.0" in capsys.readouterr().err

    def test_invalid_log_level_in_environment(self, sample_csv, monkeypatch, capsys):
        monkeypatch.setenv("WEATHERDATA_LOG_LEVEL", "TRACE")

        assert main(["--file", str(sample_csv), "rainy"]) == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_data_file_from_environment(self, sample_csv, monkeypatch, capsys):
        monkeypatch.setenv("WEATHERDATA_DATA_FILE", str(sample_csv))

        assert main(["rainy"]) == 0
        assert "There are 2 rainy days" in capsys.readouterr().out

    def test_bad_usage(self, sample_csv):
        with pytest.raises(SystemExit) as exc_info:
            main(["--file", str(sample_csv), "average", "January"])
        assert exc_info.value.code == 2


class TestMenu:
    """Interactive menu loop"""

    def test_exit(self, sample_records, capsys):
        run_menu(sample_records, "weatherdata.csv", scripted_input("0"))
        assert "Successfully exited" in capsys.readouterr().out

    def test_all_queries(self, sample_records, capsys):
        run_menu(
            sample_records,
            "weatherdata.csv",
            scripted_input("1", "1", "2", "10.0", "3", "0"),
        )
        out = capsys.readouterr().out

        assert "1.500000 Celsius." in out
        assert "2023-07-04" in out
        assert "There are 2 rainy days" in out
        assert "Successfully exited" in out

    def test_query_errors_do_not_end_loop(self, sample_records, capsys):
        run_menu(
            sample_records,
            "weatherdata.csv",
            scripted_input("1", "13", "1", "3", "3", "0"),
        )
        out = capsys.readouterr().out

        assert "Invalid month number: 13" in out
        assert "No weather data for March" in out
        assert "There are 2 rainy days" in out
        assert "Successfully exited" in out

    def test_invalid_choice_and_number(self, sample_records, capsys):
        run_menu(
            sample_records,
            "weatherdata.csv",
            scripted_input("7", "x", "2", "warm", "50", "0"),
        )
        out = capsys.readouterr().out

        assert out.count("Invalid choice") == 2
        assert "Not a valid number: 'warm'" in out
        assert "(none)" in out

    def test_end_of_input(self, sample_records, capsys):
        run_menu(sample_records, "weatherdata.csv", scripted_input("3"))

        out = capsys.readouterr().out
        assert "There are 2 rainy days" in out
        assert "Successfully exited" not in out

    def test_default_command_is_menu(self, sample_csv, monkeypatch, capsys):
        answers = scripted_input("3", "0")
        monkeypatch.setattr("builtins.input", answers)

        assert main(["--file", str(sample_csv)]) == 0

        out = capsys.readouterr().out
        assert "There are 2 rainy days" in out
        assert "Successfully exited" in out
