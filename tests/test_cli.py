# tests/test_cli.py

"""
Tests for the command line entry point.
"""

import logging

import pytest

from scarcomp.__main__ import main, parse_years
from scarcomp.exceptions import InvalidParameterError
from scarcomp.input.reader import year_id


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("scarcomp")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


@pytest.fixture
def cli_config(csv_data_dir, tmp_path):
    """YAML config pointing at the 24-period CSV fixture."""
    path = tmp_path / "scarcomp.yaml"
    path.write_text(f"data_dir: {csv_data_dir}\nperiods_per_year: 24\n")
    return str(path)


class TestParseYears:
    """Tests for parse_years."""

    @pytest.mark.parametrize("text, expected", [
        ("3", [3]),
        ("1-4", [1, 2, 3, 4]),
        ("1,3,7", [1, 3, 7]),
        ("1-3, 10", [1, 2, 3, 10]),
        ("y1,y2", ["y1", "y2"]),
        ("+1, 02", [1, 2]),
    ])
    def test_valid(self, text, expected):
        assert parse_years(text) == expected

    def test_matches_reader_year_ids(self):
        headers = ["+1", " 2", "-3", "y4"]
        assert parse_years(",".join(headers)) == [year_id(h) for h in headers]

    def test_descending_range(self):
        with pytest.raises(InvalidParameterError, match="descending"):
            parse_years("5-1")

    def test_empty(self):
        with pytest.raises(InvalidParameterError, match="must not be empty"):
            parse_years(" , ")


class TestMain:
    """End-to-end CLI runs."""

    def test_happy_path(self, cli_config, capsys):
        code = main([
            "--config", cli_config, "--region", "BE", "--years", "1-2",
            "--solar", "3", "--wind-on", "1", "-n", "4",
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "confirmation_rate" in out
        assert "residual_load" in out

    def test_first_years(self, cli_config, capsys):
        assert main(["--config", cli_config, "--region", "BE", "--first-years", "2", "-n", "2"]) == 0
        assert "[1, 2]" in capsys.readouterr().out

    def test_writes_plot_and_log(self, cli_config, tmp_path):
        plot_path = tmp_path / "be.png"
        log_dir = tmp_path / "logs"
        code = main([
            "--config", cli_config, "--region", "BE", "-n", "3",
            "--plot", str(plot_path), "--log-dir", str(log_dir),
        ])
        assert code == 0
        assert plot_path.exists()
        assert (log_dir / "scarcomp_BE.log").exists()

    def test_invalid_n_exits_2(self, cli_config, capsys):
        assert main(["--config", cli_config, "--region", "BE", "-n", "0"]) == 2
        assert "InvalidParameterError" in capsys.readouterr().err

    def test_unknown_region_exits_2(self, cli_config):
        assert main(["--config", cli_config, "--region", "FR"]) == 2

    def test_missing_data_dir_exits_2(self):
        assert main(["--region", "BE"]) == 2

    def test_years_and_first_years_exclusive(self, cli_config):
        with pytest.raises(SystemExit):
            main(["--config", cli_config, "--region", "BE", "--years", "1", "--first-years", "1"])

    def test_invalid_loglevel_rejected_by_parser(self, cli_config, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--config", cli_config, "--region", "BE", "--loglevel", "chatty"])
        assert exc.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_loglevel_is_case_insensitive(self, cli_config):
        assert main(["--config", cli_config, "--region", "BE", "--loglevel", "debug"]) == 0
        assert logging.getLogger("scarcomp").level == logging.DEBUG

    def test_unwritable_log_dir_exits_2(self, cli_config, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        code = main(["--config", cli_config, "--region", "BE", "--log-dir", str(blocker)])
        assert code == 2
