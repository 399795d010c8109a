# tests/test_run.py

"""
Tests for the unified run interface.
"""

import numpy as np
import pytest

from scarcomp import run, run_from_directory
from scarcomp.constants import HOURS_PER_YEAR
from scarcomp.exceptions import InvalidParameterError, MissingDataError


class TestRun:
    """run() on in-memory stores."""

    def test_defaults_to_all_years(self, store):
        analysis = run(store, n=10)
        assert analysis.years == (1, 2, 3)
        assert len(analysis.load_curve) == 3 * HOURS_PER_YEAR

    def test_pipeline_pieces_are_consistent(self, store):
        analysis = run(store, years=[2], capacities={"Solar": 4, "WindOn": 2}, n=25)
        np.testing.assert_array_equal(analysis.load_curve, np.sort(analysis.flat.load)[::-1])
        np.testing.assert_array_equal(analysis.residual_curve, np.sort(analysis.flat.residual)[::-1])
        np.testing.assert_array_equal(
            analysis.scarcity.residual_top_values, analysis.residual_curve[:25]
        )
        np.testing.assert_array_equal(
            analysis.scarcity.load_values, analysis.load_curve[:25]
        )

    def test_summary(self, tiny_store):
        analysis = run(tiny_store, years=[2001], capacities={"Solar": 40}, n=2)
        summary = analysis.summary()
        assert summary["region"] == "BE"
        assert summary["years"] == [2001]
        assert summary["capacities"] == {"Solar": 40.0, "WindOff": 0.0, "WindOn": 0.0}
        assert summary["n"] == 2
        # load top-2: 100 (res 80) and 90 (res 90); residual top-2 values: 90, 80
        assert summary["n_confirmed"] == 2
        assert summary["peak_load"] == 100.0
        assert summary["peak_residual_load"] == 90.0
        assert summary["min_residual_load"] == 60.0

    def test_scatter_frame_locates_steps(self, tiny_store):
        analysis = run(tiny_store, years=[2001, 2002], capacities={"WindOn": 30}, n=3)
        df = analysis.scatter_frame()
        assert list(df.columns) == ["index", "year", "period", "load", "residual_load", "confirmed"]
        # load 100 (2001, p1), 95 (2002, p3), 90 (2001, p2)
        assert df["year"].tolist() == [2001, 2002, 2001]
        assert df["period"].tolist() == [1, 3, 2]
        assert df["residual_load"].tolist() == [100.0, 65.0, 90.0]
        assert df["confirmed"].tolist() == [True, False, True]

    def test_duration_frame(self, tiny_store):
        df = run(tiny_store, years=[2001], n=1).duration_frame()
        assert df.index[0] == 1
        assert df["load"].tolist() == [100.0, 90.0, 80.0, 70.0, 60.0]

    def test_invalid_n(self, tiny_store):
        with pytest.raises(InvalidParameterError, match="1 <= n <= 5"):
            run(tiny_store, years=[2001], n=6)

    def test_missing_year(self, tiny_store):
        with pytest.raises(MissingDataError):
            run(tiny_store, years=[1990], n=1)


class TestRunFromDirectory:
    """run_from_directory() on CSV files."""

    def test_with_config(self, csv_config):
        analysis = run_from_directory(None, "BE", years=[1, 2], capacities={"Solar": 2}, n=5, config=csv_config)
        assert analysis.region == "BE"
        assert len(analysis.flat) == 48
        assert analysis.scarcity.n == 5

    def test_data_dir_replaces_config_dir(self, csv_config, tmp_path):
        config = type(csv_config)(data_dir=str(tmp_path / "missing"), periods_per_year=24)
        analysis = run_from_directory(csv_config.data_dir, "BE", n=3, config=config)
        assert analysis.years == (1, 2, 3)

    def test_requires_location(self):
        with pytest.raises(ValueError, match="data_dir or config"):
            run_from_directory(None, "BE")
