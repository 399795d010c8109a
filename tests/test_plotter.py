"""
tests/test_plotter.py

Unit tests for ScarcityPlotter.
"""
import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from scarcomp import run
from scarcomp.visualization import ScarcityPlotter
from scarcomp.visualization.plotter import CONFIRMED_COLOR, UNCONFIRMED_COLOR


@pytest.fixture
def analysis(tiny_store):
    return run(tiny_store, years=[2001, 2002], capacities={"WindOn": 30}, n=3)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_duration_curves(analysis):
    ax = ScarcityPlotter(analysis).plot_duration_curves()
    lines = ax.get_lines()
    np.testing.assert_array_equal(lines[0].get_ydata(), analysis.load_curve)
    np.testing.assert_array_equal(lines[1].get_ydata(), analysis.residual_curve)
    assert ax.get_xlabel() == "Duration"
    assert ax.get_ylabel() == "Value [GW]"


def test_scatter_colours(analysis):
    ax = ScarcityPlotter(analysis).plot_scarcity_scatter(ylim=(0, 120))
    points = ax.collections[0]
    np.testing.assert_array_equal(points.get_offsets()[:, 0], analysis.scarcity.load_values)
    colours = [matplotlib.colors.to_hex(c) for c in points.get_facecolors()]
    expected = [CONFIRMED_COLOR if c else UNCONFIRMED_COLOR for c in analysis.scarcity.confirmed]
    assert colours == [c.lower() for c in expected]
    assert ax.get_ylim() == (0, 120)
    assert ax.get_title() == "2/3 scarcity steps confirmed"


def test_plot_shares_ylim_and_saves(analysis, tmp_path):
    path = tmp_path / "scarcity.png"
    fig = ScarcityPlotter(analysis).plot(save_path=str(path))
    ax_curves, ax_scatter = fig.axes
    assert ax_curves.get_ylim() == ax_scatter.get_ylim()
    assert path.exists()
