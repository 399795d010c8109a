"""
scarcomp/visualization/plotter.py

Plots the duration curves and the classified scarcity time steps of a
ScarcityAnalysis using matplotlib.
"""
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

#: Colour-blind-safe palette (Wong, 2011)
CB_PALETTE: List[str] = [
    '#56B4E9', '#D55E00', '#009E73', '#F0E442',
    '#0072B2', '#CC79A7', '#E69F00',
]

LOAD_COLOR = CB_PALETTE[4]
RESIDUAL_COLOR = CB_PALETTE[6]
CONFIRMED_COLOR = CB_PALETTE[1]
UNCONFIRMED_COLOR = CB_PALETTE[4]

#: Default matplotlib rcParams overrides
DEFAULT_RC: Dict[str, Any] = {
    'font.size': 12,
    'text.color': 'black',
    'axes.labelcolor': 'black',
    'xtick.color': 'black',
    'ytick.color': 'black',
    'font.family': 'sans-serif',
}


class ScarcityPlotter:
    """
    Renders a :class:`~scarcomp.run.ScarcityAnalysis`.

    - ``plot_duration_curves``: load and residual load duration curves
    - ``plot_scarcity_scatter``: residual load against load for every load
      scarcity step; confirmed steps in red, unconfirmed in blue

    Example
    -------
    >>> analysis = run(store, years=[1], capacities={'Solar': 10}, n=10)
    >>> fig = ScarcityPlotter(analysis).plot(save_path='scarcity.png')
    """
    def __init__(self, analysis, unit: str = "GW"):
        self.analysis = analysis
        self.unit = unit

    @staticmethod
    def _apply_style() -> None:
        import matplotlib.pyplot as plt
        plt.rcParams.update(DEFAULT_RC)

    def plot_duration_curves(self, ax=None):
        """
        Draw the load and residual load duration curves.

        Returns
        -------
        ax : matplotlib.axes.Axes
        """
        import matplotlib.pyplot as plt

        self._apply_style()
        if ax is None:
            _, ax = plt.subplots(figsize=(7, 5))

        duration = np.arange(1, len(self.analysis.load_curve) + 1)
        ax.plot(duration, self.analysis.load_curve, color=LOAD_COLOR, label="Load")
        ax.plot(duration, self.analysis.residual_curve, color=RESIDUAL_COLOR, label="Residual Load")
        ax.axhline(0, color='grey', linewidth=0.5)
        ax.set_xlabel("Duration")
        ax.set_ylabel(f"Value [{self.unit}]")
        ax.legend(loc='lower left')
        return ax

    def plot_scarcity_scatter(self, ax=None, ylim: Optional[Tuple[float, float]] = None):
        """
        Scatter residual load against load for the load scarcity steps.

        Parameters
        ----------
        ax : matplotlib.axes.Axes, optional
            Axes to draw on. If ``None``, a new figure is created.
        ylim : tuple of float, optional
            Y-limits, typically those of the duration curve plot so both
            panels share a scale.

        Returns
        -------
        ax : matplotlib.axes.Axes
        """
        import matplotlib.pyplot as plt

        self._apply_style()
        if ax is None:
            _, ax = plt.subplots(figsize=(7, 5))

        scarcity = self.analysis.scarcity
        colors = np.where(scarcity.confirmed, CONFIRMED_COLOR, UNCONFIRMED_COLOR)
        ax.scatter(scarcity.load_values, scarcity.residual_values, c=list(colors))
        ax.set_xlabel(f"Load [{self.unit}]")
        ax.set_ylabel(f"Residual Load [{self.unit}]")
        ax.set_title(f"{scarcity.n_confirmed}/{scarcity.n} scarcity steps confirmed")
        if ylim is not None:
            ax.set_ylim(ylim)
        return ax

    def plot(self, save_path: str = None):
        """
        Both panels side by side, sharing y-limits.

        Returns the figure, after saving it to ``save_path`` if given.
        """
        import matplotlib.pyplot as plt

        self._apply_style()
        fig, (ax_curves, ax_scatter) = plt.subplots(1, 2, figsize=(14, 5))
        self.plot_duration_curves(ax_curves)
        self.plot_scarcity_scatter(ax_scatter, ylim=ax_curves.get_ylim())
        fig.suptitle(f"Scarcity time steps: {self.analysis.region}")
        fig.tight_layout()
        if save_path:
            fig.savefig(save_path)
        return fig
