"""Plotting utilities for retirement percentile bands."""

import matplotlib
# Use non-interactive backend for headless environments
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter
from pathlib import Path
from typing import List, Optional
from retiresim.model import SimulationResult

BANDS = [
    ("p90", "Optimistic (90th %)", "tab:green"),
    ("p50", "Median (50th %)", "tab:blue"),
    ("p10", "Pessimistic (10th %)", "tab:red"),
]


def format_currency(value: float) -> str:
    """Format a value as whole US dollars, e.g. ``$1,234`` or ``-$50``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def plot_retirement_bands(
    results: List[SimulationResult],
    output_path: Optional[str] = None,
    show_plot: bool = True,
) -> bool:
    """Plot the p10/p50/p90 bands against age.

    Parameters
    ----------
    results : list of SimulationResult
        Projection output
    output_path : str, optional
        Path to save the plot
    show_plot : bool, default=True
        Whether to display the plot

    Returns
    -------
    bool
        False when there was no data to plot, True otherwise
    """
    if not results:
        return False

    years = [r.year for r in results]

    fig, ax = plt.subplots(figsize=(12, 6), dpi=150)

    for key, label, color in BANDS:
        values = [getattr(r, key) for r in results]
        ax.fill_between(years, values, alpha=0.25, color=color)
        ax.plot(years, values, color=color, linewidth=2, label=label)

    ax.yaxis.set_major_formatter(FuncFormatter(lambda value, _: format_currency(value)))
    ax.set_title('Retirement Projection (inflation-adjusted)', fontsize=14, fontweight='bold')
    ax.set_xlabel('Age', fontsize=12)
    ax.set_ylabel('Portfolio Value', fontsize=12)
    ax.legend(loc='upper left', fontsize=9)
    ax.grid(True, alpha=0.3, linestyle='--')
    plt.tight_layout()

    if output_path:
        output_path_abs = Path(output_path).resolve()
        output_path_abs.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(str(output_path_abs), dpi=300, bbox_inches='tight')

    if show_plot:
        plt.show()
    else:
        plt.close(fig)

    return True
