"""Percentile band extraction across simulated paths."""

from types import MappingProxyType
from typing import List
import numpy as np

from retiresim.model import SimulationResult

PERCENTILES = MappingProxyType({
    "p10": 0.10,
    "p50": 0.50,
    "p90": 0.90,
})


def percentile_index(num_values: int, pct: float) -> int:
    """Nearest-rank index ``floor(num_values * pct)``, kept inside the array."""
    return min(int(np.floor(num_values * pct)), num_values - 1)


def extract_bands(
    year_end_values: np.ndarray,
    initial_age: int,
) -> List[SimulationResult]:
    """Summarize simulated paths as p10/p50/p90 bands per year.

    Parameters
    ----------
    year_end_values : np.ndarray
        Array of shape ``(num_paths, num_years)`` from ``PathGenerator``
    initial_age : int
        Age at the start of the projection; year ``y`` is labelled
        ``initial_age + y + 1``

    Returns
    -------
    list of SimulationResult
        One entry per year in ascending order. No interpolation is applied.
    """
    num_paths, num_years = year_end_values.shape
    if num_paths == 0 or num_years == 0:
        return []

    sorted_values = np.sort(year_end_values, axis=0)
    indices = {name: percentile_index(num_paths, pct) for name, pct in PERCENTILES.items()}

    results = []
    for year in range(num_years):
        column = sorted_values[:, year]
        results.append(
            SimulationResult(
                year=initial_age + year + 1,
                p10=float(column[indices["p10"]]),
                p50=float(column[indices["p50"]]),
                p90=float(column[indices["p90"]]),
            )
        )
    return results
