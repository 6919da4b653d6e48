"""Monte Carlo Retirement Simulator.

A Python package for projecting a retirement portfolio under random monthly
returns and summarizing the outcomes as inflation-adjusted percentile bands.
"""

from retiresim.model import SimulationParams, SimulationResult
from retiresim.engine import run_monte_carlo_simulation, results_to_frame, summarize

from retiresim.simulation import PathGenerator, NumpyUniformSource

__version__ = "1.0.0"
__all__ = [
    "SimulationParams",
    "SimulationResult",
    "run_monte_carlo_simulation",
    "results_to_frame",
    "summarize",
    "PathGenerator",
    "NumpyUniformSource",
]
