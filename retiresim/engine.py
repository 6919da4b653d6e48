"""
Monte Carlo retirement projection engine.

Simulates many independent portfolio paths from today until retirement and
reports the inflation-adjusted 10th, 50th and 90th percentile balance for
each year.
"""

from typing import Dict, List, Optional, Union
import pandas as pd

from retiresim.model import SimulationParams, SimulationResult
from retiresim.simulation.path_generator import PathGenerator
from retiresim.simulation.percentiles import PERCENTILES, extract_bands
from retiresim.simulation.random_source import UniformSource


def run_monte_carlo_simulation(
    params: SimulationParams,
    random_source: Optional[UniformSource] = None,
) -> List[SimulationResult]:
    """
    Run the retirement projection.

    Parameters
    ----------
    params : SimulationParams
        Projection assumptions
    random_source : UniformSource, optional
        Source of uniform(0, 1) draws. When omitted an unseeded source is
        used, so repeated calls give different results.

    Returns
    -------
    list of SimulationResult
        One entry per year from ``initial_age + 1`` to ``retirement_age``.
        Empty when the retirement age is not after the current age.
    """
    if params.years_to_simulate <= 0:
        return []

    generator = PathGenerator(params, random_source=random_source)
    year_end_values = generator.generate_paths()
    return extract_bands(year_end_values, params.initial_age)


def results_to_frame(results: List[SimulationResult]) -> pd.DataFrame:
    """Convert results into a DataFrame indexed by year with one column per band."""
    columns = list(PERCENTILES)
    if not results:
        return pd.DataFrame(columns=columns, index=pd.Index([], name="year"))

    df = pd.DataFrame([r.as_dict() for r in results])
    return df.set_index("year")[columns]


def summarize(results: List[SimulationResult]) -> Optional[Dict[str, Union[int, float]]]:
    """Final-year bands, or None for an empty projection."""
    if not results:
        return None
    return results[-1].as_dict()
