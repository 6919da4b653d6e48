"""Monte Carlo path generator for retirement portfolio balances."""

from typing import Optional
import numpy as np

from retiresim.model import SimulationParams
from retiresim.simulation.random_source import (
    NumpyUniformSource,
    UniformSource,
    box_muller,
)

MONTHS_PER_YEAR = 12


class PathGenerator:
    """Generates independent portfolio paths under a monthly normal return model.

    Every path starts at the initial balance. Each month the balance grows by
    a normally distributed rate and then receives the monthly contribution.
    Only the year-end balance, deflated for cumulative inflation, is kept.

    Parameters
    ----------
    params : SimulationParams
        Projection assumptions
    random_source : UniformSource, optional
        Source of uniform draws. Defaults to an unseeded NumPy source.
    """

    def __init__(
        self,
        params: SimulationParams,
        random_source: Optional[UniformSource] = None,
    ):
        self.params = params
        self.random_source = random_source or NumpyUniformSource()

        # Simple division, not a compounding conversion
        self.monthly_return = params.mean_return / MONTHS_PER_YEAR
        self.monthly_std_dev = params.std_dev / np.sqrt(MONTHS_PER_YEAR)

        self.num_paths = params.num_simulations
        self.num_years = max(params.years_to_simulate, 0)

    def generate_paths(self) -> np.ndarray:
        """Generate year-end real balances for every path.

        Returns
        -------
        np.ndarray
            Array of shape ``(num_paths, num_years)``; row ``i`` is path ``i``
            and column ``y`` its inflation-adjusted balance after year ``y + 1``
        """
        paths = np.zeros((self.num_paths, self.num_years))
        portfolio_values = np.full(
            self.num_paths, float(self.params.initial_portfolio_value)
        )

        for year in range(self.num_years):
            for _ in range(MONTHS_PER_YEAR):
                monthly_growth = box_muller(
                    self.random_source,
                    self.monthly_return,
                    self.monthly_std_dev,
                    self.num_paths,
                )
                portfolio_values = portfolio_values * (1 + monthly_growth)
                portfolio_values = portfolio_values + self.params.monthly_contribution

            deflator = (1 + self.params.inflation_rate) ** (year + 1)
            paths[:, year] = portfolio_values / deflator

        return paths
