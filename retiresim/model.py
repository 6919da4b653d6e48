"""
Input and output records for the retirement projection.

SimulationParams carries the saver's assumptions into the engine and
SimulationResult carries one year of percentile bands back out.
"""

import numbers
from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class SimulationParams:
    """
    Parameters for a single Monte Carlo retirement projection.

    Parameters
    ----------
    initial_age : int
        Saver's current age in years
    retirement_age : int
        Age at which the projection stops
    initial_portfolio_value : float
        Starting portfolio balance
    monthly_contribution : float
        Amount added at the end of every simulated month
    mean_return : float
        Annualized expected nominal return as a decimal (e.g. 0.07)
    std_dev : float
        Annualized return standard deviation as a decimal (e.g. 0.15)
    num_simulations : int, default=1000
        Number of independent paths to generate
    inflation_rate : float, default=0.025
        Annualized inflation as a decimal

    Raises
    ------
    ValueError
        If an age or the path count is not an integer, if a monetary amount
        or the volatility is negative, if fewer than 10 paths are requested,
        or if inflation is -100% or lower

    Notes
    -----
    A retirement age at or below the current age is accepted; the engine
    returns an empty projection for it.
    """

    initial_age: int
    retirement_age: int
    initial_portfolio_value: float
    monthly_contribution: float
    mean_return: float
    std_dev: float
    num_simulations: int = 1000
    inflation_rate: float = 0.025

    def __post_init__(self):
        for name in ("initial_age", "retirement_age", "num_simulations"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.initial_portfolio_value < 0:
            raise ValueError("initial_portfolio_value must be non-negative")
        if self.monthly_contribution < 0:
            raise ValueError("monthly_contribution must be non-negative")
        if self.std_dev < 0:
            raise ValueError("std_dev must be non-negative")
        if self.num_simulations < 10:
            raise ValueError("num_simulations must be at least 10")
        if self.inflation_rate <= -1:
            raise ValueError("inflation_rate must be greater than -1")

    @property
    def years_to_simulate(self) -> int:
        """Number of simulated years (zero or negative means nothing to do)."""
        return self.retirement_age - self.initial_age

    @classmethod
    def from_percentages(
        cls,
        initial_age: int,
        retirement_age: int,
        initial_portfolio_value: float,
        monthly_contribution: float,
        mean_return_pct: float,
        std_dev_pct: float,
        num_simulations: int = 1000,
        inflation_rate_pct: float = 2.5,
    ) -> "SimulationParams":
        """
        Build parameters from percentage inputs such as ``7`` for 7%.

        Returns
        -------
        SimulationParams
            Parameters with rates converted to decimals
        """
        return cls(
            initial_age=initial_age,
            retirement_age=retirement_age,
            initial_portfolio_value=initial_portfolio_value,
            monthly_contribution=monthly_contribution,
            mean_return=mean_return_pct / 100,
            std_dev=std_dev_pct / 100,
            num_simulations=num_simulations,
            inflation_rate=inflation_rate_pct / 100,
        )


@dataclass(frozen=True)
class SimulationResult:
    """Inflation-adjusted percentile bands for one simulated year."""

    year: int
    p10: float
    p50: float
    p90: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def validate_form_inputs(
    initial_age: float,
    retirement_age: float,
    initial_portfolio_value: float,
    monthly_contribution: float,
    mean_return_pct: float,
    std_dev_pct: float,
) -> None:
    """
    Check user-entered values against the simulator input bounds.

    Parameters
    ----------
    initial_age : float
        Current age, 18 to 90
    retirement_age : float
        Retirement age, 19 to 100 and greater than the current age
    initial_portfolio_value : float
        Starting balance, non-negative
    monthly_contribution : float
        Monthly contribution, non-negative
    mean_return_pct : float
        Expected annual return in percent, 0 to 20
    std_dev_pct : float
        Annual volatility in percent, 0 to 40

    Raises
    ------
    ValueError
        If any value is out of range
    """
    bounds = [
        ("current age", initial_age, 18, 90),
        ("retirement age", retirement_age, 19, 100),
        ("mean return", mean_return_pct, 0, 20),
        ("standard deviation", std_dev_pct, 0, 40),
    ]
    for name, value, low, high in bounds:
        if value < low or value > high:
            raise ValueError(f"{name} must be between {low} and {high}, got {value}")

    if initial_portfolio_value < 0:
        raise ValueError("initial investment must be non-negative")
    if monthly_contribution < 0:
        raise ValueError("monthly contribution must be non-negative")

    if retirement_age <= initial_age:
        raise ValueError("Retirement age must be greater than current age.")
