"""Uniform random sources and the Box-Muller normal transform."""

from typing import Optional, Protocol
import numpy as np


class UniformSource(Protocol):
    """Anything that produces uniform(0, 1) draws."""

    def uniform(self, size: int) -> np.ndarray:
        ...


class NumpyUniformSource:
    """Uniform draws backed by a NumPy ``RandomState``.

    Parameters
    ----------
    seed : int, optional
        Random seed for reproducibility. Unseeded sources differ on every run.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._state = np.random.RandomState(seed)

    def uniform(self, size: int) -> np.ndarray:
        """Draw ``size`` values in ``[0, 1)``."""
        return self._state.random_sample(size)


def _nonzero_uniform(source: UniformSource, size: int) -> np.ndarray:
    draws = source.uniform(size)
    zeros = draws == 0.0
    # Redraw exact zeros so log(u) stays finite
    while zeros.any():
        draws[zeros] = source.uniform(int(zeros.sum()))
        zeros = draws == 0.0
    return draws


def box_muller(
    source: UniformSource,
    mean: float,
    std_dev: float,
    size: int,
) -> np.ndarray:
    """Generate normal samples from pairs of uniform draws.

    Parameters
    ----------
    source : UniformSource
        Provider of uniform(0, 1) draws
    mean : float
        Mean of the normal distribution
    std_dev : float
        Standard deviation of the normal distribution
    size : int
        Number of samples

    Returns
    -------
    np.ndarray
        ``size`` samples, ``z * std_dev + mean`` with
        ``z = sqrt(-2 ln u) * cos(2 pi v)``
    """
    u = _nonzero_uniform(source, size)
    v = _nonzero_uniform(source, size)
    z = np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
    return z * std_dev + mean
