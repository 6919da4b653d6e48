"""Simulation engine for generating and summarizing Monte Carlo paths."""

from retiresim.simulation.path_generator import PathGenerator
from retiresim.simulation.percentiles import PERCENTILES, extract_bands
from retiresim.simulation.random_source import NumpyUniformSource, UniformSource, box_muller

__all__ = [
    "PathGenerator",
    "PERCENTILES",
    "extract_bands",
    "NumpyUniformSource",
    "UniformSource",
    "box_muller",
]
