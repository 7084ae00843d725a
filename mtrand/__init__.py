"""Public package surface for the mtrand Mersenne Twister generator."""

from .bits import UINT32_MAX, next_power_of_two
from .generator import TIME, MTRand, TimeSeed
from .run import DrawConfig, run_draws
from .stats import UniformitySummary, uniformity_summary

__all__ = [
    "MTRand",
    "TIME",
    "TimeSeed",
    "UINT32_MAX",
    "next_power_of_two",
    "DrawConfig",
    "run_draws",
    "UniformitySummary",
    "uniformity_summary",
]
