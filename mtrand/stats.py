"""Histogram and chi-squared uniformity checks for bounded draws."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
from scipy.stats import chisquare

# 16-bit ranges are the widest we bucket one value per bin.
MAX_HISTOGRAM_BUCKETS = 1 << 16


@dataclass(frozen=True)
class UniformitySummary:
    """Goodness-of-fit snapshot for draws over [0, buckets - 1]."""

    buckets: int
    samples: int
    minimum: int
    maximum: int
    chi_squared: float
    p_value: float
    counts: List[int]

    def is_uniform(self, alpha: float = 1e-4) -> bool:
        """True unless the chi-squared test rejects uniformity at ``alpha``."""
        return self.p_value >= alpha


def histogram(values: Sequence[int], max_value: int) -> np.ndarray:
    """Count occurrences of each value in [0, max_value]."""
    if max_value < 0 or max_value >= MAX_HISTOGRAM_BUCKETS:
        raise ValueError(
            f"max_value must be within [0, {MAX_HISTOGRAM_BUCKETS - 1}] "
            f"to histogram, got {max_value}"
        )
    data = np.asarray(values, dtype=np.int64)
    if data.size and (data.min() < 0 or data.max() > max_value):
        raise ValueError(f"values fall outside [0, {max_value}]")
    return np.bincount(data, minlength=max_value + 1)


def uniformity_summary(values: Sequence[int], max_value: int) -> UniformitySummary:
    """Chi-squared test of ``values`` against a flat [0, max_value] distribution."""
    if len(values) == 0:
        raise ValueError("cannot summarise an empty sample")
    counts = histogram(values, max_value)
    if counts.size > 1:
        statistic, p_value = chisquare(counts)
    else:
        # A single bucket is trivially flat.
        statistic, p_value = 0.0, 1.0
    return UniformitySummary(
        buckets=int(counts.size),
        samples=int(counts.sum()),
        minimum=int(min(values)),
        maximum=int(max(values)),
        chi_squared=round(float(statistic), 4),
        p_value=round(float(p_value), 6),
        counts=[int(c) for c in counts],
    )
