"""Deterministic draw runs, fully driven by a seed."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .generator import TIME, MTRand
from .stats import MAX_HISTOGRAM_BUCKETS, uniformity_summary

logger = logging.getLogger(__name__)


@dataclass
class DrawConfig:
    """Configuration for a draw run."""

    seed: int = 0
    use_time_seed: bool = False
    count: int = 10
    max_value: Optional[int] = None  # None draws raw 32-bit words
    histogram: bool = False


def run_draws(cfg: DrawConfig) -> Dict[str, Any]:
    """Draw ``cfg.count`` values and report them with the seed that made them."""

    if cfg.count < 0:
        raise ValueError(f"count must be non-negative, got {cfg.count}")
    if cfg.histogram:
        if cfg.max_value is None:
            raise ValueError("histogram requires a max_value")
        if cfg.max_value >= MAX_HISTOGRAM_BUCKETS:
            raise ValueError(
                f"histogram supports max_value below {MAX_HISTOGRAM_BUCKETS}, "
                f"got {cfg.max_value}"
            )

    rng = MTRand(TIME) if cfg.use_time_seed else MTRand(cfg.seed)
    logger.debug("Running %d draws with seed %d", cfg.count, rng.last_seed)

    if cfg.max_value is None:
        draws: List[int] = [rng.next() for _ in range(cfg.count)]
    else:
        draws = [rng.next_in_range(cfg.max_value) for _ in range(cfg.count)]

    result: Dict[str, Any] = {
        "config": asdict(cfg),
        "seed": rng.last_seed,
        "draws": draws,
    }
    if cfg.histogram and draws:
        result["summary"] = asdict(uniformity_summary(draws, cfg.max_value))
    return result


if __name__ == "__main__":
    import json

    result = run_draws(DrawConfig())
    print(json.dumps(result, indent=2))
