"""Aggregate persisted draw reports into a CSV sheet."""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

logger = logging.getLogger("summarize_runs")

HEADER = [
    "run_name",
    "seed",
    "max_value",
    "draws",
    "minimum",
    "maximum",
    "mean",
    "chi_squared",
    "p_value",
]


@dataclass
class RunSummary:
    name: str
    seed: int
    max_value: Optional[int]
    draws: int
    minimum: Optional[int]
    maximum: Optional[int]
    mean: Optional[float]
    chi_squared: Optional[float]
    p_value: Optional[float]

    @classmethod
    def from_payload(cls, name: str, payload: dict) -> "RunSummary":
        draws = payload["draws"]
        summary = payload.get("summary") or {}

        return cls(
            name=name,
            seed=payload["seed"],
            max_value=payload["config"].get("max_value"),
            draws=len(draws),
            minimum=min(draws) if draws else None,
            maximum=max(draws) if draws else None,
            mean=sum(draws) / len(draws) if draws else None,
            chi_squared=summary.get("chi_squared"),
            p_value=summary.get("p_value"),
        )

    def as_csv_row(self) -> List[str]:
        def _fmt(value: object) -> str:
            if value is None:
                return ""
            if isinstance(value, float):
                return f"{value:.4f}"
            return str(value)

        return [
            self.name,
            _fmt(self.seed),
            _fmt(self.max_value),
            _fmt(self.draws),
            _fmt(self.minimum),
            _fmt(self.maximum),
            _fmt(self.mean),
            _fmt(self.chi_squared),
            _fmt(self.p_value),
        ]


def load_runs(paths: Iterable[Path]) -> List[RunSummary]:
    runs: List[RunSummary] = []
    for payload_path in paths:
        if not payload_path.exists():
            raise FileNotFoundError(f"Missing required log: {payload_path}")
        payload = json.loads(payload_path.read_text())
        runs.append(RunSummary.from_payload(payload_path.stem, payload))
    return runs


def write_csv(runs: Iterable[RunSummary], handle: TextIO) -> None:
    writer = csv.writer(handle)
    writer.writerow(HEADER)
    for run in runs:
        writer.writerow(run.as_csv_row())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarise persisted draw reports as CSV")
    parser.add_argument("logs", nargs="+", type=Path, help="Report files written by run_draws.py --log")
    parser.add_argument("--out", type=Path, help="Write the CSV here instead of stdout")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    runs = load_runs(args.logs)
    if args.out is None:
        write_csv(runs, sys.stdout)
        return

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", newline="") as handle:
        write_csv(runs, handle)
    logger.info("Summarised %d run(s) into %s", len(runs), args.out)


if __name__ == "__main__":
    main()
