"""Command line harness for deterministic Mersenne Twister draws."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from mtrand import UINT32_MAX, DrawConfig, run_draws


def _parse_seed(value: str) -> int:
    """Parse a decimal or 0x-prefixed seed."""

    try:
        seed = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Seed must be an integer (decimal or 0x hex), received '{value}'."
        ) from exc

    if seed < 0:
        raise argparse.ArgumentTypeError("Seed must be non-negative.")
    return seed


def _parse_max(value: str) -> int:
    """Parse an inclusive range bound that fits in 32 bits."""

    bound = _parse_seed(value)
    if bound > UINT32_MAX:
        raise argparse.ArgumentTypeError(
            f"Range maximum must not exceed {UINT32_MAX:#x}, received '{value}'."
        )
    return bound


def _parse_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Count must be an integer.") from exc
    if count < 0:
        raise argparse.ArgumentTypeError("Count must be non-negative.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw values from a seeded Mersenne Twister")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=0,
        help="Generator seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--time-seed",
        action="store_true",
        help="Seed from the wall clock instead of --seed; the chosen seed is reported",
    )
    parser.add_argument("--count", type=_parse_count, default=10, help="Number of values to draw")
    parser.add_argument(
        "--max",
        dest="max_value",
        type=_parse_max,
        default=None,
        help="Draw from the inclusive range [0, MAX] instead of raw 32-bit words",
    )
    parser.add_argument(
        "--histogram",
        action="store_true",
        help="Attach a chi-squared uniformity summary (requires --max)",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "draw_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Emit debug logging on stderr")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.histogram and args.max_value is None:
        parser.error("--histogram requires --max")

    cfg = DrawConfig(
        seed=args.seed,
        use_time_seed=args.time_seed,
        count=args.count,
        max_value=args.max_value,
        histogram=args.histogram,
    )
    try:
        result = run_draws(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logging.getLogger(__name__).info("Wrote report to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
