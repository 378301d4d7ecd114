#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from wiremaster.config import settings
from wiremaster.logging_config import configure_logging
from wiremaster.schemas import LevelData
from wiremaster.services.generator import generate_level
from wiremaster.services.progression import get_generator_config
from wiremaster.services.validator import validate_level


ROOT_DIR = Path(__file__).resolve().parents[1]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a range of levels, report on them and optionally export them as JSON."
    )
    parser.add_argument("--start", type=int, default=1, help="First level number (inclusive).")
    parser.add_argument("--end", type=int, default=None, help="Last level number (inclusive). Defaults to --start.")
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Directory to write level_{n}.json files to. Without it, levels are only reported.",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Run the exhaustive solver on every attempt (slow on large grids).",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level for generator output.")
    return parser.parse_args()


def format_report(level: LevelData, coverage: float, elapsed_ms: float) -> str:
    config = level.config
    strategy = level.strategy or "fallback"
    return (
        f"level {level.id:>4}: {config.grid_rows}x{config.grid_cols} "
        f"{config.difficulty.value:<6} wires={len(level.wires):<2} "
        f"coverage={coverage:5.1f}% strategy={strategy:<8} "
        f"attempts={level.attempts:<2} {elapsed_ms:7.1f}ms"
    )


def write_level(out_dir: Path, level: LevelData) -> Path:
    path = out_dir / f"level_{level.id}.json"
    path.write_text(
        json.dumps(level.model_dump(mode="json"), ensure_ascii=False, indent="\t") + "\n",
        encoding="utf-8",
    )
    return path


def main() -> int:
    args = parse_args()
    configure_logging(args.log_level.upper())

    end = args.end if args.end is not None else args.start
    if args.start < 1 or end < args.start:
        raise SystemExit(f"Invalid level range: {args.start}..{end}")
    if end > settings.MAX_LEVEL:
        print(f"Note: levels past MAX_LEVEL={settings.MAX_LEVEL} are not served by the API.")

    out_dir = args.out
    if out_dir is not None:
        if not out_dir.is_absolute():
            out_dir = Path.cwd() / out_dir
        out_dir.mkdir(parents=True, exist_ok=True)

    fallbacks = 0
    invalid = 0

    for level_number in range(args.start, end + 1):
        started = time.perf_counter()
        level = generate_level(get_generator_config(level_number), level_number, verify=args.verify)
        elapsed_ms = (time.perf_counter() - started) * 1000

        report = validate_level(level)
        print(format_report(level, report["coverage"], elapsed_ms))

        if level.fallback:
            fallbacks += 1
        if not report["valid"]:
            invalid += 1
            for error in report["errors"]:
                print(f"  ! {error}")

        if out_dir is not None:
            write_level(out_dir, level)

    total = end - args.start + 1
    print(f"Generated {total} level(s): {fallbacks} fallback, {invalid} invalid.")
    if out_dir is not None:
        try:
            shown = out_dir.relative_to(ROOT_DIR)
        except ValueError:
            shown = out_dir
        print(f"Written to {shown}")
    return 1 if invalid else 0


if __name__ == "__main__":
    raise SystemExit(main())
