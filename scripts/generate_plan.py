#!/usr/bin/env python3
"""
Generate a workout plan from a profile file.

Usage:
    python scripts/generate_plan.py profile.yaml
    python scripts/generate_plan.py profile.json --format csv --seed 42 --output plan.csv

The profile may use camelCase (workoutsPerWeek) or snake_case
(workouts_per_week) keys. Invalid profiles exit with status 2.
"""
from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

import yaml

# Allow running from the repository root without installing
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.config import settings  # noqa: E402
from core.exceptions import ProfileValidationError  # noqa: E402
from core.logging import setup_logging  # noqa: E402
from schemas import load_profile  # noqa: E402
from services.workout_plan.generator import generate_workout_plan  # noqa: E402
from services.workout_plan.plan_export import export_plan  # noqa: E402

logger = logging.getLogger("generate_plan")


def read_profile_file(path: Path) -> dict:
    """Parse a JSON or YAML profile file into a mapping."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ProfileValidationError(f"Profile file {path} must contain a mapping")
    return data


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate a 9-week workout plan from a profile file.")
    parser.add_argument("profile", type=Path, help="Profile file (.json, .yaml or .yml)")
    parser.add_argument("--format", choices=["json", "csv"], default="json", help="Export format (default: json)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a repeatable plan")
    parser.add_argument("--output", type=Path, default=None, help="Write to this file instead of stdout")
    args = parser.parse_args(argv)

    # Plan exports may go to stdout
    setup_logging(stream=sys.stderr)

    try:
        profile = load_profile(read_profile_file(args.profile))
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error(f"Could not read profile {args.profile}: {e}")
        return 2
    except ProfileValidationError as e:
        logger.error(f"{e.detail} (field: {e.field or 'n/a'})")
        return 2

    seed = args.seed if args.seed is not None else settings.PLAN_RANDOM_SEED
    plan = generate_workout_plan(profile, rng=random.Random(seed))
    result = export_plan(plan, args.format)

    if args.output:
        args.output.write_text(result.content, encoding="utf-8")
        logger.info(f"Wrote {result.format} export to {args.output} ({result.row_count} rows)")
    else:
        sys.stdout.write(result.content)
        if not result.content.endswith("\n"):
            sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
