#!/usr/bin/env python3
"""Simulate a workout plan and print the order its sets would run in.

The plan file is JSON: either a list of plan items, or a plans document of
the form {"plans": {"<name>": [items...]}} together with a plan name.

Usage:
    python scripts/simulate_plan.py plans.json "super test"
    python scripts/simulate_plan.py plan.json
"""

import json
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from workout_sequencer.config.loader import ConfigLoader
from workout_sequencer.errors import ConfigurationError
from workout_sequencer.logging.config import configure_logging
from workout_sequencer.runner import WorkoutRunner


def load_plan_items(path: Path, plan_name=None):
    """Read plan items from a plan list or a plans document."""
    with open(path) as f:
        data = json.load(f)

    if isinstance(data, list):
        return data

    plans = data.get("plans", {}) if isinstance(data, dict) else {}
    if plan_name is None:
        if len(plans) != 1:
            raise KeyError(f"choose a plan name, available: {sorted(plans)}")
        plan_name = next(iter(plans))
    if plan_name not in plans:
        raise KeyError(f"plan not found: {plan_name!r}, available: {sorted(plans)}")
    return plans[plan_name]


def describe(items, index):
    item = items[index] if index < len(items) else None
    if isinstance(item, dict):
        return item.get("name") or item.get("type") or str(index)
    return str(index)


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    try:
        config = ConfigLoader.create().load()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)

    plan_path = Path(sys.argv[1])
    plan_name = sys.argv[2] if len(sys.argv) > 2 else None

    try:
        items = load_plan_items(plan_path, plan_name)
    except (OSError, ValueError, KeyError) as e:
        print(f"❌ Could not load plan: {e}")
        sys.exit(1)

    runner = WorkoutRunner(items, config)
    print(f"📋 Timeline has {len(runner.timeline)} sets")

    for number, step in enumerate(runner.run(), start=1):
        rest = f", rest {step.rest_sec:g}s" if step.rest_sec else ""
        print(f"{number:3d}. {describe(items, step.item_index)} set {step.set_number} "
              f"-> {step.action.value}{rest}")

    done, total = runner.progress
    print(f"\n✅ Ran {done} of {total} sets")


if __name__ == "__main__":
    main()
