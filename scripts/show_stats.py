#!/usr/bin/env python3
"""Print participant statistics for a participants JSON file.

Usage:
    python scripts/show_stats.py data/participants.json
    python scripts/show_stats.py participants.json --rosters rosters.json

Exit codes:
    0: Report printed
    1: Participants or rosters could not be loaded
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from confstats.aggregation.summary import summarize_participants  # noqa: E402
from confstats.core.classifier import Classifier, load_rosters  # noqa: E402
from confstats.providers.base import ParticipantLoadError  # noqa: E402
from confstats.providers.json_file import JsonFileParticipantSource  # noqa: E402


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Print participant statistics as JSON")
    parser.add_argument("participants", type=Path, help="JSON array of participant records")
    parser.add_argument("--rosters", type=Path, default=None, help="Optional rosters JSON file")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    classifier = Classifier()
    if args.rosters:
        try:
            classifier = Classifier(load_rosters(args.rosters))
        except (OSError, ValueError) as e:
            print(f"FAIL: cannot load rosters from {args.rosters}: {e}", file=sys.stderr)
            return 1

    source = JsonFileParticipantSource(args.participants)

    try:
        report = summarize_participants(source, classifier)
    except ParticipantLoadError as e:
        print(f"FAIL: {e}", file=sys.stderr)
        return 1

    print(report.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
