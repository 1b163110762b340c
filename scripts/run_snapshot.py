#!/usr/bin/env python3
"""
BUBBLE GAUGE risk snapshot.

Usage:
    python scripts/run_snapshot.py
    python scripts/run_snapshot.py --readings data/latest.json
    python scripts/run_snapshot.py --select valuation-metrics
    python scripts/run_snapshot.py --json
    python scripts/run_snapshot.py -v
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure bubble_gauge is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bubble_gauge.errors import BubbleGaugeError, UnknownGaugeError
from bubble_gauge.pipeline.refresh import RefreshPipeline

DEFAULT_READINGS = Path(__file__).parent.parent / "data" / "sample_readings.csv"


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Classify BUBBLE GAUGE readings and report the overall status",
    )
    parser.add_argument(
        "--readings",
        "-r",
        type=Path,
        default=DEFAULT_READINGS,
        help="Readings file (.csv or .json), default: bundled sample",
    )
    parser.add_argument("--select", "-s", type=str, default=None, help="Gauge id to highlight")
    parser.add_argument("--json", "-j", action="store_true", help="Output JSON only")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pipeline = RefreshPipeline()

    if args.select:
        try:
            pipeline.session.select(args.select)
        except UnknownGaugeError as exc:
            print(f"Error: {exc}")
            return 1

    try:
        report = pipeline.run(args.readings)
    except (OSError, ValueError, BubbleGaugeError) as exc:
        print(f"Error: Could not load readings from '{args.readings}': {exc}")
        return 1

    snapshot = report.snapshot
    counts = snapshot.counts

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    print()
    print("=" * 60)
    print("BUBBLE GAUGE RISK SNAPSHOT")
    print("=" * 60)
    print(f"Status:     {snapshot.overall.value} ({report.guidance.label})")
    print(f"Action:     {report.guidance.action}")
    print(
        f"Gauges:     safe={counts.safe} warning={counts.warning} "
        f"danger={counts.danger} unclassified={counts.unclassified}"
    )
    print(f"Coverage:   {counts.coverage:.0%}")
    print("-" * 60)
    print("Drivers:")
    for d in report.drivers:
        print(f"  - {d}")
    if report.rejected:
        print("-" * 60)
        print("Rejected updates:")
        for gauge_id, reason in report.rejected.items():
            print(f"  - {gauge_id}: {reason}")
    print("-" * 60)
    frame = snapshot.to_frame()
    print(frame[["gauge_id", "value", "trend", "risk_level"]].to_string(index=False))
    selected = pipeline.session.selected_gauge
    if selected is not None:
        print("-" * 60)
        print(f"Selected:   {selected.name} [{selected.category}]")
        print(f"            {selected.description}")
        print(
            f"            safe {selected.format_value(selected.thresholds.safe)} / "
            f"warning {selected.format_value(selected.thresholds.warning)}"
            f"{' (higher is safer)' if selected.inverted else ''}"
        )
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
