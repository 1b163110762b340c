"""
BUBBLE GAUGE - Risk Aggregator

Counts per-gauge risk levels across the registry and derives
one overall status. Rules (evaluated in order, first match wins):
1. BUBBLE if 4+ gauges are in danger
2. OVERHEATING if 2+ gauges are in danger
3. CAUTION if 1+ gauge is in danger OR 5+ gauges are in warning
4. NORMAL otherwise

Gauges without a reading are counted as unclassified and never
feed the overall status. Re-evaluated from scratch on every call.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from bubble_gauge.classifier.engine import classify
from bubble_gauge.config import AggregationPolicy
from bubble_gauge.types import (
    AggregateResult,
    GaugeDefinition,
    OverallStatus,
    Reading,
    RiskCounts,
    RiskLevel,
)

logger = logging.getLogger(__name__)


def determine_overall_status(
    counts: RiskCounts, policy: Optional[AggregationPolicy] = None
) -> OverallStatus:
    """
    Derive the overall status from danger and warning counts.

    Args:
        counts: Per-level gauge counts.
        policy: Status thresholds (default: the fixed policy constants).

    Returns:
        OverallStatus
    """
    policy = policy or AggregationPolicy()

    # Rule 1: Widespread danger -> BUBBLE
    if counts.danger >= policy.bubble_danger_min:
        return OverallStatus.BUBBLE

    # Rule 2: Several gauges in danger -> OVERHEATING
    if counts.danger >= policy.overheating_danger_min:
        return OverallStatus.OVERHEATING

    # Rule 3: Any danger, or broad warning -> CAUTION
    if counts.danger >= policy.caution_danger_min or counts.warning >= policy.caution_warning_min:
        return OverallStatus.CAUTION

    # Rule 4: Otherwise NORMAL
    return OverallStatus.NORMAL


def aggregate(
    registry: Iterable[GaugeDefinition],
    readings: Mapping[str, Reading],
    policy: Optional[AggregationPolicy] = None,
) -> AggregateResult:
    """
    Classify every gauge that has a reading and derive the overall status.

    Args:
        registry: Gauge definitions, in display order.
        readings: Current reading per gauge id. Missing ids are unclassified.
        policy: Status thresholds (default: the fixed policy constants).

    Returns:
        AggregateResult with counts, overall status, per-gauge levels,
        and the ids of unclassified gauges.

    Raises:
        InvalidReadingValue: If any present reading is not finite.
    """
    tally = {level: 0 for level in RiskLevel}
    levels: dict[str, RiskLevel] = {}
    unclassified: list[str] = []
    known_ids: set[str] = set()

    for gauge in registry:
        known_ids.add(gauge.id)
        reading = readings.get(gauge.id)
        if reading is None:
            unclassified.append(gauge.id)
            continue
        level = classify(gauge, reading)
        levels[gauge.id] = level
        tally[level] += 1

    stray = [gauge_id for gauge_id in readings if gauge_id not in known_ids]
    if stray:
        logger.debug(f"Ignoring readings for ids outside the registry: {stray}")

    counts = RiskCounts(
        safe=tally[RiskLevel.SAFE],
        warning=tally[RiskLevel.WARNING],
        danger=tally[RiskLevel.DANGER],
        unclassified=len(unclassified),
    )
    overall = determine_overall_status(counts, policy)

    return AggregateResult(
        counts=counts,
        overall=overall,
        levels=levels,
        unclassified=tuple(unclassified),
    )
