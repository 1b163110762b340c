"""
BUBBLE GAUGE - Explanation Generator

Produces the driver list and the status guidance.
Drivers are factual statements about threshold breaches.
No predictions, no narratives.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from bubble_gauge.types import (
    AggregateResult,
    GaugeDefinition,
    OverallStatus,
    Reading,
    RiskLevel,
    StatusGuidance,
)

ALL_SAFE_MESSAGE = "All gauges within safe ranges"

STATUS_GUIDANCE = {
    OverallStatus.NORMAL: StatusGuidance("Normal Market", "Continue standard monitoring"),
    OverallStatus.CAUTION: StatusGuidance("Caution", "Increase vigilance, review positions"),
    OverallStatus.OVERHEATING: StatusGuidance(
        "Overheating", "Reduce exposure, tighten risk management"
    ),
    OverallStatus.BUBBLE: StatusGuidance("Bubble Territory", "Defensive positioning recommended"),
}


def status_guidance(status: OverallStatus) -> StatusGuidance:
    return STATUS_GUIDANCE[status]


def _describe(gauge: GaugeDefinition, reading: Reading, level: RiskLevel) -> str:
    side = "below" if gauge.inverted else "above"
    value = gauge.format_value(reading.value)

    if level == RiskLevel.DANGER:
        limit = gauge.format_value(gauge.thresholds.warning)
        return f"{gauge.name} in danger zone: {value} ({side} warning limit {limit})"

    limit = gauge.format_value(gauge.thresholds.safe)
    return f"{gauge.name} elevated: {value} ({side} safe limit {limit})"


def generate_explanation(
    result: AggregateResult,
    registry: Iterable[GaugeDefinition],
    readings: Mapping[str, Reading],
) -> tuple[list[str], StatusGuidance]:
    """
    Generate driver list and status guidance.

    Args:
        result: Aggregator output for the readings.
        registry: Gauge definitions, in display order.
        readings: The readings the result was computed from.

    Returns:
        (drivers: list[str], guidance: StatusGuidance)
    """
    gauges = list(registry)
    drivers: list[str] = []

    # Danger first, then warning, registry order within each
    for level in (RiskLevel.DANGER, RiskLevel.WARNING):
        for gauge in gauges:
            if result.levels.get(gauge.id) == level:
                drivers.append(_describe(gauge, readings[gauge.id], level))

    # Missing readings are reported, never assumed safe
    missing = set(result.unclassified)
    for gauge in gauges:
        if gauge.id in missing:
            drivers.append(f"{gauge.name}: no reading")

    if not drivers:
        drivers.append(ALL_SAFE_MESSAGE)

    return drivers, status_guidance(result.overall)
