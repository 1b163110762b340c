"""
BUBBLE GAUGE - Deterministic Risk Classifier

Rules for a normal gauge (lower is safer), evaluated in order:
1. SAFE if value <= thresholds.safe
2. WARNING if value <= thresholds.warning
3. DANGER otherwise

Inverted gauges (higher is safer) mirror every inequality.
Boundaries belong to the safer zone. No clamping. No state.
"""

from __future__ import annotations

import math
import numbers

from bubble_gauge.errors import InvalidReadingValue
from bubble_gauge.types import GaugeDefinition, Reading, RiskLevel


def check_value(gauge_id: str, value: object) -> float:
    """Return value unchanged if it is a finite real number, else raise InvalidReadingValue."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidReadingValue(gauge_id, value, "is not a real number")
    if not math.isfinite(value):
        raise InvalidReadingValue(gauge_id, value)
    return value


def classify_value(gauge: GaugeDefinition, value: float) -> RiskLevel:
    """
    Classify a bare value against a gauge's thresholds.

    Args:
        gauge: Gauge definition (thresholds validated at registry load).
        value: Observed value.

    Returns:
        RiskLevel.SAFE, RiskLevel.WARNING, or RiskLevel.DANGER

    Raises:
        InvalidReadingValue: If value is NaN, infinite, or not a number.
    """
    value = check_value(gauge.id, value)
    thresholds = gauge.thresholds

    if gauge.inverted:
        if value >= thresholds.safe:
            return RiskLevel.SAFE
        if value >= thresholds.warning:
            return RiskLevel.WARNING
        return RiskLevel.DANGER

    if value <= thresholds.safe:
        return RiskLevel.SAFE
    if value <= thresholds.warning:
        return RiskLevel.WARNING
    return RiskLevel.DANGER


def classify(gauge: GaugeDefinition, reading: Reading) -> RiskLevel:
    """Classify a gauge's reading. Trend and timestamp play no part."""
    return classify_value(gauge, reading.value)
