"""
BUBBLE GAUGE - Configuration & Policy Constants

Single source of truth for the overall-status rule.
All values are named, documented, and centralized.

The overall-status thresholds are global policy, never per gauge.
Per-gauge thresholds live in the registry.
"""

from dataclasses import dataclass, field

from bubble_gauge.registry.catalog import DEFAULT_REGISTRY, GaugeRegistry

BUBBLE_DANGER_MIN = 4  # 4+ gauges in danger -> BUBBLE
OVERHEATING_DANGER_MIN = 2  # 2-3 gauges in danger -> OVERHEATING
CAUTION_DANGER_MIN = 1  # any gauge in danger -> at least CAUTION
CAUTION_WARNING_MIN = 5  # 5+ gauges in warning -> at least CAUTION


@dataclass(frozen=True)
class AggregationPolicy:
    """Overall-status rules, evaluated top to bottom, first match wins."""

    bubble_danger_min: int = BUBBLE_DANGER_MIN
    overheating_danger_min: int = OVERHEATING_DANGER_MIN
    caution_danger_min: int = CAUTION_DANGER_MIN
    caution_warning_min: int = CAUTION_WARNING_MIN


@dataclass(frozen=True)
class BubbleGaugeConfig:
    """Master configuration for BUBBLE GAUGE."""

    registry: GaugeRegistry = DEFAULT_REGISTRY
    policy: AggregationPolicy = field(default_factory=AggregationPolicy)
