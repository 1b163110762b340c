"""
BUBBLE GAUGE - Core Type Definitions

All dataclasses and enums used across the system.
No decision logic, only data structures and serialization.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional

import pandas as pd


class RiskLevel(Enum):
    """Per-gauge risk level. Ordered safe < warning < danger."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"

    @property
    def severity(self) -> int:
        return _RISK_SEVERITY[self]


_RISK_SEVERITY = {RiskLevel.SAFE: 0, RiskLevel.WARNING: 1, RiskLevel.DANGER: 2}


class OverallStatus(Enum):
    """System-wide verdict. Always derived from risk counts."""

    NORMAL = "NORMAL"
    CAUTION = "CAUTION"
    OVERHEATING = "OVERHEATING"
    BUBBLE = "BUBBLE"

    @property
    def severity(self) -> int:
        return _STATUS_SEVERITY[self]


_STATUS_SEVERITY = {
    OverallStatus.NORMAL: 0,
    OverallStatus.CAUTION: 1,
    OverallStatus.OVERHEATING: 2,
    OverallStatus.BUBBLE: 3,
}


class Trend(Enum):
    """Direction tag supplied with a reading. Descriptive only."""

    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"
    IMPROVING = "improving"
    WORSENING = "worsening"


class GaugeUnit(Enum):
    """Semantic unit tag. Informational only."""

    RATIO = "ratio"
    PERCENT = "percent"
    INDEX = "index"
    SCORE = "score"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class Thresholds:
    """The two breakpoints of a three-zone scale."""

    safe: float
    warning: float


@dataclass(frozen=True)
class GaugeDefinition:
    """One tracked risk indicator. Immutable configuration."""

    id: str
    name: str
    category: str
    description: str
    unit: GaugeUnit
    thresholds: Thresholds
    automated: bool = False
    inverted: bool = False  # True: higher readings are safer
    format: Callable[[float], str] = field(default=str, compare=False, repr=False)

    def format_value(self, value: float) -> str:
        return self.format(value)


@dataclass(frozen=True)
class Reading:
    """Current observation for one gauge. Replaced wholesale, never patched."""

    value: float
    trend: Trend = Trend.STABLE
    last_update: Optional[date] = None

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "trend": self.trend.value,
            "last_update": self.last_update.isoformat() if self.last_update else None,
        }


@dataclass(frozen=True)
class RiskCounts:
    """Number of gauges per risk level, plus gauges lacking a reading."""

    safe: int = 0
    warning: int = 0
    danger: int = 0
    unclassified: int = 0

    @property
    def classified(self) -> int:
        return self.safe + self.warning + self.danger

    @property
    def total(self) -> int:
        return self.classified + self.unclassified

    @property
    def coverage(self) -> float:
        """Fraction of gauges with a reading (0-1)."""
        if self.total == 0:
            return 0.0
        return self.classified / self.total

    def to_dict(self) -> dict:
        return {
            "safe": self.safe,
            "warning": self.warning,
            "danger": self.danger,
            "unclassified": self.unclassified,
        }


@dataclass(frozen=True)
class AggregateResult:
    """Aggregator output: counts, overall status, and per-gauge levels."""

    counts: RiskCounts
    overall: OverallStatus
    levels: Mapping[str, RiskLevel] = field(default_factory=dict)
    unclassified: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "levels", MappingProxyType(dict(self.levels)))

    def to_dict(self) -> dict:
        """Serialize to output JSON format."""
        return {
            "overall": self.overall.value,
            "counts": self.counts.to_dict(),
            "levels": {gauge_id: level.value for gauge_id, level in self.levels.items()},
            "unclassified": list(self.unclassified),
        }

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


@dataclass(frozen=True)
class StatusGuidance:
    """Human-facing label and recommended action for an overall status."""

    label: str
    action: str


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time view of a session: readings, selection, and derived risk."""

    gauges: tuple[GaugeDefinition, ...]
    readings: Mapping[str, Reading]
    selected_gauge_id: Optional[str]
    result: AggregateResult
    rejected: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "readings", MappingProxyType(dict(self.readings)))
        object.__setattr__(self, "rejected", MappingProxyType(dict(self.rejected)))

    @property
    def overall(self) -> OverallStatus:
        return self.result.overall

    @property
    def counts(self) -> RiskCounts:
        return self.result.counts

    def to_dict(self) -> dict:
        """Serialize to output JSON format."""
        return {
            **self.result.to_dict(),
            "selected_gauge_id": self.selected_gauge_id,
            "readings": {
                gauge_id: reading.to_dict() for gauge_id, reading in self.readings.items()
            },
            "rejected": dict(self.rejected),
        }

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def to_frame(self) -> pd.DataFrame:
        """One row per gauge in registry order. Missing readings stay as None."""
        rows = []
        for gauge in self.gauges:
            reading = self.readings.get(gauge.id)
            level = self.result.levels.get(gauge.id)
            rows.append(
                {
                    "gauge_id": gauge.id,
                    "name": gauge.name,
                    "category": gauge.category,
                    "automated": gauge.automated,
                    "value": gauge.format_value(reading.value) if reading else None,
                    "trend": reading.trend.value if reading else None,
                    "last_update": reading.last_update if reading else None,
                    "risk_level": level.value if level else None,
                    "rejected": gauge.id in self.rejected,
                    "selected": gauge.id == self.selected_gauge_id,
                }
            )
        return pd.DataFrame(rows)
