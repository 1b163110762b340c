"""
BUBBLE GAUGE - Gauge Registry

Immutable, ordered catalog of gauge definitions.
Thresholds are validated once, at load. The classifier trusts them.
"""

from __future__ import annotations

import logging
import math
import numbers
from functools import partial
from typing import Callable, Iterable, Iterator, Optional

from bubble_gauge.errors import DuplicateGaugeError, InvalidThresholdConfig, UnknownGaugeError
from bubble_gauge.types import GaugeDefinition, GaugeUnit, Thresholds

logger = logging.getLogger(__name__)


def _format_fixed(value: float, decimals: int, suffix: str) -> str:
    return f"{value:.{decimals}f}{suffix}"


def fixed(decimals: int, suffix: str = "") -> Callable[[float], str]:
    """Value formatter with fixed precision and an optional suffix."""
    return partial(_format_fixed, decimals=decimals, suffix=suffix)


def validate_thresholds(gauge: GaugeDefinition) -> None:
    """
    Check that a gauge's thresholds form a consistent three-zone scale.

    Non-inverted gauges need safe <= warning, inverted gauges safe >= warning.

    Raises:
        InvalidThresholdConfig: On non-finite bounds or contradictory ordering.
    """
    safe, warning = gauge.thresholds.safe, gauge.thresholds.warning
    for label, bound in (("safe", safe), ("warning", warning)):
        if isinstance(bound, bool) or not isinstance(bound, numbers.Real):
            raise InvalidThresholdConfig(gauge.id, f"{label} bound {bound!r} is not a number")
        if not math.isfinite(bound):
            raise InvalidThresholdConfig(gauge.id, f"{label} bound {bound!r} is not finite")

    if gauge.inverted and safe < warning:
        raise InvalidThresholdConfig(
            gauge.id, f"inverted gauge needs safe >= warning, got {safe} < {warning}"
        )
    if not gauge.inverted and safe > warning:
        raise InvalidThresholdConfig(
            gauge.id, f"gauge needs safe <= warning, got {safe} > {warning}"
        )


class GaugeRegistry:
    """
    Ordered, read-only collection of gauge definitions.

    Iterating yields definitions in load order. Indexing and `in`
    work by gauge id.
    """

    def __init__(self, gauges: Iterable[GaugeDefinition]) -> None:
        by_id: dict[str, GaugeDefinition] = {}
        for gauge in gauges:
            if gauge.id in by_id:
                raise DuplicateGaugeError(gauge.id)
            validate_thresholds(gauge)
            by_id[gauge.id] = gauge
        self._gauges = tuple(by_id.values())
        self._by_id = by_id
        logger.debug(f"Gauge registry loaded with {len(self._gauges)} gauges")

    def __iter__(self) -> Iterator[GaugeDefinition]:
        return iter(self._gauges)

    def __len__(self) -> int:
        return len(self._gauges)

    def __contains__(self, gauge_id: object) -> bool:
        return gauge_id in self._by_id

    def __getitem__(self, gauge_id: str) -> GaugeDefinition:
        try:
            return self._by_id[gauge_id]
        except KeyError:
            raise UnknownGaugeError(gauge_id) from None

    def __repr__(self) -> str:
        return f"GaugeRegistry({list(self.ids)!r})"

    def get(self, gauge_id: str) -> Optional[GaugeDefinition]:
        return self._by_id.get(gauge_id)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(g.id for g in self._gauges)

    @property
    def gauges(self) -> tuple[GaugeDefinition, ...]:
        return self._gauges


DEFAULT_GAUGES: tuple[GaugeDefinition, ...] = (
    GaugeDefinition(
        id="capex-revenue",
        name="CapEx-to-Revenue",
        category="Financial Fundamentals",
        description="Hyperscaler AI infrastructure spend vs revenue",
        unit=GaugeUnit.RATIO,
        automated=True,
        thresholds=Thresholds(safe=0.30, warning=0.50),
        format=fixed(2),
    ),
    GaugeDefinition(
        id="gdp-dependence",
        name="GDP Dependence",
        category="Economic Impact",
        description="GDP growth reliance on datacenter buildout",
        unit=GaugeUnit.PERCENT,
        automated=False,
        thresholds=Thresholds(safe=0.5, warning=1.5),
        format=fixed(1, "%"),
    ),
    GaugeDefinition(
        id="market-concentration",
        name="Market Concentration",
        category="Market Structure",
        description="AI megacap dominance in equity markets",
        unit=GaugeUnit.INDEX,
        automated=True,
        thresholds=Thresholds(safe=40, warning=70),
        format=fixed(0),
    ),
    GaugeDefinition(
        id="application-maturity",
        name="Application Maturity",
        category="Product Adoption",
        description="Production AI apps beyond pilots",
        unit=GaugeUnit.SCORE,
        automated=False,
        thresholds=Thresholds(safe=60, warning=35),
        inverted=True,  # Low adoption is the danger condition
        format=fixed(0),
    ),
    GaugeDefinition(
        id="infrastructure-strain",
        name="Infrastructure Strain",
        category="Physical Infrastructure",
        description="Grid, water, and cooling capacity stress",
        unit=GaugeUnit.INDEX,
        automated=False,
        thresholds=Thresholds(safe=40, warning=70),
        format=fixed(0),
    ),
    GaugeDefinition(
        id="valuation-metrics",
        name="Valuation Heat",
        category="Market Valuation",
        description="P/E ratios vs historical norms",
        unit=GaugeUnit.MULTIPLE,
        automated=True,
        thresholds=Thresholds(safe=22, warning=30),
        format=fixed(1),
    ),
    GaugeDefinition(
        id="debt-financing",
        name="Debt & Leverage",
        category="Financial Leverage",
        description="Debt-to-equity in AI buildout",
        unit=GaugeUnit.RATIO,
        automated=True,
        thresholds=Thresholds(safe=0.5, warning=1.0),
        format=fixed(2),
    ),
    GaugeDefinition(
        id="regulatory-risk",
        name="Regulatory Risk",
        category="Policy & Regulation",
        description="Antitrust and policy headwinds",
        unit=GaugeUnit.SCORE,
        automated=False,
        thresholds=Thresholds(safe=40, warning=70),
        format=fixed(0),
    ),
    GaugeDefinition(
        id="geographic-concentration",
        name="Geographic Concentration",
        category="Geographic Risk",
        description="Infrastructure clustering in few regions",
        unit=GaugeUnit.INDEX,
        automated=False,
        thresholds=Thresholds(safe=50, warning=75),
        format=fixed(0),
    ),
    GaugeDefinition(
        id="sentiment-speculation",
        name="Sentiment & Speculation",
        category="Market Sentiment",
        description="IPO activity, retail flows, media hype",
        unit=GaugeUnit.INDEX,
        automated=True,
        thresholds=Thresholds(safe=50, warning=75),
        format=fixed(0),
    ),
)

DEFAULT_REGISTRY = GaugeRegistry(DEFAULT_GAUGES)
