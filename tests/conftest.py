"""Shared fixtures for BUBBLE GAUGE tests."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure bubble_gauge is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bubble_gauge.registry.catalog import DEFAULT_REGISTRY, GaugeRegistry
from bubble_gauge.session.state import SessionState
from bubble_gauge.types import Reading, RiskLevel, Trend

AS_OF = date(2025, 12, 5)

# One representative value per gauge per zone, well away from the boundaries
ZONE_VALUES = {
    RiskLevel.SAFE: {
        "capex-revenue": 0.10,
        "gdp-dependence": 0.2,
        "market-concentration": 20,
        "application-maturity": 80,
        "infrastructure-strain": 20,
        "valuation-metrics": 15.0,
        "debt-financing": 0.20,
        "regulatory-risk": 20,
        "geographic-concentration": 30,
        "sentiment-speculation": 30,
    },
    RiskLevel.WARNING: {
        "capex-revenue": 0.40,
        "gdp-dependence": 1.0,
        "market-concentration": 55,
        "application-maturity": 48,
        "infrastructure-strain": 55,
        "valuation-metrics": 25.0,
        "debt-financing": 0.70,
        "regulatory-risk": 55,
        "geographic-concentration": 60,
        "sentiment-speculation": 60,
    },
    RiskLevel.DANGER: {
        "capex-revenue": 0.80,
        "gdp-dependence": 2.5,
        "market-concentration": 90,
        "application-maturity": 20,
        "infrastructure-strain": 90,
        "valuation-metrics": 34.2,
        "debt-financing": 1.50,
        "regulatory-risk": 90,
        "geographic-concentration": 90,
        "sentiment-speculation": 90,
    },
}


@pytest.fixture
def registry() -> GaugeRegistry:
    return DEFAULT_REGISTRY


@pytest.fixture
def make_readings():
    """
    Build a full reading set.

    make_readings({"valuation-metrics": RiskLevel.DANGER}) puts that gauge
    in danger and every other gauge in `default`.
    """

    def _make(levels=None, default=RiskLevel.SAFE, skip=()):
        levels = levels or {}
        readings = {}
        for gauge in DEFAULT_REGISTRY:
            if gauge.id in skip:
                continue
            level = levels.get(gauge.id, default)
            readings[gauge.id] = Reading(
                value=ZONE_VALUES[level][gauge.id],
                trend=Trend.STABLE,
                last_update=AS_OF,
            )
        return readings

    return _make


@pytest.fixture
def calm_readings(make_readings) -> dict:
    """All ten gauges well inside their safe zone."""
    return make_readings()


@pytest.fixture
def sample_readings() -> dict:
    """Demo readings shipped in data/sample_readings.csv."""
    rows = [
        ("capex-revenue", 0.42, Trend.RISING, date(2025, 12, 5)),
        ("gdp-dependence", 0.8, Trend.STABLE, date(2025, 12, 1)),
        ("market-concentration", 58, Trend.RISING, date(2025, 12, 5)),
        ("application-maturity", 48, Trend.IMPROVING, date(2025, 12, 1)),
        ("infrastructure-strain", 52, Trend.RISING, date(2025, 12, 1)),
        ("valuation-metrics", 34.2, Trend.RISING, date(2025, 12, 5)),
        ("debt-financing", 0.68, Trend.STABLE, date(2025, 12, 5)),
        ("regulatory-risk", 45, Trend.RISING, date(2025, 12, 1)),
        ("geographic-concentration", 62, Trend.STABLE, date(2025, 12, 1)),
        ("sentiment-speculation", 61, Trend.RISING, date(2025, 12, 5)),
    ]
    return {
        gauge_id: Reading(value=value, trend=trend, last_update=updated)
        for gauge_id, value, trend, updated in rows
    }


@pytest.fixture
def session(calm_readings) -> SessionState:
    return SessionState(readings=calm_readings)


@pytest.fixture
def sample_csv() -> Path:
    return Path(__file__).parent.parent / "data" / "sample_readings.csv"
