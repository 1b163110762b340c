"""Tests for the explanation generator."""

from bubble_gauge.aggregator.engine import aggregate
from bubble_gauge.explain.generator import (
    ALL_SAFE_MESSAGE,
    STATUS_GUIDANCE,
    generate_explanation,
    status_guidance,
)
from bubble_gauge.types import OverallStatus, Reading, RiskLevel


def _explain(registry, readings):
    result = aggregate(registry, readings)
    return generate_explanation(result, registry, readings)


class TestGenerateExplanation:
    def test_all_safe_default_message(self, registry, calm_readings):
        drivers, guidance = _explain(registry, calm_readings)
        assert drivers == [ALL_SAFE_MESSAGE]
        assert guidance.label == "Normal Market"

    def test_danger_driver(self, registry, make_readings):
        readings = make_readings({"valuation-metrics": RiskLevel.DANGER})
        drivers, _ = _explain(registry, readings)
        assert drivers == ["Valuation Heat in danger zone: 34.2 (above warning limit 30.0)"]

    def test_warning_driver(self, registry, make_readings):
        readings = make_readings({"gdp-dependence": RiskLevel.WARNING})
        drivers, _ = _explain(registry, readings)
        assert drivers == ["GDP Dependence elevated: 1.0% (above safe limit 0.5%)"]

    def test_inverted_gauge_says_below(self, registry, make_readings):
        readings = make_readings({"application-maturity": RiskLevel.DANGER})
        drivers, _ = _explain(registry, readings)
        assert drivers == ["Application Maturity in danger zone: 20 (below warning limit 35)"]

    def test_danger_listed_before_warning(self, registry, make_readings):
        readings = make_readings(
            {"capex-revenue": RiskLevel.WARNING, "sentiment-speculation": RiskLevel.DANGER}
        )
        drivers, _ = _explain(registry, readings)
        assert len(drivers) == 2
        assert drivers[0].startswith("Sentiment & Speculation in danger zone")
        assert drivers[1].startswith("CapEx-to-Revenue elevated")

    def test_missing_reading_reported(self, registry, make_readings):
        readings = make_readings(skip=("regulatory-risk",))
        drivers, guidance = _explain(registry, readings)
        assert drivers == ["Regulatory Risk: no reading"]
        assert guidance.label == "Normal Market"

    def test_sample_readings(self, registry, sample_readings):
        drivers, guidance = _explain(registry, sample_readings)
        assert len(drivers) == 10
        assert drivers[0].startswith("Valuation Heat in danger zone")
        assert guidance.label == "Caution"
        assert guidance.action == "Increase vigilance, review positions"

    def test_bubble_guidance(self, registry, make_readings):
        readings = make_readings(default=RiskLevel.DANGER)
        drivers, guidance = _explain(registry, readings)
        assert len(drivers) == 10
        assert guidance.label == "Bubble Territory"

    def test_ignores_readings_outside_result(self, registry, calm_readings):
        readings = dict(calm_readings)
        readings["extra"] = Reading(value=99.0)
        drivers, _ = _explain(registry, readings)
        assert drivers == [ALL_SAFE_MESSAGE]


class TestStatusGuidance:
    def test_every_status_covered(self):
        assert set(STATUS_GUIDANCE) == set(OverallStatus)

    def test_labels(self):
        assert status_guidance(OverallStatus.NORMAL).label == "Normal Market"
        assert status_guidance(OverallStatus.CAUTION).label == "Caution"
        assert status_guidance(OverallStatus.OVERHEATING).label == "Overheating"
        assert status_guidance(OverallStatus.BUBBLE).action == "Defensive positioning recommended"
