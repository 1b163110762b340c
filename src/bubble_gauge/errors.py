"""
BUBBLE GAUGE - Error Taxonomy

All errors are raised synchronously at the call that detects them.
Nothing is retried internally.

A gauge without a reading is NOT an error: it is reported as
"unclassified" by the aggregator.
"""

from __future__ import annotations


class BubbleGaugeError(Exception):
    """Base class for all engine errors."""


class RegistryConfigError(BubbleGaugeError):
    """Gauge registry could not be loaded. Fatal."""


class InvalidThresholdConfig(RegistryConfigError):
    """Threshold ordering contradicts the inverted flag, or a bound is non-finite."""

    def __init__(self, gauge_id: str, reason: str) -> None:
        self.gauge_id = gauge_id
        self.reason = reason
        super().__init__(f"Invalid thresholds for gauge '{gauge_id}': {reason}")


class DuplicateGaugeError(RegistryConfigError):
    """Two registry entries share the same id."""

    def __init__(self, gauge_id: str) -> None:
        self.gauge_id = gauge_id
        super().__init__(f"Duplicate gauge id '{gauge_id}'")


class InvalidReadingValue(BubbleGaugeError):
    """Reading value is not a finite real number."""

    def __init__(self, gauge_id: str, value: object, reason: str = "is not finite") -> None:
        self.gauge_id = gauge_id
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid reading for gauge '{gauge_id}': {value!r} {reason}")


class UnknownGaugeError(BubbleGaugeError, KeyError):
    """Gauge id is not in the registry."""

    def __init__(self, gauge_id: object) -> None:
        self.gauge_id = gauge_id
        super().__init__(gauge_id)

    def __str__(self) -> str:
        return f"Unknown gauge id '{self.gauge_id}'"


class ReadingsFormatError(BubbleGaugeError):
    """Readings input is malformed (missing columns, unknown trend tags)."""
