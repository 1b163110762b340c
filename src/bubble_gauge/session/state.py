"""
BUBBLE GAUGE - Session State

Owns the current readings and the selected gauge.
All risk computation is delegated to the aggregator; nothing
derived is cached here, so every snapshot reflects the latest update.

Each update replaces one immutable Reading with a single dict
assignment. Concurrent writers to the same id must be ordered by
the host (last write wins).
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from bubble_gauge.aggregator.engine import aggregate
from bubble_gauge.classifier.engine import check_value
from bubble_gauge.config import AggregationPolicy
from bubble_gauge.errors import InvalidReadingValue, UnknownGaugeError
from bubble_gauge.registry.catalog import DEFAULT_REGISTRY, GaugeRegistry
from bubble_gauge.types import GaugeDefinition, Reading, SessionSnapshot

logger = logging.getLogger(__name__)


class SessionState:
    """In-memory readings plus a view-state selection pointer."""

    def __init__(
        self,
        registry: GaugeRegistry | None = None,
        readings: Mapping[str, Reading] | None = None,
        policy: AggregationPolicy | None = None,
    ) -> None:
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.policy = policy or AggregationPolicy()
        self._readings: dict[str, Reading] = {}
        self._rejected: dict[str, str] = {}
        self._selected_gauge_id: Optional[str] = None

        for gauge_id, reading in (readings or {}).items():
            self.update_reading(gauge_id, reading)

    @property
    def readings(self) -> Mapping[str, Reading]:
        """Read-only view of the current readings."""
        return MappingProxyType(self._readings)

    @property
    def rejected(self) -> Mapping[str, str]:
        """Gauges whose latest update was rejected, with the reason."""
        return MappingProxyType(self._rejected)

    @property
    def selected_gauge_id(self) -> Optional[str]:
        return self._selected_gauge_id

    @property
    def selected_gauge(self) -> Optional[GaugeDefinition]:
        if self._selected_gauge_id is None:
            return None
        return self.registry[self._selected_gauge_id]

    def get_reading(self, gauge_id: str) -> Optional[Reading]:
        if gauge_id not in self.registry:
            raise UnknownGaugeError(gauge_id)
        return self._readings.get(gauge_id)

    def update_reading(self, gauge_id: str, reading: Reading) -> None:
        """
        Replace the reading for one gauge.

        Raises:
            UnknownGaugeError: If gauge_id is not in the registry. Nothing changes.
            InvalidReadingValue: If reading is not a Reading or its value is not
                finite. The stored reading is kept and the gauge is flagged as rejected.
        """
        if gauge_id not in self.registry:
            raise UnknownGaugeError(gauge_id)

        try:
            if not isinstance(reading, Reading):
                raise InvalidReadingValue(gauge_id, reading, "is not a Reading")
            check_value(gauge_id, reading.value)
        except InvalidReadingValue as exc:
            self._rejected[gauge_id] = str(exc)
            raise

        self._readings[gauge_id] = reading
        self._rejected.pop(gauge_id, None)
        logger.debug(f"Reading updated: {gauge_id}={reading.value} ({reading.trend.value})")

    def select(self, gauge_id: Optional[str]) -> None:
        """Set or clear the selected gauge. Unknown ids leave the selection unchanged."""
        if gauge_id is not None and gauge_id not in self.registry:
            raise UnknownGaugeError(gauge_id)
        self._selected_gauge_id = gauge_id

    def snapshot(self) -> SessionSnapshot:
        """Current readings and selection with a freshly computed aggregate."""
        readings = dict(self._readings)
        return SessionSnapshot(
            gauges=self.registry.gauges,
            readings=readings,
            selected_gauge_id=self._selected_gauge_id,
            result=aggregate(self.registry, readings, self.policy),
            rejected=dict(self._rejected),
        )
