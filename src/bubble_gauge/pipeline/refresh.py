"""
BUBBLE GAUGE - Refresh Pipeline Orchestration

Flow: load -> update session -> aggregate -> explain

A rejected update is logged and reported, then the batch continues.
Retrying is left to whoever supplies the readings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from bubble_gauge.config import BubbleGaugeConfig
from bubble_gauge.errors import InvalidReadingValue, UnknownGaugeError
from bubble_gauge.explain.generator import generate_explanation
from bubble_gauge.ingest.loader import load_readings
from bubble_gauge.session.state import SessionState
from bubble_gauge.types import Reading, SessionSnapshot, StatusGuidance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefreshReport:
    """Outcome of applying one batch of updates."""

    snapshot: SessionSnapshot
    drivers: list[str]
    guidance: StatusGuidance
    applied: int = 0
    rejected: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            **self.snapshot.to_dict(),
            "label": self.guidance.label,
            "action": self.guidance.action,
            "drivers": self.drivers,
            "coverage": self.snapshot.counts.coverage,
            "applied": self.applied,
            "batch_rejected": self.rejected,
        }


class RefreshPipeline:
    """
    BUBBLE GAUGE refresh pipeline.

    Orchestrates: load -> update session -> aggregate -> explain
    """

    def __init__(
        self,
        config: BubbleGaugeConfig | None = None,
        session: SessionState | None = None,
    ) -> None:
        self.config = config or BubbleGaugeConfig()
        self.session = session or SessionState(
            registry=self.config.registry, policy=self.config.policy
        )

    def run(self, path: Path | str) -> RefreshReport:
        """
        Load a readings file and apply it to the session.

        Args:
            path: CSV or JSON readings file.

        Returns:
            RefreshReport with snapshot, drivers, guidance, and rejections.
        """
        logger.info(f"BUBBLE GAUGE refresh starting from {path}")
        updates = load_readings(path)
        return self.process(updates)

    def process(self, updates: Iterable[tuple[str, Reading]]) -> RefreshReport:
        """
        Apply updates in order and compute the resulting snapshot.

        Can be called independently for testing without files.
        """
        applied = 0
        rejected: dict[str, str] = {}

        for gauge_id, reading in updates:
            try:
                self.session.update_reading(gauge_id, reading)
            except (UnknownGaugeError, InvalidReadingValue) as exc:
                logger.warning(f"Rejected update: {exc}")
                rejected[gauge_id] = str(exc)
                continue
            rejected.pop(gauge_id, None)
            applied += 1

        snapshot = self.session.snapshot()
        drivers, guidance = generate_explanation(
            snapshot.result, self.session.registry, snapshot.readings
        )

        counts = snapshot.counts
        logger.info(
            f"BUBBLE GAUGE: {snapshot.overall.value} "
            f"[safe={counts.safe} warning={counts.warning} danger={counts.danger} "
            f"unclassified={counts.unclassified}] applied={applied} rejected={len(rejected)}"
        )

        return RefreshReport(
            snapshot=snapshot,
            drivers=drivers,
            guidance=guidance,
            applied=applied,
            rejected=rejected,
        )
