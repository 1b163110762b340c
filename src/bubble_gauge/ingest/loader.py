"""
BUBBLE GAUGE - Readings Loader

Thin adapter turning a readings table (CSV or JSON records) into
(gauge_id, Reading) updates. Knows nothing about the registry and
does not validate values; the session does both.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from bubble_gauge.errors import ReadingsFormatError
from bubble_gauge.types import Reading, Trend

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("gauge_id", "value", "trend", "last_update")


def readings_from_frame(df: pd.DataFrame) -> list[tuple[str, Reading]]:
    """
    Convert a readings DataFrame into ordered (gauge_id, Reading) pairs.

    Args:
        df: One row per update with columns gauge_id, value, trend, last_update.

    Returns:
        Updates in row order. Duplicate ids are kept; later rows win when applied.

    Raises:
        ReadingsFormatError: On missing columns, non-numeric values, or unknown trend tags.
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ReadingsFormatError(f"Readings table missing columns: {missing}")

    timestamps = pd.to_datetime(df["last_update"], errors="coerce")
    updates: list[tuple[str, Reading]] = []

    for row, ts in zip(df.itertuples(index=False), timestamps):
        gauge_id = str(row.gauge_id).strip()
        try:
            value = float(row.value)
        except (TypeError, ValueError):
            raise ReadingsFormatError(
                f"Non-numeric value {row.value!r} for gauge '{gauge_id}'"
            ) from None

        if pd.isna(row.trend) or str(row.trend).strip() == "":
            trend = Trend.STABLE
        else:
            try:
                trend = Trend(str(row.trend).strip().lower())
            except ValueError:
                raise ReadingsFormatError(
                    f"Unknown trend {row.trend!r} for gauge '{gauge_id}'"
                ) from None

        last_update = None if pd.isna(ts) else ts.date()
        updates.append((gauge_id, Reading(value=value, trend=trend, last_update=last_update)))

    return updates


def load_readings(path: Path | str) -> list[tuple[str, Reading]]:
    """Load readings from a .csv or .json (records) file."""
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        df = pd.read_csv(path)
    elif suffix == ".json":
        df = pd.read_json(path, orient="records", convert_dates=False)
    else:
        raise ReadingsFormatError(f"Unsupported readings file type: {path.name}")

    updates = readings_from_frame(df)
    logger.info(f"Loaded {len(updates)} readings from {path}")
    return updates
