"""JSON-based persistence for the month configuration."""

import calendar
import json
import logging
import os
from datetime import date

from models import InDateStyle, OutDateStyle, YearMonth
from month_config import MonthConfig

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".month-grid-settings.json")

# Default range: the current month and the eleven after it
_DEFAULT_SPAN = 11


def _defaults() -> dict:
    start = YearMonth.of(date.today())
    end = start
    for _ in range(_DEFAULT_SPAN):
        end = end.next
    return {
        "out_date_style": OutDateStyle.END_OF_ROW,
        "in_date_style": InDateStyle.ALIGNED,
        "max_row_count": 6,
        "start_month": start,
        "end_month": end,
        "first_day_of_week": calendar.MONDAY,
        "has_boundaries": True,
    }


def _read(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        logger.debug("No usable settings at %s, using defaults", path)
        return {}
    if not isinstance(stored, dict):
        logger.debug("Ignoring settings at %s: not a JSON object", path)
        return {}
    return stored


def load_month_config(path: str | None = None) -> MonthConfig:
    """Load a MonthConfig from disk, falling back to defaults per key.

    Stored values of the wrong type are ignored. Values of the right type are
    still validated by MonthConfig and may raise MonthConfigError.
    """
    settings = _defaults()
    stored = _read(path or _SETTINGS_PATH)

    for key, enum_cls in (("out_date_style", OutDateStyle), ("in_date_style", InDateStyle)):
        if key in stored:
            try:
                settings[key] = enum_cls(stored[key])
            except ValueError:
                logger.debug("Ignoring %s=%r", key, stored[key])
    for key in ("max_row_count", "first_day_of_week"):
        if key in stored and isinstance(stored[key], int) and not isinstance(stored[key], bool):
            settings[key] = stored[key]
    if "has_boundaries" in stored and isinstance(stored["has_boundaries"], bool):
        settings["has_boundaries"] = stored["has_boundaries"]
    loaded = set()
    for key in ("start_month", "end_month"):
        if key in stored and isinstance(stored[key], str):
            try:
                settings[key] = YearMonth.parse(stored[key])
                loaded.add(key)
            except ValueError:
                logger.debug("Ignoring %s=%r", key, stored[key])
    if "end_month" not in loaded:
        settings["end_month"] = max(settings["end_month"], settings["start_month"])

    return MonthConfig(**settings)


def save_month_config(config: MonthConfig, path: str | None = None) -> None:
    """Persist config to disk."""
    data = {
        "out_date_style": config.out_date_style.value,
        "in_date_style": config.in_date_style.value,
        "max_row_count": config.max_row_count,
        "start_month": str(config.start_month),
        "end_month": str(config.end_month),
        "first_day_of_week": config.first_day_of_week,
        "has_boundaries": config.has_boundaries,
    }
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
