"""Plain-text event lists: ``Mmm d: description`` per line."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

EVENT_PATTERN = re.compile(r"([A-Za-z]{3})\s(\d{1,2}):\s([^\n\r\u2028\u2029]+)", re.ASCII)

MONTH_ABBR = {
    "Jan": 0, "Feb": 1, "Mar": 2, "Apr": 3, "May": 4, "Jun": 5,
    "Jul": 6, "Aug": 7, "Sep": 8, "Oct": 9, "Nov": 10, "Dec": 11,
}


def event_key(year: int, month: int, day: int) -> str:
    """Return the ``year-month-day`` key used for parsed events (month zero-based)."""
    return f"{year}-{month}-{day}"


def parse_event_text(text: str, year: int) -> dict[str, list[str]]:
    """Return {key: [description, ...]} for every event found in ``text``.

    Matches may start anywhere in the text; anything that does not match is
    ignored. Abbreviations are case-sensitive, so ``jan 1: x`` is skipped.
    """
    parsed: dict[str, list[str]] = {}
    for match in EVENT_PATTERN.finditer(text):
        abbr, day, description = match.groups()
        month = MONTH_ABBR.get(abbr)
        if month is None:
            logger.debug("Skipping unknown month abbreviation %r", abbr)
            continue
        key = event_key(year, month, int(day))
        parsed.setdefault(key, []).append(description.strip())
    return parsed


def events_to_specs(parsed: dict[str, list[str]]) -> list[dict]:
    """Flatten parsed events into ``{month, date, event}`` entries for a calendar."""
    specs: list[dict] = []
    for key, descriptions in parsed.items():
        try:
            _year, month, day = (int(part) for part in key.rsplit("-", 2))
        except ValueError:
            logger.debug("Skipping malformed event key %r", key)
            continue
        specs.extend({"month": month, "date": day, "event": d} for d in descriptions)
    return specs
