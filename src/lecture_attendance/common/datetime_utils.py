from __future__ import annotations

import logging
from datetime import datetime, time
from typing import Optional

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59, 999000)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime into a naive local datetime.

    A trailing 'Z' is accepted. Aware values are converted to server local time.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def resolve_day(raw: Optional[str | datetime], *, now: Optional[datetime] = None) -> datetime:
    """Turn an optional client-supplied date into a moment inside the wanted day.

    Missing values mean today. Unparseable values also fall back to now; this
    mirrors how the service has always behaved and is logged so bad input can
    be spotted.
    """
    if isinstance(raw, datetime):
        return raw
    if raw is None or not str(raw).strip():
        return now or now_local()
    try:
        return parse_iso_datetime(str(raw))
    except ValueError:
        logger.warning("Unparseable date %r, falling back to current time", raw)
        return now or now_local()


def day_window(moment: datetime) -> tuple[datetime, datetime]:
    """Return [00:00:00.000, 23:59:59.999] of the local day containing moment."""
    day = moment.date()
    return datetime.combine(day, time.min), datetime.combine(day, END_OF_DAY)


def isoformat_millis(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds")
