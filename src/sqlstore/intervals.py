"""
Relative timestamp helpers for ``"<n> <unit>"`` interval strings.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from .errors import MalformedIntervalError

_MAGNITUDE_RE = re.compile(r"[+-]?[0-9]+")

# Checked in order; the first unit contained in the interval wins.
_UNITS = ("day", "month", "year")


def parse_interval(interval: str) -> tuple[int, str | None]:
    """
    Split an interval into its integer magnitude and recognized unit.

    The unit is ``None`` when none of ``day``, ``month`` or ``year`` occurs in the text.
    """
    tokens = interval.split()
    if not tokens:
        raise MalformedIntervalError(interval, "interval is empty")
    if not _MAGNITUDE_RE.fullmatch(tokens[0]):
        raise MalformedIntervalError(interval)
    magnitude = int(tokens[0])
    for unit in _UNITS:
        if unit in interval:
            return magnitude, unit
    return magnitude, None


def add_date(moment: datetime, years: int = 0, months: int = 0, days: int = 0) -> datetime:
    """
    Shift ``moment`` by whole calendar units.

    Days past the end of the target month roll into the next month, so
    31 March minus one month lands on 3 March (2 March in leap years).
    """
    month_index = moment.month - 1 + months
    year = moment.year + years + month_index // 12
    month = month_index % 12 + 1
    try:
        first = moment.replace(year=year, month=month, day=1)
        return first + timedelta(days=moment.day - 1 + days)
    except (ValueError, OverflowError) as exc:
        raise OverflowError(f"Date shift out of range from {moment.isoformat()}") from exc


def format_timestamp(moment: datetime) -> str:
    """
    Render an RFC 3339 timestamp with second precision and a numeric offset.
    """
    if moment.tzinfo is None:
        # Naive values are local wall-clock time.
        moment = moment.astimezone()
    return moment.isoformat(timespec="seconds")


def relative_timestamp(interval: str, *, now: datetime | None = None) -> str:
    """
    Return the timestamp ``interval`` before ``now`` (default: current local time).

    The shift is applied to wall-clock time and the UTC offset is resolved
    afterwards, so crossing a DST change keeps the hour and picks the offset in
    force on the resulting date. A ``now`` with a fixed-offset tzinfo keeps
    that offset; pass a ``zoneinfo.ZoneInfo`` datetime to get zone rules.

    ``"2 days"``, ``"1 month"`` and ``"3 years"`` are understood. An interval with
    no recognized unit yields ``now`` unchanged. A non-integer magnitude raises
    ``MalformedIntervalError``.
    """
    magnitude, unit = parse_interval(interval)
    current = now if now is not None else datetime.now()
    try:
        if unit == "day":
            shifted = add_date(current, days=-magnitude)
        elif unit == "month":
            shifted = add_date(current, months=-magnitude)
        elif unit == "year":
            shifted = add_date(current, years=-magnitude)
        else:
            shifted = current
    except OverflowError as exc:
        raise MalformedIntervalError(interval, "shift leaves the supported date range") from exc
    return format_timestamp(shifted)
