"""Calendar facts for a timezone-local "now"."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from yearprogress_renderer.models import DateFacts


def resolve_local_date(tz_name: str, now: datetime | None = None) -> date:
    """Return today's calendar date in ``tz_name``.

    ``now`` pins the instant; naive values are taken as UTC. Unknown zone
    names raise ``zoneinfo.ZoneInfoNotFoundError``.
    """
    tz = ZoneInfo(tz_name)
    if now is None:
        return datetime.now(tz).date()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(tz).date()


def day_of_year(year: int, month: int, day: int) -> int:
    return date(year, month, day).timetuple().tm_yday


def week_of_year(year: int, month: int, day: int) -> int:
    return date(year, month, day).isocalendar()[1]


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def weeks_in_year(year: int) -> int:
    # Dec 28 always falls in the last ISO week of its year.
    return date(year, 12, 28).isocalendar()[1]


def facts_for_date(value: date) -> DateFacts:
    return DateFacts(
        year=value.year,
        day_of_year=day_of_year(value.year, value.month, value.day),
        week_of_year=week_of_year(value.year, value.month, value.day),
        total_days=days_in_year(value.year),
    )


def resolve_date_facts(tz_name: str, now: datetime | None = None) -> DateFacts:
    return facts_for_date(resolve_local_date(tz_name, now))
