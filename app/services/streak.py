"""Workout-completion streaks: consecutive calendar days with at least one completed workout.

Pure functions only (no DB, no clock unless ``now`` is omitted). Every day key,
``today`` and ``yesterday`` are computed in one timezone so a completion at
23:30 local time never lands on the wrong day.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StreakResult:
    current_streak: int = 0
    best_streak: int = 0


def to_day_key(value: datetime | date, tz: tzinfo = timezone.utc) -> date:
    """Calendar date of an instant in ``tz``. Naive datetimes are read as UTC; dates pass through."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(tz).date()
    return value


def active_days(completed_at: Iterable[datetime | date], tz: tzinfo = timezone.utc) -> list[date]:
    """Unique day keys, most recent first."""
    return sorted({to_day_key(ts, tz) for ts in completed_at}, reverse=True)


def calculate_streaks(
    completed_at: Iterable[datetime | date],
    now: datetime | None = None,
    tz: tzinfo = timezone.utc,
) -> StreakResult:
    """
    Current streak: run of consecutive active days ending today or yesterday (else 0).
    Best streak: longest run anywhere in the history, never below the current streak.
    Same-day completions count once. Empty input gives (0, 0).
    """
    days = active_days(completed_at, tz)
    if not days:
        return StreakResult()

    today = to_day_key(now if now is not None else datetime.now(timezone.utc), tz)
    yesterday = today - ONE_DAY

    current = 0
    if days[0] in (today, yesterday):
        current = 1
        for i in range(1, len(days)):
            if days[i - 1] - days[i] == ONE_DAY:
                current += 1
            else:
                break

    best = 1
    run = 1
    for i in range(1, len(days)):
        if days[i - 1] - days[i] == ONE_DAY:
            run += 1
            best = max(best, run)
        else:
            run = 1

    return StreakResult(current_streak=current, best_streak=max(best, current))
