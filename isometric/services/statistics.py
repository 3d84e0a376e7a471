from collections.abc import Sequence

from isometric.models import DayRecord
from isometric.models import StatisticsSummary
from isometric.models import Streak
from isometric.models import WeekGroup
from isometric.services.aggregation import group_weeks


def find_best_day(days: Sequence[DayRecord]) -> DayRecord | None:
    """Return the first day holding the maximum count, or None without activity."""

    best: DayRecord | None = None
    for day in days:
        if day.count > (best.count if best else 0):
            best = day
    return best


def average_per_day(days: Sequence[DayRecord], total_count: int) -> float | None:
    """Average over the day span between first and last date, None if it is 0."""

    if not days:
        return None

    day_span = (days[-1].date - days[0].date).days
    if day_span <= 0:
        return None
    return round(total_count / day_span, 2)


def longest_streak(days: Sequence[DayRecord]) -> Streak:
    """Longest run of active days. On ties the most recent run wins."""

    best = Streak()
    running_length = 0
    running_start = None

    for day in days:
        if day.count == 0:
            running_length = 0
            running_start = None
            continue

        if running_length == 0:
            running_start = day.date
        running_length += 1

        if running_length >= best.length:
            best = Streak(
                length=running_length, start_date=running_start, end_date=day.date
            )

    return best


def current_streak(days: Sequence[DayRecord]) -> Streak:
    """Run of active days ending at the latest day.

    A single trailing inactive day is skipped before counting, since the
    latest day may not have any data yet.
    """

    if not days:
        return Streak()

    anchor = len(days) - 1
    if days[anchor].count == 0:
        anchor -= 1
    if anchor < 0 or days[anchor].count == 0:
        return Streak()

    start = anchor
    while start > 0 and days[start - 1].count > 0:
        start -= 1

    return Streak(
        length=anchor - start + 1,
        start_date=days[start].date,
        end_date=days[anchor].date,
    )


def summarize(
    days: Sequence[DayRecord], weeks: Sequence[WeekGroup] | None = None
) -> StatisticsSummary:
    """Compute the full statistics summary for a date-sorted day sequence."""

    if not days:
        return StatisticsSummary(has_data=False)

    if weeks is None:
        weeks = group_weeks(days)

    total_count = sum(day.count for day in days)
    best = find_best_day(days)
    current_week = weeks[-1].days if weeks else ()

    return StatisticsSummary(
        has_data=True,
        total_count=total_count,
        first_date=days[0].date,
        last_date=days[-1].date,
        best_day=best.date if best else None,
        best_count=best.count if best else 0,
        current_week_total=sum(day.count for day in current_week),
        current_week_start_date=current_week[0].date if current_week else None,
        current_week_end_date=current_week[-1].date if current_week else None,
        average_per_day=average_per_day(days, total_count),
        longest_streak=longest_streak(days),
        current_streak=current_streak(days),
    )
