from datetime import date

from isometric.models import StatisticsSummary
from isometric.models import Streak

NO_DATA_LABEL = "No data"
NO_ACTIVITY_LABEL = "No activity found"
EMPTY_LABEL = "-"


def format_number(value: int | float) -> str:
    if isinstance(value, float):
        return f"{value:,.2f}"
    return f"{value:,}"


def format_date(day: date) -> str:
    return f"{day:%b} {day.day}"


def format_range(start: date | None, end: date | None) -> str:
    if start is None or end is None:
        return EMPTY_LABEL
    if start == end:
        return format_date(start)
    return f"{format_date(start)} → {format_date(end)}"


def _streak_labels(streak: Streak) -> dict[str, str]:
    unit = "day" if streak.length == 1 else "days"
    return {
        "value": f"{format_number(streak.length)} {unit}",
        "range": format_range(streak.start_date, streak.end_date)
        if streak.length
        else NO_ACTIVITY_LABEL,
    }


def build_overlay(summary: StatisticsSummary) -> dict[str, object]:
    """Turn a statistics summary into display labels.

    Raw values are returned alongside the labels, untouched.
    """

    values = summary.model_dump(mode="json")
    if not summary.has_data:
        return {
            "labels": {
                "total": NO_DATA_LABEL,
                "total_range": EMPTY_LABEL,
                "this_week": NO_DATA_LABEL,
                "this_week_range": EMPTY_LABEL,
                "best_day": NO_DATA_LABEL,
                "best_day_date": EMPTY_LABEL,
                "average": EMPTY_LABEL,
                "longest_streak": NO_DATA_LABEL,
                "longest_streak_range": EMPTY_LABEL,
                "current_streak": NO_DATA_LABEL,
                "current_streak_range": EMPTY_LABEL,
            },
            "values": values,
        }

    longest = _streak_labels(summary.longest_streak)
    current = _streak_labels(summary.current_streak)

    if summary.best_day is None:
        best_day, best_day_date = NO_ACTIVITY_LABEL, EMPTY_LABEL
    else:
        best_day = format_number(summary.best_count)
        best_day_date = format_date(summary.best_day)

    average = (
        format_number(summary.average_per_day)
        if summary.average_per_day is not None
        else EMPTY_LABEL
    )

    return {
        "labels": {
            "total": format_number(summary.total_count),
            "total_range": format_range(summary.first_date, summary.last_date),
            "this_week": format_number(summary.current_week_total),
            "this_week_range": format_range(
                summary.current_week_start_date, summary.current_week_end_date
            ),
            "best_day": best_day,
            "best_day_date": best_day_date,
            "average": average,
            "longest_streak": longest["value"],
            "longest_streak_range": longest["range"],
            "current_streak": current["value"],
            "current_streak_range": current["range"],
        },
        "values": values,
    }
