from datetime import date
from datetime import timedelta

import pytest

from isometric.models import DayRecord
from isometric.models import RawCalendar
from isometric.models import RawDay
from isometric.models import RawTooltip


def _make_days(
    counts: list[int], start: date = date(2026, 3, 1), days_per_week: int = 7
) -> list[DayRecord]:
    return [
        DayRecord(
            date=start + timedelta(days=offset),
            week_index=offset // days_per_week,
            color=0x39D353 if count else 0xEBEDF0,
            count=count,
        )
        for offset, count in enumerate(counts)
    ]


@pytest.fixture
def make_days():
    """Factory for consecutive day records, bucketed into weeks of `days_per_week`."""

    return _make_days


@pytest.fixture
def raw_calendar() -> RawCalendar:
    """Nine days starting on a Sunday, spread across two calendar weeks."""

    start = date(2026, 3, 1)
    counts = [0, 2, 5, 0, 1, 1, 3, 4, 0]
    days = []
    tooltips = []
    for offset, count in enumerate(counts):
        tid = f"tooltip-{offset}"
        days.append(
            RawDay(
                date=(start + timedelta(days=offset)).isoformat(),
                week=offset // 7,
                color="rgb(57, 211, 83)" if count else "rgb(235, 237, 240)",
                tid=tid,
            )
        )
        text = (
            f"{count} contribution{'s' if count != 1 else ''} on March {offset + 1}."
            if count
            else f"No contributions on March {offset + 1}."
        )
        tooltips.append(RawTooltip(tid=tid, text=text))

    # Source order is not chronological.
    days.reverse()
    return RawCalendar(username="octocat", days=days, tooltips=tooltips)
