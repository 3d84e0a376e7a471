import logging
from collections.abc import Iterable
from datetime import date
from datetime import datetime

from isometric.models import DayRecord
from isometric.models import RawDay
from isometric.models import RawTooltip
from isometric.models import WeekGroup
from isometric.services.parsing import decode_color
from isometric.services.parsing import extract_count

logger = logging.getLogger(__name__)


def _parse_day(raw_day: str | date) -> date | None:
    if isinstance(raw_day, datetime):
        return raw_day.date()
    if isinstance(raw_day, date):
        return raw_day

    try:
        return date.fromisoformat(raw_day.strip()[:10])
    except ValueError:
        return None


def index_counts(tooltips: Iterable[RawTooltip]) -> dict[str, int]:
    """Build a join-key → count map. The first annotation for a key wins."""

    counts_by_tid: dict[str, int] = {}
    for tooltip in tooltips:
        if tooltip.tid in counts_by_tid:
            continue
        counts_by_tid[tooltip.tid] = extract_count(tooltip.text)
    return counts_by_tid


def merge_days(
    raw_days: Iterable[RawDay], tooltips: Iterable[RawTooltip]
) -> list[DayRecord]:
    """Left-join count annotations onto calendar cells, sorted by date."""

    counts_by_tid = index_counts(tooltips)
    records_by_date: dict[date, DayRecord] = {}

    for raw_day in raw_days:
        parsed_day = _parse_day(raw_day.date)
        if parsed_day is None:
            logger.debug("Skipping calendar cell with invalid date %r", raw_day.date)
            continue
        if parsed_day in records_by_date:
            continue

        count = counts_by_tid.get(raw_day.tid, 0) if raw_day.tid else 0
        records_by_date[parsed_day] = DayRecord(
            date=parsed_day,
            week_index=raw_day.week,
            color=decode_color(raw_day.color),
            count=count,
        )

    return sorted(records_by_date.values(), key=lambda record: record.date)


def group_weeks(days: Iterable[DayRecord]) -> list[WeekGroup]:
    """Group date-sorted days by week index, keeping first-seen week order."""

    grouped_days: dict[int, list[DayRecord]] = {}
    for day in days:
        grouped_days.setdefault(day.week_index, []).append(day)

    return [
        WeekGroup(week_index=week_index, days=tuple(week_days))
        for week_index, week_days in grouped_days.items()
    ]
