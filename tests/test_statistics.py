from datetime import date

from isometric.services.aggregation import merge_days
from isometric.services.statistics import average_per_day
from isometric.services.statistics import current_streak
from isometric.services.statistics import find_best_day
from isometric.services.statistics import longest_streak
from isometric.services.statistics import summarize


def test_summarize_reports_totals_and_best_day(raw_calendar) -> None:
    days = merge_days(raw_calendar.days, raw_calendar.tooltips)

    summary = summarize(days)

    assert summary.has_data is True
    assert summary.total_count == sum(day.count for day in days) == 16
    assert summary.best_day == date(2026, 3, 3)
    assert summary.best_count == 5
    assert summary.first_date == date(2026, 3, 1)
    assert summary.last_date == date(2026, 3, 9)


def test_summarize_reports_current_week(raw_calendar) -> None:
    days = merge_days(raw_calendar.days, raw_calendar.tooltips)

    summary = summarize(days)

    assert summary.current_week_total == 4
    assert summary.current_week_start_date == date(2026, 3, 8)
    assert summary.current_week_end_date == date(2026, 3, 9)


def test_summarize_reports_streaks_and_average(raw_calendar) -> None:
    days = merge_days(raw_calendar.days, raw_calendar.tooltips)

    summary = summarize(days)

    assert summary.average_per_day == 2.0
    assert summary.longest_streak.length == 4
    assert summary.longest_streak.start_date == date(2026, 3, 5)
    assert summary.longest_streak.end_date == date(2026, 3, 8)
    assert summary.current_streak.length == 4
    assert summary.current_streak.start_date == date(2026, 3, 5)
    assert summary.current_streak.end_date == date(2026, 3, 8)


def test_summarize_empty_input_reports_no_data() -> None:
    summary = summarize([])

    assert summary.has_data is False
    assert summary.total_count == 0
    assert summary.best_day is None
    assert summary.average_per_day is None
    assert summary.current_week_start_date is None
    assert summary.longest_streak.length == 0
    assert summary.current_streak.length == 0


def test_all_zero_counts_have_no_best_day_or_streaks(make_days) -> None:
    summary = summarize(make_days([0, 0, 0, 0]))

    assert summary.has_data is True
    assert summary.best_day is None
    assert summary.best_count == 0
    assert summary.longest_streak.length == 0
    assert summary.longest_streak.start_date is None
    assert summary.longest_streak.end_date is None
    assert summary.current_streak.length == 0
    assert summary.current_streak.start_date is None


def test_best_day_prefers_first_occurrence_on_ties(make_days) -> None:
    days = make_days([1, 4, 2, 4])

    best = find_best_day(days)

    assert best is not None
    assert best.date == days[1].date
    assert best.count == 4


def test_longest_streak_prefers_most_recent_on_ties(make_days) -> None:
    days = make_days([1, 1, 0, 1, 1])

    streak = longest_streak(days)

    assert streak.length == 2
    assert streak.start_date == days[3].date
    assert streak.end_date == days[4].date


def test_longest_streak_keeps_longer_earlier_run(make_days) -> None:
    days = make_days([2, 2, 2, 0, 1, 1])

    streak = longest_streak(days)

    assert streak.length == 3
    assert streak.start_date == days[0].date
    assert streak.end_date == days[2].date


def test_current_streak_skips_single_trailing_zero(make_days) -> None:
    days = make_days([0, 1, 3, 0])

    streak = current_streak(days)

    assert streak.length == 2
    assert streak.start_date == days[1].date
    assert streak.end_date == days[2].date


def test_current_streak_counts_from_active_last_day(make_days) -> None:
    days = make_days([1, 0, 2, 2, 2])

    streak = current_streak(days)

    assert streak.length == 3
    assert streak.start_date == days[2].date
    assert streak.end_date == days[4].date


def test_current_streak_is_zero_after_two_trailing_zeros(make_days) -> None:
    streak = current_streak(make_days([3, 3, 0, 0]))

    assert streak.length == 0
    assert streak.start_date is None
    assert streak.end_date is None


def test_current_streak_runs_to_sequence_start(make_days) -> None:
    days = make_days([1, 1, 1])

    streak = current_streak(days)

    assert streak.length == 3
    assert streak.start_date == days[0].date


def test_current_streak_single_zero_day(make_days) -> None:
    assert current_streak(make_days([0])).length == 0


def test_average_per_day_over_ten_day_span(make_days) -> None:
    days = make_days([10] + [0] * 9 + [10])

    assert average_per_day(days, 20) == 2.0


def test_average_per_day_rounds_to_two_decimals(make_days) -> None:
    days = make_days([1, 0, 0, 1])

    assert average_per_day(days, 2) == 0.67


def test_average_per_day_is_undefined_for_single_day(make_days) -> None:
    days = make_days([7])

    summary = summarize(days)

    assert average_per_day(days, 7) is None
    assert summary.average_per_day is None
    assert summary.best_count == 7
