from __future__ import annotations

from datetime import date, datetime, time, timezone

import pytest

from adapters.layout.slot_metrics import DaySlotMetrics
from domain.services.event_geometry import EventLayoutError

DAY = date(2024, 3, 18)


def _at(hour: int, minute: int = 0, day: date = DAY) -> datetime:
    return datetime.combine(day, time(hour, minute))


def test_full_day_grid_uses_minutes_from_midnight() -> None:
    metrics = DaySlotMetrics(day=DAY)
    slot_range = metrics.get_range(_at(9), _at(10, 30))

    assert metrics.num_slots == 48
    assert (slot_range.start, slot_range.end) == (540, 630)
    assert slot_range.top == pytest.approx(37.5)
    assert slot_range.height == pytest.approx(6.25)
    assert slot_range.start_date == _at(9)


def test_range_is_clamped_to_visible_window() -> None:
    metrics = DaySlotMetrics(day=DAY, day_start=time(8), day_end=time(18))
    slot_range = metrics.get_range(_at(7), _at(9))

    assert (slot_range.start, slot_range.end) == (0, 60)
    assert slot_range.start_date == _at(8)
    assert slot_range.top == pytest.approx(0)
    assert slot_range.height == pytest.approx(10)


def test_event_running_into_next_day_stops_at_window_end() -> None:
    metrics = DaySlotMetrics(day=DAY, day_start=time(8), day_end=time(18))
    slot_range = metrics.get_range(_at(17), _at(1, day=date(2024, 3, 19)))

    assert slot_range.end == 600
    assert slot_range.end_date == _at(18)
    assert slot_range.top + slot_range.height == pytest.approx(100)


def test_grid_rounds_up_to_whole_slot_groups() -> None:
    metrics = DaySlotMetrics(day=DAY, day_start=time(8), day_end=time(17, 45), step=15, timeslots=4)

    assert metrics.total_minutes == 585
    assert metrics.num_slots == 40
    assert metrics.get_range(_at(8), _at(18)).height == pytest.approx(585 / 600 * 100)


def test_minimum_start_difference_is_half_a_slot_group() -> None:
    assert DaySlotMetrics().minimum_start_difference == 30
    assert DaySlotMetrics(step=15, timeslots=3).minimum_start_difference == 23


def test_window_follows_event_timezone_and_date() -> None:
    metrics = DaySlotMetrics()
    start = datetime(2024, 3, 18, 6, 0, tzinfo=timezone.utc)
    slot_range = metrics.get_range(start, datetime(2024, 3, 18, 7, 0, tzinfo=timezone.utc))

    assert slot_range.start == 360
    assert slot_range.start_date.tzinfo is timezone.utc


def test_non_datetime_instants_are_rejected() -> None:
    with pytest.raises(EventLayoutError, match="datetime instants"):
        DaySlotMetrics().get_range(0, 10)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"step": 0},
        {"timeslots": 0},
        {"day_start": time(10), "day_end": time(9)},
    ],
)
def test_invalid_grid_is_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        DaySlotMetrics(**kwargs)
