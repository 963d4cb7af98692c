from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any

from domain.models import SlotRange
from domain.ports.layout import SlotMetrics
from domain.services.event_geometry import EventLayoutError


@dataclass(frozen=True)
class DaySlotMetrics(SlotMetrics):
    """Time grid of a day column.

    Placement space is measured in minutes from ``day_start``; ``top`` and
    ``height`` are percentages of the grid, which spans whole slot groups.
    """

    day: date | None = None
    day_start: time = time.min
    day_end: time = time.max
    step: int = 30
    timeslots: int = 2

    def __post_init__(self) -> None:
        if self.step <= 0 or self.timeslots <= 0:
            msg = "step and timeslots must be positive"
            raise ValueError(msg)
        if self.day_end <= self.day_start:
            msg = "day_end must be after day_start"
            raise ValueError(msg)

    @property
    def group_size(self) -> int:
        return self.step * self.timeslots

    @property
    def minimum_start_difference(self) -> int:
        return math.ceil(self.group_size / 2)

    @property
    def total_minutes(self) -> float:
        anchor = date(2000, 1, 1)
        span = datetime.combine(anchor, self.day_end) - datetime.combine(anchor, self.day_start)
        return span / timedelta(minutes=1)

    @property
    def num_slots(self) -> int:
        return math.ceil(self.total_minutes / self.group_size) * self.timeslots

    def window(self, reference: datetime) -> tuple[datetime, datetime]:
        day = self.day or reference.date()
        return (
            datetime.combine(day, self.day_start, tzinfo=reference.tzinfo),
            datetime.combine(day, self.day_end, tzinfo=reference.tzinfo),
        )

    def position_from_date(self, value: datetime, window_start: datetime) -> float:
        return (value - window_start) / timedelta(minutes=1)

    def get_range(self, start: Any, end: Any) -> SlotRange:
        if not isinstance(start, datetime) or not isinstance(end, datetime):
            msg = f"Day slot metrics need datetime instants, got {start!r} and {end!r}"
            raise EventLayoutError(msg)

        window_start, window_end = self.window(start)
        range_start = min(window_end, max(window_start, start))
        range_end = min(window_end, max(window_start, end))

        start_min = self.position_from_date(range_start, window_start)
        end_min = self.position_from_date(range_end, window_start)
        grid_minutes = self.step * self.num_slots

        top = start_min / grid_minutes * 100

        return SlotRange(
            start=start_min,
            end=end_min,
            start_date=range_start,
            end_date=range_end,
            top=top,
            height=end_min / grid_minutes * 100 - top,
        )
