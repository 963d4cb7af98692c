from __future__ import annotations

from typing import Any, Protocol

from domain.models import DayEvents, DayLayout, Dimension, SlotRange


class SlotMetrics(Protocol):
    def get_range(self, start: Any, end: Any) -> SlotRange:
        ...


class EventAccessors(Protocol):
    def start(self, event: Any) -> Any:
        ...

    def end(self, event: Any) -> Any:
        ...

    def event_type(self, event: Any) -> str | None:
        ...

    def width(self, event: Any) -> Dimension | None:
        ...


class DayLayoutEngine(Protocol):
    def layout(self, day_events: DayEvents) -> DayLayout:
        ...
