from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from adapters.layout.accessors import AttributeAccessors
from adapters.layout.slot_metrics import DaySlotMetrics
from domain.models import DayEvents, DayLayout
from domain.ports.layout import DayLayoutEngine, EventAccessors
from domain.services.day_event_layout import get_styled_events


@dataclass(frozen=True)
class LayoutConfig:
    day_start: time = time.min
    day_end: time = time.max
    step: int = 30
    timeslots: int = 2
    minimum_start_difference: float | None = None


class DayColumnLayoutEngine(DayLayoutEngine):
    def __init__(
        self,
        config: LayoutConfig | None = None,
        accessors: EventAccessors | None = None,
    ) -> None:
        self.config = config or LayoutConfig()
        self.accessors = accessors or AttributeAccessors()

    def slot_metrics(self, day_events: DayEvents) -> DaySlotMetrics:
        return DaySlotMetrics(
            day=day_events.day,
            day_start=self.config.day_start,
            day_end=self.config.day_end,
            step=self.config.step,
            timeslots=self.config.timeslots,
        )

    def layout(self, day_events: DayEvents) -> DayLayout:
        metrics = self.slot_metrics(day_events)
        tolerance = self.config.minimum_start_difference
        if tolerance is None:
            tolerance = metrics.minimum_start_difference
        styled = get_styled_events(
            day_events.events,
            minimum_start_difference=tolerance,
            slot_metrics=metrics,
            accessors=self.accessors,
        )
        return DayLayout(day=day_events.day, events=styled)
