from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Literal, Optional, Set

from pydantic import BaseModel, Field, field_validator, model_validator

PERCENT = "%"
PIXELS = "px"

Unit = Literal["%", "px", ""]


@dataclass(frozen=True)
class Dimension:
    value: float
    unit: Unit = PERCENT

    def to_dict(self) -> dict:
        return {"value": self.value, "unit": self.unit}


class DimensionSpec(BaseModel):
    value: float = Field(..., ge=0)
    unit: Literal["%", "px"] = PERCENT

    def to_dimension(self) -> Dimension:
        return Dimension(self.value, self.unit)


class CalendarEvent(BaseModel):
    event_id: str = Field(..., min_length=1)
    title: str = ""
    start: datetime
    end: datetime
    event_type: Optional[str] = None
    width: Optional[DimensionSpec] = None

    @field_validator("event_type", mode="before")
    @classmethod
    def blank_event_type_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def ensure_end_after_start(self) -> CalendarEvent:
        if self.end < self.start:
            msg = f"Event {self.event_id} ends before it starts"
            raise ValueError(msg)
        return self


class DayEvents(BaseModel):
    day: date
    events: List[CalendarEvent] = Field(default_factory=list)

    @field_validator("events", mode="after")
    @classmethod
    def ensure_unique_event_ids(cls, events: List[CalendarEvent]) -> List[CalendarEvent]:
        seen: Set[str] = set()
        for event in events:
            if event.event_id in seen:
                msg = f"Duplicate event_id found: {event.event_id}"
                raise ValueError(msg)
            seen.add(event.event_id)
        return events

    @model_validator(mode="after")
    def ensure_events_start_on_day(self) -> DayEvents:
        for event in self.events:
            if event.start.date() != self.day:
                msg = f"Event {event.event_id} starts on {event.start.date()}, not on {self.day}"
                raise ValueError(msg)
        return self


@dataclass(frozen=True)
class SlotRange:
    start: float
    end: float
    start_date: Any
    end_date: Any
    top: float
    height: float


@dataclass(frozen=True)
class EventStyle:
    top: float
    height: float
    width: Dimension
    x_offset: Dimension

    def to_dict(self) -> dict:
        return {
            "top": self.top,
            "height": self.height,
            "width": self.width.to_dict(),
            "xOffset": self.x_offset.to_dict(),
        }


@dataclass(frozen=True)
class StyledEvent:
    event: Any
    style: EventStyle

    def to_dict(self) -> dict:
        event = self.event
        if isinstance(event, BaseModel):
            event = event.model_dump(mode="json")
        return {"event": event, "style": self.style.to_dict()}


@dataclass(frozen=True)
class DayLayout:
    day: date
    events: List[StyledEvent]

    def to_dict(self) -> dict:
        return {
            "day": self.day.isoformat(),
            "events": [styled.to_dict() for styled in self.events],
        }
