from __future__ import annotations

import os
from collections.abc import Callable, Generator
from datetime import date, datetime
from typing import Any

import pytest

from app.config import AppSettings, LayoutSettings
from domain.models import CalendarEvent, DayEvents

DAY = date(2024, 3, 18)


def _clear_dayview_env() -> None:
    for key in list(os.environ):
        if key.startswith("DAYVIEW_"):
            os.environ.pop(key, None)


_clear_dayview_env()


@pytest.fixture(autouse=True)
def clear_dayview_env() -> Generator[None, None, None]:
    _clear_dayview_env()
    yield
    _clear_dayview_env()


@pytest.fixture
def layout_settings() -> LayoutSettings:
    return LayoutSettings(step=30, timeslots=2, minimum_start_difference=None)


@pytest.fixture
def app_settings(layout_settings: LayoutSettings) -> AppSettings:
    return AppSettings(layout=layout_settings)


@pytest.fixture
def calendar_event_factory() -> Callable[..., CalendarEvent]:
    def _factory(
        event_id: str, start: str, end: str, **overrides: Any
    ) -> CalendarEvent:
        return CalendarEvent(
            event_id=event_id,
            title=overrides.pop("title", event_id),
            start=datetime.combine(DAY, datetime.strptime(start, "%H:%M").time()),
            end=datetime.combine(DAY, datetime.strptime(end, "%H:%M").time()),
            **overrides,
        )

    return _factory


@pytest.fixture
def day_events(calendar_event_factory: Callable[..., CalendarEvent]) -> DayEvents:
    return DayEvents(
        day=DAY,
        events=[
            calendar_event_factory("standup", "09:00", "09:30"),
            calendar_event_factory("review", "09:00", "10:00"),
            calendar_event_factory("lunch", "12:00", "13:00"),
            calendar_event_factory("focus", "09:15", "11:00"),
            calendar_event_factory("shift", "08:00", "16:00", event_type="oncall"),
        ],
    )
