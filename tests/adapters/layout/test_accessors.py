from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from adapters.layout.accessors import AttributeAccessors, MappingAccessors, to_dimension
from domain.models import CalendarEvent, Dimension, DimensionSpec


def test_attribute_accessors_read_calendar_events() -> None:
    event = CalendarEvent(
        event_id="a",
        start=datetime(2024, 3, 18, 9),
        end=datetime(2024, 3, 18, 10),
        event_type="allday",
        width={"value": 25, "unit": "px"},
    )
    accessors = AttributeAccessors()

    assert accessors.start(event) == datetime(2024, 3, 18, 9)
    assert accessors.end(event) == datetime(2024, 3, 18, 10)
    assert accessors.event_type(event) == "allday"
    assert accessors.width(event) == Dimension(25.0, "px")


def test_attribute_accessors_support_custom_names() -> None:
    class Booking:
        begins = 1
        finishes = 2

    accessors = AttributeAccessors(start_attr="begins", end_attr="finishes")

    assert (accessors.start(Booking()), accessors.end(Booking())) == (1, 2)
    assert accessors.event_type(Booking()) is None
    assert accessors.width(Booking()) is None


def test_mapping_accessors_read_camel_case_keys() -> None:
    accessors = MappingAccessors()
    event = {"start": 1, "end": 2, "eventType": "deadline", "width": {"value": 30}}

    assert accessors.event_type(event) == "deadline"
    assert accessors.width(event) == Dimension(30.0, "%")
    assert accessors.start({}) is None


def test_to_dimension_accepts_known_shapes() -> None:
    assert to_dimension(None) is None
    assert to_dimension(Dimension(5, "px")) == Dimension(5, "px")
    assert to_dimension(DimensionSpec(value=5)) == Dimension(5.0, "%")
    with pytest.raises(ValidationError):
        to_dimension({"value": 5, "unit": "em"})
    with pytest.raises(ValueError, match="Unsupported width"):
        to_dimension(12)
