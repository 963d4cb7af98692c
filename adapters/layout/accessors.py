from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from domain.models import Dimension, DimensionSpec
from domain.ports.layout import EventAccessors


def to_dimension(value: Any) -> Dimension | None:
    if value is None:
        return None
    if isinstance(value, Dimension):
        return value
    if isinstance(value, DimensionSpec):
        return value.to_dimension()
    if isinstance(value, Mapping):
        return DimensionSpec.model_validate(value).to_dimension()
    msg = f"Unsupported width {value!r}; expected a value/unit pair"
    raise ValueError(msg)


@dataclass(frozen=True)
class AttributeAccessors(EventAccessors):
    start_attr: str = "start"
    end_attr: str = "end"
    event_type_attr: str = "event_type"
    width_attr: str = "width"

    def start(self, event: Any) -> Any:
        return getattr(event, self.start_attr, None)

    def end(self, event: Any) -> Any:
        return getattr(event, self.end_attr, None)

    def event_type(self, event: Any) -> str | None:
        return getattr(event, self.event_type_attr, None)

    def width(self, event: Any) -> Dimension | None:
        return to_dimension(getattr(event, self.width_attr, None))


@dataclass(frozen=True)
class MappingAccessors(EventAccessors):
    start_key: str = "start"
    end_key: str = "end"
    event_type_key: str = "eventType"
    width_key: str = "width"

    def start(self, event: Mapping[str, Any]) -> Any:
        return event.get(self.start_key)

    def end(self, event: Mapping[str, Any]) -> Any:
        return event.get(self.end_key)

    def event_type(self, event: Mapping[str, Any]) -> str | None:
        return event.get(self.event_type_key)

    def width(self, event: Mapping[str, Any]) -> Dimension | None:
        return to_dimension(event.get(self.width_key))
