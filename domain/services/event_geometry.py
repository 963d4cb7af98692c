from __future__ import annotations

import math
from datetime import datetime
from numbers import Real
from typing import Any, List, Optional

from domain.models import PERCENT, PIXELS, Dimension, EventStyle
from domain.ports.layout import EventAccessors, SlotMetrics

GUTTER = 2
OVERLAP_FACTOR = 1.7
# Three grouped columns plus two gutters fill the day column exactly.
DEFAULT_GROUP_WIDTH = Dimension(32.0, PERCENT)


class EventLayoutError(ValueError):
    pass


def instant_ms(value: Any) -> float:
    if isinstance(value, datetime):
        return value.timestamp() * 1000
    if isinstance(value, Real) and not isinstance(value, bool):
        if not math.isfinite(value):
            msg = f"Unsupported instant {value!r}; expected a finite number"
            raise EventLayoutError(msg)
        return float(value)
    msg = f"Unsupported instant {value!r}; expected a datetime or a number"
    raise EventLayoutError(msg)


def _is_non_finite(value: Any) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


class EventGeometry:
    """Layout proxy for one event.

    Vertical placement is resolved eagerly from the slot metrics. Horizontal
    placement depends on where the cluster builder puts the proxy and is
    derived lazily: an event is a container (``rows``), a row (``leaves`` and
    ``container``), a leaf (``row``) or a member of a named group matrix
    (``column``).
    """

    def __init__(self, data: Any, slot_metrics: SlotMetrics, accessors: EventAccessors) -> None:
        start = accessors.start(data)
        end = accessors.end(data)
        if start is None or end is None:
            msg = f"Event {data!r} is missing a start or an end"
            raise EventLayoutError(msg)
        if _is_non_finite(start) or _is_non_finite(end):
            msg = f"Event {data!r} has a start or end that is not a finite number"
            raise EventLayoutError(msg)
        try:
            ends_before_start = end < start
        except TypeError as exc:
            msg = f"Event {data!r} has start/end values that cannot be compared"
            raise EventLayoutError(msg) from exc
        if ends_before_start:
            msg = f"Event {data!r} ends before it starts"
            raise EventLayoutError(msg)

        slot_range = slot_metrics.get_range(start, end)
        self.data = data
        self.start = slot_range.start
        self.end = slot_range.end
        self.start_ms = instant_ms(slot_range.start_date)
        self.end_ms = instant_ms(slot_range.end_date)
        self.top = slot_range.top
        self.height = slot_range.height
        self.event_type: Optional[str] = accessors.event_type(data) or None
        self.fixed_width: Optional[Dimension] = accessors.width(data)

        self.rows: Optional[List[EventGeometry]] = None
        self.leaves: Optional[List[EventGeometry]] = None
        self.container: Optional[EventGeometry] = None
        self.row: Optional[EventGeometry] = None
        self.column: Optional[int] = None

    def __repr__(self) -> str:
        return f"EventGeometry({self.role}, start={self.start}, end={self.end}, data={self.data!r})"

    @property
    def role(self) -> str:
        if self.column is not None:
            return "grouped"
        if self.rows is not None:
            return "container"
        if self.leaves is not None:
            return "row"
        if self.row is not None:
            return "leaf"
        return "unplaced"

    @property
    def effective_width(self) -> Dimension:
        """Width without the overlap growth."""
        if self.fixed_width is not None:
            return self.fixed_width

        # One column for the container plus its busiest row and that row's leaves.
        if self.rows is not None:
            columns = max((len(row.leaves or []) + 1 for row in self.rows), default=0) + 1
            return Dimension(100 / columns, PERCENT)

        if self.column is not None:
            return DEFAULT_GROUP_WIDTH

        if self.leaves is not None and self.container is not None:
            available = 100 - self.container.effective_width.value
            return Dimension(available / (len(self.leaves) + 1), PERCENT)

        if self.row is not None:
            return self.row.effective_width

        msg = f"Event {self.data!r} has not been placed by the cluster builder"
        raise EventLayoutError(msg)

    @property
    def width(self) -> Dimension:
        no_overlap = self.effective_width
        if no_overlap.unit != PERCENT or self.column is not None:
            return no_overlap

        overlap = Dimension(min(100.0, no_overlap.value * OVERLAP_FACTOR), no_overlap.unit)

        if self.rows is not None:
            return overlap

        if self.leaves is not None:
            return overlap if self.leaves else no_overlap

        # The last leaf must stay inside its row.
        leaves = self._row().leaves or []
        return no_overlap if leaves.index(self) == len(leaves) - 1 else overlap

    @property
    def x_offset(self) -> Dimension:
        if self.rows is not None:
            return Dimension(0, "")

        if self.column is not None:
            own_width = self.effective_width
            return Dimension((own_width.value + GUTTER) * self.column, own_width.unit)

        if self.leaves is not None and self.container is not None:
            container_width = self.container.effective_width
            if container_width.unit == PIXELS:
                return Dimension(container_width.value + GUTTER, container_width.unit)
            return container_width

        row = self._row()
        row_width = row.effective_width
        offset = row.x_offset.value
        if row_width.unit == PIXELS:
            offset += GUTTER
        index = (row.leaves or []).index(self) + 1
        return Dimension(offset + index * row_width.value, row_width.unit)

    @property
    def style(self) -> EventStyle:
        return EventStyle(
            top=self.top,
            height=self.height,
            width=self.width,
            x_offset=self.x_offset,
        )

    def _row(self) -> EventGeometry:
        if self.row is None:
            msg = f"Event {self.data!r} has not been placed by the cluster builder"
            raise EventLayoutError(msg)
        return self.row
