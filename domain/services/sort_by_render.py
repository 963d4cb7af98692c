from __future__ import annotations

from collections.abc import Iterable
from typing import List

from domain.services.event_geometry import EventGeometry


def render_sort_key(event: EventGeometry) -> tuple[int, float, float]:
    # Grouped events first, then earliest start, then longest first.
    return (0 if event.event_type else 1, event.start_ms, -event.end_ms)


def sort_by_render(events: Iterable[EventGeometry]) -> List[EventGeometry]:
    """Order events so that every overlapping chain is rendered contiguously.

    After the stable time sort, the first event that starts once the current
    ungrouped event has ended is pulled right behind it. Grouped events are
    emitted as they come.
    """
    sorted_by_time = sorted(events, key=render_sort_key)

    ordered: List[EventGeometry] = []
    while sorted_by_time:
        event = sorted_by_time.pop(0)
        ordered.append(event)
        if event.event_type:
            continue

        for idx, candidate in enumerate(sorted_by_time):
            # Still inside the current event.
            if event.end_ms > candidate.start_ms:
                continue

            if candidate.event_type:
                break

            if idx > 0:
                ordered.append(sorted_by_time.pop(idx))
            break

    return ordered
