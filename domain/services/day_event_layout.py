from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, List

from domain.models import StyledEvent
from domain.ports.layout import EventAccessors, SlotMetrics
from domain.services.build_event_clusters import EventClusterBuilder
from domain.services.event_geometry import EventGeometry
from domain.services.sort_by_render import sort_by_render

logger = logging.getLogger(__name__)


def get_styled_events(
    events: Iterable[Any],
    minimum_start_difference: float,
    slot_metrics: SlotMetrics,
    accessors: EventAccessors,
) -> List[StyledEvent]:
    """Lay out the events of one day column.

    Returns the original events in render order, each paired with its
    vertical placement and its horizontal width and offset.
    """
    proxies = [EventGeometry(event, slot_metrics, accessors) for event in events]
    in_render_order = sort_by_render(proxies)

    clusters = EventClusterBuilder(minimum_start_difference).attach_all(in_render_order).build()
    logger.debug(
        "Laid out %d events in %d containers across %d event types",
        len(in_render_order),
        len(clusters.containers),
        len(clusters.group_matrices),
    )

    return [StyledEvent(event=proxy.data, style=proxy.style) for proxy in in_render_order]
