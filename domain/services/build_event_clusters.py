from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from domain.services.event_geometry import EventGeometry

logger = logging.getLogger(__name__)

GROUP_COLUMNS = 3

GroupMatrix = List[List[Optional[EventGeometry]]]


def on_same_row(a: EventGeometry, b: EventGeometry, minimum_start_difference: float) -> bool:
    """Return True when ``b`` belongs on the row started by ``a``."""
    return (
        # Same start slot.
        abs(b.start - a.start) < minimum_start_difference
        # b starts inside a.
        or a.start < b.start < a.end
    )


@dataclass(frozen=True)
class EventClusters:
    containers: List[EventGeometry]
    group_matrices: Dict[str, GroupMatrix]


@dataclass
class EventClusterBuilder:
    """Single forward pass that links events into containers, rows and leaves.

    Events must be attached in render order. Containers are never merged or
    revisited, and grouped events are packed into a three column matrix per
    event type.
    """

    minimum_start_difference: float
    containers: List[EventGeometry] = field(default_factory=list)
    group_matrices: Dict[str, GroupMatrix] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.minimum_start_difference < 0:
            msg = "minimum_start_difference must not be negative"
            raise ValueError(msg)

    def attach(self, event: EventGeometry) -> None:
        if event.event_type:
            self._attach_grouped(event, event.event_type)
            return

        container = self._find_container(event)
        if container is None:
            event.rows = []
            self.containers.append(event)
            return

        event.container = container
        rows = container.rows
        row = next(
            (
                candidate
                for candidate in reversed(rows)
                if on_same_row(candidate, event, self.minimum_start_difference)
            ),
            None,
        )
        if row is not None:
            event.row = row
            row.leaves.append(event)
        else:
            event.leaves = []
            rows.append(event)

    def attach_all(self, events: Iterable[EventGeometry]) -> EventClusterBuilder:
        for event in events:
            self.attach(event)
        return self

    def build(self) -> EventClusters:
        logger.debug(
            "Built %d containers and %d group matrices",
            len(self.containers),
            len(self.group_matrices),
        )
        return EventClusters(
            containers=list(self.containers),
            group_matrices={
                key: [list(row) for row in matrix] for key, matrix in self.group_matrices.items()
            },
        )

    def _find_container(self, event: EventGeometry) -> EventGeometry | None:
        for container in self.containers:
            if (
                container.end > event.start
                or abs(event.start - container.start) < self.minimum_start_difference
            ):
                return container
        return None

    def _attach_grouped(self, event: EventGeometry, event_type: str) -> None:
        matrix = self.group_matrices.get(event_type)
        if matrix is None:
            event.column = 0
            self.group_matrices[event_type] = [[event] + [None] * (GROUP_COLUMNS - 1)]
            return

        row_idx = 0
        while event.column is None:
            if row_idx == len(matrix):
                matrix.append([None] * GROUP_COLUMNS)
            column = self._pick_group_column(matrix, row_idx, event)
            if column is not None:
                event.column = column
                matrix[row_idx][column] = event
            row_idx += 1

    def _pick_group_column(
        self, matrix: GroupMatrix, row_idx: int, event: EventGeometry
    ) -> int | None:
        slots = matrix[row_idx]
        if row_idx == 0:
            return next((col for col, slot in enumerate(slots) if slot is None), None)

        # Keep recurring groups in the column with the widest gap above them.
        previous = matrix[row_idx - 1]
        best_col: int | None = None
        best_gap = 0.0
        for col, slot in enumerate(slots):
            above = previous[col]
            if slot is not None or above is None:
                continue
            gap = event.start - above.end
            if best_col is None or gap > best_gap:
                best_col = col
                best_gap = gap
        return best_col
