from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from domain.models import DayEvents, DayLayout


class EventRepository(Protocol):
    def load_all_with_paths(self, directory: Path) -> Sequence[tuple[Path, DayEvents]]: ...

    def load_by_path(self, path: Path) -> DayEvents: ...


class LayoutRepository(Protocol):
    def save(self, layout: DayLayout, path: Path) -> None: ...
