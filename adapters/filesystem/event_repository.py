from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import List

from adapters.filesystem.json_utils import load_json, write_json_atomic
from domain.models import DayEvents, DayLayout
from domain.ports.repositories import EventRepository, LayoutRepository


class FileSystemEventRepository(EventRepository):
    def load_all(self, directory: Path) -> List[DayEvents]:
        return [day_events for _, day_events in self.load_all_with_paths(directory)]

    def load_all_with_paths(self, directory: Path) -> List[tuple[Path, DayEvents]]:
        return [(path, self.load_by_path(path)) for path in sorted(self._iter_paths(directory))]

    def load_by_path(self, path: Path) -> DayEvents:
        return DayEvents.model_validate(load_json(path))

    def _iter_paths(self, directory: Path) -> Iterable[Path]:
        yield from directory.glob("*.json")


class FileSystemLayoutRepository(LayoutRepository):
    def __init__(self, indent: bool = True) -> None:
        self.indent = indent

    def save(self, layout: DayLayout, path: Path) -> None:
        write_json_atomic(path, layout.to_dict(), indent=self.indent)
