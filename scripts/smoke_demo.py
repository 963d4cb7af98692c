from __future__ import annotations

import argparse
from pathlib import Path

from adapters.filesystem.event_repository import FileSystemEventRepository
from adapters.layout.day_column import DayColumnLayoutEngine
from domain.models import DayLayout


def check_layout(layout: DayLayout) -> None:
    for styled in layout.events:
        style = styled.style
        if style.width.unit == "%" and style.width.value > 100:
            raise RuntimeError(f"Event {styled.event.event_id} is wider than the column")
        if style.height < 0:
            raise RuntimeError(f"Event {styled.event.event_id} has a negative height")
    if len({styled.event.event_id for styled in layout.events}) != len(layout.events):
        raise RuntimeError("Layout dropped or duplicated events")


def main() -> None:
    parser = argparse.ArgumentParser(description="Smoke test for the day layout on sample files.")
    parser.add_argument("--input-dir", type=Path, default=Path("examples/day"))
    args = parser.parse_args()

    pairs = FileSystemEventRepository().load_all_with_paths(args.input_dir)
    if not pairs:
        raise RuntimeError(f"No day files found in {args.input_dir}")

    engine = DayColumnLayoutEngine()
    for path, day_events in pairs:
        layout = engine.layout(day_events)
        check_layout(layout)
        print(f"{path.name}: {len(layout.events)} events laid out")

    print("Smoke test passed.")


if __name__ == "__main__":
    main()
