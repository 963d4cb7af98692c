from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.filesystem.event_repository import (
    FileSystemEventRepository,
    FileSystemLayoutRepository,
)
from adapters.layout.day_column import DayColumnLayoutEngine
from app.config import load_settings
from domain.models import CalendarEvent, DayLayout, Dimension

app = typer.Typer(no_args_is_help=True)
console = Console()
logger = logging.getLogger(__name__)


def _format_dimension(dimension: Dimension) -> str:
    return f"{dimension.value:.2f}{dimension.unit}"


def _render_table(layout: DayLayout) -> Table:
    table = Table(title=f"Day layout {layout.day.isoformat()}")
    for column in ("Event", "Type", "Time", "Top", "Height", "Width", "X offset"):
        table.add_column(column)
    for styled in layout.events:
        event = styled.event
        if isinstance(event, CalendarEvent):
            label = event.title or event.event_id
            event_type = event.event_type or ""
            span = f"{event.start:%H:%M}-{event.end:%H:%M}"
        else:
            label, event_type, span = str(event), "", ""
        style = styled.style
        table.add_row(
            label,
            event_type,
            span,
            f"{style.top:.2f}%",
            f"{style.height:.2f}%",
            _format_dimension(style.width),
            _format_dimension(style.x_offset),
        )
    return table


@app.command("layout")
def layout(
    input_path: Path = typer.Argument(..., help="Day events JSON file."),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the styled layout as JSON instead of printing it.",
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="YAML settings file.",
    ),
) -> None:
    if not input_path.exists():
        console.print(f"[red]File not found:[/] {input_path}")
        raise typer.Exit(code=1)

    try:
        settings = load_settings(config_path)
        engine = DayColumnLayoutEngine(settings.layout.to_layout_config())
        day_events = FileSystemEventRepository().load_by_path(input_path)
        day_layout = engine.layout(day_events)
    except (OSError, ValueError) as exc:
        logger.debug("Layout failed for %s", input_path, exc_info=True)
        console.print(f"[red]Layout failed:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if output_path is None:
        console.print(_render_table(day_layout))
        return

    FileSystemLayoutRepository(indent=settings.layout.indent_output).save(day_layout, output_path)
    console.print(f"[green]Wrote[/] {output_path}")


@app.command("validate")
def validate(input_path: Path = typer.Argument(..., help="Day events JSON file to validate.")) -> None:
    if not input_path.exists():
        console.print(f"[red]File not found:[/] {input_path}")
        raise typer.Exit(code=1)

    try:
        day_events = FileSystemEventRepository().load_by_path(input_path)
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Validation failed:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    console.print(f"[green]Valid day file with {len(day_events.events)} events:[/] {input_path}")


if __name__ == "__main__":
    app()
