"""CLI for browsing and editing content collections."""

from __future__ import annotations

import json
import logging
import types
from pathlib import Path
from typing import Annotated, Any, Optional, Union, get_args, get_origin

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from greengroves.config import load_config, merge_cli_overrides
from greengroves.content.catalog import ContentCatalog
from greengroves.content.models import BaseContent, ContentType
from greengroves.content.repository import ContentRepository
from greengroves.errors import GreenGrovesError, UnknownContentTypeError

app = typer.Typer(
    name="greengroves",
    help="Manage Green Groves content collections.",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from greengroves import __version__

        console.print(f"greengroves {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a .greengroves.toml file."),
    ] = None,
    storage_dir: Annotated[
        Optional[str],
        typer.Option("--storage-dir", help="Directory holding the collection files."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug output."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Green Groves - gardening content collections."""
    config = merge_cli_overrides(
        load_config(config_path),
        storage_dir=storage_dir,
        log_level="DEBUG" if verbose else None,
    )
    logging.basicConfig(
        level=config.logging.level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config.open_catalog()


def _repository(ctx: typer.Context, content_type: str) -> ContentRepository[Any]:
    catalog: ContentCatalog = ctx.obj
    try:
        return catalog.repository(content_type)
    except UnknownContentTypeError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        known = ", ".join(t.value for t in ContentType)
        console.print(f"Known types: {known}")
        raise typer.Exit(1) from None


def _is_text_field(model: type[BaseContent], key: str) -> bool:
    """True when ``key`` names a field declared as a string (optionally None)."""
    for name, field in model.model_fields.items():
        if key in (name, field.alias):
            annotation = field.annotation
            if get_origin(annotation) in (Union, types.UnionType):
                args = [arg for arg in get_args(annotation) if arg is not type(None)]
            else:
                args = [annotation]
            return all(isinstance(arg, type) and issubclass(arg, str) for arg in args)
    return False


def _parse_assignments(
    model: type[BaseContent], assignments: list[str] | None, raw_json: str | None
) -> dict[str, Any]:
    """Merge ``--json`` and ``--set key=value`` into one field dict.

    ``--set`` values for string fields are taken verbatim.  Other values are
    read as JSON when they parse (numbers, booleans, lists) and as plain
    strings otherwise.
    """
    fields: dict[str, Any] = {}
    if raw_json:
        try:
            loaded = json.loads(raw_json)
        except json.JSONDecodeError as exc:
            console.print(f"[red]Error:[/red] Invalid --json: {exc}")
            raise typer.Exit(1) from None
        if not isinstance(loaded, dict):
            console.print("[red]Error:[/red] --json must be an object")
            raise typer.Exit(1)
        fields.update(loaded)
    for assignment in assignments or []:
        key, sep, value = assignment.partition("=")
        if not sep or not key:
            console.print(f"[red]Error:[/red] Expected key=value, got {assignment!r}")
            raise typer.Exit(1)
        if _is_text_field(model, key):
            fields[key] = value
            continue
        try:
            fields[key] = json.loads(value)
        except json.JSONDecodeError:
            fields[key] = value
    return fields


def _print_items(items: list[BaseContent], title: str) -> None:
    table = Table(title=title)
    table.add_column("ID", no_wrap=True)
    table.add_column("Title")
    table.add_column("Status")
    table.add_column("Updated", no_wrap=True)
    for item in items:
        table.add_row(item.id, item.title, item.status.value, item.updated_at)
    console.print(table)


def _print_item(item: BaseContent) -> None:
    console.print_json(item.model_dump_json(by_alias=True))


def _report_validation(exc: ValidationError) -> None:
    console.print(f"[red]Error:[/red] {exc.error_count()} invalid field(s)")
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        console.print(f"  {location}: {error['msg']}")


SetOption = Annotated[
    Optional[list[str]],
    typer.Option("--set", "-s", help="Field assignment key=value (repeatable)."),
]
JsonOption = Annotated[
    Optional[str],
    typer.Option("--json", help="Fields as a JSON object."),
]


@app.command("types")
def types_cmd() -> None:
    """List the known content types."""
    for content_type in ContentType:
        console.print(content_type.value)


@app.command("list")
def list_cmd(
    ctx: typer.Context,
    content_type: Annotated[str, typer.Argument(help="Content type, e.g. tool.")],
    published: Annotated[
        bool,
        typer.Option("--published", help="Only show published items."),
    ] = False,
) -> None:
    """List items of a content type."""
    repo = _repository(ctx, content_type)
    items = repo.get_published() if published else repo.list()
    _print_items(items, f"{repo.content_type} ({len(items)})")


@app.command("show")
def show_cmd(
    ctx: typer.Context,
    content_type: Annotated[str, typer.Argument(help="Content type, e.g. tool.")],
    item_id: Annotated[str, typer.Argument(help="Item id.")],
) -> None:
    """Show one item as JSON."""
    repo = _repository(ctx, content_type)
    item = repo.get_by_id(item_id)
    if item is None:
        console.print(f"[red]Error:[/red] No {repo.content_type} with id {item_id}")
        raise typer.Exit(1)
    _print_item(item)


@app.command("create")
def create_cmd(
    ctx: typer.Context,
    content_type: Annotated[str, typer.Argument(help="Content type, e.g. tool.")],
    assignments: SetOption = None,
    raw_json: JsonOption = None,
) -> None:
    """Create an item from field assignments."""
    repo = _repository(ctx, content_type)
    fields = _parse_assignments(repo.model, assignments, raw_json)
    try:
        item = repo.create(fields)
    except ValidationError as exc:
        _report_validation(exc)
        raise typer.Exit(1) from None
    except GreenGrovesError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from None
    console.print(f"[green]Created[/green] {repo.content_type} {item.id}")
    _warn_if_unsaved(repo)


@app.command("update")
def update_cmd(
    ctx: typer.Context,
    content_type: Annotated[str, typer.Argument(help="Content type, e.g. tool.")],
    item_id: Annotated[str, typer.Argument(help="Item id.")],
    assignments: SetOption = None,
    raw_json: JsonOption = None,
) -> None:
    """Merge field assignments into an existing item."""
    repo = _repository(ctx, content_type)
    changes = _parse_assignments(repo.model, assignments, raw_json)
    try:
        item = repo.update(item_id, changes)
    except ValidationError as exc:
        _report_validation(exc)
        raise typer.Exit(1) from None
    if item is None:
        console.print(f"[yellow]No {repo.content_type} with id {item_id}, nothing changed[/yellow]")
        return
    console.print(f"[green]Updated[/green] {repo.content_type} {item.id}")
    _warn_if_unsaved(repo)


@app.command("remove")
def remove_cmd(
    ctx: typer.Context,
    content_type: Annotated[str, typer.Argument(help="Content type, e.g. tool.")],
    item_id: Annotated[str, typer.Argument(help="Item id.")],
) -> None:
    """Remove an item."""
    repo = _repository(ctx, content_type)
    if repo.get_by_id(item_id) is None:
        console.print(f"[yellow]No {repo.content_type} with id {item_id}, nothing changed[/yellow]")
        return
    repo.remove(item_id)
    console.print(f"[green]Removed[/green] {repo.content_type} {item_id}")
    _warn_if_unsaved(repo)


def _warn_if_unsaved(repo: ContentRepository[Any]) -> None:
    if repo.last_save_error is not None:
        console.print(f"[yellow]Warning:[/yellow] change not saved: {repo.last_save_error}")


if __name__ == "__main__":
    app()
