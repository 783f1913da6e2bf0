"""
htmx-typed command line.

Renders HTMX header values from the shell, mostly useful for checking what
a given combination of options produces.

    htmx-typed trigger reload --detail 'update={"count": 5}'
    htmx-typed location /dashboard --target '#main' --swap innerHTML
    htmx-typed sync '#form1:drop' '#form2:abort'
"""

from __future__ import annotations

import json
import logging
import platform
from enum import StrEnum
from typing import Annotated, Any

import typer
from rich.console import Console

from htmx_typed import __version__
from htmx_typed import headers as hx_headers
from htmx_typed.specs.events import QueueKind
from htmx_typed.specs.location import location as location_config
from htmx_typed.specs.swap import Swap
from htmx_typed.specs.sync import (
    Sync,
    abort,
    drop,
    queue_sync,
    replace,
    sync_default,
    sync_value,
)
from htmx_typed.specs.trigger import TriggerEvent, detailed, simple

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Render HTMX attribute and header values",
    no_args_is_help=True,
)

console = Console(markup=False, emoji=False, highlight=False, soft_wrap=True)


class TriggerTiming(StrEnum):
    RECEIVE = "receive"
    SWAP = "swap"
    SETTLE = "settle"


def get_version() -> str:
    """Get htmx-typed version from package metadata."""
    try:
        from importlib.metadata import version

        return version("htmx-typed")
    except Exception:
        return __version__


def _emit(header: hx_headers.HxHeader, with_name: bool) -> None:
    text = str(header) if with_name else header.value
    console.print(text)


def _parse_json(option: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"invalid JSON: {e.msg}", param_hint=option) from e


def _parse_detail(raw: str) -> tuple[str, Any]:
    name, sep, payload = raw.partition("=")
    if not sep or not name:
        raise typer.BadParameter("expected NAME=JSON", param_hint="--detail")
    return name, _parse_json("--detail", payload)


def _parse_sync(raw: str) -> Sync:
    """Parse ``SELECTOR[:STRATEGY]``; an unknown suffix is kept as selector text."""
    selector, sep, strategy = raw.rpartition(":")
    if not sep:
        return sync_default(raw)
    if strategy == "drop":
        return drop(selector)
    if strategy == "abort":
        return abort(selector)
    if strategy == "replace":
        return replace(selector)
    if strategy == "queue":
        raise typer.BadParameter("missing queue kind (first, last, all)", param_hint="SYNC")
    if strategy.startswith("queue "):
        kind = strategy.removeprefix("queue ").strip()
        try:
            return queue_sync(selector, QueueKind(kind))
        except ValueError as e:
            raise typer.BadParameter(
                f"unknown queue kind '{kind}' (first, last, all)", param_hint="SYNC"
            ) from e
    logger.debug("No sync strategy in '%s', treating it as a selector", raw)
    return sync_default(raw)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Render HTMX attribute and header values."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@app.command("trigger")
def trigger_command(
    names: Annotated[list[str] | None, typer.Argument(help="Event names without payload")] = None,
    detail: Annotated[
        list[str] | None,
        typer.Option("--detail", "-d", help="Event with payload as NAME=JSON (repeatable)"),
    ] = None,
    after: Annotated[
        TriggerTiming, typer.Option("--after", help="When the client fires the events")
    ] = TriggerTiming.RECEIVE,
    with_name: Annotated[
        bool, typer.Option("--with-name", help="Prefix the header name")
    ] = False,
) -> None:
    """Render an HX-Trigger header value."""
    events: list[TriggerEvent] = [simple(n) for n in names or []]
    for raw in detail or []:
        name, payload = _parse_detail(raw)
        events.append(detailed(name, payload))

    builder = {
        TriggerTiming.RECEIVE: hx_headers.trigger,
        TriggerTiming.SWAP: hx_headers.trigger_after_swap,
        TriggerTiming.SETTLE: hx_headers.trigger_after_settle,
    }[after]
    _emit(builder(*events), with_name)


@app.command("location")
def location_command(
    path: Annotated[str, typer.Argument(help="URL to load")],
    source: Annotated[str | None, typer.Option("--source")] = None,
    event: Annotated[str | None, typer.Option("--event")] = None,
    target: Annotated[str | None, typer.Option("--target")] = None,
    swap: Annotated[Swap | None, typer.Option("--swap")] = None,
    values: Annotated[str | None, typer.Option("--values", help="JSON object")] = None,
    select: Annotated[str | None, typer.Option("--select")] = None,
    with_name: Annotated[
        bool, typer.Option("--with-name", help="Prefix the header name")
    ] = False,
) -> None:
    """Render an HX-Location header value."""
    config = location_config(path)
    if source is not None:
        config = config.with_source(source)
    if event is not None:
        config = config.with_event(event)
    if target is not None:
        config = config.with_target(target)
    if swap is not None:
        config = config.with_swap(swap)
    if values is not None:
        config = config.with_values(_parse_json("--values", values))
    if select is not None:
        config = config.with_select(select)
    _emit(hx_headers.location(config), with_name)


@app.command("sync")
def sync_command(
    specs: Annotated[list[str], typer.Argument(help="SELECTOR[:drop|abort|replace|queue KIND]")],
) -> None:
    """Render an hx-sync attribute value."""
    value = sync_value(*(_parse_sync(s) for s in specs))
    console.print(value)


@app.command("version")
def version_command() -> None:
    """Show version information."""
    console.print(f"htmx-typed {get_version()}")
    console.print(f"Python {platform.python_version()} ({platform.python_implementation()})")


def main() -> None:
    app()
