"""
``hx-*`` attribute builders.

Each builder returns an :class:`HxAttribute`, a name/value pair whose value
is already in HTMX syntax. Render one or more of them into markup with
:func:`render_attributes`, or hand :func:`attributes_dict` to a template
engine.

Example:
    from htmx_typed import attributes as hx
    from htmx_typed.specs.events import event, delay
    from htmx_typed.specs.timing import milliseconds

    render_attributes(
        hx.get("/search"),
        hx.trigger(event("keyup", changed(), delay(milliseconds(300)))),
        hx.target("#results"),
    )
    # 'hx-get="/search" hx-trigger="keyup changed delay:300ms" hx-target="#results"'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup, escape
from pydantic import BaseModel, ConfigDict, Field

from htmx_typed.config import DEFAULT_CONFIG, HxConfig
from htmx_typed.specs.events import Event, Polling, trigger_value
from htmx_typed.specs.selector import Selector, as_selector
from htmx_typed.specs.swap import Swap, SwapConfig, swap_value
from htmx_typed.specs.sync import Sync, sync_value
from htmx_typed.specs.trigger import compact_json


class HxAttribute(BaseModel):
    """A single HTML attribute with its HTMX-formatted value."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Attribute name, e.g. 'hx-get'")
    value: str = Field(description="Unescaped attribute value")

    def render(self, config: HxConfig | None = None) -> str:
        name = (config or DEFAULT_CONFIG).attribute_name(self.name)
        return f'{name}="{escape(self.value)}"'

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()


def _attr(name: str, value: str) -> HxAttribute:
    return HxAttribute(name=name, value=value)


def _flag(value: bool) -> str:
    return "true" if value else "false"


# =============================================================================
# Requests
# =============================================================================


def get(url: str) -> HxAttribute:
    return _attr("hx-get", url)


def post(url: str) -> HxAttribute:
    return _attr("hx-post", url)


def put(url: str) -> HxAttribute:
    return _attr("hx-put", url)


def patch(url: str) -> HxAttribute:
    return _attr("hx-patch", url)


def delete(url: str) -> HxAttribute:
    return _attr("hx-delete", url)


# =============================================================================
# Triggers, targets and swapping
# =============================================================================


def trigger(first: Event | Polling | str, *rest: Event | Polling | str) -> HxAttribute:
    return _attr("hx-trigger", trigger_value(first, *rest))


def target(selector: Selector | str) -> HxAttribute:
    return _attr("hx-target", str(as_selector(selector)))


def include(selector: Selector | str) -> HxAttribute:
    return _attr("hx-include", str(as_selector(selector)))


def indicator(selector: Selector | str) -> HxAttribute:
    return _attr("hx-indicator", str(as_selector(selector)))


def swap(strategy: Swap, *configs: SwapConfig) -> HxAttribute:
    return _attr("hx-swap", swap_value(strategy, *configs))


def swap_oob(
    strategy: Swap | None = None,
    *configs: SwapConfig,
    selector: Selector | str | None = None,
) -> HxAttribute:
    """Out-of-band swap.

    With no arguments the value is ``true`` (swap by matching id). A
    selector is appended after a colon: ``innerHTML:#messages``. HTMX
    splits the value at the first colon, so swap modifiers cannot be
    combined with a selector.

    Raises:
        ValueError: If both ``configs`` and ``selector`` are given.
    """
    if configs and selector is not None:
        raise ValueError("hx-swap-oob cannot combine swap modifiers with a selector")
    if strategy is None and selector is None:
        return _attr("hx-swap-oob", "true")
    value = swap_value(strategy or Swap.OUTER_HTML, *configs)
    if selector is not None:
        value = f"{value}:{as_selector(selector)}"
    return _attr("hx-swap-oob", value)


def sync(*syncs: Sync) -> HxAttribute:
    return _attr("hx-sync", sync_value(*syncs))


def select(css: str) -> HxAttribute:
    return _attr("hx-select", css)


def select_oob(*entries: str | tuple[str, Swap]) -> HxAttribute:
    """Out-of-band selections: ``#alert``, or ``#alert:afterbegin`` with a swap."""
    parts = []
    for entry in entries:
        if isinstance(entry, tuple):
            css, strategy = entry
            parts.append(f"{css}:{strategy.value}")
        else:
            parts.append(entry)
    return _attr("hx-select-oob", ", ".join(parts))


# =============================================================================
# Request parameters
# =============================================================================


def vals(values: Mapping[str, Any]) -> HxAttribute:
    return _attr("hx-vals", compact_json(dict(values)))


def vals_js(expression: str) -> HxAttribute:
    """Values computed client-side from a JavaScript object expression."""
    return _attr("hx-vals", f"js:{expression}")


def headers(values: Mapping[str, Any]) -> HxAttribute:
    return _attr("hx-headers", compact_json(dict(values)))


def headers_js(expression: str) -> HxAttribute:
    return _attr("hx-headers", f"js:{expression}")


# =============================================================================
# Behaviour flags and prompts
# =============================================================================


def push_url(value: bool | str = True) -> HxAttribute:
    if isinstance(value, bool):
        return _attr("hx-push-url", _flag(value))
    return _attr("hx-push-url", value)


def boost(enabled: bool = True) -> HxAttribute:
    return _attr("hx-boost", _flag(enabled))


def validate(enabled: bool = True) -> HxAttribute:
    return _attr("hx-validate", _flag(enabled))


def confirm(message: str) -> HxAttribute:
    return _attr("hx-confirm", message)


def prompt(message: str) -> HxAttribute:
    return _attr("hx-prompt", message)


def disabled_elt(first: Selector | str, *rest: Selector | str) -> HxAttribute:
    return _attr("hx-disabled-elt", ", ".join(str(as_selector(s)) for s in (first, *rest)))


def disinherit(*names: str) -> HxAttribute:
    """Attributes children must not inherit; all of them (``*``) when none are named."""
    return _attr("hx-disinherit", " ".join(names) or "*")


def inherit(*names: str) -> HxAttribute:
    return _attr("hx-inherit", " ".join(names) or "*")


def ext(*names: str) -> HxAttribute:
    return _attr("hx-ext", ", ".join(names))


# =============================================================================
# Scripting
# =============================================================================


def on(event_name: str, script: str) -> HxAttribute:
    return _attr(f"hx-on:{event_name}", script)


def hyperscript(script: str) -> HxAttribute:
    return _attr("_", script)


# =============================================================================
# Rendering
# =============================================================================


def render_attributes(*attrs: HxAttribute, config: HxConfig | None = None) -> Markup:
    """Render attributes as a space-separated, HTML-escaped string."""
    return Markup(" ".join(a.render(config) for a in attrs))


def attributes_dict(*attrs: HxAttribute, config: HxConfig | None = None) -> dict[str, str]:
    """Map attribute names to raw values; later attributes override earlier ones."""
    cfg = config or DEFAULT_CONFIG
    return {cfg.attribute_name(a.name): a.value for a in attrs}
