"""
``HX-*`` response header builders.

Each builder returns an :class:`HxHeader`; :func:`headers_dict` collects
them into a mapping ready for any web framework's response object.

Example:
    headers_dict(
        trigger("reload", detailed("showToast", {"message": "Saved"})),
        retarget("#form-errors"),
        reswap(Swap.INNER_HTML),
    )
    # {'HX-Trigger': '{"reload":null,"showToast":{"message":"Saved"}}',
    #  'HX-Retarget': '#form-errors',
    #  'HX-Reswap': 'innerHTML'}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from htmx_typed.specs.location import LocationConfig, location_value
from htmx_typed.specs.selector import Selector, as_selector
from htmx_typed.specs.swap import Swap, SwapConfig, swap_value
from htmx_typed.specs.trigger import DetailedTrigger, SimpleTrigger, trigger_header_value


class HxHeader(BaseModel):
    """A single response header."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    value: str

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


def _header(name: str, value: str) -> HxHeader:
    return HxHeader(name=name, value=value)


def _url_or_false(value: str | bool) -> str:
    if value is False:
        return "false"
    if value is True:
        raise TypeError("Expected a URL or False")
    return value


# =============================================================================
# Navigation
# =============================================================================


def redirect(url: str) -> HxHeader:
    return _header("HX-Redirect", url)


def refresh() -> HxHeader:
    return _header("HX-Refresh", "true")


def push_url(url: str | bool) -> HxHeader:
    """Push ``url`` into history, or ``False`` to prevent a history update."""
    return _header("HX-Push-Url", _url_or_false(url))


def replace_url(url: str | bool) -> HxHeader:
    return _header("HX-Replace-Url", _url_or_false(url))


def location(config: LocationConfig | str) -> HxHeader:
    return _header("HX-Location", location_value(config))


# =============================================================================
# Swap overrides
# =============================================================================


def reswap(strategy: Swap, *configs: SwapConfig) -> HxHeader:
    return _header("HX-Reswap", swap_value(strategy, *configs))


def retarget(selector: Selector | str) -> HxHeader:
    return _header("HX-Retarget", str(as_selector(selector)))


def reselect(css: str) -> HxHeader:
    return _header("HX-Reselect", css)


# =============================================================================
# Client events
# =============================================================================

TriggerArg = SimpleTrigger | DetailedTrigger | str


def trigger(*events: TriggerArg) -> HxHeader:
    return _header("HX-Trigger", trigger_header_value(events))


def trigger_after_swap(*events: TriggerArg) -> HxHeader:
    return _header("HX-Trigger-After-Swap", trigger_header_value(events))


def trigger_after_settle(*events: TriggerArg) -> HxHeader:
    return _header("HX-Trigger-After-Settle", trigger_header_value(events))


def headers_dict(*headers: HxHeader) -> dict[str, str]:
    """Collect headers into a dict. Empty values are skipped; later names win."""
    return {h.name: h.value for h in headers if h.value}
