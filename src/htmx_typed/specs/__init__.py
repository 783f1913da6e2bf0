"""
Value types for HTMX attribute and header micro-syntax.

Every type is an immutable pydantic model (or StrEnum) that renders to its
HTMX text via ``str()``.
"""

from htmx_typed.specs.events import (
    Event,
    EventModifier,
    Polling,
    QueueKind,
    event,
    every,
    trigger_value,
)
from htmx_typed.specs.location import LocationConfig, location, location_value, simple_location
from htmx_typed.specs.selector import Selector, as_selector
from htmx_typed.specs.swap import (
    ScrollPosition,
    ScrollTarget,
    Swap,
    SwapConfig,
    swap_value,
)
from htmx_typed.specs.sync import Sync, sync_value
from htmx_typed.specs.timing import Duration, TimeUnit, milliseconds, seconds
from htmx_typed.specs.trigger import TriggerEvent, detailed, simple, trigger_header_value

__all__ = [
    # Selectors
    "Selector",
    "as_selector",
    # Timing
    "Duration",
    "TimeUnit",
    "seconds",
    "milliseconds",
    # Events
    "Event",
    "EventModifier",
    "Polling",
    "QueueKind",
    "event",
    "every",
    "trigger_value",
    # Swap
    "Swap",
    "SwapConfig",
    "ScrollPosition",
    "ScrollTarget",
    "swap_value",
    # Sync
    "Sync",
    "sync_value",
    # Headers
    "TriggerEvent",
    "simple",
    "detailed",
    "trigger_header_value",
    "LocationConfig",
    "location",
    "location_value",
    "simple_location",
]
