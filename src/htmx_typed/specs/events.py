"""
Trigger event types for ``hx-trigger``.

An event is a name followed by space-separated modifiers, in the order they
were added:

    event("keyup", changed(), delay(milliseconds(500)))  -> "keyup changed delay:500ms"
    event("click").with_once().with_from(closest("form"))  -> "click once from:closest form"

Polling triggers have their own form:

    every(seconds(2))                 -> "every 2s"
    every(seconds(2), on_load=True)   -> "load every 2s"
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from htmx_typed.specs.selector import Selector, as_selector
from htmx_typed.specs.timing import Duration


class QueueKind(StrEnum):
    """Which queued events survive while a request is in flight."""

    FIRST = "first"
    LAST = "last"
    ALL = "all"


# =============================================================================
# Event Modifiers
# =============================================================================


class OnceModifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["once"] = "once"

    def __str__(self) -> str:
        return "once"


class ChangedModifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["changed"] = "changed"

    def __str__(self) -> str:
        return "changed"


class DelayModifier(BaseModel):
    """Wait for a quiet period before firing (debounce)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["delay"] = "delay"
    duration: Duration

    def __str__(self) -> str:
        return f"delay:{self.duration}"


class ThrottleModifier(BaseModel):
    """Fire at most once per period."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["throttle"] = "throttle"
    duration: Duration

    def __str__(self) -> str:
        return f"throttle:{self.duration}"


class FromModifier(BaseModel):
    """Listen for the event on another element."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["from"] = "from"
    selector: Selector

    def __str__(self) -> str:
        return f"from:{self.selector}"


class TargetModifier(BaseModel):
    """Only fire when the event target matches ``css``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["target"] = "target"
    css: str

    def __str__(self) -> str:
        return f"target:{self.css}"


class ConsumeModifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["consume"] = "consume"

    def __str__(self) -> str:
        return "consume"


class QueueModifier(BaseModel):
    """Queueing discipline; ``None`` disables queueing."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["queue"] = "queue"
    queue: QueueKind | None = None

    def __str__(self) -> str:
        if self.queue is None:
            return "queue:none"
        return f"queue:{self.queue.value}"


EventModifier = Annotated[
    OnceModifier
    | ChangedModifier
    | DelayModifier
    | ThrottleModifier
    | FromModifier
    | TargetModifier
    | ConsumeModifier
    | QueueModifier,
    Field(discriminator="kind"),
]


def once() -> OnceModifier:
    return OnceModifier()


def changed() -> ChangedModifier:
    return ChangedModifier()


def delay(duration: Duration) -> DelayModifier:
    return DelayModifier(duration=duration)


def throttle(duration: Duration) -> ThrottleModifier:
    return ThrottleModifier(duration=duration)


def from_(selector: Selector | str) -> FromModifier:
    return FromModifier(selector=as_selector(selector))


def target(css: str) -> TargetModifier:
    return TargetModifier(css=css)


def consume() -> ConsumeModifier:
    return ConsumeModifier()


def queue(kind: QueueKind | None = None) -> QueueModifier:
    return QueueModifier(queue=kind)


# =============================================================================
# Events
# =============================================================================


class Event(BaseModel):
    """
    A single trigger specification.

    The ``with_*`` helpers return a new event with one modifier appended;
    the receiver is never changed.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="DOM or custom event name")
    modifiers: tuple[EventModifier, ...] = Field(default=())
    filter: str | None = Field(default=None, description="Event filter expression")

    def __str__(self) -> str:
        parts = [self.name if self.filter is None else f"{self.name}[{self.filter}]"]
        parts.extend(str(m) for m in self.modifiers)
        return " ".join(parts)

    def with_modifier(self, modifier: EventModifier) -> Event:
        return self.model_copy(update={"modifiers": (*self.modifiers, modifier)})

    def with_once(self) -> Event:
        return self.with_modifier(once())

    def with_changed(self) -> Event:
        return self.with_modifier(changed())

    def with_delay(self, duration: Duration) -> Event:
        return self.with_modifier(delay(duration))

    def with_throttle(self, duration: Duration) -> Event:
        return self.with_modifier(throttle(duration))

    def with_from(self, selector: Selector | str) -> Event:
        return self.with_modifier(from_(selector))

    def with_target(self, css: str) -> Event:
        return self.with_modifier(target(css))

    def with_consume(self) -> Event:
        return self.with_modifier(consume())

    def with_queue(self, kind: QueueKind | None = None) -> Event:
        return self.with_modifier(queue(kind))

    def with_filter(self, expression: str) -> Event:
        return self.model_copy(update={"filter": expression})


def event(name: str, *modifiers: EventModifier, filter: str | None = None) -> Event:
    return Event(name=name, modifiers=modifiers, filter=filter)


class Polling(BaseModel):
    """
    Polling trigger.

    Example:
        Polling(interval=seconds(2), on_load=True, filter="isActive")
        # "load every 2s [isActive]"
    """

    model_config = ConfigDict(frozen=True)

    interval: Duration
    on_load: bool = False
    filter: str | None = None

    def __str__(self) -> str:
        text = f"every {self.interval}"
        if self.on_load:
            text = f"load {text}"
        if self.filter is not None:
            text = f"{text} [{self.filter}]"
        return text


def every(interval: Duration, *, on_load: bool = False, filter: str | None = None) -> Polling:
    return Polling(interval=interval, on_load=on_load, filter=filter)


def trigger_value(*events: Event | Polling | str) -> str:
    """Render an ``hx-trigger`` value: event strings joined with ``", "``."""
    return ", ".join(str(e) for e in events)
