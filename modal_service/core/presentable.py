from __future__ import annotations
from collections.abc import Mapping
from typing import Any
from modal_service.core.event_listener import EventListener
from modal_service.core.modal_event import ViewEventType

class Presentable:
    """A view managed by the modal stack.

    The stack only relies on identity and on ``event_listener``; concrete
    content, layout and drawing belong to subclasses and presenters. Hosts
    signal the end of a dialog through confirm(), cancel() or submit(value).

    ``options`` is kept exactly as given. Keyed lookups through option() only
    apply when it is a mapping; anything else (a bare message string, a host
    config object) falls back to the defaults.
    """
    _id_seq = 0

    def __init__(self, options: Any = None, name: str | None = None):
        Presentable._id_seq += 1
        self.id: int = Presentable._id_seq
        self.options = options
        self.name = name or self.option("name") or type(self).__name__
        # Terminal events (confirm / cancel / submit) are published here
        self.event_listener = EventListener()
        # Presenters may stash per-view render state (e.g. a sprite) here
        self.presentation: Any = None

    def option(self, key: str, default: Any = None) -> Any:
        if isinstance(self.options, Mapping):
            return self.options.get(key, default)
        return default

    # --- Terminal events ---------------------------------------------------
    def confirm(self) -> None:
        self.event_listener.emit(ViewEventType.CONFIRM, source=self)

    def cancel(self) -> None:
        self.event_listener.emit(ViewEventType.CANCEL, source=self)

    def submit(self, value: Any = None) -> None:
        self.event_listener.emit(ViewEventType.SUBMIT, source=self, value=value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self.name!r})"

__all__ = ["Presentable"]
