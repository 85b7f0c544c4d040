from __future__ import annotations
import traceback
from collections import defaultdict
from typing import Any, Callable, Hashable, Iterable, Optional
from modal_service.core.modal_event import ModalEvent

Callback = Callable[[ModalEvent], None]

class EventListener:
    """Event hub owned by the modal service and by every view.

    Subscribers can optionally specify a set of event type filters; if omitted they
    receive all events. A ``once`` subscriber is dropped from every filter before
    its first call, so a dialog's terminal handler runs for one event only even
    when the view fires confirm and cancel back to back.
    """

    def __init__(self):
        self._subs_all: list[Callback] = []
        self._subs_specific: dict[Hashable, list[Callback]] = defaultdict(list)
        self._once: list[Callback] = []
        # Events published during a callback are queued and processed afterward
        self._queue: list[ModalEvent] = []
        self._dispatching: bool = False

    def subscribe(self, callback: Callback, types: Optional[Iterable[Hashable]] = None, *, once: bool = False):
        if types is None:
            if callback not in self._subs_all:
                self._subs_all.append(callback)
        else:
            for t in types:
                lst = self._subs_specific[t]
                if callback not in lst:
                    lst.append(callback)
        if once and callback not in self._once:
            self._once.append(callback)

    def unsubscribe(self, callback: Callback):
        if callback in self._subs_all:
            self._subs_all.remove(callback)
        for lst in self._subs_specific.values():
            if callback in lst:
                lst.remove(callback)
        if callback in self._once:
            self._once.remove(callback)

    def subscribed(self, callback: Callback) -> bool:
        return callback in self._subs_all or any(callback in lst for lst in self._subs_specific.values())

    def emit(self, event_type: Hashable, source: Any = None, **payload: Any):
        """Publish a ModalEvent built from ``event_type`` and keyword payload."""
        self.publish(ModalEvent(event_type, source=source, payload=payload))

    def publish(self, event: ModalEvent):
        self._queue.append(event)
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._queue:
                self._dispatch(self._queue.pop(0))
        finally:
            self._dispatching = False

    def _dispatch(self, ev: ModalEvent):
        # Type-filtered subscribers (the dialog handlers) run before catch-all observers
        for cb in list(self._subs_specific.get(ev.type, [])) + list(self._subs_all):
            if cb in self._once:
                self.unsubscribe(cb)
            elif not self.subscribed(cb):
                # Dropped by an earlier callback of this same event
                continue
            try:
                cb(ev)
            except Exception as e:
                print(f"Warning: subscriber failed while handling {ev.type}: {e}")
                traceback.print_exc()

__all__ = ["EventListener"]
