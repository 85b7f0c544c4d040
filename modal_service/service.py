"""Modal service: the stack orchestrator plus promise-style dialogs.

alert / confirm / prompt / dialog return an ``asyncio.Future`` that resolves
with the dialog result once the view has been closed again. They are plain
functions, not coroutines: the view opens in the background, BEFORE_<NAME> is
published right away, and dialog() without a view raises before anything is
scheduled.
"""
from __future__ import annotations
import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional
from modal_service.core.errors import MissingViewError, UnknownRequestError
from modal_service.core.event_listener import EventListener
from modal_service.core.modal_event import ModalEvent, ModalEventType, ViewEventType
from modal_service.core.orchestrator import TransitionOrchestrator
from modal_service.ui.presenter import Presenter
from modal_service.views import AlertView, ConfirmView, PromptView

ViewFactory = Callable[[Any], Any]


@dataclass(frozen=True)
class DialogKind:
    """Which terminal view events end a dialog and how each maps to a result."""
    name: str
    before: ModalEventType
    after: ModalEventType
    results: Mapping[ViewEventType, Callable[[ModalEvent], Any]]


ALERT = DialogKind(
    "alert", ModalEventType.BEFORE_ALERT, ModalEventType.ALERT,
    {ViewEventType.CONFIRM: lambda e: None, ViewEventType.CANCEL: lambda e: None},
)
CONFIRM = DialogKind(
    "confirm", ModalEventType.BEFORE_CONFIRM, ModalEventType.CONFIRM,
    {ViewEventType.CONFIRM: lambda e: True, ViewEventType.CANCEL: lambda e: False},
)
PROMPT = DialogKind(
    "prompt", ModalEventType.BEFORE_PROMPT, ModalEventType.PROMPT,
    {ViewEventType.SUBMIT: lambda e: e.get("value"), ViewEventType.CANCEL: lambda e: None},
)
DIALOG = DialogKind(
    "dialog", ModalEventType.BEFORE_DIALOG, ModalEventType.DIALOG,
    {ViewEventType.SUBMIT: lambda e: e.get("value"), ViewEventType.CANCEL: lambda e: None},
)


def _observe_failure(task: asyncio.Future) -> None:
    if not task.cancelled():
        task.exception()


class ModalService(TransitionOrchestrator):
    """Modal stack with convenience dialogs.

    Args:
        presenter: render / remove / animate collaborator (no-op by default)
        alert_view, confirm_view, prompt_view: factories taking ``options``
            and returning the view for the matching convenience dialog
        event_listener: listener receiving ModalEvents (a fresh one by default)
    """

    # Request name -> method name
    REQUESTS = {
        "open": "open",
        "close": "close",
        "alert": "alert",
        "confirm": "confirm",
        "prompt": "prompt",
        "dialog": "dialog",
    }

    def __init__(
        self,
        presenter: Optional[Presenter] = None,
        *,
        alert_view: ViewFactory = AlertView,
        confirm_view: ViewFactory = ConfirmView,
        prompt_view: ViewFactory = PromptView,
        event_listener: Optional[EventListener] = None,
    ):
        super().__init__(presenter, event_listener)
        self.alert_view = alert_view
        self.confirm_view = confirm_view
        self.prompt_view = prompt_view
        # Strong references to in-flight close chains
        self._pending: set[asyncio.Task] = set()

    def request(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Dispatch a named request (e.g. ``request("confirm", {...})``)."""
        try:
            method_name = self.REQUESTS[name]
        except KeyError:
            raise UnknownRequestError(f"ModalService: unknown request {name!r}") from None
        return getattr(self, method_name)(*args, **kwargs)

    def alert(self, options: Any = None) -> asyncio.Future:
        return self._present(ALERT, self.alert_view(options), options)

    def confirm(self, options: Any = None) -> asyncio.Future:
        return self._present(CONFIRM, self.confirm_view(options), options)

    def prompt(self, options: Any = None) -> asyncio.Future:
        return self._present(PROMPT, self.prompt_view(options), options)

    def dialog(self, view: Any = None, options: Any = None) -> asyncio.Future:
        if not view:
            raise MissingViewError("ModalService: no view passed to dialog")
        return self._present(DIALOG, view, options)

    def _present(self, kind: DialogKind, view: Any, options: Any) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        opening = asyncio.ensure_future(self.open(view, options))
        # A failed open is reported through the future once a terminal event
        # arrives; until then the task's exception is marked as seen here.
        opening.add_done_callback(_observe_failure)

        self._publish(kind.before, view, options)

        def on_terminal(event: ModalEvent) -> None:
            result = kind.results[event.type](event)
            task = loop.create_task(self._finish(kind, view, options, opening, result, future))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

        # once: the first terminal event wins, later ones must not close twice
        view.event_listener.subscribe(on_terminal, types=kind.results.keys(), once=True)
        return future

    async def _finish(self, kind: DialogKind, view: Any, options: Any,
                      opening: asyncio.Future, result: Any, future: asyncio.Future) -> None:
        try:
            # Never close a view that is still entering.
            await opening
            await self.close(view, options)
            self._publish(kind.after, view, options, result=result)
        except Exception as e:
            if not future.done():
                future.set_exception(e)
            return
        if not future.done():
            future.set_result(result)


__all__ = ["ModalService", "DialogKind", "ALERT", "CONFIRM", "PROMPT", "DIALOG"]
