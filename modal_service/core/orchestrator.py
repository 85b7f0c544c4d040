"""Open / close sequencing for the modal stack.

Each operation snapshots what it needs from the stack synchronously (a small
transaction record), then walks the presenter steps one at a time. Stack
mutations happen before the first suspension point and are never undone, even
when a later render, animation or removal fails.
"""
from __future__ import annotations
import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Optional
from modal_service.core.event_listener import EventListener
from modal_service.core.modal_event import ModalEventType
from modal_service.core.modal_stack import ModalStack
from modal_service.ui.presenter import Presenter


@dataclass(frozen=True, slots=True)
class OpenTransaction:
    view: Any
    options: Any
    previous: Any | None  # frontmost view before the push


@dataclass(frozen=True, slots=True)
class CloseTransaction:
    view: Any | None  # None for a batch close
    options: Any
    views: tuple[Any, ...]  # remaining views (single) or drained views (batch)
    previous: Any | None  # frontmost of ``views``


class TransitionOrchestrator:
    def __init__(self, presenter: Optional[Presenter] = None, event_listener: Optional[EventListener] = None):
        self.presenter = presenter if presenter is not None else Presenter()
        self.event_listener = event_listener if event_listener is not None else EventListener()
        self.stack = ModalStack()
        # Direction of the last transition, not "stack non-empty": closing one
        # view while others stay open still leaves this False. Use
        # stack.active() for "anything stacked".
        self._is_open = False

    def is_open(self) -> bool:
        return self._is_open

    async def open(self, view: Any, options: Any = None) -> None:
        """Push ``view`` and bring it to the front.

        Fires BEFORE_OPEN, pushes, renders, then either swaps with the previous
        frontmost view or animates in, and finally fires OPEN. A failed step
        aborts the rest; the view stays stacked.
        """
        self._publish(ModalEventType.BEFORE_OPEN, view, options)
        self._is_open = True

        tx = OpenTransaction(view=view, options=options, previous=self.stack.top())
        self.stack.push(view)

        await self._call(self.presenter.render, tx.view, tx.options)
        if tx.previous is not None:
            await self._call(self.presenter.animate_swap, tx.previous, tx.view, tx.options)
        else:
            await self._call(self.presenter.animate_in, tx.view, tx.options)

        self._publish(ModalEventType.OPEN, tx.view, tx.options)

    async def close(self, view: Any = None, options: Any = None) -> None:
        """Close ``view``, or every stacked view when ``view`` is None."""
        if view is not None:
            await self._close_one(view, options)
        else:
            await self._close_all(options)

    async def _close_one(self, view: Any, options: Any) -> None:
        self._publish(ModalEventType.BEFORE_CLOSE, view, options)
        self._is_open = False

        remaining = tuple(self.stack.remove(view))
        tx = CloseTransaction(
            view=view,
            options=options,
            views=remaining,
            previous=remaining[-1] if remaining else None,
        )

        if tx.previous is not None:
            await self._call(self.presenter.animate_swap, tx.view, tx.previous, tx.options)
        else:
            await self._call(self.presenter.animate_out, tx.view, tx.options)
        await self._call(self.presenter.remove, tx.view, tx.options)

        self._publish(ModalEventType.CLOSE, tx.view, tx.options)

    async def _close_all(self, options: Any) -> None:
        for stacked in self.stack:
            self._publish(ModalEventType.BEFORE_CLOSE, stacked, options)
        self._is_open = False

        drained = tuple(self.stack.drain())
        tx = CloseTransaction(
            view=None,
            options=options,
            views=drained,
            previous=drained[-1] if drained else None,
        )

        # Only the frontmost view is visible, so only it animates out.
        if tx.previous is not None:
            await self._call(self.presenter.animate_out, tx.previous, tx.options)

        results = await asyncio.gather(
            *(self._call(self.presenter.remove, v, tx.options) for v in tx.views),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result

        for v in tx.views:
            self._publish(ModalEventType.CLOSE, v, tx.options)

    async def _call(self, hook: Callable[..., Any], *args: Any) -> Any:
        result = hook(*args)
        if inspect.isawaitable(result):
            return await result
        return result

    def _publish(self, event_type: ModalEventType, view: Any, options: Any, **extra: Any) -> None:
        self.event_listener.emit(event_type, source=self, view=view, options=options, **extra)


__all__ = ["TransitionOrchestrator", "OpenTransaction", "CloseTransaction"]
