from __future__ import annotations
from typing import Any, Iterator
from modal_service.core.errors import DuplicateViewError

class ModalStack:
    """Ordered stack of active views; last element is frontmost.

    Integration points:
    - push(view): adds a view on top.
    - remove(view): drops one view, returns what is left.
    - drain(): empties the stack, returns what it held.
    - top(): returns current frontmost view.
    - active(): bool whether any view present.

    Views are compared by identity. The stack never renders or animates anything.
    """
    def __init__(self):
        self._stack: list[Any] = []

    def push(self, view: Any):
        if view in self:
            raise DuplicateViewError(f"ModalStack: view {view!r} is already open")
        self._stack.append(view)

    def remove(self, view: Any) -> list[Any]:
        self._stack = [v for v in self._stack if v is not view]
        return list(self._stack)

    def drain(self) -> list[Any]:
        drained, self._stack = self._stack, []
        return drained

    def top(self) -> Any | None:
        return self._stack[-1] if self._stack else None

    def active(self) -> bool:
        return bool(self._stack)

    def snapshot(self) -> list[Any]:
        return list(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._stack))

    def __contains__(self, view: Any) -> bool:
        return any(v is view for v in self._stack)

__all__ = ["ModalStack"]
