from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

class ModalEventType(Enum):
    # Stack lifecycle
    BEFORE_OPEN = auto()
    OPEN = auto()
    BEFORE_CLOSE = auto()
    CLOSE = auto()
    # Convenience dialogs (result events carry 'result')
    BEFORE_ALERT = auto()
    ALERT = auto()
    BEFORE_CONFIRM = auto()
    CONFIRM = auto()
    BEFORE_PROMPT = auto()
    PROMPT = auto()
    BEFORE_DIALOG = auto()
    DIALOG = auto()

class ViewEventType(Enum):
    """Terminal events a view publishes on its own listener."""
    CONFIRM = auto()
    CANCEL = auto()
    SUBMIT = auto()

@dataclass(slots=True)
class ModalEvent:
    type: ModalEventType | ViewEventType
    source: Any | None = None
    payload: Optional[dict[str, Any]] = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default) if self.payload else default

    @property
    def view(self) -> Any:
        return self.get("view")

    def __repr__(self) -> str:  # Helpful for debugging
        return f"ModalEvent(type={self.type}, payload={self.payload})"

__all__ = ["ModalEventType", "ViewEventType", "ModalEvent"]
