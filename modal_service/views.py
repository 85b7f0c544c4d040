"""Default logical views for the convenience dialogs.

These only hold what a presenter needs to draw (title, text, button labels);
hosts can pass their own factories to ModalService instead. A bare string in
place of an options mapping is used as the message text.
"""
from __future__ import annotations
from typing import Any
from modal_service.core.presentable import Presentable

# Marks "no value passed" so that an explicit submit(None) stays None
_ENTRY_TEXT = object()


class AlertView(Presentable):
    """Message with a single acknowledge button."""

    def __init__(self, options: Any = None):
        super().__init__(options)
        self.title: str = self.option("title", "")
        self.text: str = options if isinstance(options, str) else self.option("text", "")
        self.confirm_label: str = self.option("confirm_label", "OK")


class ConfirmView(AlertView):
    """Yes / no question. confirm() answers yes, cancel() answers no."""

    def __init__(self, options: Any = None):
        super().__init__(options)
        self.cancel_label: str = self.option("cancel_label", "Cancel")


class PromptView(ConfirmView):
    """Single line text entry."""

    def __init__(self, options: Any = None):
        super().__init__(options)
        self.placeholder: str = self.option("placeholder", "")
        self.value: str = str(self.option("default", ""))

    def set_value(self, text: str) -> None:
        self.value = text

    def submit(self, value: Any = _ENTRY_TEXT) -> None:
        """Submit ``value``, or the current entry text when omitted."""
        super().submit(self.value if value is _ENTRY_TEXT else value)


__all__ = ["AlertView", "ConfirmView", "PromptView"]
