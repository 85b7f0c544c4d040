"""modal_service package public API.

Exports the modal stack service, its collaborator interface and the default
dialog views.
"""
from __future__ import annotations

from .core.errors import DuplicateViewError, MissingViewError, ModalServiceError, UnknownRequestError
from .core.modal_event import ModalEvent, ModalEventType, ViewEventType
from .core.presentable import Presentable
from .service import ModalService
from .ui.presenter import Presenter
from .views import AlertView, ConfirmView, PromptView

__all__ = [
    "ModalService",
    "Presenter",
    "Presentable",
    "AlertView",
    "ConfirmView",
    "PromptView",
    "ModalEvent",
    "ModalEventType",
    "ViewEventType",
    "ModalServiceError",
    "MissingViewError",
    "DuplicateViewError",
    "UnknownRequestError",
]
