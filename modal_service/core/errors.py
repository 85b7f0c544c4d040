"""Exceptions raised by the modal service."""


class ModalServiceError(Exception):
    """Base class for errors raised by the modal service itself.

    Failures coming from presenters (render/animate/remove) are never wrapped;
    they propagate unchanged to whoever awaited the operation.
    """


class MissingViewError(ModalServiceError, ValueError):
    pass


class DuplicateViewError(ModalServiceError, ValueError):
    pass


class UnknownRequestError(ModalServiceError, KeyError):
    pass


__all__ = [
    "ModalServiceError",
    "MissingViewError",
    "DuplicateViewError",
    "UnknownRequestError",
]
