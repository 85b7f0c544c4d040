"""Collaborator interface the modal stack drives during transitions."""
from __future__ import annotations
from typing import Any


class Presenter:
    """Render / remove / animate hooks for stacked views.

    Every hook may be a coroutine or a plain function; the orchestrator awaits
    whatever it gets back. The base implementation does nothing, so a host can
    override only the hooks it needs.

    animate_swap receives (previous, new) when a view opens on top of another,
    and (closing, revealed) when a view closes while another remains below it.
    In both cases the first argument leaves the front and the second takes it.
    """

    async def render(self, view: Any, options: Any = None) -> None:
        pass

    async def remove(self, view: Any, options: Any = None) -> None:
        pass

    async def animate_in(self, view: Any, options: Any = None) -> None:
        pass

    async def animate_swap(self, outgoing: Any, incoming: Any, options: Any = None) -> None:
        pass

    async def animate_out(self, view: Any, options: Any = None) -> None:
        pass


__all__ = ["Presenter"]
