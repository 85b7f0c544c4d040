"""Pygame presenter: draws each stacked view as an overlay sprite.

Each rendered view gets a ModalSprite on the MODAL layer of a LayeredUpdates
group, so sprite order inside the layer follows stack order. Animations are
alpha / slide tweens stepped with ``asyncio.sleep`` between frames; the host
keeps calling ``draw()`` from its own loop while they run.
"""
from __future__ import annotations
import asyncio
from collections.abc import Mapping
from typing import Any, Optional
import pygame
from modal_service.ui.presenter import Presenter
from modal_service.ui.sprites.sprite_base import BaseSprite, Layer
from modal_service.ui.settings import (
    WIDTH, HEIGHT, ANIMATION_DURATION_MS, ANIMATION_FRAME_MS, SWAP_OFFSET_PX,
    PANEL_WIDTH, PANEL_HEIGHT, PANEL_PADDING, PANEL_RADIUS, FONT_SIZE,
    BACKDROP_COLOR, BACKDROP_ALPHA, PANEL_BG, PANEL_BORDER,
    TEXT_TITLE, TEXT_BODY, TEXT_HINT, BTN_CONFIRM, BTN_CANCEL, BTN_TEXT,
)


class ModalSprite(BaseSprite):
    """Dimmed backdrop plus a centered panel for one view."""

    def __init__(self, view, font: Optional[pygame.font.Font], size: tuple[int, int] = (WIDTH, HEIGHT), *groups):
        super().__init__(Layer.MODAL, view, *groups)
        self.view = view
        self.font = font
        self.size = size
        self.alpha = 0
        self.offset_y = 0
        self.image = pygame.Surface(size, pygame.SRCALPHA)
        self.rect = self.image.get_rect(topleft=(0, 0))
        self.sync_from_logical()

    def panel_rect(self) -> pygame.Rect:
        opts = getattr(self.view, 'options', None)
        if not isinstance(opts, Mapping):
            opts = {}
        w = int(opts.get('width', PANEL_WIDTH))
        h = int(opts.get('height', PANEL_HEIGHT))
        rect = pygame.Rect(0, 0, w, h)
        rect.center = (self.size[0] // 2, self.size[1] // 2 + self.offset_y)
        return rect

    def sync_from_logical(self):
        self.image.fill((*BACKDROP_COLOR, BACKDROP_ALPHA))
        panel = self.panel_rect()
        pygame.draw.rect(self.image, PANEL_BG, panel, border_radius=PANEL_RADIUS)
        pygame.draw.rect(self.image, PANEL_BORDER, panel, width=2, border_radius=PANEL_RADIUS)
        if self.font is not None:
            self._draw_text(panel)
        self.image.set_alpha(self.alpha)
        self.dirty = 1

    def _draw_text(self, panel: pygame.Rect):
        v = self.view
        y = panel.y + PANEL_PADDING
        title = getattr(v, 'title', '')
        if title:
            surf = self.font.render(str(title), True, TEXT_TITLE)
            self.image.blit(surf, (panel.x + PANEL_PADDING, y))
            y += surf.get_height() + 8
        text = getattr(v, 'text', '')
        if text:
            surf = self.font.render(str(text), True, TEXT_BODY)
            self.image.blit(surf, (panel.x + PANEL_PADDING, y))
            y += surf.get_height() + 8
        if hasattr(v, 'value'):
            shown = v.value or getattr(v, 'placeholder', '')
            color = TEXT_BODY if v.value else TEXT_HINT
            box = pygame.Rect(panel.x + PANEL_PADDING, y, panel.width - 2 * PANEL_PADDING, self.font.get_height() + 8)
            pygame.draw.rect(self.image, PANEL_BORDER, box, width=1, border_radius=4)
            self.image.blit(self.font.render(str(shown), True, color), (box.x + 4, box.y + 4))
        # Buttons along the bottom edge, confirm rightmost
        x = panel.right - PANEL_PADDING
        for label_attr, color in (('confirm_label', BTN_CONFIRM), ('cancel_label', BTN_CANCEL)):
            label = getattr(v, label_attr, None)
            if not label:
                continue
            surf = self.font.render(str(label), True, BTN_TEXT)
            btn = pygame.Rect(0, 0, surf.get_width() + 24, surf.get_height() + 12)
            btn.bottomright = (x, panel.bottom - PANEL_PADDING)
            pygame.draw.rect(self.image, color, btn, border_radius=6)
            self.image.blit(surf, surf.get_rect(center=btn.center))
            x = btn.left - 12


class PygamePresenter(Presenter):
    def __init__(
        self,
        group: Optional[pygame.sprite.LayeredUpdates] = None,
        font: Optional[pygame.font.Font] = None,
        size: tuple[int, int] = (WIDTH, HEIGHT),
        duration_ms: int = ANIMATION_DURATION_MS,
        frame_ms: int = ANIMATION_FRAME_MS,
    ):
        self.group = group if group is not None else pygame.sprite.LayeredUpdates()
        self.font = font
        self.size = size
        self.duration_ms = duration_ms
        self.frame_ms = frame_ms

    def _get_font(self) -> Optional[pygame.font.Font]:
        if self.font is None:
            try:
                if not pygame.font.get_init():
                    pygame.font.init()
                self.font = pygame.font.Font(None, FONT_SIZE)
            except pygame.error as e:
                print(f"Warning: Could not load modal font, drawing panels without text: {e}")
        return self.font

    def sprite_for(self, view) -> Optional[ModalSprite]:
        sprite = getattr(view, 'presentation', None)
        return sprite if isinstance(sprite, ModalSprite) else None

    async def render(self, view, options: Any = None) -> None:
        sprite = ModalSprite(view, self._get_font(), self.size)
        view.presentation = sprite
        self.group.add(sprite)

    async def remove(self, view, options: Any = None) -> None:
        sprite = self.sprite_for(view)
        if sprite is not None:
            sprite.kill()
        view.presentation = None

    async def animate_in(self, view, options: Any = None) -> None:
        await self._tween([(self.sprite_for(view), 0, 255, SWAP_OFFSET_PX, 0)], options)

    async def animate_swap(self, outgoing, incoming, options: Any = None) -> None:
        await self._tween([
            (self.sprite_for(outgoing), 255, 0, 0, -SWAP_OFFSET_PX),
            (self.sprite_for(incoming), 0, 255, SWAP_OFFSET_PX, 0),
        ], options)

    async def animate_out(self, view, options: Any = None) -> None:
        await self._tween([(self.sprite_for(view), 255, 0, 0, SWAP_OFFSET_PX)], options)

    async def _tween(self, tracks, options: Any) -> None:
        """Step every (sprite, alpha_from, alpha_to, offset_from, offset_to) track together."""
        tracks = [t for t in tracks if t[0] is not None]
        duration = self.duration_ms
        if isinstance(options, Mapping) and options.get('duration_ms') is not None:
            duration = int(options['duration_ms'])
        steps = max(1, duration // max(1, self.frame_ms))
        for i in range(1, steps + 1):
            t = i / steps
            for sprite, a0, a1, o0, o1 in tracks:
                sprite.alpha = round(a0 + (a1 - a0) * t)
                sprite.offset_y = round(o0 + (o1 - o0) * t)
                sprite.sync_from_logical()
            await asyncio.sleep(self.frame_ms / 1000 if duration > 0 else 0)

    def update(self) -> None:
        self.group.update()

    def draw(self, surface: pygame.Surface) -> None:
        self.group.draw(surface)


__all__ = ["PygamePresenter", "ModalSprite"]
