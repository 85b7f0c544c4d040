import pygame
from enum import IntEnum

class Layer(IntEnum):
    MODAL = 400

class BaseSprite(pygame.sprite.Sprite):
    """Minimal sprite base with layer + reference to the logical view it draws.

    Rendering placement (image/rect) stays separate from the view object; the
    sprite re-reads the view in sync_from_logical().
    """
    def __init__(self, layer: int, logical=None, *groups):
        self._layer = layer  # honored by LayeredUpdates; must be set before joining groups
        super().__init__(*groups)
        self.logical = logical
        self.image = pygame.Surface((1,1), pygame.SRCALPHA)
        self.rect = self.image.get_rect()
        self.dirty = 1

    def sync_from_logical(self):  # to be overridden by subclasses
        pass

    def update(self, *args, **kwargs):
        if self.logical is not None:
            self.sync_from_logical()

__all__ = ["Layer", "BaseSprite"]
