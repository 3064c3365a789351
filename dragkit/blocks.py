"""Concrete draggable kinds: coloured blocks with an optional label."""

from __future__ import annotations

from typing import Sequence

import pygame

from dragkit.constants import (
    BLOCK_BORDER,
    BLOCK_BORDER_WIDTH,
    DRAG_HIGHLIGHT,
    PIN_COLOR,
    PIN_RADIUS,
    TEXT_COLOR,
)
from dragkit.draggable import DraggableEntity


def lighten(color: tuple[int, int, int], amount: int) -> tuple[int, int, int]:
    return tuple(min(255, c + amount) for c in color)


class Block(DraggableEntity):
    """A filled rectangle that brightens while it is being dragged."""

    def __init__(self, position: Sequence[float], width: float, height: float,
                 color: tuple[int, int, int], label: str = "",
                 font: pygame.font.Font | None = None) -> None:
        super().__init__(position, width, height)
        self.color = color
        self.label = label
        self.font = font

    def fill_color(self) -> tuple[int, int, int]:
        if self.is_moving:
            return lighten(self.color, DRAG_HIGHLIGHT)
        return self.color

    def draw(self, surf: pygame.Surface) -> None:
        rect = self.hitbox.to_rect()
        pygame.draw.rect(surf, self.fill_color(), rect)
        pygame.draw.rect(surf, BLOCK_BORDER, rect, BLOCK_BORDER_WIDTH)

        if self.label and self.font is not None:
            text = self.font.render(self.label, True, TEXT_COLOR)
            surf.blit(text, text.get_rect(center=rect.center))


class PinnedBlock(Block):
    """
    A block flagged as fixed, marked with a pin in its top-left corner.

    The flag is informational only: the block can still be dragged.
    """

    def __init__(self, position: Sequence[float], width: float, height: float,
                 color: tuple[int, int, int], label: str = "",
                 font: pygame.font.Font | None = None) -> None:
        super().__init__(position, width, height, color, label, font)
        self.is_fixed = True

    def draw(self, surf: pygame.Surface) -> None:
        super().draw(surf)
        rect = self.hitbox.to_rect()
        pin = (rect.left + PIN_RADIUS * 2, rect.top + PIN_RADIUS * 2)
        pygame.draw.circle(surf, PIN_COLOR, pin, PIN_RADIUS)
