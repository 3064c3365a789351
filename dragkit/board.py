from __future__ import annotations

"""Board: owns a set of draggables and routes pointer events to them."""

from typing import Sequence

import pygame

from dragkit.draggable import Draggable
from dragkit.logger import DragLogger


class Board:
    """
    Scene collection for draggable entities.

    Entities are drawn in list order, so the last one is on top. A press is
    offered top-down and the first entity that accepts it becomes active;
    the rest still see the press so that any stale drag is cleared.
    """

    def __init__(self, entities: list[Draggable] | None = None,
                 logger: DragLogger | None = None) -> None:
        self.entities: list[Draggable] = list(entities) if entities else []
        self.logger = logger
        self.active: Draggable | None = None

    def add(self, entity: Draggable) -> None:
        self.entities.append(entity)

    # --------------------------------- Input ----------------------------------------

    def press(self, pos: Sequence[float]) -> Draggable | None:
        """Offer a press to the entities, topmost first."""
        self.active = None
        for entity in reversed(self.entities):
            if self.active is not None:
                # Already taken: a press outside leaves the others idle
                entity.handle_click_up(pos)
            elif entity.handle_click_down(pos):
                self.active = entity

        if self.logger is not None:
            details = repr(self.active) if self.active is not None else "No entity grabbed"
            self.logger.log_press(pos, self.active is not None, details)
        return self.active

    def release(self, pos: Sequence[float]) -> None:
        for entity in self.entities:
            entity.handle_click_up(pos)
        if self.logger is not None and self.active is not None:
            self.logger.log_release(pos, repr(self.active))
        self.active = None

    def move(self, pos: Sequence[float]) -> None:
        for entity in self.entities:
            entity.update_position(pos)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Route a pygame mouse event. Only the left button drags.

        Returns
        -------
        bool
            True if the event was a pointer event this board consumed.
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.press(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.release(event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self.move(event.pos)
        else:
            return False
        return True

    # ------------------------------- Rendering ---------------------------------------

    def draw(self, surf: pygame.Surface, show_hitboxes: bool = False) -> None:
        for entity in self.entities:
            entity.draw(surf)
            if show_hitboxes and hasattr(entity, "draw_hitbox"):
                entity.draw_hitbox(surf)
