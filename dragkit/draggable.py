from __future__ import annotations

"""Draggable entity: pick-up, drag and release driven by pointer events.

An entity sits at an anchor (its top-left corner) with a fixed-size hitbox that
always follows the anchor. A press inside the hitbox starts a drag and records
where the pointer grabbed it; pointer motion then moves the anchor so the
pointer keeps that same grab point; a release ends the drag.
"""

from typing import Protocol, Sequence

import pygame

from dragkit.constants import HITBOX_COLOR, HITBOX_WIDTH
from dragkit.models import IDLE, Dragging, DragState, Hitbox, Point


class Draggable(Protocol):
    """What a scene needs from anything the pointer can drag."""

    hitbox: Hitbox

    @property
    def position(self) -> Point: ...

    @property
    def is_moving(self) -> bool: ...

    def handle_click_down(self, cursor: Sequence[float]) -> bool: ...

    def handle_click_up(self, cursor: Sequence[float]) -> None: ...

    def update_position(self, cursor: Sequence[float]) -> None: ...

    def draw(self, surf: pygame.Surface) -> None: ...


class DraggableEntity:
    """
    Base for anything that can be grabbed, tracked and repositioned.

    States:
    - Idle:     pointer motion only keeps the hitbox on the anchor.
    - Dragging: pointer motion moves the anchor, keeping the grab offset.

    Subclasses override ``draw`` (and may extend ``handle_click_down`` /
    ``handle_click_up``) to give richer visuals.
    """

    def __init__(self, position: Sequence[float], width: float, height: float) -> None:
        """
        Parameters
        ----------
        position : Sequence[float]
            Initial anchor (top-left corner).
        width, height : float
            Hitbox size. Not validated; fixed for the entity's lifetime.
        """
        self._position = Point.of(position)
        self.hitbox = Hitbox.from_position(self._position, width, height)
        self.state: DragState = IDLE
        # Reserved: not consulted by any pointer handler yet
        self.is_fixed = False

    # ------------------------------- Geometry ----------------------------------------

    @property
    def position(self) -> Point:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self.move_to(value)

    @property
    def width(self) -> float:
        return self.hitbox.width

    @property
    def height(self) -> float:
        return self.hitbox.height

    def move_to(self, position: Sequence[float]) -> None:
        """Reposition the anchor directly, outside of any drag gesture."""
        self._position = Point.of(position)
        self._sync_hitbox()

    def contains_point(self, point: Sequence[float]) -> bool:
        return self.hitbox.contains_point(point)

    # ------------------------------- Drag state --------------------------------------

    @property
    def is_moving(self) -> bool:
        return isinstance(self.state, Dragging)

    @property
    def grab_offset(self) -> Point | None:
        """Pointer position relative to the anchor at pick-up, only while dragging."""
        if isinstance(self.state, Dragging):
            return self.state.grab_offset
        return None

    def handle_click_down(self, cursor: Sequence[float]) -> bool:
        """
        Start a drag if the press lands inside the hitbox.

        Returns
        -------
        bool
            True if the press grabbed this entity; otherwise the entity is left idle.
        """
        cursor = Point.of(cursor)
        if not self.hitbox.contains_point(cursor):
            self.state = IDLE
            return False
        self.state = Dragging(self._initial_click(cursor))
        return True

    def handle_click_up(self, cursor: Sequence[float]) -> None:
        """End any drag. The release position is ignored: no snapping on drop."""
        self.state = IDLE

    def update_position(self, cursor: Sequence[float]) -> None:
        """Follow the pointer while dragging; always leaves the hitbox on the anchor."""
        if self.is_moving:
            self._position = self._real_position(Point.of(cursor))
        self._sync_hitbox()

    # ------------------------------- Rendering ---------------------------------------

    def draw(self, surf: pygame.Surface) -> None:
        """Outline the hitbox. Subclasses draw something nicer."""
        pygame.draw.rect(surf, HITBOX_COLOR, self.hitbox.to_rect(), HITBOX_WIDTH)

    def draw_hitbox(self, surf: pygame.Surface) -> None:
        """Debug overlay, independent of any ``draw`` override."""
        DraggableEntity.draw(self, surf)

    # ------------------------------- Helpers -----------------------------------------

    def _initial_click(self, cursor: Point) -> Point:
        # Per-axis distance, not a signed offset: only exact for presses
        # right/below the anchor, which holds for any point of a positive hitbox.
        return Point(abs(self._position.x - cursor.x),
                     abs(self._position.y - cursor.y))

    def _real_position(self, cursor: Point) -> Point:
        assert isinstance(self.state, Dragging), "dragging without a grab offset"
        return cursor - self.state.grab_offset

    def _sync_hitbox(self) -> None:
        self.hitbox = self.hitbox.moved_to(self._position)

    def __repr__(self) -> str:
        kind = "dragging" if self.is_moving else "idle"
        return (f"{type(self).__name__}(({self._position.x:g}, {self._position.y:g}), "
                f"{self.width:g}x{self.height:g}, {kind})")
