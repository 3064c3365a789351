"""Lightweight value objects shared by draggable entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Union

import pygame


@dataclass(frozen=True)
class Point:
    """
    An immutable 2D point, also used as a vector.

    Attributes
    ----------
    x : float
        Horizontal coordinate.
    y : float
        Vertical coordinate, growing downwards like pygame screen space.
    """
    x: float
    y: float

    @classmethod
    def of(cls, pos: Sequence[float]) -> Point:
        """Build a point from any (x, y) pair, e.g. ``pygame.mouse.get_pos()``."""
        if isinstance(pos, Point):
            return pos
        return cls(float(pos[0]), float(pos[1]))

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Hitbox:
    """
    Axis-aligned rectangle used for pick testing.

    The origin is the top-left corner. Sizes are not validated: a negative
    width or height gives a degenerate box that contains no point.
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_position(cls, position: Point, width: float, height: float) -> Hitbox:
        return cls(position.x, position.y, width, height)

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    def moved_to(self, position: Point) -> Hitbox:
        """Same size, new origin."""
        return Hitbox(position.x, position.y, self.width, self.height)

    def contains_point(self, point: Sequence[float]) -> bool:
        """Inclusive on every edge: a point on the border counts as inside."""
        px, py = point
        return (self.x <= px <= self.x + self.width
                and self.y <= py <= self.y + self.height)

    def to_rect(self) -> pygame.Rect:
        """Integer rectangle for pygame drawing calls."""
        return pygame.Rect(round(self.x), round(self.y),
                           round(self.width), round(self.height))


@dataclass(frozen=True)
class Idle:
    """No drag in progress."""


@dataclass(frozen=True)
class Dragging:
    """
    A drag gesture is in progress.

    Attributes
    ----------
    grab_offset : Point
        Pointer position relative to the anchor, captured at pick-up.
    """
    grab_offset: Point


IDLE = Idle()

DragState = Union[Idle, Dragging]
