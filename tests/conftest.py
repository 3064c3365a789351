import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from dragkit.draggable import DraggableEntity


@pytest.fixture
def surface():
    surf = pygame.Surface((200, 200))
    surf.fill((0, 0, 0))
    return surf


@pytest.fixture
def entity():
    """Entity at (10, 10), 20x20."""
    return DraggableEntity((10, 10), 20, 20)
