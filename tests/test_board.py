import pygame
import pytest

from dragkit.board import Board
from dragkit.draggable import DraggableEntity
from dragkit.logger import DragLogger
from dragkit.models import Point


@pytest.fixture
def board():
    bottom = DraggableEntity((0, 0), 50, 50)
    top = DraggableEntity((25, 25), 50, 50)
    return Board([bottom, top])


def test_press_picks_topmost(board):
    bottom, top = board.entities
    assert board.press((30, 30)) is top
    assert top.is_moving is True
    assert bottom.is_moving is False


def test_press_reaches_lower_entity(board):
    bottom, top = board.entities
    assert board.press((5, 5)) is bottom
    assert top.is_moving is False


def test_press_on_empty_space(board):
    assert board.press((150, 150)) is None
    assert not any(e.is_moving for e in board.entities)


def test_drag_moves_only_active_entity(board):
    bottom, top = board.entities
    board.press((30, 30))
    board.move((60, 60))
    board.release((60, 60))
    assert top.position == Point(55, 55)
    assert bottom.position == Point(0, 0)
    assert board.active is None
    assert not any(e.is_moving for e in board.entities)


def test_handle_event_routes_left_button_only(board):
    _, top = board.entities
    assert board.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(30, 30))) is False
    assert top.is_moving is False

    assert board.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(30, 30)))
    assert board.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(40, 45), rel=(10, 15), buttons=(1, 0, 0)))
    assert board.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(40, 45)))
    assert top.position == Point(35, 40)
    assert top.is_moving is False


def test_handle_event_ignores_other_events(board):
    assert board.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)) is False


def test_draw_with_hitboxes(board, surface):
    board.draw(surface, show_hitboxes=True)
    assert surface.get_at((0, 0))[:3] == (255, 0, 0)


def test_board_logs_presses_and_releases(board, tmp_path):
    log_file = tmp_path / "log.md"
    board.logger = DragLogger(str(log_file))
    board.press((30, 30))
    board.release((30, 30))
    board.press((500, 500))

    rows = [line for line in log_file.read_text(encoding="utf-8").splitlines()
            if line.startswith("| ") and "Timestamp" not in line]
    assert len(rows) == 3
    assert "| GRAB |" in rows[0]
    assert "| DROP |" in rows[1]
    assert "| MISS |" in rows[2] and "No entity grabbed" in rows[2]
