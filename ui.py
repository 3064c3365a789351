"""HUD for the drag demo"""

import pygame

from dragkit.board import Board
from dragkit.constants import HUD_PADDING, TEXT_COLOR, FONT_NAME, FONT_SIZE_SMALL


class HUD:
    """Heads-Up Display: cursor position and the entity being dragged."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def draw(self, surf: pygame.Surface, board: Board, cursor: tuple[int, int],
             show_hitboxes: bool = False) -> None:
        """Render the status lines in the top-left corner and the key hints at the bottom."""
        x = HUD_PADDING
        y = HUD_PADDING

        cursor_text = self.font.render(f"Cursor: ({cursor[0]}, {cursor[1]})", True, TEXT_COLOR)
        surf.blit(cursor_text, (x, y))
        y += cursor_text.get_height() + 4

        if board.active is not None:
            pos = board.active.position
            status = f"Dragging {getattr(board.active, 'label', '') or 'entity'} at ({pos.x:.0f}, {pos.y:.0f})"
        else:
            status = "Idle"
        status_text = self.small_font.render(status, True, TEXT_COLOR)
        surf.blit(status_text, (x, y))

        hint_text = "[LMB] drag | [B] hitbox " + ("on" if show_hitboxes else "off") + " | [ESC] quit"
        hint = self.small_font.render(hint_text, True, (200, 200, 200))
        hint_rect = hint.get_rect(midbottom=(surf.get_width() // 2, surf.get_height() - HUD_PADDING))
        surf.blit(hint, hint_rect)
