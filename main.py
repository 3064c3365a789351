"""Drag demo entry point"""

from __future__ import annotations

import pygame

from dragkit.constants import *
from dragkit.blocks import Block, PinnedBlock
from dragkit.board import Board
from dragkit.logger import DragLogger
from ui import HUD


class DragDemo:
    """
    Demo controller: initializes pygame, builds a board of blocks, runs the
    loop, routes pointer events, and draws the frame.
    """

    def __init__(self) -> None:
        """Initialize subsystems and lay out the initial blocks."""
        pygame.init()
        pygame.display.set_caption("Drag Demo")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.logger = DragLogger(LOG_FILE)
        self.board = Board(self.make_blocks(), logger=self.logger)
        self.hud = HUD(self.font_small)
        self.show_hitboxes = False

    def make_blocks(self) -> list[Block]:
        """Lay out a row of blocks, the last one pinned."""
        blocks: list[Block] = []
        size = 110
        gap = 40
        left = (WIDTH - len(BLOCK_PALETTE) * size - (len(BLOCK_PALETTE) - 1) * gap) // 2
        top = (HEIGHT - size) // 2
        for i, color in enumerate(BLOCK_PALETTE[:-1]):
            blocks.append(Block((left + i * (size + gap), top), size, size, color,
                                label=f"Block {i + 1}", font=self.font_small))
        i = len(BLOCK_PALETTE) - 1
        blocks.append(PinnedBlock((left + i * (size + gap), top), size, size, BLOCK_PALETTE[-1],
                                  label="Pinned", font=self.font_small))
        return blocks

    def run(self) -> None:
        """Main loop: process events, render; exits on quit request."""
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_b:
                        self.show_hitboxes = not self.show_hitboxes
                else:
                    self.board.handle_event(event)

            self.draw()

            # Cap frame rate
            self.clock.tick(FPS)

        pygame.quit()

    def draw(self) -> None:
        """Compose the frame: bg → blocks → HUD."""
        self.screen.fill(BG_COLOR)
        self.board.draw(self.screen, self.show_hitboxes)
        self.hud.draw(self.screen, self.board, pygame.mouse.get_pos(), self.show_hitboxes)
        pygame.display.flip()


if __name__ == "__main__":
    DragDemo().run()
