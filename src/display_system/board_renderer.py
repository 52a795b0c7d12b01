"""
Board renderer - draws the memory game with pygame
"""

from typing import Dict, List, Optional, Tuple

import pygame

from game_system.symbols import Symbol
from input_system.commands import Command
from input_system.key_map import keys_for_symbol
from .board_view import BoardView, Modal
from .interfaces import IBoardDisplay
from .palette import (ERROR_COLOR, MUTED_TEXT_COLOR, OVERLAY_COLOR, PANEL_COLOR,
                      PROGRESS_COLOR, TEXT_COLOR, tile_color)


class BoardLayout:
    """
    Screen geometry for a given window size.

    Pure rectangle math (pygame.Rect needs no display), so hit testing can be
    checked without opening a window.
    """

    MARGIN = 20
    HEADER_HEIGHT = 60
    STATUS_HEIGHT = 36
    PROGRESS_HEIGHT = 10
    BUTTON_HEIGHT = 48
    TILE_GAP = 14

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

        m = self.MARGIN
        self.header = pygame.Rect(m, m, width - 2 * m, self.HEADER_HEIGHT)
        self.status = pygame.Rect(m, self.header.bottom + 8, width - 2 * m, self.STATUS_HEIGHT)
        self.progress = pygame.Rect(m, self.status.bottom + 4, width - 2 * m, self.PROGRESS_HEIGHT)

        button_top = height - m - self.BUTTON_HEIGHT
        button_width = (width - 3 * m) // 2
        self.start_button = pygame.Rect(m, button_top, button_width, self.BUTTON_HEIGHT)
        self.reset_button = pygame.Rect(2 * m + button_width, button_top, button_width, self.BUTTON_HEIGHT)

        grid_top = self.progress.bottom + m
        grid_size = min(width - 2 * m, button_top - m - grid_top)
        grid_left = (width - grid_size) // 2
        tile_size = (grid_size - self.TILE_GAP) // 2

        self.tiles: Dict[Symbol, pygame.Rect] = {}
        for symbol in Symbol:
            row, col = divmod(symbol.value, 2)
            self.tiles[symbol] = pygame.Rect(
                grid_left + col * (tile_size + self.TILE_GAP),
                grid_top + row * (tile_size + self.TILE_GAP),
                tile_size,
                tile_size
            )

        modal_width = width - 4 * m
        modal_height = min(260, height // 2)
        self.modal = pygame.Rect((width - modal_width) // 2, (height - modal_height) // 2,
                                 modal_width, modal_height)
        self.modal_button = pygame.Rect(0, 0, modal_width // 2, self.BUTTON_HEIGHT)
        self.modal_button.midbottom = (self.modal.centerx, self.modal.bottom - m)

    def tile_at(self, pos: Tuple[int, int]) -> Optional[Symbol]:
        for symbol, rect in self.tiles.items():
            if rect.collidepoint(pos):
                return symbol
        return None

    def button_at(self, pos: Tuple[int, int], modal_open: bool) -> Optional[Command]:
        if modal_open:
            return Command.DISMISS_MODAL if self.modal_button.collidepoint(pos) else None
        if self.start_button.collidepoint(pos):
            return Command.START
        if self.reset_button.collidepoint(pos):
            return Command.RESET
        return None


class BoardRenderer(IBoardDisplay):
    """
    pygame window showing the four tiles, scores, status, progress bar,
    start/reset buttons and the modal dialog.

    While a modal is open only its button is clickable. Tiles report hits
    only while input is enabled, so clicks during playback go nowhere.
    """

    def __init__(self, display_config, logger):
        """
        Open the game window.

        Args:
            display_config: DisplayConfig with window size, caption and font size
            logger: ClassLogger instance for logging
        """
        self.config = display_config
        self.logger = logger

        pygame.display.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode((display_config.width, display_config.height))
        pygame.display.set_caption(display_config.caption)

        self.layout = BoardLayout(display_config.width, display_config.height)
        self.font = pygame.font.Font(None, display_config.font_size)
        self.large_font = pygame.font.Font(None, int(display_config.font_size * 1.6))
        self._view = BoardView()

        self.logger.info(f"BoardRenderer initialized: {display_config.width}x{display_config.height}")

    # IHitTester

    def tile_at(self, pos: Tuple[int, int]) -> Optional[Symbol]:
        if self._view.modal is not None or not self._view.input_enabled:
            return None
        return self.layout.tile_at(pos)

    def command_at(self, pos: Tuple[int, int]) -> Optional[Command]:
        command = self.layout.button_at(pos, modal_open=self._view.modal is not None)
        if command is Command.START and not self._view.start_enabled:
            return None
        return command

    # IBoardDisplay

    def render(self, view: BoardView) -> None:
        self._view = view
        self.screen.fill(self.config.background)

        self._draw_header(view)
        self._draw_text(view.status, self.layout.status, TEXT_COLOR)
        self._draw_progress(view.progress)
        self._draw_tiles(view)
        self._draw_button(self.layout.start_button, view.start_label, view.start_enabled)
        self._draw_button(self.layout.reset_button, "Reset", True)

        if view.modal is not None:
            self._draw_modal(view.modal)

        pygame.display.flip()

    def cleanup(self) -> None:
        pygame.display.quit()
        self.logger.info("BoardRenderer closed")

    # Drawing helpers

    def _draw_header(self, view: BoardView) -> None:
        header = self.layout.header
        third = header.width // 3
        columns = [("Score", view.score), ("Round", view.round), ("Best", view.best_score)]
        for i, (label, value) in enumerate(columns):
            cell = pygame.Rect(header.left + i * third, header.top, third, header.height)
            self._draw_text(label, cell.inflate(0, -cell.height // 2).move(0, -cell.height // 4), MUTED_TEXT_COLOR)
            self._draw_text(str(value), cell.inflate(0, -cell.height // 2).move(0, cell.height // 4),
                            TEXT_COLOR, self.large_font)

    def _draw_progress(self, progress: float) -> None:
        bar = self.layout.progress
        pygame.draw.rect(self.screen, PANEL_COLOR.rgb, bar, border_radius=4)
        filled = int(bar.width * max(0.0, min(1.0, progress)))
        if filled > 0:
            pygame.draw.rect(self.screen, PROGRESS_COLOR.rgb, pygame.Rect(bar.left, bar.top, filled, bar.height),
                             border_radius=4)

    def _draw_tiles(self, view: BoardView) -> None:
        for symbol, rect in self.layout.tiles.items():
            if view.error_flash:
                color = ERROR_COLOR
            else:
                color = tile_color(symbol, symbol in view.lit_tiles, view.input_enabled)
            pygame.draw.rect(self.screen, color.rgb, rect, border_radius=16)
            hint = pygame.Rect(rect.left, rect.bottom - 32, rect.width, 28)
            self._draw_text(keys_for_symbol(symbol), hint, TEXT_COLOR)

    def _draw_button(self, rect: pygame.Rect, label: str, enabled: bool) -> None:
        color = PANEL_COLOR if enabled else PANEL_COLOR.scaled(0.6)
        pygame.draw.rect(self.screen, color.rgb, rect, border_radius=10)
        self._draw_text(label, rect, TEXT_COLOR if enabled else MUTED_TEXT_COLOR)

    def _draw_modal(self, modal: Modal) -> None:
        overlay = pygame.Surface((self.layout.width, self.layout.height), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR.rgb + (200,))
        self.screen.blit(overlay, (0, 0))

        box = self.layout.modal
        pygame.draw.rect(self.screen, PANEL_COLOR.rgb, box, border_radius=14)

        title_rect = pygame.Rect(box.left, box.top + 16, box.width, 40)
        self._draw_text(modal.title, title_rect, TEXT_COLOR, self.large_font)

        y = title_rect.bottom + 8
        for line in self._wrap(modal.message, box.width - 40):
            line_rect = pygame.Rect(box.left, y, box.width, self.font.get_linesize())
            self._draw_text(line, line_rect, MUTED_TEXT_COLOR)
            y += self.font.get_linesize()

        self._draw_button(self.layout.modal_button, modal.button_text, True)

    def _wrap(self, text: str, max_width: int) -> List[str]:
        lines: List[str] = []
        current = ""
        for word in text.split():
            candidate = f"{current} {word}".strip()
            if current and self.font.size(candidate)[0] > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        if current:
            lines.append(current)
        return lines

    def _draw_text(self, text: str, rect: pygame.Rect, color, font: Optional[pygame.font.Font] = None) -> None:
        if not text:
            return
        surface = (font or self.font).render(text, True, color.rgb)
        self.screen.blit(surface, surface.get_rect(center=rect.center))
