"""
Tests for the key table, InputState and the pygame input reader.
"""

import pygame
import pytest

from display_system import BoardLayout
from game_system import Symbol
from input_system import Command, InputState, PygameInputReader, command_for_key, symbol_for_key
from input_system.interfaces import IHitTester


class LayoutHitTester(IHitTester):
    """Hit tester over a BoardLayout without a window"""

    def __init__(self, modal_open: bool = False):
        self.layout = BoardLayout(480, 640)
        self.modal_open = modal_open

    def tile_at(self, pos):
        return None if self.modal_open else self.layout.tile_at(pos)

    def command_at(self, pos):
        return self.layout.button_at(pos, self.modal_open)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


class TestKeyMap:

    @pytest.mark.parametrize("keys,symbol", [
        ((pygame.K_1, pygame.K_q), Symbol.BLUE),
        ((pygame.K_2, pygame.K_w), Symbol.RED),
        ((pygame.K_3, pygame.K_a), Symbol.YELLOW),
        ((pygame.K_4, pygame.K_s), Symbol.GREEN),
    ])
    def test_two_keys_per_symbol(self, keys, symbol):
        for k in keys:
            assert symbol_for_key(k) is symbol

    @pytest.mark.parametrize("k", [pygame.K_5, pygame.K_e, pygame.K_z, pygame.K_TAB])
    def test_other_keys_ignored(self, k):
        assert symbol_for_key(k) is None

    def test_command_keys(self):
        assert command_for_key(pygame.K_RETURN) is Command.START
        assert command_for_key(pygame.K_r) is Command.RESET
        assert command_for_key(pygame.K_ESCAPE) is Command.QUIT
        assert command_for_key(pygame.K_q) is None


class TestInputState:

    def test_derived_fields(self):
        state = InputState([Symbol.RED], [Command.START])
        assert state.any_symbol_pressed
        assert state.start_requested
        assert not state.reset_requested
        assert not state.quit_requested
        assert not state.is_empty

    def test_empty(self):
        assert InputState.empty().is_empty

    def test_rejects_wrong_types(self):
        with pytest.raises(TypeError):
            InputState([0], [])
        with pytest.raises(TypeError):
            InputState([], ["start"])


class TestPygameInputReader:

    def read(self, events, logger, hit_tester=None):
        reader = PygameInputReader(hit_tester or LayoutHitTester(), logger, event_source=lambda: events)
        return reader.read_input()

    def test_keys_map_to_symbols_in_order(self, logger):
        state = self.read([key(pygame.K_4), key(pygame.K_q), key(pygame.K_x)], logger)
        assert state.pressed_symbols == [Symbol.GREEN, Symbol.BLUE]
        assert state.commands == []

    def test_click_on_tile(self, logger):
        hit_tester = LayoutHitTester()
        center = hit_tester.layout.tiles[Symbol.YELLOW].center
        state = self.read([click(center)], logger, hit_tester)
        assert state.pressed_symbols == [Symbol.YELLOW]

    def test_right_click_ignored(self, logger):
        hit_tester = LayoutHitTester()
        center = hit_tester.layout.tiles[Symbol.YELLOW].center
        assert self.read([click(center, button=3)], logger, hit_tester).is_empty

    def test_click_on_buttons(self, logger):
        hit_tester = LayoutHitTester()
        state = self.read([click(hit_tester.layout.start_button.center),
                           click(hit_tester.layout.reset_button.center)], logger, hit_tester)
        assert state.commands == [Command.START, Command.RESET]

    def test_modal_button(self, logger):
        hit_tester = LayoutHitTester(modal_open=True)
        state = self.read([click(hit_tester.layout.modal_button.center),
                           click(hit_tester.layout.tiles[Symbol.BLUE].center)], logger, hit_tester)
        assert state.commands == [Command.DISMISS_MODAL]
        assert state.pressed_symbols == []

    def test_window_close_quits(self, logger):
        assert self.read([pygame.event.Event(pygame.QUIT)], logger).quit_requested


class TestBoardLayout:

    def test_tiles_do_not_overlap(self):
        layout = BoardLayout(480, 640)
        rects = list(layout.tiles.values())
        for i, a in enumerate(rects):
            for b in rects[i + 1:]:
                assert not a.colliderect(b)

    def test_tiles_above_buttons(self):
        layout = BoardLayout(480, 640)
        assert all(rect.bottom < layout.start_button.top for rect in layout.tiles.values())
