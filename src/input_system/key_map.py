"""
Fixed keyboard table: two keys per symbol plus a few command keys
"""

from typing import Dict, Optional

import pygame

from game_system.symbols import Symbol
from .commands import Command


SYMBOL_KEYS: Dict[int, Symbol] = {
    pygame.K_1: Symbol.BLUE,
    pygame.K_q: Symbol.BLUE,
    pygame.K_2: Symbol.RED,
    pygame.K_w: Symbol.RED,
    pygame.K_3: Symbol.YELLOW,
    pygame.K_a: Symbol.YELLOW,
    pygame.K_4: Symbol.GREEN,
    pygame.K_s: Symbol.GREEN,
}

COMMAND_KEYS: Dict[int, Command] = {
    pygame.K_RETURN: Command.START,
    pygame.K_SPACE: Command.START,
    pygame.K_r: Command.RESET,
    pygame.K_ESCAPE: Command.QUIT,
}


def symbol_for_key(key: int) -> Optional[Symbol]:
    """Symbol bound to a pygame key code, None for unbound keys"""
    return SYMBOL_KEYS.get(key)


def command_for_key(key: int) -> Optional[Command]:
    return COMMAND_KEYS.get(key)


def keys_for_symbol(symbol: Symbol) -> str:
    """Human readable key hint, e.g. '1/Q'"""
    names = [pygame.key.name(key).upper() for key, bound in SYMBOL_KEYS.items() if bound is symbol]
    return "/".join(names)
