"""
Player commands other than symbol presses
"""

import enum


class Command(enum.Enum):
    START = "start"
    RESET = "reset"
    DISMISS_MODAL = "dismiss_modal"
    QUIT = "quit"
