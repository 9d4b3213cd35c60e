# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class KeyCode(StrEnum):
    CHAR = "char"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    TAB = "tab"
    BACK_TAB = "back_tab"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press as seen by the journal app."""

    code: KeyCode
    char: Optional[str] = None  # set for KeyCode.CHAR only
    ctrl: bool = False


def char_key(char: str, ctrl: bool = False) -> KeyEvent:
    return KeyEvent(KeyCode.CHAR, char=char, ctrl=ctrl)


def special_key(code: KeyCode) -> KeyEvent:
    return KeyEvent(code)
