# SPDX-License-Identifier: MIT

from string import ascii_lowercase
from typing import Optional

from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys

from bujo.interaction.key import KeyCode, KeyEvent, char_key, special_key

_SPECIAL_KEYS: dict[str, KeyCode] = {
    Keys.Enter: KeyCode.ENTER,
    Keys.Escape: KeyCode.ESCAPE,
    Keys.Backspace: KeyCode.BACKSPACE,
    Keys.Tab: KeyCode.TAB,
    Keys.BackTab: KeyCode.BACK_TAB,
    Keys.Up: KeyCode.UP,
    Keys.Down: KeyCode.DOWN,
    Keys.Left: KeyCode.LEFT,
    Keys.Right: KeyCode.RIGHT,
}

# Ctrl+letter; Ctrl+h/i/m arrive as backspace/tab/enter and are matched above
_CONTROL_KEYS: dict[str, str] = {
    Keys(f"c-{letter}"): letter for letter in ascii_lowercase
}


def translate_key_press(key_press: KeyPress) -> Optional[KeyEvent]:
    """Map a prompt_toolkit key press to a journal key event, or None if unused."""
    key = key_press.key
    if key in _SPECIAL_KEYS:
        return special_key(_SPECIAL_KEYS[key])
    if key in _CONTROL_KEYS:
        return char_key(_CONTROL_KEYS[key], ctrl=True)
    if not isinstance(key, Keys) and len(key) == 1 and key.isprintable():
        return char_key(key)
    return None
