# SPDX-License-Identifier: MIT

from rich import box
from rich.box import Box

from bujo.configuration import BorderStyle

# Theme files use terminal color names; these are their Rich equivalents.
_COLOR_NAMES = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "gray": "grey70",
    "grey": "grey70",
    "darkgray": "bright_black",
    "darkgrey": "bright_black",
    "lightred": "bright_red",
    "lightgreen": "bright_green",
    "lightyellow": "bright_yellow",
    "lightblue": "bright_blue",
    "lightmagenta": "bright_magenta",
    "lightcyan": "bright_cyan",
    "white": "white",
}

DEFAULT_COLOR = "white"

_BORDER_BOXES: dict[str, Box] = {
    BorderStyle.ROUNDED: box.ROUNDED,
    BorderStyle.PLAIN: box.SQUARE,
    BorderStyle.THICK: box.HEAVY,
    BorderStyle.DOUBLE: box.DOUBLE,
}


def get_color(color_name: str) -> str:
    """Return the Rich color for a theme color name.

    Unknown names fall back to white.
    """
    return _COLOR_NAMES.get(color_name.lower(), DEFAULT_COLOR)


def get_border_box(border_style: str) -> Box:
    return _BORDER_BOXES.get(border_style, box.ROUNDED)
