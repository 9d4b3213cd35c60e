# SPDX-License-Identifier: MIT

from bujo.configuration import (
    BorderStyle,
    ColorScheme,
    Configuration,
    JournalConfiguration,
    LayoutConfiguration,
    LoggingConfiguration,
    Theme,
)


def get_color_scheme_template() -> ColorScheme:
    return {
        "primary": "cyan",
        "secondary": "blue",
        "accent": "yellow",
        "background": "black",
        "text": "white",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "gray",
    }


def get_theme_template() -> Theme:
    return {
        "name": "default",
        "colors": get_color_scheme_template(),
    }


def get_layout_template() -> LayoutConfiguration:
    return {
        "border_style": BorderStyle.ROUNDED.value,
        "compact_mode": False,
        "show_line_numbers": False,
        "tab_width": 20,
    }


def get_journal_configuration_template() -> JournalConfiguration:
    return {
        "week_starts_monday": True,
        "show_completed_tasks": True,
        "auto_migrate_tasks": False,
        "date_format": "YYYY-MM-DD",
        "default_view": "daily",
    }


def get_logging_template() -> LoggingConfiguration:
    return {
        "level": "INFO",
        "filename": "bujo.log",
    }


def get_configuration_template() -> Configuration:
    return {
        "theme": get_theme_template(),
        "layout": get_layout_template(),
        "journal": get_journal_configuration_template(),
        "logging": get_logging_template(),
        "data_path": None,
    }


def get_predefined_themes() -> list[tuple[str, ColorScheme]]:
    return [
        ("default", get_color_scheme_template()),
        (
            "dark",
            {
                "primary": "lightcyan",
                "secondary": "lightblue",
                "accent": "lightyellow",
                "background": "black",
                "text": "white",
                "success": "lightgreen",
                "warning": "lightyellow",
                "error": "lightred",
                "muted": "darkgray",
            },
        ),
        (
            "light",
            {
                "primary": "blue",
                "secondary": "darkgray",
                "accent": "magenta",
                "background": "white",
                "text": "black",
                "success": "green",
                "warning": "yellow",
                "error": "red",
                "muted": "gray",
            },
        ),
        (
            "nord",
            {
                "primary": "lightcyan",
                "secondary": "lightblue",
                "accent": "yellow",
                "background": "black",
                "text": "white",
                "success": "green",
                "warning": "yellow",
                "error": "red",
                "muted": "gray",
            },
        ),
    ]
