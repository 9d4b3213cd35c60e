# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bujo.color import get_border_box, get_color
from bujo.configuration import Configuration
from bujo.interaction.app import App
from bujo.interaction.mode import TAB_ORDER, AppMode, AppTab
from bujo.model.bullet_type import BulletType, TaskStatus
from bujo.model.entry import Entry
from bujo.service.entry import entry_symbol
from bujo.time import date_to_display_str

TAB_TITLES: dict[AppTab, str] = {
    AppTab.DAILY: "Daily",
    AppTab.MONTHLY: "Monthly",
    AppTab.FUTURE: "Future",
    AppTab.COLLECTIONS: "Collections",
    AppTab.SEARCH: "Search",
}

MODE_NAMES: dict[AppMode, str] = {
    AppMode.NORMAL: "NORMAL",
    AppMode.INSERT: "INSERT",
    AppMode.COMMAND: "COMMAND",
}


def color(config: Configuration, name: str) -> str:
    """Resolve a theme slot such as "accent" to a Rich color."""
    return get_color(config["theme"]["colors"][name])  # type: ignore[literal-required]


def panel(
    renderable: RenderableType,
    config: Configuration,
    title: Optional[str] = None,
    border_color: Optional[str] = None,
    style: str = "",
) -> Panel:
    padding = (0, 0) if config["layout"]["compact_mode"] else (0, 1)
    return Panel(
        renderable,
        title=title,
        box=get_border_box(config["layout"]["border_style"]),
        border_style=border_color or color(config, "primary"),
        padding=padding,
        style=style,
    )


def empty_panel(message: str, title: str, config: Configuration) -> Panel:
    return panel(
        Text(message, justify="center", style=color(config, "muted")),
        config,
        title=title,
    )


def render_tabs(app: App, config: Configuration) -> Panel:
    tabs = Text()
    for number, tab in enumerate(TAB_ORDER, start=1):
        if number > 1:
            tabs.append(" │ ", style=color(config, "muted"))
        title = f"{TAB_TITLES[tab]} ({number})"
        if tab == app.current_tab:
            tabs.append(
                title,
                style=f"bold {color(config, 'accent')} on {color(config, 'background')}",
            )
        else:
            tabs.append(title, style=color(config, "primary"))
    return panel(tabs, config, title="Bullet Journal")


def render_status_bar(app: App, config: Configuration) -> Panel:
    status = MODE_NAMES[app.mode]
    if app.input_mode is not None or app.current_tab == AppTab.SEARCH:
        status += f" | Input: {app.input_buffer}"
    if app.current_tab == AppTab.SEARCH and app.search_query:
        status += f" | Search: {app.search_query}"
    return panel(Text(status, style=color(config, "accent")), config)


def render_messages(app: App, config: Configuration) -> Panel:
    messages = Text("\n").join(Text(message) for message in app.messages)
    messages.stylize(color(config, "success"))
    return panel(messages, config, title="Messages")


def entry_style(entry: Entry, config: Configuration) -> str:
    if entry["bullet_type"] == BulletType.TASK:
        if entry["status"] == TaskStatus.COMPLETE:
            return color(config, "success")
        if entry["status"] == TaskStatus.MIGRATED:
            return color(config, "warning")
        if entry["status"] == TaskStatus.IRRELEVANT:
            return color(config, "muted")
        return color(config, "text")
    if entry["bullet_type"] == BulletType.EVENT:
        return color(config, "secondary")
    return color(config, "primary")


def entry_list(
    entries: list[Entry],
    selected: Optional[int],
    config: Configuration,
    title: str,
    show_dates: bool = False,
) -> Panel:
    """
    Render entries as one line each: optional line number, optional date,
    the bullet glyph and the content. The selected row is highlighted.
    """
    table = Table.grid(padding=(0, 1), expand=True)
    if config["layout"]["show_line_numbers"]:
        table.add_column(justify="right", no_wrap=True)
    if show_dates:
        table.add_column(no_wrap=True)
    table.add_column(no_wrap=True)
    table.add_column(ratio=1)

    date_format = config["journal"]["date_format"]
    for index, entry in enumerate(entries):
        style = entry_style(entry, config)
        if index == selected:
            style = f"{style} on {color(config, 'muted')}"

        row: list[RenderableType] = []
        if config["layout"]["show_line_numbers"]:
            row.append(str(index + 1))
        if show_dates:
            row.append(date_to_display_str(entry["date"], date_format))
        row.append(entry_symbol(entry))
        row.append(Text(entry["content"]))
        table.add_row(*row, style=style)

    return panel(table, config, title=title)


def render_help(config: Configuration) -> Panel:
    help_lines = [
        "Bullet Journal - Help",
        "",
        "Navigation:",
        "  Tab/Shift+Tab - Switch tabs",
        "  1-5 - Jump to specific tab",
        "  h/j/k/l or arrows - Navigate",
        "",
        "Entry Creation:",
        "  t - Add task",
        "  e - Add event",
        "  n - Add note",
        "",
        "Entry Management:",
        "  Space/Enter - Toggle task completion",
        "  Ctrl+d - Delete selected entry",
        "",
        "Other:",
        "  / - Search",
        "  Ctrl+s - Save",
        "  ? - Toggle this help",
        "  q - Quit",
        "",
        "Configuration:",
        "  F1 - Cycle theme",
        "  F2 - Cycle border style",
        "  F3 - Toggle compact mode",
        "",
        "Current Settings:",
        f"  Theme: {config['theme']['name']}",
        f"  Border: {config['layout']['border_style']}",
        f"  Compact mode: {config['layout']['compact_mode']}",
        "",
        "Press ? to close help",
    ]
    return panel(
        Text("\n".join(help_lines), style=color(config, "text")),
        config,
        title="Help",
        border_color=color(config, "accent"),
    )
