# SPDX-License-Identifier: MIT

import io

from rich.console import Console, RenderableType
from rich.layout import Layout

from bujo.configuration import Configuration
from bujo.interaction.app import App
from bujo.interaction.mode import AppTab
from bujo.view.collections import render_collections_view
from bujo.view.components import (
    render_help,
    render_messages,
    render_status_bar,
    render_tabs,
)
from bujo.view.daily import render_daily_view
from bujo.view.future import render_future_view
from bujo.view.monthly import render_monthly_view
from bujo.view.search import render_search_view

MESSAGES_HEIGHT = 7


def render_tab_view(app: App, config: Configuration) -> RenderableType:
    match app.current_tab:
        case AppTab.DAILY:
            return render_daily_view(app, config)
        case AppTab.MONTHLY:
            return render_monthly_view(app, config)
        case AppTab.FUTURE:
            return render_future_view(app, config)
        case AppTab.COLLECTIONS:
            return render_collections_view(app, config)
        case AppTab.SEARCH:
            return render_search_view(app, config)
    raise ValueError(f"unknown tab: {app.current_tab}")


def build_screen(app: App, config: Configuration) -> RenderableType:
    if app.show_help:
        return render_help(config)

    sections = [Layout(render_tabs(app, config), name="tabs", size=3)]
    sections.append(Layout(render_tab_view(app, config), name="body"))
    if app.messages:
        sections.append(
            Layout(render_messages(app, config), name="messages", size=MESSAGES_HEIGHT)
        )
    sections.append(Layout(render_status_bar(app, config), name="status", size=3))

    layout = Layout()
    layout.split_column(*sections)
    return layout


def render_screen(app: App, config: Configuration, width: int, height: int) -> str:
    """Render the whole screen to ANSI text of the given size."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        height=height,
        force_terminal=True,
        color_system="truecolor",
        legacy_windows=False,
    )
    console.print(build_screen(app, config), end="")
    return buffer.getvalue().rstrip("\n")
