# SPDX-License-Identifier: MIT

from rich.console import RenderableType

from bujo.configuration import Configuration
from bujo.interaction.app import App
from bujo.view.components import empty_panel, entry_list


def render_future_view(app: App, config: Configuration) -> RenderableType:
    future_entries = app.journal.entries_after(app.today())
    if not future_entries:
        return empty_panel(
            "No future entries.\n\nPress 't', 'e', or 'n' to add entries for tomorrow",
            "Future Log",
            config,
        )
    return entry_list(
        future_entries,
        app.selected_entry,
        config,
        title=f"Future Log ({len(future_entries)} entries)",
        show_dates=True,
    )
