# SPDX-License-Identifier: MIT

from rich.console import Group, RenderableType
from rich.text import Text

from bujo.configuration import Configuration
from bujo.interaction.app import App
from bujo.time import day_of_year_info
from bujo.view.components import color, empty_panel, entry_list, panel


def render_daily_view(app: App, config: Configuration) -> RenderableType:
    date_str = (
        f"{app.current_date.format('dddd, MMMM D, YYYY')} - "
        f"{day_of_year_info(app.current_date)}"
    )
    header = panel(
        Text(date_str, justify="center", style=f"bold {color(config, 'accent')}"),
        config,
        title="Daily Log",
    )

    entries = app.journal.entries_for_date(app.current_date)
    if not entries:
        body = empty_panel(
            "No entries for this day.\n\nPress 't' for task, 'e' for event, 'n' for note",
            "Entries",
            config,
        )
    else:
        body = entry_list(
            entries, app.selected_entry, config, title=f"Entries ({len(entries)})"
        )

    return Group(header, body)
