# SPDX-License-Identifier: MIT

from rich.console import Group, RenderableType
from rich.text import Text

from bujo.configuration import Configuration
from bujo.interaction.app import App
from bujo.view.components import color, empty_panel, entry_list, panel


def render_search_view(app: App, config: Configuration) -> RenderableType:
    query_display = app.search_query or "Type / to search entries..."
    query_panel = panel(
        Text(query_display, style=color(config, "text")), config, title="Search Query"
    )

    if not app.search_query:
        results_panel = empty_panel(
            "Press / to start searching\n\nSearch will match entry content and tags",
            "Search Results",
            config,
        )
        return Group(query_panel, results_panel)

    results = app.journal.search_entries(app.search_query)
    if not results:
        results_panel = panel(
            Text(
                f"No results found for '{app.search_query}'",
                justify="center",
                style=color(config, "warning"),
            ),
            config,
            title="Search Results",
        )
    else:
        results_panel = entry_list(
            results,
            app.selected_entry,
            config,
            title=f"Search Results ({len(results)} found)",
            show_dates=True,
        )
    return Group(query_panel, results_panel)
