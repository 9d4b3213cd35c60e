# SPDX-License-Identifier: MIT

from rich.console import RenderableType
from rich.text import Text

from bujo.configuration import Configuration
from bujo.interaction.app import App
from bujo.view.components import color, empty_panel, panel


def render_collections_view(app: App, config: Configuration) -> RenderableType:
    collections = app.journal.collections
    if not collections:
        return empty_panel(
            "No collections yet.\n\nCollections feature coming soon!",
            "Collections",
            config,
        )

    lines = Text("\n").join(
        Text(f"{collection['name']} ({len(collection['entries'])} entries)")
        for collection in collections.values()
    )
    lines.stylize(color(config, "text"))
    return panel(lines, config, title=f"Collections ({len(collections)})")
