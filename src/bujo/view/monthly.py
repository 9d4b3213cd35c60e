# SPDX-License-Identifier: MIT

import pendulum
from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from bujo.configuration import Configuration
from bujo.interaction.app import App
from bujo.time import month_name
from bujo.view.components import color, empty_panel, entry_list, panel

WEEKDAY_LABELS = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]


def _calendar(app: App, config: Configuration) -> Text:
    """
    Month grid for the selected month.

    Days with entries are marked with "*" and today is highlighted.
    """
    year, month = app.selected_month
    first_day = pendulum.Date(year, month, 1)
    week_starts_monday = config["journal"]["week_starts_monday"]
    today = app.today()

    if week_starts_monday:
        labels = WEEKDAY_LABELS
        leading_blanks = first_day.weekday()  # Monday is 0
    else:
        labels = WEEKDAY_LABELS[-1:] + WEEKDAY_LABELS[:-1]
        leading_blanks = (first_day.weekday() + 1) % 7

    calendar = Text()
    calendar.append(
        f"{month_name(year, month)} {year}\n\n",
        style=f"bold {color(config, 'accent')}",
    )
    calendar.append(" ".join(labels) + "\n")

    calendar.append("   " * leading_blanks)
    column = leading_blanks
    for day in range(1, first_day.days_in_month + 1):
        date = pendulum.Date(year, month, day)
        marker = "*" if app.journal.has_entries_on(date) else " "
        style = "reverse" if date == today else ""
        calendar.append(f"{day:2}", style=style)
        calendar.append(marker)

        column += 1
        if column == 7:
            calendar.append("\n")
            column = 0

    if column != 0:
        calendar.append("\n")

    calendar.append("\n* = has entries\n", style=color(config, "muted"))
    calendar.append("highlighted = today", style=color(config, "muted"))
    return calendar


def render_monthly_view(app: App, config: Configuration) -> RenderableType:
    year, month = app.selected_month
    entries = app.journal.entries_for_month(year, month)

    if not entries:
        entries_panel = empty_panel("No entries this month", "Monthly Entries", config)
    else:
        entries_panel = entry_list(
            entries,
            app.selected_entry,
            config,
            title=f"Monthly Entries ({len(entries)})",
            show_dates=True,
        )

    layout = Table.grid(expand=True)
    layout.add_column(ratio=2)
    layout.add_column(ratio=3)
    layout.add_row(panel(_calendar(app, config), config, title="Calendar"), entries_panel)
    return layout
