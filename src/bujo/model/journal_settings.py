# SPDX-License-Identifier: MIT

from typing import TypedDict


class JournalSettings(TypedDict):
    week_starts_monday: bool
    show_completed_tasks: bool
    auto_migrate_tasks: bool
