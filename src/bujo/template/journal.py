# SPDX-License-Identifier: MIT

from bujo.model.journal_settings import JournalSettings


def get_journal_settings_template() -> JournalSettings:
    return {
        "week_starts_monday": True,
        "show_completed_tasks": True,
        "auto_migrate_tasks": False,
    }
