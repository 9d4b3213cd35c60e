# SPDX-License-Identifier: MIT

from bujo.model.bullet_type import BulletType, TaskStatus
from bujo.model.entry import Entry

_TASK_SYMBOLS = {
    TaskStatus.INCOMPLETE: "•",
    TaskStatus.COMPLETE: "✓",
    TaskStatus.MIGRATED: ">",
    TaskStatus.SCHEDULED: "<",
    TaskStatus.IRRELEVANT: "✗",
}


def entry_symbol(entry: Entry) -> str:
    """
    Get the bullet glyph for an entry.

    Tasks show their status ("•" open, "✓" complete, ">" migrated,
    "<" scheduled, "✗" irrelevant), events "○" and notes "-".
    """
    if entry["bullet_type"] == BulletType.EVENT:
        return "○"
    if entry["bullet_type"] == BulletType.NOTE:
        return "-"
    if entry["status"] is None:
        return "•"
    return _TASK_SYMBOLS[entry["status"]]


def toggle_complete(entry: Entry) -> None:
    """Flip a task between incomplete and complete; anything else is left alone."""
    if entry["bullet_type"] != BulletType.TASK:
        return
    if entry["status"] == TaskStatus.INCOMPLETE:
        entry["status"] = TaskStatus.COMPLETE
    elif entry["status"] == TaskStatus.COMPLETE:
        entry["status"] = TaskStatus.INCOMPLETE


def bullet_type_name(bullet_type: BulletType) -> str:
    return bullet_type.value.capitalize()
