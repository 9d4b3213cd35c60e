# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from bujo.model.bullet_type import BulletType, TaskStatus
from bujo.model.entry import Entry
from bujo.model.journal import Journal
from bujo.repository.journal import StorageError
from bujo.template.entry import get_entry_template

TODAY = pendulum.Date(2024, 6, 10)


class FakeStorage:
    def __init__(self, fail_with: Optional[str] = None) -> None:
        self.fail_with = fail_with
        self.saved: list[Journal] = []
        self.backups = 0

    def save_journal(self, journal: Journal) -> None:
        if self.fail_with is not None:
            raise StorageError(self.fail_with)
        self.saved.append(journal)

    def backup_journal(self) -> None:
        if self.fail_with is not None:
            raise StorageError(self.fail_with)
        self.backups += 1


def make_entry(
    content: str,
    bullet_type: BulletType = BulletType.TASK,
    date: pendulum.Date = TODAY,
    status: Optional[TaskStatus] = None,
    tags: Optional[list[str]] = None,
) -> Entry:
    entry = get_entry_template(content, bullet_type, date)
    if status is not None:
        entry["status"] = status
    if tags is not None:
        entry["tags"] = tags
    return entry
