# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Iterable, Optional

import pendulum

from bujo.logging_setup import get_logger
from bujo.model.bullet_type import BulletType, TaskStatus
from bujo.model.collection import Collection
from bujo.model.entity_id import EntityId, generate_entity_id
from bujo.model.entry import Entry
from bujo.model.journal_settings import JournalSettings
from bujo.template.journal import get_journal_settings_template

logger = get_logger(__name__)


def _is_incomplete_task(entry: Entry) -> bool:
    return (
        entry["bullet_type"] == BulletType.TASK
        and entry["status"] == TaskStatus.INCOMPLETE
    )


class Journal:
    """
    The entry store of a bullet journal.

    Entries are kept ordered by ascending date. The sort is stable, so
    entries sharing a date stay in insertion order. Query methods return
    the stored entries themselves; callers that mutate them mutate the
    journal.
    """

    def __init__(
        self,
        entries: Optional[Iterable[Entry]] = None,
        collections: Optional[dict[EntityId, Collection]] = None,
        settings: Optional[JournalSettings] = None,
    ) -> None:
        self.entries: list[Entry] = list(entries) if entries is not None else []
        self.collections: dict[EntityId, Collection] = (
            collections if collections is not None else {}
        )
        self.settings: JournalSettings = (
            settings if settings is not None else get_journal_settings_template()
        )
        self.__sort_entries()

    def __sort_entries(self) -> None:
        self.entries.sort(key=lambda entry: entry["date"])

    def entries_for_date(self, date: pendulum.Date) -> list[Entry]:
        return [entry for entry in self.entries if entry["date"] == date]

    def entries_for_month(self, year: int, month: int) -> list[Entry]:
        return [
            entry
            for entry in self.entries
            if entry["date"].year == year and entry["date"].month == month
        ]

    def entries_after(self, date: pendulum.Date) -> list[Entry]:
        return [entry for entry in self.entries if entry["date"] > date]

    def has_entries_on(self, date: pendulum.Date) -> bool:
        return any(entry["date"] == date for entry in self.entries)

    def add_entry(self, entry: Entry) -> None:
        self.entries.append(entry)
        self.__sort_entries()

    def remove_entry(self, id: EntityId) -> None:
        self.entries = [entry for entry in self.entries if entry["id"] != id]

    def get_entry_mut(self, id: EntityId) -> Optional[Entry]:
        for entry in self.entries:
            if entry["id"] == id:
                return entry
        return None

    def search_entries(self, query: str) -> list[Entry]:
        """
        Case-insensitive substring search over entry content and tags.

        An empty query matches every entry; callers decide whether that
        is wanted.
        """
        query_lower = query.lower()
        return [
            entry
            for entry in self.entries
            if query_lower in entry["content"].lower()
            or any(query_lower in tag.lower() for tag in entry["tags"])
        ]

    def incomplete_tasks(self) -> list[Entry]:
        return [entry for entry in self.entries if _is_incomplete_task(entry)]

    def migrate_incomplete_tasks(
        self, from_date: pendulum.Date, to_date: pendulum.Date
    ) -> int:
        """
        Move unfinished tasks of from_date forward to to_date.

        Each incomplete task dated from_date is marked migrated in place
        and an incomplete copy with a fresh id is added on to_date.
        Migrated tasks are no longer incomplete, so calling this again
        for the same from_date only picks up tasks added since.

        Returns:
            The number of tasks migrated
        """
        migrated: list[Entry] = []
        for entry in self.entries:
            if entry["date"] == from_date and _is_incomplete_task(entry):
                entry["status"] = TaskStatus.MIGRATED

                new_entry = deepcopy(entry)
                new_entry["id"] = generate_entity_id()
                new_entry["date"] = to_date
                new_entry["status"] = TaskStatus.INCOMPLETE
                migrated.append(new_entry)

        self.entries.extend(migrated)
        self.__sort_entries()

        logger.debug(
            "Migrated %d task(s) from %s to %s", len(migrated), from_date, to_date
        )
        return len(migrated)
