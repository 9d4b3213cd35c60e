# SPDX-License-Identifier: MIT

import shutil
from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from bujo import configuration, time
from bujo.logging_setup import get_logger
from bujo.model.bullet_type import BulletType, TaskStatus
from bujo.model.collection import Collection
from bujo.model.entity_id import EntityId
from bujo.model.entry import Entry
from bujo.model.journal import Journal
from bujo.model.journal_settings import JournalSettings
from bujo.template.journal import get_journal_settings_template

logger = get_logger(__name__)

BACKUP_SUFFIX = ".backup"


class StorageError(Exception):
    pass


class JournalRepository:
    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        # Resolved lazily so a data_path from the config file is honoured
        if self._file_path is not None:
            return self._file_path
        return configuration.DATA_JOURNAL_PATH

    @property
    def backup_path(self) -> Path:
        return self.file_path.with_name(self.file_path.name + BACKUP_SUFFIX)

    def load_journal(self) -> Journal:
        if not self.file_path.exists():
            logger.info("No journal at %s, starting empty", self.file_path)
            return Journal()

        try:
            raw_journal = load(self.file_path.read_text(encoding="utf-8"), Loader=Loader)
        except OSError as e:
            raise StorageError(f"Could not read journal file: {e}") from e
        except YAMLError as e:
            raise StorageError(f"Could not parse journal file: {e}") from e

        if raw_journal is None:
            return Journal()
        if not isinstance(raw_journal, dict):
            raise StorageError("Could not parse journal file: not a mapping")

        try:
            journal = self.__convert_journal_for_deserialization(raw_journal)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Could not parse journal file: {e!r}") from e

        logger.info(
            "Loaded %d entries and %d collections from %s",
            len(journal.entries),
            len(journal.collections),
            self.file_path,
        )
        return journal

    def save_journal(self, journal: Journal) -> None:
        serializable_journal = self.__convert_journal_for_serialization(journal)
        try:
            self.file_path.write_text(
                dump(
                    serializable_journal,
                    Dumper=Dumper,
                    allow_unicode=True,
                    sort_keys=False,
                ),
                encoding="utf-8",
            )
        except OSError as e:
            raise StorageError(f"Could not write journal file: {e}") from e
        logger.info("Saved %d entries to %s", len(journal.entries), self.file_path)

    def backup_journal(self) -> None:
        if not self.file_path.exists():
            return

        try:
            shutil.copyfile(self.file_path, self.backup_path)
        except OSError as e:
            raise StorageError(f"Could not create backup: {e}") from e
        logger.info("Backed up journal to %s", self.backup_path)

    def __convert_entry_for_serialization(self, entry: Entry) -> dict[str, Any]:
        return {
            "id": entry["id"],
            "content": entry["content"],
            "bullet_type": entry["bullet_type"].value,
            "status": entry["status"].value if entry["status"] is not None else None,
            "created": time.datetime_to_iso_str(entry["created"]),
            "date": time.date_to_str(entry["date"]),
            "tags": list(entry["tags"]),
            "priority": entry["priority"],
        }

    def __convert_entry_for_deserialization(self, entry: dict[str, Any]) -> Entry:
        bullet_type = BulletType(entry["bullet_type"])
        raw_status = entry.get("status")
        status = TaskStatus(raw_status) if raw_status is not None else None

        # Only tasks carry a status
        if bullet_type != BulletType.TASK and status is not None:
            logger.warning("Dropping status of non-task entry %s", entry["id"])
            status = None
        elif bullet_type == BulletType.TASK and status is None:
            logger.warning("Task entry %s has no status, marking incomplete", entry["id"])
            status = TaskStatus.INCOMPLETE

        raw_date = entry["date"]
        date = (
            time.date_from_str(raw_date)
            if isinstance(raw_date, str)
            else time.to_pendulum_date(raw_date)
        )
        raw_priority = entry.get("priority")

        return {
            "id": str(entry["id"]),
            "content": str(entry["content"]),
            "bullet_type": bullet_type,
            "status": status,
            "created": time.datetime_from_str(str(entry["created"])),
            "date": date,
            "tags": [str(tag) for tag in entry.get("tags") or []],
            "priority": int(raw_priority) if raw_priority is not None else None,
        }

    def __convert_collection_for_serialization(
        self, collection: Collection
    ) -> dict[str, Any]:
        return {
            "id": collection["id"],
            "name": collection["name"],
            "description": collection["description"],
            "entries": [
                self.__convert_entry_for_serialization(entry)
                for entry in collection["entries"]
            ],
            "created": time.datetime_to_iso_str(collection["created"]),
        }

    def __convert_collection_for_deserialization(
        self, collection: dict[str, Any]
    ) -> Collection:
        return {
            "id": str(collection["id"]),
            "name": str(collection["name"]),
            "description": collection.get("description"),
            "entries": [
                self.__convert_entry_for_deserialization(entry)
                for entry in collection.get("entries") or []
            ],
            "created": time.datetime_from_str(str(collection["created"])),
        }

    def __convert_journal_for_serialization(self, journal: Journal) -> dict[str, Any]:
        return {
            "entries": [
                self.__convert_entry_for_serialization(entry)
                for entry in journal.entries
            ],
            "collections": {
                collection_id: self.__convert_collection_for_serialization(collection)
                for collection_id, collection in journal.collections.items()
            },
            "settings": dict(journal.settings),
        }

    def __convert_journal_for_deserialization(self, journal: dict[str, Any]) -> Journal:
        entries = [
            self.__convert_entry_for_deserialization(entry)
            for entry in journal.get("entries") or []
        ]
        collections: dict[EntityId, Collection] = {
            str(collection_id): self.__convert_collection_for_deserialization(
                collection
            )
            for collection_id, collection in (journal.get("collections") or {}).items()
        }

        settings = get_journal_settings_template()
        settings.update(cast(JournalSettings, journal.get("settings") or {}))

        return Journal(entries=entries, collections=collections, settings=settings)


JOURNAL_REPO = JournalRepository()
