# SPDX-License-Identifier: MIT

from pathlib import Path

from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import DummyInput, create_pipe_input
from prompt_toolkit.output import DummyOutput

from bujo.configuration import ConfigurationError
from bujo.interaction.app import App
from bujo.model.bullet_type import BulletType
from bujo.model.journal import Journal
from bujo.repository.configuration import ConfigurationRepository
from bujo.repository.journal import JournalRepository
from bujo.terminal.session import (
    SessionResult,
    apply_config_change,
    create_application,
    persist_on_quit,
    run_session,
)
from helpers import TODAY, FakeStorage, make_entry


def test_persist_on_quit_backs_up_then_saves(tmp_path: Path) -> None:
    repository = JournalRepository(tmp_path / "journal.yaml")
    repository.save_journal(Journal(entries=[make_entry("old")]))
    previous = repository.file_path.read_text()

    app = App(Journal(entries=[make_entry("new")]), repository, today=lambda: TODAY)
    failures = persist_on_quit(app)

    assert failures == []
    assert repository.backup_path.read_text() == previous
    assert [entry["content"] for entry in repository.load_journal().entries] == [
        "new"
    ]


def test_persist_on_quit_reports_failures() -> None:
    app = App(Journal(), FakeStorage(fail_with="read-only"), today=lambda: TODAY)  # type: ignore[arg-type]

    assert persist_on_quit(app) == [
        "Backup failed: read-only",
        "Save failed: read-only",
    ]


def test_config_change_is_reported(app: App, tmp_path: Path) -> None:
    repository = ConfigurationRepository(tmp_path / "config.yaml")

    apply_config_change(app, repository.cycle_theme, lambda name: f"Theme: {name}")

    assert app.messages.to_list() == ["Theme: dark"]


def test_failed_config_change_is_reported(app: App) -> None:
    def fail() -> None:
        raise ConfigurationError("read-only")

    apply_config_change(app, fail, lambda _: "unused")

    assert app.messages.to_list() == ["Config update failed: read-only"]


def test_create_application_binds_config_keys(app: App, tmp_path: Path) -> None:
    repository = ConfigurationRepository(tmp_path / "config.yaml")

    with create_app_session(input=DummyInput(), output=DummyOutput()):
        application = create_application(app, repository)

    bound = [
        binding.keys for binding in application.key_bindings.bindings  # type: ignore[union-attr]
    ]
    for key in ("c-c", "f1", "f2", "f3"):
        assert (key,) in bound
    assert application.full_screen


def test_session_adds_entry_and_saves_on_quit(tmp_path: Path) -> None:
    journal_repository = JournalRepository(tmp_path / "journal.yaml")
    config_repository = ConfigurationRepository(tmp_path / "config.yaml")
    app = App(Journal(), journal_repository, today=lambda: TODAY)

    with create_pipe_input() as pipe_input:
        pipe_input.send_text("nmilk\rq")
        with create_app_session(input=pipe_input, output=DummyOutput()):
            result, failures = run_session(app, config_repository)

    assert result == SessionResult.QUIT
    assert failures == []
    [entry] = journal_repository.load_journal().entries
    assert entry["content"] == "milk"
    assert entry["bullet_type"] == BulletType.NOTE
