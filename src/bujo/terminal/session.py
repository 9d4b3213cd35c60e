# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Callable, Optional

from prompt_toolkit import Application
from prompt_toolkit.application.current import get_app
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.layout import Layout

from bujo.configuration import ConfigurationError
from bujo.interaction.app import App
from bujo.logging_setup import get_logger
from bujo.repository.configuration import ConfigurationRepository
from bujo.repository.journal import StorageError
from bujo.terminal.keys import translate_key_press
from bujo.view.screen import render_screen

logger = get_logger(__name__)


class SessionResult(StrEnum):
    QUIT = "quit"  # journal is persisted
    INTERRUPTED = "interrupted"  # Ctrl+c, nothing is persisted


def handle_key_presses(app: App, event: KeyPressEvent) -> None:
    for key_press in event.key_sequence:
        key = translate_key_press(key_press)
        if key is not None:
            app.handle_key(key)


def apply_config_change(
    app: App,
    action: Callable[[], object],
    describe: Callable[[object], str],
) -> None:
    try:
        result = action()
    except ConfigurationError as e:
        logger.warning("Config update failed: %s", e)
        app.add_message(f"Config update failed: {e}")
        return
    app.add_message(describe(result))


def persist_on_quit(app: App) -> list[str]:
    """Back up the previous journal file, then save. Returns the failures."""
    failures: list[str] = []
    try:
        app.storage.backup_journal()
    except StorageError as e:
        logger.warning("Backup failed: %s", e)
        failures.append(f"Backup failed: {e}")
    try:
        app.storage.save_journal(app.journal)
    except StorageError as e:
        logger.warning("Save failed: %s", e)
        failures.append(f"Save failed: {e}")
    return failures


def create_application(
    app: App, config_repository: ConfigurationRepository
) -> Application[SessionResult]:
    def get_screen() -> ANSI:
        size = get_app().output.get_size()
        return ANSI(
            render_screen(app, config_repository.get_config(), size.columns, size.rows)
        )

    kb = KeyBindings()

    @kb.add("c-c")
    def _(event: KeyPressEvent) -> None:
        event.app.exit(result=SessionResult.INTERRUPTED)

    @kb.add("f1")
    def _(event: KeyPressEvent) -> None:
        apply_config_change(app, config_repository.cycle_theme, lambda name: f"Theme: {name}")

    @kb.add("f2")
    def _(event: KeyPressEvent) -> None:
        apply_config_change(
            app, config_repository.cycle_border_style, lambda style: f"Border: {style}"
        )

    @kb.add("f3")
    def _(event: KeyPressEvent) -> None:
        apply_config_change(
            app,
            config_repository.toggle_compact_mode,
            lambda compact: f"Compact mode: {'on' if compact else 'off'}",
        )

    @kb.add(Keys.Any)
    def _(event: KeyPressEvent) -> None:
        handle_key_presses(app, event)
        if app.should_quit:
            event.app.exit(result=SessionResult.QUIT)

    application: Application[SessionResult] = Application(
        layout=Layout(
            Window(
                content=FormattedTextControl(get_screen, show_cursor=False),
                wrap_lines=False,
            )
        ),
        key_bindings=kb,
        full_screen=True,
        mouse_support=False,
    )
    application.ttimeoutlen = 0.05
    return application


def run_session(
    app: App, config_repository: ConfigurationRepository
) -> tuple[Optional[SessionResult], list[str]]:
    """
    Run the interactive session until the user quits.

    Returns the way the session ended and any persistence failures,
    which are reported once the terminal has been restored.
    """
    result = create_application(app, config_repository).run()
    logger.info("Session ended: %s", result)

    failures: list[str] = []
    if result == SessionResult.QUIT:
        failures = persist_on_quit(app)
    return result, failures
