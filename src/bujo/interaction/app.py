# SPDX-License-Identifier: MIT

from typing import Callable, Optional

import pendulum

from bujo.interaction.key import KeyCode, KeyEvent
from bujo.interaction.message import MessageQueue
from bujo.interaction.mode import (
    TAB_ORDER,
    AppMode,
    AppTab,
    InputMode,
    next_tab,
    previous_tab,
)
from bujo.logging_setup import get_logger
from bujo.model.bullet_type import TaskStatus
from bujo.model.entry import Entry
from bujo.model.journal import Journal
from bujo.repository.journal import JournalRepository, StorageError
from bujo.service.entry import bullet_type_name, toggle_complete
from bujo.template.entry import get_entry_template
from bujo.time import next_day, next_month, previous_day, previous_month, today_local

logger = get_logger(__name__)

TAB_SHORTCUTS: dict[str, AppTab] = {
    str(number): tab for number, tab in enumerate(TAB_ORDER, start=1)
}

INPUT_MODE_SHORTCUTS: dict[str, InputMode] = {
    "t": InputMode.TASK,
    "e": InputMode.EVENT,
    "n": InputMode.NOTE,
}


class App:
    """
    Modal interaction state of the journal.

    Key events arrive one at a time through handle_key and are dispatched
    on the current mode. The app is the only code that mutates the
    journal during a session; persisting it is left to the caller except
    for the explicit save key.
    """

    def __init__(
        self,
        journal: Journal,
        storage: JournalRepository,
        today: Callable[[], pendulum.Date] = today_local,
        start_tab: AppTab = AppTab.DAILY,
    ) -> None:
        self.journal = journal
        self.storage = storage
        self._today = today

        current_date = today()
        self.current_tab = start_tab
        self.mode = AppMode.NORMAL
        self.current_date: pendulum.Date = current_date
        self.selected_month: tuple[int, int] = (current_date.year, current_date.month)
        self.should_quit = False
        self.messages = MessageQueue()
        self.input_buffer = ""
        self.input_mode: Optional[InputMode] = None
        self.show_help = False
        self.search_query = ""
        self.selected_entry: Optional[int] = None

        self.__mode_handlers: dict[AppMode, Callable[[KeyEvent], None]] = {
            AppMode.NORMAL: self.__handle_normal_key,
            AppMode.INSERT: self.__handle_insert_key,
            AppMode.COMMAND: self.__handle_command_key,
        }

    def today(self) -> pendulum.Date:
        return self._today()

    def add_message(self, message: str) -> None:
        self.messages.push(message)

    def save(self) -> bool:
        try:
            self.storage.save_journal(self.journal)
        except StorageError as e:
            logger.warning("Save failed: %s", e)
            self.add_message(f"Save failed: {e}")
            return False
        self.add_message("Journal saved")
        return True

    def handle_key(self, key: KeyEvent) -> None:
        self.__mode_handlers[self.mode](key)

    # -------------------- mode handlers --------------------

    def __handle_normal_key(self, key: KeyEvent) -> None:
        match key.code:
            case KeyCode.CHAR:
                self.__handle_normal_char(key)
            case KeyCode.TAB:
                self.current_tab = next_tab(self.current_tab)
            case KeyCode.BACK_TAB:
                self.current_tab = previous_tab(self.current_tab)
            case KeyCode.DOWN:
                self.move_selection_down()
            case KeyCode.UP:
                self.move_selection_up()
            case KeyCode.LEFT:
                self.handle_left()
            case KeyCode.RIGHT:
                self.handle_right()
            case KeyCode.ENTER:
                self.toggle_selected_entry()

    def __handle_normal_char(self, key: KeyEvent) -> None:
        char = key.char
        if key.ctrl:
            if char == "d":
                self.delete_selected_entry()
            elif char == "s":
                self.save()
            return

        if char == "q":
            self.should_quit = True
        elif char == "?":
            self.show_help = not self.show_help
        elif char is not None and char in TAB_SHORTCUTS:
            self.current_tab = TAB_SHORTCUTS[char]
        elif char is not None and char in INPUT_MODE_SHORTCUTS:
            self.begin_entry(INPUT_MODE_SHORTCUTS[char])
        elif char == "j":
            self.move_selection_down()
        elif char == "k":
            self.move_selection_up()
        elif char == "h":
            self.handle_left()
        elif char == "l":
            self.handle_right()
        elif char == " ":
            self.toggle_selected_entry()
        elif char == "/":
            self.begin_search()

    def __handle_insert_key(self, key: KeyEvent) -> None:
        match key.code:
            case KeyCode.ESCAPE:
                self.input_buffer = ""
                self.input_mode = None
                self.mode = AppMode.NORMAL
            case KeyCode.ENTER:
                self.__commit_input()
            case KeyCode.BACKSPACE:
                if self.current_tab == AppTab.SEARCH:
                    self.search_query = self.search_query[:-1]
                else:
                    self.input_buffer = self.input_buffer[:-1]
            case KeyCode.CHAR if key.char is not None and not key.ctrl:
                if self.current_tab == AppTab.SEARCH:
                    self.search_query += key.char
                else:
                    self.input_buffer += key.char

    def __handle_command_key(self, key: KeyEvent) -> None:
        # Command mode takes no commands yet
        pass

    def __commit_input(self) -> None:
        if self.current_tab == AppTab.SEARCH:
            # Typing on this tab fills the query, not the buffer, so the
            # committed query is normally empty
            self.search_query = self.input_buffer
            self.input_buffer = ""
            self.input_mode = None
            self.mode = AppMode.NORMAL
        elif self.input_mode is not None:
            self.__create_entry(self.input_mode)
            self.input_buffer = ""
            self.input_mode = None
            self.mode = AppMode.NORMAL

    def __create_entry(self, input_mode: InputMode) -> None:
        if not self.input_buffer.strip():
            return

        if self.current_tab == AppTab.FUTURE:
            date = next_day(self.today())
        else:
            date = self.current_date

        bullet_type = input_mode.bullet_type
        entry = get_entry_template(self.input_buffer, bullet_type, date)
        self.journal.add_entry(entry)

        logger.info("Added %s %s on %s", bullet_type.value, entry["id"], date)
        self.add_message(f"{bullet_type_name(bullet_type)} added")

    # -------------------- normal mode actions --------------------

    def begin_entry(self, input_mode: InputMode) -> None:
        self.mode = AppMode.INSERT
        self.input_mode = input_mode
        self.input_buffer = ""

    def begin_search(self) -> None:
        self.current_tab = AppTab.SEARCH
        self.mode = AppMode.INSERT
        self.search_query = ""

    def move_selection_down(self) -> None:
        entries = self.current_entries()
        if not entries:
            self.selected_entry = None
        elif self.selected_entry is None:
            self.selected_entry = 0
        else:
            self.selected_entry = min(self.selected_entry + 1, len(entries) - 1)

    def move_selection_up(self) -> None:
        if self.selected_entry is None:
            return
        entries = self.current_entries()
        if not entries:
            self.selected_entry = None
        else:
            self.selected_entry = max(
                min(self.selected_entry - 1, len(entries) - 1), 0
            )

    def handle_left(self) -> None:
        match self.current_tab:
            case AppTab.DAILY:
                self.current_date = previous_day(self.current_date)
                self.selected_entry = None
            case AppTab.MONTHLY:
                self.selected_month = previous_month(*self.selected_month)
                self.selected_entry = None

    def handle_right(self) -> None:
        match self.current_tab:
            case AppTab.DAILY:
                self.current_date = next_day(self.current_date)
                self.selected_entry = None
            case AppTab.MONTHLY:
                self.selected_month = next_month(*self.selected_month)
                self.selected_entry = None

    def toggle_selected_entry(self) -> None:
        selected = self.selected()
        if selected is None:
            return
        entry = self.journal.get_entry_mut(selected["id"])
        if entry is None:
            return

        toggle_complete(entry)
        if entry["status"] == TaskStatus.COMPLETE:
            self.add_message("Task completed")
        elif entry["status"] == TaskStatus.INCOMPLETE:
            self.add_message("Task marked incomplete")
        else:
            self.add_message("Entry unchanged")

    def delete_selected_entry(self) -> None:
        selected = self.selected()
        if selected is None:
            return
        self.journal.remove_entry(selected["id"])
        logger.info("Deleted entry %s", selected["id"])
        self.add_message("Entry deleted")
        self.selected_entry = None

    # -------------------- derived views --------------------

    def current_entries(self) -> list[Entry]:
        """The entries the active tab lists, in display order."""
        match self.current_tab:
            case AppTab.DAILY:
                return self.journal.entries_for_date(self.current_date)
            case AppTab.MONTHLY:
                year, month = self.selected_month
                return self.journal.entries_for_month(year, month)
            case AppTab.FUTURE:
                return self.journal.entries_after(self.today())
            case AppTab.SEARCH:
                if not self.search_query:
                    return []
                return self.journal.search_entries(self.search_query)
            case AppTab.COLLECTIONS:
                return []
        return []

    def selected(self) -> Optional[Entry]:
        if self.selected_entry is None:
            return None
        entries = self.current_entries()
        if 0 <= self.selected_entry < len(entries):
            return entries[self.selected_entry]
        return None
