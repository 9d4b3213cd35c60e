# SPDX-License-Identifier: MIT

import pendulum

from bujo.interaction.app import App
from bujo.interaction.key import KeyCode, char_key, special_key
from bujo.interaction.message import MessageQueue
from bujo.interaction.mode import AppMode, AppTab, InputMode, tab_from_name
from bujo.model.bullet_type import BulletType, TaskStatus
from bujo.model.journal import Journal
from helpers import TODAY, FakeStorage, make_entry


def press(app: App, *keys: str) -> None:
    for key in keys:
        app.handle_key(char_key(key))


def type_text(app: App, text: str) -> None:
    press(app, *text)


def enter(app: App) -> None:
    app.handle_key(special_key(KeyCode.ENTER))


def test_initial_state(app: App) -> None:
    assert app.current_tab == AppTab.DAILY
    assert app.mode == AppMode.NORMAL
    assert app.current_date == TODAY
    assert app.selected_month == (2024, 6)
    assert not app.should_quit
    assert not app.messages
    assert app.input_buffer == ""
    assert app.input_mode is None
    assert app.selected_entry is None


def test_add_task_on_daily_tab(app: App) -> None:
    press(app, "t")
    assert app.mode == AppMode.INSERT
    assert app.input_mode == InputMode.TASK

    type_text(app, "quit smoking")
    enter(app)

    assert app.mode == AppMode.NORMAL
    assert app.input_mode is None
    assert app.input_buffer == ""
    [entry] = app.journal.entries
    assert entry["content"] == "quit smoking"
    assert entry["bullet_type"] == BulletType.TASK
    assert entry["status"] == TaskStatus.INCOMPLETE
    assert entry["date"] == TODAY
    assert app.messages.to_list() == ["Task added"]


def test_typing_q_in_insert_mode_does_not_quit(app: App) -> None:
    press(app, "e", "q")

    assert not app.should_quit
    assert app.input_buffer == "q"


def test_entry_is_added_on_the_viewed_day(app: App) -> None:
    press(app, "l", "l", "e")
    type_text(app, "party")
    enter(app)

    [entry] = app.journal.entries
    assert entry["date"] == TODAY.add(days=2)
    assert entry["status"] is None
    assert app.messages.to_list() == ["Event added"]


def test_note_on_future_tab_is_dated_tomorrow(app: App) -> None:
    press(app, "3", "n")
    type_text(app, "idea")
    enter(app)

    [entry] = app.journal.entries
    assert entry["date"] == pendulum.Date(2024, 6, 11)
    assert entry["bullet_type"] == BulletType.NOTE
    assert app.messages.to_list() == ["Note added"]
    assert app.current_entries() == [entry]


def test_blank_input_creates_nothing(app: App) -> None:
    press(app, "t")
    type_text(app, "   ")
    enter(app)

    assert app.journal.entries == []
    assert app.mode == AppMode.NORMAL
    assert not app.messages


def test_backspace_edits_input_buffer(app: App) -> None:
    press(app, "t")
    type_text(app, "abc")
    app.handle_key(special_key(KeyCode.BACKSPACE))

    assert app.input_buffer == "ab"


def test_backspace_on_empty_buffer_is_a_no_op(app: App) -> None:
    press(app, "t")
    app.handle_key(special_key(KeyCode.BACKSPACE))

    assert app.input_buffer == ""
    assert app.mode == AppMode.INSERT


def test_ctrl_chars_are_not_typed(app: App) -> None:
    press(app, "t")
    app.handle_key(char_key("d", ctrl=True))

    assert app.input_buffer == ""


def test_escape_aborts_composing(app: App) -> None:
    press(app, "t")
    type_text(app, "draft")
    app.handle_key(special_key(KeyCode.ESCAPE))

    assert app.mode == AppMode.NORMAL
    assert app.input_mode is None
    assert app.input_buffer == ""
    assert app.journal.entries == []


def test_toggle_twice(app: App) -> None:
    app.journal.add_entry(make_entry("task"))

    press(app, "j", " ")
    assert app.journal.entries[0]["status"] == TaskStatus.COMPLETE

    app.handle_key(special_key(KeyCode.ENTER))
    assert app.journal.entries[0]["status"] == TaskStatus.INCOMPLETE

    assert app.messages.to_list() == ["Task completed", "Task marked incomplete"]


def test_toggle_note_leaves_it_unchanged(app: App) -> None:
    app.journal.add_entry(make_entry("note", bullet_type=BulletType.NOTE))

    press(app, "j", " ")

    assert app.journal.entries[0]["status"] is None
    assert app.messages.to_list() == ["Entry unchanged"]


def test_toggle_without_selection_does_nothing(app: App) -> None:
    app.journal.add_entry(make_entry("task"))

    press(app, " ")

    assert app.journal.entries[0]["status"] == TaskStatus.INCOMPLETE
    assert not app.messages


def test_delete_selected_entry(app: App) -> None:
    keep = make_entry("keep")
    drop = make_entry("drop")
    app.journal.add_entry(keep)
    app.journal.add_entry(drop)

    press(app, "j", "j")
    app.handle_key(char_key("d", ctrl=True))

    assert app.journal.entries == [keep]
    assert app.selected_entry is None
    assert app.messages.to_list() == ["Entry deleted"]


def test_selection_is_clamped(app: App) -> None:
    app.journal.add_entry(make_entry("a"))
    app.journal.add_entry(make_entry("b"))

    press(app, "j", "j", "j")
    assert app.selected_entry == 1

    app.handle_key(special_key(KeyCode.UP))
    press(app, "k", "k")
    assert app.selected_entry == 0


def test_selection_up_without_selection_stays_empty(app: App) -> None:
    app.journal.add_entry(make_entry("a"))

    press(app, "k")

    assert app.selected_entry is None


def test_selection_in_empty_view_is_cleared(app: App) -> None:
    app.selected_entry = 3

    press(app, "j")

    assert app.selected_entry is None


def test_selection_only_sees_the_active_view(app: App) -> None:
    app.journal.add_entry(make_entry("today"))
    app.journal.add_entry(make_entry("tomorrow", date=TODAY.add(days=1)))

    press(app, "j", "j")

    assert app.selected_entry == 0
    selected = app.selected()
    assert selected is not None
    assert selected["content"] == "today"


def test_daily_navigation_moves_the_day_and_clears_selection(app: App) -> None:
    app.journal.add_entry(make_entry("a"))
    press(app, "j")

    app.handle_key(special_key(KeyCode.LEFT))
    assert app.current_date == TODAY.subtract(days=1)
    assert app.selected_entry is None

    press(app, "l", "l")
    assert app.current_date == TODAY.add(days=1)


def test_monthly_navigation_wraps_years(app: App) -> None:
    press(app, "2")
    app.selected_month = (2024, 1)

    press(app, "h")
    assert app.selected_month == (2023, 12)

    app.handle_key(special_key(KeyCode.RIGHT))
    assert app.selected_month == (2024, 1)
    assert app.current_date == TODAY


def test_left_right_do_nothing_on_other_tabs(app: App) -> None:
    press(app, "3", "h", "l")

    assert app.current_date == TODAY
    assert app.selected_month == (2024, 6)


def test_tab_cycle(app: App) -> None:
    seen = []
    for _ in range(5):
        app.handle_key(special_key(KeyCode.TAB))
        seen.append(app.current_tab)

    assert seen == [
        AppTab.MONTHLY,
        AppTab.FUTURE,
        AppTab.COLLECTIONS,
        AppTab.SEARCH,
        AppTab.DAILY,
    ]

    app.handle_key(special_key(KeyCode.BACK_TAB))
    assert app.current_tab == AppTab.SEARCH


def test_number_keys_jump_to_tabs(app: App) -> None:
    press(app, "4")
    assert app.current_tab == AppTab.COLLECTIONS
    assert app.current_entries() == []

    press(app, "1")
    assert app.current_tab == AppTab.DAILY


def test_search(app: App) -> None:
    app.journal.add_entry(make_entry("Buy milk"))
    app.journal.add_entry(make_entry("Walk dog", date=TODAY.add(days=5)))

    press(app, "/")
    assert app.current_tab == AppTab.SEARCH
    assert app.mode == AppMode.INSERT
    assert app.current_entries() == []

    type_text(app, "MIL")
    app.handle_key(special_key(KeyCode.BACKSPACE))
    type_text(app, "L")

    assert app.search_query == "MIL"
    assert app.input_buffer == ""
    assert [entry["content"] for entry in app.current_entries()] == ["Buy milk"]


def test_enter_on_search_tab_commits_the_input_buffer(app: App) -> None:
    app.journal.add_entry(make_entry("Buy milk"))

    press(app, "/")
    type_text(app, "milk")
    enter(app)

    assert app.mode == AppMode.NORMAL
    assert app.input_mode is None
    assert app.search_query == ""
    assert app.current_entries() == []


def test_search_tab_enter_uses_a_pending_buffer(app: App) -> None:
    app.journal.add_entry(make_entry("Buy milk"))
    press(app, "t")
    type_text(app, "milk")
    app.current_tab = AppTab.SEARCH

    enter(app)

    assert app.search_query == "milk"
    assert app.input_buffer == ""
    assert app.journal.entries[0]["content"] == "Buy milk"
    assert len(app.journal.entries) == 1


def test_starting_a_search_clears_the_previous_query(app: App) -> None:
    app.search_query = "old"

    press(app, "/")

    assert app.search_query == ""


def test_help_and_quit(app: App) -> None:
    press(app, "?")
    assert app.show_help

    press(app, "?")
    assert not app.show_help

    press(app, "q")
    assert app.should_quit


def test_save(app: App, storage: FakeStorage) -> None:
    app.handle_key(char_key("s", ctrl=True))

    assert storage.saved == [app.journal]
    assert app.messages.to_list() == ["Journal saved"]


def test_save_failure_is_reported() -> None:
    app = App(Journal(), FakeStorage(fail_with="disk full"), today=lambda: TODAY)  # type: ignore[arg-type]

    assert not app.save()
    assert app.messages.to_list() == ["Save failed: disk full"]


def test_command_mode_ignores_keys(app: App) -> None:
    app.journal.add_entry(make_entry("task"))
    app.mode = AppMode.COMMAND

    press(app, "q", "t", "j")
    app.handle_key(special_key(KeyCode.ESCAPE))

    assert not app.should_quit
    assert app.mode == AppMode.COMMAND
    assert app.selected_entry is None
    assert app.input_mode is None


def test_message_queue_keeps_the_last_five() -> None:
    queue = MessageQueue()
    for number in range(6):
        queue.push(f"message {number}")

    assert len(queue) == 5
    assert queue.to_list() == [f"message {number}" for number in range(1, 6)]


def test_future_note_ignores_the_navigation_cursor(app: App) -> None:
    app.current_date = pendulum.Date(2023, 1, 1)

    press(app, "3", "n")
    type_text(app, "later")
    enter(app)

    assert app.journal.entries[0]["date"] == pendulum.Date(2024, 6, 11)


def test_monthly_navigation_wraps_into_next_year(app: App) -> None:
    press(app, "2")
    app.selected_month = (2024, 12)

    press(app, "l")

    assert app.selected_month == (2025, 1)


def test_toggling_new_year_task_twice_round_trips(app: App) -> None:
    app.current_date = pendulum.Date(2024, 1, 1)
    press(app, "t")
    type_text(app, "Buy milk")
    enter(app)

    press(app, "j", " ", " ")

    [entry] = app.journal.entries
    assert entry["date"] == pendulum.Date(2024, 1, 1)
    assert entry["status"] == TaskStatus.INCOMPLETE


def test_escape_on_search_tab_keeps_the_query(app: App) -> None:
    press(app, "/")
    type_text(app, "milk")
    app.handle_key(special_key(KeyCode.ESCAPE))

    assert app.mode == AppMode.NORMAL
    assert app.search_query == "milk"


def test_app_can_start_on_another_tab(journal: Journal, storage: FakeStorage) -> None:
    app = App(journal, storage, today=lambda: TODAY, start_tab=AppTab.MONTHLY)  # type: ignore[arg-type]

    assert app.current_tab == AppTab.MONTHLY


def test_tab_from_name() -> None:
    assert tab_from_name("future") == AppTab.FUTURE
    assert tab_from_name("Search") == AppTab.SEARCH
    assert tab_from_name("agenda") == AppTab.DAILY
