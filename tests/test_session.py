"""Tests for the per-tick interaction loop.

Covers:
  - typing, editing and navigation through FrameInput ticks
  - confirm with a match, with no match, and with a stale highlight
  - close requests and the run_loop driver
"""

from __future__ import annotations

import pytest

from rmenu.models import FrameInput, LaunchRequest
from rmenu.session import LauncherSession, run_loop


def type_text(session: LauncherSession, text: str) -> None:
    for c in text:
        outcome = session.step(FrameInput(char=c))
        assert not outcome.finished


@pytest.fixture
def session() -> LauncherSession:
    return LauncherSession(frozenset({"ls", "less", "lua", "vim", "vi"}))


# ======================================================================
# Editing and ranking
# ======================================================================


def test_initial_view_lists_shortest_names(session: LauncherSession):
    view = session.view()

    assert view.text == ""
    assert view.cursor == 0
    assert view.selection == 0
    assert set(view.candidates) == {"ls", "less", "lua", "vim", "vi"}
    assert [len(n) for n in view.candidates] == [2, 2, 3, 3, 4]


def test_typing_filters_candidates(session: LauncherSession):
    type_text(session, "l")

    view = session.view()
    assert view.text == "l"
    assert [len(n) for n in view.candidates] == [2, 3, 4]
    assert set(view.candidates) == {"ls", "lua", "less"}


def test_one_character_per_tick(session: LauncherSession):
    outcome = session.step(FrameInput(char="v"))

    assert outcome.view.text == "v"
    assert outcome.view.cursor == 1


def test_delete_held_removes_one_character_per_tick(session: LauncherSession):
    type_text(session, "vim")

    session.step(FrameInput(delete_held=True))
    outcome = session.step(FrameInput(delete_held=True))

    assert outcome.view.text == "v"


def test_cursor_keys_move_cursor(session: LauncherSession):
    type_text(session, "ls")

    session.step(FrameInput(left=True))
    outcome = session.step(FrameInput(char="e"))
    assert (outcome.view.text, outcome.view.cursor) == ("les", 2)

    outcome = session.step(FrameInput(right=True))
    assert outcome.view.cursor == 3


def test_view_reflects_edits_made_this_tick(session: LauncherSession):
    outcome = session.step(FrameInput(char="v"))

    assert set(outcome.view.candidates) == {"vi", "vim"}


# ======================================================================
# Navigation
# ======================================================================


def test_down_and_up_move_highlight(session: LauncherSession):
    type_text(session, "l")

    session.step(FrameInput(down=True))
    outcome = session.step(FrameInput(down=True))
    assert outcome.view.selection == 2

    outcome = session.step(FrameInput(up=True))
    assert outcome.view.selection == 1


def test_down_stops_at_last_candidate(session: LauncherSession):
    type_text(session, "v")

    for _ in range(4):
        outcome = session.step(FrameInput(down=True))

    assert outcome.view.selection == 1


def test_highlight_follows_shrinking_list(session: LauncherSession):
    type_text(session, "l")
    session.step(FrameInput(down=True))
    session.step(FrameInput(down=True))

    outcome = session.step(FrameInput(char="s"))

    assert outcome.view.candidates == ("ls",)
    assert outcome.view.selection == 0


# ======================================================================
# Confirm
# ======================================================================


def test_confirm_launches_highlighted_candidate():
    session = LauncherSession(frozenset({"vim"}))
    type_text(session, "vi")

    outcome = session.step(FrameInput(confirm=True))

    assert outcome.finished
    assert outcome.launch == LaunchRequest(program_name="vim")
    assert session.finished


def test_confirm_without_match_is_noop():
    session = LauncherSession(frozenset({"vim"}))
    type_text(session, "xy")

    outcome = session.step(FrameInput(confirm=True))

    assert not outcome.finished
    assert outcome.launch is None
    assert outcome.view.candidates == ()


def test_confirm_with_stale_highlight_and_no_candidates_is_noop():
    session = LauncherSession(frozenset({"ls", "lua", "less", "lz"}))
    type_text(session, "l")
    for _ in range(3):
        session.step(FrameInput(down=True))
    type_text(session, "q")

    outcome = session.step(FrameInput(confirm=True))

    assert not outcome.finished
    assert outcome.view.selection == 0


def test_confirm_uses_list_shown_before_this_ticks_edit():
    session = LauncherSession(frozenset({"vim"}))
    type_text(session, "vi")

    outcome = session.step(FrameInput(char="x", confirm=True))

    assert outcome.launch == LaunchRequest(program_name="vim")


def test_confirm_second_row():
    session = LauncherSession(frozenset({"ls", "lua", "less"}))
    type_text(session, "l")
    session.step(FrameInput(down=True))

    outcome = session.step(FrameInput(confirm=True))

    assert outcome.launch == LaunchRequest(program_name="lua")


# ======================================================================
# Close and run_loop
# ======================================================================


def test_close_request_finishes_without_launch(session: LauncherSession):
    outcome = session.step(FrameInput(close_requested=True, confirm=True))

    assert outcome.finished
    assert outcome.launch is None


def test_step_after_finish_raises(session: LauncherSession):
    session.step(FrameInput(close_requested=True))

    with pytest.raises(RuntimeError):
        session.step(FrameInput())


def test_run_loop_spawns_confirmed_program():
    session = LauncherSession(frozenset({"ls", "lua", "less"}))
    frames = iter([
        FrameInput(char="l"),
        FrameInput(char="u"),
        FrameInput(),
        FrameInput(confirm=True),
    ])
    rendered, spawned = [], []

    result = run_loop(session, lambda: next(frames), rendered.append, spawned.append)

    assert result == LaunchRequest(program_name="lua")
    assert spawned == [LaunchRequest(program_name="lua")]
    assert [v.text for v in rendered] == ["l", "lu", "lu"]


def test_run_loop_close_spawns_nothing():
    session = LauncherSession(frozenset({"vim"}))
    frames = iter([FrameInput(confirm=False), FrameInput(close_requested=True)])
    spawned = []

    result = run_loop(session, lambda: next(frames), lambda view: None, spawned.append)

    assert result is None
    assert spawned == []
