"""
主控台執行器測試
"""

import io

import pytest
from reactivex.subject import Subject

from sparktimer.app import parse_command, render_session, run
from sparktimer.core.exceptions import ControlError
from sparktimer.core.practice_timer import PracticeTimer
from sparktimer.interface.state import SessionStatus
from sparktimer.store.session.session_state import initial_session
from sparktimer.store.store_config import create_configured_store


class TestParseCommand:
    """指令解析測試"""

    @pytest.mark.parametrize("line,expected", [
        ("start\n", "start"),
        ("  PAUSE ", "pause"),
        ("quit", "quit"),
        ("", ""),
    ])
    def test_known_commands(self, line, expected):
        assert parse_command(line) == expected

    def test_unknown_command(self):
        with pytest.raises(ControlError) as exc_info:
            parse_command("rewind")

        assert exc_info.value.command == "rewind"


class TestRun:
    """run 測試"""

    def test_render_session_lists_blocks_and_buttons(self, duration):
        text = render_session(initial_session(duration))
        lines = text.splitlines()

        assert len(lines) == 7
        assert lines[0].startswith("SOUND")
        assert lines[-1] == "[initial] Start (start)"

    def test_commands_drive_timer(self, duration):
        timer = PracticeTimer(store=create_configured_store(duration), frames=Subject(), tick_interval_ms=16)
        out = io.StringIO()

        run(timer, ["start\n", "rewind\n", "pause\n", "quit\n", "reset\n"], out=out)

        assert timer.session["status"] == SessionStatus.PAUSED
        assert not timer.is_ticking
        assert "[paused] Resume (resume) / Reset (reset)" in out.getvalue()
