"""
Session 狀態建構測試
"""

from immutables import Map

from sparktimer.config.manager import ConfigManager
from sparktimer.interface.state import BlockStatus, SessionStatus
from sparktimer.store.session.session_state import (
    DEFAULT_TITLES,
    build_schedule,
    create_session,
    initial_session,
    restart_session,
)


class TestBuildSchedule:
    """build_schedule 測試"""

    def test_blocks_follow_title_order(self):
        blocks = build_schedule(1000, ["A", "B", "C"])

        assert [b["title"] for b in blocks] == ["A", "B", "C"]

    def test_every_block_is_pending_with_same_total(self):
        blocks = build_schedule(1234, ["A", "B"])

        for block in blocks:
            assert block["status"] == BlockStatus.PENDING
            assert block["elapsed"] == 0
            assert block["total"] == 1234

    def test_empty_titles(self):
        assert build_schedule(1000, []) == ()

    def test_blocks_are_immutable_maps(self):
        blocks = build_schedule(1000, ["A"])

        assert isinstance(blocks, tuple)
        assert isinstance(blocks[0], Map)


class TestInitialSession:
    """initial_session 測試"""

    def test_default_schedule(self, duration):
        session = initial_session(duration)

        assert session["status"] == SessionStatus.INITIAL
        assert session["current_index"] == 0
        assert tuple(b["title"] for b in session["blocks"]) == DEFAULT_TITLES
        assert DEFAULT_TITLES == (
            "SOUND",
            "PERFORMANCE",
            "ATTUNED Intonation",
            "RHYTHM",
            "KINETIC Integration",
            "PAUSE",
        )
        assert all(b["total"] == duration for b in session["blocks"])

    def test_duration_comes_from_config(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("timer:\n  block_duration_ms: 42000\n", encoding="utf-8")
        ConfigManager().load(str(config_file))

        session = initial_session()

        assert all(b["total"] == 42000 for b in session["blocks"])

    def test_two_initial_sessions_are_equal(self, duration):
        assert initial_session(duration) == initial_session(duration)


class TestRestartSession:
    """restart_session 測試"""

    def test_keeps_titles_and_totals(self):
        session = create_session(build_schedule(700, ["X", "Y"]))
        progressed = session.set("status", SessionStatus.ENDED)

        restarted = restart_session(progressed)

        assert restarted == session
