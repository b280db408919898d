"""
Store 整合測試
"""

from sparktimer.interface.state import BlockStatus, SessionStatus
from sparktimer.store.session.session_action import reset_session, start_session, tick
from sparktimer.store.session.session_selector import get_session_state
from sparktimer.store.session.session_state import initial_session
from sparktimer.store.store_config import (
    configure_global_store,
    create_configured_store,
    get_global_store,
    reset_global_store,
)


class TestStoreConfig:
    """Store 配置測試類別"""

    def test_initial_state(self, duration):
        store = create_configured_store(duration)

        assert get_session_state(store.state) == initial_session(duration)

    def test_dispatch_runs_reducer(self, duration):
        store = create_configured_store(duration)

        store.dispatch(start_session())
        store.dispatch(tick(duration))
        session = get_session_state(store.state)

        assert session["status"] == SessionStatus.RUNNING
        assert session["current_index"] == 1
        assert session["blocks"][0]["status"] == BlockStatus.DONE

    def test_reset_through_store(self, duration):
        store = create_configured_store(duration)

        store.dispatch(start_session())
        store.dispatch(tick(100))
        store.dispatch(reset_session())

        assert get_session_state(store.state) == initial_session(duration)

    def test_global_store_lifecycle(self, duration):
        configured = configure_global_store(duration)

        assert get_global_store() is configured

        reset_global_store()

        assert get_global_store() is not configured
