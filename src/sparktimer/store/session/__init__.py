"""
Session 域的公共 API
"""

# State 定義
from .session_state import (
    BlockState,
    SessionState,
    DEFAULT_TITLES,
    build_schedule,
    create_block,
    create_session,
    initial_session,
    restart_session,
)

# Actions
from .session_action import (
    tick,
    control,
    start_session,
    pause_session,
    resume_session,
    reset_session,
)

# Reducer
from .session_reducer import (
    reduce,
    handle_tick,
    handle_control,
    update_current_block,
    create_session_reducer,
)

# Selectors
from .session_selector import (
    get_session_state,
    get_status,
    get_current_index,
    get_blocks,
    get_current_block,
    get_done_count,
    get_session_progress,
    get_available_controls,
)

__all__ = [
    # State
    "BlockState",
    "SessionState",
    "DEFAULT_TITLES",
    "build_schedule",
    "create_block",
    "create_session",
    "initial_session",
    "restart_session",

    # Actions
    "tick",
    "control",
    "start_session",
    "pause_session",
    "resume_session",
    "reset_session",

    # Reducer
    "reduce",
    "handle_tick",
    "handle_control",
    "update_current_block",
    "create_session_reducer",

    # Selectors
    "get_session_state",
    "get_status",
    "get_current_index",
    "get_blocks",
    "get_current_block",
    "get_done_count",
    "get_session_progress",
    "get_available_controls",
]
