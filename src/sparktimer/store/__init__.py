"""
SPARK Timer Redux Store 主要入口點

提供基於 PyStoreX 的狀態管理
"""

# Store 核心
from .store_config import (
    get_global_store,
    create_configured_store,
    configure_global_store,
    reset_global_store,
)

# Session 域
from .session import (
    initial_session,
    reduce,
    tick,
    control,
    get_session_state,
    get_status,
    get_current_index,
    get_blocks,
    get_current_block,
)

__all__ = [
    "get_global_store",
    "create_configured_store",
    "configure_global_store",
    "reset_global_store",
    "initial_session",
    "reduce",
    "tick",
    "control",
    "get_session_state",
    "get_status",
    "get_current_index",
    "get_blocks",
    "get_current_block",
]
