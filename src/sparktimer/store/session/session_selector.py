"""
Session Selectors for PyStoreX Store

提供呈現層需要的唯讀查詢。所有 selector 都是純函數，
可以直接傳入 Session，也可以傳入 Store 的根狀態或 PyStoreX 的 (old, new) tuple。
"""

from typing import Any, Optional, Tuple

from immutables import Map
from pystorex.store_selectors import create_selector

from sparktimer.core.block_view import control_buttons
from sparktimer.interface.state import BlockStatus


# === Base Selectors ===

def get_session_state(state: Any) -> Map:
    """取得 Session 本身"""
    # 處理 PyStoreX 的 (old, new) tuple 格式
    if isinstance(state, tuple) and len(state) == 2:
        state = state[1]
    if "session" in state:
        return state["session"]
    return state


def get_status(state: Any) -> str:
    """取得 Session 狀態"""
    return get_session_state(state).get("status")


def get_current_index(state: Any) -> int:
    """取得目前區塊的索引"""
    return get_session_state(state).get("current_index", 0)


def get_blocks(state: Any) -> Tuple[Map, ...]:
    """取得依順序排列的所有區塊"""
    return get_session_state(state).get("blocks", ())


def get_current_block(state: Any) -> Optional[Map]:
    """取得目前的區塊；沒有區塊時回傳 None"""
    session = get_session_state(state)
    blocks = session.get("blocks", ())
    index = session.get("current_index", 0)
    return blocks[index] if 0 <= index < len(blocks) else None


# === Derived Selectors ===

get_done_count = create_selector(
    get_blocks,
    result_fn=lambda blocks: sum(1 for b in blocks if b["status"] == BlockStatus.DONE)
)


def _session_progress(blocks: Tuple[Map, ...]) -> float:
    total = sum(b["total"] for b in blocks)
    if total <= 0:
        return 0.0
    return sum(b["elapsed"] for b in blocks) / total


get_session_progress = create_selector(
    get_blocks,
    result_fn=_session_progress
)
"""整體進度 (0..1)，以所有區塊的總長度計算"""

get_available_controls = create_selector(
    get_status,
    result_fn=lambda status: tuple(c for c, _ in control_buttons(status))
)
"""目前狀態下呈現層應該提供的控制指令"""
