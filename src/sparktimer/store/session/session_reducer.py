"""
Session Reducer for PyStoreX Store

處理 tick 與 control 兩種 Action，回傳新的 Session。
純函數：不修改輸入、不記錄日誌、不拋出異常。
沒有任何轉換時回傳原本的物件。
"""

import math
from typing import Any, Callable, Dict, Optional

from immutables import Map
from pystorex import create_reducer, on
from pystorex.map_utils import batch_update

from sparktimer.interface.action import Control
from sparktimer.interface.state import BlockStatus, SessionStatus
from sparktimer.store.session.session_action import control, tick
from sparktimer.store.session.session_state import initial_session, restart_session


BlockUpdater = Callable[[Map], Dict[str, Any]]


# === Helper Functions ===

def get_current_block(session: Map) -> Optional[Map]:
    """取得 current_index 指向的區塊；索引越界時回傳 None"""
    blocks = session.get("blocks", ())
    index = session.get("current_index", 0)
    if 0 <= index < len(blocks):
        return blocks[index]
    return None


def update_current_block(
    session: Map,
    block_updater: Optional[BlockUpdater] = None,
    session_updates: Optional[Dict[str, Any]] = None,
) -> Map:
    """
    更新 Session 以及目前的區塊

    先套用 session_updates，再對「更新後」current_index 所指的區塊套用 block_updater。
    只有該區塊會被替換成新物件，其餘區塊保持原本的參照。

    Args:
        session: 目前的 Session
        block_updater: 接收目前區塊，回傳要更新的欄位
        session_updates: Session 層級要更新的欄位

    Returns:
        新的 Session
    """
    updated = batch_update(session, session_updates) if session_updates else session

    if block_updater is None:
        return updated

    current = get_current_block(updated)
    if current is None:
        return updated

    index = updated["current_index"]
    blocks = updated["blocks"]
    new_block = batch_update(current, block_updater(current))

    return updated.set("blocks", blocks[:index] + (new_block,) + blocks[index + 1:])


def _coerce_delta(payload: Any) -> Optional[float]:
    """驗證 tick 的 delta；無法使用時回傳 None，負值視為 0"""
    if isinstance(payload, bool) or not isinstance(payload, (int, float)):
        return None
    if not math.isfinite(payload):
        return None
    return max(payload, 0)


# === Action Handlers ===

def handle_tick(session: Map, action) -> Map:
    """
    處理經過時間

    目前區塊走完時標記為 done 並前進到下一個區塊；
    每次 tick 最多前進一個區塊，超出的時間不會帶到下一個區塊。
    """
    if session.get("status") != SessionStatus.RUNNING:
        return session

    delta = _coerce_delta(getattr(action, "payload", None))
    current = get_current_block(session)
    if delta is None or current is None:
        return session

    new_elapsed = current["elapsed"] + delta

    # 區塊仍在進行
    if new_elapsed < current["total"]:
        if delta == 0:
            return session
        return update_current_block(session, lambda block: {"elapsed": new_elapsed})

    ticked = update_current_block(
        session,
        lambda block: {"elapsed": block["total"], "status": BlockStatus.DONE},
    )

    index = session["current_index"]
    if index < len(session["blocks"]) - 1:
        return update_current_block(
            ticked,
            lambda block: {"status": BlockStatus.RUNNING},
            {"status": SessionStatus.RUNNING, "current_index": index + 1},
        )

    # 沒有下一個區塊
    return ticked.set("status", SessionStatus.ENDED)


def handle_control(session: Map, action) -> Map:
    """處理使用者控制指令；不符合前置條件的指令直接忽略"""
    command = getattr(action, "payload", None)
    status = session.get("status")

    if command == Control.START:
        if status != SessionStatus.INITIAL or get_current_block(session) is None:
            return session
        return update_current_block(
            session,
            lambda block: {"status": BlockStatus.RUNNING},
            {"status": SessionStatus.RUNNING},
        )

    if command == Control.PAUSE:
        if status != SessionStatus.RUNNING:
            return session
        return session.set("status", SessionStatus.PAUSED)

    if command == Control.RESUME:
        if status not in (SessionStatus.PAUSED, SessionStatus.WAITING):
            return session
        return session.set("status", SessionStatus.RUNNING)

    if command == Control.RESET:
        return restart_session(session)

    return session


_HANDLERS = {
    tick.type: handle_tick,
    control.type: handle_control,
}


def reduce(session: Map, action) -> Map:
    """
    唯一的狀態轉換函數

    Args:
        session: 目前的 Session
        action: tick 或 control Action；其他任何東西都會被忽略

    Returns:
        下一個 Session (沒有轉換時為同一個物件)
    """
    action_type = getattr(action, "type", None)
    handler = _HANDLERS.get(action_type) if isinstance(action_type, str) else None
    if handler is None:
        return session
    return handler(session, action)


# === 建立 Reducer ===

def create_session_reducer(block_duration_ms: Optional[int] = None):
    """建立註冊到 Store 的 reducer，初始狀態使用指定 (或配置) 的區塊長度"""
    return create_reducer(
        initial_session(block_duration_ms),
        on(tick, handle_tick),
        on(control, handle_control),
    )
