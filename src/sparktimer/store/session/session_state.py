"""
Session State Definition for PyStoreX Store

定義練習 Session 的狀態結構，使用 TypedDict 描述欄位，
實際值以 immutables.Map 保存；blocks 為 Block Map 的 tuple。
"""

from typing import Optional, Sequence, Tuple
from typing_extensions import TypedDict

from immutables import Map

from sparktimer.interface.state import BlockStatus, SessionStatus


class BlockState(TypedDict):
    """單一練習區塊"""
    title: str  # 區塊名稱，在 schedule 中唯一
    total: int  # 區塊長度 (毫秒)，建立後不變
    elapsed: int  # 已累積的毫秒數，0 <= elapsed <= total
    status: str  # pending | running | done


class SessionState(TypedDict):
    """整個練習 Session"""
    status: str  # initial | running | waiting | paused | ended
    current_index: int  # 目前區塊的索引，只會遞增
    blocks: Tuple[BlockState, ...]  # 固定長度、固定順序


# 預設的練習流程
DEFAULT_TITLES: Tuple[str, ...] = (
    "SOUND",
    "PERFORMANCE",
    "ATTUNED Intonation",
    "RHYTHM",
    "KINETIC Integration",
    "PAUSE",
)


def create_block(title: str, duration_ms: int) -> Map:
    """建立一個 pending 的區塊"""
    return Map(
        title=title,
        total=duration_ms,
        elapsed=0,
        status=BlockStatus.PENDING,
    )


def build_schedule(duration_ms: int, titles: Sequence[str] = DEFAULT_TITLES) -> Tuple[Map, ...]:
    """
    依標題順序建立固定的區塊列表

    Args:
        duration_ms: 每個區塊共用的長度 (毫秒)
        titles: 區塊標題，依執行順序排列

    Returns:
        Block Map 的 tuple，皆為 pending 且 elapsed = 0
    """
    return tuple(create_block(title, duration_ms) for title in titles)


def create_session(blocks: Sequence[Map]) -> Map:
    """將區塊包裝成 initial 狀態的 Session"""
    return Map(
        status=SessionStatus.INITIAL,
        current_index=0,
        blocks=tuple(blocks),
    )


def initial_session(block_duration_ms: Optional[int] = None) -> Map:
    """
    建立預設的初始 Session

    Args:
        block_duration_ms: 區塊長度；None 時使用配置中的長度 (依 test_mode 決定)

    Returns:
        initial 狀態的 Session
    """
    if block_duration_ms is None:
        from sparktimer.config.manager import ConfigManager
        block_duration_ms = ConfigManager().block_duration_ms
    return create_session(build_schedule(block_duration_ms, DEFAULT_TITLES))


def restart_session(session: Map) -> Map:
    """以相同的標題與長度重新建立全新的初始 Session"""
    blocks = session.get("blocks", ())
    return create_session(
        create_block(block["title"], block["total"]) for block in blocks
    )
