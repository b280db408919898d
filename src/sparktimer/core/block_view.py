"""
區塊呈現輔助函數

給呈現層使用的純函數：進度比例、剩餘時間文字、可用的控制按鈕。
"""

import math
from typing import Mapping, Tuple

from sparktimer.interface.action import Control
from sparktimer.interface.state import BlockStatus, SessionStatus

BAR_WIDTH = 24

_CONTROL_BUTTONS = {
    SessionStatus.INITIAL: ((Control.START, "Start"),),
    SessionStatus.RUNNING: ((Control.PAUSE, "Stop"),),
    SessionStatus.WAITING: ((Control.RESUME, "Start next block"), (Control.RESET, "Reset")),
    SessionStatus.PAUSED: ((Control.RESUME, "Resume"), (Control.RESET, "Reset")),
    SessionStatus.ENDED: ((Control.RESET, "Reset"),),
}


def progress_fraction(block: Mapping) -> float:
    """
    區塊進度 elapsed / total (0..1)

    total 為 0 的區塊沒有可計算的比例：done 視為 1.0，其餘為 0.0。
    """
    total = block["total"]
    if total <= 0:
        return 1.0 if block["status"] == BlockStatus.DONE else 0.0
    return min(max(block["elapsed"] / total, 0.0), 1.0)


def progress_percent(block: Mapping) -> str:
    """進度條寬度，例如 "42.5%" """
    return f"{100 * progress_fraction(block):g}%"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def remaining_label(block: Mapping) -> str:
    """
    剩餘時間文字

    剩餘時間四捨五入到秒；不足一分鐘顯示 "Ns"，否則顯示 "M:SS"。
    例: 65000 ms -> "1:05"，9000 ms -> "9s"
    """
    remaining_ms = max(block["total"] - block["elapsed"], 0)
    remaining = _round_half_up(remaining_ms / 1000)
    minutes, seconds = divmod(remaining, 60)

    if minutes == 0:
        return f"{seconds}s"
    return f"{minutes}:{seconds:02d}"


def block_display_state(block: Mapping, session_status: str) -> str:
    """區塊的顯示狀態；Session 尚未開始時一律不標示"""
    if session_status == SessionStatus.INITIAL:
        return ""
    return block["status"]


def is_remaining_visible(block: Mapping, session_status: str) -> bool:
    """只有正在計時的區塊才顯示剩餘時間 (暫停時隱藏)"""
    return block["status"] == BlockStatus.RUNNING and session_status == SessionStatus.RUNNING


def control_buttons(session_status: str) -> Tuple[Tuple[str, str], ...]:
    """
    目前狀態下的控制按鈕

    Returns:
        (control, label) 的 tuple，依顯示順序排列；未知狀態回傳空 tuple
    """
    return _CONTROL_BUTTONS.get(session_status, ())


def render_block_line(block: Mapping, session_status: str, width: int = BAR_WIDTH) -> str:
    """將單一區塊繪製成一行文字，例如 `SOUND  [######------]  running  3:12`"""
    filled = int(round(progress_fraction(block) * width))
    bar = "#" * filled + "-" * (width - filled)
    parts = [f"{block['title']:<20}", f"[{bar}]", f"{block_display_state(block, session_status):<8}"]
    if is_remaining_visible(block, session_status):
        parts.append(remaining_label(block))
    return "  ".join(parts).rstrip()
