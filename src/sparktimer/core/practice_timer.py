"""
SPARK Timer 練習計時驅動器

將 frame 時間戳轉換成 tick Action，將使用者指令轉換成 control Action，
全部送進同一個 Store。Reducer 只在 dispatch 之間執行，不會在內部等待。
"""

import threading
from typing import Callable, Optional

import reactivex as rx
from immutables import Map
from reactivex import Observable, operators as ops
from reactivex.disposable import Disposable

from sparktimer.config.manager import ConfigManager
from sparktimer.interface.action import Control
from sparktimer.interface.state import SessionStatus
from sparktimer.store.session.session_action import control, tick
from sparktimer.store.session.session_selector import get_session_state
from sparktimer.store.store_config import get_global_store
from sparktimer.utils.logger import logger
from sparktimer.utils.time_provider import TimeProvider


class PracticeTimer:
    """練習 Session 的事件迴圈擁有者

    - frame 來源：reactivex Observable，每個值是毫秒時間戳
    - 第一個 frame 只記錄時間，之後每個 frame 送出與上一個 frame 的差值
    - 所有 dispatch 以鎖串行化 (frame 執行緒與輸入執行緒可能不同)
    """

    def __init__(
        self,
        store=None,
        frames: Optional[Observable] = None,
        clock: Optional[Callable[[], float]] = None,
        tick_interval_ms: Optional[float] = None,
    ):
        """
        初始化驅動器

        Args:
            store: PyStoreX store；None 時使用全局 Store
            frames: 時間戳 Observable；None 時使用 reactivex.interval
            clock: 預設 frame 來源使用的時鐘 (毫秒)
            tick_interval_ms: 預設 frame 來源的間隔；None 時讀取配置
        """
        self.store = store if store is not None else get_global_store()
        self._clock = clock or TimeProvider.now_ms
        self._frames = frames
        if tick_interval_ms is None:
            tick_interval_ms = ConfigManager().timer.tick_interval_ms
        self.tick_interval_ms = tick_interval_ms

        self._lock = threading.RLock()
        self._subscription: Optional[Disposable] = None
        self._previous_ms: Optional[float] = None

    # ========== 狀態 ==========

    @property
    def session(self) -> Map:
        """目前的 Session"""
        return get_session_state(self.store.state)

    @property
    def is_ticking(self) -> bool:
        return self._subscription is not None

    def subscribe(self, callback: Callable[[Map], None]) -> Disposable:
        """
        訂閱 Session 變更

        Args:
            callback: 收到最新的 Session

        Returns:
            可 dispose 的訂閱
        """
        return self.store.select(get_session_state).subscribe(
            on_next=lambda value: callback(get_session_state(value))
        )

    # ========== Frame 來源 ==========

    def _default_frames(self) -> Observable:
        return rx.interval(self.tick_interval_ms / 1000.0).pipe(
            ops.map(lambda _: self._clock())
        )

    def start_ticking(self) -> None:
        """開始接收 frame (重複呼叫無效果)"""
        with self._lock:
            if self._subscription is not None:
                return
            self._previous_ms = None
            frames = self._frames if self._frames is not None else self._default_frames()
            self._subscription = frames.subscribe(
                on_next=self.on_frame,
                on_error=self._on_frame_error,
            )
        logger.debug(f"Frame 來源啟動 (interval={self.tick_interval_ms}ms)")

    def stop_ticking(self) -> None:
        """停止接收 frame 並釋放訂閱"""
        with self._lock:
            subscription, self._subscription = self._subscription, None
            self._previous_ms = None
        if subscription is not None:
            subscription.dispose()
            logger.debug("Frame 來源已停止")

    def on_frame(self, timestamp_ms: float) -> None:
        """處理一個 frame 時間戳"""
        with self._lock:
            previous, self._previous_ms = self._previous_ms, timestamp_ms
            if previous is None:
                return
            self._dispatch(tick(timestamp_ms - previous))

    def _on_frame_error(self, error: Exception) -> None:
        logger.error(f"Frame 來源發生錯誤: {error}")
        with self._lock:
            self._subscription = None
            self._previous_ms = None

    # ========== 控制 ==========

    def control(self, command: str) -> Map:
        """送出控制指令並回傳新的 Session"""
        logger.info(f"控制指令: {command}")
        with self._lock:
            self._dispatch(control(command))
            return self.session

    def start(self) -> Map:
        return self.control(Control.START)

    def pause(self) -> Map:
        return self.control(Control.PAUSE)

    def resume(self) -> Map:
        return self.control(Control.RESUME)

    def reset(self) -> Map:
        return self.control(Control.RESET)

    # ========== 內部 ==========

    def _dispatch(self, action) -> None:
        before = self.session
        self.store.dispatch(action)
        after = self.session
        if after is not before:
            self._log_transition(before, after)

    def _log_transition(self, before: Map, after: Map) -> None:
        if after["status"] == SessionStatus.INITIAL and before["status"] != SessionStatus.INITIAL:
            logger.info("Session 已重置")
            return

        if after["current_index"] != before["current_index"]:
            finished = before["blocks"][before["current_index"]]
            upcoming = after["blocks"][after["current_index"]]
            logger.info(f"區塊完成: {finished['title']} -> 下一個區塊: {upcoming['title']}")

        if after["status"] != before["status"]:
            if after["status"] == SessionStatus.ENDED:
                logger.success("✅ 所有區塊完成，Session 結束")
            else:
                logger.debug(f"Session 狀態: {before['status']} -> {after['status']}")
