"""
時間提供者工具類
提供單調遞增的毫秒時間戳，作為 frame 來源的時間基準
"""

import time
from typing import Optional


class TimeProvider:
    """時間提供者類，統一管理時間戳獲取"""

    _mock_time_ms: Optional[float] = None

    @classmethod
    def now_ms(cls) -> float:
        """
        獲取目前的單調時間戳

        Returns:
            float: 毫秒；只保證遞增，與牆上時鐘無關
        """
        if cls._mock_time_ms is not None:
            return cls._mock_time_ms
        return time.monotonic() * 1000.0

    @classmethod
    def set_mock_time(cls, mock_time_ms: Optional[float] = None):
        """
        設置模擬時間（用於測試）

        Args:
            mock_time_ms: 模擬的毫秒時間戳，None 表示使用真實時間
        """
        cls._mock_time_ms = mock_time_ms

    @classmethod
    def reset(cls):
        """重置時間提供者狀態"""
        cls._mock_time_ms = None

