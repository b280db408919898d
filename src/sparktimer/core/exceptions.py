"""
SPARK Timer 自定義異常類別

Reducer 本身不會拋出任何異常；這裡的異常只出現在外圍 (配置載入、主控台輸入)。
"""


class SparkTimerException(Exception):
    """SPARK Timer 基礎異常類別"""
    pass


class ConfigurationError(SparkTimerException):
    """配置檔讀取或格式錯誤"""
    pass


class ControlError(SparkTimerException):
    """無法辨識的使用者控制指令"""

    def __init__(self, command: str):
        super().__init__(f"Unknown control command: {command!r}")
        self.command = command
