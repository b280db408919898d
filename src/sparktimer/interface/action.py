# src/sparktimer/interface/action.py

class Action:
    """
    事件 (Events: verbs, triggers)
    練習 Session 只接受兩種事件：經過時間 (tick) 與使用者控制 (control)
    """

    TICK = "tick"
    """經過時間 (必選參數: delta_ms，距離上一次 tick 的毫秒數)"""
    CONTROL = "control"
    """使用者控制 (必選參數: control，見 Control)"""


class Control:
    """
    使用者控制指令，一個按鈕對應一個值
    """

    START = "start"
    """開始第一個區塊 (僅在 initial 狀態有效)"""
    PAUSE = "pause"
    """暫停整個 Session"""
    RESUME = "resume"
    """從暫停繼續"""
    RESET = "reset"
    """捨棄所有進度，回到全新的初始 Session"""

    ALL = (START, PAUSE, RESUME, RESET)
