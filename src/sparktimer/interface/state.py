# === 狀態 (States: nouns/adjectives/ing) ===
class SessionStatus:
    """
    整個練習 Session 的狀態
    """
    INITIAL = "initial"
    """尚未開始，所有區塊皆為 pending"""
    RUNNING = "running"
    """目前區塊正在計時"""
    WAITING = "waiting"
    """舊版呈現層保留的狀態，沒有任何轉換會產生它"""
    PAUSED = "paused"
    """使用者暫停，目前區塊保持 running 但不累積時間"""
    ENDED = "ended"
    """最後一個區塊結束，只接受 reset"""


class BlockStatus:
    """
    單一練習區塊的狀態
    """
    PENDING = "pending"
    """尚未輪到"""
    RUNNING = "running"
    """目前的區塊 (Session 暫停時依然是 running)"""
    DONE = "done"
    """已經走完 total 毫秒"""
