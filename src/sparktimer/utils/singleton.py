"""單例模式 Mixin 類別

ConfigManager 這類全域只應存在一份的物件使用。
"""

from typing import Dict, Any
import threading


class SingletonMixin:
    """通用單例 Mixin 類別

    使用方式：
        class MyManager(SingletonMixin):
            def __init__(self):
                if getattr(self, '_initialized', False):
                    return
                self._initialized = True

    注意 __init__ 每次建構都會被呼叫，子類別必須自行判斷是否已初始化。
    """
    _instances: Dict[type, Any] = {}
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                # 雙重檢查鎖定
                if cls not in cls._instances:
                    cls._instances[cls] = super().__new__(cls)
        return cls._instances[cls]

    @classmethod
    def clear_instance(cls):
        """清除單例實例（測試隔離用）"""
        with cls._lock:
            cls._instances.pop(cls, None)

    @classmethod
    def has_instance(cls) -> bool:
        return cls in cls._instances
