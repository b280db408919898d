"""SPARK Practice Timer - 依序執行固定練習區塊的計時核心"""

__version__ = "0.1.0"
