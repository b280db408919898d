"""
Store 配置和初始化 - 最小化封裝設計
只提供必要的初始化、配置和測試隔離功能
"""

from typing import Any, Dict, Optional

from pystorex import Store, create_store

from .session import create_session_reducer

# 全局 Store 實例
_global_store: Optional[Store[Dict[str, Any]]] = None


def get_global_store() -> Store[Dict[str, Any]]:
    """
    獲取全局 Store 實例（延遲初始化）

    Returns:
        PyStoreX Store 實例
    """
    global _global_store
    if _global_store is None:
        _global_store = create_configured_store()
    return _global_store


def create_configured_store(block_duration_ms: Optional[int] = None) -> Store[Dict[str, Any]]:
    """
    創建並配置 Store 實例

    Args:
        block_duration_ms: 區塊長度；None 時使用配置

    Returns:
        配置好的 Store 實例，狀態位於 "session" 鍵下
    """
    store = create_store()
    store.register_root({
        "session": create_session_reducer(block_duration_ms)
    })
    return store


def configure_global_store(block_duration_ms: Optional[int] = None) -> Store:
    """
    配置全局 Store（用於應用初始化）

    Args:
        block_duration_ms: 區塊長度；None 時使用配置

    Returns:
        配置好的 Store 實例
    """
    global _global_store
    _global_store = create_configured_store(block_duration_ms)
    return _global_store


def reset_global_store():
    """
    重置全局 Store（用於測試隔離）
    """
    global _global_store
    _global_store = None
