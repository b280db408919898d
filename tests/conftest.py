import sys
from pathlib import Path

import pytest

# 確保 sparktimer 套件在未安裝時也能匯入
ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from sparktimer.config.manager import ConfigManager
from sparktimer.store.store_config import reset_global_store
from sparktimer.utils.time_provider import TimeProvider


@pytest.fixture(autouse=True)
def isolate_globals():
    """每個測試使用乾淨的配置、Store 與時間"""
    yield
    ConfigManager.clear_instance()
    reset_global_store()
    TimeProvider.reset()


@pytest.fixture
def duration():
    """測試用區塊長度 (毫秒)"""
    return 5000
