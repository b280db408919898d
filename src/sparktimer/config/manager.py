"""
配置管理器

從 YAML 載入設定並以屬性方式存取，例如 ``config.timer.block_duration_ms``。
檔案路徑優先順序：建構參數 > 環境變數 SPARKTIMER_CONFIG > ./config/config.yaml。
檔案不存在時使用內建預設值。
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from sparktimer.core.exceptions import ConfigurationError
from sparktimer.utils.singleton import SingletonMixin

CONFIG_ENV_VAR = "SPARKTIMER_CONFIG"
DEFAULT_CONFIG_PATH = Path("config") / "config.yaml"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "system": {
        "name": "SPARK Practice Timer",
        "version": "0.1.0",
        "mode": "development",  # development | testing | production
    },
    "logging": {
        "path": "./logs",
        "level": "INFO",
        "rotation": "10 MB",
        "retention": "7 days",
    },
    "timer": {
        "block_duration_ms": 5 * 60 * 1000,
        "test_block_duration_ms": 5 * 1000,
        "test_mode": False,
        "tick_interval_ms": 16,  # 約 60 fps
    },
}


class ConfigSection:
    """單一設定區段，將 dict 轉為唯讀屬性"""

    def __init__(self, name: str, values: Dict[str, Any]):
        self._name = name
        self._values = dict(values)

    def __getattr__(self, key: str) -> Any:
        values = self.__dict__.get("_values", {})
        if key in values:
            return values[key]
        raise AttributeError(f"{self.__dict__.get('_name')}.{key}")

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __repr__(self) -> str:
        return f"ConfigSection({self._name}={self._values!r})"


class ConfigManager(SingletonMixin):
    """全域配置管理器 (單例)"""

    def __init__(self, config_path: Optional[str] = None):
        if getattr(self, "_initialized", False):
            return
        self._initialized = True
        self._sections: Dict[str, ConfigSection] = {}
        self.load(config_path)

    def load(self, config_path: Optional[str] = None) -> None:
        """
        (重新) 載入配置

        Args:
            config_path: YAML 檔案路徑；None 時依環境變數與預設路徑尋找

        Raises:
            ConfigurationError: YAML 無法解析或頂層不是 mapping
        """
        path = self._resolve_path(config_path)
        merged = copy.deepcopy(DEFAULTS)

        if path is not None and path.exists():
            try:
                with open(path, "r", encoding="utf-8") as fh:
                    data = yaml.safe_load(fh) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

            if not isinstance(data, dict):
                raise ConfigurationError(f"Config root must be a mapping: {path}")

            for section, values in data.items():
                if not isinstance(values, dict):
                    raise ConfigurationError(f"Config section '{section}' must be a mapping")
                merged.setdefault(section, {}).update(values)

        self.config_path = path
        self._sections = {name: ConfigSection(name, values) for name, values in merged.items()}

    def _resolve_path(self, config_path: Optional[str]) -> Optional[Path]:
        if config_path:
            return Path(config_path)
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)
        return DEFAULT_CONFIG_PATH

    def __getattr__(self, name: str) -> ConfigSection:
        sections = self.__dict__.get("_sections", {})
        if name in sections:
            return sections[name]
        raise AttributeError(name)

    @property
    def block_duration_ms(self) -> int:
        """依 test_mode 決定每個區塊的長度 (毫秒)"""
        timer = self.timer
        if timer.test_mode:
            return int(timer.test_block_duration_ms)
        return int(timer.block_duration_ms)
