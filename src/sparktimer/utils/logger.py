"""
SPARK Timer 日誌系統配置
使用 pretty-loguru 提供美化的日誌輸出
"""

import sys

from pretty_loguru import create_logger, ConfigTemplates

from sparktimer.config.manager import ConfigManager

config = ConfigManager()

# 根據環境選擇配置模板
mode = config.system.mode
if mode == 'production':
    base_config = ConfigTemplates.production()
elif mode == 'testing':
    base_config = ConfigTemplates.testing()
else:
    base_config = ConfigTemplates.development()

# 套用 logging 區段的自定義設定
kwargs = {}
for key in ('path', 'level', 'rotation', 'retention'):
    if key in config.logging.to_dict():
        kwargs['log_path' if key == 'path' else key] = getattr(config.logging, key)

logger = create_logger("sparktimer", use_native_format=True, config=base_config, **kwargs)


def setup_global_exception_handler():
    """
    設置全域異常處理器，確保未捕獲的異常都會被記錄
    """
    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = handle_exception
