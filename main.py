#!/usr/bin/env python3
"""
SPARK Practice Timer 主程式入口
"""

import sys
from pathlib import Path

# 設定專案根目錄
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from sparktimer.app import main


if __name__ == "__main__":
    main()
