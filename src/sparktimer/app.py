#!/usr/bin/env python3
"""
SPARK Practice Timer 主控台入口

frame 來源在背景執行緒推進計時，主執行緒讀取使用者指令。
"""

import sys
from typing import Iterable, Optional, TextIO

from immutables import Map

from sparktimer.config.manager import ConfigManager
from sparktimer.core.block_view import control_buttons, render_block_line
from sparktimer.core.exceptions import ControlError
from sparktimer.core.practice_timer import PracticeTimer
from sparktimer.interface.action import Control
from sparktimer.store.store_config import create_configured_store
from sparktimer.utils.logger import logger, setup_global_exception_handler

QUIT_COMMANDS = ("quit", "exit", "q")
STATUS_COMMANDS = ("status", "s", "")


def render_session(session: Map) -> str:
    """繪製整個 Session：每個區塊一行，最後一行是可用的按鈕"""
    status = session["status"]
    lines = [render_block_line(block, status) for block in session["blocks"]]
    buttons = " / ".join(f"{label} ({command})" for command, label in control_buttons(status))
    lines.append(f"[{status}] {buttons}")
    return "\n".join(lines)


def parse_command(line: str) -> str:
    """
    解析一行輸入

    Raises:
        ControlError: 不是控制指令、狀態查詢或離開指令
    """
    command = line.strip().lower()
    if command in Control.ALL or command in QUIT_COMMANDS or command in STATUS_COMMANDS:
        return command
    raise ControlError(command)


def run(timer: PracticeTimer, lines: Iterable[str], out: TextIO = sys.stdout) -> None:
    """依序處理輸入指令直到 quit 或輸入結束"""
    timer.start_ticking()
    try:
        print(render_session(timer.session), file=out)
        for line in lines:
            try:
                command = parse_command(line)
            except ControlError as e:
                logger.warning(str(e))
                continue

            if command in QUIT_COMMANDS:
                break
            if command in Control.ALL:
                timer.control(command)
            print(render_session(timer.session), file=out)
    finally:
        timer.stop_ticking()


def main(argv: Optional[list] = None):
    """命令列入口點"""
    import argparse

    parser = argparse.ArgumentParser(description="SPARK Practice Timer - 依序執行的練習區塊計時器")
    parser.add_argument(
        "-c", "--config",
        type=str,
        help="配置檔案路徑"
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="使用測試用的短區塊長度"
    )
    parser.add_argument(
        "-v", "--version",
        action="store_true",
        help="顯示版本資訊"
    )

    args = parser.parse_args(argv)

    config = ConfigManager()
    if args.config:
        config.load(args.config)

    if args.version:
        logger.info(f"{config.system.name} v{config.system.version}")
        sys.exit(0)

    setup_global_exception_handler()

    duration_ms = config.timer.test_block_duration_ms if args.test else config.block_duration_ms
    logger.info(f"🎯 區塊長度 {duration_ms}ms，輸入 start / pause / resume / reset / status / quit")

    timer = PracticeTimer(store=create_configured_store(duration_ms))
    try:
        run(timer, sys.stdin)
    except KeyboardInterrupt:
        logger.info("使用者中斷")


if __name__ == "__main__":
    main()
