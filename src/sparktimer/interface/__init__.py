"""Interface 定義模組"""

from .action import Action, Control
from .state import BlockStatus, SessionStatus

__all__ = [
    'Action',
    'Control',
    'BlockStatus',
    'SessionStatus',
]
