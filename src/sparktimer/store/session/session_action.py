# src/sparktimer/store/session/session_action.py
from pystorex import create_action

from sparktimer.interface.action import Action, Control


def add_session_title(action_type: str) -> str:
    """
    把 snake_case 的 Action 轉成 Title Case，並加上 [Session] 前綴
    例: "tick" -> "[Session] Tick"
    """
    title = "".join(word.capitalize() for word in action_type.split("_"))
    return f"[Session] {title}"


# =================================
# Actions
# =================================

tick = create_action(
    add_session_title(Action.TICK),
    lambda delta_ms: delta_ms,
)

control = create_action(
    add_session_title(Action.CONTROL),
    lambda control: control,
)


# =================================
# Control shortcuts
# =================================

def start_session():
    return control(Control.START)


def pause_session():
    return control(Control.PAUSE)


def resume_session():
    return control(Control.RESUME)


def reset_session():
    return control(Control.RESET)
