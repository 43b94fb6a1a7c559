"""
Built-in default values for a LeftWM configuration document.

Program discovery takes the search path as an explicit argument; callers
read $PATH once at the boundary and pass it in.
"""

import os
from pathlib import Path
from typing import List, Optional

from .commands import BaseCommand
from .models import Keybind, Layout, ScratchPad

WORKSPACES_NUM = 10

DEFAULT_MODKEY = "Mod4"
DEFAULT_MOUSEKEY = "Mod4"
DEFAULT_TAGS = ["1", "2", "3", "4", "5", "6", "7", "8", "9"]
DEFAULT_LOG_LEVEL = "debug"

# Ordered from least common to most common: an uncommon terminal on the
# machine was most likely installed on purpose. guake is last because it
# wants F12 and is better started from autostart.
TERMINALS = (
    "alacritty",
    "termite",
    "kitty",
    "urxvt",
    "rxvt",
    "st",
    "roxterm",
    "eterm",
    "xterm",
    "terminator",
    "terminology",
    "gnome-terminal",
    "xfce4-terminal",
    "konsole",
    "uxterm",
    "guake",
)
FALLBACK_TERMINAL = "termite"


def current_search_path() -> str:
    """Return $PATH, or an empty string when unset."""
    return os.environ.get("PATH", "")


def is_program_in_path(program: str, search_path: str) -> bool:
    """
    Check whether a program exists in any directory of a search path.

    Args:
        program: Executable name
        search_path: Colon-separated list of directories

    Returns:
        True if `<dir>/<program>` exists for some directory
    """
    for directory in search_path.split(os.pathsep):
        if directory and (Path(directory) / program).exists():
            return True
    return False


def default_terminal(search_path: str) -> str:
    """First terminal from TERMINALS found on the search path."""
    for terminal in TERMINALS:
        if is_program_in_path(terminal, search_path):
            return terminal
    return FALLBACK_TERMINAL


def exit_strategy(search_path: str) -> str:
    """Command used to leave the session."""
    if is_program_in_path("loginctl", search_path):
        return "loginctl kill-session $XDG_SESSION_ID"
    return "pkill leftwm"


def _bind(command: BaseCommand, modifier: List[str], key: str, value: str = "") -> Keybind:
    return Keybind(command=command, value=value, modifier=modifier, key=key)


def default_keybinds(search_path: Optional[str] = None) -> List[Keybind]:
    """
    Build the default keybind list.

    Args:
        search_path: Search path used to pick the terminal and exit
            command; defaults to $PATH

    Returns:
        List of default keybinds, in declaration order
    """
    if search_path is None:
        search_path = current_search_path()

    mod = ["modkey"]
    mod_shift = ["modkey", "Shift"]
    mod_ctrl = ["modkey", "Control"]

    binds = [
        _bind(BaseCommand.EXECUTE, mod, "p", "dmenu_run"),
        _bind(BaseCommand.EXECUTE, mod_shift, "Return", default_terminal(search_path)),
        _bind(BaseCommand.CLOSE_WINDOW, mod_shift, "q"),
        _bind(BaseCommand.SOFT_RELOAD, mod_shift, "r"),
        _bind(BaseCommand.EXECUTE, mod_shift, "x", exit_strategy(search_path)),
        _bind(BaseCommand.EXECUTE, mod_ctrl, "l", "slock"),
        _bind(BaseCommand.MOVE_TO_LAST_WORKSPACE, mod_shift, "w"),
        _bind(BaseCommand.SWAP_TAGS, mod, "w"),
        _bind(BaseCommand.MOVE_WINDOW_UP, mod_shift, "k"),
        _bind(BaseCommand.MOVE_WINDOW_DOWN, mod_shift, "j"),
        _bind(BaseCommand.MOVE_WINDOW_TOP, mod, "Return"),
        _bind(BaseCommand.FOCUS_WINDOW_UP, mod, "k"),
        _bind(BaseCommand.FOCUS_WINDOW_DOWN, mod, "j"),
        _bind(BaseCommand.NEXT_LAYOUT, mod_ctrl, "k"),
        _bind(BaseCommand.PREVIOUS_LAYOUT, mod_ctrl, "j"),
        _bind(BaseCommand.FOCUS_WORKSPACE_NEXT, mod, "l"),
        _bind(BaseCommand.FOCUS_WORKSPACE_PREVIOUS, mod, "h"),
        _bind(BaseCommand.MOVE_WINDOW_UP, mod_shift, "Up"),
        _bind(BaseCommand.MOVE_WINDOW_DOWN, mod_shift, "Down"),
        _bind(BaseCommand.FOCUS_WINDOW_UP, mod, "Up"),
        _bind(BaseCommand.FOCUS_WINDOW_DOWN, mod, "Down"),
        _bind(BaseCommand.NEXT_LAYOUT, mod_ctrl, "Up"),
        _bind(BaseCommand.PREVIOUS_LAYOUT, mod_ctrl, "Down"),
        _bind(BaseCommand.FOCUS_WORKSPACE_NEXT, mod, "Right"),
        _bind(BaseCommand.FOCUS_WORKSPACE_PREVIOUS, mod, "Left"),
    ]

    for i in range(1, WORKSPACES_NUM):
        binds.append(_bind(BaseCommand.GOTO_TAG, mod, str(i), str(i)))

    for i in range(1, WORKSPACES_NUM):
        binds.append(_bind(BaseCommand.MOVE_TO_TAG, mod_shift, str(i), str(i)))

    return binds


def default_scratchpads() -> List[ScratchPad]:
    return [
        ScratchPad(
            name="Alacritty",
            value="alacritty",
            x=860,
            y=390,
            height=300,
            width=200,
        )
    ]


def default_layouts() -> List[Layout]:
    return list(Layout)


def default_tags() -> List[str]:
    return list(DEFAULT_TAGS)
