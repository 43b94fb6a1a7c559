"""
Normalized keybind commands.

These are the strongly-typed counterparts of BaseCommand: each variant
carries only the payload its command needs, already parsed out of the
free-text value. They are produced exclusively by the keybind normalizer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .models import Layout


class CoreAction(str, Enum):
    """Commands that carry no payload."""
    CLOSE_WINDOW = "CloseWindow"
    SWAP_SCREENS = "SwapScreens"
    SOFT_RELOAD = "SoftReload"
    HARD_RELOAD = "HardReload"
    TOGGLE_FULL_SCREEN = "ToggleFullScreen"
    TOGGLE_STICKY = "ToggleSticky"
    RETURN_TO_LAST_TAG = "ReturnToLastTag"
    FLOATING_TO_TILE = "FloatingToTile"
    TILE_TO_FLOATING = "TileToFloating"
    TOGGLE_FLOATING = "ToggleFloating"
    MOVE_WINDOW_UP = "MoveWindowUp"
    MOVE_WINDOW_DOWN = "MoveWindowDown"
    FOCUS_NEXT_TAG = "FocusNextTag"
    FOCUS_PREVIOUS_TAG = "FocusPreviousTag"
    FOCUS_WINDOW_UP = "FocusWindowUp"
    FOCUS_WINDOW_DOWN = "FocusWindowDown"
    FOCUS_WORKSPACE_NEXT = "FocusWorkspaceNext"
    FOCUS_WORKSPACE_PREVIOUS = "FocusWorkspacePrevious"
    MOVE_WINDOW_TO_LAST_WORKSPACE = "MoveWindowToLastWorkspace"
    MOVE_WINDOW_TO_NEXT_WORKSPACE = "MoveWindowToNextWorkspace"
    MOVE_WINDOW_TO_PREVIOUS_WORKSPACE = "MoveWindowToPreviousWorkspace"
    MOUSE_MOVE_WINDOW = "MouseMoveWindow"
    NEXT_LAYOUT = "NextLayout"
    PREVIOUS_LAYOUT = "PreviousLayout"
    ROTATE_TAG = "RotateTag"
    CLOSE_ALL_OTHER_WINDOWS = "CloseAllOtherWindows"


class CoreCommand:
    """Base class of every normalized command."""


@dataclass(frozen=True)
class Simple(CoreCommand):
    action: CoreAction


@dataclass(frozen=True)
class Execute(CoreCommand):
    command: str


@dataclass(frozen=True)
class ToggleScratchPad(CoreCommand):
    name: str


@dataclass(frozen=True)
class GoToTag(CoreCommand):
    tag: int
    swap: bool


@dataclass(frozen=True)
class MoveWindowTop(CoreCommand):
    swap: bool


@dataclass(frozen=True)
class FocusWindow(CoreCommand):
    selector: str


@dataclass(frozen=True)
class FocusWindowTop(CoreCommand):
    swap: bool


@dataclass(frozen=True)
class SendWindowToTag(CoreCommand):
    tag: int
    # Always None in a config; a concrete window is chosen at runtime.
    window: Optional[int] = None


@dataclass(frozen=True)
class SetLayout(CoreCommand):
    layout: Layout


@dataclass(frozen=True)
class IncreaseMainWidth(CoreCommand):
    delta: int


@dataclass(frozen=True)
class DecreaseMainWidth(CoreCommand):
    delta: int


@dataclass(frozen=True)
class SetMarginMultiplier(CoreCommand):
    multiplier: float


@dataclass(frozen=True)
class Other(CoreCommand):
    """Opaque command forwarded to a side-system (themes)."""
    payload: str


@dataclass(frozen=True)
class CoreKeybind:
    """A keybind that passed normalization."""
    command: CoreCommand
    modifier: List[str] = field(default_factory=list)
    key: str = ""
