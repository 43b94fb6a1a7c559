"""
Command catalog for keybinds.

BaseCommand is the raw, serialization-facing command tag as it appears in
a config file. Each tag is described by a CommandSpec: whether it needs a
non-empty value and what type that value must parse as.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class BaseCommand(str, Enum):
    """Command tags a keybind may invoke."""
    EXECUTE = "Execute"
    CLOSE_WINDOW = "CloseWindow"
    SWAP_TAGS = "SwapTags"
    SOFT_RELOAD = "SoftReload"
    HARD_RELOAD = "HardReload"
    TOGGLE_SCRATCH_PAD = "ToggleScratchPad"
    TOGGLE_FULL_SCREEN = "ToggleFullScreen"
    TOGGLE_STICKY = "ToggleSticky"
    GOTO_TAG = "GotoTag"
    RETURN_TO_LAST_TAG = "ReturnToLastTag"
    FLOATING_TO_TILE = "FloatingToTile"
    TILE_TO_FLOATING = "TileToFloating"
    TOGGLE_FLOATING = "ToggleFloating"
    MOVE_WINDOW_UP = "MoveWindowUp"
    MOVE_WINDOW_DOWN = "MoveWindowDown"
    MOVE_WINDOW_TOP = "MoveWindowTop"
    FOCUS_NEXT_TAG = "FocusNextTag"
    FOCUS_PREVIOUS_TAG = "FocusPreviousTag"
    FOCUS_WINDOW = "FocusWindow"
    FOCUS_WINDOW_UP = "FocusWindowUp"
    FOCUS_WINDOW_DOWN = "FocusWindowDown"
    FOCUS_WINDOW_TOP = "FocusWindowTop"
    FOCUS_WORKSPACE_NEXT = "FocusWorkspaceNext"
    FOCUS_WORKSPACE_PREVIOUS = "FocusWorkspacePrevious"
    MOVE_TO_TAG = "MoveToTag"
    MOVE_TO_LAST_WORKSPACE = "MoveToLastWorkspace"
    MOVE_WINDOW_TO_NEXT_WORKSPACE = "MoveWindowToNextWorkspace"
    MOVE_WINDOW_TO_PREVIOUS_WORKSPACE = "MoveWindowToPreviousWorkspace"
    MOUSE_MOVE_WINDOW = "MouseMoveWindow"
    NEXT_LAYOUT = "NextLayout"
    PREVIOUS_LAYOUT = "PreviousLayout"
    SET_LAYOUT = "SetLayout"
    ROTATE_TAG = "RotateTag"
    INCREASE_MAIN_WIDTH = "IncreaseMainWidth"
    DECREASE_MAIN_WIDTH = "DecreaseMainWidth"
    SET_MARGIN_MULTIPLIER = "SetMarginMultiplier"
    # Handled by the theme side-system, not the window manager core
    UNLOAD_THEME = "UnloadTheme"
    LOAD_THEME = "LoadTheme"
    CLOSE_ALL_OTHER_WINDOWS = "CloseAllOtherWindows"

    def __str__(self) -> str:
        return self.value


class ValueKind(str, Enum):
    """What a command expects in its `value` field."""
    NONE = "none"            # value is ignored
    TEXT = "text"            # free text, passed through
    TAG_INDEX = "unsigned integer"
    WIDTH_DELTA = "signed 8-bit integer"
    MARGIN_MULTIPLIER = "floating point number"
    SWAP_FLAG = "boolean"
    LAYOUT = "layout name"


@dataclass(frozen=True)
class CommandSpec:
    """Static description of one command tag."""
    needs_value: bool
    value_kind: ValueKind
    description: str = ""


COMMAND_CATALOG: Dict[BaseCommand, CommandSpec] = {
    BaseCommand.EXECUTE: CommandSpec(True, ValueKind.TEXT, "Run a shell command"),
    BaseCommand.CLOSE_WINDOW: CommandSpec(False, ValueKind.NONE, "Close the focused window"),
    BaseCommand.SWAP_TAGS: CommandSpec(False, ValueKind.NONE, "Swap the tags of the last two active workspaces"),
    BaseCommand.SOFT_RELOAD: CommandSpec(False, ValueKind.NONE, "Reload LeftWM keeping state"),
    BaseCommand.HARD_RELOAD: CommandSpec(False, ValueKind.NONE, "Restart LeftWM"),
    BaseCommand.TOGGLE_SCRATCH_PAD: CommandSpec(True, ValueKind.TEXT, "Show or hide a named scratchpad"),
    BaseCommand.TOGGLE_FULL_SCREEN: CommandSpec(False, ValueKind.NONE, "Toggle fullscreen"),
    BaseCommand.TOGGLE_STICKY: CommandSpec(False, ValueKind.NONE, "Toggle sticky"),
    BaseCommand.GOTO_TAG: CommandSpec(True, ValueKind.TAG_INDEX, "Switch to a tag"),
    BaseCommand.RETURN_TO_LAST_TAG: CommandSpec(False, ValueKind.NONE, "Switch to the previous tag"),
    BaseCommand.FLOATING_TO_TILE: CommandSpec(False, ValueKind.NONE, "Tile the focused floating window"),
    BaseCommand.TILE_TO_FLOATING: CommandSpec(False, ValueKind.NONE, "Float the focused tiled window"),
    BaseCommand.TOGGLE_FLOATING: CommandSpec(False, ValueKind.NONE, "Toggle floating"),
    BaseCommand.MOVE_WINDOW_UP: CommandSpec(False, ValueKind.NONE, "Move window up the stack"),
    BaseCommand.MOVE_WINDOW_DOWN: CommandSpec(False, ValueKind.NONE, "Move window down the stack"),
    BaseCommand.MOVE_WINDOW_TOP: CommandSpec(False, ValueKind.SWAP_FLAG, "Move window to the main slot"),
    BaseCommand.FOCUS_NEXT_TAG: CommandSpec(False, ValueKind.NONE, "Focus the next tag"),
    BaseCommand.FOCUS_PREVIOUS_TAG: CommandSpec(False, ValueKind.NONE, "Focus the previous tag"),
    BaseCommand.FOCUS_WINDOW: CommandSpec(False, ValueKind.TEXT, "Focus a window by class or title"),
    BaseCommand.FOCUS_WINDOW_UP: CommandSpec(False, ValueKind.NONE, "Focus the window above"),
    BaseCommand.FOCUS_WINDOW_DOWN: CommandSpec(False, ValueKind.NONE, "Focus the window below"),
    BaseCommand.FOCUS_WINDOW_TOP: CommandSpec(False, ValueKind.SWAP_FLAG, "Focus the main window"),
    BaseCommand.FOCUS_WORKSPACE_NEXT: CommandSpec(False, ValueKind.NONE, "Focus the next workspace"),
    BaseCommand.FOCUS_WORKSPACE_PREVIOUS: CommandSpec(False, ValueKind.NONE, "Focus the previous workspace"),
    BaseCommand.MOVE_TO_TAG: CommandSpec(True, ValueKind.TAG_INDEX, "Send the focused window to a tag"),
    BaseCommand.MOVE_TO_LAST_WORKSPACE: CommandSpec(False, ValueKind.NONE, "Move window to the last workspace"),
    BaseCommand.MOVE_WINDOW_TO_NEXT_WORKSPACE: CommandSpec(False, ValueKind.NONE, "Move window to the next workspace"),
    BaseCommand.MOVE_WINDOW_TO_PREVIOUS_WORKSPACE: CommandSpec(False, ValueKind.NONE, "Move window to the previous workspace"),
    BaseCommand.MOUSE_MOVE_WINDOW: CommandSpec(False, ValueKind.NONE, "Move window with the mouse"),
    BaseCommand.NEXT_LAYOUT: CommandSpec(False, ValueKind.NONE, "Switch to the next layout"),
    BaseCommand.PREVIOUS_LAYOUT: CommandSpec(False, ValueKind.NONE, "Switch to the previous layout"),
    BaseCommand.SET_LAYOUT: CommandSpec(True, ValueKind.LAYOUT, "Switch to a named layout"),
    BaseCommand.ROTATE_TAG: CommandSpec(False, ValueKind.NONE, "Rotate the current tag's layout"),
    BaseCommand.INCREASE_MAIN_WIDTH: CommandSpec(True, ValueKind.WIDTH_DELTA, "Grow the main column"),
    BaseCommand.DECREASE_MAIN_WIDTH: CommandSpec(True, ValueKind.WIDTH_DELTA, "Shrink the main column"),
    BaseCommand.SET_MARGIN_MULTIPLIER: CommandSpec(True, ValueKind.MARGIN_MULTIPLIER, "Scale window margins"),
    BaseCommand.UNLOAD_THEME: CommandSpec(False, ValueKind.NONE, "Unload the current theme"),
    BaseCommand.LOAD_THEME: CommandSpec(True, ValueKind.TEXT, "Load a theme from a path"),
    BaseCommand.CLOSE_ALL_OTHER_WINDOWS: CommandSpec(False, ValueKind.NONE, "Close every other window on the tag"),
}


def needs_value(command: BaseCommand) -> bool:
    """Return True when the command requires a non-empty value."""
    return COMMAND_CATALOG[command].needs_value


def value_kind(command: BaseCommand) -> ValueKind:
    """Return the kind of value the command expects."""
    return COMMAND_CATALOG[command].value_kind
