"""
Keybind normalization.

Turns a declared Keybind (command tag + free-text value + modifiers +
key) into a CoreKeybind whose command payload is already parsed, and
defines KeyChord, the unit of conflict detection.
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Tuple

from . import core
from .commands import BaseCommand, ValueKind, needs_value, value_kind
from .errors import InvalidValueTypeError, MissingValueError
from .models import Keybind, Layout

if TYPE_CHECKING:
    from .document import ConfigDocument

_UNSIGNED = re.compile(r"^\+?[0-9]+$")
_SIGNED = re.compile(r"^[+-]?[0-9]+$")

USIZE_MAX = 2 ** 64 - 1
I8_MIN, I8_MAX = -128, 127


@dataclass(frozen=True)
class KeyChord:
    """Sorted modifier set plus key; two equal chords trigger the same binding."""
    modifiers: Tuple[str, ...]
    key: str

    @classmethod
    def of(cls, keybind: Keybind) -> "KeyChord":
        return cls(tuple(sorted(keybind.modifiers())), keybind.key)

    def __str__(self) -> str:
        return "+".join(self.modifiers + (self.key,))


# Value parsers. Each accepts exactly what the window manager accepts and
# raises ValueError otherwise.

def parse_tag_index(value: str) -> int:
    """Parse an unsigned tag index."""
    if not _UNSIGNED.match(value):
        raise ValueError(value)
    index = int(value)
    if index > USIZE_MAX:
        raise ValueError(value)
    return index


def parse_width_delta(value: str) -> int:
    """Parse a signed 8-bit width delta."""
    if not _SIGNED.match(value):
        raise ValueError(value)
    delta = int(value)
    if not I8_MIN <= delta <= I8_MAX:
        raise ValueError(value)
    return delta


def parse_margin_multiplier(value: str) -> float:
    """Parse a floating point margin multiplier."""
    # float() tolerates surrounding whitespace and digit separators; the
    # window manager does not.
    if value != value.strip() or "_" in value or not value.isascii():
        raise ValueError(value)
    return float(value)


def parse_bool(value: str) -> bool:
    """Parse `true` or `false`, exactly."""
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(value)


def parse_layout(value: str) -> Layout:
    """Parse a built-in layout name."""
    return Layout(value)


VALUE_PARSERS: Dict[ValueKind, Callable[[str], object]] = {
    ValueKind.TAG_INDEX: parse_tag_index,
    ValueKind.WIDTH_DELTA: parse_width_delta,
    ValueKind.MARGIN_MULTIPLIER: parse_margin_multiplier,
    ValueKind.SWAP_FLAG: parse_bool,
    ValueKind.LAYOUT: parse_layout,
}

_SIMPLE_ACTIONS: Dict[BaseCommand, core.CoreAction] = {
    BaseCommand.CLOSE_WINDOW: core.CoreAction.CLOSE_WINDOW,
    BaseCommand.SWAP_TAGS: core.CoreAction.SWAP_SCREENS,
    BaseCommand.SOFT_RELOAD: core.CoreAction.SOFT_RELOAD,
    BaseCommand.HARD_RELOAD: core.CoreAction.HARD_RELOAD,
    BaseCommand.TOGGLE_FULL_SCREEN: core.CoreAction.TOGGLE_FULL_SCREEN,
    BaseCommand.TOGGLE_STICKY: core.CoreAction.TOGGLE_STICKY,
    BaseCommand.RETURN_TO_LAST_TAG: core.CoreAction.RETURN_TO_LAST_TAG,
    BaseCommand.FLOATING_TO_TILE: core.CoreAction.FLOATING_TO_TILE,
    BaseCommand.TILE_TO_FLOATING: core.CoreAction.TILE_TO_FLOATING,
    BaseCommand.TOGGLE_FLOATING: core.CoreAction.TOGGLE_FLOATING,
    BaseCommand.MOVE_WINDOW_UP: core.CoreAction.MOVE_WINDOW_UP,
    BaseCommand.MOVE_WINDOW_DOWN: core.CoreAction.MOVE_WINDOW_DOWN,
    BaseCommand.FOCUS_NEXT_TAG: core.CoreAction.FOCUS_NEXT_TAG,
    BaseCommand.FOCUS_PREVIOUS_TAG: core.CoreAction.FOCUS_PREVIOUS_TAG,
    BaseCommand.FOCUS_WINDOW_UP: core.CoreAction.FOCUS_WINDOW_UP,
    BaseCommand.FOCUS_WINDOW_DOWN: core.CoreAction.FOCUS_WINDOW_DOWN,
    BaseCommand.FOCUS_WORKSPACE_NEXT: core.CoreAction.FOCUS_WORKSPACE_NEXT,
    BaseCommand.FOCUS_WORKSPACE_PREVIOUS: core.CoreAction.FOCUS_WORKSPACE_PREVIOUS,
    BaseCommand.MOVE_TO_LAST_WORKSPACE: core.CoreAction.MOVE_WINDOW_TO_LAST_WORKSPACE,
    BaseCommand.MOVE_WINDOW_TO_NEXT_WORKSPACE: core.CoreAction.MOVE_WINDOW_TO_NEXT_WORKSPACE,
    BaseCommand.MOVE_WINDOW_TO_PREVIOUS_WORKSPACE: core.CoreAction.MOVE_WINDOW_TO_PREVIOUS_WORKSPACE,
    BaseCommand.MOUSE_MOVE_WINDOW: core.CoreAction.MOUSE_MOVE_WINDOW,
    BaseCommand.NEXT_LAYOUT: core.CoreAction.NEXT_LAYOUT,
    BaseCommand.PREVIOUS_LAYOUT: core.CoreAction.PREVIOUS_LAYOUT,
    BaseCommand.ROTATE_TAG: core.CoreAction.ROTATE_TAG,
    BaseCommand.CLOSE_ALL_OTHER_WINDOWS: core.CoreAction.CLOSE_ALL_OTHER_WINDOWS,
}


class KeybindNormalizer:
    """Converts declared keybinds into CoreKeybinds for one document."""

    def __init__(self, document: "ConfigDocument"):
        """
        Initialize normalizer.

        Args:
            document: Enclosing document; GotoTag reads its
                disable_current_tag_swap flag
        """
        self.document = document

    def normalize(self, keybind: Keybind) -> core.CoreKeybind:
        """
        Normalize one keybind.

        Only the command value is checked here; key and modifier names
        are resolved by the validator so that every bad name is reported.

        Args:
            keybind: Keybind as declared in the document

        Returns:
            CoreKeybind with a typed command payload

        Raises:
            MissingValueError: If a required value is empty
            InvalidValueTypeError: If the value does not parse as the
                command's value type
        """
        command = self._convert_command(keybind)
        return core.CoreKeybind(
            command=command,
            modifier=keybind.modifiers(),
            key=keybind.key,
        )

    def _convert_command(self, keybind: Keybind) -> core.CoreCommand:
        tag = keybind.command
        value = keybind.value

        if needs_value(tag) and value == "":
            raise MissingValueError(tag.value)

        if tag in _SIMPLE_ACTIONS:
            return core.Simple(_SIMPLE_ACTIONS[tag])

        if tag == BaseCommand.EXECUTE:
            return core.Execute(value)
        if tag == BaseCommand.TOGGLE_SCRATCH_PAD:
            return core.ToggleScratchPad(value)
        if tag == BaseCommand.FOCUS_WINDOW:
            return core.FocusWindow(value)
        if tag == BaseCommand.GOTO_TAG:
            return core.GoToTag(
                tag=self._parse(keybind),
                swap=not self.document.disable_current_tag_swap,
            )
        if tag == BaseCommand.MOVE_TO_TAG:
            return core.SendWindowToTag(tag=self._parse(keybind))
        # The two swap commands default differently when no value is given.
        if tag == BaseCommand.MOVE_WINDOW_TOP:
            return core.MoveWindowTop(swap=True if value == "" else self._parse(keybind))
        if tag == BaseCommand.FOCUS_WINDOW_TOP:
            return core.FocusWindowTop(swap=False if value == "" else self._parse(keybind))
        if tag == BaseCommand.SET_LAYOUT:
            return core.SetLayout(self._parse(keybind))
        if tag == BaseCommand.INCREASE_MAIN_WIDTH:
            return core.IncreaseMainWidth(self._parse(keybind))
        if tag == BaseCommand.DECREASE_MAIN_WIDTH:
            return core.DecreaseMainWidth(self._parse(keybind))
        if tag == BaseCommand.SET_MARGIN_MULTIPLIER:
            return core.SetMarginMultiplier(self._parse(keybind))
        if tag == BaseCommand.UNLOAD_THEME:
            return core.Other("UnloadTheme")
        if tag == BaseCommand.LOAD_THEME:
            return core.Other(f"LoadTheme {value}")

        raise AssertionError(f"unhandled command {tag!r}")

    def _parse(self, keybind: Keybind):
        kind = value_kind(keybind.command)
        try:
            return VALUE_PARSERS[kind](keybind.value)
        except ValueError:
            raise InvalidValueTypeError(keybind.command.value, keybind.value, kind.value) from None

