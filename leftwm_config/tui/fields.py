"""Editable settings for the interactive editor.

Every setting the editor exposes is named by an EditableField. The
functions here read and change a ConfigDocument in place and raise
ValueError with a user-facing message when an edit is rejected; the
screens only display what these functions return.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from ..commands import BaseCommand
from ..document import ConfigDocument
from ..keysyms import NO_MODIFIER, into_keysym, into_mod, is_placeholder
from ..models import (
    Backend,
    FocusBehaviour,
    FocusOnActivationBehaviour,
    InsertBehavior,
    Keybind,
    LayoutMode,
    LogLevel,
    WindowHidingStrategy,
)


class FieldKind(str, Enum):
    """How a field is edited."""
    TOGGLE = "toggle"
    CHOICE = "choice"
    TEXT = "text"


class EditableField(str, Enum):
    """Settings shown on the editor's home screen, by document attribute."""
    MODKEY = "modkey"
    MOUSEKEY = "mousekey"
    MAX_WINDOW_WIDTH = "max_window_width"
    TAGS = "tags"
    LAYOUT_MODE = "layout_mode"
    INSERT_BEHAVIOR = "insert_behavior"
    FOCUS_BEHAVIOUR = "focus_behaviour"
    FOCUS_ON_ACTIVATION = "focus_on_activation"
    WINDOW_HIDING_STRATEGY = "window_hiding_strategy"
    BACKEND = "backend"
    CREATE_FOLLOWS_CURSOR = "create_follows_cursor"
    DISABLE_CURRENT_TAG_SWAP = "disable_current_tag_swap"
    DISABLE_TILE_DRAG = "disable_tile_drag"
    DISABLE_WINDOW_SNAP = "disable_window_snap"
    FOCUS_NEW_WINDOWS = "focus_new_windows"
    SINGLE_WINDOW_BORDER = "single_window_border"
    SLOPPY_MOUSE_FOLLOWS_FOCUS = "sloppy_mouse_follows_focus"
    DISABLE_CURSOR_REPOSITION_ON_RESIZE = "disable_cursor_reposition_on_resize"
    AUTO_DERIVE_WORKSPACES = "auto_derive_workspaces"
    LOG_LEVEL = "log_level"
    STATE_PATH = "state_path"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()


# create_follows_cursor is tri-state; "Default" leaves it unset.
DEFAULT_CHOICE = "Default"

_CHOICE_ENUMS: Dict[EditableField, type] = {
    EditableField.LAYOUT_MODE: LayoutMode,
    EditableField.INSERT_BEHAVIOR: InsertBehavior,
    EditableField.FOCUS_BEHAVIOUR: FocusBehaviour,
    EditableField.FOCUS_ON_ACTIVATION: FocusOnActivationBehaviour,
    EditableField.WINDOW_HIDING_STRATEGY: WindowHidingStrategy,
    EditableField.BACKEND: Backend,
}

_TEXT_FIELDS = {
    EditableField.MODKEY,
    EditableField.MOUSEKEY,
    EditableField.MAX_WINDOW_WIDTH,
    EditableField.TAGS,
    EditableField.LOG_LEVEL,
    EditableField.STATE_PATH,
}


def field_kind(field: EditableField) -> FieldKind:
    if field in _TEXT_FIELDS:
        return FieldKind.TEXT
    if field in _CHOICE_ENUMS or field == EditableField.CREATE_FOLLOWS_CURSOR:
        return FieldKind.CHOICE
    return FieldKind.TOGGLE


def display_value(document: ConfigDocument, field: EditableField) -> str:
    """Current value of a field as shown in the editor."""
    value = getattr(document, field.value)
    if value is None:
        return DEFAULT_CHOICE if field == EditableField.CREATE_FOLLOWS_CURSOR else ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        separator = "+" if field == EditableField.MOUSEKEY else ", "
        return separator.join(str(item) for item in value)
    return str(value)


def toggle(document: ConfigDocument, field: EditableField) -> bool:
    """Flip a boolean field and return its new value."""
    if field_kind(field) != FieldKind.TOGGLE:
        raise ValueError(f"{field.label} is not a toggle")
    value = not getattr(document, field.value)
    setattr(document, field.value, value)
    return value


def choices(field: EditableField) -> List[str]:
    """Options offered by a choice field, in display order."""
    if field == EditableField.CREATE_FOLLOWS_CURSOR:
        return [DEFAULT_CHOICE, "true", "false"]
    if field not in _CHOICE_ENUMS:
        raise ValueError(f"{field.label} is not a choice")
    return [member.value for member in _CHOICE_ENUMS[field]]


def set_choice(document: ConfigDocument, field: EditableField, choice: str) -> None:
    if choice not in choices(field):
        raise ValueError(f"`{choice}` is not a valid {field.label.lower()}")
    if field == EditableField.CREATE_FOLLOWS_CURSOR:
        value: Any = None if choice == DEFAULT_CHOICE else choice == "true"
    else:
        value = _CHOICE_ENUMS[field](choice)
    setattr(document, field.value, value)


# Text parsers

def parse_modifier_names(text: str) -> List[str]:
    """
    Parse `modkey+Shift` (or comma separated) into modifier names.

    Raises:
        ValueError: If a name is neither a placeholder nor a known modifier
    """
    names = [part.strip() for part in text.replace(",", "+").split("+") if part.strip()]
    for name in names:
        if not is_placeholder(name) and into_mod(name) is None:
            raise ValueError(f"Modifier `{name}` is not valid")
    return names


def parse_modkey(text: str) -> str:
    name = text.strip()
    if not name:
        raise ValueError("Modkey cannot be empty")
    if is_placeholder(name) or name == NO_MODIFIER or into_mod(name) is None:
        raise ValueError(f"Modkey `{name}` is not a modifier")
    return name


def parse_mousekey(text: str) -> Any:
    names = parse_modifier_names(text)
    if len(names) == 1:
        return names[0]
    # An empty list is allowed; the validator warns about it.
    return names


def parse_max_window_width(text: str) -> Any:
    """Empty for none, an integer for pixels or a float for a ratio."""
    text = text.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise ValueError("Max window width must be a whole number of pixels or a ratio like 0.5") from None


def parse_tags(text: str) -> List[str]:
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def parse_log_level(text: str) -> str:
    level = text.strip().lower()
    if level not in {item.value for item in LogLevel}:
        raise ValueError(f"Log level must be one of {', '.join(item.value for item in LogLevel)}")
    return level


def parse_state_path(text: str) -> Optional[str]:
    return text.strip() or None


_TEXT_PARSERS = {
    EditableField.MODKEY: parse_modkey,
    EditableField.MOUSEKEY: parse_mousekey,
    EditableField.MAX_WINDOW_WIDTH: parse_max_window_width,
    EditableField.TAGS: parse_tags,
    EditableField.LOG_LEVEL: parse_log_level,
    EditableField.STATE_PATH: parse_state_path,
}


def set_text(document: ConfigDocument, field: EditableField, text: str) -> None:
    """
    Parse text typed for a field and store it.

    Raises:
        ValueError: If the text is rejected
    """
    if field not in _TEXT_PARSERS:
        raise ValueError(f"{field.label} is not a text field")
    setattr(document, field.value, _TEXT_PARSERS[field](text))


# Keybind edits

def parse_command(text: str) -> BaseCommand:
    try:
        return BaseCommand(text.strip())
    except ValueError:
        raise ValueError(f"Unknown command `{text.strip()}`") from None


def parse_key(text: str) -> str:
    key = text.strip()
    if into_keysym(key) is None:
        raise ValueError(f"Key `{key}` is not valid")
    return key


def build_keybind(command: str, value: str, modifiers: str, key: str) -> Keybind:
    """
    Build a keybind from the editor's four inputs.

    Command, modifier and key names are checked here; the value is kept
    as typed and checked by the validator.
    """
    return Keybind(
        command=parse_command(command),
        value=value,
        modifier=parse_modifier_names(modifiers) or None,
        key=parse_key(key),
    )


def replace_keybind(document: ConfigDocument, index: int, keybind: Keybind) -> None:
    document.keybind[index] = keybind


def add_keybind(document: ConfigDocument, keybind: Keybind) -> int:
    """Append a keybind and return its index."""
    document.keybind.append(keybind)
    return len(document.keybind) - 1


def remove_keybind(document: ConfigDocument, index: int) -> Keybind:
    return document.keybind.pop(index)


def keybind_inputs(keybind: Keybind) -> Dict[str, str]:
    """The editor's four input values for an existing keybind."""
    return {
        "command": keybind.command.value,
        "value": keybind.value,
        "modifiers": "" if keybind.modifier is None else "+".join(keybind.modifiers()),
        "key": keybind.key,
    }
