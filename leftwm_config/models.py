"""
Pydantic data models for LeftWM configuration.

Defines the records a configuration document is built from (keybinds,
workspaces, scratchpads, window rules), the fixed-choice settings, and
the validation result models.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from .commands import BaseCommand
from .errors import ConfigError, ErrorCode, Severity
from .keysyms import NO_MODIFIER


# Enumerations

class Layout(str, Enum):
    """Built-in tiling layouts."""
    MAIN_AND_VERT_STACK = "MainAndVertStack"
    MAIN_AND_HORIZONTAL_STACK = "MainAndHorizontalStack"
    MAIN_AND_DECK = "MainAndDeck"
    GRID_HORIZONTAL = "GridHorizontal"
    EVEN_HORIZONTAL = "EvenHorizontal"
    EVEN_VERTICAL = "EvenVertical"
    FIBONACCI = "Fibonacci"
    LEFT_MAIN = "LeftMain"
    CENTER_MAIN = "CenterMain"
    CENTER_MAIN_BALANCED = "CenterMainBalanced"
    CENTER_MAIN_FLUID = "CenterMainFluid"
    MONOCLE = "Monocle"
    RIGHT_WIDER_LEFT_STACK = "RightWiderLeftStack"
    LEFT_WIDER_RIGHT_STACK = "LeftWiderRightStack"


class LayoutMode(str, Enum):
    """Whether layouts are remembered per tag or per workspace."""
    TAG = "Tag"
    WORKSPACE = "Workspace"


class InsertBehavior(str, Enum):
    """Where new windows enter the stack."""
    TOP = "Top"
    BOTTOM = "Bottom"
    BEFORE_CURRENT = "BeforeCurrent"
    AFTER_CURRENT = "AfterCurrent"


class FocusBehaviour(str, Enum):
    """How windows receive focus."""
    SLOPPY = "Sloppy"
    CLICK_TO = "ClickTo"
    DRIVEN = "Driven"


class FocusOnActivationBehaviour(str, Enum):
    """What happens when a window asks to be activated."""
    DO_NOTHING = "DoNothing"
    MARK_URGENT = "MarkUrgent"
    SWITCH_TO = "SwitchTo"


class WindowHidingStrategy(str, Enum):
    """How windows on hidden tags are taken off screen."""
    UNMAP = "Unmap"
    MOVE_MINIMIZE = "MoveMinimize"
    MOVE_ONLY = "MoveOnly"


class Backend(str, Enum):
    """X11 client library used by the window manager."""
    XLIB = "XLib"
    X11RB = "X11rb"


class LogLevel(str, Enum):
    """Window manager log verbosity, stored lowercase in the document."""
    OFF = "off"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"


# A modifier is written either as a single name or as a list of names.
Modifier = Union[str, List[str]]

# Sizes are absolute pixels (int) or a ratio of the workspace (float).
Size = Union[StrictInt, float]


def modifier_list(modifier: Optional[Modifier]) -> List[str]:
    """
    Flatten a declared modifier into a list of names.

    Args:
        modifier: Single name, list of names, or None

    Returns:
        List of modifier names; ["None"] when no modifier was declared
    """
    if modifier is None:
        return [NO_MODIFIER]
    if isinstance(modifier, str):
        return [modifier]
    return list(modifier)


def modifier_is_empty(modifier: Modifier) -> bool:
    """Return True for an empty name or an empty list."""
    if isinstance(modifier, str):
        return modifier == ""
    return len(modifier) == 0


# Core Entities

class Keybind(BaseModel):
    """Keybind as declared in the config document."""

    command: BaseCommand = Field(..., description="Command tag to invoke")
    value: str = Field("", description="Command argument, meaning depends on command")
    modifier: Optional[Modifier] = Field(None, description="Modifier name or list of names")
    key: str = Field(..., description="X keysym name")

    def modifiers(self) -> List[str]:
        """Declared modifiers as a list, with the "None" sentinel when absent."""
        return modifier_list(self.modifier)

    def describe(self) -> str:
        """Short human-readable form, e.g. `modkey+Shift+q -> CloseWindow`."""
        chord = "+".join(self.modifiers() + [self.key])
        if self.value:
            return f"{chord} -> {self.command.value} {self.value!r}"
        return f"{chord} -> {self.command.value}"


class Workspace(BaseModel):
    """Screen region with geometry and an optional stable ID."""

    x: int = 0
    y: int = 0
    height: int = 0
    width: int = 0
    id: Optional[int] = Field(None, description="Stable workspace ID")
    max_window_width: Optional[Size] = None
    layouts: Optional[List[Layout]] = Field(None, description="Per-workspace layout override")


class ScratchPad(BaseModel):
    """Named on-demand floating window."""

    name: str
    args: Optional[List[str]] = None
    value: str = Field(..., description="Command that spawns the scratchpad window")
    x: Optional[Size] = None
    y: Optional[Size] = None
    height: Optional[Size] = None
    width: Optional[Size] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate scratchpad name is not empty."""
        if not v.strip():
            raise ValueError("Scratchpad name cannot be empty")
        return v


class WindowHook(BaseModel):
    """
    Window rule matching by WM_CLASS and/or title.

    Matching windows spawn on `spawn_on_tag` (1-indexed) and/or with the
    given floating state.
    """

    window_class: Optional[str] = None
    window_title: Optional[str] = None
    spawn_on_tag: Optional[int] = Field(None, ge=0)
    spawn_floating: Optional[bool] = None


# Validation Result Models

class ValidationFinding(BaseModel):
    """One problem reported by the validator."""

    model_config = ConfigDict(frozen=True)

    code: int
    kind: str
    severity: Severity
    message: str
    suggestion: Optional[str] = None
    context: Dict[str, Any] = Field(default_factory=dict)
    keybind: Optional[Keybind] = None
    # Position of `keybind` in the document's keybind list
    keybind_index: Optional[int] = None

    @classmethod
    def from_error(
        cls,
        error: ConfigError,
        keybind: Optional[Keybind] = None,
        keybind_index: Optional[int] = None,
    ) -> "ValidationFinding":
        """
        Build a finding from a raised ConfigError.

        Args:
            error: The error the normalizer or a document check raised
            keybind: The keybind the error belongs to, if any
            keybind_index: Index of that keybind in the document

        Returns:
            ValidationFinding carrying the error's code and context
        """
        return cls(
            **error.to_dict(),
            kind=ErrorCode(error.code).name,
            keybind=keybind,
            keybind_index=keybind_index,
        )


class ValidationResult(BaseModel):
    """Outcome of validating one document."""

    findings: List[ValidationFinding] = Field(default_factory=list)
    # CoreKeybinds of every binding that normalized cleanly
    bindings: List[Any] = Field(default_factory=list)

    @property
    def errors(self) -> List[ValidationFinding]:
        return [f for f in self.findings if f.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationFinding]:
        return [f for f in self.findings if f.severity == Severity.WARNING]

    @property
    def valid(self) -> bool:
        """True when no error-severity finding was reported."""
        return not self.errors

    def of_kind(self, code: ErrorCode) -> List[ValidationFinding]:
        """Findings with the given error code."""
        return [f for f in self.findings if f.code == code.value]

    def for_keybind(self, index: int) -> List[ValidationFinding]:
        """Findings raised against the keybind at `index`."""
        return [f for f in self.findings if f.keybind_index == index]
