"""
Configuration document model.

ConfigDocument is the aggregate root of a LeftWM configuration. Every
field has a default, so a document missing a key deserializes to the
same value the built-in default document carries.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import defaults
from .models import (
    Backend,
    FocusBehaviour,
    FocusOnActivationBehaviour,
    InsertBehavior,
    Keybind,
    Layout,
    LayoutMode,
    LogLevel,
    Modifier,
    ScratchPad,
    Size,
    WindowHidingStrategy,
    WindowHook,
    Workspace,
)


class ConfigDocument(BaseModel):
    """Complete LeftWM configuration."""

    # Unknown keys (e.g. layout_definitions) are ignored, not rejected.
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    modkey: str = defaults.DEFAULT_MODKEY
    mousekey: Optional[Modifier] = defaults.DEFAULT_MOUSEKEY
    workspaces: Optional[List[Workspace]] = Field(default_factory=list)
    tags: Optional[List[str]] = Field(default_factory=defaults.default_tags)
    max_window_width: Optional[Size] = None
    layouts: List[Layout] = Field(default_factory=defaults.default_layouts)
    layout_mode: LayoutMode = LayoutMode.TAG
    insert_behavior: InsertBehavior = InsertBehavior.BOTTOM
    scratchpad: Optional[List[ScratchPad]] = Field(default_factory=defaults.default_scratchpads)
    window_rules: Optional[List[WindowHook]] = Field(default_factory=list)
    # If you are on tag "1" and you goto tag "1" this takes you to the previous tag
    disable_current_tag_swap: bool = False
    disable_tile_drag: bool = False
    disable_window_snap: bool = True
    focus_behaviour: FocusBehaviour = FocusBehaviour.SLOPPY
    focus_on_activation: FocusOnActivationBehaviour = FocusOnActivationBehaviour.MARK_URGENT
    focus_new_windows: bool = True
    single_window_border: bool = True
    sloppy_mouse_follows_focus: bool = True
    create_follows_cursor: Optional[bool] = None
    disable_cursor_reposition_on_resize: bool = False
    auto_derive_workspaces: bool = True
    window_hiding_strategy: WindowHidingStrategy = WindowHidingStrategy.UNMAP
    backend: Backend = Backend.XLIB
    log_level: str = defaults.DEFAULT_LOG_LEVEL
    state_path: Optional[str] = None
    keybind: List[Keybind] = Field(default_factory=defaults.default_keybinds)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any casing of a known level, store it lowercase."""
        level = v.strip().lower()
        if level not in {item.value for item in LogLevel}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("modkey")
    @classmethod
    def validate_modkey(cls, v: str) -> str:
        """Validate modkey is not empty."""
        if not v.strip():
            raise ValueError("modkey cannot be empty")
        return v

    @classmethod
    def default(cls, search_path: Optional[str] = None) -> "ConfigDocument":
        """
        Build the built-in default document.

        Args:
            search_path: Search path used for terminal/exit-command
                discovery; defaults to $PATH

        Returns:
            Default ConfigDocument
        """
        return cls(keybind=defaults.default_keybinds(search_path))

    def workspace_ids(self) -> List[Optional[int]]:
        """IDs of all declared workspaces, in order."""
        return [ws.id for ws in self.workspaces or []]
