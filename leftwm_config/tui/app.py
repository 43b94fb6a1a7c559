"""Main Textual TUI application for leftwm-config.

The app owns the in-memory ConfigDocument. Screens mutate it in place
as edits are accepted; nothing is written until the user saves.
"""

from pathlib import Path
from typing import Optional

from textual.app import App
from textual.binding import Binding
from textual.reactive import reactive

from ..config import ConfigLoader, ConfigValidator
from ..document import ConfigDocument
from ..errors import ConfigError
from ..models import ValidationResult
from .screens import HomeScreen


class ConfigEditorApp(App):
    """Interactive editor for a LeftWM config.

    Reactive attributes:
    - dirty: Whether the document changed since the last save
    """

    CSS = """
    Screen {
        background: $surface;
    }

    #status {
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }

    #finding {
        height: auto;
        max-height: 8;
        color: $warning;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        # Not a priority binding, so typing q into an input does not quit.
        Binding("q", "quit", "Quit", show=False),
        Binding("ctrl+s", "save", "Save"),
        Binding("ctrl+k", "check", "Check"),
    ]

    TITLE = "leftwm-config"

    dirty: reactive[bool] = reactive(False)

    def __init__(self, document: ConfigDocument, loader: ConfigLoader, path: Optional[Path] = None):
        """Initialize the editor.

        Args:
            document: Document to edit
            loader: Used to save the document
            path: File the document came from; legacy TOML files are
                saved as config.ron next to them
        """
        super().__init__()
        self.document = document
        self.loader = loader
        self.path = path
        self.validator = ConfigValidator()

    def on_mount(self) -> None:
        self.push_screen(HomeScreen())

    def save_path(self) -> Optional[Path]:
        if self.path is None:
            return None
        if self.path.suffix != ".ron":
            return self.path.with_suffix(".ron")
        return self.path

    def mark_dirty(self) -> None:
        self.dirty = True

    def watch_dirty(self, dirty: bool) -> None:
        self.sub_title = "modified" if dirty else ""

    def run_validator(self) -> ValidationResult:
        return self.validator.validate(self.document)

    def action_save(self) -> None:
        try:
            path = self.loader.save(self.document, self.save_path())
        except ConfigError as e:
            self.notify(e.message, severity="error")
            return
        self.dirty = False
        self.notify(f"Saved {path}")

    def action_check(self) -> None:
        result = self.run_validator()
        message = f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
        if result.valid:
            self.notify(f"Config OK: {message}")
        else:
            self.notify(f"Config has problems: {message}", severity="warning")
