"""Editor screens: settings overview and keybind list."""

from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static

from ..document import ConfigDocument
from ..models import ValidationResult
from . import fields
from .dialogs import ChoiceDialog, KeybindDialog, TextDialog
from .fields import EditableField, FieldKind

TEXT_HELP = {
    EditableField.MODKEY: "A single modifier such as Mod4, Mod1 or Control.",
    EditableField.MOUSEKEY: "Modifiers joined with +, e.g. Mod4 or Mod4+Shift.",
    EditableField.MAX_WINDOW_WIDTH: "Pixels (e.g. 1200), a ratio (e.g. 0.5), or empty for no limit.",
    EditableField.TAGS: "Comma separated tag names.",
    EditableField.LOG_LEVEL: "off, error, warn, info, debug or trace.",
    EditableField.STATE_PATH: "Path of the state file, or empty for the default.",
}


class HomeScreen(Screen):
    """List of editable settings.

    Enter toggles booleans in place and opens a dialog for the others.
    """

    BINDINGS = [
        Binding("k", "keybinds", "Keybinds"),
    ]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="status", markup=False)
        yield DataTable(id="settings", cursor_type="row")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#settings", DataTable)
        table.add_columns("Setting", "Value")
        if self.app.path is not None:
            self.query_one("#status", Static).update(f"Editing {self.app.path}")
        self.refresh_table()
        table.focus()

    @property
    def document(self) -> ConfigDocument:
        return self.app.document

    def refresh_table(self) -> None:
        table = self.query_one("#settings", DataTable)
        cursor = table.cursor_row
        table.clear()
        for field in EditableField:
            table.add_row(field.label, fields.display_value(self.document, field), key=field.value)
        if cursor is not None and 0 <= cursor < table.row_count:
            table.move_cursor(row=cursor)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        field = EditableField(event.row_key.value)
        kind = fields.field_kind(field)

        if kind == FieldKind.TOGGLE:
            fields.toggle(self.document, field)
            self.app.mark_dirty()
            self.refresh_table()
        elif kind == FieldKind.CHOICE:
            self.app.push_screen(
                ChoiceDialog(field.label, fields.choices(field), fields.display_value(self.document, field)),
                lambda choice: self._apply_choice(field, choice),
            )
        else:
            self.app.push_screen(
                TextDialog(
                    field.label,
                    fields.display_value(self.document, field),
                    lambda text: fields.set_text(self.document, field, text),
                    TEXT_HELP.get(field, ""),
                ),
                self._after_text,
            )

    def _apply_choice(self, field: EditableField, choice: Optional[str]) -> None:
        if choice is None:
            return
        fields.set_choice(self.document, field, choice)
        self.app.mark_dirty()
        self.refresh_table()

    def _after_text(self, text: Optional[str]) -> None:
        if text is not None:
            self.app.mark_dirty()
            self.refresh_table()

    def action_keybinds(self) -> None:
        self.app.push_screen(KeybindScreen())


class KeybindScreen(Screen):
    """Keybind list with the findings of the last check."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
        Binding("a", "add", "Add"),
        Binding("d", "delete", "Delete"),
    ]

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(id="keybinds", cursor_type="row")
        yield Static("", id="finding", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#keybinds", DataTable)
        table.add_columns("#", "Modifiers", "Key", "Command", "Value", "Problems")
        self.refresh_table()
        table.focus()

    @property
    def document(self) -> ConfigDocument:
        return self.app.document

    def refresh_table(self) -> None:
        result: ValidationResult = self.app.run_validator()
        table = self.query_one("#keybinds", DataTable)
        cursor = table.cursor_row
        table.clear()
        for index, keybind in enumerate(self.document.keybind):
            problems = result.for_keybind(index)
            table.add_row(
                str(index),
                "" if keybind.modifier is None else "+".join(keybind.modifiers()),
                keybind.key,
                keybind.command.value,
                keybind.value,
                str(len(problems)) if problems else "",
                key=str(index),
            )
        if cursor is not None and 0 <= cursor < table.row_count:
            table.move_cursor(row=cursor)
        self._show_findings(result)

    def _show_findings(self, result: ValidationResult) -> None:
        keybind_findings = [f for f in result.findings if f.keybind is not None]
        text = "\n".join(f"{f.message} [{f.keybind.describe()}]" for f in keybind_findings)
        self.query_one("#finding", Static).update(text or "No keybind problems")

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        index = int(event.row_key.value)

        def apply(command: str, value: str, modifiers: str, key: str) -> None:
            fields.replace_keybind(self.document, index, fields.build_keybind(command, value, modifiers, key))

        self.app.push_screen(
            KeybindDialog(f"Keybind {index}", fields.keybind_inputs(self.document.keybind[index]), apply),
            self._after_edit,
        )

    def _after_edit(self, saved: Optional[bool]) -> None:
        if saved:
            self.app.mark_dirty()
            self.refresh_table()

    def action_add(self) -> None:
        def apply(command: str, value: str, modifiers: str, key: str) -> None:
            fields.add_keybind(self.document, fields.build_keybind(command, value, modifiers, key))

        self.app.push_screen(
            KeybindDialog("New keybind", {"modifiers": "modkey"}, apply),
            self._after_edit,
        )

    def action_delete(self) -> None:
        table = self.query_one("#keybinds", DataTable)
        if not self.document.keybind or table.cursor_row is None:
            return
        removed = fields.remove_keybind(self.document, table.cursor_row)
        self.app.notify(f"Removed {removed.describe()}")
        self.app.mark_dirty()
        self.refresh_table()
