"""Modal dialogs used by the editor screens.

Each dialog dismisses with the accepted value, or None when cancelled.
Validation happens in the caller-supplied `apply` callback so a rejected
edit keeps the dialog open with the error shown.
"""

from typing import Callable, List, Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, OptionList, Select, Static
from textual.widgets.option_list import Option

from ..commands import BaseCommand
from ..keysyms import key_names, modifier_names

DIALOG_CSS = """
    #dialog-container {
        width: 72;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    .dialog-title {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        background: $primary;
        color: $text;
        margin-bottom: 1;
        padding: 1;
    }

    .field-row {
        height: auto;
        margin-bottom: 1;
    }

    .field-label {
        width: 12;
        padding: 1 0;
    }

    .field-input {
        width: 1fr;
    }

    .dialog-error {
        color: $error;
        height: auto;
    }

    .dialog-help {
        color: $text-muted;
        height: auto;
    }

    #button-container {
        height: 3;
        align: center middle;
        margin-top: 1;
    }

    Button {
        margin: 0 1;
    }
"""


class ChoiceDialog(ModalScreen[Optional[str]]):
    """Pick one option from a fixed list."""

    DEFAULT_CSS = "ChoiceDialog { align: center middle; }" + DIALOG_CSS

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    def __init__(self, title: str, options: List[str], current: Optional[str] = None):
        super().__init__()
        self.title_text = title
        self.options = options
        self.current = current

    def compose(self) -> ComposeResult:
        with Container(id="dialog-container"):
            yield Static(self.title_text, classes="dialog-title")
            yield OptionList(*[Option(option, id=option) for option in self.options], id="choices")

    def on_mount(self) -> None:
        option_list = self.query_one("#choices", OptionList)
        if self.current in self.options:
            option_list.highlighted = self.options.index(self.current)
        option_list.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(event.option.id)

    def action_cancel(self) -> None:
        self.dismiss(None)


class TextDialog(ModalScreen[Optional[str]]):
    """Edit one value as text."""

    DEFAULT_CSS = "TextDialog { align: center middle; }" + DIALOG_CSS

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    def __init__(self, title: str, value: str, apply: Callable[[str], None], help_text: str = ""):
        """
        Args:
            title: Dialog heading
            value: Initial text
            apply: Stores the text; raises ValueError to reject it
            help_text: Shown under the input
        """
        super().__init__()
        self.title_text = title
        self.value = value
        self.apply = apply
        self.help_text = help_text

    def compose(self) -> ComposeResult:
        with Container(id="dialog-container"):
            yield Static(self.title_text, classes="dialog-title")
            yield Input(value=self.value, id="value-input")
            yield Static(self.help_text, classes="dialog-help", markup=False)
            yield Static("", id="error", classes="dialog-error", markup=False)
            with Horizontal(id="button-container"):
                yield Button("Save", variant="primary", id="save-button")
                yield Button("Cancel", variant="default", id="cancel-button")

    def on_mount(self) -> None:
        self.query_one("#value-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-button":
            self._submit()
        else:
            self.dismiss(None)

    def _submit(self) -> None:
        text = self.query_one("#value-input", Input).value
        try:
            self.apply(text)
        except ValueError as e:
            self.query_one("#error", Static).update(str(e))
            return
        self.dismiss(text)

    def action_cancel(self) -> None:
        self.dismiss(None)


class KeybindDialog(ModalScreen[Optional[bool]]):
    """Edit the command, value, modifiers and key of one keybind."""

    DEFAULT_CSS = "KeybindDialog { align: center middle; }" + DIALOG_CSS

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
        Binding("ctrl+s", "save", "Save", show=True),
    ]

    def __init__(self, title: str, inputs: dict, apply: Callable[[str, str, str, str], None]):
        """
        Args:
            title: Dialog heading
            inputs: Initial command, value, modifiers and key text
            apply: Stores the keybind; raises ValueError to reject it
        """
        super().__init__()
        self.title_text = title
        self.inputs = inputs
        self.apply = apply

    def compose(self) -> ComposeResult:
        with Container(id="dialog-container"):
            yield Static(self.title_text, classes="dialog-title")

            with Horizontal(classes="field-row"):
                yield Label("Command:", classes="field-label")
                yield Select(
                    options=[(command.value, command.value) for command in BaseCommand],
                    value=self.inputs.get("command", BaseCommand.EXECUTE.value),
                    allow_blank=False,
                    id="command-select",
                    classes="field-input",
                )

            with Horizontal(classes="field-row"):
                yield Label("Value:", classes="field-label")
                yield Input(value=self.inputs.get("value", ""), id="value-input", classes="field-input")

            with Horizontal(classes="field-row"):
                yield Label("Modifiers:", classes="field-label")
                yield Input(
                    value=self.inputs.get("modifiers", ""),
                    placeholder="modkey+Shift",
                    id="modifiers-input",
                    classes="field-input",
                )

            with Horizontal(classes="field-row"):
                yield Label("Key:", classes="field-label")
                yield Input(
                    value=self.inputs.get("key", ""),
                    placeholder="Return",
                    id="key-input",
                    classes="field-input",
                )

            yield Static(
                f"Modifiers: modkey, mousekey, {', '.join(modifier_names())}. "
                f"{len(key_names())} key names are known.",
                classes="dialog-help",
            )
            yield Static("", id="error", classes="dialog-error", markup=False)

            with Horizontal(id="button-container"):
                yield Button("Save", variant="primary", id="save-button")
                yield Button("Cancel", variant="default", id="cancel-button")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-button":
            self.action_save()
        else:
            self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_save()

    def action_save(self) -> None:
        command = str(self.query_one("#command-select", Select).value)
        value = self.query_one("#value-input", Input).value
        modifiers = self.query_one("#modifiers-input", Input).value
        key = self.query_one("#key-input", Input).value
        try:
            self.apply(command, value, modifiers, key)
        except ValueError as e:
            self.query_one("#error", Static).update(str(e))
            return
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(None)
