"""Modal screens for the Draftcount editor.

Each prompt modal dismisses with the answer, or with None when the user
cancels (Escape or the Cancel button).
"""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, ListItem, ListView, Static

# Shared by every modal below; each prepends its own centering rule.
MODAL_CSS = """
#modal-box {
    width: 64;
    height: auto;
    max-height: 30;
    border: thick $primary;
    background: $surface;
    padding: 1 2;
}

#modal-title {
    text-style: bold;
    text-align: center;
    width: 100%;
    margin-bottom: 1;
    color: $primary;
}

#modal-options {
    height: auto;
    max-height: 16;
}

#modal-buttons {
    height: auto;
    margin-top: 1;
    align: center middle;
}

#modal-buttons Button {
    margin: 0 1;
}
"""


class SelectModal(ModalScreen[str | None]):
    """Pick one option from a list."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    CSS = """
    SelectModal {
        align: center middle;
    }
    """ + MODAL_CSS

    def __init__(self, title: str, options: list[str]) -> None:
        super().__init__()
        self._title = title
        self._options = options

    def compose(self) -> ComposeResult:
        with Container(id="modal-box"):
            yield Label(self._title, id="modal-title")
            yield ListView(
                *(ListItem(Label(option, markup=False)) for option in self._options),
                id="modal-options",
            )

    def on_mount(self) -> None:
        self.query_one("#modal-options", ListView).focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        index = event.list_view.index
        if index is not None:
            self.dismiss(self._options[index])

    def action_cancel(self) -> None:
        self.dismiss(None)


class TextInputModal(ModalScreen[str | None]):
    """Ask for one line of text."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    CSS = """
    TextInputModal {
        align: center middle;
    }
    """ + MODAL_CSS

    def __init__(self, title: str, placeholder: str = "") -> None:
        super().__init__()
        self._title = title
        self._placeholder = placeholder

    def compose(self) -> ComposeResult:
        with Container(id="modal-box"):
            yield Label(self._title, id="modal-title")
            yield Input(placeholder=self._placeholder, id="modal-input")
            with Horizontal(id="modal-buttons"):
                yield Button("OK", variant="primary", id="btn-ok")
                yield Button("Cancel", variant="default", id="btn-cancel")

    def on_mount(self) -> None:
        self.query_one("#modal-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-ok":
            self.dismiss(self.query_one("#modal-input", Input).value)
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class ConfirmModal(ModalScreen[bool | None]):
    """Yes/no question; Escape cancels."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("y", "answer(True)", "Yes"),
        ("n", "answer(False)", "No"),
    ]

    CSS = """
    ConfirmModal {
        align: center middle;
    }
    """ + MODAL_CSS

    def __init__(self, question: str) -> None:
        super().__init__()
        self._question = question

    def compose(self) -> ComposeResult:
        with Container(id="modal-box"):
            yield Label(self._question, id="modal-title")
            with Horizontal(id="modal-buttons"):
                yield Button("Yes", variant="error", id="btn-yes")
                yield Button("No", variant="default", id="btn-no")

    def on_mount(self) -> None:
        self.query_one("#btn-no", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "btn-yes")

    def action_answer(self, value: bool) -> None:
        self.dismiss(value)

    def action_cancel(self) -> None:
        self.dismiss(None)


class StatsModal(ModalScreen[None]):
    """Read-only block of text lines."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
    ]

    CSS = """
    StatsModal {
        align: center middle;
    }
    """ + MODAL_CSS

    def __init__(self, title: str, lines: list[str]) -> None:
        super().__init__()
        self._title = title
        self._lines = lines

    def compose(self) -> ComposeResult:
        with Container(id="modal-box"):
            yield Label(self._title, id="modal-title")
            with VerticalScroll():
                yield Static("\n".join(self._lines), markup=False)
            with Horizontal(id="modal-buttons"):
                yield Button("Close", variant="primary", id="btn-close")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)


__all__ = ["ConfirmModal", "SelectModal", "StatsModal", "TextInputModal"]
