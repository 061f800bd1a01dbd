"""Create/edit task form."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, TextArea

from ...models import Draft


class TaskFormModal(ModalScreen[Draft | None]):
    """Modal form editing a draft.

    Dismisses with the filled-in draft on submit, or None on cancel. A
    blank title keeps the form open.
    """

    DEFAULT_CSS = """
    TaskFormModal {
        align: center middle;
    }

    TaskFormModal > Vertical {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    TaskFormModal #form-title {
        text-style: bold;
        margin-bottom: 1;
    }

    TaskFormModal Label {
        margin-top: 1;
    }

    TaskFormModal TextArea {
        height: 5;
    }

    TaskFormModal .buttons {
        height: auto;
        margin-top: 1;
    }

    TaskFormModal Button {
        width: 1fr;
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "submit", "Save"),
    ]

    def __init__(self, draft: Draft, editing: bool = False) -> None:
        super().__init__()
        self._draft = draft
        self._editing = editing

    def compose(self) -> ComposeResult:
        heading = "Edit Todo" if self._editing else "Add New Todo"
        with Vertical():
            yield Label(heading, id="form-title")
            yield Label("Title")
            yield Input(
                value=self._draft.title,
                placeholder="Enter task title",
                id="title-input",
            )
            yield Label("Description")
            yield TextArea(self._draft.description, id="description-input")
            with Horizontal(classes="buttons"):
                yield Button(
                    "Update" if self._editing else "Add",
                    id="submit",
                    variant="primary",
                )
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#title-input", Input).focus()

    def current_draft(self) -> Draft:
        """Draft built from what is currently typed."""
        return Draft(
            title=self.query_one("#title-input", Input).value,
            description=self.query_one("#description-input", TextArea).text,
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit":
            self.action_submit()
        else:
            self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_submit()

    def action_submit(self) -> None:
        draft = self.current_draft()
        if draft.is_blank:
            self.query_one("#title-input", Input).focus()
            return
        self.dismiss(draft)
