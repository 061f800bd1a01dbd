"""Search bar widget."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Input, Static


class SearchBar(Widget):
    """Search input docked at the bottom of the screen."""

    DEFAULT_CSS = """
    SearchBar {
        height: 1;
        dock: bottom;
        background: $surface;
        display: none;
    }

    SearchBar.-visible {
        display: block;
    }

    SearchBar .mode-indicator {
        width: auto;
        padding: 0 1;
        background: $primary;
        color: $text;
    }

    SearchBar .search-input {
        width: 1fr;
        border: none;
        background: $surface;
    }

    SearchBar .search-input:focus {
        border: none;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._active_search: str = ""

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Static("Search:", classes="mode-indicator")
            yield Input(
                placeholder="title or description...",
                id="search-input",
                classes="search-input",
            )

    def enter_search_mode(self) -> None:
        """Show the bar and focus the input."""
        self.add_class("-visible")
        input_widget = self.query_one("#search-input", Input)
        input_widget.value = self._active_search
        input_widget.focus()

    def exit_search_mode(self) -> None:
        """Hide the bar, keeping the active search."""
        self.remove_class("-visible")

    def apply_search(self, term: str) -> None:
        self._active_search = term

    def clear_search(self) -> None:
        self._active_search = ""
        self.query_one("#search-input", Input).value = ""

    @property
    def active_search(self) -> str:
        return self._active_search

    @property
    def is_visible(self) -> bool:
        return self.has_class("-visible")
