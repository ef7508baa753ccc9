"""Textual front-end: toolbar buttons and a clickable history list."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Label, ListItem, ListView, Static

from .commands import BoldCommand, ItalicCommand, UnderlineCommand
from .constants import AppConstants
from .style import StyleContext, StyleFlags
from .undo import HistoryEntry, HistoryKind, HistoryManager

logger = logging.getLogger(__name__)

COMMANDS = {
    "italic": ItalicCommand,
    "bold": BoldCommand,
    "underline": UnderlineCommand,
}


def text_style_for(flags: StyleFlags) -> str:
    """Translate style flags into a Textual text-style value."""
    parts = []
    if flags & StyleFlags.BOLD:
        parts.append("bold")
    if flags & StyleFlags.ITALIC:
        parts.append("italic")
    if flags & StyleFlags.UNDERLINE:
        parts.append("underline")
    return " ".join(parts) or "none"


class HistoryItem(ListItem):
    """A history row; ``entry`` is None for the initial-state row."""

    def __init__(self, entry: Optional[HistoryEntry], text: str):
        classes = "redo" if entry is not None and entry.kind is HistoryKind.REDO else "undo"
        super().__init__(Label(text), classes=classes)
        self.entry = entry


class StylemarkApp(App):
    """Textual app driving a StyleContext through a HistoryManager."""

    CSS = """
    #editor {
        height: auto;
        padding: 1 2;
    }
    #sample {
        padding: 1 0;
    }
    #actions {
        height: auto;
    }
    #actions Button {
        margin-right: 1;
        min-width: 8;
    }
    #history {
        border: round $accent;
        height: 1fr;
    }
    HistoryItem.redo {
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("i", "toggle('italic')", "Italic"),
        Binding("b", "toggle('bold')", "Bold"),
        Binding("u", "toggle('underline')", "Underline"),
        Binding("z", "undo", "Undo"),
        Binding("y", "redo", "Redo"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, sample_text: str = AppConstants.DEFAULT_SAMPLE_TEXT,
                 max_history: Optional[int] = None):
        super().__init__()
        self.sample_text = sample_text
        self.context = StyleContext()
        self.history = HistoryManager(self.context, max_entries=max_history)
        self.history.add_listener(self._on_history_changed)
        self._refresh_pending = False

    def compose(self) -> ComposeResult:
        """Create widgets."""
        yield Header()
        with Vertical(id="editor"):
            yield Static(self.sample_text, id="sample")
            with Horizontal(id="actions"):
                yield Button("Italic", id="italic")
                yield Button("Bold", id="bold")
                yield Button("Underline", id="underline")
                yield Button("Undo", id="undo")
                yield Button("Redo", id="redo")
        yield ListView(id="history")
        yield Footer()

    async def on_mount(self) -> None:
        self.sub_title = "History"
        await self._rebuild()

    def _on_history_changed(self, history: HistoryManager) -> None:
        # Jumps notify once per step; rebuild once after the batch
        if not self._refresh_pending:
            self._refresh_pending = True
            self.call_later(self._rebuild)

    async def _rebuild(self) -> None:
        self._refresh_pending = False
        sample = self.query_one("#sample", Static)
        sample.styles.text_style = text_style_for(self.context.flags())

        items = [HistoryItem(None, AppConstants.INITIAL_STATE_LABEL)]
        for entry in self.history.list_history():
            marker = AppConstants.UNDO_MARKER if entry.kind is HistoryKind.UNDO else AppConstants.REDO_MARKER
            items.append(HistoryItem(entry, f"{marker} {entry.label}"))
        history_list = self.query_one("#history", ListView)
        await history_list.clear()
        await history_list.extend(items)
        history_list.index = len(self.history.back_history)

        self.query_one("#undo", Button).disabled = not self.history.can_undo()
        self.query_one("#redo", Button).disabled = not self.history.can_redo()

    def action_toggle(self, name: str) -> None:
        command = COMMANDS[name](self.context)
        self.history.execute(command)

    def action_undo(self) -> None:
        if not self.history.undo():
            self.notify("Nothing to undo", severity="warning")

    def action_redo(self) -> None:
        if not self.history.redo():
            self.notify("Nothing to redo", severity="warning")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id in COMMANDS:
            self.action_toggle(button_id)
        elif button_id == "undo":
            self.action_undo()
        elif button_id == "redo":
            self.action_redo()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        item = event.item
        if not isinstance(item, HistoryItem):
            return
        if item.entry is None:
            steps = self.history.reset()
        else:
            steps = self.history.activate(item.entry)
        logger.debug("History jump took %d steps", steps)
