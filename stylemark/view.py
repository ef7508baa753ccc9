from typing import Optional, Sequence

from .constants import AppConstants
from .style import StyleContext, StyleFlags
from .undo import HistoryEntry, HistoryKind

TOOLBAR = "[i] Italic  [b] Bold  [u] Underline  [z] Undo  [y] Redo"
HEADER_ROWS = 7  # Title, blank, text, blank, toolbar, rule, history heading


def history_row_text(position: int, entry: HistoryEntry) -> str:
    marker = AppConstants.UNDO_MARKER if entry.kind is HistoryKind.UNDO else AppConstants.REDO_MARKER
    return f"{position:>3}. {marker} {entry.label}"


class StyleView:
    """Lays out the sample text, toolbar and history list as screen lines.

    Reads the style context and history listing; never writes to either.
    Selection row 0 is the "Initial state" row, row k is history entry k-1.
    """
    num_rows: int = 24
    num_columns: int = AppConstants.PANEL_WIDTH
    lines: list[str]
    line_flags: list[StyleFlags]
    line_kinds: list[Optional[HistoryKind]]
    highlight_line: Optional[int] = None
    text_line: int = 2
    history_top: int = 0  # First selection row visible in the list

    def __init__(self, sample_text: str = AppConstants.DEFAULT_SAMPLE_TEXT):
        self.sample_text = sample_text
        self.lines = []
        self.line_flags = []
        self.line_kinds = []

    def _fit(self, text: str) -> str:
        return text[:self.num_columns]

    def _center(self, text: str) -> str:
        return self._fit(text).center(self.num_columns).rstrip()

    def _visible_history_rows(self) -> int:
        return max(1, self.num_rows - HEADER_ROWS)

    def _scroll_to(self, selected_row: int, total_rows: int):
        visible = self._visible_history_rows()
        if selected_row < self.history_top:
            self.history_top = selected_row
        elif selected_row >= self.history_top + visible:
            self.history_top = selected_row - visible + 1
        # Don't leave blank space below the list when it shrinks
        self.history_top = max(0, min(self.history_top, total_rows - visible))

    def render(self, context: StyleContext, entries: Sequence[HistoryEntry], selected_row: int = 0):
        self.lines = []
        self.line_flags = []
        self.line_kinds = []
        self.highlight_line = None

        def add(text: str, flags: StyleFlags = StyleFlags.NONE, kind: Optional[HistoryKind] = None):
            self.lines.append(text)
            self.line_flags.append(flags)
            self.line_kinds.append(kind)

        add(self._center("STYLEMARK"), StyleFlags.BOLD)
        add("")
        self.text_line = len(self.lines)
        add(self._center(self.sample_text), context.flags())
        add("")
        add(self._center(TOOLBAR))
        add("─" * self.num_columns)
        add(self._fit("History"), StyleFlags.UNDERLINE)

        total_rows = len(entries) + 1
        selected_row = max(0, min(selected_row, total_rows - 1))
        self._scroll_to(selected_row, total_rows)
        last_row = min(total_rows, self.history_top + self._visible_history_rows())
        for row in range(self.history_top, last_row):
            if row == selected_row:
                self.highlight_line = len(self.lines)
            if row == 0:
                add(self._fit(f"     {AppConstants.INITIAL_STATE_LABEL}"))
            else:
                entry = entries[row - 1]
                add(self._fit(history_row_text(row, entry)), kind=entry.kind)
