"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import sys
import select

from .style import StyleFlags
from .undo import HistoryKind


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._curtsies_active: bool = False
        # Virtual screen state for minimal updates
        self._last_lines: list[str] | None = None
        self._last_status: str | None = None
        self._last_left_margin: int | None = None

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen)
        print(self.term.hide_cursor)
        print(self.term.clear)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                from curtsies import Input  # type: ignore
                # Enter raw mode immediately so reads work
                self._curtsies_input = Input(keynames='curtsies')  # type: ignore
                self._curtsies_input.__enter__()
                self._curtsies_active = True
            except Exception:
                # Justification: curtsies fails to initialize without a real
                # tty (CI, pipes). The UI then simply receives no keys.
                self._curtsies_input = None
                self._curtsies_active = False

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen)
            print(self.term.normal_cursor)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                if self._curtsies_active:
                    # Exit raw mode context
                    self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except Exception:
                # Justification: teardown runs on the way out of the app;
                # failing to leave raw mode must not mask the real exit.
                pass
            finally:
                self._curtsies_input = None
                self._curtsies_active = False

    def clear_screen(self):
        """Clear the entire screen."""
        print(self.term.clear)

    def invalidate_frame(self) -> None:
        """Invalidate cached frame so next update does a full clear.

        Use this after the help screen or an error box has drawn over the
        panel, so the next draw repaints from a clean slate.
        """
        self._last_lines = None
        self._last_status = None
        self._last_left_margin = None

    def compose_line(self, text: str, width: int, flags: StyleFlags = StyleFlags.NONE,
                     kind: Optional[HistoryKind] = None, highlight: bool = False) -> str:
        """Pad text to width and wrap it in the attributes it asks for."""
        attrs = []
        if flags & StyleFlags.BOLD:
            attrs.append(self.term.bold)
        if flags & StyleFlags.ITALIC:
            attrs.append(self.term.italic)
        if flags & StyleFlags.UNDERLINE:
            attrs.append(self.term.underline)
        if kind is HistoryKind.REDO:
            # Undone entries are shown faded
            attrs.append(self.term.dim)
        if highlight:
            attrs.append(self.term.reverse)
        if not attrs:
            return text[:width].ljust(width)
        # Style only the text itself, not the padding
        body = text[:width].rstrip()
        lead = len(body) - len(body.lstrip())
        styled = body[:lead] + ''.join(str(a) for a in attrs) + body[lead:] + str(self.term.normal)
        return styled + ' ' * (width - len(body))

    def update_frame(
        self,
        lines: list[str],
        left_margin: int,
        view_width: int,
        line_flags: Optional[list[StyleFlags]] = None,
        line_kinds: Optional[list[Optional[HistoryKind]]] = None,
        highlight_line: Optional[int] = None,
        status_override: Optional[str] = None,
        help_hint: bool = True,
    ) -> None:
        """Diff against last frame and write only changes.

        Falls back to a full clear on first paint or when geometry changes.
        """
        need_full_clear = (
            self._last_lines is None
            or self._last_left_margin != left_margin
            or len(self._last_lines or []) != len(lines)
        )
        if need_full_clear:
            print(self.term.home + self.term.clear, end='')
            self._last_lines = ["" for _ in range(len(lines))]
            self._last_status = None
            self._last_left_margin = left_margin

        for y, line in enumerate(lines):
            flags = line_flags[y] if line_flags and y < len(line_flags) else StyleFlags.NONE
            kind = line_kinds[y] if line_kinds and y < len(line_kinds) else None
            new_disp = self.compose_line(line, view_width, flags, kind, highlight=(y == highlight_line))
            if new_disp != self._last_lines[y]:
                print(self.term.move(y, left_margin) + new_disp, end='')
                self._last_lines[y] = new_disp

        # Status line at bottom
        if status_override:
            status_text = status_override.ljust(self.term.width)
        elif help_hint:
            help_text = "F1 for help"
            status_text = (" " * (self.term.width - len(help_text) - 1)) + help_text
        else:
            status_text = " " * self.term.width
        if status_text != (self._last_status or ""):
            print(self.term.move(self.term.height - 1, 0) + status_text, end='')
            self._last_status = status_text
        print('', end='', flush=True)

    def draw_error_message(self, message1: str, message2: str = ""):
        """Draw an error message in the center of the screen.

        Args:
            message1: Primary error message
            message2: Secondary information
        """
        print(self.term.home + self.term.clear, end='')
        center_y = self.term.height // 2
        box_width = max(len(message1), len(message2)) + 4
        left_margin = max(0, (self.term.width - box_width) // 2)

        print(self.term.move(center_y - 2, left_margin) + "╔" + "═" * (box_width - 2) + "╗", end='')
        print(self.term.move(center_y - 1, left_margin) + "║ " + message1.center(box_width - 4) + " ║", end='')
        if message2:
            print(self.term.move(center_y, left_margin) + "║ " + message2.center(box_width - 4) + " ║", end='')
            print(self.term.move(center_y + 1, left_margin) + "╚" + "═" * (box_width - 2) + "╝", end='')
        else:
            print(self.term.move(center_y, left_margin) + "╚" + "═" * (box_width - 2) + "╝", end='')

        help_text = "q to quit | Resize terminal to continue"
        help_pos = max(0, (self.term.width - len(help_text)) // 2)
        print(self.term.move(self.term.height - 1, help_pos) + help_text, end='', flush=True)
        self.invalidate_frame()

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if nothing arrived.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))  # blocks
        r, _, _ = select.select([sys.stdin], [], [], float(timeout))
        if not r:
            return None
        return str(next(self._curtsies_input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1  # Reserve one line for status
