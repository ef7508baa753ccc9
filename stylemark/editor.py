"""Main editor controller for the style toggler."""

import logging
import os
import sys
import select
import signal
import termios
from typing import Optional

from .terminal import TerminalInterface
from .style import StyleContext
from .undo import HistoryManager
from .view import StyleView
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .constants import AppConstants
from .actions import ActionRegistry
from .settings_persistence import get_persistence

logger = logging.getLogger(__name__)

HELP_LINES = [
    "",
    "STYLES                       HISTORY",
    "  i / Alt-I  Italic           z / Ctrl-Z  Undo",
    "  b / Ctrl-B Bold             y / Ctrl-Y  Redo",
    "  u / Ctrl-U Underline        Up/Down     Select entry",
    "                              Enter       Jump to entry",
    "OTHER                         Home        Initial state",
    "  F1         Help",
    "  q / Ctrl-Q Quit",
]


class Editor:
    """Terminal application controller."""

    def __init__(self, sample_text: Optional[str] = None, max_history: Optional[int] = None):
        """Initialize the editor components.

        Args:
            sample_text: Text to style; defaults to the saved setting
            max_history: Cap on undo entries; defaults to the saved setting
        """
        settings = get_persistence().load_settings()
        if sample_text is None:
            sample_text = settings.get("sample_text") or AppConstants.DEFAULT_SAMPLE_TEXT
        if max_history is None:
            max_history = settings.get("max_history")
        self.show_help_hint = settings.get("show_help_hint") is not False

        self.terminal = TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.view = StyleView(sample_text)
        self.VIEW_WIDTH = AppConstants.PANEL_WIDTH
        self.view.num_rows = self.terminal.height
        self.view.num_columns = self.VIEW_WIDTH
        self.context = StyleContext()
        self.history = HistoryManager(self.context, max_entries=max_history)
        self.history.add_listener(self._on_history_changed)
        self.action_registry = ActionRegistry()
        self.selected_row = 0  # 0 is the "Initial state" row
        self.running = False
        self.error_mode = False  # True when terminal is too small
        self.status_message = None
        self.help_visible = False
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

    def _on_history_changed(self, history: HistoryManager):
        """Keep the selection on the current position after every step."""
        self.selected_row = len(history.back_history)

    def move_selection(self, delta: int):
        total_rows = len(self.history.list_history()) + 1
        self.selected_row = max(0, min(self.selected_row + delta, total_rows - 1))

    def activate_selection(self) -> int:
        """Jump to the selected row and return the number of steps taken."""
        if self.selected_row <= 0:
            return self.history.reset()
        entries = self.history.list_history()
        if self.selected_row > len(entries):
            return 0
        return self.history.activate(entries[self.selected_row - 1])

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, AppConstants.RESIZE_PIPE_MARKER)

    def _too_small(self) -> bool:
        return (self.terminal.width < AppConstants.MIN_TERMINAL_WIDTH
                or self.terminal.height < AppConstants.MIN_TERMINAL_HEIGHT)

    def run(self):
        """Run the main editor loop."""
        self.terminal.setup()
        self.running = True
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        logger.debug("Editor started")

        try:
            with self.terminal.term.cbreak():
                # Let Ctrl-S/Ctrl-Q through as keys instead of flow control
                old_settings = None
                try:
                    old_settings = termios.tcgetattr(sys.stdin)
                    new_settings = list(old_settings)
                    new_settings[0] &= ~(termios.IXON | termios.IXOFF)
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
                except (termios.error, AttributeError, OSError):
                    pass

                need_draw = True
                while self.running:
                    if need_draw:
                        self.view.num_rows = self.terminal.height
                        if self._too_small():
                            self.error_mode = True
                            self._draw_error()
                        else:
                            self.error_mode = False
                            self._draw()
                        need_draw = False

                    ready, _, _ = select.select([0, self._resize_pipe_r], [], [])
                    if self._resize_pipe_r in ready:
                        os.read(self._resize_pipe_r, 1024)
                        self.terminal.invalidate_frame()
                        need_draw = True
                    elif 0 in ready:
                        key_event = self.keyboard.get_key_event(timeout=0)
                        if key_event:
                            self._handle_key_event(key_event)
                            need_draw = True

                if old_settings:
                    try:
                        termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                    except (termios.error, OSError):
                        pass
        except KeyboardInterrupt:
            # Ctrl-C quits like Ctrl-Q
            pass
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()
            logger.debug("Editor stopped")

    def _draw(self):
        """Draw the current state to the terminal."""
        if self.help_visible:
            self._draw_help()
            return
        view_width = min(self.VIEW_WIDTH, self.terminal.width)
        left_margin = max(0, (self.terminal.width - view_width) // 2)
        self.view.num_columns = view_width
        self.view.render(self.context, self.history.list_history(), self.selected_row)
        status_override = f" {self.status_message}" if self.status_message else None
        self.terminal.update_frame(
            self.view.lines,
            left_margin=left_margin,
            view_width=view_width,
            line_flags=self.view.line_flags,
            line_kinds=self.view.line_kinds,
            highlight_line=self.view.highlight_line,
            status_override=status_override,
            help_hint=self.show_help_hint,
        )

    def _draw_error(self):
        """Draw error message when terminal is too small."""
        self.terminal.draw_error_message(
            AppConstants.TERMINAL_TOO_SMALL_MESSAGE.format(
                AppConstants.MIN_TERMINAL_WIDTH, AppConstants.MIN_TERMINAL_HEIGHT + 1),
            AppConstants.CURRENT_SIZE_MESSAGE.format(self.terminal.width, self.terminal.height + 1),
        )

    def _draw_help(self):
        """Draw the help screen."""
        term = self.terminal.term
        print(term.home + term.clear, end='')

        title = "STYLEMARK HELP"
        # Tests may mock term without setting width
        try:
            width = int(getattr(term, 'width', 80))
        except (TypeError, ValueError):
            width = 80
        try:
            height = int(getattr(term, 'height', 24))
        except (TypeError, ValueError):
            height = 24
        title_pos = max(0, (width - len(title)) // 2)
        print(f"{term.move(1, title_pos)}{term.bold}{title}{term.normal}", end='')

        content_start_y = max(3, (height - len(HELP_LINES)) // 2)
        max_line_length = max(len(line) for line in HELP_LINES)
        left_margin = max(0, (width - max_line_length) // 2)
        for i, line in enumerate(HELP_LINES):
            print(f"{term.move(content_start_y + i, left_margin)}{line}", end='')

        print(f"{term.move(height - 1, 0)} Press any key to continue", end='')
        print(term.hide_cursor, end='', flush=True)
        self.terminal.invalidate_frame()

    def show_help(self):
        """Show the help screen."""
        self.help_visible = True

    def hide_help(self):
        """Hide the help screen and return to the panel."""
        self.help_visible = False
        self.terminal.invalidate_frame()

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        # If help is visible, any key dismisses it
        if self.help_visible:
            self.hide_help()
            return

        # Clear status message on any keypress
        self.status_message = None

        if self.error_mode:
            # Only quitting works while the terminal is too small
            if key_event.value == 'q' and key_event.key_type in (KeyType.REGULAR, KeyType.CTRL):
                self.running = False
            return

        if key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape':
            return

        self.action_registry.execute(self, key_event)
