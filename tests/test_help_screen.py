"""Test help screen functionality."""

import pytest
from unittest.mock import Mock, patch, MagicMock
from stylemark.editor import Editor
from stylemark.keyboard import KeyEvent, KeyType


def test_f1_shows_help():
    """Test that F1 shows the help screen."""
    editor = Editor()
    assert editor.help_visible == False

    editor._handle_key_event(KeyEvent(key_type=KeyType.SPECIAL, value='f1', raw='<F1>'))

    assert editor.help_visible == True


def test_help_dismisses_on_any_key():
    """Test that pressing any key dismisses the help screen without acting on it."""
    editor = Editor()
    editor.show_help()

    key_event = KeyEvent(key_type=KeyType.REGULAR, value='i', raw='i')
    editor._handle_key_event(key_event)

    assert editor.help_visible == False
    # The dismissing key is swallowed
    assert editor.context == {}


def test_help_screen_draw():
    """Test that help screen drawing works."""
    editor = Editor()

    with patch('builtins.print') as mock_print:
        editor.terminal.term = MagicMock()
        editor.terminal.term.width = 80
        editor.terminal.term.height = 24
        editor.terminal.term.home = ''
        editor.terminal.term.clear = '[CLEAR]'
        editor.terminal.term.hide_cursor = '[HIDE_CURSOR]'

        editor.show_help()
        editor._draw()

        calls = [str(call) for call in mock_print.call_args_list]
        assert any('[CLEAR]' in call for call in calls)
        assert any('HELP' in call for call in calls)
        assert any('Jump to entry' in call for call in calls)
