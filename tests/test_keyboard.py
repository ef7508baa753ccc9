"""Test keyboard input handling."""

import pytest
from stylemark.keyboard import KeyboardHandler, KeyEvent, KeyType


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self):
        self._key_queue = []

    def get_key(self, timeout=None):
        """Mock get_key that returns from queue."""
        if self._key_queue:
            return self._key_queue.pop(0)
        return None

    def add_key(self, key_str):
        self._key_queue.append(key_str)


@pytest.fixture
def terminal():
    return MockTerminal()


@pytest.fixture
def handler(terminal):
    return KeyboardHandler(terminal)


def test_no_key_returns_none(handler):
    assert handler.get_key_event(timeout=0) is None


def test_regular_letter(terminal, handler):
    terminal.add_key('b')
    event = handler.get_key_event()
    assert event.key_type == KeyType.REGULAR
    assert event.value == 'b'


@pytest.mark.parametrize("token,value", [
    ('<Ctrl-b>', 'b'),
    ('<Ctrl-z>', 'z'),
    ('\x02', 'b'),
    ('\x19', 'y'),
])
def test_ctrl_letters(handler, token, value):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.CTRL
    assert event.value == value
    assert event.is_ctrl


@pytest.mark.parametrize("token", ['<Ctrl-j>', '<Ctrl-m>', '\r', '\n'])
def test_enter_variants(handler, token):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'enter'


@pytest.mark.parametrize("token", ['<Esc+i>', '<Meta-i>', '<Alt-i>', '\x1bi'])
def test_alt_letters(handler, token):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.ALT
    assert event.value == 'i'
    assert event.is_alt


@pytest.mark.parametrize("token,value", [
    ('<UP>', 'up'),
    ('<DOWN>', 'down'),
    ('<HOME>', 'home'),
    ('<F1>', 'f1'),
    ('<PAGEUP>', 'page_up'),
])
def test_specials(handler, token, value):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == value


def test_escape(handler):
    assert handler.parse_key('\x1b').value == 'escape'
    assert handler.parse_key('<ESC>').value == 'escape'


def test_space_token_is_regular(handler):
    event = handler.parse_key('<SPACE>')
    assert event == KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')


def test_angle_bracket_characters_are_regular(handler):
    assert handler.parse_key('<').key_type == KeyType.REGULAR
    assert handler.parse_key('>').key_type == KeyType.REGULAR
