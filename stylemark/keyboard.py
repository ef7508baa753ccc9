"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'b', 'up', 'enter')
    raw: str  # The raw key token
    is_alt: bool = False
    is_ctrl: bool = False


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert',
}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event, or None on timeout."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a key token into a KeyEvent.

        Args:
            key: curtsies key name (e.g. '<Ctrl-b>', '<UP>', '<F1>') or a
                plain character

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            return self._parse_token(key_str)

        # Single-byte ASCII control chars (Ctrl-<letter>)
        if len(key_str) == 1:
            o = ord(key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                ch = chr(ord('a') + o - 1)
                # Ctrl-J / Ctrl-M are what terminals send for Enter
                if ch in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        if key_str == '\x1b':
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        # ESC prefix followed by a character is Alt+character
        if len(key_str) == 2 and key_str[0] == '\x1b':
            return KeyEvent(key_type=KeyType.ALT, value=key_str[1].lower(), raw=key_str, is_alt=True)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_token(self, key_str: str) -> KeyEvent:
        """Parse a curtsies-style name like '<Ctrl-x>' or '<Esc+u>'."""
        lower = key_str[1:-1].lower().replace('+', '-')
        parts = lower.split('-')
        base = parts[-1]
        mods = set(parts[:-1])
        # Both meta and a leading esc mean alt
        if mods & {'meta', 'esc'}:
            mods.add('alt')
        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        if base in ('space', 'spacebar', 'spc') and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
        if 'ctrl' in mods and len(base) == 1:
            if base in ('j', 'm'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
        if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)
        if base in ('esc', 'escape'):
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')
        # Unknown tokens (F-keys and friends) are specials by name
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
