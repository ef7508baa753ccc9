"""Stylemark - A style toggler with a command-based undo history."""

from .style import StyleContext, StyleFlags
from .commands import StyleCommand, ItalicCommand, BoldCommand, UnderlineCommand
from .undo import HistoryManager, HistoryEntry, HistoryKind

__all__ = [
    'StyleContext',
    'StyleFlags',
    'StyleCommand',
    'ItalicCommand',
    'BoldCommand',
    'UnderlineCommand',
    'HistoryManager',
    'HistoryEntry',
    'HistoryKind',
]
