import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .commands import StyleCommand
    from .style import StyleContext

logger = logging.getLogger(__name__)


class HistoryKind(Enum):
    UNDO = "undo"
    REDO = "redo"


@dataclass(frozen=True)
class HistoryEntry:
    """One row of the history listing.

    ``index`` is the command's position in its own stack: back-history for
    UNDO entries, forward-history for REDO entries.
    """
    kind: HistoryKind
    index: int
    label: str
    command: 'StyleCommand'


Listener = Callable[['HistoryManager'], None]


class HistoryManager:
    def __init__(self, context: 'StyleContext', max_entries: Optional[int] = None):
        self._context = context
        self._back_history: list['StyleCommand'] = []
        # Most recently undone command is last
        self._forward_history: list['StyleCommand'] = []
        self._max_entries = max_entries
        self._listeners: list[Listener] = []

    @property
    def context(self) -> 'StyleContext':
        return self._context

    @property
    def back_history(self) -> tuple['StyleCommand', ...]:
        return tuple(self._back_history)

    @property
    def forward_history(self) -> tuple['StyleCommand', ...]:
        return tuple(self._forward_history)

    def add_listener(self, callback: Listener):
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)

    def clear(self):
        self._back_history.clear()
        self._forward_history.clear()
        self._notify()

    def execute(self, command: 'StyleCommand'):
        # Stacks change only once the mutation went through
        command.execute(self._context)
        self._back_history.append(command)
        # Any new action invalidates redo history
        self._forward_history.clear()
        # Cap history
        if self._max_entries is not None and len(self._back_history) > self._max_entries:
            dropped = self._back_history.pop(0)
            logger.debug("History full, dropped %r", dropped)
        logger.debug("Executed %s", command.describe())
        self._notify()

    def can_undo(self) -> bool:
        return bool(self._back_history)

    def can_redo(self) -> bool:
        return bool(self._forward_history)

    def undo(self) -> bool:
        if not self._back_history:
            return False
        command = self._back_history[-1]
        command.undo(self._context)
        self._back_history.pop()
        self._forward_history.append(command)
        logger.debug("Undid %s", command.describe())
        self._notify()
        return True

    def redo(self) -> bool:
        if not self._forward_history:
            return False
        command = self._forward_history[-1]
        command.execute(self._context)
        self._forward_history.pop()
        self._back_history.append(command)
        logger.debug("Redid %s", command.describe())
        self._notify()
        return True

    def jump_back_to(self, index: int) -> int:
        """Undo until ``index`` entries remain in back-history.

        Returns the number of undo steps taken.
        """
        target = max(index, 0)
        steps = 0
        while len(self._back_history) > target:
            self.undo()
            steps += 1
        return steps

    def jump_forward_to(self, index: int) -> int:
        """Redo until ``index`` entries remain in forward-history.

        Returns the number of redo steps taken.
        """
        target = max(index, 0)
        steps = 0
        while len(self._forward_history) > target:
            self.redo()
            steps += 1
        return steps

    def reset(self) -> int:
        """Undo everything, back to the initial state."""
        return self.jump_back_to(0)

    def list_history(self) -> list[HistoryEntry]:
        """Return back entries oldest first, then forward entries in redo order."""
        entries = [
            HistoryEntry(HistoryKind.UNDO, i, command.describe(), command)
            for i, command in enumerate(self._back_history)
        ]
        for i in range(len(self._forward_history) - 1, -1, -1):
            command = self._forward_history[i]
            entries.append(HistoryEntry(HistoryKind.REDO, i, command.describe(), command))
        return entries

    def activate(self, entry: HistoryEntry) -> int:
        """Jump so that ``entry`` becomes the newest applied command.

        An UNDO entry stays applied and every newer command is undone; a
        REDO entry is redone together with every command redo would reach
        first. Either way the same row lands on the same state. Entries
        that no longer match the stacks are ignored and return 0.
        """
        if not isinstance(entry, HistoryEntry):
            raise TypeError(f"Expected HistoryEntry, got {type(entry).__name__}")
        stack = self._back_history if entry.kind is HistoryKind.UNDO else self._forward_history
        if not 0 <= entry.index < len(stack) or stack[entry.index] is not entry.command:
            logger.debug("Ignoring stale history entry %r", entry.label)
            return 0
        if entry.kind is HistoryKind.UNDO:
            return self.jump_back_to(entry.index + 1)
        return self.jump_forward_to(entry.index)
