"""Key-bound editor actions (command pattern for key handling)."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, Type, TYPE_CHECKING
from .keyboard import KeyType
from .commands import StyleCommand, ItalicCommand, BoldCommand, UnderlineCommand

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorAction(ABC):
    """Base class for editor actions."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the action.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this action

        Returns:
            True if the style context changed
        """
        pass


class ToggleStyleAction(EditorAction):
    """Base class for actions that record a new style command."""

    command_class: Type[StyleCommand]

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        # The command captures the context as it is right now
        command = self.command_class(editor.context)
        editor.history.execute(command)
        editor.status_message = command.describe()
        return True


class ToggleItalicAction(ToggleStyleAction):
    command_class = ItalicCommand


class ToggleBoldAction(ToggleStyleAction):
    command_class = BoldCommand


class ToggleUnderlineAction(ToggleStyleAction):
    command_class = UnderlineCommand


class UndoAction(EditorAction):
    def execute(self, editor, key_event):
        if editor.history.undo():
            editor.status_message = "Undone"
            return True
        editor.status_message = "Nothing to undo"
        return False


class RedoAction(EditorAction):
    def execute(self, editor, key_event):
        if editor.history.redo():
            editor.status_message = "Redone"
            return True
        editor.status_message = "Nothing to redo"
        return False


class SelectionAction(EditorAction):
    """Base class for moving the history selection."""

    delta = 0

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Selection changes don't touch the style context."""
        editor.move_selection(self.delta)
        return False


class SelectPreviousAction(SelectionAction):
    delta = -1


class SelectNextAction(SelectionAction):
    delta = 1


class ActivateSelectionAction(EditorAction):
    def execute(self, editor, key_event):
        steps = editor.activate_selection()
        editor.status_message = f"Jumped {steps} step{'s' if steps != 1 else ''}"
        return steps > 0


class InitialStateAction(EditorAction):
    def execute(self, editor, key_event):
        steps = editor.history.reset()
        editor.status_message = "Back to initial state" if steps else "Already at initial state"
        return steps > 0


class SystemAction(EditorAction):
    """Base class for system actions like quit and help."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class QuitAction(SystemAction):
    def _execute_system(self, editor, key_event):
        editor.running = False


class HelpAction(SystemAction):
    def _execute_system(self, editor, key_event):
        editor.show_help()


class ActionRegistry:
    """Registry for mapping key combinations to actions."""

    def __init__(self):
        self._actions: Dict[Tuple[KeyType, str], EditorAction] = {}
        self._setup_default_actions()

    def _setup_default_actions(self):
        """Set up the default key mappings."""
        # Style toggles
        self.register((KeyType.REGULAR, 'i'), ToggleItalicAction())
        self.register((KeyType.ALT, 'i'), ToggleItalicAction())
        self.register((KeyType.REGULAR, 'b'), ToggleBoldAction())
        self.register((KeyType.CTRL, 'b'), ToggleBoldAction())
        self.register((KeyType.REGULAR, 'u'), ToggleUnderlineAction())
        self.register((KeyType.CTRL, 'u'), ToggleUnderlineAction())

        # Undo/redo
        self.register((KeyType.REGULAR, 'z'), UndoAction())
        self.register((KeyType.CTRL, 'z'), UndoAction())
        self.register((KeyType.REGULAR, 'y'), RedoAction())
        self.register((KeyType.CTRL, 'y'), RedoAction())

        # History list
        self.register((KeyType.SPECIAL, 'up'), SelectPreviousAction())
        self.register((KeyType.SPECIAL, 'down'), SelectNextAction())
        self.register((KeyType.SPECIAL, 'enter'), ActivateSelectionAction())
        self.register((KeyType.SPECIAL, 'home'), InitialStateAction())

        # System
        self.register((KeyType.REGULAR, 'q'), QuitAction())
        self.register((KeyType.CTRL, 'q'), QuitAction())
        self.register((KeyType.SPECIAL, 'f1'), HelpAction())

    def register(self, key: Tuple[KeyType, str], action: EditorAction):
        """Register an action for a key combination."""
        self._actions[key] = action

    def get_action(self, key_type: KeyType, value: str) -> Optional[EditorAction]:
        """Get the action for a key combination."""
        if key_type == KeyType.REGULAR:
            # Letter bindings ignore case
            value = value.lower()
        return self._actions.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the action for the given key event.

        Returns:
            True if the style context changed
        """
        action = self.get_action(key_event.key_type, key_event.value)
        if action:
            return action.execute(editor, key_event)
        return False
