"""Reversible style commands recorded by the history manager."""

from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

from .constants import AppConstants
from .style import is_bold_weight

if TYPE_CHECKING:
    from .style import StyleContext


class StyleCommand(ABC):
    """Base class for reversible style toggles.

    A command reads its attribute from the context once, at construction,
    and decides there which value ``execute`` will apply. It keeps no
    reference to the context: ``execute`` and ``undo`` receive it.
    """

    name: str = ""
    attribute: str = ""
    applied_value: Any = None
    base_value: Any = None

    def __init__(self, context: 'StyleContext'):
        self._prior = context.get(self.attribute)
        self._target = self.base_value if self.is_applied(self._prior) else self.applied_value

    @property
    def prior(self) -> Any:
        """Attribute value captured before this command ran."""
        return self._prior

    @property
    def target(self) -> Any:
        """Attribute value this command applies."""
        return self._target

    @abstractmethod
    def is_applied(self, value: Any) -> bool:
        """Return True if value counts as the applied state."""
        pass

    def execute(self, context: 'StyleContext') -> None:
        context.set(self.attribute, self._target)

    def undo(self, context: 'StyleContext') -> None:
        context.set(self.attribute, self._prior)

    def describe(self) -> str:
        return f"{self.name} command: change into {self._target}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prior={self._prior!r}, target={self._target!r})"


class ItalicCommand(StyleCommand):
    name = "Italic"
    attribute = AppConstants.FONT_STYLE
    applied_value = AppConstants.ITALIC
    base_value = AppConstants.NORMAL

    def is_applied(self, value):
        return value == AppConstants.ITALIC


class BoldCommand(StyleCommand):
    name = "Bold"
    attribute = AppConstants.FONT_WEIGHT
    applied_value = AppConstants.BOLD
    base_value = AppConstants.NORMAL

    def is_applied(self, value):
        # Numeric weights count too (700 and up)
        return is_bold_weight(value)


class UnderlineCommand(StyleCommand):
    name = "Underline"
    attribute = AppConstants.TEXT_DECORATION
    applied_value = AppConstants.UNDERLINE
    base_value = AppConstants.UNSET

    def is_applied(self, value):
        return value == AppConstants.UNDERLINE
