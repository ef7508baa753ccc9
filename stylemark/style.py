"""Shared style state that commands mutate and renderers read."""

from enum import IntFlag
from typing import Any, Dict, Iterator, Optional

from .constants import AppConstants


class StyleFlags(IntFlag):
    """Render-side summary of the active styles."""
    NONE = 0
    ITALIC = 1
    BOLD = 2
    UNDERLINE = 4


def is_bold_weight(value: Any) -> bool:
    """Return True if a font weight value means bold.

    Accepts the keyword ``"bold"`` and any numeric weight at or above 700.
    Anything else (including numeric strings and booleans) is not bold.
    """
    if value == AppConstants.BOLD:
        return True
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and value >= AppConstants.BOLD_WEIGHT_THRESHOLD


class StyleContext:
    """Mapping from style attribute name to value.

    An attribute that was never set is absent rather than stored as None.
    Only commands should call ``set``; everything else reads.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = {}
        for name, value in (initial or {}).items():
            self.set(name, value)

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        """Set an attribute; a value of None removes it."""
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = value

    def as_dict(self) -> Dict[str, Any]:
        """Return a copy of the current values."""
        return dict(self._values)

    def flags(self) -> StyleFlags:
        """Summarize the context as flags for rendering."""
        flags = StyleFlags.NONE
        if self._values.get(AppConstants.FONT_STYLE) == AppConstants.ITALIC:
            flags |= StyleFlags.ITALIC
        if is_bold_weight(self._values.get(AppConstants.FONT_WEIGHT)):
            flags |= StyleFlags.BOLD
        if self._values.get(AppConstants.TEXT_DECORATION) == AppConstants.UNDERLINE:
            flags |= StyleFlags.UNDERLINE
        return flags

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StyleContext):
            return self._values == other._values
        if isinstance(other, dict):
            return self._values == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"StyleContext({self._values!r})"
