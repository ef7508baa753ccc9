"""Tests for the italic/bold/underline toggle commands."""

import pytest
from stylemark.style import StyleContext, StyleFlags
from stylemark.commands import ItalicCommand, BoldCommand, UnderlineCommand


def test_italic_toggles_from_empty_context():
    context = StyleContext()
    command = ItalicCommand(context)
    assert command.prior is None
    assert command.target == "italic"

    command.execute(context)
    assert context == {"font_style": "italic"}


def test_italic_on_italic_turns_normal():
    context = StyleContext({"font_style": "italic"})
    command = ItalicCommand(context)
    command.execute(context)
    assert context == {"font_style": "normal"}


def test_undo_of_unset_attribute_removes_it():
    context = StyleContext()
    command = UnderlineCommand(context)
    command.execute(context)
    assert context == {"text_decoration": "underline"}

    command.undo(context)
    assert context == {}
    assert "text_decoration" not in context


def test_underline_uses_unset_as_base_value():
    context = StyleContext({"text_decoration": "underline"})
    command = UnderlineCommand(context)
    command.execute(context)
    assert context.get("text_decoration") == "unset"


def test_execute_twice_reapplies_same_target():
    """The toggle decision is fixed at construction, not re-evaluated."""
    context = StyleContext()
    command = ItalicCommand(context)
    command.execute(context)
    command.execute(context)
    assert context == {"font_style": "italic"}


def test_prior_value_is_not_affected_by_context_changes():
    context = StyleContext({"font_weight": "bold"})
    command = BoldCommand(context)
    context.set("font_weight", "normal")
    assert command.prior == "bold"
    command.undo(context)
    assert context == {"font_weight": "bold"}


@pytest.mark.parametrize("weight", [700, 800, 900, 700.0, "bold"])
def test_bold_treats_heavy_weights_as_bold(weight):
    context = StyleContext({"font_weight": weight})
    command = BoldCommand(context)
    command.execute(context)
    assert context == {"font_weight": "normal"}


@pytest.mark.parametrize("weight", [None, 400, 699, "700", "normal", True, object()])
def test_bold_treats_everything_else_as_normal(weight):
    context = StyleContext({"font_weight": weight})
    command = BoldCommand(context)
    command.execute(context)
    assert context.get("font_weight") == "bold"


def test_bold_undo_restores_numeric_weight():
    context = StyleContext({"font_weight": 700})
    command = BoldCommand(context)
    command.execute(context)
    command.undo(context)
    assert context == {"font_weight": 700}


def test_commands_only_touch_their_own_attribute():
    context = StyleContext({"font_style": "italic", "text_decoration": "underline"})
    command = BoldCommand(context)
    command.execute(context)
    assert context == {
        "font_style": "italic",
        "font_weight": "bold",
        "text_decoration": "underline",
    }


def test_describe_names_command_and_target():
    context = StyleContext()
    assert ItalicCommand(context).describe() == "Italic command: change into italic"
    assert BoldCommand(context).describe() == "Bold command: change into bold"
    assert UnderlineCommand(context).describe() == "Underline command: change into underline"

    context = StyleContext({"font_style": "italic"})
    command = ItalicCommand(context)
    assert command.describe() == "Italic command: change into normal"


def test_describe_is_stable():
    context = StyleContext()
    command = ItalicCommand(context)
    before = command.describe()
    command.execute(context)
    command.undo(context)
    assert command.describe() == before
    assert context == {}


def test_context_flags():
    context = StyleContext()
    assert context.flags() == StyleFlags.NONE
    context.set("font_style", "italic")
    context.set("font_weight", 750)
    context.set("text_decoration", "underline")
    assert context.flags() == StyleFlags.ITALIC | StyleFlags.BOLD | StyleFlags.UNDERLINE
    context.set("text_decoration", "unset")
    assert not context.flags() & StyleFlags.UNDERLINE
