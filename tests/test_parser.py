import pytest

from slidecli.commands import (
    AddItemCommand,
    AddSlideCommand,
    HelpCommand,
    QuitCommand,
)
from slidecli.parser import CommandCreator, CommandRegistry


@pytest.mark.parametrize(
    "name, cls",
    [
        ("Add", AddItemCommand),
        ("AddSlide", AddSlideCommand),
        ("Help", HelpCommand),
        ("Quit", QuitCommand),
    ],
)
def test_registry_creates_default_commands(name, cls):
    assert type(CommandRegistry().create(name)) is cls


def test_registry_creates_fresh_instances():
    registry = CommandRegistry()
    first = registry.create("Help")
    second = registry.create("Help")
    first.set_options({"-x": "1"})
    second.set_options({"-y": "2"})
    assert first.options == {"-x": "1"}
    assert second.options == {"-y": "2"}


@pytest.mark.parametrize("name", ["add", "Display", ""])
def test_registry_unknown_name(name):
    with pytest.raises(ValueError, match="Command is invalid! See Help."):
        CommandRegistry().create(name)


def test_registry_register_replaces_creator():
    registry = CommandRegistry()
    replacement = QuitCommand()
    registry.register("Help", lambda: replacement)
    registry.register("Exit", QuitCommand)
    assert registry.create("Help") is replacement
    command = CommandCreator(registry).parse("Exit -now yes")
    assert type(command) is QuitCommand
    assert command.options == {"-now": "yes"}


def test_parse_command_with_options():
    command = CommandCreator().parse("Add -item Rectangle -x 10")
    assert type(command) is AddItemCommand
    assert command.options == {"-item": "Rectangle", "-x": "10"}


def test_parse_command_without_options():
    command = CommandCreator().parse("AddSlide")
    assert type(command) is AddSlideCommand
    assert command.options == {}


def test_parse_ignores_extra_whitespace():
    command = CommandCreator().parse("  Add \t -item   Ellipse  ")
    assert command.options == {"-item": "Ellipse"}


@pytest.mark.parametrize("text", ["", "   ", "Bogus -item Rectangle"])
def test_parse_invalid_command(text):
    with pytest.raises(ValueError, match="Command is invalid"):
        CommandCreator().parse(text)


def test_parse_trailing_key_reuses_last_value():
    command = CommandCreator().parse("Add -item Triangle -x")
    assert command.options == {"-item": "Triangle", "-x": "Triangle"}


def test_parse_lone_key_gets_empty_value():
    command = CommandCreator().parse("Help -v")
    assert command.options == {"-v": ""}


def test_parse_repeated_key_last_wins():
    command = CommandCreator().parse("Add -item Rectangle -item Ellipse")
    assert command.options == {"-item": "Ellipse"}


def test_parse_uses_given_registry():
    registry = CommandRegistry()
    registry.register("Bye", QuitCommand)
    command = CommandCreator(registry).parse("Bye -mode fast")
    assert type(command) is QuitCommand
    assert command.options == {"-mode": "fast"}