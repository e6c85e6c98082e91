"""Turning a command line into a command object."""

from __future__ import annotations

from collections.abc import Callable

from slidecli.commands import (
    AddItemCommand,
    AddSlideCommand,
    Command,
    HelpCommand,
    QuitCommand,
)

Creator = Callable[[], Command]


class CommandRegistry:
    """Maps command names to factories."""

    def __init__(self) -> None:
        self._creators: dict[str, Creator] = {}
        self.register("Add", AddItemCommand)
        self.register("AddSlide", AddSlideCommand)
        self.register("Help", HelpCommand)
        self.register("Quit", QuitCommand)

    def register(self, name: str, creator: Creator) -> None:
        """Register (or replace) the factory for a command name."""
        self._creators[name] = creator

    def create(self, name: str) -> Command:
        """Build a fresh command for the name; raise ValueError if unknown."""
        try:
            creator = self._creators[name]
        except KeyError:
            raise ValueError("Command is invalid! See Help.") from None
        return creator()


class CommandCreator:
    """Parses 'Name -key value -key value ...' into a configured command."""

    def __init__(self, registry: CommandRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CommandRegistry()

    def parse(self, text: str) -> Command:
        """Parse one command line and return the command with its options set."""
        tokens = iter(text.split())
        command = self.registry.create(next(tokens, ""))
        options: dict[str, str] = {}
        value = ""
        for key in tokens:
            # A key without a following value keeps the last value read.
            value = next(tokens, value)
            options[key] = value
        command.set_options(options)
        return command