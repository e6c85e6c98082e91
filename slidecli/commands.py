"""Commands that act on the running application."""

from __future__ import annotations

import abc
import re
from collections.abc import Mapping
from typing import Any

from slidecli.items import Item, ItemType

_ITEM_TYPES: dict[str, ItemType] = {
    "Rectangle": ItemType.RECTANGLE,
    "Ellipse": ItemType.ELLIPSE,
    "Triangle": ItemType.TRIANGLE,
}

HELP_LINES = (
    "Add -item [Rectangle, Ellipse, Triangle] -Bcolor [red, blue, ...] -Bstyle [DashLine, DotLine]",
    "AddSlide",
    "Help",
)

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _to_int(text: str) -> int:
    """Read a leading integer the way a lenient C conversion does."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_item_type(name: str) -> ItemType:
    """Map an item name to its type; only drawable shapes are accepted."""
    try:
        return _ITEM_TYPES[name]
    except KeyError:
        raise ValueError(f"This item is not available AddItem: {name}") from None


class Command(abc.ABC):
    """A command carrying its option values."""

    def __init__(self, options: Mapping[str, str] | None = None) -> None:
        self.options: dict[str, str] = dict(options or {})

    @abc.abstractmethod
    def execute(self, app: Any) -> None:
        """Run the command against the application."""

    def set_options(self, options: Mapping[str, str]) -> None:
        """Replace the option values with a copy of the given mapping."""
        self.options = dict(options)


class AddItemCommand(Command):
    """Add a shape to the current slide."""

    def execute(self, app: Any) -> None:
        item_type = parse_item_type(self.options.get("-item", ""))
        item = Item(item_type, options=dict(self.options))
        if "-x" in self.options:
            item.bounding_box.top_left_x = _to_int(self.options["-x"])
        if "-y" in self.options:
            item.bounding_box.top_left_y = _to_int(self.options["-y"])
        app.current_slide().add_item(item)


class AddSlideCommand(Command):
    """Append a new slide to the document."""

    def execute(self, app: Any) -> None:
        app.document.add_slide()
        app.log_output("Added new slide.")


class HelpCommand(Command):
    """Write the command summary to the log."""

    def execute(self, app: Any) -> None:
        for line in HELP_LINES:
            app.log_output(line)


class QuitCommand(Command):
    """Stop the application."""

    def execute(self, app: Any) -> None:
        app.quit()