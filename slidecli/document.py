"""Slides and the document that holds them."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from slidecli.items import Item

_T = TypeVar("_T")


def _at(sequence: Sequence[_T], position: int) -> _T:
    """Bounds-checked lookup that refuses negative positions."""
    if not 0 <= position < len(sequence):
        raise IndexError(f"position {position} out of range (size {len(sequence)})")
    return sequence[position]


class Slide:
    """An ordered collection of items."""

    def __init__(self) -> None:
        self._items: list[Item] = []

    def add_item(self, item: Item) -> None:
        """Append an item to the slide."""
        self._items.append(item)

    def get_item(self, position: int) -> Item:
        """Return the item at the given position; raise IndexError if absent."""
        return _at(self._items, position)

    @property
    def items(self) -> tuple[Item, ...]:
        """A snapshot of the items in insertion order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)


class Document:
    """An ordered collection of slides."""

    def __init__(self) -> None:
        self._slides: list[Slide] = []

    def add_slide(self) -> Slide:
        """Append a new empty slide and return it."""
        slide = Slide()
        self._slides.append(slide)
        return slide

    def get_slide(self, position: int) -> Slide:
        """Return the slide at the given position; raise IndexError if absent."""
        return _at(self._slides, position)

    @property
    def slides(self) -> tuple[Slide, ...]:
        """A snapshot of the slides in order."""
        return tuple(self._slides)

    def __len__(self) -> int:
        return len(self._slides)