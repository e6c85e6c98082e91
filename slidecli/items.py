"""Items that can be placed on a slide."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


@dataclass
class BoundingBox:
    """Axis-aligned box given by its top-left corner and its size."""

    top_left_x: int = 20
    top_left_y: int = 20
    width: int = 100
    height: int = 100


class ItemType(enum.Enum):
    """Kinds of item a slide can hold."""

    RECTANGLE = "Rectangle"
    ELLIPSE = "Ellipse"
    TRIANGLE = "Triangle"
    TEXT = "Text"


@dataclass
class Item:
    """A shape on a slide, with its box and the options it was created with."""

    item_type: ItemType = ItemType.RECTANGLE
    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    options: dict[str, str] = field(default_factory=dict)