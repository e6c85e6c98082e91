"""Drawing slides and their items onto a canvas.

A canvas is any object with ``draw_rect(rect, pen)``, ``draw_ellipse(rect, pen)``
and ``draw_polygon(points, pen)``, where ``rect`` is ``(x, y, width, height)``
and ``points`` is a list of ``(x, y)`` pairs.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from slidecli.document import Slide
from slidecli.items import BoundingBox, Item, ItemType

_NAMED_COLORS = frozenset(
    """
    aliceblue antiquewhite aqua aquamarine azure beige bisque black
    blanchedalmond blue blueviolet brown burlywood cadetblue chartreuse
    chocolate coral cornflowerblue cornsilk crimson cyan darkblue darkcyan
    darkgoldenrod darkgray darkgreen darkgrey darkkhaki darkmagenta
    darkolivegreen darkorange darkorchid darkred darksalmon darkseagreen
    darkslateblue darkslategray darkslategrey darkturquoise darkviolet
    deeppink deepskyblue dimgray dimgrey dodgerblue firebrick floralwhite
    forestgreen fuchsia gainsboro ghostwhite gold goldenrod gray grey green
    greenyellow honeydew hotpink indianred indigo ivory khaki lavender
    lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
    lightgoldenrodyellow lightgray lightgreen lightgrey lightpink lightsalmon
    lightseagreen lightskyblue lightslategray lightslategrey lightsteelblue
    lightyellow lime limegreen linen magenta maroon mediumaquamarine
    mediumblue mediumorchid mediumpurple mediumseagreen mediumslateblue
    mediumspringgreen mediumturquoise mediumvioletred midnightblue mintcream
    mistyrose moccasin navajowhite navy oldlace olive olivedrab orange
    orangered orchid palegoldenrod palegreen paleturquoise palevioletred
    papayawhip peachpuff peru pink plum powderblue purple red rosybrown
    royalblue saddlebrown salmon sandybrown seagreen seashell sienna silver
    skyblue slateblue slategray slategrey snow springgreen steelblue tan teal
    thistle tomato turquoise violet wheat white whitesmoke yellow yellowgreen
    transparent
    """.split()
)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_HEX_LENGTHS = frozenset({3, 6, 8, 9, 12})

Rect = tuple[int, int, int, int]
Point = tuple[int, int]


class PenStyle(enum.Enum):
    """Line styles for item borders."""

    SOLID = "SolidLine"
    DASH = "DashLine"
    DOT = "DotLine"


@dataclass(frozen=True)
class Pen:
    """Border colour, width and line style."""

    color: str = "white"
    width: int = 3
    style: PenStyle = PenStyle.SOLID


def is_valid_color(name: str) -> bool:
    """True for '#' hex colours and SVG colour names (case and spaces ignored)."""
    if name.startswith("#"):
        digits = name[1:]
        return len(digits) in _HEX_LENGTHS and all(c in _HEX_DIGITS for c in digits)
    compact = "".join(c for c in name if c not in " \t").lower()
    return compact in _NAMED_COLORS


def bounding_rect(box: BoundingBox) -> Rect:
    """The box as an (x, y, width, height) tuple."""
    return (box.top_left_x, box.top_left_y, box.width, box.height)


def triangle_points(box: BoundingBox) -> list[Point]:
    """Apex at the top centre, base along the bottom edge of the box."""
    x, y, w, h = bounding_rect(box)
    half = int(w / 2)
    return [(x + half, y), (x, y + h), (x + w, y + h)]


def styled_pen(options: Mapping[str, str]) -> Pen:
    """Build the border pen from -Bcolor and -Bstyle; white solid otherwise."""
    color = options.get("-Bcolor")
    if color is None or not is_valid_color(color):
        color = "white"
    style = PenStyle.SOLID
    requested = options.get("-Bstyle")
    if requested == PenStyle.DASH.value:
        style = PenStyle.DASH
    elif requested == PenStyle.DOT.value:
        style = PenStyle.DOT
    return Pen(color=color, style=style)


RenderFunction = Callable[[Item, Any, Pen], None]


class ItemRenderer:
    """Dispatches drawing of an item to the function registered for its type."""

    def __init__(self) -> None:
        self._functions: dict[ItemType, RenderFunction] = {}
        self.register(
            ItemType.RECTANGLE,
            lambda item, canvas, pen: canvas.draw_rect(bounding_rect(item.bounding_box), pen),
        )
        self.register(
            ItemType.ELLIPSE,
            lambda item, canvas, pen: canvas.draw_ellipse(bounding_rect(item.bounding_box), pen),
        )
        self.register(
            ItemType.TRIANGLE,
            lambda item, canvas, pen: canvas.draw_polygon(triangle_points(item.bounding_box), pen),
        )

    def register(self, item_type: ItemType, function: RenderFunction) -> None:
        """Register (or replace) the drawing function for an item type."""
        self._functions[item_type] = function

    def render(self, item: Item, canvas: Any, pen: Pen) -> None:
        """Draw one item; raise ValueError if its type has no renderer."""
        try:
            function = self._functions[item.item_type]
        except KeyError:
            raise ValueError("Item is not renderable.") from None
        function(item, canvas, pen)


class SlideRenderer:
    """Draws every item of a slide with the pen its options describe."""

    def __init__(self, item_renderer: ItemRenderer | None = None) -> None:
        self.item_renderer = item_renderer if item_renderer is not None else ItemRenderer()

    def render_slide(self, slide: Slide, canvas: Any) -> None:
        """Draw the slide's items in order."""
        for item in slide.items:
            self.item_renderer.render(item, canvas, styled_pen(item.options))