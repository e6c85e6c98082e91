"""Desktop window: slide list, drawing area, toolbar and command line."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

from slidecli.application import Application, window_size
from slidecli.document import Document
from slidecli.items import Item, ItemType
from slidecli.renderer import Pen, PenStyle

_DASHES = {PenStyle.SOLID: (), PenStyle.DASH: (6, 4), PenStyle.DOT: (2, 4)}
_SLIDE_LIST_WIDTH = 180
_COMMAND_AREA_HEIGHT = 120


def slide_labels(document: Document) -> list[str]:
    """Labels for the slide list, numbered from 1."""
    return [f"Slide {number}" for number, _ in enumerate(document.slides, start=1)]


class CommandHistory:
    """Previously entered commands, browsable with up and down."""

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._position = -1

    def push(self, command: str) -> None:
        """Record a command and move the cursor to it."""
        self._entries.append(command)
        self._position = len(self._entries) - 1

    def previous(self) -> str | None:
        """Step back one entry and return it; None when empty."""
        if not self._entries:
            return None
        if self._position > 0:
            self._position -= 1
        return self._entries[self._position]

    def next(self) -> str | None:
        """Step forward one entry and return it; None when empty."""
        if not self._entries:
            return None
        if self._position < len(self._entries) - 1:
            self._position += 1
        return self._entries[self._position]

    def __len__(self) -> int:
        return len(self._entries)


class _TkCanvas:
    """Adapts a tkinter Canvas to the renderer's drawing interface."""

    def __init__(self, canvas: Any, tcl_error: type[Exception]) -> None:
        self._canvas = canvas
        self._tcl_error = tcl_error

    def _draw(self, create: Any, coords: Sequence[int], pen: Pen) -> None:
        options = {"width": pen.width, "dash": _DASHES[pen.style], "fill": ""}
        if create == self._canvas.create_polygon:
            options["outline"] = pen.color
        else:
            options["outline"] = pen.color
        try:
            create(*coords, **options)
        except self._tcl_error:
            options["outline"] = "white"
            create(*coords, **options)

    def draw_rect(self, rect: tuple[int, int, int, int], pen: Pen) -> None:
        x, y, w, h = rect
        self._draw(self._canvas.create_rectangle, (x, y, x + w, y + h), pen)

    def draw_ellipse(self, rect: tuple[int, int, int, int], pen: Pen) -> None:
        x, y, w, h = rect
        self._draw(self._canvas.create_oval, (x, y, x + w, y + h), pen)

    def draw_polygon(self, points: list[tuple[int, int]], pen: Pen) -> None:
        coords = [value for point in points for value in point]
        self._draw(self._canvas.create_polygon, coords, pen)


class MainWindow:
    """The main window wired to an application."""

    def __init__(self, app: Application | None = None) -> None:
        import tkinter as tk

        self._tk = tk
        self.app = app if app is not None else Application()
        self.history = CommandHistory()

        self.root = tk.Tk()
        self.root.title("slidecli")

        toolbar = tk.Frame(self.root)
        toolbar.pack(side=tk.TOP, fill=tk.X)
        for label, item_type in (
            ("Rectangle", ItemType.RECTANGLE),
            ("Ellipse", ItemType.ELLIPSE),
            ("Triangle", ItemType.TRIANGLE),
        ):
            tk.Button(
                toolbar, text=label, command=lambda t=item_type: self._add_shape(t)
            ).pack(side=tk.LEFT)
        tk.Button(toolbar, text="Text").pack(side=tk.LEFT)

        body = tk.Frame(self.root)
        body.pack(fill=tk.BOTH, expand=True)

        list_frame = tk.Frame(body, width=_SLIDE_LIST_WIDTH)
        list_frame.pack(side=tk.LEFT, fill=tk.Y)
        list_frame.pack_propagate(False)
        self.slide_list = tk.Listbox(list_frame)
        self.slide_list.pack(fill=tk.BOTH, expand=True)

        right = tk.Frame(body)
        right.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        width, height = window_size()
        self.canvas = tk.Canvas(right, width=width, height=height, background="black")
        self.canvas.pack(fill=tk.BOTH, expand=True)

        command_frame = tk.Frame(right, height=_COMMAND_AREA_HEIGHT)
        command_frame.pack(fill=tk.X)
        command_frame.pack_propagate(False)
        self.command_line = tk.Entry(command_frame)
        self.command_line.pack(fill=tk.X)
        self.command_log = tk.Text(
            command_frame, background="black", foreground="yellow", state=tk.DISABLED
        )
        self.command_log.pack(fill=tk.BOTH, expand=True)

        self.command_line.bind("<Return>", self._execute_command)
        self.command_line.bind("<Up>", lambda _e: self._show(self.history.previous()))
        self.command_line.bind("<Down>", lambda _e: self._show(self.history.next()))

        self.app.on_log(self._log)
        self.app.on_document_changed(self._refresh)
        self._refresh()

    def _show(self, text: str | None) -> None:
        if text is None:
            return
        self.command_line.delete(0, self._tk.END)
        self.command_line.insert(0, text)

    def _execute_command(self, _event: Any = None) -> None:
        text = self.command_line.get()
        self.history.push(text)
        self.command_line.delete(0, self._tk.END)
        self.app.run_command(text)
        if self.app.quit_requested:
            self.root.destroy()

    def _log(self, message: str) -> None:
        self.command_log.configure(state=self._tk.NORMAL)
        self.command_log.insert(self._tk.END, message + "\n")
        self.command_log.configure(state=self._tk.DISABLED)
        self.command_log.see(self._tk.END)

    def _add_shape(self, item_type: ItemType) -> None:
        self.app.current_slide().add_item(Item(item_type))
        self._redraw()

    def _refresh(self) -> None:
        self.slide_list.delete(0, self._tk.END)
        for label in slide_labels(self.app.document):
            self.slide_list.insert(self._tk.END, label)
        self._redraw()

    def _redraw(self) -> None:
        self.canvas.delete("all")
        self.app.slide_renderer.render_slide(
            self.app.current_slide(), _TkCanvas(self.canvas, self._tk.TclError)
        )

    def run(self) -> None:
        """Show the window and process events until it is closed."""
        self.root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the presentation editor window."""
    parser = argparse.ArgumentParser(
        prog="slidecli", description="Edit slides with a command line."
    )
    parser.parse_args(argv)
    MainWindow(Application()).run()
    return 0