# slidecli

A small slide editor. A document holds slides, a slide holds shapes
(rectangles, ellipses and triangles), and you build it up by typing
commands into a command line at the bottom of the window.

It has no dependencies beyond the standard library. The window uses
`tkinter`, so your Python must have Tk support.

## Starting it

```
slidecli
```

This opens the main window: a list of slides on the left, the current
slide on a black drawing area, a toolbar with shape buttons at the top,
and the command line with its output log underneath. The document starts
with one empty slide.

## Commands

A command is a name followed by `-option value` pairs, separated by
whitespace.

| Command | What it does |
|---------|--------------|
| `Add -item <Rectangle\|Ellipse\|Triangle>` | Adds a shape to the current slide |
| `AddSlide` | Appends a new empty slide to the document and logs "Added new slide." |
| `Help` | Prints a summary of the commands to the log |
| `Quit` | Closes the window |

Options understood by `Add`:

- `-x`, `-y`: the top-left corner of the shape as whole numbers
  (defaults: 20, 20; every shape is 100 by 100)
- `-Bcolor`: border colour, either a colour name such as `red` or
  `blue`, or a `#` hex colour such as `#ff0000`; an unknown colour or
  no colour gives a white border
- `-Bstyle`: `DashLine` or `DotLine`; anything else gives a solid line.
  Borders are 3 pixels wide.

Example:

```
Add -item Triangle -x 150 -y 40 -Bcolor red -Bstyle DashLine
```

An unknown command, an unknown shape name or a bad number for `-x` or
`-y` is reported in the output log and leaves the document unchanged.

The Up and Down keys step through the commands you have already entered.
The Rectangle, Ellipse and Triangle toolbar buttons add a default-sized
shape to the current slide without typing.

## What it does not do

- The current slide is always the first one. `AddSlide` adds slides to
  the list, but there is no way to switch to them, and selecting a slide
  in the list does nothing.
- There are no text items: the toolbar's Text button does nothing.
- Shapes cannot be moved, changed or removed once added.
- Documents cannot be saved or loaded; everything is lost when the
  window closes.

## Using it from Python

The parts behind the window can be used without it:

```python
from slidecli.application import Application

app = Application()
app.on_log(print)
app.run_command("Add -item Ellipse -x 10 -y 10")
app.run_command("AddSlide")
print(len(app.current_slide().items))
```

- `slidecli.application`: `Application` holds the `document`, runs a
  command line with `run_command`, and notifies listeners registered with
  `on_log` and `on_document_changed`. `Quit` only sets
  `quit_requested`. `window_size()` gives the preferred window size.
- `slidecli.document`: `Document` and `Slide`, with `add_slide`,
  `get_slide`, `add_item`, `get_item` and the `slides` and `items`
  snapshots.
- `slidecli.items`: `Item`, `ItemType` and `BoundingBox`.
- `slidecli.parser`: `CommandCreator.parse` turns a line of text into a
  command object; `CommandRegistry.register` adds further commands.
- `slidecli.commands`: the command classes and `parse_item_type`.
- `slidecli.renderer`: `SlideRenderer.render_slide` draws a slide onto
  any object with `draw_rect(rect, pen)`, `draw_ellipse(rect, pen)` and
  `draw_polygon(points, pen)`; `styled_pen` builds the `Pen` from an
  item's options.
- `slidecli.gui`: `MainWindow`, `CommandHistory`, `slide_labels` and
  `main`.

## Running the tests

```
pip install -e ".[test]"
pytest
```