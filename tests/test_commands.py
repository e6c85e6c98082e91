import pytest

from slidecli.commands import (
    AddItemCommand,
    AddSlideCommand,
    Command,
    HelpCommand,
    QuitCommand,
    parse_item_type,
)
from slidecli.document import Document
from slidecli.items import BoundingBox, ItemType


class FakeApp:
    def __init__(self):
        self.document = Document()
        self.document.add_slide()
        self.logs = []
        self.quit_called = False

    def current_slide(self):
        return self.document.get_slide(0)

    def log_output(self, message):
        self.logs.append(message)

    def quit(self):
        self.quit_called = True


@pytest.mark.parametrize(
    "name, kind",
    [
        ("Rectangle", ItemType.RECTANGLE),
        ("Ellipse", ItemType.ELLIPSE),
        ("Triangle", ItemType.TRIANGLE),
    ],
)
def test_parse_item_type_known(name, kind):
    assert parse_item_type(name) is kind


@pytest.mark.parametrize("name", ["Text", "", "rectangle", "Circle"])
def test_parse_item_type_unknown(name):
    with pytest.raises(ValueError, match="This item is not available AddItem: "):
        parse_item_type(name)


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_set_options_copies():
    options = {"-item": "Ellipse"}
    command = AddItemCommand()
    command.set_options(options)
    options["-item"] = "Triangle"
    assert command.options == {"-item": "Ellipse"}


def test_add_item_places_shape_at_coordinates():
    app = FakeApp()
    AddItemCommand({"-item": "Ellipse", "-x": "5", "-y": "7"}).execute(app)
    (item,) = app.current_slide().items
    assert item.item_type is ItemType.ELLIPSE
    assert (item.bounding_box.top_left_x, item.bounding_box.top_left_y) == (5, 7)
    assert item.bounding_box.width == BoundingBox().width


def test_add_item_without_coordinates_keeps_default_box():
    app = FakeApp()
    AddItemCommand({"-item": "Triangle"}).execute(app)
    assert app.current_slide().get_item(0).bounding_box == BoundingBox()


def test_add_item_copies_options_into_item():
    app = FakeApp()
    options = {"-item": "Rectangle", "-Bcolor": "red"}
    command = AddItemCommand(options)
    command.execute(app)
    item = app.current_slide().get_item(0)
    assert item.options == options
    command.options["-Bcolor"] = "blue"
    assert item.options["-Bcolor"] == "red"


def test_add_item_reads_leading_digits():
    app = FakeApp()
    AddItemCommand({"-item": "Rectangle", "-x": "12abc", "-y": " -3"}).execute(app)
    box = app.current_slide().get_item(0).bounding_box
    assert (box.top_left_x, box.top_left_y) == (12, -3)


@pytest.mark.parametrize("value", ["abc", "", "99999999999"])
def test_add_item_bad_coordinate(value):
    app = FakeApp()
    with pytest.raises(ValueError):
        AddItemCommand({"-item": "Rectangle", "-x": value}).execute(app)
    assert app.current_slide().items == ()


def test_add_item_without_item_name_fails():
    app = FakeApp()
    with pytest.raises(ValueError, match="not available"):
        AddItemCommand({"-x": "1"}).execute(app)
    assert app.current_slide().items == ()


def test_add_slide_command():
    app = FakeApp()
    AddSlideCommand().execute(app)
    assert len(app.document.slides) == 2
    assert app.logs == ["Added new slide."]


def test_help_command_logs_summary():
    app = FakeApp()
    HelpCommand().execute(app)
    assert len(app.logs) == 3
    assert app.logs[0].startswith("Add -item [Rectangle, Ellipse, Triangle]")
    assert app.logs[1:] == ["AddSlide", "Help"]


def test_quit_command():
    app = FakeApp()
    QuitCommand().execute(app)
    assert app.quit_called is True