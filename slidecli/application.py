"""The running application: document state, command dispatch and notifications."""

from __future__ import annotations

from collections.abc import Callable

from slidecli.document import Document, Slide
from slidecli.parser import CommandCreator
from slidecli.renderer import SlideRenderer

_WINDOW_WIDTH = 800
_WINDOW_HEIGHT = 600


def window_size() -> tuple[int, int]:
    """The preferred (width, height) of the main window."""
    return (_WINDOW_WIDTH, _WINDOW_HEIGHT)


class Application:
    """Holds the document and runs text commands against it.

    Listeners registered with :meth:`on_log` receive every log message, and
    those registered with :meth:`on_document_changed` are told after each
    command that ran successfully.
    """

    def __init__(self) -> None:
        self.document = Document()
        self.document.add_slide()
        self.current_slide_id = 0
        self.command_creator = CommandCreator()
        self.slide_renderer = SlideRenderer()
        self.quit_requested = False
        self._log_listeners: list[Callable[[str], None]] = []
        self._change_listeners: list[Callable[[], None]] = []

    def current_slide(self) -> Slide:
        """The slide currently being edited."""
        return self.document.get_slide(self.current_slide_id)

    def run_command(self, text: str) -> None:
        """Parse and execute one command line; failures go to the log."""
        try:
            command = self.command_creator.parse(text)
            command.execute(self)
        except (ValueError, LookupError) as error:
            self.log_output(str(error))
            return
        self.document_changed()

    def log_output(self, message: str) -> None:
        """Send a message to every log listener."""
        for callback in self._log_listeners:
            callback(message)

    def document_changed(self) -> None:
        """Tell every listener that the document changed."""
        for callback in self._change_listeners:
            callback()

    def quit(self) -> None:
        """Ask the application to stop."""
        self.quit_requested = True

    def on_log(self, callback: Callable[[str], None]) -> None:
        """Register a listener for log messages."""
        self._log_listeners.append(callback)

    def on_document_changed(self, callback: Callable[[], None]) -> None:
        """Register a listener for document changes."""
        self._change_listeners.append(callback)