from __future__ import annotations

import argparse
import logging
from pathlib import Path
import shutil
import sys

import requests
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.geometry import Offset
from textual.widget import Widget

from metrics import compute_result, format_result
from passages import SOURCES, Passage, PassageError, get_passage
from render import render_frame
from session import TypingSession
from timer import Timer

logger = logging.getLogger(__name__)

REFRESH_INTERVAL = 0.5
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class PassageView(Widget):
    """Full-screen view of the passage, the typing progress and the footer."""

    DEFAULT_CSS = """
    PassageView {
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self, session: TypingSession, timer: Timer) -> None:
        super().__init__(id="passage")
        self.session = session
        self.timer = timer

    def render(self) -> Text:
        frame = render_frame(self.session, self.size.height, self.timer.elapsed())
        if frame.cursor is not None:
            # Terminal cursor sits on the next character to type.
            self.app.cursor_position = self.content_region.offset + Offset(*frame.cursor)
        return frame.to_text()


class TypingTutorApp(App):
    BINDINGS = [Binding("ctrl+q", "cancel", "Quit", priority=True)]

    TITLE = "Typing Tutor"

    def __init__(self, passage: Passage, width: int | None = None) -> None:
        super().__init__()
        self.passage = passage
        self.session = TypingSession(passage.text, width or shutil.get_terminal_size().columns)
        self.timer = Timer()
        self.completed = False

    def compose(self) -> ComposeResult:
        yield PassageView(self.session, self.timer)

    def on_mount(self) -> None:
        self._rewrap(self.size.width)
        self.set_interval(REFRESH_INTERVAL, self._refresh_view)

    def on_resize(self, event: events.Resize) -> None:
        self._rewrap(event.size.width)

    def on_key(self, event: events.Key) -> None:
        if event.key == "backspace":
            self.session.pop_char()
        elif event.is_printable and event.character:
            self.session.push_char(event.character)
        else:
            return
        event.stop()

        if self.session.is_complete():
            self.completed = True
            logger.info("Passage completed in %.1fs", self.timer.elapsed())
            self.exit(True)
            return
        self._refresh_view()

    def action_cancel(self) -> None:
        logger.info("Session cancelled after %d chars", self.session.typed_len)
        self.exit(False)

    def _rewrap(self, width: int) -> None:
        if width <= 0:
            return
        self.session.rewrap(width)
        self.refresh(layout=True)
        self._refresh_view()

    def _refresh_view(self) -> None:
        for view in self.query(PassageView):
            view.refresh()


def configure_logging(path: Path | None, level: str = "INFO") -> None:
    # The terminal belongs to the app while it runs, so logs only go to a file.
    if path is None:
        handlers: list[logging.Handler] = [logging.NullHandler()]
    else:
        handlers = [logging.FileHandler(path)]
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="typing-tutor",
        description="Type a random passage in the terminal and measure your speed.",
    )
    parser.add_argument(
        "--source",
        choices=SOURCES,
        help="where to get the passage (default: paragraphs, or file when --file is given)",
    )
    parser.add_argument("--file", type=Path, help="type the text of a local file")
    parser.add_argument("--log-file", type=Path, help="write a debug log to this file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    source = args.source or ("file" if args.file else "paragraphs")

    try:
        passage = get_passage(source, args.file)
    except (PassageError, requests.RequestException, OSError) as exc:
        logger.error("Could not load passage: %s", exc)
        print(f"Could not load passage: {exc}", file=sys.stderr)
        return 1

    app = TypingTutorApp(passage)
    try:
        app.run()
    except Exception as exc:
        # textual has already restored the terminal by the time run() raises.
        logger.exception("Session failed")
        print(f"Session failed: {exc}", file=sys.stderr)
        return 1
    if app.return_code:
        logger.error("Session ended with return code %d", app.return_code)
        return app.return_code

    result = compute_result(app.session.text, app.session.typed, app.timer.elapsed())
    print(format_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
