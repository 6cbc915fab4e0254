from __future__ import annotations

from dataclasses import dataclass, field

from rich.cells import cell_len
from rich.text import Text

from session import CharState, TypingSession, diff_char
from timer import format_elapsed

FOOTER_HEIGHT = 3

STYLES = {
    CharState.CORRECT: "green",
    CharState.INCORRECT: "white on dark_red",
    CharState.UNTYPED: "grey62",
}
CURSOR_STYLE = "reverse grey62"


@dataclass(frozen=True)
class ScrollWindow:
    first: int
    stop: int
    skipped_chars: int


@dataclass
class Frame:
    lines: list[Text] = field(default_factory=list)
    cursor: tuple[int, int] | None = None

    def to_text(self) -> Text:
        text = Text("\n").join(self.lines)
        text.no_wrap = True
        text.overflow = "crop"
        return text


def current_line(lines: list[str], typed_len: int) -> int:
    """Index of the wrapped line holding the next character to type."""
    consumed = 0
    for line_no, line in enumerate(lines):
        consumed += len(line)
        if typed_len < consumed:
            return line_no
    return max(len(lines) - 1, 0)


def scroll_window(lines: list[str], typed_len: int, visible_rows: int) -> ScrollWindow:
    if visible_rows <= 0:
        return ScrollWindow(0, 0, 0)
    if len(lines) <= visible_rows:
        return ScrollWindow(0, len(lines), 0)
    cursor_line = current_line(lines, typed_len)
    # One line of context above the cursor, unless that would push it off screen.
    first = max(0, cursor_line - 1, cursor_line - visible_rows + 1)
    stop = min(len(lines), first + visible_rows)
    skipped = sum(len(line) for line in lines[:first])
    return ScrollWindow(first, stop, skipped)


def render_footer(session: TypingSession, elapsed: float) -> list[Text]:
    return [
        Text(f"Characters:  {session.typed_len} / {len(session.text)}"),
        Text(f"Words:       {session.typed_words()} / {session.total_words()}"),
        Text(f"Time:        {format_elapsed(elapsed)}"),
    ]


def render_frame(session: TypingSession, height: int, elapsed: float) -> Frame:
    """Paint the visible part of the wrapped passage plus the footer.

    Only the lines up to the cursor are diffed against the typed buffer;
    everything after it is untyped by definition and painted as is.
    """
    visible_rows = max(0, height - FOOTER_HEIGHT)
    window = scroll_window(session.lines, session.typed_len, visible_rows)
    typed = session.typed[window.skipped_chars :]

    frame = Frame()
    offset = 0
    for y, line in enumerate(session.lines[window.first : window.stop]):
        row = Text()
        if frame.cursor is not None:
            row.append(line, STYLES[CharState.UNTYPED])
            frame.lines.append(row)
            continue
        x = 0
        for column, ch in enumerate(line):
            if offset >= len(typed):
                frame.cursor = (x, y)
                row.append(ch, CURSOR_STYLE)
                row.append(line[column + 1 :], STYLES[CharState.UNTYPED])
                break
            diff = diff_char(ch, typed[offset])
            row.append(diff.char, STYLES[diff.state])
            x += cell_len(diff.char)
            offset += 1
        frame.lines.append(row)

    while len(frame.lines) < visible_rows:
        frame.lines.append(Text())
    footer = render_footer(session, elapsed)
    if height < FOOTER_HEIGHT:
        footer = footer[:height]
    frame.lines.extend(footer)
    return frame
