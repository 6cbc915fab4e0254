from __future__ import annotations

from rich.cells import cell_len, get_character_cell_size


def count_spaces(text: str) -> int:
    return text.count(" ")


def wrap_text(text: str, width: int) -> list[str]:
    """Split text into lines at most `width` cells wide without losing characters.

    Each line keeps its trailing space, so joining the lines gives back the
    original text. A run of non-space characters wider than `width` is never
    split and ends up on a line of its own.
    """
    if width <= 0:
        raise ValueError(f"wrap width must be positive, got {width}")

    lines: list[str] = []
    line_start = 0
    line_width = 0
    last_space: int | None = None

    for i, ch in enumerate(text):
        if line_width >= width and last_space is not None:
            lines.append(text[line_start : last_space + 1])
            line_start = last_space + 1
            line_width = cell_len(text[line_start:i])
            last_space = None
        if ch == " ":
            last_space = i
        line_width += get_character_cell_size(ch)

    if line_width > width and last_space is not None:
        lines.append(text[line_start : last_space + 1])
        line_start = last_space + 1
    lines.append(text[line_start:])
    return lines
