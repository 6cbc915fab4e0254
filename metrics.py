from __future__ import annotations

from dataclasses import dataclass

from wrapping import count_spaces


@dataclass(frozen=True)
class SessionResult:
    word_count: int
    wpm: float
    accuracy: float
    elapsed_s: float
    typed_len: int
    correct_chars: int


def compute_correct_chars(target_text: str, typed_text: str) -> int:
    return sum(1 for typed, expected in zip(typed_text, target_text) if typed == expected)


def compute_word_count(target_text: str, typed_text: str) -> int:
    """Words finished so far; a partly typed last word does not count."""
    if len(typed_text) == len(target_text):
        return count_spaces(target_text) + 1
    return count_spaces(target_text[: len(typed_text)])


def compute_wpm(word_count: int, elapsed_s: float) -> float:
    if elapsed_s <= 0.0:
        return 0.0
    return word_count / (elapsed_s / 60.0)


def compute_accuracy(target_text: str, typed_text: str) -> float:
    total_typed = len(typed_text)
    if total_typed == 0:
        return 0.0
    return compute_correct_chars(target_text, typed_text) / total_typed


def compute_result(target_text: str, typed_text: str, elapsed_s: float) -> SessionResult:
    word_count = compute_word_count(target_text, typed_text)
    return SessionResult(
        word_count=word_count,
        wpm=compute_wpm(word_count, elapsed_s),
        accuracy=compute_accuracy(target_text, typed_text),
        elapsed_s=elapsed_s,
        typed_len=len(typed_text),
        correct_chars=compute_correct_chars(target_text, typed_text),
    )


def format_result(result: SessionResult) -> str:
    return (
        f"Words / min:\t{result.wpm:.1f}\n"
        f"Accuracy:\t{result.accuracy * 100.0:.1f} %"
    )
