from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import random
import re

import requests

logger = logging.getLogger(__name__)

PARAGRAPHS_URL = "https://contenttool.io/getRandomParagraph"
WIKI_RANDOM_SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/random/summary"
REQUEST_TIMEOUT = 8
HEADERS = {
    "User-Agent": "typing-tutor/0.1 (python requests)",
    "Accept": "application/json",
}
SOURCES = ("paragraphs", "wikipedia", "file")


class PassageError(Exception):
    """The passage source returned nothing usable."""


@dataclass
class Passage:
    title: str
    url: str
    text: str


CITATION_RE = re.compile(r"\[\d+\]")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Drop `[n]` citation markers and collapse whitespace to single spaces."""
    return WHITESPACE_RE.sub(" ", CITATION_RE.sub("", text)).strip()


def _get_json(url: str):
    response = requests.get(url, timeout=REQUEST_TIMEOUT, allow_redirects=True, headers=HEADERS)
    response.raise_for_status()
    try:
        return response.json()
    except ValueError as exc:
        raise PassageError(f"Could not parse response from {url}") from exc


def fetch_paragraph() -> Passage:
    data = _get_json(PARAGRAPHS_URL)
    if not isinstance(data, list):
        raise PassageError("Could not parse paragraphs")
    paragraphs = [
        normalize_whitespace(item.get("paragraph") or "")
        for item in data
        if isinstance(item, dict)
    ]
    paragraphs = [p for p in paragraphs if p]
    if not paragraphs:
        raise PassageError("Server returned no paragraphs")

    return Passage(title="Random paragraph", url=PARAGRAPHS_URL, text=random.choice(paragraphs))


def _summary_to_passage(summary: dict, max_chars: int) -> Passage | None:
    """Typeable passage from a page summary, or None when the extract is unusable."""
    text = normalize_whitespace(summary.get("extract") or "")
    if not text or not text.isascii():
        return None
    page_url = summary.get("content_urls", {}).get("desktop", {}).get("page")
    return Passage(
        title=summary.get("title") or "Untitled",
        url=page_url or "https://en.wikipedia.org",
        text=text[:max_chars].rstrip(),
    )


def fetch_wikipedia(min_chars: int = 600, max_chars: int = 1200, tries: int = 5) -> Passage:
    """Random Wikipedia extract; falls back to the longest one seen if none reach min_chars."""
    best: Passage | None = None
    for attempt in range(1, tries + 1):
        passage = _summary_to_passage(_get_json(WIKI_RANDOM_SUMMARY_URL), max_chars)
        if passage is None:
            logger.debug("Attempt %d: extract unusable", attempt)
            continue
        if len(passage.text) >= min_chars:
            return passage
        if best is None or len(passage.text) > len(best.text):
            best = passage

    if best is None:
        raise PassageError(f"No usable Wikipedia extract after {tries} tries")
    return best


def load_file(path: Path) -> Passage:
    text = normalize_whitespace(Path(path).read_text(encoding="utf-8"))
    if not text:
        raise PassageError(f"{path} contains no text")
    return Passage(title=Path(path).name, url=Path(path).resolve().as_uri(), text=text)


def get_passage(source: str, path: Path | None = None) -> Passage:
    if source == "paragraphs":
        passage = fetch_paragraph()
    elif source == "wikipedia":
        passage = fetch_wikipedia()
    elif source == "file":
        if path is None:
            raise PassageError("A file path is required for the file source")
        passage = load_file(path)
    else:
        raise PassageError(f"Unknown passage source: {source}")
    logger.info("Loaded passage %r from %s (%d chars)", passage.title, source, len(passage.text))
    return passage
