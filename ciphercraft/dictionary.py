"""
ciphercraft.dictionary
Word-list loading for the dictionary check of the password scorer.

A word list is a newline-delimited text file. Each line is stripped and
case-folded; blank lines are skipped.
"""

import logging
import os
from importlib import resources
from typing import FrozenSet, Iterable

from .errors import ResourceUnavailable

logger = logging.getLogger(__name__)

BUNDLED_WORD_LIST = "common_words.txt"


def normalize_words(words: Iterable[str]) -> FrozenSet[str]:
    return frozenset(w.strip().casefold() for w in words if w and w.strip())


def parse_word_list(text: str) -> FrozenSet[str]:
    """Split newline-delimited text (LF or CRLF) into a normalized word set."""
    return normalize_words(text.splitlines())


def read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def load_word_list(path: str) -> FrozenSet[str]:
    """
    Read a word list from ``path``.
    Raises ResourceUnavailable if the file is missing, unreadable or not UTF-8.
    """
    try:
        raw = read_bytes(os.fspath(path))
        text = raw.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceUnavailable(f"cannot load word list {path}: {e}") from e
    words = parse_word_list(text)
    logger.debug("loaded %d words from %s", len(words), path)
    return words


def bundled_word_list() -> FrozenSet[str]:
    """The small list of very common passwords shipped with the package."""
    try:
        text = (resources.files("ciphercraft") / "data" / BUNDLED_WORD_LIST).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceUnavailable(f"cannot load bundled word list: {e}") from e
    return parse_word_list(text)
