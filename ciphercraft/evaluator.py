"""
ciphercraft.evaluator

Password strength scorer. Four independent sub-scores are added together:
- length: 0 below 8 characters, 50 above 20, linear in between (0..50)
- diversity: 25 per character class present (lower/upper/digit/symbol, 0..100)
- special characters: 25 if anything outside [A-Za-z0-9] is present
- dictionary: 50 minus 10 per distinct word-list token, floored at 0

The total (0..250) is compared against SECURITY_THRESHOLD. Sub-scores are
rounded to two decimals before they are summed.
"""

import logging
import re
from dataclasses import asdict, dataclass
from functools import partial
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional

from .dictionary import bundled_word_list, load_word_list, normalize_words
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

MIN_LENGTH = 8
MAX_LENGTH = 20
MAX_LENGTH_SCORE = 50
CLASS_SCORE = 25
SPECIAL_CHARACTERS_SCORE = 25
MAX_DICTIONARY_SCORE = 50
DICTIONARY_PENALTY = 10
SECURITY_THRESHOLD = 75

# ASCII semantics: "_" counts as a word character, not a symbol
CHARACTER_CLASSES = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"\d", re.ASCII),
    re.compile(r"\W", re.ASCII),
)
SPECIAL_CHARACTER = re.compile(r"[^A-Za-z0-9]")
TOKEN = re.compile(r"\w+", re.ASCII)
REPEATED_CHARACTER = re.compile(r"(.)\1{2,}")


@dataclass(frozen=True)
class ScoreDetails:
    length_score: float
    diversity_score: float
    special_characters_score: float
    dictionary_score: float


@dataclass(frozen=True)
class ScoreReport:
    total_score: float
    is_secure: bool
    details: ScoreDetails

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def length_score(password: str) -> float:
    n = len(password)
    if n < MIN_LENGTH:
        return 0.0
    if n > MAX_LENGTH:
        return float(MAX_LENGTH_SCORE)
    return (n - MIN_LENGTH) / (MAX_LENGTH - MIN_LENGTH) * MAX_LENGTH_SCORE


def diversity_score(password: str) -> float:
    return float(sum(CLASS_SCORE for pattern in CHARACTER_CLASSES if pattern.search(password)))


def special_characters_score(password: str) -> float:
    # presence only, not proportional to the count
    return float(SPECIAL_CHARACTERS_SCORE) if SPECIAL_CHARACTER.search(password) else 0.0


def tokenize(password: str) -> List[str]:
    """Case-folded word-like tokens, in order of first appearance, without duplicates."""
    return list(dict.fromkeys(TOKEN.findall(password.casefold())))


def dictionary_matches(password: str, word_list: FrozenSet[str]) -> List[str]:
    return [t for t in tokenize(password) if t in word_list]


def dictionary_score(password: str, word_list: FrozenSet[str]) -> float:
    matches = dictionary_matches(password, word_list)
    return float(max(0, MAX_DICTIONARY_SCORE - DICTIONARY_PENALTY * len(matches)))


def detect_sequential_runs(password: str, min_len: int = 3) -> List[str]:
    """
    Detect ascending or descending sequential runs (letters or digits) of length >= min_len.
    E.g., 'abcd', '4321'
    """
    pw = password.lower()
    sequences = []
    seq_chars = [ord(c) if c.isascii() and c.isalnum() else None for c in pw]
    n = len(seq_chars)
    i = 0
    while i < n - 1:
        run_start = i
        direction = 0  # +1 ascending, -1 descending
        while i < n - 1 and seq_chars[i] is not None and seq_chars[i + 1] is not None:
            diff = seq_chars[i + 1] - seq_chars[i]
            # runs never cross between digits and letters
            if pw[i].isdigit() != pw[i + 1].isdigit():
                break
            if diff == 1 and direction in (0, 1):
                direction = 1
            elif diff == -1 and direction in (0, -1):
                direction = -1
            else:
                break
            i += 1
        run_len = i - run_start + 1
        if run_len >= min_len:
            sequences.append(pw[run_start:run_start + run_len])
        i = max(i, run_start + 1)
    return sequences


def detect_repeated_characters(password: str) -> List[str]:
    """Runs of one character repeated three or more times, e.g. 'aaa', '1111'."""
    return [m.group(0) for m in REPEATED_CHARACTER.finditer(password)]


def _round(value: float) -> float:
    return round(value, 2)


class PasswordScorer:
    """
    Scores passwords against a fixed word list.

    The word list is normalized (stripped, case-folded) once at construction
    and never changed afterwards, so one scorer can be shared freely.
    """

    def __init__(self, word_list: Iterable[str] = (), penalize_patterns: bool = False):
        if isinstance(word_list, str):
            raise InvalidArgument("word_list must be an iterable of words, not a string")
        self._word_list = normalize_words(word_list)
        self.penalize_patterns = penalize_patterns

    @property
    def word_list(self) -> FrozenSet[str]:
        return self._word_list

    @classmethod
    def from_loader(cls, loader: Callable[[], Iterable[str]], penalize_patterns: bool = False) -> "PasswordScorer":
        """Build a scorer from a loader; a loader that cannot read its source yields an empty word list."""
        try:
            words = loader()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("word list unavailable, dictionary check disabled: %s", e)
            words = ()
        return cls(words, penalize_patterns=penalize_patterns)

    @classmethod
    def from_file(cls, path: str, penalize_patterns: bool = False) -> "PasswordScorer":
        return cls.from_loader(partial(load_word_list, path), penalize_patterns=penalize_patterns)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "PasswordScorer":
        """Scorer for a settings dict as returned by ciphercraft.config.load_config()."""
        path: Optional[str] = cfg.get("word_list_path")
        # JSON true only; a "false" string stays off
        penalize = cfg.get("penalize_patterns", False) is True
        if path:
            return cls.from_file(path, penalize_patterns=penalize)
        return cls.from_loader(bundled_word_list, penalize_patterns=penalize)

    def _diversity(self, password: str) -> float:
        score = diversity_score(password)
        if self.penalize_patterns and (detect_sequential_runs(password) or detect_repeated_characters(password)):
            return 0.0
        return score

    def test(self, password: str) -> ScoreReport:
        """
        Score ``password``. Pure: the same password always yields the same report.
        Raises InvalidArgument if ``password`` is not a str.
        """
        if not isinstance(password, str):
            raise InvalidArgument(f"password must be a string, got {type(password).__name__}")

        details = ScoreDetails(
            length_score=_round(length_score(password)),
            diversity_score=_round(self._diversity(password)),
            special_characters_score=_round(special_characters_score(password)),
            dictionary_score=_round(dictionary_score(password, self._word_list)),
        )
        total = _round(
            details.length_score
            + details.diversity_score
            + details.special_characters_score
            + details.dictionary_score
        )
        return ScoreReport(total_score=total, is_secure=total >= SECURITY_THRESHOLD, details=details)
