"""CipherCraft: random password/key generation and heuristic password scoring."""

import logging

from .errors import CipherCraftError, InvalidArgument, ResourceUnavailable
from .generator import (
    RandomSource,
    SystemRandomSource,
    build_alphabet,
    generate,
    generate_from_options,
    generate_key,
    random_int,
)
from .evaluator import SECURITY_THRESHOLD, PasswordScorer, ScoreDetails, ScoreReport
from .dictionary import bundled_word_list, load_word_list, parse_word_list

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CipherCraftError",
    "InvalidArgument",
    "ResourceUnavailable",
    "RandomSource",
    "SystemRandomSource",
    "build_alphabet",
    "generate",
    "generate_from_options",
    "generate_key",
    "random_int",
    "SECURITY_THRESHOLD",
    "PasswordScorer",
    "ScoreDetails",
    "ScoreReport",
    "bundled_word_list",
    "load_word_list",
    "parse_word_list",
]
