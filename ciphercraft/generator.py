"""
ciphercraft.generator
Random password and key generation from configurable character sets.

Randomness comes from a pluggable source exposing ``next_bytes(n)``. The
default source reads the operating system CSPRNG on every call, so it holds
no state and is safe to share between threads.
"""

import os
import string
from typing import Optional, Protocol

from .errors import InvalidArgument


LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
NUMERIC = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
HEX_ALPHABET = "abcdef0123456789"

DEFAULT_LENGTH = 12
DEFAULT_KEY_LENGTH = 32


class RandomSource(Protocol):
    def next_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """Random bytes straight from ``os.urandom``."""

    def next_bytes(self, n: int) -> bytes:
        return os.urandom(n)


def _check_length(length) -> None:
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgument(f"length must be an integer, got {type(length).__name__}")
    if length < 0:
        raise InvalidArgument("length must be >= 0")


def random_int(maximum: int, source: Optional[RandomSource] = None) -> int:
    """
    Return an integer in [0, maximum).

    Four random bytes are read as a big-endian unsigned 32-bit value and
    reduced modulo ``maximum``. When ``maximum`` does not divide 2**32 the
    low values are very slightly favoured (at most maximum / 2**32); this
    keeps existing generated vectors reproducible for a given byte stream.
    """
    if isinstance(maximum, bool) or not isinstance(maximum, int):
        raise InvalidArgument(f"maximum must be an integer, got {type(maximum).__name__}")
    if maximum < 1:
        raise InvalidArgument("maximum must be >= 1")
    source = source or SystemRandomSource()
    raw = source.next_bytes(4)
    if len(raw) != 4:
        raise InvalidArgument(f"random source returned {len(raw)} bytes, expected 4")
    return int.from_bytes(raw, "big") % maximum


def generate(alphabet: str, length: int, source: Optional[RandomSource] = None) -> str:
    """
    Draw ``length`` characters from ``alphabet`` uniformly, with replacement.
    """
    if not isinstance(alphabet, str):
        raise InvalidArgument(f"alphabet must be a string, got {type(alphabet).__name__}")
    _check_length(length)
    if length == 0:
        return ""
    if not alphabet:
        raise InvalidArgument("alphabet must not be empty when length > 0")

    source = source or SystemRandomSource()
    return "".join(alphabet[random_int(len(alphabet), source)] for _ in range(length))


def build_alphabet(
    use_lowercase: bool = True,
    use_uppercase: bool = True,
    use_numbers: bool = True,
    use_symbols: bool = True,
    custom_charset: str = "",
) -> str:
    """Concatenate the custom charset and the enabled character classes."""
    if not isinstance(custom_charset, str):
        raise InvalidArgument("custom_charset must be a string")
    parts = [custom_charset]
    if use_lowercase:
        parts.append(LOWERCASE)
    if use_uppercase:
        parts.append(UPPERCASE)
    if use_numbers:
        parts.append(NUMERIC)
    if use_symbols:
        parts.append(SYMBOLS)
    return "".join(parts)


def generate_from_options(
    length: int = DEFAULT_LENGTH,
    use_lowercase: bool = True,
    use_uppercase: bool = True,
    use_numbers: bool = True,
    use_symbols: bool = True,
    custom_charset: str = "",
    source: Optional[RandomSource] = None,
) -> str:
    """
    Generate a password from the selected character classes.

    Unlike a "force each class" generator, classes are only offered, not
    guaranteed: every character is drawn from the combined alphabet.
    """
    alphabet = build_alphabet(
        use_lowercase=use_lowercase,
        use_uppercase=use_uppercase,
        use_numbers=use_numbers,
        use_symbols=use_symbols,
        custom_charset=custom_charset,
    )
    return generate(alphabet, length, source)


def generate_key(length: int = DEFAULT_KEY_LENGTH, source: Optional[RandomSource] = None) -> str:
    """Random lowercase hex string, e.g. for API tokens."""
    return generate(HEX_ALPHABET, length, source)
