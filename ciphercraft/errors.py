"""
ciphercraft.errors
Exception types raised by the generator, the scorer and the word-list loader.
"""


class CipherCraftError(Exception):
    """Base class for every error raised by ciphercraft."""


class InvalidArgument(CipherCraftError, ValueError):
    """A caller passed a bad length, alphabet or password."""


class ResourceUnavailable(CipherCraftError, OSError):
    """A word list could not be read or decoded."""
