"""
Character <-> Code lookup tables.

Both tables are derived from the alphabet once, when this module is first
imported, and are read-only afterwards.
"""

from types import MappingProxyType

from .alphabet import ALPHABET, Code
from .errors import LookupFailure


CODES = ALPHABET
CHARS = MappingProxyType({code: char for char, code in ALPHABET.items()})


def char_to_code(char: str) -> Code:
    """Return the Code for a normalized character."""
    try:
        return CODES[char]
    except KeyError:
        raise LookupFailure(
            f"no matching character in the codes map: '{char}'", key=char
        ) from None


def code_to_char(code: Code) -> str:
    """Return the character for a Code."""
    try:
        return CHARS[code]
    except (KeyError, TypeError):
        raise LookupFailure(
            f"no matching code in the chars map: '{code}'", key=code
        ) from None
