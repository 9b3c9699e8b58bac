"""
Morse Transcoder - Converts text to Morse codes and back.

Both directions validate the whole input first and only then convert, so a
caller either gets a complete result or a LookupFailure naming the first
element that could not be resolved.
"""

import logging
from typing import Iterable, NamedTuple, Optional

from .alphabet import Code
from .errors import LookupFailure
from .sanitize import fold_case
from .tables import char_to_code, code_to_char

# Module-level logger
_logger = logging.getLogger(__name__)


class Transcript(tuple):
    """
    Ordered sequence of Codes making up an encoded message.

    Renders as the codes' glyphs joined by a single space. The rendering is
    for display only and is not parsed back.
    """

    def __new__(cls, codes: Iterable[Code] = ()):
        return super().__new__(cls, codes)

    def __str__(self) -> str:
        return " ".join(str(code) for code in self)

    def __repr__(self) -> str:
        return f"Transcript({list(self)!r})"


class Validity(NamedTuple):
    """Outcome of a validity check. Truthy only when `ok` is True."""

    ok: bool
    error: Optional[LookupFailure] = None

    def __bool__(self) -> bool:
        return self.ok


def is_encodable(text: str, turkish: bool = False) -> Validity:
    """
    Check that every character of `text` has a Code.

    Args:
        text: Text to check (case is folded first)
        turkish: Use Turkish case folding for "I"

    Returns:
        Validity(True, None), or Validity(False, error) for the first
        character that has no Code
    """
    for char in fold_case(text, turkish):
        try:
            char_to_code(char)
        except LookupFailure as e:
            return Validity(False, e)

    return Validity(True)


def is_decodable(codes: Iterable[Code]) -> Validity:
    """
    Check that every Code in `codes` maps back to a character.

    Returns:
        Validity(True, None), or Validity(False, error) for the first
        Code that has no character
    """
    for code in codes:
        try:
            code_to_char(code)
        except LookupFailure as e:
            return Validity(False, e)

    return Validity(True)


def encode(text: str, turkish: bool = False) -> Transcript:
    """
    Encode text to Morse codes.

    Args:
        text: Letters, digits and spaces (any case)
        turkish: Use Turkish case folding for "I"

    Returns:
        Transcript with one Code per input character, in input order

    Raises:
        LookupFailure: If `text` contains a character with no Code
    """
    ok, error = is_encodable(text, turkish)
    if not ok:
        raise error.wrap(f"'{text}' is not encodable", text) from error

    codes = []
    for char in fold_case(text, turkish):
        try:
            codes.append(char_to_code(char))
        except LookupFailure as e:
            _logger.warning(f"Skipping character after validation: {e}")

    _logger.debug(f"Encoded {len(codes)} codes from {text!r}")
    return Transcript(codes)


def decode(codes: Iterable[Code]) -> str:
    """
    Decode Morse codes to text.

    Args:
        codes: Transcript or any iterable of Codes

    Returns:
        Decoded lowercase text

    Raises:
        LookupFailure: If a Code has no matching character
    """
    codes = Transcript(codes)

    ok, error = is_decodable(codes)
    if not ok:
        raise error.wrap(f"'{codes}' are not decodable", codes) from error

    chars = []
    for code in codes:
        try:
            chars.append(code_to_char(code))
        except LookupFailure as e:
            _logger.warning(f"Skipping code after validation: {e}")

    _logger.debug(f"Decoded {len(chars)} characters")
    return "".join(chars)
