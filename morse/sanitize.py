"""
Text normalization ahead of encoding.
"""

import re


# Anything that is not an ASCII letter, digit or whitespace (tab, newline,
# form feed, carriage return, space)
_NON_ENCODABLE = re.compile(r"[^a-zA-Z0-9\t\n\f\r ]+")
_WHITESPACE = re.compile(r"[\t\n\f\r ]+")

_TURKISH_UPPER = str.maketrans({"I": "ı", "İ": "i"})


def fold_case(text: str, turkish: bool = False) -> str:
    """
    Lowercase text before lookup.

    Plain `str.lower()` by default. With `turkish=True`, dotted and dotless
    capital I fold by Turkish rules ("I" -> "ı", "İ" -> "i"). Note that the
    dotless "ı" is not in the alphabet, so Turkish folding makes a capital
    "I" unencodable.
    """
    if turkish:
        text = text.translate(_TURKISH_UPPER)
    return text.lower()


def escape(text: str) -> str:
    """
    Strip characters that cannot be encoded and collapse whitespace.

    Removes everything except ASCII letters, digits and whitespace, then
    replaces each whitespace run with a single space, so the result is
    always encodable. Idempotent.

    Examples:
        "The Quick & Brown Fox..." -> "The Quick Brown Fox"
    """
    return _WHITESPACE.sub(" ", _NON_ENCODABLE.sub("", text))
