"""
Morse symbol alphabet.

Elementary units, the Code value type and the ITU table for Latin letters,
digits and the word space.

Reference: ITU-R M.1677-1 (International Morse code)
"""

from enum import Enum
from types import MappingProxyType
from typing import Iterator, Tuple


class Duration(str, Enum):
    """Morse signal duration. The value is the display glyph."""

    DIT = "•"  # short
    DAH = "−"  # long

    def __str__(self) -> str:
        return self.value


DIT = Duration.DIT
DAH = Duration.DAH


class Code:
    """
    Morse transcription of a single character.

    A Code is an immutable, ordered sequence of Durations. The word space is
    a distinguished Code with no units that renders as a single blank; the
    empty Code (NONE) maps to no character at all.
    """

    __slots__ = ("_units", "_space")

    def __init__(self, *units: Duration, space: bool = False):
        for unit in units:
            if not isinstance(unit, Duration):
                raise TypeError(f"Code units must be Duration, got {unit!r}")
        if space and units:
            raise ValueError("the space code cannot carry units")
        self._units: Tuple[Duration, ...] = tuple(units)
        self._space = space

    @property
    def units(self) -> Tuple[Duration, ...]:
        return self._units

    @property
    def is_space(self) -> bool:
        return self._space

    def __iter__(self) -> Iterator[Duration]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return self._units == other._units and self._space == other._space

    def __hash__(self) -> int:
        return hash((self._units, self._space))

    def __str__(self) -> str:
        if self._space:
            return " "
        return "".join(unit.value for unit in self._units)

    def __repr__(self) -> str:
        if self._space:
            return "Code(space=True)"
        return f"Code({str(self)!r})"


def code_from_durations(*durations: Duration) -> Code:
    """
    Build a Code from an explicit sequence of durations.

    The alphabet is not consulted, so any sequence (including an empty one)
    yields a Code. Whether it maps back to a character is decided at lookup.

    Args:
        durations: Units in transmission order

    Returns:
        Code made of exactly these units
    """
    return Code(*durations)


SPACE = Code(space=True)
NONE = Code()

# International Morse code (ITU)
ALPHABET = MappingProxyType({
    # letters
    "a": Code(DIT, DAH),
    "b": Code(DAH, DIT, DIT, DIT),
    "c": Code(DAH, DIT, DAH, DIT),
    "d": Code(DAH, DIT, DIT),
    "e": Code(DIT),
    "f": Code(DIT, DIT, DAH, DIT),
    "g": Code(DAH, DAH, DIT),
    "h": Code(DIT, DIT, DIT, DIT),
    "i": Code(DIT, DIT),
    "j": Code(DIT, DAH, DAH, DAH),
    "k": Code(DAH, DIT, DAH),
    "l": Code(DIT, DAH, DIT, DIT),
    "m": Code(DAH, DAH),
    "n": Code(DAH, DIT),
    "o": Code(DAH, DAH, DAH),
    "p": Code(DIT, DAH, DAH, DIT),
    "q": Code(DAH, DAH, DIT, DAH),
    "r": Code(DIT, DAH, DIT),
    "s": Code(DIT, DIT, DIT),
    "t": Code(DAH),
    "u": Code(DIT, DIT, DAH),
    "v": Code(DIT, DIT, DIT, DAH),
    "w": Code(DIT, DAH, DAH),
    "x": Code(DAH, DIT, DIT, DAH),
    "y": Code(DAH, DIT, DAH, DAH),
    "z": Code(DAH, DAH, DIT, DIT),

    # digits
    "1": Code(DIT, DAH, DAH, DAH, DAH),
    "2": Code(DIT, DIT, DAH, DAH, DAH),
    "3": Code(DIT, DIT, DIT, DAH, DAH),
    "4": Code(DIT, DIT, DIT, DIT, DAH),
    "5": Code(DIT, DIT, DIT, DIT, DIT),
    "6": Code(DAH, DIT, DIT, DIT, DIT),
    "7": Code(DAH, DAH, DIT, DIT, DIT),
    "8": Code(DAH, DAH, DAH, DIT, DIT),
    "9": Code(DAH, DAH, DAH, DAH, DIT),
    "0": Code(DAH, DAH, DAH, DAH, DAH),

    " ": SPACE,
})
