"""
Morse - Text to International Morse code and back.
Optional audible playback of encoded messages.
"""

__version__ = "0.1.0"

# Playback constants
TONE_FREQ = 800  # Hz
WPM = 10  # words per minute (PARIS standard)
SAMPLE_RATE = 44100  # Hz (default)

# Unit timings in milliseconds
DURATION_SHORT = 1200 // WPM  # dit = 120 ms at 10 WPM
DURATION_LONG = DURATION_SHORT * 3  # dah
DURATION_GAP = DURATION_SHORT * 2  # between codes
DURATION_SYMBOL_GAP = DURATION_SHORT  # between units of one code

from .alphabet import Duration, Code, DIT, DAH, SPACE, NONE, ALPHABET, code_from_durations
from .errors import LookupFailure
from .tables import char_to_code, code_to_char
from .sanitize import escape, fold_case
from .transcoder import Transcript, Validity, encode, decode, is_encodable, is_decodable
from .player import MorsePlayer, play

__all__ = [
    "Duration",
    "Code",
    "DIT",
    "DAH",
    "SPACE",
    "NONE",
    "ALPHABET",
    "code_from_durations",
    "LookupFailure",
    "char_to_code",
    "code_to_char",
    "escape",
    "fold_case",
    "Transcript",
    "Validity",
    "encode",
    "decode",
    "is_encodable",
    "is_decodable",
    "MorsePlayer",
    "play",
]
