"""
Morse lookup errors.
"""

from typing import Any


class LookupFailure(LookupError):
    """
    Raised when a character or a code has no entry in its lookup table.

    Attributes:
        key: The character or Code that failed to resolve
        source: The text or code sequence being converted, when known
    """

    def __init__(self, message: str, key: Any = None, source: Any = None):
        super().__init__(message)
        self.key = key
        self.source = source

    def wrap(self, message: str, source: Any) -> "LookupFailure":
        """Build an outer failure for `source` that keeps the failing key."""
        return LookupFailure(f"{message}: {self}", key=self.key, source=source)

    def __repr__(self) -> str:
        return f"LookupFailure({str(self)!r}, key={self.key!r})"
