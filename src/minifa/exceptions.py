"""
Error types for MiniFA-Py

The code generation core is layered on two different contracts:
- Decoders fail fast and raise one of the exceptions below
- The code generator is fail-soft and returns UNAVAILABLE_CODE instead

Keeping both in one module lets callers catch MiniFAError for anything
raised by the package.
"""

# Shown in place of a code when the secret cannot produce one
UNAVAILABLE_CODE = "------"


class MiniFAError(Exception):
    """Base class for all errors raised by MiniFA-Py."""


class InvalidEncoding(MiniFAError, ValueError):
    """
    Raised when a base32 secret contains a character outside A-Z2-7.

    Attributes:
        character: The offending character
        position: Index of the character in the normalised input
    """

    def __init__(self, character, position):
        self.character = character
        self.position = position
        super().__init__(f"Invalid base32 character {character!r} at position {position}")


class KeyedHashError(MiniFAError):
    """Raised when the HMAC primitive rejects its input."""


class InvalidFormat(MiniFAError, ValueError):
    """Raised when a tabular document does not start with a Name,Secret header."""

    def __init__(self, message="Invalid CSV format. Expected headers: Name,Secret"):
        super().__init__(message)
