"""MiniFA-Py: TOTP code generator with CSV account backups."""

from .config import APP_VERSION as __version__
from .exceptions import (
    UNAVAILABLE_CODE,
    InvalidEncoding,
    InvalidFormat,
    KeyedHashError,
    MiniFAError,
)
from .totp import generate, remaining_seconds

__all__ = [
    'UNAVAILABLE_CODE',
    'InvalidEncoding',
    'InvalidFormat',
    'KeyedHashError',
    'MiniFAError',
    'generate',
    'remaining_seconds',
]
