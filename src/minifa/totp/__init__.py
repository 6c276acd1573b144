"""
TOTP-related modules for MiniFA
"""

from .base32 import decode as decode_base32
from .generator import current_time, generate, remaining_seconds
from .keyed_hash import sign

__all__ = ['decode_base32', 'sign', 'generate', 'remaining_seconds', 'current_time']
