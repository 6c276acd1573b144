"""
TOTP Code Generation

Produces 6-digit time-based one-time passwords (RFC 6238 with HMAC-SHA1)
from base32 secrets, plus the countdown used to refresh a code display.

Every function takes an optional now_seconds so that callers and tests
can pin the clock. With the same inputs the output is always the same;
nothing is cached between calls.

Known limitation: only the low 32 bits of the time counter are hashed.
The counter overflows 32 bits around the year 2106 with a 30 second step.
"""

import time

from .. import config
from ..exceptions import UNAVAILABLE_CODE, InvalidEncoding, KeyedHashError
from ..utils.logger import debug
from . import base32
from .keyed_hash import sign

_MODULUS = 10 ** config.CODE_DIGITS


def current_time():
    """Wall clock time in whole seconds since the epoch."""
    return int(time.time())


def time_window(now_seconds, step_seconds=config.DEFAULT_TIME_STEP):
    """Number of whole time steps elapsed since the epoch."""
    return int(now_seconds) // step_seconds


def counter_bytes(counter):
    """
    Encode a time counter as the 8 byte HMAC message.

    The high four bytes are always zero; the counter is truncated to its
    low 32 bits.
    """
    return b"\x00\x00\x00\x00" + (counter & 0xFFFFFFFF).to_bytes(4, "big")


def truncate(mac):
    """
    Dynamic truncation of an HMAC-SHA1 tag into a decimal code.

    The low nibble of the last byte selects four bytes of the tag, whose
    top bit is cleared to give a 31-bit integer.

    Args:
        mac (bytes): 20 byte HMAC output

    Returns:
        str: Zero-padded code of CODE_DIGITS digits
    """
    offset = mac[19] & 0x0F
    value = (
        (mac[offset] & 0x7F) << 24
        | (mac[offset + 1] & 0xFF) << 16
        | (mac[offset + 2] & 0xFF) << 8
        | (mac[offset + 3] & 0xFF)
    )
    return str(value % _MODULUS).zfill(config.CODE_DIGITS)


def generate(secret, step_seconds=config.DEFAULT_TIME_STEP, now_seconds=None):
    """
    Generate the TOTP code for a secret at a point in time.

    This never raises. A secret that does not decode, or decodes to
    nothing, yields UNAVAILABLE_CODE so that a refresh loop over many
    accounts keeps running. So does a step_seconds that is not positive.

    Args:
        secret (str): Base32 secret, already cleaned of whitespace
        step_seconds (int): Length of a time window in seconds
        now_seconds (int): Time to generate for, defaults to current_time()

    Returns:
        str: Six digit code, or UNAVAILABLE_CODE ("------")
    """
    if not secret:
        return UNAVAILABLE_CODE
    if step_seconds <= 0:
        debug(f"Cannot generate code: invalid time step {step_seconds}")
        return UNAVAILABLE_CODE
    if now_seconds is None:
        now_seconds = current_time()

    try:
        key = base32.decode(secret)
    except InvalidEncoding as e:
        debug(f"Cannot generate code: {e}")
        return UNAVAILABLE_CODE

    if not key:
        debug("Cannot generate code: secret is empty")
        return UNAVAILABLE_CODE

    counter = time_window(now_seconds, step_seconds)
    try:
        mac = sign(key, counter_bytes(counter))
    except KeyedHashError as e:
        debug(f"Cannot generate code: {e}")
        return UNAVAILABLE_CODE

    return truncate(mac)


def remaining_seconds(step_seconds=config.DEFAULT_TIME_STEP, now_seconds=None):
    """
    Seconds until the current code expires.

    Args:
        step_seconds (int): Length of a time window in seconds
        now_seconds (int): Reference time, defaults to current_time()

    Returns:
        int: Value in [1, step_seconds]; step_seconds exactly on a boundary

    Raises:
        ValueError: If step_seconds is not positive
    """
    if step_seconds <= 0:
        raise ValueError(f"Time step must be positive, got {step_seconds}")
    if now_seconds is None:
        now_seconds = current_time()
    return step_seconds - (int(now_seconds) % step_seconds)
