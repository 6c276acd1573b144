"""
HMAC-SHA1 Keyed Hash

Thin wrapper around the HMAC implementation of the cryptography package.
TOTP codes are only as correct as this function, so nothing here touches
hash internals: key padding and hashing of long keys are left to the
HMAC construction.
"""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, hmac

from ..exceptions import KeyedHashError

# SHA-1 output length in bytes
DIGEST_SIZE = 20


def sign(key, message):
    """
    Compute HMAC-SHA1 of message under key.

    Args:
        key (bytes): Secret key, any length
        message (bytes): Data to authenticate

    Returns:
        bytes: 20 byte authentication tag

    Raises:
        KeyedHashError: If the primitive rejects the input or SHA-1 is unavailable
    """
    try:
        mac = hmac.HMAC(key, hashes.SHA1())
        mac.update(message)
        return mac.finalize()
    except (TypeError, ValueError, UnsupportedAlgorithm) as e:
        raise KeyedHashError(f"HMAC-SHA1 failed: {e}") from e
