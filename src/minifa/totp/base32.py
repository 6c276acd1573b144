"""
Base32 Secret Decoding

Decodes RFC 4648 base32 text into the raw key bytes used for TOTP.

Unlike base64.b32decode this decoder does not require the input length
to be a multiple of eight: trailing bits that do not fill a whole byte
are dropped, which is how authenticator apps treat unpadded secrets.
"""

from ..exceptions import InvalidEncoding

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_INDEX = {char: idx for idx, char in enumerate(ALPHABET)}


def clean(secret):
    """
    Normalise a user-entered secret.

    Removes every whitespace character (secrets are often shown in groups
    of four) and upper-cases the rest.

    Args:
        secret (str): Secret as typed or pasted by the user

    Returns:
        str: The normalised secret
    """
    return "".join(secret.split()).upper()


def decode(text):
    """
    Decode a base32 string into bytes.

    The input is upper-cased and trailing '=' padding is stripped before
    any character is looked at. Each character contributes five bits;
    the bit stream is then cut into whole bytes and a final incomplete
    group is discarded.

    Args:
        text (str): Base32 text

    Returns:
        bytes: Decoded key material, floor(5 * len(stripped) / 8) bytes long

    Raises:
        InvalidEncoding: On the first character outside A-Z2-7
    """
    text = text.upper().rstrip("=")

    buffer = 0
    bits = 0
    output = bytearray()
    for position, char in enumerate(text):
        value = _INDEX.get(char)
        if value is None:
            raise InvalidEncoding(char, position)
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            output.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1

    return bytes(output)


def is_valid(text):
    """
    Check whether text decodes as base32.

    Args:
        text (str): Candidate secret

    Returns:
        bool: True if decode() would succeed and yield at least one byte
    """
    try:
        return len(decode(text)) > 0
    except InvalidEncoding:
        return False
