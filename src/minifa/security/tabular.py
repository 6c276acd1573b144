"""
Tabular (CSV) Account Lists

Encodes a list of named secrets as two-column CSV text and decodes such
text back into records. This is the backup/restore format:

    "Name","Secret"
    "Work","JBSWY3DPEHPK3PXP"

Decoding is lenient. Only a missing or wrong header is an error; rows
that cannot be read are skipped.
"""

import itertools
from dataclasses import dataclass, field

from ..exceptions import InvalidFormat
from ..totp.base32 import clean
from ..utils.logger import debug

HEADER = ("Name", "Secret")

# Splitter states
DEFAULT = 0
IN_QUOTES = 1

_ids = itertools.count(1)


def next_id():
    """Return an identifier not handed out before in this process."""
    return next(_ids)


@dataclass
class AccountRecord:
    """A named TOTP secret."""

    name: str
    secret: str
    id: int = field(default_factory=next_id)


def _quote(value):
    return '"' + str(value).replace('"', '""') + '"'


def _fields(record):
    if isinstance(record, AccountRecord):
        return record.name, record.secret
    if isinstance(record, dict):
        return record["name"], record["secret"]
    name, secret = record
    return name, secret


def encode(records):
    """
    Encode records as CSV text.

    Every field is quoted and embedded quotes are doubled. Rows are joined
    with a single newline and there is no trailing newline.

    Args:
        records: AccountRecord objects, dicts with 'name' and 'secret'
            keys, or (name, secret) pairs

    Returns:
        str: The CSV document, header first
    """
    rows = [HEADER] + [_fields(record) for record in records]
    return "\n".join(",".join(_quote(value) for value in row) for row in rows)


def split_line(line):
    """
    Split one CSV line into fields.

    A comma ends a field unless it is inside quotes, and a doubled quote
    inside quotes is a literal quote. A quote left open at the end of the
    line is not an error; the field simply ends there.

    Args:
        line (str): A single line without its newline

    Returns:
        list: Field values with the enclosing quotes removed
    """
    result = []
    current = []
    state = DEFAULT
    i = 0
    while i < len(line):
        char = line[i]
        if state == IN_QUOTES:
            if char == '"':
                if i + 1 < len(line) and line[i + 1] == '"':
                    current.append('"')
                    i += 1
                else:
                    state = DEFAULT
            else:
                current.append(char)
        elif char == '"':
            state = IN_QUOTES
        elif char == ',':
            result.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    result.append("".join(current))
    return result


def _check_header(line):
    names = [value.replace('"', '').strip() for value in line.split(',')]
    if len(names) != 2 or names[0].lower() != "name" or names[1].lower() != "secret":
        raise InvalidFormat()


def decode(text):
    """
    Decode CSV text into account records.

    Args:
        text (str): Whole document, header first

    Returns:
        list: AccountRecord objects with fresh ids, in document order.
            Empty when the text has fewer than two lines.

    Raises:
        InvalidFormat: If the first line is not a Name,Secret header
    """
    lines = text.strip().split("\n")
    if len(lines) < 2:
        return []

    _check_header(lines[0].rstrip("\r"))

    records = []
    for number, raw in enumerate(lines[1:], start=2):
        line = raw.strip()
        if not line:
            continue

        fields = split_line(line)
        if len(fields) != 2:
            debug(f"Skipping line {number}: expected 2 fields, got {len(fields)}")
            continue

        name, secret = fields[0].strip(), fields[1].strip()
        if not name or not secret:
            debug(f"Skipping line {number}: empty name or secret")
            continue

        records.append(AccountRecord(name=name, secret=clean(secret)))

    return records
