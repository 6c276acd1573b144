"""
In-memory Account Book

Holds the list of accounts a front end displays, and applies the rules
for adding accounts and merging imported ones:
- Names and secrets are trimmed, secrets are cleaned of whitespace
- Imported accounts whose name is already in the book (ignoring case) are
  dropped; duplicates inside one imported batch are kept

The book is not persisted; saving it is up to the caller, usually via
exporters.SecretExporter.
"""

import copy

from .. import config
from ..totp import generator
from ..totp.base32 import clean
from ..utils.logger import debug, info
from . import tabular
from .tabular import AccountRecord


class AccountBook:
    """
    Ordered collection of AccountRecord objects.

    Accounts keep the order in which they were added. Lookups return
    copies so callers cannot change the book behind its back.
    """

    def __init__(self, records=None):
        self._accounts = [copy.deepcopy(record) for record in records or ()]

    def __len__(self):
        return len(self._accounts)

    def __iter__(self):
        return iter(self.records())

    def records(self):
        """Return a copy of all accounts in order."""
        return copy.deepcopy(self._accounts)

    def add(self, name, secret):
        """
        Add a new account.

        Args:
            name (str): Display name
            secret (str): Base32 secret as entered by the user

        Returns:
            AccountRecord: Copy of the stored account

        Raises:
            ValueError: If the name or secret is empty
        """
        name = (name or "").strip()
        secret = clean(secret or "")
        if not name or not secret:
            raise ValueError("Please enter both account name and TOTP secret")

        record = AccountRecord(name=name, secret=secret)
        self._accounts.append(record)
        debug(f"Added account '{name}'")
        return copy.deepcopy(record)

    def remove(self, account_id):
        """
        Delete the account with the given id.

        Returns:
            bool: True if an account was removed
        """
        for i, record in enumerate(self._accounts):
            if record.id == account_id:
                self._accounts.pop(i)
                debug(f"Removed account '{record.name}'")
                return True
        return False

    def get(self, account_id):
        for record in self._accounts:
            if record.id == account_id:
                return copy.deepcopy(record)
        return None

    def find_by_name(self, name):
        """Find an account by name, ignoring case. Returns None if absent."""
        wanted = name.strip().lower()
        for record in self._accounts:
            if record.name.lower() == wanted:
                return copy.deepcopy(record)
        return None

    def merge(self, records):
        """
        Append accounts whose name is not in the book yet.

        Names are compared case-insensitively against the accounts held
        before the call; records of the same batch are not compared with
        each other. Incoming records get new ids so they cannot clash with
        stored ones.

        Args:
            records: Iterable of AccountRecord objects

        Returns:
            list: Copies of the accounts that were added
        """
        seen = {record.name.lower() for record in self._accounts}
        added = []
        for record in records:
            key = record.name.lower()
            if key in seen:
                debug(f"Skipping '{record.name}': an account with this name already exists")
                continue
            stored = AccountRecord(name=record.name, secret=record.secret)
            self._accounts.append(stored)
            added.append(copy.deepcopy(stored))
        return added

    def codes(self, now_seconds=None):
        """
        Current code for every account.

        Args:
            now_seconds (int): Time to generate for, defaults to the wall clock

        Returns:
            dict: Account id -> six digit code or UNAVAILABLE_CODE
        """
        if now_seconds is None:
            now_seconds = generator.current_time()
        return {
            record.id: generator.generate(record.secret, config.DEFAULT_TIME_STEP, now_seconds)
            for record in self._accounts
        }

    def remaining_seconds(self, now_seconds=None):
        return generator.remaining_seconds(config.DEFAULT_TIME_STEP, now_seconds)

    def export_text(self):
        """Encode the book as CSV text."""
        return tabular.encode(self._accounts)

    def import_text(self, text):
        """
        Merge accounts from CSV text into the book.

        Raises:
            InvalidFormat: If the text has a bad header

        Returns:
            list: Copies of the accounts that were added
        """
        added = self.merge(tabular.decode(text))
        info(f"Imported {len(added)} account(s)")
        return added
