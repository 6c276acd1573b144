"""
Import functionality for MiniFA account lists

This module reads account lists from:
- CSV backups with a Name,Secret header (see tabular.py)
- Plain text files with one otpauth:// URI per line

Files are read whole. Failures are reported as (None, error_message)
so a front end can show the message without handling exceptions.
"""

import os

import pyotp

from .. import config
from ..exceptions import InvalidFormat
from ..totp.base32 import clean
from ..utils.logger import debug, info, warning, error
from . import tabular
from .tabular import AccountRecord

OTPAUTH_PREFIX = "otpauth://"


def read_tabular_file(path):
    """Read a whole UTF-8 text file, tolerating a byte order mark."""
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()


class SecretImporter:
    """
    Handles importing account lists from the supported formats
    """

    def import_from_file(self, import_path):
        """
        Import accounts from a file

        Args:
            import_path: Path to a CSV or otpauth URI file

        Returns:
            tuple: (records, error_message)
                - records: List of AccountRecord or None if failed
                - error_message: Error message if failed, None if successful
        """
        if not import_path or not os.path.isfile(import_path):
            error(f"Import file not found: {import_path}")
            return None, f"File not found: {import_path}"

        debug(f"Attempting to import from: {import_path}")

        try:
            text = read_tabular_file(import_path)
        except (OSError, UnicodeDecodeError) as e:
            error(f"Could not read {import_path} ({type(e).__name__}): {e}")
            return None, f"Could not read file: {e}"

        return self.import_from_text(text)

    def import_from_text(self, text):
        """
        Import accounts from already loaded text

        Args:
            text: Whole file contents

        Returns:
            tuple: (records, error_message)
        """
        detected_format = self._detect_format(text)
        debug(f"Detected format: {detected_format}")

        if detected_format == "csv":
            return self._import_from_csv(text)
        if detected_format == "otpauth_uri":
            return self._import_from_otpauth_lines(text)

        warning("Import text is empty")
        return None, "No valid accounts found"

    def _detect_format(self, text):
        """
        Detect the format of the import text

        Returns:
            str: 'otpauth_uri', 'csv' or 'empty'
        """
        for line in text.splitlines():
            line = line.strip()
            if not line:
                continue
            if line.startswith(OTPAUTH_PREFIX):
                return "otpauth_uri"
            return "csv"
        return "empty"

    def _import_from_csv(self, text):
        try:
            records = tabular.decode(text)
        except InvalidFormat as e:
            error(f"Failed to import CSV: {e}")
            return None, str(e)

        if not records:
            return None, "No valid accounts found in CSV"

        info(f"Successfully imported {len(records)} accounts from CSV")
        return records, None

    def _import_from_otpauth_lines(self, text):
        records = []
        for number, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            record, message = self.import_from_otpauth_uri(line)
            if record is None:
                warning(f"Skipping line {number}: {message}")
                continue
            records.append(record)

        if not records:
            return None, "No valid otpauth URIs found"

        info(f"Successfully imported {len(records)} accounts from otpauth URIs")
        return records, None

    def import_from_otpauth_uri(self, uri):
        """
        Import a single account from an otpauth URI

        Only TOTP URIs are accepted. The record name is 'issuer:account'
        when the URI names an issuer, otherwise just the account.

        Args:
            uri: The otpauth URI string

        Returns:
            tuple: (AccountRecord or None, error_message)
        """
        if not uri.startswith(OTPAUTH_PREFIX + "totp/"):
            return None, "Invalid otpauth URI format"

        try:
            otp = pyotp.parse_uri(uri)
        except ValueError as e:
            return None, f"Invalid otpauth URI: {e}"

        if otp.digits != config.CODE_DIGITS or getattr(otp, "interval", config.DEFAULT_TIME_STEP) != config.DEFAULT_TIME_STEP \
                or otp.digest().name.upper() != config.DIGEST_NAME:
            warning(f"'{otp.name}' uses non-default TOTP parameters; codes are always 6 digits, 30s, SHA1")

        secret = clean(otp.secret)
        name = (otp.name or "").strip()
        issuer = (otp.issuer or "").strip()
        if issuer and name:
            name = f"{issuer}:{name}"
        elif issuer:
            name = issuer

        if not name or not secret:
            return None, "Invalid otpauth URI: missing name or secret"

        return AccountRecord(name=name, secret=secret), None
