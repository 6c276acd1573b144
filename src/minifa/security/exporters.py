"""
Export functionality for MiniFA account lists

This module provides export mechanisms for accounts, including:
- CSV backups (Name,Secret, see tabular.py)
- OTPAuth URI exports (for moving a single account to another app)
- ASCII QR codes of an OTPAuth URI for scanning from the terminal

Exports are plain text. Secrets are not encrypted; treat exported files
like the secrets themselves.
"""

import io
import os

import pyotp
import qrcode

from .. import config
from ..utils.logger import debug, info, error
from . import tabular


def write_tabular_file(path, text):
    """Write a whole text file as UTF-8."""
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(text)


class SecretExporter:
    """
    Handles exporting accounts in formats compatible with other applications
    """

    def export_to_csv(self, records, export_path):
        """
        Export accounts as a CSV backup

        Args:
            records: AccountRecord objects to export
            export_path: File path, or a directory to hold totp-accounts.csv

        Returns:
            tuple: (success, error_message)
        """
        records = list(records)
        if not records:
            debug("No accounts found to export")
            return False, "No accounts to export"

        if not export_path:
            return False, "No export path provided"

        export_path = os.path.expanduser(export_path.strip().strip('"').strip("'"))

        if os.path.isdir(export_path):
            debug("Export path is a directory, using default filename")
            export_path = os.path.join(export_path, config.EXPORT_FILENAME)

        if not export_path.lower().endswith('.csv'):
            export_path += '.csv'

        export_dir = os.path.dirname(export_path)
        try:
            if export_dir:
                os.makedirs(export_dir, exist_ok=True)
            write_tabular_file(export_path, tabular.encode(records))
        except OSError as e:
            error(f"Export failed ({type(e).__name__}): {e}")
            if isinstance(e, PermissionError):
                return False, f"Permission denied writing to {export_path}. Try a different location."
            return False, f"Export error: {e}"

        info(f"Successfully exported {len(records)} accounts to {export_path}")
        return True, None

    def export_to_otpauth_uri(self, record, issuer=None):
        """
        Convert an account to otpauth URI format

        An 'issuer:account' name is split back into its two parts unless
        an issuer is given explicitly.

        Args:
            record: The AccountRecord to export
            issuer: Optional issuer name

        Returns:
            str: The otpauth URI
        """
        name = record.name
        if issuer is None and ":" in name:
            issuer, name = name.split(":", 1)

        totp = pyotp.TOTP(
            record.secret,
            digits=config.CODE_DIGITS,
            interval=config.DEFAULT_TIME_STEP,
            name=name,
            issuer=issuer or None,
        )
        uri = totp.provisioning_uri()
        debug(f"Created OTPAuth URI for {record.name}")
        return uri

    def render_qr_ascii(self, uri):
        """
        Render a URI as a QR code made of terminal characters

        Args:
            uri: Text to encode, normally an otpauth URI

        Returns:
            str: Multi-line QR code
        """
        qr = qrcode.QRCode(border=2)
        qr.add_data(uri)
        qr.make(fit=True)

        out = io.StringIO()
        qr.print_ascii(out=out, invert=True)
        return out.getvalue()
