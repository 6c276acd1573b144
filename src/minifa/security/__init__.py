"""
Account list handling for MiniFA

This package provides:
- Tabular (CSV) encoding and decoding of named secrets
- An in-memory account book with name-based deduplication
- Importers and exporters for CSV files and otpauth URIs
"""

from .tabular import AccountRecord, encode, decode
from .accounts import AccountBook
from .importers import SecretImporter
from .exporters import SecretExporter

__all__ = [
    'AccountRecord',
    'encode',
    'decode',
    'AccountBook',
    'SecretImporter',
    'SecretExporter',
]
