"""
MiniFA-Py: Command Line Interface

Offline TOTP code generator working on plain account lists:

    minifa code JBSWY3DPEHPK3PXP          # One code for one secret
    minifa list accounts.csv              # Codes for every account in a file
    minifa watch accounts.csv             # Refresh the list every second
    minifa merge accounts.csv new.csv     # Add accounts from new.csv by name
    minifa uri accounts.csv Work --qr     # otpauth URI and QR for one account
    minifa new-secret                     # Random base32 secret

Account files are CSV backups with a Name,Secret header or text files
with one otpauth:// URI per line.
"""

import argparse
import logging
import os
import sys
import time

import pyotp

from . import config
from .exceptions import UNAVAILABLE_CODE
from .security.accounts import AccountBook
from .security.exporters import SecretExporter
from .security.importers import SecretImporter
from .totp import base32, generator
from .utils.colorprint import Colors, colorize, print_error, print_info, print_success, print_warning
from .utils.logger import debug, set_console_level, setup_logger

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def _load_book(path):
    """Load an account file into a new AccountBook, or print why not."""
    records, message = SecretImporter().import_from_file(path)
    if records is None:
        print_error(message)
        return None
    return AccountBook(records)


def _code_color(remaining):
    if remaining <= 5:
        return Colors.RED
    if remaining <= 10:
        return Colors.YELLOW
    return Colors.GREEN


def format_codes(book, now_seconds=None):
    """
    Render one line per account: name, code and seconds left.

    Args:
        book: AccountBook to render
        now_seconds: Reference time, defaults to the wall clock

    Returns:
        list: Lines of text
    """
    if now_seconds is None:
        now_seconds = generator.current_time()
    codes = book.codes(now_seconds)
    remaining = book.remaining_seconds(now_seconds)
    records = book.records()
    width = max((len(record.name) for record in records), default=0)

    lines = []
    for record in records:
        code = codes[record.id]
        color = Colors.RED if code == UNAVAILABLE_CODE else _code_color(remaining)
        lines.append(f"{record.name:<{width}}  {colorize(code, color, bold=True)}  ({remaining}s)")
    return lines


def cmd_code(args):
    """Print the current code for a single secret."""
    secret = base32.clean(args.secret)
    if not base32.is_valid(secret):
        print_error("Secret is not valid base32")
        return EXIT_ERROR

    now = generator.current_time()
    code = generator.generate(secret, config.DEFAULT_TIME_STEP, now)
    if code == UNAVAILABLE_CODE:
        print_error("Could not generate a code for this secret")
        return EXIT_ERROR
    print(f"{code} (expires in {generator.remaining_seconds(config.DEFAULT_TIME_STEP, now)}s)")
    return EXIT_OK


def cmd_list(args):
    """Print codes for every account in a file."""
    book = _load_book(args.file)
    if book is None:
        return EXIT_ERROR
    for line in format_codes(book):
        print(line)
    return EXIT_OK


def cmd_watch(args):
    """Redraw the code list until interrupted."""
    book = _load_book(args.file)
    if book is None:
        return EXIT_ERROR

    interval = config.get_refresh_interval()
    debug(f"Refreshing {len(book)} accounts every {interval}s")
    print_info("Press Ctrl+C to stop")
    drawn = 0
    try:
        while True:
            lines = format_codes(book)
            if drawn:
                # Move the cursor back over the previous frame
                sys.stdout.write(f"\033[{drawn}F")
            for line in lines:
                sys.stdout.write("\033[2K" + line + "\n")
            sys.stdout.flush()
            drawn = len(lines)
            time.sleep(interval)
    except KeyboardInterrupt:
        print("\nStopping code generation...")
        return EXIT_INTERRUPTED


def cmd_merge(args):
    """Merge the accounts of SOURCE into TARGET, skipping known names."""
    output = args.output or args.target
    if os.path.isdir(output):
        output = os.path.join(output, config.EXPORT_FILENAME)
    if not output.lower().endswith(".csv"):
        print_error(f"Cannot write accounts to {output}: merged accounts are saved as CSV, use -o FILE.csv")
        return EXIT_ERROR

    if os.path.exists(args.target):
        book = _load_book(args.target)
        if book is None:
            return EXIT_ERROR
    else:
        book = AccountBook()

    incoming, message = SecretImporter().import_from_file(args.source)
    if incoming is None:
        print_error(message)
        return EXIT_ERROR

    added = book.merge(incoming)
    if not added:
        print_error("All accounts already exist")
        return EXIT_ERROR
    skipped = len(incoming) - len(added)
    if skipped:
        print_warning(f"Skipped {skipped} account(s) with a name already in {args.target}")

    success, message = SecretExporter().export_to_csv(book.records(), output)
    if not success:
        print_error(message)
        return EXIT_ERROR

    print_success(f"Imported {len(added)} account(s) into {output}")
    return EXIT_OK


def cmd_uri(args):
    """Print the otpauth URI (and optionally a QR code) for one account."""
    book = _load_book(args.file)
    if book is None:
        return EXIT_ERROR

    record = book.find_by_name(args.name)
    if record is None:
        print_error(f"No account named '{args.name}'")
        return EXIT_ERROR

    exporter = SecretExporter()
    uri = exporter.export_to_otpauth_uri(record, issuer=args.issuer)
    print(uri)
    if args.qr:
        print(exporter.render_qr_ascii(uri))
    return EXIT_OK


def cmd_new_secret(args):
    """Print a random base32 secret."""
    print(pyotp.random_base32())
    return EXIT_OK


def build_parser():
    parser = argparse.ArgumentParser(
        prog="minifa",
        description=f"{config.APP_NAME}: offline TOTP codes for CSV account lists",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"{config.APP_NAME} {config.APP_VERSION}")
    sub = parser.add_subparsers(dest="command", help="Command to run")

    p_code = sub.add_parser("code", help="Show the current code for a secret")
    p_code.add_argument("secret", help="Base32 secret (spaces allowed)")

    p_list = sub.add_parser("list", help="Show codes for every account in a file")
    p_list.add_argument("file", help="CSV or otpauth URI file")

    p_watch = sub.add_parser("watch", help="Show codes and refresh them until Ctrl+C")
    p_watch.add_argument("file", help="CSV or otpauth URI file")

    p_merge = sub.add_parser("merge", help="Merge accounts from one file into another")
    p_merge.add_argument("target", help="Account file to merge into")
    p_merge.add_argument("source", help="Account file to import")
    p_merge.add_argument("-o", "--output", help="Write the result here instead of TARGET")

    p_uri = sub.add_parser("uri", help="Show the otpauth URI for an account")
    p_uri.add_argument("file", help="CSV or otpauth URI file")
    p_uri.add_argument("name", help="Account name (case-insensitive)")
    p_uri.add_argument("--issuer", help="Issuer to put in the URI")
    p_uri.add_argument("--qr", action="store_true", help="Also print a QR code")

    sub.add_parser("new-secret", help="Generate a random base32 secret")

    return parser


def main(argv=None):
    """
    Main entry point for the application.

    Returns:
        int: 0 for successful execution, non-zero for errors
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger()
    if args.debug:
        set_console_level(logging.DEBUG)
        debug("Debug logging enabled")

    if not args.command:
        parser.print_help()
        return EXIT_OK

    dispatch = {
        "code": cmd_code,
        "list": cmd_list,
        "watch": cmd_watch,
        "merge": cmd_merge,
        "uri": cmd_uri,
        "new-secret": cmd_new_secret,
    }
    try:
        return dispatch[args.command](args)
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
