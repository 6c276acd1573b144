"""
Color Print Utilities

Provides functions for printing colorful text to the console.
This is used for user-facing messages and does not affect logging.
"""

import os
import platform
import sys

# ANSI color codes
class Colors:
    RESET = '\033[0m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    BOLD = '\033[1m'

if platform.system() == "Windows":
    os.system("")  # Enables ANSI escape sequences in the Windows terminal

def colorize(text, color=Colors.RESET, bold=False):
    """
    Wrap text in ANSI color codes.

    Plain text is returned when stdout is not a terminal or NO_COLOR is set.
    """
    if os.environ.get('NO_COLOR') or not sys.stdout.isatty():
        return text
    prefix = Colors.BOLD + color if bold else color
    return f"{prefix}{text}{Colors.RESET}"

def print_color(text, color=Colors.RESET, bold=False):
    """
    Print text in the specified color.

    Args:
        text: The text to print
        color: The color to use (from Colors class)
        bold: Whether to make the text bold
    """
    print(colorize(text, color, bold))

def print_info(text):
    """Print an informational message in cyan."""
    print_color(text, Colors.CYAN)

def print_success(text):
    """Print a success message in green."""
    print_color(text, Colors.GREEN)

def print_warning(text):
    """Print a warning message in yellow."""
    print_color(text, Colors.YELLOW)

def print_error(text):
    """Print an error message in red."""
    print_color(text, Colors.RED)
