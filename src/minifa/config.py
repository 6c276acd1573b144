"""
MiniFA-Py Configuration System

Manages application paths and settings with features:
- Multi-platform data directory (Windows, macOS, Linux)
- Portable mode and directory overrides via environment variables
- Fixed TOTP parameters shared by the generator and the exporters

Directories are resolved when first asked for, so importing this module
never touches the filesystem.
"""

import os
import platform

# Application information
APP_NAME = "MiniFA-Py"
APP_VERSION = "0.1.0"

# TOTP parameters. These are not user configurable.
DEFAULT_TIME_STEP = 30
CODE_DIGITS = 6
DIGEST_NAME = "SHA1"

# Default name for exported account lists
EXPORT_FILENAME = "totp-accounts.csv"

DEFAULT_REFRESH_INTERVAL = 1.0


def env_flag(name, default=False):
    """
    Read a boolean flag from the environment.

    Args:
        name (str): Environment variable name
        default (bool): Value used when the variable is unset

    Returns:
        bool: True for '1', 'true' or 'yes' (any case)
    """
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes')


def get_refresh_interval():
    """
    Seconds between two refreshes of the code list.

    Reads MINIFA_REFRESH_INTERVAL and falls back to the default when the
    value is missing, not a number or not positive.

    Returns:
        float: Refresh interval in seconds
    """
    raw = os.environ.get('MINIFA_REFRESH_INTERVAL')
    if not raw:
        return DEFAULT_REFRESH_INTERVAL
    try:
        value = float(raw)
    except ValueError:
        value = 0
    if value <= 0:
        # Imported here to avoid a cycle: the logger reads this module
        from .utils.logger import warning
        warning(f"Ignoring invalid MINIFA_REFRESH_INTERVAL={raw!r}, using {DEFAULT_REFRESH_INTERVAL}s")
        return DEFAULT_REFRESH_INTERVAL
    return value


def get_data_directory(create=True):
    """
    Return the platform-appropriate application data directory:
    - Windows: %APPDATA%\\MiniFA-Py
    - macOS: ~/Library/Application Support/MiniFA-Py
    - Linux: ~/.minifa

    MINIFA_DATA_DIR overrides the location, and MINIFA_PORTABLE keeps
    everything under ./.minifa in the current directory.

    Args:
        create (bool): Create the directory if it does not exist

    Returns:
        str: Path to the application data directory
    """
    data_dir = os.environ.get('MINIFA_DATA_DIR')

    if not data_dir and env_flag('MINIFA_PORTABLE'):
        data_dir = os.path.join(os.getcwd(), '.minifa')

    if not data_dir:
        system = platform.system()
        if system == "Windows":
            base_dir = os.environ.get('APPDATA') or os.path.join(os.path.expanduser('~'), 'AppData', 'Roaming')
            data_dir = os.path.join(base_dir, APP_NAME)
        elif system == "Darwin":
            data_dir = os.path.join(os.path.expanduser('~'), 'Library', 'Application Support', APP_NAME)
        else:
            data_dir = os.path.join(os.path.expanduser('~'), '.minifa')

    if create:
        os.makedirs(data_dir, exist_ok=True)
    return data_dir


def get_log_directory(create=True):
    """
    Directory for log files: MINIFA_LOG_DIR or <data dir>/logs.

    Args:
        create (bool): Create the directory if it does not exist

    Returns:
        str: Path to the log directory
    """
    log_dir = os.environ.get('MINIFA_LOG_DIR') or os.path.join(get_data_directory(create=create), 'logs')
    if create:
        os.makedirs(log_dir, exist_ok=True)
    return log_dir


# Logging switches, read once at import like the rest of the environment
DEBUG = env_flag('MINIFA_DEBUG')
LOG_TO_FILE = env_flag('MINIFA_LOG')
