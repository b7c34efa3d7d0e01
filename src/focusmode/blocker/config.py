# src/focusmode/blocker/config.py

import logging
import os
import platform
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _user_home() -> Path:
    # under sudo, keep the invoking user's block-list instead of root's
    sudo_user = os.getenv("SUDO_USER")
    if sudo_user:
        home = Path(os.path.expanduser(f"~{sudo_user}"))
        if home.is_dir():
            return home
    return Path.home()


def env_int(name: str, default: int, minimum: int = 0) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        number = None
    if number is None or number < minimum:
        logger.warning("Ignoring %s=%r, expected an integer >= %d; using %d", name, value, minimum, default)
        return default
    return number


def env_log_level(name: str, default: str = "WARNING") -> str:
    value = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(value), int):
        logger.warning("Ignoring %s=%r, not a log level; using %s", name, value, default)
        return default
    return value


SYSTEM = platform.system()
DEFAULT_HOSTS_PATH = Path("/etc/hosts") if SYSTEM != "Windows" else Path(r"C:\Windows\System32\drivers\etc\hosts")
HOSTS_PATH = Path(os.getenv("FOCUS_HOSTS_FILE", str(DEFAULT_HOSTS_PATH)))

FOCUS_DIR = Path(os.getenv("FOCUS_HOME", str(_user_home() / ".focus")))
DOMAINS_FILE = FOCUS_DIR / "domains.txt"
BACKUP_DIR = FOCUS_DIR / "backups"
BACKUP_KEEP = env_int("FOCUS_BACKUP_KEEP", 10, minimum=1)

REDIRECT_IP = os.getenv("FOCUS_REDIRECT_IP", "127.0.0.1")
FLUSH_DNS = os.getenv("FOCUS_FLUSH_DNS", "1") != "0"
LOG_LEVEL = env_log_level("FOCUS_LOG_LEVEL")

BLOCK_MARKER_START = "# FOCUS-MODE-BLOCK START"
BLOCK_MARKER_END = "# FOCUS-MODE-BLOCK END"

DEFAULT_EDITOR = "notepad" if SYSTEM == "Windows" else "vim"

DEFAULT_DOMAINS = """\
# Add one domain per line
# Lines starting with # are comments
# Example:
# instagram.com
# twitter.com
instagram.com
www.instagram.com
x.com
www.x.com
twitter.com
www.twitter.com
"""
