# src/focusmode/blocker/domains.py
import logging
from pathlib import Path
from typing import List

from .config import DEFAULT_DOMAINS, DOMAINS_FILE
from .ownership import hand_back, missing_dirs

logger = logging.getLogger(__name__)


def ensure_domains_file(path: Path = DOMAINS_FILE) -> bool:
    """
    Creates the block-list (and its directory) with commented example content.

    Returns:
        bool: True if the file was created, False if it already existed
    """
    path = Path(path)
    if path.exists():
        return False
    new_dirs = missing_dirs(path.parent)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_DOMAINS, encoding="utf-8")
    hand_back(*new_dirs, path)
    logger.debug("Created default block-list at %s", path)
    return True


def load_domains(path: Path = DOMAINS_FILE) -> List[str]:
    """
    Returns the domains listed in the block-list, in file order.

    Blank lines and lines starting with '#' are skipped, the rest are trimmed.
    Lines that are not valid UTF-8 are skipped with a warning.
    Raises FileNotFoundError if the block-list does not exist.
    """
    path = Path(path)
    domains = []
    for lineno, raw in enumerate(path.read_bytes().splitlines(), start=1):
        try:
            line = raw.decode("utf-8-sig").strip()
        except UnicodeDecodeError:
            logger.warning("Skipping undecodable line %d in %s", lineno, path)
            continue
        if not line or line.startswith("#"):
            continue
        domains.append(line)
    return domains
