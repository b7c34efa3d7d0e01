# src/focusmode/blocker/backup_helper.py
import logging
import shutil
from datetime import datetime
from pathlib import Path

from .config import BACKUP_DIR, BACKUP_KEEP, HOSTS_PATH
from .ownership import hand_back, missing_dirs

logger = logging.getLogger(__name__)


def backup_hosts(hosts_path: Path = HOSTS_PATH, backup_dir: Path = BACKUP_DIR, keep: int = BACKUP_KEEP):
    backup_dir = Path(backup_dir)
    new_dirs = missing_dirs(backup_dir)
    backup_dir.mkdir(parents=True, exist_ok=True)
    backup_path = backup_dir / f"hosts_{datetime.now():%Y%m%d_%H%M%S_%f}.bak"
    shutil.copy(hosts_path, backup_path)
    hand_back(*new_dirs, backup_path)
    logger.debug("Backed up %s to %s", hosts_path, backup_path)
    prune_backups(backup_dir, keep)
    return backup_path


def prune_backups(backup_dir: Path = BACKUP_DIR, keep: int = BACKUP_KEEP):
    """Deletes all but the `keep` newest backups; returns the removed paths."""
    backups = sorted(Path(backup_dir).glob("hosts_*.bak"), reverse=True)
    removed = backups[max(keep, 0):]
    for old in removed:
        old.unlink()
    return removed
