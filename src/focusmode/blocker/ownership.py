# src/focusmode/blocker/ownership.py
"""Gives files created under sudo back to the user who ran sudo."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


def invoking_user() -> Optional[Tuple[int, int]]:
    """Returns (uid, gid) of the sudo caller when running as root through sudo."""
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None or geteuid() != 0:
        return None
    try:
        return int(os.environ["SUDO_UID"]), int(os.environ["SUDO_GID"])
    except (KeyError, ValueError):
        return None


def missing_dirs(path: Path) -> List[Path]:
    """The directories `path.mkdir(parents=True)` would create, outermost first."""
    missing = []
    parent = Path(path)
    while not parent.exists():
        missing.append(parent)
        parent = parent.parent
    return list(reversed(missing))


def hand_back(*paths: Path):
    owner = invoking_user()
    if owner is None:
        return
    uid, gid = owner
    for p in paths:
        try:
            os.chown(p, uid, gid)
        except OSError as exc:
            logger.warning("Could not give %s back to uid %d: %s", p, uid, exc)
