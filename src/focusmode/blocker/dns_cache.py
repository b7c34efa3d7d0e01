# src/focusmode/blocker/dns_cache.py
"""Best-effort DNS cache flush so hosts changes take effect immediately."""

from __future__ import annotations

import logging
import shutil
import subprocess

from .config import SYSTEM

logger = logging.getLogger(__name__)

FLUSH_COMMANDS = {
    "Darwin": [["dscacheutil", "-flushcache"], ["killall", "-HUP", "mDNSResponder"]],
    "Windows": [["ipconfig", "/flushdns"]],
    "Linux": [["resolvectl", "flush-caches"], ["nscd", "-i", "hosts"]],
}


def flush_dns_cache(system: str = SYSTEM) -> int:
    """Runs the platform's flush commands; returns how many succeeded. Never raises."""
    flushed = 0
    for cmd in FLUSH_COMMANDS.get(system, []):
        if shutil.which(cmd[0]) is None:
            logger.debug("DNS flush tool %s not installed, skipping", cmd[0])
            continue
        try:
            result = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as exc:
            logger.debug("DNS flush %s failed: %s", cmd, exc)
            continue
        if result.returncode == 0:
            flushed += 1
        else:
            logger.debug("DNS flush %s exited with %s", cmd, result.returncode)
    return flushed
