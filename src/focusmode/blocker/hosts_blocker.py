# src/focusmode/blocker/hosts_blocker.py
"""Adds and removes the focus block in the system hosts file.

Every function takes the hosts file as an explicit ``hosts_path`` argument
(defaulting to :data:`config.HOSTS_PATH`). Content outside the block delimited
by :data:`config.BLOCK_MARKER_START` and :data:`config.BLOCK_MARKER_END` is
kept byte-for-byte, including line endings and bytes that are not UTF-8.

Writes go to a temporary file next to the hosts file which is then renamed over
it, so an interrupted run leaves either the old or the new content.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Tuple

from ..errors import MalformedHostsBlockError
from .config import BLOCK_MARKER_END, BLOCK_MARKER_START, HOSTS_PATH, REDIRECT_IP

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def _read_hosts(hosts_path: Path) -> str:
    with open(hosts_path, "r", encoding=ENCODING, errors=ERRORS, newline="") as f:
        return f.read()


def _lines(content: str) -> Iterator[Tuple[int, str]]:
    """Yields (offset, line) pairs; each line keeps its trailing newline."""
    pos = 0
    while pos < len(content):
        nl = content.find("\n", pos)
        end = len(content) if nl == -1 else nl + 1
        yield pos, content[pos:end]
        pos = end


def _newline_of(content: str) -> str:
    """The line ending used by most lines of `content`; ties go to LF."""
    crlf = content.count("\r\n")
    return "\r\n" if crlf > content.count("\n") - crlf else "\n"


def find_block(content: str, hosts_path=None) -> Optional[Tuple[int, int]]:
    """
    Returns the (start, end) offsets of the focus block, or None if there is none.

    The block runs from the first start marker line through the first end
    marker line after it, newline included.
    """
    start = None
    for offset, line in _lines(content):
        text = line.strip()
        if start is None:
            if text == BLOCK_MARKER_START:
                start = offset
            elif text == BLOCK_MARKER_END:
                raise MalformedHostsBlockError(f"'{BLOCK_MARKER_END}' found without '{BLOCK_MARKER_START}'", hosts_path)
        elif text == BLOCK_MARKER_END:
            return start, offset + len(line)
    if start is not None:
        raise MalformedHostsBlockError(f"'{BLOCK_MARKER_START}' found without '{BLOCK_MARKER_END}'", hosts_path)
    return None


def strip_block(content: str, hosts_path=None) -> str:
    span = find_block(content, hosts_path)
    if span is None:
        return content
    start, end = span
    before, block, after = content[:start], content[start:end], content[end:]
    if not block.endswith("\n"):
        # block closed the file without a newline; drop the separator enable() added
        sep = _newline_of(block)
        if before.endswith(sep):
            before = before[: -len(sep)]
    return before + after


def build_block(domains: Iterable[str], newline: str = "\n", redirect_ip: str = REDIRECT_IP) -> str:
    lines = [BLOCK_MARKER_START]
    for d in domains:
        names = [d] if d.startswith("www.") else [d, f"www.{d}"]
        lines.append(f"{redirect_ip} {' '.join(names)}")
    lines.append(BLOCK_MARKER_END)
    return newline.join(lines) + newline


def _write_in_place(hosts_path: Path, content: str):
    with open(hosts_path, "w", encoding=ENCODING, errors=ERRORS, newline="") as f:
        f.write(content)
        f.flush()
        os.fsync(f.fileno())


def check_writable(hosts_path: Path):
    """Raises PermissionError unless the hosts file itself can be written."""
    # renaming over a read-only file only needs a writable directory
    with open(hosts_path, "r+b"):
        pass


def write_atomic(hosts_path: Path, content: str):
    hosts_path = Path(hosts_path)
    check_writable(hosts_path)
    fd, tmp = tempfile.mkstemp(prefix=f".{hosts_path.name}.", suffix=".focus", dir=hosts_path.parent)
    try:
        with os.fdopen(fd, "w", encoding=ENCODING, errors=ERRORS, newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        try:
            shutil.copymode(hosts_path, tmp)
        except OSError as exc:
            logger.debug("Could not copy permissions of %s: %s", hosts_path, exc)
        try:
            os.replace(tmp, hosts_path)
        except OSError as exc:
            # a bind-mounted file (e.g. /etc/hosts in a container) cannot be renamed over
            if exc.errno not in (errno.EBUSY, errno.EXDEV):
                raise
            logger.warning("Cannot replace %s (%s); writing it in place", hosts_path, exc.strerror)
            _write_in_place(hosts_path, content)
    finally:
        if os.path.exists(tmp):
            os.unlink(tmp)
    logger.debug("Wrote %d bytes to %s", len(content), hosts_path)


def enable(
    domains: Iterable[str],
    hosts_path: Path = HOSTS_PATH,
    redirect_ip: str = REDIRECT_IP,
    before_write: Optional[Callable[[Path], None]] = None,
) -> bool:
    """
    Replaces the focus block in the hosts file with one built from `domains`.

    Any previous block is removed first, so repeated calls leave a single block.
    An empty `domains` leaves no block at all. `before_write` is called with the
    hosts path only when the file is about to be rewritten.

    Returns:
        bool: True if the hosts file was rewritten
    """
    hosts_path = Path(hosts_path)
    domains = list(domains)
    content = _read_hosts(hosts_path)
    stripped = strip_block(content, hosts_path)

    new_content = stripped
    if domains:
        nl = _newline_of(stripped)
        block = build_block(domains, nl, redirect_ip)
        if stripped and not stripped.endswith("\n"):
            new_content = stripped + nl + block[: -len(nl)]
        else:
            new_content = stripped + block

    if new_content == content:
        logger.debug("Hosts file %s already up to date", hosts_path)
        return False
    check_writable(hosts_path)
    if before_write:
        before_write(hosts_path)
    write_atomic(hosts_path, new_content)
    logger.info("Blocked %d domains in %s", len(domains), hosts_path)
    return True


def disable(hosts_path: Path = HOSTS_PATH, before_write: Optional[Callable[[Path], None]] = None) -> bool:
    """Removes the focus block; returns False (without writing) if there was none."""
    hosts_path = Path(hosts_path)
    content = _read_hosts(hosts_path)
    stripped = strip_block(content, hosts_path)
    if stripped == content:
        return False
    check_writable(hosts_path)
    if before_write:
        before_write(hosts_path)
    write_atomic(hosts_path, stripped)
    logger.info("Removed focus block from %s", hosts_path)
    return True


def is_active(hosts_path: Path = HOSTS_PATH) -> bool:
    try:
        content = _read_hosts(hosts_path)
    except OSError as exc:
        logger.debug("Cannot read %s: %s", hosts_path, exc)
        return False
    return any(line.strip() == BLOCK_MARKER_START for _, line in _lines(content))
