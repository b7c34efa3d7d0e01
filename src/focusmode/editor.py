# src/focusmode/editor.py
import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from .blocker.config import DEFAULT_EDITOR, SYSTEM
from .errors import EditorLaunchFailedError

logger = logging.getLogger(__name__)


def resolve_editor(environ: Optional[dict] = None) -> List[str]:
    """
    Returns the editor command as an argv list.

    $VISUAL wins over $EDITOR; both may carry arguments (e.g. "code --wait").
    Falls back to the platform default when neither is set.
    """
    environ = os.environ if environ is None else environ
    for var in ("VISUAL", "EDITOR"):
        value = (environ.get(var) or "").strip()
        if value:
            return shlex.split(value, posix=SYSTEM != "Windows")
    return [DEFAULT_EDITOR]


def open_in_editor(path: Path, editor: Optional[List[str]] = None) -> int:
    """Opens `path` in the editor and blocks until it exits; returns its exit status."""
    cmd = list(editor or resolve_editor()) + [str(path)]
    logger.debug("Launching editor: %s", cmd)
    try:
        return subprocess.call(cmd)
    except FileNotFoundError:
        raise EditorLaunchFailedError(
            cmd[0], "no editor by that name found; set $EDITOR to an installed editor"
        ) from None
    except OSError as exc:
        raise EditorLaunchFailedError(cmd[0], exc.strerror or str(exc)) from exc
