# src/focusmode/errors.py


class FocusError(Exception):
    """Base class for errors reported to the user as a one-line message."""


class MalformedHostsBlockError(FocusError):
    """The hosts file holds a start or end marker without its partner."""

    def __init__(self, detail: str, path=None):
        self.path = path
        where = f"{path}: " if path else ""
        super().__init__(f"{where}{detail}; fix the focus block by hand before retrying")


class EditorLaunchFailedError(FocusError):
    """The configured editor could not be started."""

    def __init__(self, editor: str, reason: str):
        self.editor = editor
        super().__init__(f"could not launch editor '{editor}': {reason}")
