"""Copying the generated prompt to the clipboard.

The system clipboard tool (pbcopy, wl-copy, xclip, xsel or clip) is tried
first. If none is installed or the call fails, the text is sent to the
terminal as an OSC 52 selection sequence, which most modern terminal
emulators forward to the clipboard. Either way the ``copied`` indicator
turns on and switches itself off after ``reset_after`` seconds.
"""

from __future__ import annotations

import base64
import shutil
import subprocess
import time
from collections.abc import Callable

from rich.console import Console

from theme_wizard.utils import console as default_console

CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def find_clipboard_command() -> tuple[str, ...] | None:
    """Return the first clipboard command available on ``PATH``."""
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]):
            return cmd
    return None


def osc52_sequence(text: str) -> str:
    """Encode *text* as an OSC 52 "set clipboard" escape sequence."""
    payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return f"\x1b]52;c;{payload}\x07"


class PromptClipboard:
    """Copies text and tracks the transient "copied" state shown in the UI."""

    def __init__(
        self,
        reset_after: float = 3.0,
        console: Console | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.reset_after = reset_after
        self.console = console or default_console
        self.clock = clock
        self._copied_at: float | None = None

    @property
    def copied(self) -> bool:
        """``True`` until ``reset_after`` seconds have passed since the last copy."""
        if self._copied_at is None:
            return False
        if self.clock() - self._copied_at >= self.reset_after:
            self._copied_at = None
            return False
        return True

    def _copy_with_system(self, text: str) -> bool:
        cmd = find_clipboard_command()
        if cmd is None:
            return False
        try:
            subprocess.run(
                list(cmd),
                input=text.encode("utf-8"),
                check=True,
                capture_output=True,
                timeout=5,
            )
        except (OSError, subprocess.SubprocessError):
            return False
        return True

    def _copy_with_terminal(self, text: str) -> None:
        self.console.file.write(osc52_sequence(text))
        self.console.file.flush()

    def copy(self, text: str) -> str:
        """Copy *text* and turn the indicator on.

        Returns:
            ``"system"`` or ``"terminal"``, naming the path that was used.
        """
        if self._copy_with_system(text):
            method = "system"
        else:
            self._copy_with_terminal(text)
            method = "terminal"
        self._copied_at = self.clock()
        return method
