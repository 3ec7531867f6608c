# cli/feedback.py
# Terminal side channels: bell instead of vibration, clipboard through OS tools.

from __future__ import annotations

import logging
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)

# tried in order; the first one that exists and exits 0 wins
CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


class TerminalFeedback:
    def __init__(self, commands: list[list[str]] | None = None, bell: bool = True) -> None:
        self.commands = commands if commands is not None else CLIPBOARD_COMMANDS
        self.bell = bell

    def tap(self) -> None:
        if not self.bell:
            return
        try:
            sys.stdout.write("\a")
            sys.stdout.flush()
        except (OSError, ValueError):
            pass

    def copy(self, text: str) -> bool:
        if not text:
            return False
        for cmd in self.commands:
            if shutil.which(cmd[0]) is None:
                continue
            try:
                subprocess.run(cmd, input=text.encode("utf-8"), check=True, timeout=2)
            except (OSError, subprocess.SubprocessError) as e:
                logger.debug("clipboard command %s failed: %s", cmd[0], e)
                continue
            return True
        return False
