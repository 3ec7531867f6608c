# core/feedback.py
# Best-effort side channels (tap cue, clipboard). Pricing never depends on these.

from __future__ import annotations

from typing import Protocol


class Feedback(Protocol):
    def tap(self) -> None:
        """Short cue after a button-like action. Must not raise."""

    def copy(self, text: str) -> bool:
        """Put text on the clipboard. False when nothing worked."""


class NullFeedback:
    """No cues, no clipboard. Used by the web host and in tests."""

    def tap(self) -> None:
        return None

    def copy(self, text: str) -> bool:
        return False
