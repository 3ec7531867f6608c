"""
Shared test fixtures: fresh quote session, API test client, recording feedback.
"""

import pytest
from fastapi.testclient import TestClient

from core.session import QuoteSession
from web.api import app


class RecordingFeedback:
    """Feedback stub that remembers what it was asked to do."""

    def __init__(self, copy_ok=True):
        self.copy_ok = copy_ok
        self.taps = 0
        self.copied = []

    def tap(self):
        self.taps += 1

    def copy(self, text):
        self.copied.append(text)
        return self.copy_ok


@pytest.fixture
def session():
    return QuoteSession(shipping=159)


@pytest.fixture
def feedback():
    return RecordingFeedback()


@pytest.fixture
def client():
    """API client with a clean in-process session per test."""
    app.state.session = QuoteSession(shipping=159)
    return TestClient(app)
