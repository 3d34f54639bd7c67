"""
Shared fixtures for router tests.
"""
import pytest


class CountingCompletionClient:
    """Completion client stub that records every prompt it receives."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    @property
    def call_count(self):
        return len(self.prompts)

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start=1000.0):
        self.now = start

    def advance(self, seconds):
        self.now += seconds

    def __call__(self):
        return self.now


@pytest.fixture
def completion_client():
    return CountingCompletionClient(
        reply='{"agentType": "DATA_ANALYSIS", "confidence": 88, "reason": "sales", "keywords": ["sales"]}'
    )


@pytest.fixture
def fake_clock():
    return FakeClock()
