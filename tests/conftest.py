"""
Shared pytest fixtures for SimpSig tests.
"""

import pytest

from simpsig import create_signal


@pytest.fixture
def init_value():
    return "Foo"


@pytest.fixture
def signal(init_value):
    """Provide a fresh base signal seeded with ``init_value``."""
    return create_signal(init_value)


@pytest.fixture
def recorder():
    """Collect every event handed to it, in order."""

    class Recorder:
        def __init__(self):
            self.events = []

        def __call__(self, event):
            self.events.append(event)

        @property
        def values(self):
            return [event.cur for event in self.events]

    return Recorder()
