"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

from promptcalc import Session

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


class ScriptedSession(Session):
    """In-memory session answering prompts from a fixed list."""

    def __init__(self, answers):
        super().__init__()
        self.answers = list(answers)
        self.prompts = []
        self.lines = []
        self.close_calls = 0

    def _read(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            return ""
        return self.answers.pop(0)

    def _write(self, line):
        self.lines.append(line)

    def _release(self):
        self.close_calls += 1


@pytest.fixture
def scripted_session():
    """Factory for a session that answers prompts from the given strings."""
    return ScriptedSession


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting test numbers."""
    return [
        0,
        1,
        -1,
        0.5,
        -0.5,
        100,
        -100,
        1e10,
        -1e10,
        1e-10,
        -1e-10,
        0.1 + 0.2,  # Floating point edge case
    ]
