"""
Pytest configuration file for proper Unicode/UTF-8 handling

Test expectations are Cyrillic input and IPA output, so the captured
output streams must be UTF-8 on every platform.
"""

import sys
import io
import os

import pytest

# Force UTF-8 encoding globally
os.environ['PYTHONIOENCODING'] = 'utf-8'

if sys.platform == 'win32':
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')
        sys.stderr.reconfigure(encoding='utf-8', errors='replace')
    elif sys.stdout.encoding != 'utf-8':
        sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
        sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')


class FakeStressLookup:
    """
    In-memory StressLookup for tests: known texts map to stressed answers,
    anything else comes back unchanged, like a failed online lookup.
    """

    def __init__(self, answers=None):
        self.answers = dict(answers or {})
        self.queries = []
        self.closed = False

    def lookup(self, text: str) -> str:
        self.queries.append(text)
        return self.answers.get(text, text)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_lookup():
    """Stress lookup that knows a handful of words."""
    return FakeStressLookup({
        "череша": "черѐша",
        "хладилник": "хладѝлник",
        "от град": "от гра̀д",
    })
