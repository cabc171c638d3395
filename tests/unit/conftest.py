"""Unit test configuration and fixtures."""

import pytest

from jrobo import external


@pytest.fixture
def recorded_commands(monkeypatch):
    """Record external commands instead of running them."""
    calls = []
    monkeypatch.setattr(external, "run_command", lambda args, cwd=None: calls.append(list(args)))
    return calls
