"""System test configuration and fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from jrobo import external
from jrobo.browser import selenium_server, webdriver
from jrobo.errors import CommandFailedError
from tests.utils import make_tree

UPSTREAM_TREE = {"index.php": "<?php // upstream", "tests": {"screenshots": {"home.feature": "Feature: home"}}}


class FakeTools:
    """Stands in for git, composer, codecept, chown and the Selenium server."""

    def __init__(self):
        self.commands = []
        self.servers = []
        self.fail_on = None

    def run_command(self, args, cwd=None):  # pylint: disable=unused-argument
        args = list(args)
        self.commands.append(args)
        if self.fail_on and self.fail_on in args:
            raise CommandFailedError(args, 1)
        if args[:2] == ["git", "clone"]:
            make_tree(Path(args[-1]), UPSTREAM_TREE)

    def popen(self, args, **kwargs):  # pylint: disable=unused-argument
        self.servers.append(list(args))


@pytest.fixture
def fake_tools(monkeypatch):
    tools = FakeTools()
    monkeypatch.setattr(external, "run_command", tools.run_command)
    monkeypatch.setattr(selenium_server.subprocess, "Popen", tools.popen)
    monkeypatch.setattr(selenium_server.time, "sleep", lambda seconds: None)
    monkeypatch.setattr(webdriver.platform, "system", lambda: "Linux")
    return tools


@pytest.fixture
def runner():
    return CliRunner()
