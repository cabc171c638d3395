"""Unit tests for the snapshot cache used by screenshot runs."""

import os
import tempfile
import time
import unittest
from pathlib import Path

import pytest

from jrobo.errors import UndeletableDirectoryError
from jrobo.site import snapshot
from jrobo.site.snapshot import CACHE_MAX_AGE, DEFAULT_BRANCH, UPSTREAM_URL, materialize_snapshot, refresh_cache
from tests.utils import list_tree, make_tree

pytestmark = pytest.mark.unit

UPSTREAM_TREE = {
    "index.php": "<?php // upstream",
    ".git": {"HEAD": "ref: refs/heads/staging"},
    "tests": {"screenshots": {"home.feature": "Feature: home"}},
}


class FakeClone:
    """Records fetches and writes a small tree where git would clone."""

    def __init__(self, tree=None):
        self.tree = tree or UPSTREAM_TREE
        self.calls = []

    def __call__(self, url, branch, dest):
        self.calls.append((url, branch, dest))
        make_tree(Path(dest), self.tree)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_cache_max_age_is_one_day():
    assert CACHE_MAX_AGE == 86400


def test_first_run_clones_default_branch(workdir):
    fetch = FakeClone()
    materialize_snapshot(None, fetch=fetch)

    assert fetch.calls == [(UPSTREAM_URL, DEFAULT_BRANCH, "cache")]
    # full copy, no exclusions
    assert list_tree(workdir / "joomla-cms") == list_tree(workdir / "cache") == UPSTREAM_TREE


def test_configured_branch_is_cloned(workdir):
    fetch = FakeClone()
    materialize_snapshot("4.0-dev", fetch=fetch)
    assert fetch.calls[0][1] == "4.0-dev"


def test_second_run_within_a_day_reuses_cache_but_recopies(workdir):
    fetch = FakeClone()
    materialize_snapshot(None, fetch=fetch)
    (workdir / "joomla-cms" / "installed.txt").write_text("left over from a test run", encoding="utf-8")

    materialize_snapshot(None, fetch=fetch)

    assert len(fetch.calls) == 1
    assert not (workdir / "joomla-cms" / "installed.txt").exists()
    assert list_tree(workdir / "joomla-cms") == UPSTREAM_TREE


def test_stale_cache_is_deleted_then_refetched(workdir):
    make_tree(workdir / "cache", {"old.php": "old"})
    now = time.time()
    os.utime(workdir / "cache", (now - CACHE_MAX_AGE - 10, now - CACHE_MAX_AGE - 10))
    fetch = FakeClone()

    materialize_snapshot(None, fetch=fetch, now=now)

    assert len(fetch.calls) == 1
    assert not (workdir / "cache" / "old.php").exists()
    assert not (workdir / "joomla-cms" / "old.php").exists()


def test_cache_under_a_day_old_is_fresh(workdir):
    make_tree(workdir / "cache", {"kept.php": "kept"})
    now = time.time()
    os.utime(workdir / "cache", (now - CACHE_MAX_AGE + 60, now - CACHE_MAX_AGE + 60))
    fetch = FakeClone()

    materialize_snapshot(None, fetch=fetch, now=now)

    assert not fetch.calls
    assert (workdir / "joomla-cms" / "kept.php").exists()


def test_undeletable_working_dir_is_fatal(workdir, monkeypatch):
    make_tree(workdir / "cache", UPSTREAM_TREE)
    make_tree(workdir / "joomla-cms", {"x": "x"})
    real_remove_tree = snapshot.remove_tree

    def remove_tree(path):
        if path == "joomla-cms":
            raise UndeletableDirectoryError(path)
        real_remove_tree(path)

    monkeypatch.setattr(snapshot, "remove_tree", remove_tree)
    with pytest.raises(UndeletableDirectoryError):
        materialize_snapshot(None, fetch=FakeClone())
    assert (workdir / "joomla-cms" / "x").exists()


class TestRefreshCache(unittest.TestCase):
    """Tests for refresh_cache return values (unittest style)."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()  # pylint: disable=consider-using-with
        self.cache = os.path.join(self._tmp.name, "cache")

    def tearDown(self):
        self._tmp.cleanup()

    def test_refresh_reports_fetch(self):
        fetch = FakeClone()
        self.assertTrue(refresh_cache("staging", self.cache, fetch=fetch))
        self.assertFalse(refresh_cache("staging", self.cache, fetch=fetch))
        self.assertEqual(len(fetch.calls), 1)

    def test_refresh_after_a_day(self):
        fetch = FakeClone()
        refresh_cache("staging", self.cache, fetch=fetch)
        self.assertTrue(refresh_cache("staging", self.cache, fetch=fetch, now=time.time() + CACHE_MAX_AGE + 1))
        self.assertEqual(len(fetch.calls), 2)
