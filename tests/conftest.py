"""Root conftest.py with shared fixtures across all test types."""

import shutil

import pytest

from .utils import get_test_data_dir, make_tree

CHECKOUT_TREE = {
    "index.php": "<?php // site entry",
    "htaccess.txt": "RewriteEngine On\n# RewriteBase /\nRewriteRule .* index.php [L]\n",
    "administrator": {"index.php": "<?php // admin entry", "tests": {"keep.txt": "nested"}},
    "libraries": {"src": {"Factory.php": "<?php class Factory {}"}},
    "tests": {"codeception": {"acceptance": {"install.feature": "Feature: install"}}},
    "tests-phpunit": {"bootstrap.php": "<?php"},
    ".git": {"HEAD": "ref: refs/heads/staging"},
    ".github": {"CODEOWNERS": "* @joomla"},
    ".run": {"run.xml": "<run/>"},
}


@pytest.fixture
def test_data_dir():
    """Return path to the test data directory."""
    return get_test_data_dir()


@pytest.fixture
def checkout(tmp_path, test_data_dir, monkeypatch):
    """A minimal Joomla checkout in a temp dir, which is also the working directory."""
    root = make_tree(tmp_path / "joomla", CHECKOUT_TREE)
    shutil.copy2(test_data_dir / "codeception.yml", root / "codeception.yml")
    shutil.copy2(test_data_dir / "acceptance.suite.yml", root / "tests" / "acceptance.suite.yml")
    monkeypatch.chdir(root)
    return root
