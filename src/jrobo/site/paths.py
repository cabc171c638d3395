"""Where the disposable testing site lives."""

import os

from jrobo.config import TESTS_PATH, Settings
from jrobo.utils.say_utils import say

DEFAULT_SITE_NAME = "joomla-cms"
DEFAULT_TESTING_PATH = f"{TESTS_PATH}/{DEFAULT_SITE_NAME}"


def contains_checkout(path: str, checkout: str = ".") -> bool:
    """True if ``path`` is the checkout itself or one of its ancestors (the filesystem root included)."""
    path = os.path.abspath(path)
    return os.path.commonpath([path, os.path.abspath(checkout)]) == path


def resolve_testing_path(settings: Settings | None) -> str:
    """Return the configured CMS path, or ``tests/joomla-cms``.

    A configured path is only used when its parent directory exists and is readable.
    The testing site is deleted on every run, so a path that contains the checkout is refused.
    """
    if settings is None or not settings.cms_path:
        return DEFAULT_TESTING_PATH

    if contains_checkout(settings.cms_path):
        say(f"CMS path written in local configuration contains the checkout, using {DEFAULT_TESTING_PATH}")
        return DEFAULT_TESTING_PATH

    parent = os.path.dirname(settings.cms_path.rstrip("/\\")) or "."
    if not os.path.isdir(parent) or not os.access(parent, os.R_OK):
        say("CMS path written in local configuration does not exists or is not readable")
        return DEFAULT_TESTING_PATH

    return settings.cms_path
