"""Create a disposable copy of the Joomla checkout to run browser tests against."""

import os
import shutil
import typing as t

from jrobo import external
from jrobo.config import Settings
from jrobo.errors import FileCopyError
from jrobo.utils.fs_utils import copy_tree, remove_tree
from jrobo.utils.say_utils import say

# Never copied into the testing site (top level of the checkout only)
SITE_EXCLUDE = frozenset({"tests", "tests-phpunit", ".run", ".github", ".git"})
HTACCESS_SOURCE = "htaccess.txt"
REWRITE_BASE_FROM = "# RewriteBase /"
REWRITE_BASE_TO = "RewriteBase joomla-cms/"


def activate_htaccess(testing_path: str, source_dir: str = ".") -> str:
    """Install Joomla's bundled ``htaccess.txt`` as ``.htaccess`` with RewriteBase enabled.

    Returns the path of the written ``.htaccess``.

    Raises:
        FileCopyError: ``htaccess.txt`` is missing or the site directory is not writable.
    """
    say(f"Renaming {HTACCESS_SOURCE} to .htaccess")
    source = os.path.join(source_dir, HTACCESS_SOURCE)
    htaccess = os.path.join(testing_path, ".htaccess")
    try:
        shutil.copyfile(source, htaccess)
        with open(htaccess, "r", encoding="utf-8") as fh:
            content = fh.read()
        with open(htaccess, "w", encoding="utf-8") as fh:
            fh.write(content.replace(REWRITE_BASE_FROM, REWRITE_BASE_TO))
    except OSError as e:
        raise FileCopyError(source, e.strerror or e) from e
    return htaccess


def create_testing_site(
    settings: Settings | None,
    testing_path: str,
    use_htaccess: bool = False,
    *,
    source_dir: str = ".",
    build: t.Callable[[], None] = external.build,
    chown: t.Callable[[str, str], None] = external.fix_ownership,
) -> None:
    """Recreate the testing site at ``testing_path`` from ``source_dir``.

    Steps: delete the previous site, build dependencies, copy the checkout minus
    ``SITE_EXCLUDE``, optionally chown to ``settings.local_user`` and activate ``.htaccess``.

    Raises:
        UndeletableDirectoryError: the previous site could not be removed.
        SourceUnreadableError: ``source_dir`` cannot be listed.
    """
    if os.path.isdir(testing_path):
        remove_tree(testing_path)

    build()

    copy_tree(source_dir, testing_path, SITE_EXCLUDE)

    if settings is not None and settings.local_user:
        chown(testing_path, settings.local_user)

    if use_htaccess:
        activate_htaccess(testing_path, source_dir)

    say(f"Testing site created at {testing_path}")
