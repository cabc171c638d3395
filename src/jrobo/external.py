"""Thin wrappers around the external tools the test workflow delegates to.

Composer, Codeception, git and chown are run synchronously with paths relative
to the current working directory (the Joomla checkout).
"""

import os
import shlex
import subprocess
import typing as t

from jrobo.config import TESTS_PATH
from jrobo.errors import CommandFailedError
from jrobo.utils.say_utils import say

COMPOSER_INSTALLER_URL = "https://getcomposer.org/installer"
COMPOSER_PHAR = f"{TESTS_PATH}/composer.phar"
CODECEPT = "vendor/bin/codecept"
CODECEPT_RUN_ARGS = ("--steps", "--debug", "--fail-fast")


def run_command(args: t.Sequence[str], cwd: str | None = None) -> None:
    """Run a command to completion, echoing it first.

    Raises:
        CommandFailedError: the command could not be started or exited non-zero.
    """
    say(f"Running {shlex.join(args)}")
    try:
        completed = subprocess.run(list(args), cwd=cwd, check=False)
    except OSError as e:
        raise CommandFailedError(args, 127) from e
    if completed.returncode != 0:
        raise CommandFailedError(args, completed.returncode)


def get_composer() -> None:
    """Download ``tests/composer.phar`` unless it is already there."""
    if os.path.exists(COMPOSER_PHAR):
        return
    installer = f"{TESTS_PATH}/composer-setup.php"
    run_command(["curl", "--retry", "3", "--retry-delay", "5", "-sS", "-o", installer, COMPOSER_INSTALLER_URL])
    try:
        run_command(["php", installer, f"--install-dir={TESTS_PATH}", "--filename=composer.phar"])
    finally:
        if os.path.exists(installer):
            os.remove(installer)


def build() -> None:
    """Install the PHP dependencies of the checkout."""
    get_composer()
    run_command(["php", COMPOSER_PHAR, "install"])


def codecept_build() -> None:
    """Generate the Codeception actor classes (AcceptanceTester & co)."""
    run_command(["php", CODECEPT, "build"])


def codecept_run(path: str, env: str | None = None) -> None:
    """Run a Codeception suite or directory, stopping at the first failure."""
    args = [CODECEPT, "run", *CODECEPT_RUN_ARGS]
    if env:
        args += ["--env", env]
    run_command([*args, path])


def git_clone(url: str, branch: str, dest: str) -> None:
    """Shallow, single-branch clone of ``branch`` into ``dest``."""
    run_command(["git", "clone", "-b", branch, "--single-branch", "--depth", "1", url, dest])


def fix_ownership(path: str, local_user: str) -> None:
    """``chown -R`` the tree to ``local_user`` (``user`` or ``user:group``)."""
    run_command(["chown", "-R", local_user, path])
