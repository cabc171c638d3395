"""Fatal provisioning errors.

Core functions raise these; the CLI turns any of them into a loud message and exit status 1.
"""

import typing as t


class RoboError(Exception):
    """Base class for errors that abort a command."""


class UndeletableDirectoryError(RoboError):
    """A directory that has to be recreated could not be deleted."""

    def __init__(self, path: str, reason: t.Any = None):
        self.path = path
        self.reason = reason
        super().__init__(f"Sorry, you will have to delete {path} manually.")


class SourceUnreadableError(RoboError):
    """The source directory of a copy cannot be listed."""

    def __init__(self, path: str, reason: t.Any = None):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open source directory {path!r}: {reason}")


class FileCopyError(RoboError):
    """A single file needed by the testing site could not be copied."""

    def __init__(self, path: str, reason: t.Any = None):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot copy {path!r}: {reason}")


class DriverNotFoundError(RoboError):
    """No webdriver is known for the configured browser on this OS."""

    def __init__(self, browser: str, os_family: str | None = None):
        self.browser = browser
        self.os_family = os_family
        super().__init__(
            f"No driver for your browser ({browser!r} on {os_family or 'any OS'}). "
            "Check your browser in acceptance.suite.yml and the webdrivers in codeception.yml"
        )


class ConfigFileError(RoboError):
    """A required YAML configuration file is missing or broken."""

    def __init__(self, path: str, reason: t.Any = None):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load YAML file {path!r}: {reason}")


class CommandFailedError(RoboError):
    """An external command exited with a non-zero status."""

    def __init__(self, args: t.Sequence[str], returncode: int):
        self.command = list(args)
        self.returncode = returncode
        super().__init__(f"Command {' '.join(self.command)!r} failed with exit status {returncode}")
