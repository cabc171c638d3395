"""Start the standalone Selenium server in the background."""

import subprocess
import time

from jrobo.browser.webdriver import classify_os
from jrobo.errors import CommandFailedError
from jrobo.utils.fs_utils import windows_path
from jrobo.utils.say_utils import say

SELENIUM_BIN = "vendor/bin/selenium-server-standalone"
SELENIUM_JAR = "vendor/joomla-projects/selenium-server-standalone/bin/selenium-server-standalone.jar"
SELENIUM_LOG = "selenium.log"
STARTUP_DELAY = 3


def server_command(driver_flag: str, os_name: str | None = None) -> list[str]:
    """Command line that starts the server with the given ``-D`` driver flag."""
    if classify_os(os_name) == "windows":
        return ["java.exe", driver_flag, "-jar", windows_path(SELENIUM_JAR)]
    return [SELENIUM_BIN, driver_flag]


def run_selenium(driver_flag: str, os_name: str | None = None, startup_delay: float = STARTUP_DELAY) -> subprocess.Popen:
    """Launch the server without waiting for it, then give it ``startup_delay`` seconds to come up.

    On POSIX output is appended to ``selenium.log``; on Windows it gets its own console.
    """
    args = server_command(driver_flag, os_name)
    say(f"Starting Selenium server: {' '.join(args)}")
    try:
        if classify_os(os_name) == "windows":
            # pylint: disable-next=consider-using-with
            proc = subprocess.Popen(args, creationflags=getattr(subprocess, "CREATE_NEW_CONSOLE", 0))
        else:
            with open(SELENIUM_LOG, "ab") as log:
                # pylint: disable-next=consider-using-with
                proc = subprocess.Popen(args, stdout=log, stderr=subprocess.STDOUT, start_new_session=True)
    except OSError as e:
        raise CommandFailedError(args, 127) from e
    time.sleep(startup_delay)
    return proc
