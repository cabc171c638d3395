"""Pick the native webdriver binary for the configured browser and host OS.

The browser comes from the acceptance suite config
(``modules.config.JoomlaBrowser.browser``), driver paths from the ``webdrivers``
table of ``codeception.yml``::

    webdrivers:
      chrome:
        linux: tests/drivers/linux/chromedriver
        windows: tests\\drivers\\windows\\chromedriver.exe
"""

import platform
import typing as t
from dataclasses import dataclass

from jrobo.errors import DriverNotFoundError
from jrobo.utils.data_utils import get_multi, truthy

BROWSER_PATH = "modules.config.JoomlaBrowser.browser"
EDGE_INSIDERS_PATH = "modules.config.AcceptanceHelper.MicrosoftEdgeInsiders"
EDGE = "MicrosoftEdge"
EDGE_INSIDERS = "MicrosoftEdgeInsiders"

DRIVER_TYPES = {
    "chrome": "webdriver.chrome.driver",
    "firefox": "webdriver.gecko.driver",
    EDGE: "webdriver.edge.driver",
    "internet explorer": "webdriver.ie.driver",
}

OsFamily = t.Literal["windows", "mac", "linux"]


@dataclass(frozen=True)
class DriverSpec:
    """A resolved driver: Java system property name and binary path."""

    type_key: str
    path: str

    def as_flag(self) -> str:
        """Format as a JVM ``-D`` flag for the Selenium server."""
        return f"-D{self.type_key}={self.path}"


def classify_os(os_name: str | None = None) -> OsFamily:
    """Map an OS name (default: ``platform.system()``) to windows, mac or linux."""
    os_name = (platform.system() if os_name is None else os_name).lower()
    if "windows" in os_name:
        return "windows"
    if "darwin" in os_name:
        return "mac"
    return "linux"


def resolve_driver(
    browser: str,
    driver_table: t.Mapping[str, t.Any],
    *,
    edge_insiders: bool = False,
    os_name: str | None = None,
) -> DriverSpec:
    """Resolve the driver for ``browser`` from ``driver_table[browser][os_family]``.

    For Edge with ``edge_insiders`` set, the path is looked up under ``MicrosoftEdgeInsiders``
    while the driver type stays the Edge one.

    Raises:
        DriverNotFoundError: unknown browser, or no path for it on this OS.
    """
    os_family = classify_os(os_name)
    if browser not in DRIVER_TYPES:
        raise DriverNotFoundError(browser, os_family)

    lookup = EDGE_INSIDERS if browser == EDGE and edge_insiders else browser
    path = get_multi(driver_table or {}, [lookup, os_family], None)
    if not path:
        raise DriverNotFoundError(lookup, os_family)
    return DriverSpec(DRIVER_TYPES[browser], str(path))


def resolve_suite_driver(
    suite_config: t.Mapping[str, t.Any], main_config: t.Mapping[str, t.Any], os_name: str | None = None
) -> DriverSpec:
    """Resolve the driver configured by the acceptance suite, using the main config's ``webdrivers``."""
    return resolve_driver(
        get_multi(suite_config, BROWSER_PATH, ""),
        get_multi(main_config, "webdrivers", {}),
        edge_insiders=truthy(get_multi(suite_config, EDGE_INSIDERS_PATH, False)),
        os_name=os_name,
    )
