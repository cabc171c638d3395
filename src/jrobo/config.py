"""Load local settings and the Codeception YAML configuration."""

import configparser
import os
import typing as t
from dataclasses import dataclass, fields

from munch import Munch

from jrobo.utils.say_utils import say
from jrobo.utils.trace_utils import str_exc
from jrobo.utils.yaml_utils import yaml_load_overlay

SETTINGS_FILE = "RoboFile.ini"
TESTS_PATH = "tests"
# parse_ini_file() accepts section-less files, configparser does not
_SECTION = "robo"
# INI key -> Settings field
SETTINGS_KEYS = {"cmsPath": "cms_path", "localUser": "local_user", "branch": "branch"}


@dataclass(frozen=True)
class Settings:
    """Optional local settings read from ``RoboFile.ini``.

    Attributes:
        cms_path: Where to create the testing site instead of ``tests/joomla-cms``.
        local_user: ``user[:group]`` to chown the testing site to.
        branch: Upstream branch for screenshot snapshots.
    """

    cms_path: t.Optional[str] = None
    local_user: t.Optional[str] = None
    branch: t.Optional[str] = None

    @classmethod
    def from_mapping(cls, data: t.Mapping[str, str]) -> "Settings":
        """Build settings from raw INI keys, ignoring unknown keys and empty values."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = SETTINGS_KEYS.get(key)
            if name in known and (value := _unquote(value)):
                kwargs[name] = value
        return cls(**kwargs)


def _unquote(value: str | None) -> str:
    value = (value or "").strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return value


def parse_settings(text: str) -> dict[str, str]:
    """Parse a flat ``key = value`` INI text; sections, if any, are flattened.

    Raises:
        configparser.Error: the text is not valid INI.
    """
    # the last duplicate key wins and trailing "; comments" are dropped, as in parse_ini_file()
    parser = configparser.ConfigParser(
        interpolation=None, default_section="__none__", strict=False, inline_comment_prefixes=(";",)
    )
    parser.optionxform = str  # keys are case-sensitive
    parser.read_string(f"[{_SECTION}]\n{text}")
    flat: dict[str, str] = {}
    for section in parser.sections():
        flat.update(parser.items(section))
    return flat


def load_settings(root: str = ".") -> Settings | None:
    """Read ``RoboFile.ini`` from ``root``.

    Returns None, with a notice, when the file is missing or cannot be parsed.
    """
    settings_path = os.path.join(root, SETTINGS_FILE)
    if not os.path.exists(settings_path):
        say("No local configuration file")
        return None
    try:
        with open(settings_path, "r", encoding="utf-8") as fh:
            raw = parse_settings(fh.read())
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        say(f"Local configuration file is empty or wrong (check is it in correct .ini format): {str_exc(e)}")
        return None
    return Settings.from_mapping(raw)


def load_suite_config(root: str = ".", suite: str = "acceptance") -> Munch:
    """Load ``tests/<suite>.suite.yml`` on top of its ``.dist`` counterpart."""
    base = os.path.join(root, TESTS_PATH, f"{suite}.suite")
    return yaml_load_overlay(f"{base}.dist.yml", f"{base}.yml")


def load_codeception_config(root: str = ".") -> Munch:
    """Load the main ``codeception.yml`` on top of ``codeception.dist.yml``."""
    return yaml_load_overlay(os.path.join(root, "codeception.dist.yml"), os.path.join(root, "codeception.yml"))
