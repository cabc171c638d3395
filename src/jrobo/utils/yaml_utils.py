"""YAML helpers"""

import os
import typing as t

import yaml
from munch import Munch, munchify

from jrobo.errors import ConfigFileError
from jrobo.utils.data_utils import NotSpecified, merge_struct


def yaml_safe_load_file(fname: str, default: t.Any = NotSpecified) -> t.Any:
    """Load YAML content from a file safely.

    If ``default`` is given, it is returned when the file does not exist.
    An empty file loads as an empty dict.
    """
    if default is not NotSpecified and not os.path.exists(fname):
        return default
    try:
        with open(fname, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigFileError(fname, e) from e
    return {} if data is None else data


def yaml_load_overlay(dist_fname: str, local_fname: str) -> Munch:
    """Load a ``*.dist.yml`` file with its local ``*.yml`` counterpart merged on top.

    Either file may be missing, but not both.

    Raises:
        ConfigFileError: neither file exists, or one fails to parse.
    """
    if not os.path.exists(dist_fname) and not os.path.exists(local_fname):
        raise ConfigFileError(local_fname, "file not found")
    config = yaml_safe_load_file(dist_fname, default={})
    config = merge_struct(config, yaml_safe_load_file(local_fname, default={}))
    return munchify(config)
