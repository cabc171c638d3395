"""Common utility functions for data operations.

This module provides basic helpers used across the project, particularly for
reading nested configuration dicts loaded from YAML.
"""

import typing as t
from copy import deepcopy

from deepmerge import Merger

TRUTHY_STRINGS = frozenset({"1", "true", "yes", "on"})


class NotSpecified:  # pylint: disable=too-few-public-methods
    """Sentinel class to distinguish between None and no default value provided."""


def get_multi(data, path: str | list[str], default=NotSpecified):
    """Get a value from nested dictionary using a dot-separated path.

    Args:
        data: Dictionary or nested dictionary to retrieve value from.
        path: Dot-separated string path (e.g., 'key1.key2.key3') or list of keys.
        default: Default value to return if path not found. If NotSpecified, raises exception.

    Returns:
        The value at the specified path.

    Raises:
        KeyError: If path not found and default is NotSpecified.
        TypeError: If intermediate value is not subscriptable.
    """
    if isinstance(path, str):
        path = path.split(".")
    try:
        return get_multi(data[path[0]], path[1:], default) if path else data
    except (KeyError, TypeError) as e:
        if default is NotSpecified:
            raise type(e)(f"{data=} {path=} {e!r}") from e
        return default


T = t.TypeVar("T")


def merge_struct(data1: T, data2: T) -> T:
    """
    Deep-merge two JSON-like structures.

    Rules:
      - dict + dict   => deepmerge-style recursive merge
      - anything else => take the 2nd value (data2)

    Returns a NEW structure; does not mutate inputs.
    """
    base = deepcopy(data1)  # deepmerge mutates the first argument
    _merger = Merger(
        # Per-type strategies
        [
            (dict, ["merge"]),  # recursively merge dicts
        ],
        # Fallback strategies (for non-dict types: lists, ints, etc.)
        ["override"],  # use value from data2
        # Type conflict strategies (int vs dict, list vs dict, etc.)
        ["override"],  # use value from data2
    )
    return _merger.merge(base, data2)


def truthy(value: t.Any) -> bool:
    """Interpret YAML/INI flag values: real booleans, numbers, or strings like 'true', 'on', '1'."""
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    return bool(value)
