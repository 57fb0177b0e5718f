# vbuild/core/build_options.py
"""
Build option normalization — config flag, public path, entry points

Intent
- Turn loosely typed values coming from the CLI / a project manifest / an options file
  into the shapes the build step expects.
- Stay pure: nothing here reads or writes files.

Primary functions
- resolve_config_path(config, cwd=None) -> Path | None
  - falsy -> None (no config file requested)
  - True -> <cwd>/vbuild.config.js
  - str / PathLike -> resolved against cwd
  - anything else truthy -> ConfigFlagError
- normalize_public_path(homepage) -> str (always ends with "/", defaults to "/")
- ensure_sequence_values(mapping) -> same mapping, every value a list/tuple
- normalized_sequence_values(mapping) -> new dict (input untouched)

Ownership note
- ensure_sequence_values mutates its argument and returns it. Callers hand the mapping
  over for the duration of the call and should use the returned object afterwards.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, TypeVar, Union

from vbuild.utils.errors import ConfigFlagError
from vbuild.utils.logging import get_logger
from vbuild.utils.paths import DEFAULT_CONFIG_FILENAME, PathLike, resolve_working_path

ConfigFlag = Union[bool, str, "os.PathLike[str]", None]
M = TypeVar("M", bound=MutableMapping[Any, Any])

_SEQUENCE_TYPES = (list, tuple)


def resolve_config_path(config: Any, *, cwd: Optional[PathLike] = None) -> Optional[Path]:
    """
    Map a config flag to the config file path, or None when no config is requested.
    """
    logger = get_logger(__name__)

    if not config:
        return None
    if config is True:
        p = resolve_working_path(DEFAULT_CONFIG_FILENAME, cwd=cwd)
    elif isinstance(config, (str, os.PathLike)):
        p = resolve_working_path(config, cwd=cwd)
    else:
        raise ConfigFlagError(config)

    logger.debug("Config path resolved: %r -> %s", config, p)
    return p


def normalize_public_path(homepage: Optional[str]) -> str:
    """
    Public path with a guaranteed trailing slash; "/" when homepage is not set.
    """
    if not homepage:
        return "/"
    if not isinstance(homepage, str):
        raise TypeError(f"homepage must be a string, got {type(homepage).__name__}: {homepage!r}")
    return homepage if homepage.endswith("/") else homepage + "/"


def _as_sequence(value: Any) -> Any:
    # str/bytes are single values here, not sequences
    if isinstance(value, _SEQUENCE_TYPES):
        return value
    return [value]


def ensure_sequence_values(mapping: M) -> M:
    """
    Wrap every non-sequence value in a one-element list, in place.
    Existing list/tuple values are kept as the same objects. Returns `mapping` itself.
    """
    for key in list(mapping.keys()):
        value = mapping[key]
        if not isinstance(value, _SEQUENCE_TYPES):
            mapping[key] = [value]
    return mapping


def normalized_sequence_values(mapping: Mapping[Any, Any]) -> Dict[Any, List[Any]]:
    """
    Copying variant of ensure_sequence_values: a new dict of lists, input untouched.
    """
    return {k: list(_as_sequence(v)) for k, v in mapping.items()}


__all__ = [
    "ConfigFlag",
    "resolve_config_path",
    "normalize_public_path",
    "ensure_sequence_values",
    "normalized_sequence_values",
]
