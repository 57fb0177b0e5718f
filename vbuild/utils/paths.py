# vbuild/utils/paths.py
"""
Path helpers

Intent
- Resolve paths against an explicit working directory (defaults to the process CWD
  only when the caller does not pass one).
- Resolve paths against the vbuild package itself, to find files shipped with the tool.

Key behaviors
- Normalization is lexical (os.path.normpath): no symlink resolution, no filesystem access.
- A later absolute segment overrides everything before it (os.path.join semantics).
- Non str/PathLike segments raise PathSegmentError (a TypeError).
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from vbuild.utils.errors import PathSegmentError

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_CONFIG_FILENAME = "vbuild.config.js"

# vbuild/utils/paths.py -> vbuild/
OWN_DIR = Path(__file__).resolve().parents[1]


def _check_segments(segments: tuple) -> None:
    for i, seg in enumerate(segments):
        if not isinstance(seg, (str, os.PathLike)):
            raise PathSegmentError(
                f"path segment #{i} must be str or os.PathLike, got {type(seg).__name__}: {seg!r}"
            )


def _join_normalized(base: PathLike, segments: tuple) -> Path:
    return Path(os.path.normpath(os.path.join(os.fspath(base), *(os.fspath(s) for s in segments))))


def _strip_root(segment: PathLike) -> str:
    # "/a/b" -> "a/b" so the segment stays under the base
    s = os.fspath(segment)
    seps = os.sep + (os.altsep or "")
    return os.path.splitdrive(s)[1].lstrip(seps)


def resolve_working_path(*segments: PathLike, cwd: Optional[PathLike] = None) -> Path:
    """
    Resolve segments against the working directory into an absolute path.

    Returns a `pathlib.Path`; call `str()` on it where a plain string is needed.
    `cwd` defaults to the process working directory; a relative `cwd` is itself
    resolved against the process working directory. An absolute segment replaces
    everything before it.
    """
    _check_segments(segments)
    if cwd is None:
        base = os.getcwd()
    else:
        _check_segments((cwd,))
        base = os.path.abspath(os.fspath(cwd))
    return _join_normalized(base, segments)


def resolve_own_path(*segments: PathLike, base: Optional[PathLike] = None) -> Path:
    """
    Join segments under the installed vbuild package directory (or `base`).

    Returns an absolute `pathlib.Path`. Used for resources bundled with the tool,
    independent of the caller's CWD. Segments are always appended: a leading
    separator does not replace the base ("/x" -> <base>/x).
    """
    _check_segments(segments)
    root = OWN_DIR if base is None else Path(os.path.abspath(os.fspath(base)))
    return _join_normalized(root, tuple(_strip_root(s) for s in segments))


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "OWN_DIR",
    "resolve_working_path",
    "resolve_own_path",
]
