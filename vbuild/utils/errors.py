# vbuild/utils/errors.py
"""
Error types shared across vbuild.

Both concrete errors subclass TypeError as well, so callers that only expect the
builtin type keep working.
"""
from __future__ import annotations

from typing import Any


class VbuildError(Exception):
    """Base class for vbuild errors."""


class PathSegmentError(VbuildError, TypeError):
    """A path segment was neither str nor os.PathLike."""


class ConfigFlagError(VbuildError, TypeError):
    """The configuration flag was truthy but neither True nor a path."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            "config flag must be empty, True, or a path string; "
            f"got {type(value).__name__}: {value!r}"
        )


__all__ = ["VbuildError", "PathSegmentError", "ConfigFlagError"]
