# vbuild/utils/config.py
"""
Config Loader — vbuild options (Typed YAML)

Intent
- Load + validate vbuild options into a typed `BuildOptions` (Pydantic).
- Layering, lowest to highest precedence:
  1) bundled defaults (vbuild/defaults.yaml, located via resolve_own_path)
  2) an optional YAML options file (a relative `cwd:` there is relative to the file)
  3) explicit overrides (typically from the CLI); None values do not override

What this module guarantees
- **Strict validation:** invalid options fail fast with Pydantic errors (logged, then re-raised).
- **Unicode whitespace hardening:** NBSP/BOM/narrow NBSP are normalized before YAML parsing.
- **Entry normalization:** every `entry` value becomes a list (single values are wrapped).

External dependencies
- PyYAML: yaml.safe_load
- Pydantic v2: BaseModel, validators, model_validate
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError, field_validator

from vbuild.core.build_options import (
    normalize_public_path,
    normalized_sequence_values,
    resolve_config_path,
)
from vbuild.utils.logging import get_logger, level_from_name
from vbuild.utils.paths import resolve_own_path, resolve_working_path

DEFAULTS_FILENAME = "defaults.yaml"


class BuildOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # None means "process working directory at the time of use"
    cwd: Optional[str] = None
    config: Union[StrictBool, StrictStr, None] = None
    homepage: Optional[str] = None
    entry: Dict[str, List[Any]] = Field(default_factory=dict)
    log_level: str = "INFO"

    @field_validator("entry", mode="before")
    @classmethod
    def _normalize_entry(cls, v: Any) -> Any:
        if v is None:
            return {}
        if isinstance(v, Mapping):
            return normalized_sequence_values(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: Any) -> str:
        if v is None:
            return "INFO"
        s = str(v).strip().upper()
        level_from_name(s)
        return s

    def working_dir(self) -> Path:
        return resolve_working_path(cwd=self.cwd)

    def config_path(self) -> Optional[Path]:
        return resolve_config_path(self.config, cwd=self.working_dir())

    def public_path(self) -> str:
        return normalize_public_path(self.homepage)


# -----------------------------
# YAML helpers
# -----------------------------
def _load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with p.open("r", encoding="utf-8") as f:
        text = f.read()

    # sanitize BEFORE YAML parse (fix NBSP / BOM / narrow NBSP)
    for ch in ["\u00A0", "\u2007", "\u202F", "\uFEFF"]:
        text = text.replace(ch, " ")

    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/object: {path}")
    return data


def load_defaults() -> Dict[str, Any]:
    """
    Raw defaults shipped inside the vbuild package.
    """
    return _load_yaml(resolve_own_path(DEFAULTS_FILENAME))


def load_options(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> BuildOptions:
    """
    Merge defaults, the optional options file and overrides, then validate.
    """
    logger = get_logger(__name__)

    raw: Dict[str, Any] = dict(load_defaults())
    if path is not None:
        file_data = _load_yaml(path)
        # a relative cwd in the file is relative to the file, not to the process
        file_cwd = file_data.get("cwd")
        if isinstance(file_cwd, str) and file_cwd:
            file_data["cwd"] = str(resolve_working_path(file_cwd, cwd=Path(path).parent))
        raw.update(file_data)
        logger.debug("Loaded options file: %s", path)
    for k, v in (overrides or {}).items():
        if v is not None:
            raw[k] = v

    try:
        options = BuildOptions.model_validate(raw)
    except ValidationError as e:
        logger.error("Invalid vbuild options: %s", e)
        raise
    return options


__all__ = [
    "BuildOptions",
    "DEFAULTS_FILENAME",
    "load_defaults",
    "load_options",
]
