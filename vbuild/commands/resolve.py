# vbuild/commands/resolve.py
"""
vbuild-resolve — print the resolved build paths as JSON

Intent
- Show what the build step would use: working directory, config file path,
  public path and normalized entry points.
- Useful for debugging option files and CLI flags without running a build.

Usage
    vbuild-resolve --config --homepage https://example.com/app --entry main=src/index.js
    vbuild-resolve --options vbuild.yaml --cwd ./site

Exit codes
- 0: resolved and printed
- 2: invalid options (bad flag value, invalid options file, missing options file)
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from vbuild.utils.config import BuildOptions, load_options
from vbuild.utils.errors import VbuildError
from vbuild.utils.logging import configure_logging_from_options, get_logger
from vbuild.utils.paths import OWN_DIR


def _parse_entries(pairs: List[str]) -> Dict[str, List[str]]:
    """
    ["main=a.js", "main=b.js", "admin=c.js"] -> {"main": ["a.js", "b.js"], "admin": ["c.js"]}
    """
    out: Dict[str, List[str]] = {}
    for pair in pairs:
        name, sep, path = pair.partition("=")
        if not sep or not name.strip() or not path.strip():
            raise VbuildError(f"--entry expects NAME=PATH, got {pair!r}")
        out.setdefault(name.strip(), []).append(path.strip())
    return out


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vbuild-resolve",
        description="Resolve vbuild config path, public path and entry points.",
    )
    parser.add_argument("--cwd", default=None, help="Working directory (default: current directory).")
    parser.add_argument(
        "--config",
        nargs="?",
        const=True,
        default=None,
        help="Config file path; bare flag means vbuild.config.js in the working directory.",
    )
    parser.add_argument("--homepage", default=None, help="Homepage / public URL of the site.")
    parser.add_argument("--entry", action="append", default=[], metavar="NAME=PATH")
    parser.add_argument("--options", default=None, help="YAML options file.")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-file", default=None)
    return parser


def resolve(options: BuildOptions) -> Dict[str, Any]:
    """
    JSON-serializable summary of the resolved options.
    """
    config_path = options.config_path()
    return {
        "cwd": str(options.working_dir()),
        "config_path": str(config_path) if config_path is not None else None,
        "public_path": options.public_path(),
        "entry": options.entry,
        "own_dir": str(OWN_DIR),
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = get_logger(__name__)

    try:
        overrides: Dict[str, Any] = {
            "cwd": args.cwd,
            "config": args.config,
            "homepage": args.homepage,
            "log_level": args.log_level,
        }
        if args.entry:
            overrides["entry"] = _parse_entries(args.entry)

        options = load_options(args.options, overrides=overrides)
        configure_logging_from_options(options, log_file=args.log_file)

        result = resolve(options)
    except (VbuildError, ValidationError, FileNotFoundError, ValueError) as e:
        logger.error("vbuild-resolve failed: %s", e)
        return 2

    logger.debug("Resolved: %s", result)
    sys.stdout.write(json.dumps(result, indent=2, ensure_ascii=False) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())


__all__ = ["build_parser", "resolve", "main"]
