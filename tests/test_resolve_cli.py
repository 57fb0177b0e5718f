# tests/test_resolve_cli.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vbuild.commands.resolve import _parse_entries, main
from vbuild.utils.errors import VbuildError
from vbuild.utils.paths import OWN_DIR


def _run(capsys, argv):
    rc = main(argv)
    out = capsys.readouterr().out
    return rc, (json.loads(out) if out.strip() else None)


def test_defaults(capsys, tmp_path: Path):
    rc, out = _run(capsys, ["--cwd", str(tmp_path)])
    assert rc == 0
    assert out == {
        "cwd": str(tmp_path),
        "config_path": None,
        "public_path": "/",
        "entry": {},
        "own_dir": str(OWN_DIR),
    }


def test_bare_config_flag_uses_default_file(capsys, tmp_path: Path):
    rc, out = _run(capsys, ["--cwd", str(tmp_path), "--config"])
    assert rc == 0
    assert out["config_path"] == str(tmp_path / "vbuild.config.js")


def test_config_path_homepage_and_entries(capsys, tmp_path: Path):
    rc, out = _run(
        capsys,
        [
            "--cwd", str(tmp_path),
            "--config", "build/custom.js",
            "--homepage", "https://example.com/app",
            "--entry", "main=src/a.js",
            "--entry", "main=src/b.js",
            "--entry", "admin=src/admin.js",
        ],
    )
    assert rc == 0
    assert out["config_path"] == str(tmp_path / "build" / "custom.js")
    assert out["public_path"] == "https://example.com/app/"
    assert out["entry"] == {"main": ["src/a.js", "src/b.js"], "admin": ["src/admin.js"]}


def test_options_file(capsys, tmp_path: Path):
    opts = tmp_path / "vbuild.yaml"
    opts.write_text("homepage: /docs\nentry:\n  main: index.js\n", encoding="utf-8")
    rc, out = _run(capsys, ["--cwd", str(tmp_path), "--options", str(opts)])
    assert rc == 0
    assert out["public_path"] == "/docs/"
    assert out["entry"] == {"main": ["index.js"]}


def test_missing_options_file_returns_2(capsys, tmp_path: Path):
    rc, out = _run(capsys, ["--options", str(tmp_path / "missing.yaml")])
    assert rc == 2
    assert out is None


def test_bad_entry_returns_2(capsys):
    rc, out = _run(capsys, ["--entry", "no-equals-sign"])
    assert rc == 2
    assert out is None


def test_bad_log_level_returns_2(capsys):
    rc, _ = _run(capsys, ["--log-level", "LOUD"])
    assert rc == 2


def test_parse_entries_rejects_empty_parts():
    with pytest.raises(VbuildError):
        _parse_entries(["=a.js"])
    with pytest.raises(VbuildError):
        _parse_entries(["main="])
