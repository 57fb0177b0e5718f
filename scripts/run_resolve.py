# scripts/run_resolve.py
"""
Manual runner — vbuild-resolve from a source checkout

Usage:
    python scripts/run_resolve.py --config --homepage https://example.com/app
"""

from __future__ import annotations

import sys
from pathlib import Path

# ---------------------------------------------------------------------
# Ensure repo root is on PYTHONPATH so `import vbuild.*` works
# ---------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from vbuild.commands.resolve import main as resolve_main
from vbuild.utils.logging import get_logger


def main() -> int:
    logger = get_logger(__name__)
    logger.info("Repo root: %s", REPO_ROOT)
    logger.info("Working directory: %s", Path.cwd())
    return resolve_main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
