from __future__ import annotations

import subprocess
import sys
from pathlib import Path

TEST_PREFIXES = (
    "engine_test",
    "smoke_test",
    "cli_test",
)


def _run(cmd: list[str]) -> int:
    print(f"Running: {' '.join(cmd)}")
    return subprocess.call(cmd)


def _cleanup_test_artifacts() -> None:
    path = Path("logs")
    if not path.exists():
        return
    for entry in path.iterdir():
        if not entry.is_file():
            continue
        if not any(entry.name.startswith(prefix) for prefix in TEST_PREFIXES):
            continue
        entry.unlink()


def main() -> int:
    cmds = [
        [sys.executable, "-m", "unittest", "discover", "-s", "tests", "-p", "test_*.py"],
        [sys.executable, "ui_app/smoke_test.py"],
    ]
    for cmd in cmds:
        code = _run(cmd)
        _cleanup_test_artifacts()
        if code != 0:
            return code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
