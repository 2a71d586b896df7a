import stat
from collections.abc import Callable
from pathlib import Path

import pytest

XYZ = """3
water
O    0.000000    0.000000    0.117300
H    0.000000    0.757200   -0.469200
H    0.000000   -0.757200   -0.469200
"""

# stands in for xtb: reports working directory and arguments, exits with the
# configured code or 1 if any argument contains 'fail_on'
MOCK_XTB = """#!/bin/sh
echo "cwd: $(pwd)"
echo "args: $*"
echo "normal termination of xtb" >&2
{fail_check}
exit {returncode}
"""


@pytest.fixture
def mock_xtb(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an executable mock xtb script into '<tmp>/bin/xtb'."""

    def make(returncode: int = 0, fail_on: str | None = None) -> Path:
        bindir = tmp_path / "bin"
        bindir.mkdir(exist_ok=True)
        script = bindir / "xtb"
        fail_check = f'case "$*" in *{fail_on}*) exit 1;; esac' if fail_on else ""
        script.write_text(
            MOCK_XTB.format(returncode=returncode, fail_check=fail_check)
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return make


@pytest.fixture
def input_tree(tmp_path: Path) -> Path:
    """
    Root folder with:
        a.xyz
        b.xyz
        xtbopt.xyz
        notes.txt
        sub/c.xyz
        sub/deeper/xtbopt.xyz
    """
    root = tmp_path / "structures"
    (root / "sub" / "deeper").mkdir(parents=True)
    for rel in ("a.xyz", "b.xyz", "xtbopt.xyz", "sub/c.xyz", "sub/deeper/xtbopt.xyz"):
        (root / rel).write_text(XYZ)
    (root / "notes.txt").write_text("not a structure\n")
    return root.resolve()


@pytest.fixture
def flat_tree(tmp_path: Path) -> Path:
    """Root folder with a.xyz, b.xyz and xtbopt.xyz only."""
    root = tmp_path / "flat"
    root.mkdir()
    for name in ("a.xyz", "b.xyz", "xtbopt.xyz"):
        (root / name).write_text(XYZ)
    return root.resolve()
