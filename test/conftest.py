import os
import shutil
from pathlib import Path

import pytest

from xtbbatch.logging import set_filehandler, set_loglevel
from xtbbatch.params import RCENV


@pytest.fixture(autouse=True)
def tmp_wd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, request):
    orig = os.getcwd()
    if request.config.getoption("--keep-log"):
        set_filehandler(Path(orig) / "xtbbatch.log")
    set_loglevel("DEBUG")
    monkeypatch.chdir(tmp_path)
    # keep user configuration files out of the tests
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv(RCENV, raising=False)
    yield
    os.chdir(orig)
    # Clean up temporary directory
    for item in tmp_path.iterdir():
        if item.is_dir():
            shutil.rmtree(item)
        else:
            item.unlink()


def pytest_addoption(parser):
    parser.addoption(
        "--keep-log",
        action="store_true",
        default=False,
        help="keep the log file during test execution",
    )
