from argparse import Namespace
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from xtbbatch.config import GeneralConfig, PathsConfig, RunConfig
from xtbbatch.config.setup import (
    configure,
    find_program_paths,
    find_rcfile,
    read_rcfile,
    write_rcfile,
)
from xtbbatch.errors import ConfigurationError
from xtbbatch.params import OMP_DEFAULT, RCENV, RCNAME, RunMode


@pytest.fixture(autouse=True)
def mock_find_program_paths():
    """Mock find_program_paths so that no xtb installed on the machine is picked up."""
    with patch("xtbbatch.config.setup.find_program_paths", return_value={}):
        yield


@pytest.fixture
def rcfile(tmp_path: Path) -> Path:
    path = tmp_path / "test.xtbbatchrc"
    path.write_text("[general]\nomp = 8\n\n[paths]\nxtb = /opt/xtb/bin/xtb\n")
    return path


def test_defaults(flat_tree: Path):
    config = configure(flat_tree, "opt")

    assert config.root == flat_tree
    assert config.mode == RunMode.OPT
    assert config.omp == OMP_DEFAULT
    assert config.xtb == ""


def test_rcfile_is_read(flat_tree: Path, rcfile: Path):
    config = configure(flat_tree, RunMode.HESS, rcpath=str(rcfile))

    assert config.omp == 8
    assert config.xtb == "/opt/xtb/bin/xtb"


def test_command_line_overrides_rcfile(flat_tree: Path, rcfile: Path):
    args = Namespace(omp=2, xtb="/usr/local/bin/xtb")
    config = configure(flat_tree, "ohess", rcpath=str(rcfile), args=args)

    assert config.omp == 2
    assert config.xtb == "/usr/local/bin/xtb"


def test_rcfile_in_home(flat_tree: Path, tmp_path: Path):
    (tmp_path / RCNAME).write_text("[general]\nomp = 3\n")

    assert find_rcfile() == tmp_path / RCNAME
    assert configure(flat_tree, "opt").omp == 3


def test_rcfile_from_environment(
    flat_tree: Path, rcfile: Path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setenv(RCENV, str(rcfile))

    assert find_rcfile() == rcfile
    assert configure(flat_tree, "opt").omp == 8


def test_xtb_path_not_filled_from_path(
    flat_tree: Path, mock_xtb: Callable[..., Path], monkeypatch
):
    script = mock_xtb()
    monkeypatch.setenv("PATH", str(script.parent))

    with patch(
        "xtbbatch.config.setup.find_program_paths",
        return_value={"xtb": str(script)},
    ):
        config = configure(flat_tree, "opt")

    # resolved by the runner for every job instead
    assert config.xtb == ""


def test_missing_rcfile(flat_tree: Path, tmp_path: Path):
    with pytest.raises(ConfigurationError, match="No configuration file"):
        configure(flat_tree, "opt", rcpath=str(tmp_path / "missing"))


def test_broken_rcfile(flat_tree: Path, tmp_path: Path):
    broken = tmp_path / "broken"
    broken.write_text("omp = 4\n")

    with pytest.raises(ConfigurationError, match="Could not read"):
        configure(flat_tree, "opt", rcpath=str(broken))


def test_missing_root(tmp_path: Path):
    with pytest.raises(ConfigurationError) as exc:
        configure(tmp_path / "missing", "opt")

    assert exc.value.validation_error is not None


@pytest.mark.parametrize("mode", ["", "optimize", "sp"])
def test_invalid_mode(flat_tree: Path, mode: str):
    with pytest.raises(ConfigurationError):
        configure(flat_tree, mode)


@pytest.mark.parametrize("omp", [0, -4])
def test_invalid_parallelism(flat_tree: Path, omp: int):
    with pytest.raises(ConfigurationError):
        configure(flat_tree, "opt", args=Namespace(omp=omp, xtb=None))


def test_mode_is_case_insensitive(flat_tree: Path):
    assert configure(flat_tree, " HESS ").mode == RunMode.HESS


def test_relative_root_is_resolved(flat_tree: Path):
    config = RunConfig(root=Path(flat_tree.name), mode=RunMode.OPT)

    assert config.root == flat_tree
    assert config.root.is_absolute()


def test_missing_xtb_only_warns(caplog, tmp_path: Path):
    with caplog.at_level("WARNING", logger="xtbbatch.config.paths"):
        paths = PathsConfig(xtb=str(tmp_path / "nothing"))

    assert paths.xtb == str(tmp_path / "nothing")
    assert "xtb executable not found" in caplog.text


def test_write_and_read_rcfile(tmp_path: Path):
    path = tmp_path / "xtbbatchrc_NEW"
    path.write_text("old\n")

    write_rcfile(path)

    assert (tmp_path / "xtbbatchrc_NEW_OLD").read_text() == "old\n"
    settings = read_rcfile(path)
    assert settings["general"]["omp"] == str(GeneralConfig().omp)
    assert settings["paths"]["xtb"] == ""


def test_find_program_paths(mock_xtb: Callable[..., Path], monkeypatch):
    script = mock_xtb()
    monkeypatch.setenv("PATH", str(script.parent))

    # imported before the autouse mock was applied, so this is the real function
    assert find_program_paths() == {"xtb": str(script)}
