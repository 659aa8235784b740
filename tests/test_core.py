"""tests for environment aggregation."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.fixtures.layouts import make_conda_install, make_envs, make_pyenv_root
from venvswitch.core import get_base_path, get_venvs
from venvswitch.models import SourceType


class TestGetBasePath:
    """tests for the get_base_path function."""

    def test_venv_uses_configured_path(self, tmp_path: Path) -> None:
        """test that plain venvs use the configured base directory."""
        assert get_base_path(SourceType.VENV, {}, tmp_path, venvs_path=tmp_path / "v") == tmp_path / "v"
        assert get_base_path(SourceType.VENV, {}, tmp_path) is None

    def test_dispatch(self, tmp_path: Path) -> None:
        """test that each manager resolves through its locator."""
        environ = {
            "CONDA_EXE": "/opt/conda/bin/conda",
            "MAMBA_ROOT_PREFIX": "/opt/mamba",
            "PYENV_ROOT": "/opt/pyenv",
        }
        assert get_base_path(SourceType.CONDA, environ, tmp_path) == Path("/opt/conda/envs")
        assert get_base_path(SourceType.MICROMAMBA, environ, tmp_path) == Path("/opt/mamba/envs")
        assert get_base_path(SourceType.PYENV, environ, tmp_path) == Path("/opt/pyenv/versions")
        assert get_base_path(SourceType.PIXI, environ, tmp_path) is None


class TestGetVenvs:
    """tests for the get_venvs function."""

    def test_nothing_configured(self, tmp_path: Path) -> None:
        """test that absent sources contribute nothing."""
        assert get_venvs(None, environ={}, cwd=tmp_path) == []

    def test_conda_unset(self, tmp_path: Path, venvs_path: Path) -> None:
        """test that without CONDA_EXE there are no conda environments at all."""
        venvs = get_venvs(venvs_path, environ={}, cwd=tmp_path)
        assert not any(v.source is SourceType.CONDA for v in venvs)

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on windows")
    def test_source_order(self, tmp_path: Path, venvs_path: Path) -> None:
        """test that sources are concatenated in listing order."""
        work_dir = tmp_path / "work"
        _ = make_envs(work_dir / ".pixi" / "envs", "default")
        conda_exe = make_conda_install(tmp_path / "conda", "torch")
        _ = make_envs(tmp_path / "mamba" / "envs", "mamba-env")
        pyenv_root = make_pyenv_root(tmp_path / "pyenv")

        environ = {
            "CONDA_EXE": str(conda_exe),
            "MAMBA_ROOT_PREFIX": str(tmp_path / "mamba"),
            "PYENV_ROOT": str(pyenv_root),
        }
        venvs = get_venvs(venvs_path, environ=environ, cwd=work_dir)

        assert [(v.source, v.name) for v in venvs] == [
            (SourceType.VENV, "alpha"),
            (SourceType.VENV, "my_project"),
            (SourceType.PIXI, "default"),
            (SourceType.CONDA, "torch"),
            (SourceType.CONDA, "base"),
            (SourceType.MICROMAMBA, "mamba-env"),
            # directories, including the symlinked version
            (SourceType.PYENV, "3.11.9"),
            (SourceType.PYENV, "3.12.4"),
            (SourceType.PYENV, "system"),
            # every entry, duplicates kept
            (SourceType.PYENV, "3.11.9"),
            (SourceType.PYENV, "3.12.4"),
            (SourceType.PYENV, "marker"),
            (SourceType.PYENV, "system"),
        ]

    def test_conda_base_location(self, tmp_path: Path, conda_exe: Path) -> None:
        """test that the base environment is the install directory itself."""
        venvs = get_venvs(None, environ={"CONDA_EXE": str(conda_exe)}, cwd=tmp_path)
        [base] = [v for v in venvs if v.name == "base"]
        assert base.path == conda_exe.parent.parent

    def test_length_is_sum_of_sources(self, tmp_path: Path, venvs_path: Path, conda_exe: Path) -> None:
        """test that no candidate is dropped or added."""
        venvs = get_venvs(venvs_path, environ={"CONDA_EXE": str(conda_exe)}, cwd=tmp_path)
        # 2 venvs, 2 conda envs, 1 conda base
        assert len(venvs) == 5

    def test_uses_process_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """test that os.environ and the working directory are the defaults."""
        _ = make_envs(tmp_path / "mamba" / "envs", "fromenv")
        _ = make_envs(tmp_path / ".pixi" / "envs", "pixienv")
        monkeypatch.setenv("MAMBA_ROOT_PREFIX", str(tmp_path / "mamba"))
        monkeypatch.chdir(tmp_path)

        venvs = get_venvs(None)

        assert [(v.source, v.name) for v in venvs] == [
            (SourceType.PIXI, "pixienv"),
            (SourceType.MICROMAMBA, "fromenv"),
        ]
