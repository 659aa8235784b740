"""
conftest for venvswitch tests.
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest import mock

import pytest

from tests.fixtures.layouts import make_conda_install, make_envs
from venvswitch.state import ActivationState

MANAGER_VARIABLES = (
    "VIRTUAL_ENV",
    "CONDA_DEFAULT_ENV",
    "CONDA_PREFIX",
    "CONDA_EXE",
    "CONDA_PROMPT_MODIFIER",
    "MAMBA_ROOT_PREFIX",
    "PYENV_ROOT",
    "VENVSWITCH_VENVS_PATH",
    "VENVSWITCH_LOCAL_VENV_DIR",
    "VENVSWITCH_AUTO_CREATE",
)


@pytest.fixture(autouse=True)
def clear_manager_variables(tmp_path: Path):
    """clear manager variables to avoid detecting the test runner's environment."""
    with mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path / "xdg-config")}, clear=False):
        for key in MANAGER_VARIABLES:
            _ = os.environ.pop(key, None)
        yield


@pytest.fixture
def venvs_path(tmp_path: Path) -> Path:
    """create a venvs base directory with two environments."""
    base = tmp_path / "venvs"
    _ = make_envs(base, "alpha", "my_project")
    return base


@pytest.fixture
def conda_exe(tmp_path: Path) -> Path:
    """create a conda install with two named environments."""
    return make_conda_install(tmp_path / "miniconda3", "data-science", "torch")


@pytest.fixture
def environ() -> dict[str, str]:
    """a private variable table with a plain PATH."""
    return {"PATH": "/usr/local/bin:/usr/bin:/bin"}


@pytest.fixture
def state(environ: dict[str, str]) -> ActivationState:
    """an activation state writing to the private variable table."""
    return ActivationState(environ=environ, is_windows=False)
