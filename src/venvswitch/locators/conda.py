"""
conda base directory locator.

conda keeps named environments under `<install>/envs`, and the install
directory itself is the implicit `base` environment. the install directory
is two levels above `$CONDA_EXE` (`<install>/bin/conda`).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from ..models import Environment, SourceType


def _conda_install_dir(environ: Mapping[str, str] | None) -> Path | None:
    conda_exe = (environ if environ is not None else os.environ).get("CONDA_EXE")
    if not conda_exe:
        return None
    return Path(conda_exe).parent.parent


def get_conda_base_path(environ: Mapping[str, str] | None = None) -> Path | None:
    """return `<install>/envs`, or none when `CONDA_EXE` is unset."""
    install_dir = _conda_install_dir(environ)
    if install_dir is None:
        return None
    return install_dir.joinpath("envs")


def get_conda_base_env(environ: Mapping[str, str] | None = None) -> list[Environment]:
    """
    return the implicit conda `base` environment.

    the environment is not checked for existence.

    arguments:
        `environ: Mapping[str, str] | None`
            environment variables, defaults to `os.environ`

    returns: `list[Environment]`
        a single `base` environment, or an empty list when `CONDA_EXE` is unset
    """
    install_dir = _conda_install_dir(environ)
    if install_dir is None:
        return []
    return [Environment(name="base", path=install_dir.absolute(), source=SourceType.CONDA)]
