"""
environment discovery across all supported managers.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

from .locators import (
    get_conda_base_env,
    get_conda_base_path,
    get_micromamba_base_path,
    get_pixi_base_path,
    get_pyenv_base_path,
)
from .models import Environment, SourceType
from .scanner import get_venvs_for

logger = logging.getLogger(__name__)

# map managers to their base directory locators.
# plain venvs are absent: their base directory comes from configuration
BASE_PATH_LOCATORS: Final[dict[SourceType, Callable[[Mapping[str, str], Path], Path | None]]] = {
    SourceType.PIXI: lambda environ, cwd: get_pixi_base_path(cwd),
    SourceType.CONDA: lambda environ, cwd: get_conda_base_path(environ),
    SourceType.MICROMAMBA: lambda environ, cwd: get_micromamba_base_path(environ),
    SourceType.PYENV: lambda environ, cwd: get_pyenv_base_path(environ),
}


def get_base_path(
    source: SourceType,
    environ: Mapping[str, str] | None = None,
    cwd: str | Path | None = None,
    venvs_path: str | Path | None = None,
) -> Path | None:
    """
    return the base directory of one manager, or none if it has none.

    arguments:
        `source: SourceType`
            manager to locate
        `environ: Mapping[str, str] | None`
            environment variables, defaults to `os.environ`
        `cwd: str | Path | None`
            working directory, defaults to the process working directory
        `venvs_path: str | Path | None`
            configured base directory, only used for `SourceType.VENV`

    returns: `Path | None`
        the base directory
    """
    if source is SourceType.VENV:
        return Path(venvs_path) if venvs_path else None

    locate = BASE_PATH_LOCATORS[source]
    return locate(
        environ if environ is not None else os.environ,
        Path(cwd) if cwd is not None else Path.cwd(),
    )


def get_venvs(
    venvs_path: str | Path | None,
    environ: Mapping[str, str] | None = None,
    cwd: str | Path | None = None,
) -> list[Environment]:
    """
    list environments from every manager.

    the order is venv, pixi, conda, conda base, micromamba, pyenv directories,
    then every pyenv entry. duplicates between the two pyenv listings are kept.
    managers without a base directory contribute nothing.

    arguments:
        `venvs_path: str | Path | None`
            base directory of plain venvs
        `environ: Mapping[str, str] | None`
            environment variables, defaults to `os.environ`
        `cwd: str | Path | None`
            working directory, defaults to the process working directory

    returns: `list[Environment]`
        every discovered environment
    """
    env_vars: Mapping[str, str] = environ if environ is not None else os.environ
    work_dir = Path(cwd) if cwd is not None else Path.cwd()

    def base(source: SourceType) -> Path | None:
        return get_base_path(source, env_vars, work_dir, venvs_path)

    venvs: list[Environment] = []
    venvs.extend(get_venvs_for(base(SourceType.VENV), SourceType.VENV))
    venvs.extend(get_venvs_for(base(SourceType.PIXI), SourceType.PIXI))
    venvs.extend(get_venvs_for(base(SourceType.CONDA), SourceType.CONDA))
    venvs.extend(get_conda_base_env(env_vars))
    venvs.extend(get_venvs_for(base(SourceType.MICROMAMBA), SourceType.MICROMAMBA))
    venvs.extend(get_venvs_for(base(SourceType.PYENV), SourceType.PYENV))
    # pyenv versions may be symlinks or marker files, so list everything too
    venvs.extend(get_venvs_for(base(SourceType.PYENV), SourceType.PYENV, only_dirs=False))

    logger.debug("discovered %d environment(s)", len(venvs))
    return venvs
