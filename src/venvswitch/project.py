"""
declared environment names of a project.

a project can declare its environment in two ways:

- in-project: a local environment directory (`.venv` by default) lives in
  the project root. its name is the `prompt` from `pyvenv.cfg`, falling back
  to the project directory's name.
- common-ancestor: the project, or one of its parent directories, names an
  environment kept elsewhere, either in a plain-text `.venv` file or as
  `[tool.venvswitch] venv = "..."` in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LOCAL_VENV_DIR = ".venv"
VENV_NAME_FILE = ".venv"


def get_local_venv_path(project_root: str | Path, local_venv_dir: str = DEFAULT_LOCAL_VENV_DIR) -> Path:
    """return the conventional in-project environment directory."""
    return Path(project_root).absolute().joinpath(local_venv_dir)


def _read_prompt(pyvenv_cfg: Path) -> str | None:
    try:
        lines = pyvenv_cfg.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        logger.debug("cannot read %s: %s", pyvenv_cfg, e)
        return None

    for line in lines:
        key, sep, value = line.partition("=")
        if sep and key.strip() == "prompt":
            prompt = value.strip().strip("'\"")
            if prompt:
                return prompt
    return None


def read_venv_name_in_project(
    project_root: str | Path,
    local_venv_dir: str = DEFAULT_LOCAL_VENV_DIR,
) -> str | None:
    """
    read the name of the project's in-project environment.

    arguments:
        `project_root: str | Path`
            project root directory
        `local_venv_dir: str`
            name of the in-project environment directory

    returns: `str | None`
        the declared name, or none if the project has no local environment
    """
    project_path = Path(project_root).absolute()
    venv_dir = project_path.joinpath(local_venv_dir)
    if not venv_dir.is_dir():
        return None

    if prompt := _read_prompt(venv_dir.joinpath("pyvenv.cfg")):
        return prompt
    return project_path.name


def _read_name_file(name_file: Path) -> str | None:
    try:
        text = name_file.read_text(encoding="utf-8")
    except OSError as e:
        logger.debug("cannot read %s: %s", name_file, e)
        return None

    for line in text.splitlines():
        if name := line.strip():
            return name
    return None


def _read_pyproject_name(pyproject: Path) -> str | None:
    try:
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("ignoring unreadable %s: %s", pyproject, e)
        return None

    name = data.get("tool", {}).get("venvswitch", {}).get("venv")  # pyright: ignore[reportAny]
    if isinstance(name, str) and name.strip():
        return name.strip()
    return None


def read_venv_name_common_dir(project_root: str | Path) -> str | None:
    """
    read an environment name declared by the project or an ancestor.

    the project root is checked first, then each parent directory. in each
    directory a `.venv` file takes precedence over `pyproject.toml`.

    arguments:
        `project_root: str | Path`
            project root directory

    returns: `str | None`
        the declared name, or none if no directory declares one
    """
    project_path = Path(project_root).absolute()

    for directory in (project_path, *project_path.parents):
        name_file = directory.joinpath(VENV_NAME_FILE)
        if name_file.is_file() and (name := _read_name_file(name_file)):
            logger.debug("found declared environment %r in %s", name, name_file)
            return name

        pyproject = directory.joinpath("pyproject.toml")
        if pyproject.is_file() and (name := _read_pyproject_name(pyproject)):
            logger.debug("found declared environment %r in %s", name, pyproject)
            return name

    return None
