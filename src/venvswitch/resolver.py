"""
inference of the environment active at process start.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .models import Environment, SourceType
from .state import ActivationState

logger = logging.getLogger(__name__)


def has_high_priority_in_path(search_path: str, first: str | None, second: str | None) -> bool:
    """
    check whether `first` occurs before `second` in a `PATH` string.

    values are searched for literally. a value that is unset or absent from
    `search_path` has the lowest priority.

    arguments:
        `search_path: str`
            the `PATH` string to search
        `first: str | None`
            value expected to come first
        `second: str | None`
            value to compare against

    returns: `bool`
        true if `first` should win over `second`
    """
    if not first:
        return False
    if not second:
        return True

    first_at = search_path.find(first)
    if first_at < 0:
        return False
    second_at = search_path.find(second)
    if second_at < 0:
        return True

    return first_at < second_at


def _make_relative(path: Path, base: str | Path | None) -> str:
    if base:
        try:
            return str(path.relative_to(Path(base).expanduser()))
        except ValueError:
            pass
    return str(path)


class ActiveEnvironmentResolver:
    """
    decides which environment the process inherited.

    `VIRTUAL_ENV` names a plain venv. `CONDA_DEFAULT_ENV` with `CONDA_PREFIX`
    names a conda environment, and only wins over a plain venv when it shows
    up earlier in the original `PATH`, i.e. it was activated more recently.

    a `CONDA_DEFAULT_ENV` without `CONDA_PREFIX` is ignored, even when no
    `VIRTUAL_ENV` is set, because it gives no environment path.

    attributes:
        `state: ActivationState`
            state to read variables from and seed
        `venvs_path: str | Path | None`
            base directory used to name plain venvs
    """

    def __init__(self, state: ActivationState, venvs_path: str | Path | None = None) -> None:
        self.state: ActivationState = state
        self.venvs_path: str | Path | None = venvs_path

    def detect(self) -> Environment | None:
        """return the inherited environment without touching the state."""
        environ = self.state.environ
        venv: Environment | None = None

        venv_env = environ.get("VIRTUAL_ENV") or None
        if venv_env is not None:
            venv_path = Path(venv_env)
            venv = Environment(
                name=_make_relative(venv_path, self.venvs_path),
                path=venv_path,
                source=SourceType.VENV,
            )

        conda_env = environ.get("CONDA_DEFAULT_ENV") or None
        conda_prefix = environ.get("CONDA_PREFIX") or None
        if conda_env is not None:
            if conda_prefix is None:
                logger.debug("ignoring CONDA_DEFAULT_ENV=%s without CONDA_PREFIX", conda_env)
            elif has_high_priority_in_path(self.state.original_path, conda_env, venv_env):
                venv = Environment(name=conda_env, path=Path(conda_prefix), source=SourceType.CONDA)

        return venv

    def resolve(self) -> Environment | None:
        """
        seed the state with the inherited environment.

        the state is left untouched when nothing is active.

        returns: `Environment | None`
            the inherited environment
        """
        venv = self.detect()
        if venv is not None:
            logger.debug("inherited active environment %s", venv)
            self.state.set(venv)
        return venv
