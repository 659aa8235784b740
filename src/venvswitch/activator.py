"""
environment activation.

activation writes the manager's identity variables, puts the environment's
binary directory in front of the original `PATH`, records the environment as
current and finally runs the post-activation hook. a failing hook propagates
and leaves the variables written.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Final

from .models import ActivationError, Environment, SourceType
from .state import ActivationState

logger = logging.getLogger(__name__)

PostSetVenvHook = Callable[[Environment], object]


def _conda_variables(venv: Environment) -> dict[str, str]:
    return {
        "CONDA_PREFIX": str(venv.path),
        "CONDA_DEFAULT_ENV": venv.name,
        "CONDA_PROMPT_MODIFIER": f"({venv.name})",
    }


def _venv_variables(venv: Environment) -> dict[str, str]:
    return {"VIRTUAL_ENV": str(venv.path)}


IDENTITY_VARIABLES: Final[dict[SourceType, Callable[[Environment], dict[str, str]]]] = {
    SourceType.VENV: _venv_variables,
    SourceType.PIXI: _venv_variables,
    SourceType.CONDA: _conda_variables,
    SourceType.MICROMAMBA: _conda_variables,
    SourceType.PYENV: _venv_variables,
}


def binary_subdir(is_windows: bool) -> str:
    """return the environment subdirectory holding executables."""
    return "Scripts" if is_windows else "bin"


def path_separator(is_windows: bool) -> str:
    """return the `PATH` list separator."""
    return ";" if is_windows else ":"


def build_path(venv_path: str | Path, original_path: str, is_windows: bool) -> str:
    """
    prefix `original_path` with the binary directory of an environment.

    arguments:
        `venv_path: str | Path`
            environment prefix directory
        `original_path: str`
            `PATH` value to extend
        `is_windows: bool`
            use windows conventions

    returns: `str`
        the new `PATH` value
    """
    bin_dir = str(Path(venv_path).joinpath(binary_subdir(is_windows)))
    if not original_path:
        return bin_dir
    return bin_dir + path_separator(is_windows) + original_path


class Activator:
    """
    applies environments to an `ActivationState`.

    attributes:
        `state: ActivationState`
            state to write to
        `post_set_venv: PostSetVenvHook | None`
            called with the environment once everything is written
    """

    def __init__(
        self,
        state: ActivationState,
        post_set_venv: PostSetVenvHook | None = None,
    ) -> None:
        self.state: ActivationState = state
        self.post_set_venv: PostSetVenvHook | None = post_set_venv

    def activate(self, venv: Environment) -> dict[str, str]:
        """
        activate an environment.

        arguments:
            `venv: Environment`
                environment to activate

        raises:
            `ActivationError`
                the environment has an empty or relative path

        returns: `dict[str, str]`
            the variables written
        """
        if not venv.path.parts:
            raise ActivationError(f"cannot activate {venv.name!r}: empty path")
        if not venv.path.is_absolute():
            raise ActivationError(f"cannot activate {venv.name!r}: path must be absolute, got {venv.path}")

        logger.debug("activating %s", venv)

        variables = IDENTITY_VARIABLES[venv.source](venv)
        variables["PATH"] = build_path(venv.path, self.state.original_path, self.state.is_windows)

        for key, value in variables.items():
            self.state.environ[key] = value

        self.state.written = variables
        self.state.set(venv)

        if self.post_set_venv is not None:
            _ = self.post_set_venv(venv)

        return dict(variables)
