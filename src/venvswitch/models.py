"""
models for venvswitch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import final

from typing_extensions import override


class SourceType(Enum):
    """
    enumeration of supported environment managers.

    attributes:
        `VENV: str`
            plain venvs kept under a configured base directory
        `PIXI: str`
            pixi environments under `.pixi/envs` of the working directory
        `CONDA: str`
            conda environments, including the implicit base environment
        `MICROMAMBA: str`
            micromamba environments under `$MAMBA_ROOT_PREFIX/envs`
        `PYENV: str`
            pyenv versions under `$PYENV_ROOT/versions`
    """

    VENV = "venv"
    PIXI = "pixi"
    CONDA = "conda"
    MICROMAMBA = "micromamba"
    PYENV = "pyenv"


@final
@dataclass(frozen=True)
class Environment:
    """
    a discovered (or externally constructed) python environment.

    attributes:
        `name: str`
            display name, relative to the source's base directory
        `path: Path`
            environment prefix directory
        `source: SourceType`
            manager that owns the environment
    """

    name: str
    path: Path
    source: SourceType = SourceType.VENV

    def __post_init__(self) -> None:
        """ensure path is a path object."""
        if isinstance(self.path, str):
            object.__setattr__(self, "path", Path(self.path))

    @override
    def __str__(self) -> str:
        return f"{self.name} ({self.path}) [{self.source.value}]"

    def to_dict(self) -> dict[str, str]:
        """convert to a json-friendly dictionary."""
        return {
            "name": self.name,
            "path": str(self.path),
            "source": self.source.value,
        }


class ActivationError(ValueError):
    """raised when an environment cannot be activated."""
