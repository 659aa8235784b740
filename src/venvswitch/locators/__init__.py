"""
base directory locators for the supported environment managers.
"""

from __future__ import annotations

from .conda import get_conda_base_env, get_conda_base_path
from .micromamba import get_micromamba_base_path
from .pixi import get_pixi_base_path
from .pyenv import get_pyenv_base_path

__all__ = [
    "get_conda_base_env",
    "get_conda_base_path",
    "get_micromamba_base_path",
    "get_pixi_base_path",
    "get_pyenv_base_path",
]
