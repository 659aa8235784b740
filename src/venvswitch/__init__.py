"""
python environment switcher.

venvswitch discovers python environments created by plain venv, conda,
micromamba, pyenv and pixi, infers which one the process inherited, matches
requested names against them and activates one by rewriting the process
environment variables.

functions:
    `def get_venvs(venvs_path, environ=None, cwd=None) -> list[Environment]`
        list environments from every manager
    `def best_match(venvs, query) -> Environment | None`
        pick the environment best matching a name

classes:
    `VenvSwitcher` - discovery, selection and activation bound to one state
"""

from __future__ import annotations

__version__ = "0.1.0"

from .activator import Activator
from .api import VenvSwitcher
from .auto import auto_select
from .config import Config
from .core import get_venvs
from .matcher import best_match
from .models import ActivationError, Environment, SourceType
from .resolver import ActiveEnvironmentResolver
from .state import ActivationState

__all__ = [
    "ActivationError",
    "ActivationState",
    "Activator",
    "ActiveEnvironmentResolver",
    "Config",
    "Environment",
    "SourceType",
    "VenvSwitcher",
    "auto_select",
    "best_match",
    "get_venvs",
]
