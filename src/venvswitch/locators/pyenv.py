"""
pyenv base directory locator.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path


def get_pyenv_base_path(environ: Mapping[str, str] | None = None) -> Path | None:
    """
    locate installed pyenv versions.

    unlike pyenv itself, no `~/.pyenv` fallback is assumed: pyenv versions are
    only listed when `PYENV_ROOT` is exported.

    arguments:
        `environ: Mapping[str, str] | None`
            environment variables, defaults to `os.environ`

    returns: `Path | None`
        `$PYENV_ROOT/versions`, or none when the variable is unset
    """
    pyenv_root = (environ if environ is not None else os.environ).get("PYENV_ROOT")
    if not pyenv_root:
        return None
    return Path(pyenv_root).joinpath("versions")
