"""
pixi base directory locator.
"""

from __future__ import annotations

import os
from pathlib import Path


def get_pixi_base_path(cwd: str | Path | None = None) -> Path | None:
    """
    locate pixi environments of the working directory.

    arguments:
        `cwd: str | Path | None`
            working directory, defaults to the process working directory

    returns: `Path | None`
        `<cwd>/.pixi/envs` if `<cwd>/.pixi` exists, none otherwise
    """
    pixi_root = Path(cwd if cwd is not None else os.getcwd()).joinpath(".pixi")
    if not pixi_root.exists():
        return None
    return pixi_root.joinpath("envs")
