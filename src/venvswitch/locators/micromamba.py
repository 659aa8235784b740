"""
micromamba base directory locator.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path


def get_micromamba_base_path(environ: Mapping[str, str] | None = None) -> Path | None:
    """return `$MAMBA_ROOT_PREFIX/envs`, or none when the variable is unset."""
    root_prefix = (environ if environ is not None else os.environ).get("MAMBA_ROOT_PREFIX")
    if not root_prefix:
        return None
    return Path(root_prefix).joinpath("envs")
