"""
shallow directory scanning for environment discovery.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .models import Environment, SourceType

logger = logging.getLogger(__name__)


def scan_dir(base_path: str | Path | None, only_dirs: bool = True, hidden: bool = False) -> list[Path]:
    """
    list the immediate children of a directory.

    a missing or unreadable base directory yields an empty list. entries that
    cannot be inspected are skipped.

    arguments:
        `base_path: str | Path | None`
            directory to scan
        `only_dirs: bool`
            only return directories (symlinks to directories count)
        `hidden: bool`
            include dot-prefixed entries

    returns: `list[Path]`
        absolute paths of the children, sorted by name
    """
    if not base_path:
        return []

    base = Path(base_path).absolute()
    paths: list[Path] = []

    try:
        with os.scandir(base) as entries:
            for entry in entries:
                if not hidden and entry.name.startswith("."):
                    continue
                try:
                    if only_dirs and not entry.is_dir():
                        continue
                except OSError as e:
                    logger.debug("skipping unreadable entry %s: %s", entry.path, e)
                    continue
                paths.append(base.joinpath(entry.name))
    except OSError as e:
        logger.debug("cannot scan %s: %s", base, e)
        return []

    return sorted(paths, key=lambda p: p.name)


def get_venvs_for(
    base_path: str | Path | None,
    source: SourceType,
    only_dirs: bool = True,
) -> list[Environment]:
    """
    build environments for every child of a manager's base directory.

    arguments:
        `base_path: str | Path | None`
            the manager's base directory, or none when it has none
        `source: SourceType`
            manager the environments belong to
        `only_dirs: bool`
            passed through to `scan_dir`

    returns: `list[Environment]`
        one environment per child, named relative to `base_path`
    """
    if not base_path:
        return []

    base = Path(base_path).absolute()
    venvs = [
        Environment(name=str(path.relative_to(base)), path=path, source=source)
        for path in scan_dir(base, only_dirs=only_dirs)
    ]
    logger.debug("found %d %s environment(s) in %s", len(venvs), source.value, base)
    return venvs
