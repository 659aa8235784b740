"""
automatic environment selection for a project.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from .matcher import best_match
from .models import Environment, SourceType
from .project import DEFAULT_LOCAL_VENV_DIR, get_local_venv_path

logger = logging.getLogger(__name__)


def auto_select(
    project_root: str | Path,
    in_project_name: str | None,
    common_dir_name: Callable[[], str | None],
    venvs: Callable[[], Sequence[Environment]],
    activate: Callable[[Environment], object],
    local_venv_dir: str = DEFAULT_LOCAL_VENV_DIR,
) -> Environment | None:
    """
    select and activate the environment a project declares.

    an in-project declaration wins and is activated without checking that the
    local directory exists. otherwise a common-ancestor declaration is matched
    against the discovered environments. the later steps are only looked up
    when the earlier ones yield nothing. when neither yields an environment
    nothing happens.

    arguments:
        `project_root: str | Path`
            project root directory
        `in_project_name: str | None`
            name declared for the in-project environment
        `common_dir_name: Callable[[], str | None]`
            reads the name declared by the project or an ancestor
        `venvs: Callable[[], Sequence[Environment]]`
            lists the discovered environments
        `activate: Callable[[Environment], object]`
            activation callback
        `local_venv_dir: str`
            name of the in-project environment directory

    returns: `Environment | None`
        the activated environment
    """
    if in_project_name:
        venv = Environment(
            name=in_project_name,
            path=get_local_venv_path(project_root, local_venv_dir),
            source=SourceType.VENV,
        )
        logger.debug("using in-project environment %s", venv)
        _ = activate(venv)
        return venv

    declared = common_dir_name()
    if declared:
        venv = best_match(venvs(), declared)
        if venv is not None:
            logger.debug("using declared environment %s", venv)
            _ = activate(venv)
            return venv
        logger.debug("declared environment %r not found", declared)

    return None
