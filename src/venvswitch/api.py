"""
high-level api for venvswitch.

`VenvSwitcher` owns one `ActivationState` and wires discovery, matching,
startup inference, activation and project auto-selection to a `Config`.

usage:
    ```python
    from venvswitch import Config, VenvSwitcher

    switcher = VenvSwitcher(Config(venvs_path="~/.venvs"))
    switcher.init()
    switcher.set_venv("my-project")
    print(switcher.get_current_venv())
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from .activator import Activator
from .auto import auto_select
from .config import Config
from .core import get_venvs
from .matcher import best_match
from .models import Environment, SourceType
from .project import read_venv_name_common_dir, read_venv_name_in_project
from .resolver import ActiveEnvironmentResolver
from .state import ActivationState

logger = logging.getLogger(__name__)


class VenvSwitcher:
    """
    discovers, selects and activates environments.

    attributes:
        `config: Config`
            settings and callbacks
        `state: ActivationState`
            current environment and variable table
    """

    def __init__(
        self,
        config: Config | None = None,
        state: ActivationState | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.config: Config = config if config is not None else Config()
        self.state: ActivationState = state if state is not None else ActivationState()
        self.cwd: Path | None = Path(cwd) if cwd is not None else None
        self._activator: Activator = Activator(self.state, self.config.post_set_venv)

    def init(self) -> Environment | None:
        """seed the current environment from inherited variables."""
        return ActiveEnvironmentResolver(self.state, self.config.venvs_path).resolve()

    def get_current_venv(self) -> Environment | None:
        """return the current environment, if any."""
        return self.state.get()

    def get_venvs(self) -> list[Environment]:
        """list environments, through the configured override if there is one."""
        if self.config.get_venvs is not None:
            return self.config.get_venvs(self.config.venvs_path)

        environ: Mapping[str, str] = self.state.environ
        return get_venvs(self.config.venvs_path, environ=environ, cwd=self.cwd)

    def set_venv_path(self, venv: Environment) -> dict[str, str]:
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
        return self._activator.activate(venv)

    def set_venv(self, name: str) -> Environment | None:
        """
        activate the environment best matching a name.

        arguments:
            `name: str`
                requested environment name

        returns: `Environment | None`
            the activated environment, or none if nothing matched
        """
        venv = best_match(self.get_venvs(), name)
        if venv is None:
            return None
        _ = self.set_venv_path(venv)
        return venv

    def auto_venv(self, project_root: str | Path | None) -> Environment | None:
        """
        activate the environment a project declares.

        with `auto_create_venv` enabled, the create collaborator is used
        instead and its environment is activated.

        arguments:
            `project_root: str | Path | None`
                project root, none when the host could not determine one

        returns: `Environment | None`
            the activated environment
        """
        if project_root is None:
            return None

        if self.config.auto_create_venv:
            return self._auto_create(Path(project_root))

        return auto_select(
            project_root,
            in_project_name=read_venv_name_in_project(project_root, self.config.local_venv_dir),
            common_dir_name=lambda: read_venv_name_common_dir(project_root),
            venvs=self.get_venvs,
            activate=self.set_venv_path,
            local_venv_dir=self.config.local_venv_dir,
        )

    def _auto_create(self, project_root: Path) -> Environment | None:
        if self.config.create_venv is None:
            logger.warning("auto_create_venv is enabled but no create_venv callback is configured")
            return None

        created = self.config.create_venv(project_root)
        if created is None:
            return None

        name, path = created
        venv = Environment(name=name, path=Path(path), source=SourceType.VENV)
        _ = self.set_venv_path(venv)
        return venv
