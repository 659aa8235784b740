"""
configuration loading for venvswitch.

settings are read from the user config file, the project's
`.venvswitch.toml` and environment variables. callbacks (the post-activation
hook, the listing override and the create collaborator) can only be set
from python.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .models import Environment
from .project import DEFAULT_LOCAL_VENV_DIR

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = ".venvswitch.toml"


def default_venvs_path() -> Path:
    """return `~/.venvs`."""
    return Path("~/.venvs").expanduser()


def user_config_path() -> Path:
    """return the user config file, honouring `XDG_CONFIG_HOME`."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or Path("~/.config").expanduser()
    return Path(config_home).joinpath("venvswitch", "config.toml")


@dataclass
class Config:
    """
    main configuration class for venvswitch.

    attributes:
        `venvs_path: Path | None`
            base directory of plain venvs, none disables them
        `local_venv_dir: str`
            name of the in-project environment directory
        `auto_create_venv: bool`
            create project environments instead of selecting existing ones
        `post_set_venv: Callable[[Environment], object] | None`
            called after every activation
        `get_venvs: Callable[[Path | None], list[Environment]] | None`
            replaces the built-in environment listing
        `create_venv: Callable[[Path], tuple[str, Path] | None] | None`
            creates an environment for a project root, returning its name and
            path
    """

    venvs_path: Path | None = field(default_factory=default_venvs_path)
    local_venv_dir: str = DEFAULT_LOCAL_VENV_DIR
    auto_create_venv: bool = False
    post_set_venv: Callable[[Environment], object] | None = None
    get_venvs: Callable[[Path | None], list[Environment]] | None = None
    create_venv: Callable[[Path], tuple[str, Path] | None] | None = None

    def __post_init__(self) -> None:
        """ensure venvs_path is a path object."""
        if isinstance(self.venvs_path, str):
            self.venvs_path = Path(self.venvs_path).expanduser() if self.venvs_path else None

    @classmethod
    def from_toml_file(cls, config_file: str | Path) -> Config | None:
        """
        load configuration from a toml file.

        an unreadable or malformed file is logged and ignored.

        arguments:
            `config_file: str | Path`
                path to the toml file

        returns: `Config | None`
            configuration object if the file exists and parses, none otherwise
        """
        config_path = Path(config_file)
        if not config_path.is_file():
            return None

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("ignoring unreadable config file %s: %s", config_path, e)
            return None

        return cls._from_dict(data)

    @classmethod
    def from_environment(cls) -> dict[str, Any]:
        """
        read configuration overrides from environment variables.

        returns: `dict[str, Any]`
            the overridden settings only
        """
        overrides: dict[str, Any] = {}

        if venvs_path := os.environ.get("VENVSWITCH_VENVS_PATH"):
            overrides["venvs_path"] = Path(venvs_path).expanduser()

        if local_venv_dir := os.environ.get("VENVSWITCH_LOCAL_VENV_DIR"):
            overrides["local_venv_dir"] = local_venv_dir

        if auto_create := os.environ.get("VENVSWITCH_AUTO_CREATE"):
            overrides["auto_create_venv"] = auto_create.lower() in ("true", "1", "yes")

        return overrides

    @classmethod
    def load(cls, project_root: str | Path = ".") -> Config:
        """
        load configuration from all available sources.

        sources are loaded in order of priority (later overrides earlier):
        1. default values
        2. user config file
        3. .venvswitch.toml in the project root
        4. environment variables

        arguments:
            `project_root: str | Path`
                project root directory

        returns: `Config`
            merged configuration from all sources
        """
        config = cls()

        for config_file in (user_config_path(), Path(project_root).joinpath(PROJECT_CONFIG_FILE)):
            if file_config := cls.from_toml_file(config_file):
                config = config.merge(file_config)

        for key, value in cls.from_environment().items():
            setattr(config, key, value)

        return config

    def merge(self, other: Config) -> Config:
        """
        merge another configuration into this one.

        values of `other` that differ from the defaults take precedence.

        arguments:
            `other: Config`
                configuration to merge

        returns: `Config`
            new merged configuration
        """
        defaults = Config()
        return Config(
            venvs_path=other.venvs_path if other.venvs_path != defaults.venvs_path else self.venvs_path,
            local_venv_dir=other.local_venv_dir
            if other.local_venv_dir != defaults.local_venv_dir
            else self.local_venv_dir,
            auto_create_venv=other.auto_create_venv or self.auto_create_venv,
            post_set_venv=other.post_set_venv or self.post_set_venv,
            get_venvs=other.get_venvs or self.get_venvs,
            create_venv=other.create_venv or self.create_venv,
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Config:
        """
        create configuration from a dictionary.

        arguments:
            `data: dict[str, Any]`
                configuration dictionary

        returns: `Config`
            configuration object
        """
        config = cls()

        if "venvs_path" in data:
            venvs_path = data["venvs_path"]  # pyright: ignore[reportAny]
            config.venvs_path = Path(str(venvs_path)).expanduser() if venvs_path else None  # pyright: ignore[reportAny]
        if "local_venv_dir" in data:
            config.local_venv_dir = str(data["local_venv_dir"])  # pyright: ignore[reportAny]
        if "auto_create_venv" in data:
            config.auto_create_venv = bool(data["auto_create_venv"])  # pyright: ignore[reportAny]

        return config
