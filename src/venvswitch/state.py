"""
process-wide activation state.
"""

from __future__ import annotations

import os
import sys
from collections.abc import MutableMapping
from dataclasses import dataclass, field

from .models import Environment


@dataclass
class ActivationState:
    """
    the current environment and the variable table it is written to.

    `original_path` is captured once, when the state is created, and every
    activation rebuilds `PATH` from it.

    attributes:
        `environ: MutableMapping[str, str]`
            variable table to read and write, defaults to `os.environ`
        `is_windows: bool`
            use windows path conventions (`Scripts`, `;`)
        `original_path: str`
            `PATH` as inherited at creation time
        `written: dict[str, str]`
            variables written by the most recent activation
    """

    environ: MutableMapping[str, str] = field(default_factory=lambda: os.environ)
    is_windows: bool = sys.platform == "win32"
    original_path: str = field(init=False)
    written: dict[str, str] = field(default_factory=dict, init=False)
    _current: Environment | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.original_path = self.environ.get("PATH", "")

    def get(self) -> Environment | None:
        """return the current environment, if any."""
        return self._current

    def set(self, venv: Environment | None) -> None:
        """replace the current environment."""
        self._current = venv
