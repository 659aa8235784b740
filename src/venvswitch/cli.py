"""
command-line interface for venvswitch.

provides commands for listing, matching and activating environments, and
for running a command inside one.
"""

from __future__ import annotations

import argparse
import json
import logging
import shlex
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .api import VenvSwitcher
from .config import Config
from .matcher import best_match
from .models import ActivationError, Environment


def create_parser() -> argparse.ArgumentParser:
    """
    create the argument parser for the cli.

    returns: `argparse.ArgumentParser`
        configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="venvswitch",
        description="discover and activate python environments from venv, conda, micromamba, pyenv and pixi",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  venvswitch list                       # list every environment
  venvswitch current                    # show the inherited environment
  venvswitch match my-project           # show the best match for a name
  eval "$(venvswitch activate my-env)"  # activate in the calling shell
  venvswitch auto ~/code/project        # activate a project's environment
  venvswitch run my-env -- pytest       # run a command inside an environment
        """,
    )
    _ = parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="enable debug logging for troubleshooting",
    )
    _ = parser.add_argument(
        "--venvs-path",
        type=str,
        help="base directory of plain venvs (overrides configuration)",
    )

    subparsers = parser.add_subparsers(dest="command", help="available commands")

    list_parser = subparsers.add_parser("list", help="list discovered environments")
    _ = list_parser.add_argument("--json", action="store_true", help="output as json")

    current_parser = subparsers.add_parser("current", help="show the environment active at startup")
    _ = current_parser.add_argument("--json", action="store_true", help="output as json")

    match_parser = subparsers.add_parser("match", help="show the environment best matching a name")
    _ = match_parser.add_argument("name", help="environment name to look for")
    _ = match_parser.add_argument("--json", action="store_true", help="output as json")

    activate_parser = subparsers.add_parser(
        "activate",
        help="print the variables activating the best match for a name",
    )
    _ = activate_parser.add_argument("name", help="environment name to look for")
    _ = activate_parser.add_argument(
        "--json",
        action="store_true",
        help="output as json instead of shell export lines",
    )

    auto_parser = subparsers.add_parser(
        "auto",
        help="print the variables activating a project's declared environment",
    )
    _ = auto_parser.add_argument(
        "project_root",
        nargs="?",
        default=".",
        help="project root directory (default: current directory)",
    )
    _ = auto_parser.add_argument(
        "--json",
        action="store_true",
        help="output as json instead of shell export lines",
    )

    run_parser = subparsers.add_parser("run", help="run a command inside an environment")
    _ = run_parser.add_argument("name", help="environment name to look for")
    _ = run_parser.add_argument(
        "run_command",
        nargs=argparse.REMAINDER,
        help="command to run, after '--'",
    )

    return parser


def format_variables(variables: dict[str, str], json_output: bool = False) -> str:
    """
    format written variables for a shell or as json.

    arguments:
        `variables: dict[str, str]`
            variables written by an activation
        `json_output: bool`
            whether to output as json

    returns: `str`
        `export` lines, or a json object
    """
    if json_output:
        return json.dumps(variables, indent=2)
    return "\n".join(f"export {key}={shlex.quote(value)}" for key, value in variables.items())


def _print_venv(venv: Environment | None, json_output: bool, missing: str) -> None:
    if json_output:
        print(json.dumps(venv.to_dict() if venv is not None else None, indent=2))
    elif venv is None:
        print(missing)
    else:
        print(venv)


def handle_list(switcher: VenvSwitcher, json_output: bool) -> int:
    """handle the list command."""
    venvs = switcher.get_venvs()

    if json_output:
        print(json.dumps([venv.to_dict() for venv in venvs], indent=2))
    elif not venvs:
        print("no environments found")
    else:
        for venv in venvs:
            print(venv)

    return 0


def handle_match(switcher: VenvSwitcher, name: str, json_output: bool) -> int:
    """
    handle the match command.

    returns: `int`
        exit code (0 = matched, 1 = no match)
    """
    venv = best_match(switcher.get_venvs(), name)
    _print_venv(venv, json_output, f"no environment matches '{name}'")
    return 0 if venv is not None else 1


def handle_activate(switcher: VenvSwitcher, name: str, json_output: bool) -> int:
    """
    handle the activate command.

    returns: `int`
        exit code (0 = activated, 1 = no match)
    """
    venv = switcher.set_venv(name)
    if venv is None:
        print(f"venvswitch: error: no environment matches '{name}'", file=sys.stderr)
        return 1

    print(format_variables(dict(switcher.state.written), json_output=json_output))
    return 0


def handle_auto(switcher: VenvSwitcher, project_root: str, json_output: bool) -> int:
    """handle the auto command."""
    project_path = Path(project_root)
    if not project_path.is_dir():
        print(f"venvswitch: error: not a directory: {project_path}", file=sys.stderr)
        return 1

    venv = switcher.auto_venv(project_path)
    if venv is None:
        if json_output:
            print("{}")
        else:
            print(f"# no environment declared for {project_path}")
        return 0

    print(format_variables(dict(switcher.state.written), json_output=json_output))
    return 0


def handle_run(switcher: VenvSwitcher, name: str, command: Sequence[str]) -> int:
    """
    handle the run command.

    returns: `int`
        the command's exit code, 1 on no match, 127 if it cannot be started
    """
    cmd = list(command)
    if cmd and cmd[0] == "--":
        cmd = cmd[1:]
    if not cmd:
        print("venvswitch: error: no command given", file=sys.stderr)
        return 2

    venv = switcher.set_venv(name)
    if venv is None:
        print(f"venvswitch: error: no environment matches '{name}'", file=sys.stderr)
        return 1

    try:
        result = subprocess.run(cmd, env=dict(switcher.state.environ))
    except OSError as e:
        print(f"venvswitch: error: cannot run '{cmd[0]}': {e}", file=sys.stderr)
        return 127

    return result.returncode


def main(argv: Sequence[str] | None = None) -> int:
    """
    main entry point for the cli.

    arguments:
        `argv: Sequence[str] | None`
            command line arguments. if None, uses sys.argv.

    returns: `int`
        exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # extract args with getattr to avoid Any propagation from Namespace
    command = getattr(args, "command", None)
    debug = bool(getattr(args, "debug", False))
    venvs_path_raw = getattr(args, "venvs_path", None)
    json_output = bool(getattr(args, "json", False))

    if command is None:
        parser.print_help()
        return 0

    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(message)s",
        )

    # auto reads the project config of the project it was pointed at
    config_root = Path.cwd()
    if command == "auto":
        config_root = Path(str(getattr(args, "project_root", ".")))
    config = Config.load(config_root)
    if venvs_path_raw is not None:
        config.venvs_path = Path(str(venvs_path_raw)).expanduser()  # pyright: ignore[reportAny]

    switcher = VenvSwitcher(config)
    _ = switcher.init()

    try:
        if command == "list":
            return handle_list(switcher, json_output)

        if command == "current":
            _print_venv(switcher.get_current_venv(), json_output, "no active environment")
            return 0

        if command == "match":
            return handle_match(switcher, str(getattr(args, "name", "")), json_output)

        if command == "activate":
            return handle_activate(switcher, str(getattr(args, "name", "")), json_output)

        if command == "auto":
            return handle_auto(switcher, str(getattr(args, "project_root", ".")), json_output)

        if command == "run":
            run_command = list(getattr(args, "run_command", None) or [])  # pyright: ignore[reportAny]
            return handle_run(switcher, str(getattr(args, "name", "")), run_command)
    except ActivationError as e:
        print(f"venvswitch: error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
