"""tests for project-declared environment names."""

from __future__ import annotations

from pathlib import Path

from tests.fixtures.layouts import make_in_project_venv
from venvswitch.project import (
    get_local_venv_path,
    read_venv_name_common_dir,
    read_venv_name_in_project,
)


class TestGetLocalVenvPath:
    """tests for the get_local_venv_path function."""

    def test_default(self, tmp_path: Path) -> None:
        """test the conventional .venv directory."""
        assert get_local_venv_path(tmp_path) == tmp_path / ".venv"

    def test_custom_dir(self, tmp_path: Path) -> None:
        """test a configured directory name."""
        assert get_local_venv_path(tmp_path, "env") == tmp_path / "env"

    def test_does_not_require_existence(self, tmp_path: Path) -> None:
        """test that the directory does not have to exist."""
        assert not get_local_venv_path(tmp_path / "missing").exists()


class TestReadVenvNameInProject:
    """tests for the read_venv_name_in_project function."""

    def test_no_local_venv(self, tmp_path: Path) -> None:
        """test that projects without a local environment declare nothing."""
        assert read_venv_name_in_project(tmp_path) is None

    def test_prompt(self, tmp_path: Path) -> None:
        """test that the pyvenv.cfg prompt is the declared name."""
        _ = make_in_project_venv(tmp_path, prompt="myenv")
        assert read_venv_name_in_project(tmp_path) == "myenv"

    def test_quoted_prompt(self, tmp_path: Path) -> None:
        """test that quotes around the prompt are stripped."""
        _ = make_in_project_venv(tmp_path, prompt="'myenv'")
        assert read_venv_name_in_project(tmp_path) == "myenv"

    def test_falls_back_to_project_name(self, tmp_path: Path) -> None:
        """test that the project directory name is used without a prompt."""
        project = tmp_path / "webshop"
        _ = make_in_project_venv(project)
        assert read_venv_name_in_project(project) == "webshop"

    def test_missing_pyvenv_cfg(self, tmp_path: Path) -> None:
        """test that a bare local directory still declares the project name."""
        project = tmp_path / "bare"
        (project / ".venv").mkdir(parents=True)
        assert read_venv_name_in_project(project) == "bare"

    def test_venv_file_is_not_in_project(self, tmp_path: Path) -> None:
        """test that a .venv file is not an in-project environment."""
        _ = (tmp_path / ".venv").write_text("shared\n")
        assert read_venv_name_in_project(tmp_path) is None

    def test_custom_dir(self, tmp_path: Path) -> None:
        """test a configured local directory name."""
        _ = make_in_project_venv(tmp_path, prompt="custom", dirname="env")
        assert read_venv_name_in_project(tmp_path) is None
        assert read_venv_name_in_project(tmp_path, "env") == "custom"


class TestReadVenvNameCommonDir:
    """tests for the read_venv_name_common_dir function."""

    def test_nothing_declared(self, tmp_path: Path) -> None:
        """test that undeclared projects yield nothing."""
        project = tmp_path / "project"
        project.mkdir()
        assert read_venv_name_common_dir(project) is None

    def test_venv_file(self, tmp_path: Path) -> None:
        """test that the first non-empty line of .venv is the name."""
        _ = (tmp_path / ".venv").write_text("\n  data-science  \nignored\n")
        assert read_venv_name_common_dir(tmp_path) == "data-science"

    def test_empty_venv_file(self, tmp_path: Path) -> None:
        """test that an empty .venv file declares nothing."""
        project = tmp_path / "project"
        project.mkdir()
        _ = (project / ".venv").write_text("\n\n")
        assert read_venv_name_common_dir(project) is None

    def test_ancestor(self, tmp_path: Path) -> None:
        """test that a declaration in a parent directory applies."""
        _ = (tmp_path / ".venv").write_text("shared")
        project = tmp_path / "workspace" / "service"
        project.mkdir(parents=True)
        assert read_venv_name_common_dir(project) == "shared"

    def test_nearest_wins(self, tmp_path: Path) -> None:
        """test that the closest declaration wins."""
        _ = (tmp_path / ".venv").write_text("outer")
        project = tmp_path / "inner"
        project.mkdir()
        _ = (project / ".venv").write_text("inner")
        assert read_venv_name_common_dir(project) == "inner"

    def test_pyproject(self, tmp_path: Path) -> None:
        """test the pyproject.toml declaration."""
        _ = (tmp_path / "pyproject.toml").write_text('[tool.venvswitch]\nvenv = "torch"\n')
        assert read_venv_name_common_dir(tmp_path) == "torch"

    def test_venv_file_before_pyproject(self, tmp_path: Path) -> None:
        """test that .venv takes precedence in the same directory."""
        _ = (tmp_path / "pyproject.toml").write_text('[tool.venvswitch]\nvenv = "torch"\n')
        _ = (tmp_path / ".venv").write_text("file-name")
        assert read_venv_name_common_dir(tmp_path) == "file-name"

    def test_pyproject_without_declaration(self, tmp_path: Path) -> None:
        """test that other pyproject.toml content is ignored."""
        project = tmp_path / "project"
        project.mkdir()
        _ = (project / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert read_venv_name_common_dir(project) is None

    def test_invalid_pyproject(self, tmp_path: Path) -> None:
        """test that malformed toml is ignored."""
        project = tmp_path / "project"
        project.mkdir()
        _ = (project / "pyproject.toml").write_text("invalid toml [[{{content")
        assert read_venv_name_common_dir(project) is None

    def test_in_project_directory_is_not_a_name(self, tmp_path: Path) -> None:
        """test that a .venv directory is skipped."""
        project = tmp_path / "project"
        _ = make_in_project_venv(project, prompt="local")
        assert read_venv_name_common_dir(project) is None
