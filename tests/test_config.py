"""Tests for the configuration module."""

from pathlib import Path

import pytest

from graphwalk import (
    ConfigError,
    DanglingEdgePolicy,
    GraphwalkConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert find_pyproject_toml(tmp_path) == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == pyproject

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Should return None when no pyproject.toml is found."""
        assert find_pyproject_toml(tmp_path) is None


class TestLoadConfig:
    """Tests for loading the [tool.graphwalk] table."""

    def test_missing_section_gives_defaults(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == GraphwalkConfig(project_root=tmp_path)
        assert config.dangling_edges is DanglingEdgePolicy.WARN
        assert config.container_capacity is None

    def test_full_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graphwalk]
dangling-edges = "error"
container-capacity = 16
""",
        )

        config = load_config(pyproject)

        assert config.dangling_edges is DanglingEdgePolicy.ERROR
        assert config.container_capacity == 16
        assert config.project_root == tmp_path

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphwalk\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_unknown_policy_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.graphwalk]\ndangling-edges = "explode"\n')

        with pytest.raises(ConfigError, match="Expected one of 'ignore', 'warn', 'error'"):
            load_config(pyproject)

    def test_non_string_policy_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphwalk]\ndangling-edges = 1\n")

        with pytest.raises(ConfigError, match="expected string"):
            load_config(pyproject)

    @pytest.mark.parametrize("value", ['"16"', "true", "1.5"])
    def test_non_integer_capacity_raises_error(self, tmp_path: Path, value: str) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f"[tool.graphwalk]\ncontainer-capacity = {value}\n")

        with pytest.raises(ConfigError, match="expected integer"):
            load_config(pyproject)

    def test_negative_capacity_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphwalk]\ncontainer-capacity = -1\n")

        with pytest.raises(ConfigError, match="must be non-negative"):
            load_config(pyproject)

    def test_unknown_key_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.graphwalk]\ndangling_edges = "warn"\n')

        with pytest.raises(ConfigError, match="Unknown \\[tool.graphwalk\\] key"):
            load_config(pyproject)

    @pytest.mark.parametrize("body", ["[tool]\ngraphwalk = 3\n", 'tool = "graphwalk"\n'])
    def test_non_table_section_raises_error(self, tmp_path: Path, body: str) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(body)

        with pytest.raises(ConfigError, match="expected a table"):
            load_config(pyproject)


class TestGetConfig:
    """Tests for discovering config from the working directory."""

    def test_reads_nearest_pyproject(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.graphwalk]\ndangling-edges = "ignore"\n')
        subdir = tmp_path / "graphs"
        subdir.mkdir()
        monkeypatch.chdir(subdir)

        assert get_config().dangling_edges is DanglingEdgePolicy.IGNORE

    def test_reads_from_given_directory(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.graphwalk]\ncontainer-capacity = 8\n")
        subdir = tmp_path / "nested" / "graphs"
        subdir.mkdir(parents=True)

        config = get_config(subdir)

        assert config.container_capacity == 8
        assert config.project_root == tmp_path.resolve()
