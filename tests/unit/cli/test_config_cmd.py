"""Unit tests for config command."""

import tomllib
from pathlib import Path

from notectl.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigInit:
    """Tests for notectl config init."""

    def test_writes_config(self, isolated_config_home: Path, notes_tree: Path) -> None:
        """init writes the given settings to the XDG config file."""
        result = runner.invoke(
            app,
            [
                "config", "init",
                "--root", str(notes_tree),
                "-e", "org", "-e", "md",
                "-x", r"\.attach/",
                "-b", "rg", "-b", "fd=/opt/fd",
            ],
        )

        assert result.exit_code == 0
        config_file = isolated_config_home / "notectl" / "config.toml"
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
        assert data == {
            "root": str(notes_tree),
            "extensions": ["org", "md"],
            "exclude": [r"\.attach/"],
            "backends": ["rg", ["fd", "/opt/fd"]],
        }

    def test_refuses_to_overwrite(self, notes_tree: Path) -> None:
        """An existing config is kept unless --force is given."""
        first = runner.invoke(app, ["config", "init", "--root", str(notes_tree)])
        second = runner.invoke(app, ["config", "init", "--root", str(notes_tree)])
        forced = runner.invoke(app, ["config", "init", "--root", str(notes_tree), "--force"])

        assert first.exit_code == 0
        assert second.exit_code == 1
        assert "already exists" in second.output
        assert forced.exit_code == 0

    def test_explicit_path(self, tmp_path: Path, notes_tree: Path) -> None:
        """--config writes elsewhere."""
        target = tmp_path / "other" / "corpus.toml"

        result = runner.invoke(
            app, ["config", "init", "--root", str(notes_tree), "--config", str(target)]
        )

        assert result.exit_code == 0
        assert target.exists()

    def test_invalid_root(self, tmp_path: Path) -> None:
        """A missing root directory is rejected."""
        result = runner.invoke(app, ["config", "init", "--root", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Invalid config content" in result.output


class TestConfigShow:
    """Tests for notectl config show."""

    def test_shows_settings(self, notes_tree: Path) -> None:
        """show prints the effective settings."""
        runner.invoke(
            app, ["config", "init", "--root", str(notes_tree), "-b", "fallback", "-e", "md"]
        )

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "extensions  md" in result.stdout
        assert "backends    fallback" in result.stdout
        assert "timeout     none" in result.stdout

    def test_missing_config(self) -> None:
        """show fails without a config file."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Config not found" in result.output


class TestConfigPath:
    """Tests for notectl config path."""

    def test_prints_path(self, isolated_config_home: Path) -> None:
        """path prints the default config file location."""
        result = runner.invoke(app, ["config", "path"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(isolated_config_home / "notectl" / "config.toml")
