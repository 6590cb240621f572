"""Unit tests for corpus file enumeration."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from notectl.backends.base import BackendConfigError, BackendExecutionError
from notectl.backends.find import FindBackend
from notectl.backends.walk import WalkBackend
from notectl.corpus.classifier import is_managed
from notectl.corpus.enumerator import list_files, list_files_with
from notectl.models.config import CorpusConfig
from notectl.utils.shell import CommandResult


class TestListFilesFallback:
    """Tests for list_files when the directory walk is selected."""

    def test_empty_preferences_never_spawn_processes(
        self,
        notes_config: CorpusConfig,
        expected_files: set[str],
    ) -> None:
        """An empty preference list walks the tree without external tools."""
        with (
            patch("notectl.backends.base.run_command") as mock_run,
            patch("notectl.utils.shell.subprocess.run") as mock_subprocess,
        ):
            files = list_files(notes_config)

        mock_run.assert_not_called()
        mock_subprocess.assert_not_called()
        assert set(files) == expected_files

    def test_attachment_example(self, tmp_path: Path) -> None:
        """Only a.org and sub/b.org.gpg are listed for the example tree."""
        root = tmp_path / "notes"
        (root / "sub").mkdir(parents=True)
        (root / ".attach").mkdir()
        (root / "a.org").write_text("")
        (root / "sub" / "b.org.gpg").write_text("")
        (root / "c.txt").write_text("")
        (root / ".attach" / "d.org").write_text("")
        config = CorpusConfig(root=root, extensions=["org"], exclude=r"\.attach/", backends=[])

        files = list_files(config)

        resolved = root.resolve()
        assert set(files) == {str(resolved / "a.org"), str(resolved / "sub" / "b.org.gpg")}

    def test_idempotent(self, notes_config: CorpusConfig) -> None:
        """Two calls on an unchanged tree return the same list."""
        assert list_files(notes_config) == list_files(notes_config)

    def test_fallback_sentinel(
        self,
        notes_tree: Path,
        expected_files: set[str],
    ) -> None:
        """A 'fallback' preference selects the walk before later tools."""
        config = CorpusConfig(root=notes_tree, exclude=r"\.attach/", backends=["fallback", "find"])

        with patch("notectl.backends.base.run_command") as mock_run:
            files = list_files(config)

        mock_run.assert_not_called()
        assert set(files) == expected_files


class TestListFilesNative:
    """Tests for list_files with an external tool backend."""

    @pytest.fixture
    def find_config(self, notes_tree: Path) -> CorpusConfig:
        """Config preferring find."""
        return CorpusConfig(root=notes_tree, exclude=r"\.attach/", backends=["find"])

    def test_classifies_tool_output(
        self,
        find_config: CorpusConfig,
        find_output: str,
        expected_files: set[str],
    ) -> None:
        """Tool output is filtered through the classifier."""
        with (
            patch("notectl.backends.base.resolve_executable", return_value="/usr/bin/find"),
            patch("notectl.backends.base.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout=find_output, stderr="", returncode=0)
            files = list_files(find_config)

        assert set(files) == expected_files
        mock_run.assert_called_once()

    def test_rejects_paths_outside_root(
        self,
        tmp_path: Path,
        find_config: CorpusConfig,
    ) -> None:
        """Paths the tool reports outside the root are dropped."""
        outside = tmp_path / "stray.org"
        outside.write_text("")
        output = f"{find_config.root}/a.org\n{outside}\n"

        with (
            patch("notectl.backends.base.resolve_executable", return_value="/usr/bin/find"),
            patch("notectl.backends.base.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout=output, stderr="", returncode=0)
            files = list_files(find_config)

        assert files == [str((find_config.root / "a.org").resolve())]

    def test_canonicalizes_and_deduplicates(
        self,
        find_config: CorpusConfig,
    ) -> None:
        """Equivalent spellings of one file are listed once, in first-seen order."""
        root = find_config.root
        output = "\n".join(
            [
                f"{root}/sub/b.org.gpg",
                f"{root}/sub/../a.org",
                f"{root}/a.org",
                f"{root}/./sub/b.org.gpg",
            ]
        )

        with (
            patch("notectl.backends.base.resolve_executable", return_value="/usr/bin/find"),
            patch("notectl.backends.base.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout=output, stderr="", returncode=0)
            files = list_files(find_config)

        resolved = root.resolve()
        assert files == [str(resolved / "sub" / "b.org.gpg"), str(resolved / "a.org")]

    def test_link_with_note_name_to_other_file(self, find_config: CorpusConfig) -> None:
        """A link named like a note but pointing at another file type is dropped."""
        root = find_config.root
        (root / "real.txt").write_text("plain\n")
        (root / "alias.org").symlink_to(root / "real.txt")
        output = f"{root}/a.org\n{root}/alias.org\n"

        with (
            patch("notectl.backends.base.resolve_executable", return_value="/usr/bin/find"),
            patch("notectl.backends.base.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout=output, stderr="", returncode=0)
            files = list_files(find_config)

        assert files == [str((root / "a.org").resolve())]
        assert all(is_managed(path, find_config) for path in files)

    def test_tool_failure_is_not_papered_over(self, find_config: CorpusConfig) -> None:
        """A failing tool raises instead of falling back to the walk."""
        with (
            patch("notectl.backends.base.resolve_executable", return_value="/usr/bin/find"),
            patch("notectl.backends.base.run_command") as mock_run,
            patch.object(WalkBackend, "list_candidates") as mock_walk,
        ):
            mock_run.return_value = CommandResult(
                stdout="", stderr="find: '/notes': Permission denied", returncode=1
            )
            with pytest.raises(BackendExecutionError, match="find"):
                list_files(find_config)

        mock_walk.assert_not_called()

    def test_missing_tool_falls_through_to_walk(
        self,
        find_config: CorpusConfig,
        expected_files: set[str],
    ) -> None:
        """A tool missing from PATH is not an error."""
        with (
            patch("notectl.backends.base.resolve_executable", return_value=None),
            patch("notectl.backends.base.run_command") as mock_run,
        ):
            files = list_files(find_config)

        mock_run.assert_not_called()
        assert set(files) == expected_files

    def test_passes_command_timeout(self, notes_tree: Path, find_output: str) -> None:
        """The configured timeout is forwarded to the tool invocation."""
        config = CorpusConfig(root=notes_tree, backends=["find"], command_timeout=5)

        with (
            patch("notectl.backends.base.resolve_executable", return_value="/usr/bin/find"),
            patch("notectl.backends.base.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout=find_output, stderr="", returncode=0)
            list_files(config)

        assert mock_run.call_args.kwargs["timeout"] == 5

    def test_unknown_backend_aborts(self, notes_tree: Path) -> None:
        """An unknown backend identifier is reported."""
        config = CorpusConfig(root=notes_tree, backends=["locate"])

        with pytest.raises(BackendConfigError, match="locate"):
            list_files(config)


class TestListFilesWith:
    """Tests for list_files_with function."""

    def test_walk_backend_gets_no_timeout(self, notes_tree: Path) -> None:
        """The fallback is not bounded by the external tool timeout."""
        config = CorpusConfig(root=notes_tree, backends=[], command_timeout=5)
        backend = WalkBackend()
        with patch.object(
            WalkBackend, "list_candidates", return_value=[str(notes_tree / "a.org")]
        ) as mock_list:
            files = list_files_with(backend, config)

        mock_list.assert_called_once_with(config.root, config.extensions, timeout=None)
        assert files == [str((notes_tree / "a.org").resolve())]

    def test_command_backend(self, notes_config: CorpusConfig, expected_files: set[str]) -> None:
        """A command backend's candidates are classified."""
        backend = FindBackend()
        root = notes_config.root
        candidates = [f"{root}/a.org", f"{root}/c.txt", f"{root}/.attach/d.org"]

        with patch.object(FindBackend, "list_candidates", return_value=candidates) as mock_list:
            files = list_files_with(backend, notes_config)

        mock_list.assert_called_once_with(
            notes_config.root, notes_config.extensions, timeout=None
        )
        assert files == [str((root / "a.org").resolve())]
        assert set(files) < expected_files

    def test_empty_output(self, notes_config: CorpusConfig) -> None:
        """No candidates means no files."""
        with patch.object(FindBackend, "list_candidates", return_value=[]):
            assert list_files_with(FindBackend(), notes_config) == []

    def test_mock_backend(self, notes_config: CorpusConfig) -> None:
        """Any Backend implementation can feed the classifier."""
        backend = MagicMock()
        backend.list_candidates.return_value = [str(notes_config.root / "a.org")]

        assert list_files_with(backend, notes_config) == [
            str((notes_config.root / "a.org").resolve())
        ]
