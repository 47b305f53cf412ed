"""Integration tests for the scoop-searchr CLI.

These tests exercise the full CLI workflow against the sample Scoop
installation in tests/fixtures.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from scoop_searchr import __version__
from scoop_searchr.cli import POWERSHELL_HOOK, app

runner = CliRunner()


@pytest.fixture
def scoop_env(scoop_home: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point SCOOP at a copy of the sample installation."""
    monkeypatch.setenv("SCOOP", str(scoop_home))
    return scoop_home


class TestSearch:
    """Integration tests for searching."""

    def test_name_and_description_matches(self, scoop_env: Path) -> None:
        """Test the text layout for a term matching in two buckets."""
        result = runner.invoke(app, ["git"])

        assert result.exit_code == 0, result.output
        assert result.stdout == (
            "'extras' bucket:\n"
            "\tgitkraken (9.11.0)\n"
            "\tsublime-merge (2091): Git client from the makers of Sublime Text\n"
            "\n"
            "'main' bucket:\n"
            "\tgit (2.43.0)\n"
            "\n"
        )

    def test_binary_match(self, scoop_env: Path) -> None:
        """Test that a shim executable is reported with its path."""
        result = runner.invoke(app, ["bash"])

        assert result.exit_code == 0
        assert "'main' bucket:\n\tgit (2.43.0) --> includes 'bin\\bash.exe'\n" in result.stdout
        assert "'extras' bucket:" not in result.stdout

    def test_case_insensitive_term(self, scoop_env: Path) -> None:
        """Test that the term is matched case-insensitively."""
        result = runner.invoke(app, ["ARCHIVER"])

        assert result.exit_code == 0
        assert "7zip (23.01): A multi-format file archiver" in result.stdout

    def test_no_match(self, scoop_env: Path) -> None:
        """Test the no-match message and exit code."""
        result = runner.invoke(app, ["definitely-not-a-package"])

        assert result.exit_code == 1
        assert "No match found" in result.stdout

    def test_no_term_lists_everything(self, scoop_env: Path) -> None:
        """Test that running without a term lists every package."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        for name in ["7zip", "git", "python", "ripgrep", "gitkraken", "sublime-merge", "vscode"]:
            assert f"\t{name} (" in result.stdout

    def test_broken_manifest_warning_on_stderr(self, scoop_env: Path) -> None:
        """Test that a broken manifest is logged but does not fail the search."""
        result = runner.invoke(app, ["python"])

        assert result.exit_code == 0
        assert "\tpython (3.12.1)" in result.stdout
        assert "Skipping manifest" in result.output
        assert "Skipping manifest" not in result.stdout

    def test_quiet_still_shows_warnings(self, scoop_env: Path) -> None:
        """Test that --quiet keeps warnings."""
        result = runner.invoke(app, ["python", "--quiet"])

        assert result.exit_code == 0
        assert "[WARNING]" in result.output

    def test_verbose_shows_debug(self, scoop_env: Path) -> None:
        """Test that --verbose logs per-manifest diagnostics."""
        result = runner.invoke(app, ["python", "--verbose"])

        assert result.exit_code == 0
        assert "[DEBUG]" in result.output
        assert "Checking python (3.12.1)" in result.output


class TestSearchOptions:
    """Integration tests for search and output options."""

    def test_json_output(self, scoop_env: Path) -> None:
        """Test machine-readable output."""
        result = runner.invoke(app, ["rg", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["term"] == "rg"
        assert data["found"] is True
        buckets = {b["name"]: b["entries"] for b in data["buckets"]}
        assert buckets["main"][0]["name"] == "ripgrep"
        assert buckets["main"][0]["kind"] == "binary"
        assert buckets["main"][0]["bin"] == "rg.exe"
        assert buckets["extras"][0]["name"] == "sublime-merge"
        assert len(data["issues"]) == 1

    def test_json_no_match_exit_code(self, scoop_env: Path) -> None:
        """Test that JSON output keeps the no-match exit code."""
        result = runner.invoke(app, ["definitely-not-a-package", "--json"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["found"] is False

    def test_no_descriptions(self, scoop_env: Path) -> None:
        """Test that --no-descriptions drops description matches."""
        result = runner.invoke(app, ["git", "--no-descriptions"])

        assert result.exit_code == 0
        assert "gitkraken" in result.stdout
        assert "sublime-merge" not in result.stdout

    def test_no_binaries(self, scoop_env: Path) -> None:
        """Test that --no-binaries drops binary matches."""
        result = runner.invoke(app, ["bash", "--no-binaries"])

        assert result.exit_code == 1
        assert "No match found" in result.stdout

    def test_config_file(self, scoop_home: Path, tmp_path: Path) -> None:
        """Test that a config file supplies the Scoop root and output format."""
        config_file = tmp_path / "searchr.yaml"
        config_file.write_text(
            f"scoop:\n  root: '{scoop_home}'\noutput:\n  format: json\n",
            encoding="utf-8",
        )

        result = runner.invoke(app, ["7zip", "--config", str(config_file)])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["buckets"][0]["entries"][0]["name"] == "7zip"

    def test_invalid_config_file(self, scoop_env: Path, tmp_path: Path) -> None:
        """Test that an invalid config is reported and fails."""
        config_file = tmp_path / "searchr.yaml"
        config_file.write_text("output:\n  format: xml\n", encoding="utf-8")

        result = runner.invoke(app, ["git", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Failed to load config" in result.output


class TestScoopHome:
    """Integration tests for Scoop home failures."""

    def test_missing_scoop_env_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a SCOOP pointing nowhere fails with exit code 1."""
        monkeypatch.setenv("SCOOP", str(tmp_path / "nowhere"))

        result = runner.invoke(app, ["git"])

        assert result.exit_code == 1
        assert "Failed to find a valid scoop installation" in result.output

    def test_scoop_home_without_buckets(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that a Scoop home without buckets/ fails with exit code 1."""
        empty = tmp_path / "scoop"
        empty.mkdir()
        monkeypatch.setenv("SCOOP", str(empty))

        result = runner.invoke(app, ["git"])

        assert result.exit_code == 1
        assert "failed to list buckets directory" in result.output


class TestHookAndVersion:
    """Integration tests for --hook and --version."""

    def test_hook(self) -> None:
        """Test that --hook prints the PowerShell function and nothing else."""
        result = runner.invoke(app, ["--hook"])

        assert result.exit_code == 0
        assert result.stdout == POWERSHELL_HOOK + "\n"
        assert result.stdout.startswith('function scoop { if ($args[0] -eq "search")')
        assert "scoop-searchr.exe @($args | Select-Object -Skip 1)" in result.stdout

    def test_hook_needs_no_scoop(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the hook is printed even without a Scoop installation."""
        monkeypatch.setenv("SCOOP", str(tmp_path / "nowhere"))

        result = runner.invoke(app, ["--hook"])

        assert result.exit_code == 0

    def test_version(self) -> None:
        """Test --version output."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"scoop-searchr {__version__}" in result.stdout
