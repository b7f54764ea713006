#!/usr/bin/env python3
"""
Integration tests for the friends CLI.

Drives every command through Click's test runner against a temporary
journal file, log directory and config file.
"""
import pytest
from click.testing import CliRunner
from unittest.mock import patch

from friendlog.cli import cli
from friendlog.journal import FriendsJournal


class TestFriendsCLI:
    """Test friends CLI commands with a temporary journal."""

    @pytest.fixture
    def runner(self):
        """Create Click test runner."""
        return CliRunner()

    @pytest.fixture
    def test_dirs(self, tmp_path):
        """Create temporary paths for testing."""
        dirs = {
            "journal": tmp_path / "friends.md",
            "log_dir": tmp_path / "logs",
            "config": tmp_path / "config.yaml",
        }
        dirs["config"].write_text("", encoding="utf-8")
        return dirs

    @pytest.fixture
    def populated(self, test_dirs, canonical_journal_text):
        """Write the sample journal to the test journal path."""
        test_dirs["journal"].write_text(canonical_journal_text, encoding="utf-8")
        return test_dirs

    def invoke_cli(self, runner, test_dirs, args, **kwargs):
        """Helper to invoke CLI with test configuration."""
        base_args = [
            "--filename", str(test_dirs["journal"]),
            "--log-dir", str(test_dirs["log_dir"]),
            "--config", str(test_dirs["config"]),
        ]
        return runner.invoke(cli, base_args + args, **kwargs)

    def read_journal(self, test_dirs):
        return test_dirs["journal"].read_text(encoding="utf-8")

    # ----- General -----

    def test_cli_help(self, runner):
        """Test that CLI help message works."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "friends" in result.output.lower()
        for command in ("list", "add", "remove", "graph", "suggest", "clean", "stats"):
            assert command in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_missing_config_file(self, runner, test_dirs):
        test_dirs["config"].unlink()
        result = self.invoke_cli(runner, test_dirs, ["list", "friends"])
        assert result.exit_code == 1
        assert "ConfigError" in result.output

    def test_malformed_journal(self, runner, test_dirs):
        test_dirs["journal"].write_text("# Friends\n\nAnna\n", encoding="utf-8")
        result = self.invoke_cli(runner, test_dirs, ["list", "friends"])
        assert result.exit_code == 1
        assert "ParseError: line 3" in result.output

    def test_errors_are_logged(self, runner, test_dirs):
        self.invoke_cli(runner, test_dirs, ["graph", "Nobody"])
        errors = (test_dirs["log_dir"] / "errors.log").read_text(encoding="utf-8")
        assert "NotFoundError" in errors
        assert "operation=graph" in errors

    # ----- Add / remove -----

    def test_add_friend_creates_file(self, runner, test_dirs):
        result = self.invoke_cli(runner, test_dirs, ["add", "friend", "Grace", "Hopper"])

        assert result.exit_code == 0
        assert "Friend added: Grace Hopper" in result.output
        assert f"Saved {test_dirs['journal']}" in result.output
        assert self.read_journal(test_dirs) == "# Friends\n\n- Grace Hopper\n"

    def test_add_duplicate_friend(self, runner, populated):
        before = self.read_journal(populated)
        result = self.invoke_cli(runner, populated, ["add", "friend", "anna"])

        assert result.exit_code == 1
        assert "DuplicateNameError" in result.output
        assert self.read_journal(populated) == before

    def test_add_friend_sharing_lookup_key(self, runner, populated):
        """'Jean Pierre Martin' would answer the existing @Jean-Pierre_Martin."""
        before = self.read_journal(populated)
        result = self.invoke_cli(runner, populated, ["add", "friend", "Jean", "Pierre", "Martin"])

        assert result.exit_code == 1
        assert "DuplicateNameError" in result.output
        assert self.read_journal(populated) == before

    def test_add_nickname_with_trailing_underscore(self, runner, populated):
        before = self.read_journal(populated)
        result = self.invoke_cli(runner, populated, ["add", "nickname", "Anna", "Annie_"])

        assert result.exit_code == 1
        assert "ValidationError" in result.output
        assert self.read_journal(populated) == before

    def test_add_activity(self, runner, populated):
        result = self.invoke_cli(
            runner,
            populated,
            ["add", "activity", "Tea", "with", "@banana", "--date", "2024-04-01"],
        )

        assert result.exit_code == 0
        assert "Activity added: April 1st, 2024: Tea with @Anna" in result.output
        assert "With: Anna" in result.output
        assert "## April 1st, 2024\n\n- Tea with @Anna\n" in self.read_journal(populated)

    def test_add_activity_prompts_for_description(self, runner, populated):
        """Without a description, the text is read from a prompt."""
        result = self.invoke_cli(
            runner,
            populated,
            ["add", "activity", "--date", "2024-04-01"],
            input="Cake with @the-admiral\n",
        )

        assert result.exit_code == 0
        assert "What did you do on April 1st, 2024?" in result.output
        assert "- Cake with @Grace-Hopper\n" in self.read_journal(populated)

    def test_add_activity_unknown_mention(self, runner, populated):
        before = self.read_journal(populated)
        result = self.invoke_cli(runner, populated, ["add", "activity", "Lunch with @Bob"])

        assert result.exit_code == 1
        assert "AmbiguousMentionError" in result.output
        assert self.read_journal(populated) == before

    def test_add_activity_bad_date(self, runner, populated):
        result = self.invoke_cli(
            runner, populated, ["add", "activity", "Tea", "--date", "April 1st"]
        )
        assert result.exit_code == 2

    def test_add_and_remove_nickname(self, runner, populated):
        result = self.invoke_cli(runner, populated, ["add", "nickname", "anna", "Annie"])
        assert result.exit_code == 0
        assert "- Anna (a.k.a. Banana a.k.a. Annie)" in self.read_journal(populated)

        result = self.invoke_cli(runner, populated, ["remove", "nickname", "Anna", "Banana"])
        assert result.exit_code == 0
        assert "- Anna (a.k.a. Annie)" in self.read_journal(populated)

    def test_remove_missing_nickname(self, runner, populated):
        before = self.read_journal(populated)
        result = self.invoke_cli(runner, populated, ["remove", "nickname", "Anna", "Annie"])

        assert result.exit_code == 1
        assert "NotFoundError" in result.output
        assert self.read_journal(populated) == before

    def test_quiet_suppresses_confirmations(self, runner, test_dirs):
        result = self.invoke_cli(runner, test_dirs, ["--quiet", "add", "friend", "Anna"])
        assert result.exit_code == 0
        assert result.output == ""
        assert test_dirs["journal"].exists()

    def test_mutation_saves_exactly_once(self, runner, populated):
        with patch.object(
            FriendsJournal, "save", autospec=True, return_value=populated["journal"]
        ) as save:
            result = self.invoke_cli(runner, populated, ["add", "friend", "Bob"])

        assert result.exit_code == 0
        save.assert_called_once()

    # ----- Read-only commands -----

    @pytest.mark.parametrize(
        "args",
        [
            ["list", "friends"],
            ["list", "favorites"],
            ["list", "activities"],
            ["graph", "Anna"],
            ["suggest"],
            ["stats"],
        ],
    )
    def test_read_only_commands_leave_file_unchanged(self, runner, populated, args):
        before = populated["journal"].stat().st_mtime_ns
        with patch.object(FriendsJournal, "save", autospec=True) as save:
            result = self.invoke_cli(runner, populated, args)

        assert result.exit_code == 0
        save.assert_not_called()
        assert populated["journal"].stat().st_mtime_ns == before
        assert "Saved" not in result.output

    def test_list_friends(self, runner, populated):
        result = self.invoke_cli(runner, populated, ["list", "friends"])
        assert result.output.splitlines() == ["Anna", "Grace Hopper", "Jean-Pierre Martin"]

    def test_list_friends_empty(self, runner, test_dirs):
        result = self.invoke_cli(runner, test_dirs, ["list", "friends"])
        assert result.exit_code == 0
        assert result.output == ""
        assert not test_dirs["journal"].exists()

    def test_list_favorites(self, runner, populated):
        result = self.invoke_cli(runner, populated, ["list", "favorites", "--limit", "2"])
        assert result.output.splitlines() == [
            "1. Anna (2 activities)",
            "2. Grace Hopper (2 activities)",
        ]

    def test_list_favorites_uses_config_limit(self, runner, populated):
        populated["config"].write_text("favorites_limit: 1\n", encoding="utf-8")
        result = self.invoke_cli(runner, populated, ["list", "favorites"])
        assert result.output.splitlines() == ["1. Anna (2 activities)"]

    def test_list_activities_with_friend(self, runner, populated):
        result = self.invoke_cli(
            runner, populated, ["list", "activities", "--with", "The Admiral"]
        )
        assert result.output.splitlines() == [
            "March 3rd, 2024: Lunch with @Anna and @Grace-Hopper.",
            "January 10th, 2024: Movie night with @Grace-Hopper.",
        ]

    def test_list_activities_limit(self, runner, populated):
        result = self.invoke_cli(runner, populated, ["list", "activities", "-n", "1"])
        assert result.output.splitlines() == [
            "March 3rd, 2024: Lunch with @Anna and @Grace-Hopper."
        ]

    def test_graph(self, runner, populated):
        result = self.invoke_cli(runner, populated, ["graph", "grace", "hopper"])

        assert result.exit_code == 0
        assert "Activities with Grace Hopper" in result.output
        assert "Jan 2024" in result.output
        assert "Feb 2024" in result.output
        assert "(0)" in result.output

    def test_graph_unknown_friend(self, runner, populated):
        result = self.invoke_cli(runner, populated, ["graph", "Nobody"])
        assert result.exit_code == 1
        assert "NotFoundError" in result.output

    def test_suggest(self, runner, populated):
        result = self.invoke_cli(runner, populated, ["suggest", "--count", "1"])

        assert result.exit_code == 0
        names = [line.strip()[2:] for line in result.output.splitlines() if "•" in line]
        assert 1 <= len(names) <= 3
        assert set(names) <= {"Anna", "Grace Hopper", "Jean-Pierre Martin"}

    def test_suggest_empty_journal(self, runner, test_dirs):
        result = self.invoke_cli(runner, test_dirs, ["suggest"])
        assert result.exit_code == 0
        assert "No activities" in result.output

    def test_stats(self, runner, populated):
        result = self.invoke_cli(runner, populated, ["stats"])

        assert result.exit_code == 0
        assert "Friends: 3" in result.output
        assert "Activities: 4" in result.output
        assert "Elapsed days: 53" in result.output
        assert "First activity: 2024-01-10" in result.output

    # ----- Clean -----

    def test_clean_normalizes_file(self, runner, test_dirs, messy_journal_text):
        test_dirs["journal"].write_text(messy_journal_text, encoding="utf-8")
        result = self.invoke_cli(runner, test_dirs, ["clean"])

        assert result.exit_code == 0
        assert f"File cleaned: {test_dirs['journal']}" in result.output
        cleaned = self.read_journal(test_dirs)
        assert cleaned.startswith("# Friends\n\n- Anna (a.k.a. Banana)\n")

        self.invoke_cli(runner, test_dirs, ["clean"])
        assert self.read_journal(test_dirs) == cleaned
