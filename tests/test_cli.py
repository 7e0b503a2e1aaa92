"""Tests for the command-line interface."""

import json

from click.testing import CliRunner

from taskline.cli import main


class TestCli:
    """Test the click commands end to end."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_classify(self):
        result = self.runner.invoke(main, ["classify", "todo   "])
        assert result.exit_code == 0
        assert result.output.strip() == "todoError"

    def test_parse(self):
        result = self.runner.invoke(main, ["parse", "todo read book"])
        assert result.exit_code == 0
        assert "[T][ ] read book" in result.output

    def test_parse_json(self):
        result = self.runner.invoke(
            main, ["parse", "--json", "deadline submit report /by 2024-12-01 23:59:00"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "type": "D",
            "name": "submit report",
            "done": False,
            "deadline": "2024-12-01 23:59:00",
        }

    def test_parse_absent(self):
        result = self.runner.invoke(main, ["parse", "deadline oops /by not-a-date"])
        assert result.exit_code == 1
        assert "No task produced (deadline)" in result.output

    def test_shell_session(self):
        """Test a scripted interactive session."""
        commands = "\n".join([
            "todo read book",
            "event team sync /from 2024-01-01 09:00:00 /to 2024-01-01 10:00:00",
            "mark 1",
            "list",
            "bye",
        ]) + "\n"
        result = self.runner.invoke(main, ["shell"], input=commands)
        assert result.exit_code == 0
        assert "Got it. I've added this task" in result.output
        assert "[T][X] read book" in result.output
        assert "team sync" in result.output
        assert "Bye. Hope to see you again soon!" in result.output

    def test_shell_ends_at_eof(self):
        result = self.runner.invoke(main, ["shell"], input="todo a\n")
        assert result.exit_code == 0
        assert "Now you have 1 tasks" in result.output

    def test_unknown_log_level_does_not_crash(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: verbose\n")
        result = self.runner.invoke(main, ["--config", str(path), "classify", "mark 1"])
        assert result.exit_code == 0
        assert result.output.strip().splitlines()[-1] == "mark"

    def test_config_option(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("prompt: 'task> '\n")
        result = self.runner.invoke(main, ["--config", str(path), "shell"], input="bye\n")
        assert result.exit_code == 0
        assert "task> " in result.output
