"""Tests for the gitpod CLI wrappers and the start-before-connect step."""

from __future__ import annotations

import io
import subprocess
import unittest
from unittest import mock

from rich.console import Console

from gitpod_connect import gitpod
from gitpod_connect.environments import EnvironmentService
from gitpod_connect.exceptions import ToolError, ToolNotFound
from gitpod_connect.models import EnvironmentRecord

LISTING = "ID REPOSITORY BRANCH CLASS PHASE\nabc123 https://github.com/org/proj.git main default running\n"


def _completed(args: list[str], stdout: str = "", stderr: str = "", returncode: int = 0):
    return subprocess.CompletedProcess(args=args, returncode=returncode, stdout=stdout, stderr=stderr)


class ListEnvironmentsTests(unittest.TestCase):
    @mock.patch("gitpod_connect.gitpod.subprocess.run")
    def test_parses_stdout(self, run: mock.Mock) -> None:
        run.return_value = _completed(["gitpod", "environment", "list"], stdout=LISTING)

        records = gitpod.list_environments()

        run.assert_called_once_with(
            ["gitpod", "environment", "list"],
            capture_output=True,
            text=True,
            check=False,
        )
        self.assertEqual([record.id for record in records], ["abc123"])

    @mock.patch("gitpod_connect.gitpod.subprocess.run")
    def test_missing_binary_raises_tool_not_found(self, run: mock.Mock) -> None:
        run.side_effect = FileNotFoundError(2, "No such file or directory", "gitpod")

        with self.assertRaises(ToolNotFound) as ctx:
            gitpod.list_environments()

        self.assertEqual(ctx.exception.tool, "gitpod")
        self.assertIn("install", str(ctx.exception).lower())

    @mock.patch("gitpod_connect.gitpod.subprocess.run")
    def test_stderr_without_stdout_raises_tool_error(self, run: mock.Mock) -> None:
        run.return_value = _completed(
            ["gitpod", "environment", "list"], stderr="not logged in", returncode=1
        )

        with self.assertRaises(ToolError) as ctx:
            gitpod.list_environments()

        self.assertEqual(ctx.exception.stderr, "not logged in")
        self.assertIn("not logged in", str(ctx.exception))

    @mock.patch("gitpod_connect.gitpod.subprocess.run")
    def test_stderr_is_ignored_when_stdout_present(self, run: mock.Mock) -> None:
        run.return_value = _completed(
            ["gitpod", "environment", "list"], stdout=LISTING, stderr="a newer version is available"
        )

        records = gitpod.list_environments()

        self.assertEqual(len(records), 1)

    @mock.patch("gitpod_connect.gitpod.render.show_command")
    @mock.patch("gitpod_connect.gitpod.subprocess.run")
    def test_verbose_echoes_command(self, run: mock.Mock, show_command: mock.Mock) -> None:
        run.return_value = _completed(["gitpod", "environment", "list"], stdout=LISTING)

        gitpod.list_environments(verbose=True)

        show_command.assert_called_once_with(["gitpod", "environment", "list"])

    @mock.patch("gitpod_connect.gitpod.subprocess.run")
    def test_empty_output_without_stderr_is_empty_list(self, run: mock.Mock) -> None:
        run.return_value = _completed(["gitpod", "environment", "list"])

        self.assertEqual(gitpod.list_environments(), [])


class StartEnvironmentTests(unittest.TestCase):
    @mock.patch("gitpod_connect.gitpod.subprocess.run")
    def test_start_succeeds_without_error_text(self, run: mock.Mock) -> None:
        run.return_value = _completed(["gitpod", "environment", "start", "abc123"], stderr="starting...")

        gitpod.start_environment("abc123")

        self.assertEqual(run.call_args.args[0], ["gitpod", "environment", "start", "abc123"])

    @mock.patch("gitpod_connect.gitpod.subprocess.run")
    def test_start_with_error_text_raises(self, run: mock.Mock) -> None:
        run.return_value = _completed(
            ["gitpod", "environment", "start", "abc123"], stderr="error: environment not found", returncode=1
        )

        with self.assertRaises(ToolError):
            gitpod.start_environment("abc123")

    @mock.patch("gitpod_connect.gitpod.subprocess.run")
    def test_start_with_missing_binary_raises_tool_not_found(self, run: mock.Mock) -> None:
        run.side_effect = FileNotFoundError(2, "No such file or directory", "gitpod")

        with self.assertRaises(ToolNotFound) as ctx:
            gitpod.start_environment("abc123")

        self.assertEqual(ctx.exception.tool, "gitpod")


class EnsureRunningTests(unittest.TestCase):
    def _record(self, phase: str, env_id: str = "abc123") -> EnvironmentRecord:
        return EnvironmentRecord(
            id=env_id,
            repository_url="https://github.com/org/proj.git",
            branch="main",
            resource_class="default",
            phase=phase,
        )

    @mock.patch("gitpod_connect.environments.gitpod.start_environment")
    def test_running_environment_is_not_started(self, start: mock.Mock) -> None:
        EnvironmentService().ensure_running(self._record("Running"))

        start.assert_not_called()

    @mock.patch("gitpod_connect.environments.gitpod.start_environment")
    def test_stopped_environment_is_started(self, start: mock.Mock) -> None:
        EnvironmentService(verbose=True).ensure_running(self._record("stopped"))

        start.assert_called_once_with("abc123", verbose=True)

    @mock.patch("gitpod_connect.environments.gitpod.start_environment")
    def test_start_failure_propagates(self, start: mock.Mock) -> None:
        start.side_effect = ToolError(["gitpod", "environment", "start", "abc123"], 1, "error")

        with self.assertRaises(ToolError):
            EnvironmentService().ensure_running(self._record("stopped"))

    def _capture_console(self) -> io.StringIO:
        buffer = io.StringIO()
        patcher = mock.patch("gitpod_connect.render.console", Console(file=buffer, width=200))
        patcher.start()
        self.addCleanup(patcher.stop)
        return buffer

    @mock.patch("gitpod_connect.environments.gitpod.start_environment")
    def test_status_messages_keep_branch_brackets(self, start: mock.Mock) -> None:
        buffer = self._capture_console()

        EnvironmentService().ensure_running(self._record("stopped"))

        output = buffer.getvalue()
        self.assertIn("Environment abc123 is stopped", output)
        self.assertIn("Started proj [main]", output)

    @mock.patch("gitpod_connect.environments.gitpod.start_environment")
    def test_markup_like_ids_and_phases_print_verbatim(self, start: mock.Mock) -> None:
        buffer = self._capture_console()

        EnvironmentService().ensure_running(self._record("[/bold]", env_id="[/x]"))

        self.assertIn("Environment [/x] is [/bold]", buffer.getvalue())
        start.assert_called_once_with("[/x]", verbose=False)


if __name__ == "__main__":
    unittest.main()
