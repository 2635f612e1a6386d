from __future__ import annotations

import json
import os
import tempfile
from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from approvals.exceptions import GitHubAPIError
from approvals.services import CommitRecord, RepositoryRef

COMMAND_MODULE = "approvals.management.commands.autoapprove_pull_request"


class AutoapprovePullRequestCommandTests(TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

        client_patcher = mock.patch(f"{COMMAND_MODULE}.GitHubClient")
        self.mock_client_cls = client_patcher.start()
        self.addCleanup(client_patcher.stop)
        self.mock_client = self.mock_client_cls.return_value
        self.mock_client.list_pull_request_commits.return_value = [
            CommitRecord(sha="a1", author_login="bot-x"),
            CommitRecord(sha="a2", author_login="bot-x"),
        ]

        self.event_path = self._write_event(
            {
                "pull_request": {
                    "number": 12,
                    "draft": False,
                    "head": {"repo": {"fork": False}},
                    "user": {"login": "bot-x"},
                },
                "repository": {"full_name": "octo/widgets"},
            }
        )
        self.environ = {
            "INPUT_GITHUB-TOKEN": "secret-token",
            "INPUT_ALLOWED-BOT-LOGINS": "bot-x",
            "GITHUB_EVENT_PATH": self.event_path,
            "GITHUB_REPOSITORY": "octo/widgets",
        }

    def _write_event(self, payload, name="event.json"):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(payload, handle)
        return path

    def run_command(self, environ=None, **options):
        stdout = StringIO()
        with mock.patch.dict(os.environ, environ or self.environ, clear=True):
            call_command("autoapprove_pull_request", stdout=stdout, **options)
        return stdout.getvalue()

    def test_bot_pull_request_is_approved(self):
        with self.assertLogs("approvals", level="INFO") as logs:
            output = self.run_command()

        self.mock_client_cls.assert_called_once_with("secret-token")
        self.mock_client.list_pull_request_commits.assert_called_once_with(
            RepositoryRef("octo", "widgets"), 12
        )
        self.mock_client.approve_pull_request.assert_called_once()
        repository, number, body = self.mock_client.approve_pull_request.call_args.args
        self.assertEqual(repository.full_name, "octo/widgets")
        self.assertEqual(number, 12)
        self.assertIn("2 commit(s)", body)
        self.assertIn("Approved octo/widgets#12", output)
        self.assertTrue(any("[bot-x]" in line for line in logs.output))

    def test_check_results_and_duration_are_logged(self):
        with self.assertLogs("approvals", level="DEBUG") as logs:
            self.run_command(dry_run=True)

        self.assertTrue(any("Check draft [ok]" in line for line in logs.output))
        self.assertTrue(any("Check commit-authors [ok]" in line for line in logs.output))
        self.assertTrue(any("Ran 3 check(s) in" in line for line in logs.output))
        self.assertTrue(any("Ran 5 check(s) in" in line for line in logs.output))

    def test_outcome_lines_include_decision_label(self):
        with self.assertLogs("approvals", level="INFO") as logs:
            self.run_command(dry_run=True)
        self.assertTrue(
            any("Auto-approved: all 2 commit(s)" in line for line in logs.output)
        )

        environ = dict(self.environ, **{"INPUT_ALLOWED-BOT-LOGINS": "other-bot"})
        with self.assertLogs("approvals", level="INFO") as logs:
            self.run_command(environ)
        self.assertTrue(
            any("Not auto-approved: PR author bot-x" in line for line in logs.output)
        )

    def test_untrusted_commit_is_not_approved(self):
        self.mock_client.list_pull_request_commits.return_value = [
            CommitRecord(sha="a1", author_login="bot-x"),
            CommitRecord(sha="b2", author_login="human-dev"),
        ]

        with self.assertLogs("approvals", level="INFO") as logs:
            self.run_command()

        self.mock_client.approve_pull_request.assert_not_called()
        self.assertTrue(any("(b2)" in line for line in logs.output))

    def test_empty_commit_list_is_not_approved(self):
        self.mock_client.list_pull_request_commits.return_value = []

        with self.assertLogs("approvals", level="INFO") as logs:
            self.run_command()

        self.mock_client.approve_pull_request.assert_not_called()
        self.assertTrue(any("No commits" in line for line in logs.output))

    def test_draft_is_skipped_without_fetching_commits(self):
        self.environ["GITHUB_EVENT_PATH"] = self._write_event(
            {"pull_request": {"number": 3, "draft": True, "user": {"login": "bot-x"}}},
            name="draft.json",
        )

        with self.assertLogs("approvals", level="INFO") as logs:
            self.run_command()

        self.mock_client.list_pull_request_commits.assert_not_called()
        self.mock_client.approve_pull_request.assert_not_called()
        self.assertTrue(any("draft" in line for line in logs.output))

    def test_untrusted_author_is_skipped(self):
        environ = dict(self.environ, **{"INPUT_ALLOWED-BOT-LOGINS": "other-bot"})

        with self.assertLogs("approvals", level="INFO") as logs:
            self.run_command(environ)

        self.mock_client.list_pull_request_commits.assert_not_called()
        self.assertTrue(any("PR author bot-x" in line for line in logs.output))

    def test_options_override_inputs(self):
        self.mock_client.list_pull_request_commits.return_value = [
            CommitRecord(sha="a1", committer_name="other-bot"),
        ]
        environ = dict(self.environ, **{"INPUT_ALLOWED-BOT-LOGINS": "nobody"})

        self.run_command(
            environ,
            allowed_bot_logins="other-bot",
            require_pr_author_is_bot="false",
            github_token="option-token",
        )

        self.mock_client_cls.assert_called_once_with("option-token")
        self.mock_client.approve_pull_request.assert_called_once()

    def test_dry_run_does_not_submit_review(self):
        self.run_command(dry_run=True)

        self.mock_client.list_pull_request_commits.assert_called_once()
        self.mock_client.approve_pull_request.assert_not_called()

    def test_no_pull_request_exits_cleanly(self):
        self.environ["GITHUB_EVENT_PATH"] = self._write_event({"action": "push"}, name="push.json")

        with self.assertLogs("approvals", level="INFO") as logs:
            self.run_command()

        self.mock_client_cls.assert_not_called()
        self.assertTrue(any("No pull_request" in line for line in logs.output))

    def test_missing_token_fails(self):
        environ = dict(self.environ)
        del environ["INPUT_GITHUB-TOKEN"]

        with self.assertRaises(CommandError) as ctx:
            self.run_command(environ)

        self.assertIn("github-token", str(ctx.exception))
        self.mock_client_cls.assert_not_called()

    def test_api_error_fails_run(self):
        self.mock_client.list_pull_request_commits.side_effect = GitHubAPIError(
            "GitHub API GET failed with status 502", status_code=502
        )
        stdout = StringIO()

        with mock.patch.dict(os.environ, self.environ, clear=True):
            with self.assertRaises(CommandError) as ctx:
                call_command("autoapprove_pull_request", stdout=stdout)

        self.assertIn("502", str(ctx.exception))
        self.assertIn("::error::", stdout.getvalue())
        self.mock_client.approve_pull_request.assert_not_called()

    def test_review_submission_error_fails_run(self):
        self.mock_client.approve_pull_request.side_effect = GitHubAPIError("forbidden", 403)

        with self.assertRaises(CommandError):
            self.run_command()


class ListChecksCommandTests(TestCase):
    def test_lists_checks_in_order(self):
        stdout = StringIO()
        call_command("list_checks", stdout=stdout)
        output = stdout.getvalue()

        self.assertLess(output.index("draft"), output.index("fork"))
        self.assertLess(output.index("pr-author"), output.index("commit-authors"))
        self.assertIn("[commits ]", output)
