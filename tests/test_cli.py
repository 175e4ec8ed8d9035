"""Tests for the add-status command line."""

from unittest.mock import MagicMock, patch

import pytest

import add_status
from add_status import (
    FieldResolutionError,
    QueryError,
    RunMode,
    StatusUpdateRequest,
    UpdateError,
    main,
    process_status_update,
    select_run_mode,
)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "add-status"
    path.write_text(
        "[jira]\nbase_url = https://jira.example.com\ndefault_jql = project = RM\n"
    )
    return str(path)


@pytest.fixture
def authenticated():
    with patch.object(
        add_status.CloudflaredAuth, "is_authenticated", return_value=True
    ), patch.object(add_status.CloudflaredAuth, "get_token", return_value="tok"):
        yield


def run_main(*argv):
    with pytest.raises(SystemExit) as excinfo:
        main(list(argv))
    return excinfo.value.code


class TestSelectRunMode:
    @pytest.mark.parametrize(
        "dry_run, yes, expected",
        [
            (False, False, RunMode.INTERACTIVE),
            (False, True, RunMode.APPLY_ALL),
            (True, False, RunMode.DRY_RUN),
            (True, True, RunMode.DRY_RUN),
        ],
    )
    def test_modes(self, dry_run, yes, expected):
        assert select_run_mode(dry_run, yes) is expected


class TestProcessStatusUpdate:
    """Tests for querying and dispatching a batch."""

    def test_no_matches(self, fake_client, capsys):
        fake_client.search_issues.return_value = []
        request = StatusUpdateRequest("On track", jql="project = NONE")

        result = process_status_update(fake_client, request, RunMode.APPLY_ALL)

        assert result is None
        fake_client.update_status.assert_not_called()
        out = capsys.readouterr().out
        assert "No tickets found matching the query." in out
        assert "JQL: project = NONE" in out

    def test_query_error_propagates(self, fake_client):
        fake_client.search_issues.side_effect = QueryError("Jira API error (500): x")
        request = StatusUpdateRequest("On track")

        with pytest.raises(QueryError):
            process_status_update(fake_client, request, RunMode.APPLY_ALL)

        fake_client.read_status.assert_not_called()
        fake_client.update_status.assert_not_called()

    def test_runs_batch(self, fake_client, make_issue):
        fake_client.search_issues.return_value = [make_issue("RM-1"), make_issue("RM-2")]
        request = StatusUpdateRequest("On track", add_date_prefix=False, jql="project = RM")

        state = process_status_update(fake_client, request, RunMode.APPLY_ALL)

        fake_client.search_issues.assert_called_once_with("project = RM")
        assert state.updated == 2
        fake_client.update_status.assert_any_call("RM-1", "On track")

    def test_prompt_is_used(self, fake_client, make_issue):
        fake_client.search_issues.return_value = [make_issue("RM-1")]
        prompt = MagicMock(return_value="n")
        request = StatusUpdateRequest("On track")

        state = process_status_update(
            fake_client, request, RunMode.INTERACTIVE, prompt=prompt
        )

        prompt.assert_called_once()
        assert state.skipped == 1


class TestMain:
    """Tests for exit codes of the update action."""

    def test_not_authenticated(self, config_file, capsys):
        with patch.object(
            add_status.CloudflaredAuth, "is_authenticated", return_value=False
        ), patch.object(add_status.JiraStatusClient, "search_issues") as search:
            code = run_main("--config", config_file, "update", "On track")

        assert code == 1
        search.assert_not_called()
        assert "Not authenticated" in capsys.readouterr().out

    def test_query_failure(self, config_file, authenticated, capsys):
        with patch.object(
            add_status.JiraStatusClient,
            "search_issues",
            side_effect=QueryError("Jira API error (400): bad JQL"),
        ):
            code = run_main("--config", config_file, "update", "On track")

        assert code == 1
        out = capsys.readouterr().out
        assert "Failed to search for tickets" in out
        assert "bad JQL" in out

    def test_field_resolution_failure(self, config_file, authenticated, capsys):
        with patch.object(
            add_status.JiraStatusClient,
            "search_issues",
            side_effect=FieldResolutionError('Could not find "Current Status"'),
        ):
            code = run_main("--config", config_file, "update", "On track")

        assert code == 1
        assert 'Could not find "Current Status"' in capsys.readouterr().out

    def test_missing_config(self, tmp_path, capsys):
        code = run_main("--config", str(tmp_path / "missing"), "update", "x")

        assert code == 1
        assert "create-config" in capsys.readouterr().out

    def test_per_ticket_failure_still_succeeds(
        self, config_file, authenticated, make_issue
    ):
        issues = [make_issue("RM-1"), make_issue("RM-2")]
        with patch.object(
            add_status.JiraStatusClient, "search_issues", return_value=issues
        ), patch.object(
            add_status.JiraStatusClient, "read_status", return_value=None
        ), patch.object(
            add_status.JiraStatusClient,
            "update_status",
            side_effect=[UpdateError("Jira API error (500): nope"), None],
        ) as update:
            main(["--config", config_file, "update", "On track", "--yes"])

        assert update.call_count == 2

    def test_uses_config_jql_and_flags(self, config_file, authenticated):
        with patch.object(add_status, "process_status_update") as process:
            main(
                [
                    "--config",
                    config_file,
                    "update",
                    "On track",
                    "--dry-run",
                    "--no-date-prefix",
                ]
            )

        client, request, mode = process.call_args.args
        assert request == StatusUpdateRequest(
            "On track", add_date_prefix=False, jql="project = RM"
        )
        assert mode is RunMode.DRY_RUN
        assert client.base_url == "https://jira.example.com"

    def test_jql_override(self, config_file, authenticated):
        with patch.object(add_status, "process_status_update") as process:
            main(["--config", config_file, "update", "x", "--jql", "key = RM-5"])

        _, request, mode = process.call_args.args
        assert request.jql == "key = RM-5"
        assert request.add_date_prefix is True
        assert mode is RunMode.INTERACTIVE

    def test_auth_action(self, config_file, capsys):
        with patch.object(add_status.CloudflaredAuth, "login") as login:
            main(["--config", config_file, "auth"])

        login.assert_called_once()
        assert "Authentication successful" in capsys.readouterr().out

    def test_auth_action_failure(self, config_file, capsys):
        with patch.object(
            add_status.CloudflaredAuth,
            "login",
            side_effect=add_status.AuthenticationError("Authentication failed"),
        ):
            code = run_main("--config", config_file, "auth")

        assert code == 1
        assert "Authentication failed" in capsys.readouterr().out

    def test_keyboard_interrupt(self, config_file, authenticated, capsys):
        with patch.object(
            add_status.JiraStatusClient, "search_issues", side_effect=KeyboardInterrupt
        ):
            code = run_main("--config", config_file, "update", "x", "--yes")

        assert code == 1
        assert "Operation cancelled." in capsys.readouterr().out

    def test_create_config(self, tmp_path, capsys):
        path = tmp_path / "cfg" / "add-status"

        main(["--config", str(path), "create-config"])

        assert path.exists()
        assert "[jira]" in path.read_text()
