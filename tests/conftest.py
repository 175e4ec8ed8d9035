"""Shared fixtures for add-status tests."""

import logging
from unittest.mock import MagicMock

import pytest

from add_status import Colors, JiraIssue, JiraStatusClient

FIELD_ID = "customfield_12345"


@pytest.fixture(autouse=True)
def no_colors():
    """Keep printed output free of ANSI codes."""
    Colors.disable_colors()


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers main() bound to a captured stdout."""
    yield
    logger = logging.getLogger("add-status")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)


@pytest.fixture
def make_issue():
    """Build a JiraIssue snapshot with the tracked field set to value."""

    def _make(key, value=None, summary="Some work", status="In Progress"):
        fields = {"summary": summary, "status": {"name": status}}
        if value is not None:
            fields[FIELD_ID] = value
        return JiraIssue(key=key, summary=summary, status=status, fields=fields)

    return _make


@pytest.fixture
def fake_client():
    """A JiraStatusClient stand-in that reads the field from the snapshot."""
    client = MagicMock(spec=JiraStatusClient)
    client.read_status.side_effect = lambda issue: (
        issue.fields.get(FIELD_ID)
        if isinstance(issue.fields.get(FIELD_ID), str)
        else None
    )
    client.update_status.return_value = None
    return client


@pytest.fixture
def mock_fields():
    """Return mock /field data."""
    return [
        {"id": "summary", "name": "Summary", "custom": False},
        {"id": "status", "name": "Status", "custom": False},
        {"id": "customfield_00001", "name": "Current Status", "custom": False},
        {"id": FIELD_ID, "name": "Current Status", "custom": True},
        {"id": "customfield_99999", "name": "Story Points", "custom": True},
    ]


@pytest.fixture
def make_response():
    """Build a mocked requests.Response."""

    def _make(status_code=200, json_data=None, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 400
        response.json.return_value = json_data
        response.text = text
        return response

    return _make


@pytest.fixture
def client():
    """A real JiraStatusClient with its HTTP session mocked out."""
    jira = JiraStatusClient("https://jira.example.com/", lambda: "secret-token")
    jira.session = MagicMock()
    return jira
