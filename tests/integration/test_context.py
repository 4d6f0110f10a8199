# tests/integration/test_context.py
import json
import pytest
from conventional_review.context import load_pull_request_context
from conventional_review.errors import ConfigurationError


def write_event(tmp_path, payload):
    path = tmp_path / "event.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


PULL_REQUEST_EVENT = {
    "action": "opened",
    "number": 1,
    "pull_request": {
        "number": 1,
        "title": "Add feature",
        "diff_url": "https://github.com/octo/demo/pull/1.diff",
    },
    "repository": {"name": "demo", "owner": {"login": "octo"}},
}


@pytest.mark.integration
def test_load_pull_request_context(tmp_path):
    context = load_pull_request_context(write_event(tmp_path, PULL_REQUEST_EVENT))

    assert context.details.owner == "octo"
    assert context.details.repo == "demo"
    assert context.details.pull_number == 1
    assert context.diff_url == "https://github.com/octo/demo/pull/1.diff"


@pytest.mark.integration
def test_push_event_has_no_diff_url(tmp_path):
    event = {"ref": "refs/heads/main", "repository": {"name": "demo", "owner": {"login": "octo"}}}

    with pytest.raises(ConfigurationError):
        load_pull_request_context(write_event(tmp_path, event))


@pytest.mark.integration
def test_missing_event_path():
    with pytest.raises(ConfigurationError):
        load_pull_request_context(None)


@pytest.mark.integration
def test_unreadable_event(tmp_path):
    path = tmp_path / "event.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_pull_request_context(str(path))
