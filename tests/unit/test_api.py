"""Tests for WunderlistApi — HTTP client with caching."""

import json
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from wunderlist_backup.api import WunderlistApi
from wunderlist_backup.config import Credentials
from wunderlist_backup.resources import ResourceKind
from wunderlist_backup.results import Empty, Failure, Success


@pytest.fixture
def api_with_mock_session() -> tuple[WunderlistApi, MagicMock]:
    """Create a WunderlistApi with a mocked requests.Session."""
    with patch("wunderlist_backup.api.requests.Session") as mock_session_cls:
        mock_session = MagicMock()
        mock_session_cls.return_value = mock_session
        api = WunderlistApi(Credentials(access_token="tok", client_id="cid"))

    return api, mock_session


def _make_response(data: Any = None, *, status: int = 200, reason: str = "OK") -> MagicMock:
    """Create a mock HTTP response with given JSON data."""
    response = MagicMock()
    response.status_code = status
    response.reason = reason
    response.content = b"" if data is None else json.dumps(data).encode()
    response.json.return_value = data
    return response


def test_fetch_sends_credentials_and_accept_headers(
    api_with_mock_session: tuple[WunderlistApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response([])

    api.fetch("lists")

    url = mock_session.get.call_args[0][0]
    headers = mock_session.get.call_args[1]["headers"]
    assert url == "https://a.wunderlist.com/api/v1/lists"
    assert headers == {
        "Accept": "application/json; charset=utf-8",
        "X-Access-Token": "tok",
        "X-Client-ID": "cid",
    }


def test_fetch_omits_missing_credential_header() -> None:
    with patch("wunderlist_backup.api.requests.Session") as mock_session_cls:
        mock_session = MagicMock()
        mock_session_cls.return_value = mock_session
        api = WunderlistApi(Credentials(access_token="tok"))
    mock_session.get.return_value = _make_response([])

    api.fetch("lists")

    headers = mock_session.get.call_args[1]["headers"]
    assert "X-Client-ID" not in headers
    assert headers["X-Access-Token"] == "tok"


def test_fetch_returns_parsed_json_as_success(
    api_with_mock_session: tuple[WunderlistApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response([{"id": 1, "title": "Home"}])

    result = api.fetch("lists")

    assert result == Success([{"id": 1, "title": "Home"}])


def test_same_path_is_fetched_only_once(
    api_with_mock_session: tuple[WunderlistApi, MagicMock],
) -> None:
    """The second call returns the cached value without another request."""
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response([{"id": 5}])

    first = api.tasks(1)
    second = api.tasks(1)

    assert mock_session.get.call_count == 1
    assert second is first


def test_completed_tasks_is_cached_apart_from_tasks(
    api_with_mock_session: tuple[WunderlistApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.side_effect = [
        _make_response([{"id": 1}]),
        _make_response([{"id": 2, "completed": True}]),
    ]

    open_tasks = api.resource(ResourceKind.TASKS, 9)
    done_tasks = api.completed_tasks(9)

    urls = [c[0][0] for c in mock_session.get.call_args_list]
    assert urls == [
        "https://a.wunderlist.com/api/v1/tasks?list_id=9",
        "https://a.wunderlist.com/api/v1/tasks?list_id=9&completed=true",
    ]
    assert open_tasks == Success([{"id": 1}])
    assert done_tasks == Success([{"id": 2, "completed": True}])


def test_http_error_is_logged_and_returned_as_failure(
    api_with_mock_session: tuple[WunderlistApi, MagicMock],
    log_messages: list[str],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response(
        {"error": "boom"}, status=500, reason="Internal Server Error"
    )

    result = api.fetch("tasks?list_id=1")

    assert result == Failure(status=500, message="Internal Server Error")
    assert api.get("tasks?list_id=1") is None
    assert any("500 - Internal Server Error" in m for m in log_messages)


def test_failed_response_is_not_cached(
    api_with_mock_session: tuple[WunderlistApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.side_effect = [
        _make_response(status=404, reason="Not Found"),
        _make_response([{"id": 3}]),
    ]

    assert api.notes(3) is None
    assert api.notes(3) == [{"id": 3}]
    assert mock_session.get.call_count == 2


def test_empty_body_is_returned_as_empty(
    api_with_mock_session: tuple[WunderlistApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response(status=204, reason="No Content")

    assert api.fetch("webhooks?list_id=1") == Empty()
    assert api.webhooks(1) is None
    assert mock_session.get.call_count == 1


def test_transport_error_propagates(
    api_with_mock_session: tuple[WunderlistApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.side_effect = requests.ConnectionError("unreachable")

    with pytest.raises(requests.ConnectionError, match="unreachable"):
        api.lists()


def test_user_id_is_fetched_once(
    api_with_mock_session: tuple[WunderlistApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response({"id": 1234, "name": "Someone"})

    assert api.user_id == 1234
    assert api.user_id == 1234
    assert mock_session.get.call_count == 1
    assert mock_session.get.call_args[0][0].endswith("/user")


def test_user_id_raises_when_user_request_fails(
    api_with_mock_session: tuple[WunderlistApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response(status=401, reason="Unauthorized")

    with pytest.raises(RuntimeError, match="Cannot resolve user id"):
        _ = api.user_id


def test_base_url_gets_trailing_slash() -> None:
    with patch("wunderlist_backup.api.requests.Session"):
        api = WunderlistApi(Credentials(client_id="c"), base_url="http://localhost:8080/api")

    assert api.base_url == "http://localhost:8080/api/"


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("reminders", "reminders?list_id=2"),
        ("subtasks", "subtasks?list_id=2"),
        ("task_positions", "task_positions?list_id=2"),
        ("subtask_positions", "subtask_positions?list_id=2"),
        ("task_comments", "task_comments?list_id=2"),
    ],
)
def test_list_accessors_request_list_scoped_paths(
    api_with_mock_session: tuple[WunderlistApi, MagicMock], method: str, path: str
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response([{"id": 1}])

    assert getattr(api, method)(2) == [{"id": 1}]
    assert mock_session.get.call_args[0][0] == "https://a.wunderlist.com/api/v1/" + path


@pytest.mark.parametrize("method", ["folders", "memberships"])
def test_account_accessors_request_bare_paths(
    api_with_mock_session: tuple[WunderlistApi, MagicMock], method: str
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response([])

    assert getattr(api, method)() == []
    assert mock_session.get.call_args[0][0] == "https://a.wunderlist.com/api/v1/" + method
