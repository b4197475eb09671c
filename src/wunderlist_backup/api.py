"""Wunderlist API client with an in-memory response cache."""

from typing import Any

import requests
from loguru import logger

from wunderlist_backup.config import ACCEPT_HEADER, API_BASE_URL, Credentials
from wunderlist_backup.resources import ResourceKind
from wunderlist_backup.results import ApiResult, Empty, Failure, Success, unwrap


class WunderlistApi:
    """Encapsulated Wunderlist API with caching.

    Responses are cached by exact request path, query string included, for the
    lifetime of the client. Cached entries are never invalidated. Only
    successful responses are cached.
    """

    def __init__(self, credentials: Credentials, *, base_url: str = API_BASE_URL) -> None:
        self.credentials = credentials
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.sess = requests.Session()
        self._cache: dict[str, Success | Empty] = {}
        self._user_id: int | None = None

        logger.debug(
            "API ready: base_url {!r}, access token {}, client id {}",
            self.base_url,
            "set" if credentials.access_token else "unset",
            "set" if credentials.client_id else "unset",
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": ACCEPT_HEADER}
        if self.credentials.access_token is not None:
            headers["X-Access-Token"] = self.credentials.access_token
        if self.credentials.client_id is not None:
            headers["X-Client-ID"] = self.credentials.client_id
        return headers

    def fetch(self, path: str) -> ApiResult:
        """GET a path relative to the base URL.

        HTTP errors are logged and returned as Failure. Transport errors
        (requests.RequestException) are not caught.
        """
        cached = self._cache.get(path)
        if cached is not None:
            logger.debug("Filled from cache: {!r}", path)
            return cached

        logger.debug("Making request: {!r}", path)
        r = self.sess.get(self.base_url + path, headers=self._headers())

        if not 200 <= r.status_code < 300:
            logger.error("HTTP {} - {}: GET {!r}", r.status_code, r.reason, path)
            return Failure(status=r.status_code, message=r.reason or "")

        data: Any = r.json() if r.content else None
        result: Success | Empty = Empty() if data is None else Success(data)
        self._cache[path] = result
        return result

    def get(self, path: str) -> Any | None:
        """GET a path, returning parsed JSON or None on failure."""
        return unwrap(self.fetch(path))

    @property
    def user_id(self) -> int:
        """Id of the account owning the credentials. Fetched once."""
        if self._user_id is None:
            user = self.get("user")
            if not isinstance(user, dict) or "id" not in user:
                msg = "Cannot resolve user id: 'user' request failed"
                raise RuntimeError(msg)
            self._user_id = user["id"]
        return self._user_id

    def resource(self, kind: ResourceKind, list_id: int | str | None = None) -> ApiResult:
        """Fetch the collection of a resource kind, per account or per list."""
        return self.fetch(kind.path(list_id))

    def completed_tasks(self, list_id: int | str) -> ApiResult:
        """Fetch completed tasks of a list. Cached apart from ``tasks``."""
        return self.fetch(f"{ResourceKind.TASKS.path(list_id)}&completed=true")

    def lists(self) -> Any | None:
        return unwrap(self.resource(ResourceKind.LISTS))

    def folders(self) -> Any | None:
        return unwrap(self.resource(ResourceKind.FOLDERS))

    def memberships(self) -> Any | None:
        return unwrap(self.resource(ResourceKind.MEMBERSHIPS))

    def tasks(self, list_id: int | str) -> Any | None:
        return unwrap(self.resource(ResourceKind.TASKS, list_id))

    def reminders(self, list_id: int | str) -> Any | None:
        return unwrap(self.resource(ResourceKind.REMINDERS, list_id))

    def subtasks(self, list_id: int | str) -> Any | None:
        return unwrap(self.resource(ResourceKind.SUBTASKS, list_id))

    def notes(self, list_id: int | str) -> Any | None:
        return unwrap(self.resource(ResourceKind.NOTES, list_id))

    def task_positions(self, list_id: int | str) -> Any | None:
        return unwrap(self.resource(ResourceKind.TASK_POSITIONS, list_id))

    def subtask_positions(self, list_id: int | str) -> Any | None:
        return unwrap(self.resource(ResourceKind.SUBTASK_POSITIONS, list_id))

    def task_comments(self, list_id: int | str) -> Any | None:
        return unwrap(self.resource(ResourceKind.TASK_COMMENTS, list_id))

    def webhooks(self, list_id: int | str) -> Any | None:
        return unwrap(self.resource(ResourceKind.WEBHOOKS, list_id))
