"""Protocols for dependency injection in the backup tool."""

from typing import Protocol, runtime_checkable

from wunderlist_backup.resources import ResourceKind
from wunderlist_backup.results import ApiResult


@runtime_checkable
class ApiProtocol(Protocol):
    """Protocol for Wunderlist API clients."""

    @property
    def user_id(self) -> int:
        """Id of the account owning the access token."""
        ...

    def resource(self, kind: ResourceKind, list_id: int | str | None = None) -> ApiResult:
        """Fetch one resource collection."""
        ...

    def completed_tasks(self, list_id: int | str) -> ApiResult:
        """Fetch the completed tasks of a list."""
        ...
