"""Accumulate fetched collections into a single backup document."""

from datetime import datetime
from typing import Any

from loguru import logger

from wunderlist_backup.resources import ResourceKind
from wunderlist_backup.results import ApiResult, Failure, Success


class Backup:
    """Collect records per resource kind, in the order they were added.

    Repeated ``add`` calls for the same kind concatenate, so per-list results
    end up in list order.
    """

    def __init__(self, user_id: int, *, exported_at: datetime | None = None) -> None:
        self.user_id = user_id
        # Captured once, at construction, not at export time.
        self.exported_at = exported_at or datetime.now().astimezone()
        self._data: dict[ResourceKind, list[Any]] = {}

    def add(self, kind: ResourceKind, values: Any) -> None:
        """Append values to a kind.

        None adds nothing, a list or tuple adds each element, anything else
        is added as a single record.
        """
        items = self._data.setdefault(kind, [])
        if values is None:
            return
        if isinstance(values, list | tuple):
            items.extend(values)
        else:
            items.append(values)

    def add_result(self, kind: ResourceKind, result: ApiResult) -> None:
        """Append the data of a fetch result. Failed and empty results add nothing."""
        match result:
            case Success(data=data):
                self.add(kind, data)
            case Failure(status=status):
                logger.debug("Nothing added to {} (HTTP {})", kind.value, status)
            case _:
                logger.debug("Nothing added to {} (empty response)", kind.value)

    def get(self, kind: ResourceKind) -> list[Any]:
        return list(self._data.get(kind, []))

    def counts(self) -> dict[ResourceKind, int]:
        return {kind: len(self._data.get(kind, [])) for kind in ResourceKind}

    def to_document(self) -> dict[str, Any]:
        """Build the export document. All kinds are present, possibly empty."""
        return {
            "user": self.user_id,
            "exported": self.exported_at.isoformat(timespec="seconds"),
            "data": {kind.value: self.get(kind) for kind in ResourceKind},
        }
