"""Walk a Wunderlist account and build the backup document."""

from typing import Any

from loguru import logger

from wunderlist_backup.backup import Backup
from wunderlist_backup.protocols import ApiProtocol
from wunderlist_backup.resources import EXTRA_LIST_KINDS, LIST_KINDS, ResourceKind
from wunderlist_backup.results import unwrap


def run_export(api: ApiProtocol, *, include_extras: bool = False) -> dict[str, Any]:
    """Fetch everything and return the backup document.

    Args:
        api: API client for fetching Wunderlist data.
        include_extras: Also fetch memberships, task comments and webhooks,
            which the default walk leaves empty.

    Returns:
        The backup document: ``{"user", "exported", "data"}``.
    """
    backup = Backup(api.user_id)
    logger.info("Initialized.")

    lists_result = api.resource(ResourceKind.LISTS)
    backup.add_result(ResourceKind.LISTS, lists_result)
    backup.add_result(ResourceKind.FOLDERS, api.resource(ResourceKind.FOLDERS))
    if include_extras:
        backup.add_result(ResourceKind.MEMBERSHIPS, api.resource(ResourceKind.MEMBERSHIPS))

    lists = _as_records(unwrap(lists_result))
    list_kinds = LIST_KINDS + EXTRA_LIST_KINDS if include_extras else LIST_KINDS
    logger.info("Processing {} lists...", len(lists))

    for index, wlist in enumerate(lists, start=1):
        list_id = wlist["id"]
        logger.info("   ... ({}/{}) {} ...", index, len(lists), wlist.get("title"))
        for kind in list_kinds:
            logger.info("      ... {}", kind.value)
            backup.add_result(kind, api.resource(kind, list_id))
            if kind is ResourceKind.TASKS:
                logger.info("      ... completed tasks")
                backup.add_result(ResourceKind.TASKS, api.completed_tasks(list_id))

    counts = backup.counts()
    summary = ", ".join(f"{counts[kind]} {kind.value}" for kind in ResourceKind if counts[kind])
    logger.info("Exported {}", summary or "nothing")
    return backup.to_document()


def _as_records(data: Any) -> list[dict[str, Any]]:
    """Lists response as a list of records; None or a single record is tolerated."""
    if data is None:
        return []
    if isinstance(data, list):
        return data
    return [data]
