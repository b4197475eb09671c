"""Resource kinds exported from a Wunderlist account."""

from enum import Enum, StrEnum


class Scope(Enum):
    """How a resource kind is fetched."""

    ACCOUNT = "account"
    LIST = "list"


class ResourceKind(StrEnum):
    """Kinds of data stored in a backup.

    Member order is the key order of the exported ``data`` mapping.
    """

    LISTS = "lists"
    TASKS = "tasks"
    REMINDERS = "reminders"
    SUBTASKS = "subtasks"
    NOTES = "notes"
    TASK_POSITIONS = "task_positions"
    SUBTASK_POSITIONS = "subtask_positions"
    FOLDERS = "folders"
    MEMBERSHIPS = "memberships"
    TASK_COMMENTS = "task_comments"
    WEBHOOKS = "webhooks"

    @property
    def scope(self) -> Scope:
        return _SCOPES[self]

    def path(self, list_id: int | str | None = None) -> str:
        """Build the API path for this kind.

        Account kinds take no list id; list-scoped kinds require one.
        """
        if self.scope is Scope.ACCOUNT:
            if list_id is not None:
                msg = f"{self.value!r} is fetched per account, got list_id {list_id!r}"
                raise ValueError(msg)
            return self.value
        if list_id is None:
            msg = f"{self.value!r} is fetched per list, list_id is required"
            raise ValueError(msg)
        return f"{self.value}?list_id={list_id}"


_SCOPES: dict[ResourceKind, Scope] = {
    ResourceKind.LISTS: Scope.ACCOUNT,
    ResourceKind.FOLDERS: Scope.ACCOUNT,
    ResourceKind.MEMBERSHIPS: Scope.ACCOUNT,
    ResourceKind.TASKS: Scope.LIST,
    ResourceKind.REMINDERS: Scope.LIST,
    ResourceKind.SUBTASKS: Scope.LIST,
    ResourceKind.NOTES: Scope.LIST,
    ResourceKind.TASK_POSITIONS: Scope.LIST,
    ResourceKind.SUBTASK_POSITIONS: Scope.LIST,
    ResourceKind.TASK_COMMENTS: Scope.LIST,
    ResourceKind.WEBHOOKS: Scope.LIST,
}

# Kinds fetched for every list by the default walk, in fetch order.
# Completed tasks are fetched right after TASKS and merged into it.
LIST_KINDS: tuple[ResourceKind, ...] = (
    ResourceKind.TASKS,
    ResourceKind.REMINDERS,
    ResourceKind.SUBTASKS,
    ResourceKind.NOTES,
    ResourceKind.TASK_POSITIONS,
    ResourceKind.SUBTASK_POSITIONS,
)

# Kinds the client exposes but the default walk skips.
EXTRA_LIST_KINDS: tuple[ResourceKind, ...] = (
    ResourceKind.TASK_COMMENTS,
    ResourceKind.WEBHOOKS,
)
