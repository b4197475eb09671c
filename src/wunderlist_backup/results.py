"""Outcome of a single API fetch."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Success:
    """A 2xx response with a parsed JSON body."""

    data: Any


@dataclass(frozen=True)
class Failure:
    """A non-2xx response. Never raised, only logged and returned."""

    status: int
    message: str


@dataclass(frozen=True)
class Empty:
    """A 2xx response without a body (or with a JSON ``null`` body)."""


ApiResult = Success | Failure | Empty


def unwrap(result: ApiResult) -> Any | None:
    """Return the data of a successful result, None otherwise."""
    if isinstance(result, Success):
        return result.data
    return None
