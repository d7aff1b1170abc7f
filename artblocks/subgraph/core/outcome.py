"""Three-valued result of a contract-level fetch.

Every fetch resolves to exactly one of:

- ``Success(value)``: the query succeeded and produced a value
- ``Empty``: the query succeeded but the item is logically absent
- ``Failure(error)``: the request or the payload failed

``Empty`` and ``Failure`` stay distinct all the way to the caller. Callers
that only care about "got a value or not" can collapse them with
``value_or_none()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Fetch produced a value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def value_or_none(self) -> T | None:
        return self.value


@dataclass(frozen=True)
class Empty:
    """Fetch succeeded and the item does not exist."""

    @property
    def ok(self) -> bool:
        return True

    def unwrap_or(self, default: Any) -> Any:
        return default

    def value_or_none(self) -> None:
        return None


@dataclass(frozen=True)
class Failure:
    """Fetch failed.

    Attributes:
        error: The exception that abandoned the fetch
        contract_id: Contract the failing fetch targeted, if known
    """

    error: BaseException
    contract_id: str | None = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap_or(self, default: Any) -> Any:
        return default

    def value_or_none(self) -> None:
        return None


FetchOutcome = Union[Success[T], Empty, Failure]

EMPTY = Empty()
