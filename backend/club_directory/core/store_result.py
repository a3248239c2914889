"""Store Result — explicit outcome of every data-access operation.

Invariants:
    - Every repository call returns a StoreResult, never raises
    - status is exactly one of OK, NOT_FOUND, STORE_ERROR
    - NOT_FOUND and STORE_ERROR carry value=None, except list lookups,
      which carry an empty list so callers can iterate unconditionally
    - error is set only for STORE_ERROR

Design Decisions:
    - Frozen dataclass with classmethod constructors: results are values,
      created in one place per status
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class StoreStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    status: StoreStatus
    value: T | None = None
    error: str | None = None

    @classmethod
    def found(cls, value: T) -> "StoreResult[T]":
        return cls(StoreStatus.OK, value)

    @classmethod
    def not_found(cls) -> "StoreResult[T]":
        return cls(StoreStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: str, value: T | None = None) -> "StoreResult[T]":
        return cls(StoreStatus.STORE_ERROR, value, error)

    @property
    def ok(self) -> bool:
        return self.status is StoreStatus.OK

    @property
    def is_store_error(self) -> bool:
        return self.status is StoreStatus.STORE_ERROR
