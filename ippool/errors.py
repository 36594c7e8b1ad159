"""
Result types returned by the pool operations.

Operations never raise for an expected failure; they return either ``Ok``
wrapping the value or one of the ``PoolError`` variants below, and callers
branch on the type.
"""
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class PoolError:
    message: str
    status_code: ClassVar[int] = 400

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class InvalidCidrError(PoolError):
    status_code: ClassVar[int] = 400


@dataclass(frozen=True)
class MaskTooWideError(PoolError):
    status_code: ClassVar[int] = 400


@dataclass(frozen=True)
class NoPoolError(PoolError):
    status_code: ClassVar[int] = 404


@dataclass(frozen=True)
class AddressNotFoundError(PoolError):
    status_code: ClassVar[int] = 404


@dataclass(frozen=True)
class AlreadyAcquiredError(PoolError):
    status_code: ClassVar[int] = 409


@dataclass(frozen=True)
class AlreadyAvailableError(PoolError):
    status_code: ClassVar[int] = 409


@dataclass(frozen=True)
class PersistenceIOError(PoolError):
    status_code: ClassVar[int] = 500


Result = Union[Ok[T], PoolError]


__all__ = [
    "Ok",
    "Result",
    "PoolError",
    "InvalidCidrError",
    "MaskTooWideError",
    "NoPoolError",
    "AddressNotFoundError",
    "AlreadyAcquiredError",
    "AlreadyAvailableError",
    "PersistenceIOError",
]
