"""
Tagged results returned by the repositories.

Repository operations never raise for expected outcomes.  They return a
:class:`Result` holding either the value or a :class:`RepositoryError`
whose ``kind`` the caller branches on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure kinds a repository can report."""

    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class RepositoryError:
    """A failed repository operation together with the offending id."""

    kind: ErrorKind
    entity: str
    id: int

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.ALREADY_EXISTS:
            return f"{self.entity} with id: {self.id} already exists"
        return f"{self.entity} with id: {self.id} does not exist"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a repository operation: a value or an error, never both."""

    value: Optional[T] = None
    error: Optional[RepositoryError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, entity: str, id: int) -> "Result[T]":
        return cls(error=RepositoryError(kind=kind, entity=entity, id=id))
