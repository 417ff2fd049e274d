from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class OutcomeKind(str, Enum):
    HIT = "Hit"
    MISS = "Miss"
    SUCCESS = "Success"
    CREATED = "Created"
    ALREADY_EXISTS = "AlreadyExists"
    ERROR = "Error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Hit(Generic[T]):
    value: T
    kind: OutcomeKind = field(default=OutcomeKind.HIT, init=False)


@dataclass(frozen=True)
class Miss:
    kind: OutcomeKind = field(default=OutcomeKind.MISS, init=False)


@dataclass(frozen=True)
class Success:
    kind: OutcomeKind = field(default=OutcomeKind.SUCCESS, init=False)


@dataclass(frozen=True)
class Created:
    kind: OutcomeKind = field(default=OutcomeKind.CREATED, init=False)


@dataclass(frozen=True)
class AlreadyExists:
    kind: OutcomeKind = field(default=OutcomeKind.ALREADY_EXISTS, init=False)


@dataclass(frozen=True)
class Error:
    """A failure reported by the cache service as a response, not raised."""

    error_code: str
    message: str = ""
    kind: OutcomeKind = field(default=OutcomeKind.ERROR, init=False)


CreateCacheOutcome = Union[Created, AlreadyExists, Error]
WriteOutcome = Union[Success, Error]
ReadOutcome = Union[Hit[T], Miss, Error]
