# core/result.py
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """A query that succeeded and returned data"""
    value: T


@dataclass(frozen=True)
class Empty:
    """A query that succeeded but matched nothing"""
    pass


@dataclass(frozen=True)
class Failure:
    """A query the store could not answer"""
    reason: str


QueryResult = Union[Found[T], Empty, Failure]
