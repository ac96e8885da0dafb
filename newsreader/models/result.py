"""Outcome of a gateway call: still loading, succeeded, or failed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Loading:
    pass


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    data: T


@dataclass(frozen=True, slots=True)
class Error:
    message: str
    exception: BaseException | None = None


LOADING = Loading()

ApiResult = Union[Loading, Success[T], Error]
