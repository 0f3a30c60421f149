"""Explicit success/failure values returned by the gateway."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from sheetproxy.exceptions import GatewayError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: GatewayError


Result = Union[Ok[T], Err]
