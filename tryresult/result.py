from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Literal, TypeGuard, TypeVar, Union, overload

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    success: Literal[True] = field(default=True, init=False, repr=False)
    data: T

    __match_args__ = ("data",)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": True, "data": self.data}


@dataclass(frozen=True)
class Failure(Generic[E]):
    success: Literal[False] = field(default=False, init=False, repr=False)
    error: E

    __match_args__ = ("error",)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error}


Result = Union[Success[T], Failure[E]]

# Constructors


@overload
def succeed() -> Success[None]: ...
@overload
def succeed(data: T) -> Success[T]: ...
def succeed(data: Any = None) -> Success[Any]:
    return Success(data)


def fail(error: E) -> Failure[E]:
    return Failure(error)


# Shape checks


def is_result(value: object) -> TypeGuard[Result[Any, Any]]:
    """Return True when *value* already has the Result shape.

    Instances of ``Success``/``Failure`` always qualify. Any other value must be
    a mapping whose ``success`` key is exactly ``True`` or ``False``, with a
    ``data`` key alongside ``True`` and an ``error`` key alongside ``False``.
    Only key presence is checked; the payload may be anything, ``None`` included.

    A plain record that happens to match this shape is indistinguishable from
    a Result and is treated as one.
    """
    if isinstance(value, (Success, Failure)):
        return True
    if not isinstance(value, Mapping) or "success" not in value:
        return False
    tag = value["success"]
    if tag is True:
        return "data" in value
    if tag is False:
        return "error" in value
    return False


def is_success(result: Result[T, E]) -> TypeGuard[Success[T]]:
    return isinstance(result, Success)


def is_failure(result: Result[T, E]) -> TypeGuard[Failure[E]]:
    return isinstance(result, Failure)
