"""Wire format for Result values.

A Success is ``{"success": true, "data": ...}`` and a Failure is
``{"success": false, "error": ...}``; no other keys are allowed.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Union

import orjson

from .errors import ResultDecodeError, ResultEncodeError, ResultShapeError
from .result import Failure, Result, Success, is_result

_SUCCESS_KEYS = frozenset(("success", "data"))
_FAILURE_KEYS = frozenset(("success", "error"))


def to_dict(result: Result[Any, Any]) -> Dict[str, Any]:
    if not isinstance(result, (Success, Failure)):
        raise ResultShapeError(f"expected Success or Failure, got {type(result).__name__}", code="NOT_A_RESULT")
    return result.to_dict()


def from_mapping(record: Any) -> Result[Any, Any]:
    if isinstance(record, (Success, Failure)):
        return record
    if not is_result(record):
        raise ResultShapeError("record does not have the Result shape", code="INVALID_SHAPE")
    allowed = _SUCCESS_KEYS if record["success"] else _FAILURE_KEYS
    extra = set(record.keys()) - allowed
    if extra:
        raise ResultShapeError(f"unexpected keys: {', '.join(sorted(map(str, extra)))}", code="EXTRA_KEYS")
    if record["success"]:
        return Success(record["data"])
    return Failure(record["error"])


def dumps(result: Result[Any, Any], *, default: Optional[Callable[[Any], Any]] = None) -> bytes:
    payload = to_dict(result)
    try:
        return orjson.dumps(payload, default=default)
    except orjson.JSONEncodeError as ex:
        raise ResultEncodeError(f"cannot encode result: {ex}", code="ENCODE_FAILED") from ex


def loads(data: Union[bytes, bytearray, memoryview, str]) -> Result[Any, Any]:
    try:
        record = orjson.loads(data)
    except orjson.JSONDecodeError as ex:
        raise ResultDecodeError(f"invalid json: {ex}", code="DECODE_FAILED") from ex
    if not isinstance(record, Mapping):
        raise ResultShapeError(f"expected a JSON object, got {type(record).__name__}", code="INVALID_SHAPE")
    return from_mapping(record)
