"""tryresult (exception capture into typed results)

Public surface:
- Result, Success, Failure
- constructors: succeed, fail
- shape checks: is_result, is_success, is_failure
- adapters: try_catch, try_catch_async
- codec: to_dict, from_mapping, dumps, loads
- Settings, get_settings
"""

from .result import Result, Success, Failure, succeed, fail, is_result, is_success, is_failure
from .functional import try_catch, try_catch_async
from .codec import to_dict, from_mapping, dumps, loads
from .config import Settings, LogLevel, get_settings
from .errors import ResultError, ResultShapeError, ResultDecodeError, ResultEncodeError, ConfigurationError

__version__ = "1.0.0"

__all__ = [
    "Result",
    "Success",
    "Failure",
    "succeed",
    "fail",
    "is_result",
    "is_success",
    "is_failure",
    "try_catch",
    "try_catch_async",
    "to_dict",
    "from_mapping",
    "dumps",
    "loads",
    "Settings",
    "LogLevel",
    "get_settings",
    "ResultError",
    "ResultShapeError",
    "ResultDecodeError",
    "ResultEncodeError",
    "ConfigurationError",
]
