from __future__ import annotations
from typing import Any, Awaitable, Callable, NoReturn, Optional, TypeVar, Union, overload

from loguru import logger

from .config import Settings, get_settings
from .errors import ConfigurationError
from .result import Failure, Result, Success, fail, is_result, succeed

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")

# Overloads below carry the flattened types: an inner Success[T] yields T, an
# inner Failure[F] adds F to the error side, anything else is wrapped as T.
# Without a converter the error side is the caught Exception. The Result
# overloads overlap the plain-T fallback on purpose; the first match wins.


@overload
def try_catch(fn: Callable[[], Success[T]], on_error: None = None) -> Result[T, Exception]: ...  # type: ignore[overload-overlap]
@overload
def try_catch(fn: Callable[[], Success[T]], on_error: Callable[[Exception], E]) -> Result[T, E]: ...  # type: ignore[overload-overlap]
@overload
def try_catch(fn: Callable[[], Failure[F]], on_error: None = None) -> Result[NoReturn, Union[F, Exception]]: ...  # type: ignore[overload-overlap]
@overload
def try_catch(fn: Callable[[], Failure[F]], on_error: Callable[[Exception], E]) -> Result[NoReturn, Union[F, E]]: ...  # type: ignore[overload-overlap]
@overload
def try_catch(fn: Callable[[], Result[T, F]], on_error: None = None) -> Result[T, Union[F, Exception]]: ...  # type: ignore[overload-overlap]
@overload
def try_catch(fn: Callable[[], Result[T, F]], on_error: Callable[[Exception], E]) -> Result[T, Union[F, E]]: ...  # type: ignore[overload-overlap]
@overload
def try_catch(fn: Callable[[], T], on_error: None = None) -> Result[T, Exception]: ...
@overload
def try_catch(fn: Callable[[], T], on_error: Callable[[Exception], E]) -> Result[T, E]: ...
def try_catch(
    fn: Callable[[], Any],
    on_error: Optional[Callable[[Exception], Any]] = None,
) -> Result[Any, Any]:
    """Run ``fn`` and capture its outcome as a Result.

    A plain return value is wrapped in ``Success``. A returned Result is passed
    through as is, so ``try_catch(lambda: fail("bad"))`` is ``Failure("bad")``
    rather than a Success holding a Failure. A Result-shaped mapping is
    rebuilt as the matching ``Success``/``Failure`` around the same payload.

    An exception raised by ``fn`` becomes ``Failure(on_error(exc))``, or
    ``Failure(exc)`` with the exception object itself when no converter is
    given. Exceptions raised by ``on_error`` are not captured.
    """
    try:
        value = fn()
    except Exception as exc:
        _report_fault("try_catch", fn, exc)
        return fail(on_error(exc) if on_error is not None else exc)
    return _flatten(value)


@overload
async def try_catch_async(  # type: ignore[overload-overlap]
    fn: Callable[[], Awaitable[Success[T]]], on_error: None = None
) -> Result[T, Exception]: ...
@overload
async def try_catch_async(  # type: ignore[overload-overlap]
    fn: Callable[[], Awaitable[Success[T]]], on_error: Callable[[Exception], E]
) -> Result[T, E]: ...
@overload
async def try_catch_async(  # type: ignore[overload-overlap]
    fn: Callable[[], Awaitable[Failure[F]]], on_error: None = None
) -> Result[NoReturn, Union[F, Exception]]: ...
@overload
async def try_catch_async(  # type: ignore[overload-overlap]
    fn: Callable[[], Awaitable[Failure[F]]], on_error: Callable[[Exception], E]
) -> Result[NoReturn, Union[F, E]]: ...
@overload
async def try_catch_async(  # type: ignore[overload-overlap]
    fn: Callable[[], Awaitable[Result[T, F]]], on_error: None = None
) -> Result[T, Union[F, Exception]]: ...
@overload
async def try_catch_async(  # type: ignore[overload-overlap]
    fn: Callable[[], Awaitable[Result[T, F]]], on_error: Callable[[Exception], E]
) -> Result[T, Union[F, E]]: ...
@overload
async def try_catch_async(fn: Callable[[], Awaitable[T]], on_error: None = None) -> Result[T, Exception]: ...
@overload
async def try_catch_async(fn: Callable[[], Awaitable[T]], on_error: Callable[[Exception], E]) -> Result[T, E]: ...
async def try_catch_async(
    fn: Callable[[], Awaitable[Any]],
    on_error: Optional[Callable[[Exception], Any]] = None,
) -> Result[Any, Any]:
    """Awaitable counterpart of :func:`try_catch`.

    The awaitable is created and awaited inside the capture, so exceptions
    raised after a suspension are captured too. Cancellation is not an
    ``Exception`` and propagates to the caller.
    """
    try:
        value = await fn()
    except Exception as exc:
        _report_fault("try_catch_async", fn, exc)
        return fail(on_error(exc) if on_error is not None else exc)
    return _flatten(value)


def _flatten(value: Any) -> Result[Any, Any]:
    if isinstance(value, (Success, Failure)):
        logger.trace("Passing through inner {variant}", variant=type(value).__name__)
        return value
    if is_result(value):
        logger.trace("Rebuilding Result from {record_type} record", record_type=type(value).__name__)
        if value["success"]:
            return Success(value["data"])
        return Failure(value["error"])
    return succeed(value)


def _report_fault(adapter: str, fn: Callable[..., Any], exc: Exception) -> None:
    settings = _fault_settings()
    if not settings.log_faults:
        return
    log = logger.opt(exception=exc) if settings.log_tracebacks else logger
    log.log(
        settings.fault_log_level.value,
        "{adapter} captured {fault_type} from {computation}",
        adapter=adapter,
        computation=_describe(fn),
        fault_type=type(exc).__name__,
    )


def _fault_settings() -> Settings:
    # Invalid settings must not turn a captured fault into a raised one.
    try:
        return get_settings()
    except ConfigurationError as ex:
        logger.warning("Ignoring invalid tryresult settings, fault logging disabled: {error}", error=ex.message)
        return Settings.model_construct()


def _describe(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
