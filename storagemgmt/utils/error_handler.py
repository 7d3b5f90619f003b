import functools
import inspect
from typing import TypeVar, Callable, Optional
from loguru import logger
from ..exceptions import StorageMgmtException

T = TypeVar('T')


def log_exceptions(
    log_level: str = "ERROR",
    include_traceback: bool = True,
    custom_message: Optional[str] = None
):
    """
    Decorator to log exceptions.

    Args:
        log_level: Log level for exception logging
        include_traceback: Whether to include traceback in log
        custom_message: Custom message to include in log
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        def _log(e: Exception):
            message = custom_message or f"Exception in {func.__name__}"
            if include_traceback:
                logger.opt(exception=True).log(log_level, f"{message}: {e}")
            else:
                logger.log(log_level, f"{message}: {e}")

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                _log(e)
                raise

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                _log(e)
                raise

        # Return appropriate wrapper based on function type
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator


def convert_exceptions(exception_map: dict):
    """
    Decorator to convert exceptions to package exceptions.

    Package exceptions pass through untouched. Converted exceptions are
    chained to the original.

    Args:
        exception_map: Dictionary mapping exception types to either a
            StorageMgmtException subclass or a callable taking the original
            exception and returning the converted one
    """
    def _convert(e: Exception) -> Optional[Exception]:
        for source_exc, target in exception_map.items():
            if isinstance(e, source_exc):
                if inspect.isclass(target):
                    return target(str(e), details={"original_exception": type(e).__name__})
                return target(e)
        return None

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except StorageMgmtException:
                raise
            except Exception as e:
                converted = _convert(e)
                if converted is None:
                    raise
                raise converted from e

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except StorageMgmtException:
                raise
            except Exception as e:
                converted = _convert(e)
                if converted is None:
                    raise
                raise converted from e

        # Return appropriate wrapper based on function type
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
