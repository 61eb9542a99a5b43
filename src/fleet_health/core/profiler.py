import functools
import inspect
import logging
import time

logger = logging.getLogger(__name__)


class Profiler:
    """
    Provides a decorator that logs how long a pipeline stage took, for both
    plain functions and coroutines. Timings are logged at DEBUG.
    """

    @staticmethod
    def profile(func):
        def _log(started):
            logger.debug(
                f"[Profiler] {func.__qualname__} took {time.perf_counter() - started:.4f}s"
            )

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                started = time.perf_counter()
                try:
                    return await func(*args, **kwargs)
                finally:
                    _log(started)

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                _log(started)

        return sync_wrapper
