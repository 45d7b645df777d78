import logging
import time
from functools import wraps
from typing import Any, Callable, TypeVar, cast

logger = logging.getLogger(__name__)


F = TypeVar("F", bound=Callable[..., Any])


def profile_performance(func: F) -> F:
    """Log at DEBUG how long a document transform ran and how much text it was given.

    The document is taken to be the first positional argument when it is a string.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start
        if args and isinstance(args[0], str):
            logger.debug(
                "%s took %.4f seconds on %d characters", func.__name__, elapsed, len(args[0])
            )
        else:
            logger.debug("%s took %.4f seconds", func.__name__, elapsed)
        return result

    return cast(F, wrapper)
