from time import perf_counter
from typing import Any, Callable, Dict, Optional
import logging


def timed(func: Callable, *args: Any, logger: Optional[logging.Logger] = None, **kwargs: Any) -> Dict[str, Any]:
    """Run *func* and add ``duration_s`` to the dict it returns.

    When *logger* is given the elapsed time is also logged at DEBUG level
    under the function's name.
    """
    started = perf_counter()
    result = func(*args, **kwargs)
    elapsed = round(perf_counter() - started, 3)
    if isinstance(result, dict):
        result["duration_s"] = elapsed
    if logger is not None:
        logger.debug("%s finished in %.3fs", getattr(func, "__name__", repr(func)), elapsed)
    return result
