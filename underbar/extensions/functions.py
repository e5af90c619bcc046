from __future__ import annotations
import logging
from functools import wraps
from ..types import *
from .iteration import strict_key

logger = logging.getLogger(__name__)


def once(fn: Callable[..., T]) -> Callable[..., T]:
    """
    returns a function that runs fn on its first call only. every later call, with
    any arguments, returns the first result. if the first call raises, nothing is
    cached and the next call tries again.
    """
    called = False
    result = None

    @wraps(fn)
    def wrapper(*args, **kwargs):
        nonlocal called, result
        if not called:
            result = fn(*args, **kwargs)
            called = True
            wrapper.called = True
        return result

    wrapper.called = False
    return wrapper


def memoize(fn: Callable[[T], U], hasher: Optional[Callable[[T], Any]] = None) -> Callable[[T], U]:
    """
    returns a single-argument function that caches fn's result per distinct argument.
    the store is private to the returned function and exposed as its `cache` attribute.
    hasher derives the cache key from the argument (e.g. for unhashable arguments).
    keys follow strict equality, so 1 and true are cached separately.
    """
    cache: Dict[Tuple[bool, Any], U] = {}

    @wraps(fn)
    def wrapper(argument):
        key = strict_key(hasher(argument) if hasher is not None else argument)
        if key in cache:
            return cache[key]
        logger.debug(f"memo miss in {getattr(fn, '__name__', fn)!r} for {key!r}")
        result = fn(argument)
        cache[key] = result
        return result

    wrapper.cache = cache
    return wrapper


def delay(fn: Callable[..., Any], wait_ms: float, *args: Any,
          scheduler: Optional[Scheduler] = None) -> None:
    """
    runs fn(*args) once, no earlier than wait_ms milliseconds from now, without
    blocking the caller. e.g. delay(greet, 500, 'a', 'b') calls greet('a', 'b')
    after 500ms. there is no way to cancel. the scheduler rejects negative waits.
    """
    if not callable(fn):
        raise TypeError(f"delay expects a callable, got {type(fn).__name__}")
    if scheduler is None:
        from ..config import default_scheduler
        scheduler = default_scheduler()
    scheduler.schedule(wait_ms, fn, *args)
