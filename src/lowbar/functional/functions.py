"""Function wrappers: call-once, memoization, deferred calls and throttling.

Each wrapper owns its own state (cached result, cache dict, last call time);
nothing is shared between wrappers or kept at module level.
"""

import asyncio
import functools
import logging
import threading
import time
import typing as tp

from pydantic import ConfigDict, TypeAdapter

from lowbar.core.types import Seconds

__all__ = [
    "once",
    "memoize",
    "delay",
    "throttle",
    "ScheduledTask",
]

logger = logging.getLogger(__name__)

# Strict: numeric strings and booleans are not delays
_seconds = TypeAdapter(Seconds, config=ConfigDict(strict=True))


def once(func: tp.Optional[tp.Callable[..., tp.Any]]) -> tp.Optional[tp.Callable[..., tp.Any]]:
    """Wrap ``func`` so it runs at most once.

    The first successful call's result is returned on every later call and the
    later arguments are ignored. A first call that raises does not count.

    Returns:
        The wrapper, or ``None`` when ``func`` is ``None``.
    """
    if func is None:
        return None

    called = False
    result: tp.Any = None

    @functools.wraps(func)
    def wrapper(*args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        nonlocal called, result
        if not called:
            result = func(*args, **kwargs)
            called = True
        return result

    return wrapper


def memoize(func: tp.Optional[tp.Callable[[tp.Any], tp.Any]]) -> tp.Optional[tp.Callable[[tp.Any], tp.Any]]:
    """Cache ``func`` results keyed by its single argument.

    The cache belongs to the returned wrapper and is exposed as
    ``wrapper.cache``; ``wrapper.cache_clear()`` empties it. Falsy results are
    cached like any other value. The argument must be hashable.

    Example:
        >>> square = memoize(lambda x: x * x)
        >>> square(4), square.cache
        (16, {4: 16})
    """
    if func is None:
        return None

    cache: tp.Dict[tp.Any, tp.Any] = {}

    @functools.wraps(func)
    def wrapper(key: tp.Any) -> tp.Any:
        if key in cache:
            logger.debug(f"memoize cache hit for {func!r} with key {key!r}")
            return cache[key]
        value = func(key)
        cache[key] = value
        return value

    wrapper.cache = cache  # type: ignore[attr-defined]
    wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
    return wrapper


class ScheduledTask:
    """Handle for a call scheduled by :func:`delay`.

    The task runs either on an asyncio event loop (``loop.call_later``) or on
    a daemon ``threading.Timer``; both can be cancelled until the call starts.
    """

    def __init__(
        self,
        func: tp.Callable[..., tp.Any],
        args: tp.Tuple[tp.Any, ...],
        kwargs: tp.Dict[str, tp.Any],
    ):
        self._func = func
        self._args = args
        self._kwargs = kwargs
        self._lock = threading.Lock()
        self._finished = threading.Event()
        self._handle: tp.Optional[tp.Union[asyncio.TimerHandle, threading.Timer]] = None
        self._started = False
        self._cancelled = False
        self._result: tp.Any = None

    def _attach(self, handle: tp.Union[asyncio.TimerHandle, threading.Timer]) -> None:
        self._handle = handle

    def _run(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._started = True
        try:
            self._result = self._func(*self._args, **self._kwargs)
        finally:
            self._finished.set()

    def cancel(self) -> bool:
        """Prevent the call from running.

        Returns:
            ``True`` if this call prevented the execution, ``False`` if the
            task had already started or was already cancelled.
        """
        with self._lock:
            if self._started or self._cancelled:
                return False
            self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
        self._finished.set()
        logger.debug(f"Cancelled delayed call to {self._func!r}")
        return True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        """True once the call has finished (or raised)."""
        return self._started and self._finished.is_set()

    @property
    def result(self) -> tp.Any:
        """Return value of the call, ``None`` until it has run."""
        return self._result

    def wait(self, timeout: tp.Optional[float] = None) -> bool:
        """Block until the task has finished or was cancelled.

        Only meaningful for timer-thread tasks; blocking inside the event loop
        would prevent a loop-scheduled task from ever running.
        """
        return self._finished.wait(timeout)

    def __repr__(self) -> str:
        if self._cancelled:
            state = "cancelled"
        elif self.done:
            state = "done"
        else:
            state = "pending"
        return f"ScheduledTask({self._func!r}, {state})"


def delay(
    func: tp.Callable[..., tp.Any], wait: float, *args: tp.Any, **kwargs: tp.Any
) -> ScheduledTask:
    """Call ``func(*args, **kwargs)`` no earlier than ``wait`` seconds from now.

    When called from inside a running asyncio loop the call is scheduled on
    that loop, otherwise on a daemon timer thread.

    Args:
        func: Callable to invoke.
        wait: Delay in seconds, must not be negative.
        *args: Positional arguments forwarded to ``func``.
        **kwargs: Keyword arguments forwarded to ``func``.

    Returns:
        A :class:`ScheduledTask` that can cancel the pending call.

    Raises:
        TypeError: If ``func`` is not callable.
        pydantic.ValidationError: If ``wait`` is negative or not a number.
    """
    if not callable(func):
        raise TypeError(f"Expected a callable, got {type(func).__name__}")
    wait = _seconds.validate_python(wait)

    task = ScheduledTask(func, args, kwargs)
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop is not None:
        task._attach(loop.call_later(wait, task._run))
        logger.debug(f"Scheduled {func!r} on event loop in {wait}s")
    else:
        timer = threading.Timer(wait, task._run)
        timer.daemon = True
        task._attach(timer)
        timer.start()
        logger.debug(f"Scheduled {func!r} on timer thread in {wait}s")
    return task


def throttle(
    func: tp.Callable[..., tp.Any],
    wait: float,
    clock: tp.Callable[[], float] = time.monotonic,
) -> tp.Callable[..., tp.Any]:
    """Wrap ``func`` so it runs at most once per ``wait`` seconds.

    The first call in a window invokes ``func``; further calls inside the
    window return the most recent result without invoking it. The wrapper's
    ``reset()`` reopens the window immediately.

    Args:
        func: Callable to throttle.
        wait: Window length in seconds.
        clock: Monotonic time source, injectable for tests.
    """
    wait = _seconds.validate_python(wait)

    last_call: tp.Optional[float] = None
    last_result: tp.Any = None

    @functools.wraps(func)
    def wrapper(*args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        nonlocal last_call, last_result
        now = clock()
        if last_call is not None and now - last_call < wait:
            logger.debug(f"Throttled call to {func!r}")
            return last_result
        last_call = now
        last_result = func(*args, **kwargs)
        return last_result

    def reset() -> None:
        nonlocal last_call
        last_call = None

    wrapper.reset = reset  # type: ignore[attr-defined]
    return wrapper
