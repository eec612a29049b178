"""
Call tracking for mock methods.
"""

import logging
from dataclasses import dataclass, replace
from functools import wraps
from typing import Any, Callable, Iterable

logger = logging.getLogger(__name__)


@dataclass
class CallStats:
    """How many times a method was called, split by whether it got arguments."""

    times_called: int = 0
    times_with_args: int = 0
    times_without_args: int = 0

    def record(self, with_args: bool) -> None:
        """Record a single invocation."""
        self.times_called += 1
        if with_args:
            self.times_with_args += 1
        else:
            self.times_without_args += 1

    def reset(self) -> None:
        """Set all counters back to zero."""
        self.times_called = 0
        self.times_with_args = 0
        self.times_without_args = 0

    def snapshot(self) -> "CallStats":
        """Get a detached copy of the counters."""
        return replace(self)

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "times_called": self.times_called,
            "times_with_args": self.times_with_args,
            "times_without_args": self.times_without_args,
        }


def track_calls(handler: Callable[..., Any], stats: CallStats) -> Callable[..., Any]:
    """
    Wrap a slot handler so every invocation is counted in stats.

    The wrapper never alters the handler's result.
    """

    @wraps(handler)
    def tracked(mock: Any, *args: Any, **kwargs: Any) -> Any:
        stats.record(bool(args or kwargs))
        return handler(mock, *args, **kwargs)

    return tracked


def reset_stats(slots: Iterable[Any]) -> None:
    """Zero the counters of every slot."""
    count = 0
    for slot in slots:
        slot.stats.reset()
        count += 1
    logger.debug(f"Reset call counters for {count} methods")
