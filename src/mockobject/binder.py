"""
Method Binder - turns declared values and handlers into mock method slots.

A declared value becomes a slot in one of these ways:
- a callable (other than a class) is the handler itself
- a ReadOnly is a handler that rejects writes
- a ChainLink returns the next node of a method chain
- anything else is a stored value with a getter/setter handler

Every slot except the reserved ones is wrapped by the call tracker.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from mockobject.errors import MissingNameError, ReservedNameError
from mockobject.readonly import ReadOnly
from mockobject.tracking import CallStats, track_calls

logger = logging.getLogger(__name__)

ORIGINAL_TYPE_NAME = "__original_type_name__"
DISPOSE = "__dispose__"

# Reserved slots are never wrapped by the call tracker
RESERVED_METHODS = frozenset({ORIGINAL_TYPE_NAME, DISPOSE})


class StoredValue:
    """
    Getter/setter handler around a single value.

    Called without arguments it returns the value; called with an argument
    it stores the first one and returns None.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __call__(self, mock: Any, *args: Any) -> Any:
        if args:
            self.value = args[0]
            return None
        return self.value

    def __repr__(self) -> str:
        return f"StoredValue({self.value!r})"


@dataclass(frozen=True)
class ChainLink:
    """Handler returning the next node of a method chain, whatever the arguments."""

    node: Any

    def __call__(self, mock: Any, *args: Any, **kwargs: Any) -> Any:
        return self.node


@dataclass
class MethodSlot:
    """A bound mock method."""

    name: str
    target: Callable[..., Any]  # handler as declared
    handler: Callable[..., Any]  # what dispatch calls (tracked unless reserved)
    read_only: bool = False
    tracked: bool = True
    stats: CallStats = field(default_factory=CallStats)

    @property
    def kind(self) -> str:
        """Short description of how the slot behaves."""
        if not self.tracked:
            return "reserved"
        if isinstance(self.target, ChainLink):
            return "chain"
        if isinstance(self.target, ReadOnly):
            return "read-only"
        if isinstance(self.target, StoredValue):
            return "value"
        return "handler"

    @property
    def chain_node(self) -> Any | None:
        """The Chain Node this slot returns, if it is a chain link."""
        if isinstance(self.target, ChainLink):
            return self.target.node
        return None


def is_handler(value: Any) -> bool:
    """Check if a declared value is a handler rather than a stored value."""
    return callable(value) and not isinstance(value, type)


def require_name(mock: Any, name: str) -> None:
    """
    Raises:
        MissingNameError: If name is empty or not a string
        ReservedNameError: If attribute lookup would never reach the slot
    """
    if not name or not isinstance(name, str):
        raise MissingNameError(mock._mock_type_name)
    # Names the Mock class already resolves never fall through to __getattr__
    if name.startswith("_mock_") or hasattr(type(mock), name):
        raise ReservedNameError(mock._mock_type_name, name)


def bind(mock: Any, name: str, value: Any) -> MethodSlot:
    """
    Bind a method on a mock.

    Rebinding an existing name replaces the slot and starts its counters
    from zero.

    Args:
        mock: Mock to bind on
        name: Method name
        value: Handler or stored value

    Returns:
        The installed slot

    Raises:
        MissingNameError: If name is empty
        ReservedNameError: If name is shadowed by the mock itself
    """
    require_name(mock, name)

    if isinstance(value, ReadOnly):
        target: Callable[..., Any] = value.named(name)
    elif is_handler(value):
        target = value
    else:
        target = StoredValue(value)

    tracked = name not in RESERVED_METHODS
    stats = CallStats()
    slot = MethodSlot(
        name=name,
        target=target,
        handler=track_calls(target, stats) if tracked else target,
        read_only=isinstance(target, ReadOnly),
        tracked=tracked,
        stats=stats,
    )

    slots = mock._mock_slots
    if name in slots:
        logger.info(f"Method {name} already bound on {mock._mock_identity}, replacing")
    slots[name] = slot
    logger.debug(f"Bound {slot.kind} method {name} on {mock._mock_identity}")
    return slot
