"""
Public mock construction and inspection API.
"""

import logging
from typing import Any, Callable, Iterable, Mapping, Sequence

from mockobject.binder import DISPOSE, MethodSlot, bind
from mockobject.chain import build_chain
from mockobject.core.config import get_config
from mockobject.errors import MissingPackageName, UnknownMethodError
from mockobject.mock import Mock, default_isa, new_mock
from mockobject.registry import MockRegistry
from mockobject.tracking import CallStats, reset_stats

logger = logging.getLogger(__name__)

# Host-supplied hook that keeps the real type from being loaded
_load_blocker: Callable[[str], None] | None = None


def set_load_blocker(blocker: Callable[[str], None] | None) -> None:
    """
    Install the hook called for create_mock(..., suppress_real_load=True).

    mockobject never blocks anything itself; it only passes the type name on.
    """
    global _load_blocker
    _load_blocker = blocker


def create_mock(
    type_name: str,
    methods: Mapping[str, Any] | None = None,
    chains: Iterable[Sequence[Any]] | None = None,
    *,
    suppress_real_load: bool | None = None,
    registry: MockRegistry | None = None,
) -> Mock:
    """
    Create a mock standing in for an instance of type_name.

    Args:
        type_name: Name of the type being mocked (e.g. "Apache2::RequestRec")
        methods: Method name -> handler or stored value
        chains: Method chains, each a list of method names ending with the
            final value
        suppress_real_load: Pass type_name to the installed load blocker.
            None uses the configured default.
        registry: Registry to allocate identities from (global by default)

    Returns:
        The new mock

    Raises:
        MissingPackageName: If type_name is empty
        ChainCollisionError: If a chain collides with a plain method

    Example:
        request = create_mock(
            "Apache2::RequestRec",
            methods={
                "uri": read_only("/foo/bar"),
                "status": None,
                "param": lambda self, name: {"thing_id": 1001}.get(name),
            },
            chains=[["foo", "bar", "baz", 42]],
        )
        request.foo().bar().baz()  # 42
    """
    if not type_name:
        raise MissingPackageName()

    if suppress_real_load is None:
        suppress_real_load = get_config().suppress_real_load
    if suppress_real_load:
        if _load_blocker is None:
            logger.debug(f"No load blocker installed, {type_name} not blocked")
        else:
            _load_blocker(type_name)

    mock = new_mock(type_name, registry)

    for name, value in (methods or {}).items():
        bind(mock, name, value)

    # Chains go after methods so collisions with plain methods are caught
    for chain in chains or ():
        build_chain(mock, chain)

    if "isa" not in mock._mock_slots:
        bind(mock, "isa", default_isa)

    logger.debug(f"Created {mock!r} with {len(mock._mock_slots)} methods")
    return mock


def add_method(mock: Mock, name: str, value: Any) -> None:
    """
    Add (or replace) a method on an existing mock.

    A handler becomes the method; anything else becomes a getter/setter
    returning value. Use read_only(value) for a getter that rejects writes.
    """
    bind(mock, name, value)


def add_chain(mock: Mock, chain: Sequence[Any]) -> None:
    """Add a method chain to an existing mock."""
    build_chain(mock, chain)


def reset_calls(mock: Mock) -> None:
    """Reset the call counters of every method on the mock."""
    reset_stats(mock._mock_slots.values())


def dispose(mock: Mock) -> None:
    """Release the mock's identity. Safe to call more than once."""
    getattr(mock, DISPOSE)()


def _slot(mock: Mock, name: str) -> MethodSlot:
    slot = mock._mock_slots.get(name)
    if slot is None:
        raise UnknownMethodError(mock._mock_type_name, name)
    return slot


def get_call_stats(mock: Mock, name: str) -> CallStats:
    """
    Get a snapshot of a method's call counters.

    Raises:
        UnknownMethodError: If name was never bound
    """
    return _slot(mock, name).stats.snapshot()


def get_all_call_stats(mock: Mock) -> dict[str, CallStats]:
    """Get call counter snapshots for every tracked method."""
    return {
        name: slot.stats.snapshot()
        for name, slot in sorted(mock._mock_slots.items())
        if slot.tracked
    }


def is_read_only(mock: Mock, name: str) -> bool:
    """Check if a bound method rejects writes."""
    return _slot(mock, name).read_only


def identity_of(mock: Mock) -> str:
    """Get the mock's unique identity (e.g. "Foo_Bar#3")."""
    return mock._mock_identity


def original_type_name(mock: Mock) -> str:
    """Get the type name the mock stands in for."""
    return mock._mock_type_name


def method_names(mock: Mock) -> list[str]:
    """Get the names of all bound methods, reserved ones included."""
    return sorted(mock._mock_slots)


def describe_slots(mock: Mock) -> list[dict[str, Any]]:
    """Describe every bound method for display."""
    return [
        {
            "name": slot.name,
            "kind": slot.kind,
            "read_only": slot.read_only,
            "tracked": slot.tracked,
        }
        for _, slot in sorted(mock._mock_slots.items())
    ]
