"""
The Mock object.

A Mock is a dispatch table of method slots plus identity metadata. Looking
up an attribute returns the bound slot; looking up anything that was not
bound raises UnknownMethodError.
"""

import logging
import weakref
from functools import partial
from typing import Any

from mockobject.binder import DISPOSE, ORIGINAL_TYPE_NAME, MethodSlot, bind
from mockobject.errors import UnknownMethodError
from mockobject.readonly import read_only
from mockobject.registry import MockRegistry, get_registry

logger = logging.getLogger(__name__)


class Mock:
    """
    Stand-in object responding only to its bound methods.

    Internal state lives in ``_mock_*`` attributes so it never shadows a
    bound method name. Use the module functions (add_method, get_call_stats,
    dispose, ...) rather than reaching inside.

    A mock is also a context manager; leaving the block disposes of it:

        with create_mock("Foo::Bar", {"name": "Ovid"}) as mock:
            assert mock.name() == "Ovid"
    """

    __slots__ = (
        "_mock_identity",
        "_mock_type_name",
        "_mock_slots",
        "_mock_registry",
        "_mock_finalizer",
        "__weakref__",
    )

    def __init__(self, identity: str, type_name: str, registry: MockRegistry):
        self._mock_identity = identity
        self._mock_type_name = type_name
        self._mock_slots: dict[str, MethodSlot] = {}
        self._mock_registry = registry
        # Releases the identity exactly once, on dispose or collection
        self._mock_finalizer = weakref.finalize(self, registry.release, identity)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_mock_"):
            raise AttributeError(name)
        slot = self._mock_slots.get(name)
        if slot is None:
            raise UnknownMethodError(self._mock_type_name, name)
        return partial(slot.handler, self)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._mock_slots))

    def __repr__(self) -> str:
        return f"<Mock {self._mock_identity} of {self._mock_type_name}>"

    def __enter__(self) -> "Mock":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        getattr(self, DISPOSE)()


def default_isa(mock: Mock, name: str) -> bool:
    """True if name is the mock's type name or its identity."""
    return name == mock._mock_type_name or name == mock._mock_identity


def _dispose(mock: Mock) -> None:
    if mock._mock_finalizer.alive:
        logger.debug(f"Disposing mock {mock._mock_identity}")
    mock._mock_finalizer()


def new_mock(type_name: str, registry: MockRegistry | None = None) -> Mock:
    """
    Create a bare mock with only its reserved methods bound.

    Args:
        type_name: Name of the type the mock stands in for
        registry: Registry to allocate the identity from (global by default)
    """
    registry = registry or get_registry()
    mock = Mock(registry.allocate_identity(type_name), type_name, registry)
    bind(mock, ORIGINAL_TYPE_NAME, read_only(type_name))
    bind(mock, DISPOSE, _dispose)
    return mock
