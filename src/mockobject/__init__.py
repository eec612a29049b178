"""
mockobject - Dead-simple mock objects for tests.

Declare the methods a test needs and get back an object that responds to
exactly those methods, counts how they were called, supports read-only
values and fluent method chains, and fails loudly on anything else.
"""

__version__ = "0.2.0"
__version_tuple__ = (0, 2, 0)

from mockobject.api import (
    add_chain,
    add_method,
    create_mock,
    describe_slots,
    dispose,
    get_all_call_stats,
    get_call_stats,
    identity_of,
    is_read_only,
    method_names,
    original_type_name,
    reset_calls,
    set_load_blocker,
)
from mockobject.errors import (
    ChainCollisionError,
    ImmutableMethodError,
    MalformedChainError,
    MalformedIdentityError,
    MissingNameError,
    MissingPackageName,
    MockError,
    ReservedNameError,
    UnknownMethodError,
)
from mockobject.mock import Mock
from mockobject.readonly import ReadOnly, read_only
from mockobject.registry import MockRegistry, get_registry
from mockobject.tracking import CallStats

__all__ = [
    "__version__",
    "__version_tuple__",
    # Construction
    "create_mock",
    "add_method",
    "add_chain",
    "read_only",
    "ReadOnly",
    "set_load_blocker",
    # Calls
    "reset_calls",
    "get_call_stats",
    "get_all_call_stats",
    "CallStats",
    # Inspection
    "identity_of",
    "original_type_name",
    "is_read_only",
    "method_names",
    "describe_slots",
    # Lifecycle
    "dispose",
    "Mock",
    "MockRegistry",
    "get_registry",
    # Errors
    "MockError",
    "MissingPackageName",
    "MissingNameError",
    "ReservedNameError",
    "UnknownMethodError",
    "ImmutableMethodError",
    "ChainCollisionError",
    "MalformedChainError",
    "MalformedIdentityError",
]
