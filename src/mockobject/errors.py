"""
Mock error taxonomy.

Every failure raised by mockobject derives from MockError. Mocks are
test tooling, so nothing here is ever retried or suppressed: each error
propagates to the test that triggered it.
"""


class MockError(Exception):
    """Base class for all mock failures."""


class MissingPackageName(MockError):
    """Raised when a mock is created without a type name."""

    def __init__(self) -> None:
        super().__init__("Package required: create_mock() needs a type name")


class MissingNameError(MockError):
    """Raised when binding a method with an empty name."""

    def __init__(self, type_name: str | None = None):
        self.type_name = type_name
        where = f" on {type_name}" if type_name else ""
        super().__init__(f"Cannot bind a method without a name{where}")


class UnknownMethodError(MockError, AttributeError):
    """
    Raised when invoking or inspecting a method that was never bound.

    Also an AttributeError so that hasattr() and getattr() with a default
    behave as they do for ordinary objects.
    """

    def __init__(self, type_name: str, method_name: str):
        self.type_name = type_name
        self.method_name = method_name
        super().__init__(f"Can't locate method '{method_name}' via mock of {type_name}")


class ImmutableMethodError(MockError):
    """Raised when writing to a read-only method."""

    def __init__(self, type_name: str, method_name: str | None):
        self.type_name = type_name
        self.method_name = method_name
        super().__init__(f"{type_name}->{method_name} is read-only")


class ChainCollisionError(MockError):
    """Raised when a method chain would override an existing method."""

    def __init__(self, type_name: str, method_name: str):
        self.type_name = type_name
        self.method_name = method_name
        super().__init__(
            f"Cannot create method chain for {type_name} while overriding "
            f"an existing method: {method_name}"
        )


class MalformedChainError(MockError, ValueError):
    """Raised when a method chain has no method name or no terminal value."""

    def __init__(self, chain: object):
        self.chain = chain
        super().__init__(
            f"A method chain needs at least one method name and a final value: {chain!r}"
        )


class MalformedIdentityError(MockError):
    """Raised when an identity string was not issued by a registry."""

    def __init__(self, identity: object):
        self.identity = identity
        super().__init__(f"Malformed mock identity: {identity!r}")


class ReservedNameError(MockError):
    """Raised when a method name would be shadowed by the mock's own attributes."""

    def __init__(self, type_name: str, method_name: str):
        self.type_name = type_name
        self.method_name = method_name
        super().__init__(
            f"Cannot bind '{method_name}' on {type_name}: the name is used by the mock itself"
        )
