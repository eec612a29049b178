"""
Mock Registry.

Issues process-unique identities per mocked type name and keeps track of
which identities are still held by a live mock.
"""

import logging
import re
import threading

from mockobject.errors import MalformedIdentityError

logger = logging.getLogger(__name__)

_IDENTITY_PATTERN = re.compile(r"^\w+#[1-9]\d*$")


def munge_type_name(type_name: str) -> str:
    """Flatten a type name into an identifier-safe prefix (Foo::Bar -> Foo_Bar)."""
    return re.sub(r"\W+", "_", type_name.replace("::", "_"))


class MockRegistry:
    """
    Registry for mock identities.

    Counters are per munged type name and only ever increase, so an identity
    is never handed out twice by the same registry.

    Example:
        registry = MockRegistry()
        identity = registry.allocate_identity("Foo::Bar")  # "Foo_Bar#1"
        registry.release(identity)
        registry.release(identity)  # no-op
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}
        self._live: set[str] = set()
        self._lock = threading.Lock()

    def allocate_identity(self, type_name: str) -> str:
        """
        Allocate a new identity for a mock of type_name.

        Args:
            type_name: Name of the type being mocked

        Returns:
            Identity string such as "Foo_Bar#3"
        """
        prefix = munge_type_name(type_name)
        with self._lock:
            number = self._counters.get(prefix, 0) + 1
            self._counters[prefix] = number
            identity = f"{prefix}#{number}"
            self._live.add(identity)

        logger.debug(f"Allocated mock identity {identity} for {type_name}")
        return identity

    def release(self, identity: str) -> None:
        """
        Release an identity.

        Releasing an unknown or already released identity is a no-op.

        Raises:
            MalformedIdentityError: If identity could not have been issued
        """
        if not isinstance(identity, str) or not _IDENTITY_PATTERN.match(identity):
            raise MalformedIdentityError(identity)

        with self._lock:
            if identity not in self._live:
                return
            self._live.discard(identity)

        logger.debug(f"Released mock identity {identity}")

    def is_live(self, identity: str) -> bool:
        """Check if an identity is held by a mock that has not been released."""
        with self._lock:
            return identity in self._live

    def live_identities(self) -> list[str]:
        """Get all identities that have not been released."""
        with self._lock:
            return sorted(self._live)

    def allocated_count(self, type_name: str) -> int:
        """Get how many identities were ever allocated for type_name."""
        with self._lock:
            return self._counters.get(munge_type_name(type_name), 0)


# =============================================================================
# GLOBAL REGISTRY
# =============================================================================

_registry: MockRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> MockRegistry:
    """Get the process-wide mock registry."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = MockRegistry()
        return _registry
