"""
Chain Builder - nested mocks for fluent call sequences.

A chain such as ``["foo", "bar", "baz", 42]`` makes ``mock.foo().bar().baz()``
return 42. Every link but the last returns a Chain Node, a mock created
internally for that link. Chains that share leading method names are merged
into the existing nodes instead of colliding.
"""

import logging
from typing import Any, Sequence

from mockobject.binder import ChainLink, bind, require_name
from mockobject.errors import ChainCollisionError, MalformedChainError
from mockobject.mock import Mock, default_isa, new_mock

logger = logging.getLogger(__name__)


def chain_node_type_name(parent: Mock, method_name: str) -> str:
    """Synthetic type name for the node returned by parent.method_name()."""
    return f"{parent._mock_type_name}->{method_name}"


def build_chain(mock: Mock, chain: Sequence[Any]) -> None:
    """
    Build a method chain onto a mock.

    Args:
        mock: Mock receiving the first method of the chain
        chain: Method names followed by the terminal value

    Raises:
        MalformedChainError: If chain has fewer than two elements
        MissingNameError: If a method name is empty
        ChainCollisionError: If the first method is already bound to
            anything other than a Chain Node, or a Chain Node would be
            replaced by a terminal value
    """
    if isinstance(chain, (str, bytes)) or len(chain) < 2:
        raise MalformedChainError(chain)

    method_name, remainder = chain[0], list(chain[1:])
    require_name(mock, method_name)

    existing = mock._mock_slots.get(method_name)
    if existing is not None:
        node = existing.chain_node
        if node is None or len(remainder) == 1:
            raise ChainCollisionError(mock._mock_type_name, method_name)
        logger.debug(f"Merging chain {chain!r} into {node._mock_identity}")
        build_chain(node, remainder)
        return

    if len(remainder) == 1:
        bind(mock, method_name, remainder[0])
        return

    node = new_mock(chain_node_type_name(mock, method_name), mock._mock_registry)
    build_chain(node, remainder)
    if "isa" not in node._mock_slots:
        bind(node, "isa", default_isa)
    bind(mock, method_name, ChainLink(node))
