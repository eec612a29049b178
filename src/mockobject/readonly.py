"""
Read-only method values.
"""

from dataclasses import dataclass, replace
from typing import Any

from mockobject.errors import ImmutableMethodError


@dataclass(frozen=True)
class ReadOnly:
    """
    Handler returning a fixed value and rejecting every write.

    The binder stamps the method name on a copy when installing it, so the
    error can say which method was written.

    Example:
        mock = create_mock("Apache2::RequestRec", {"uri": read_only("/foo/bar")})
        mock.uri()        # "/foo/bar"
        mock.uri("/x")    # ImmutableMethodError
    """

    value: Any
    method_name: str | None = None

    def named(self, method_name: str) -> "ReadOnly":
        return replace(self, method_name=method_name)

    def __call__(self, mock: Any, *args: Any, **kwargs: Any) -> Any:
        if args or kwargs:
            raise ImmutableMethodError(mock.__original_type_name__(), self.method_name)
        return self.value


def read_only(value: Any) -> ReadOnly:
    """Make a method value read-only."""
    return ReadOnly(value)
