"""
YAML mock fixtures.

Mocks can be declared in a YAML file using the same argument names as
create_mock's original interface:

    mocks:
      - package: Apache2::RequestRec
        methods:
          uri: !read_only /foo/bar
          status: null
        method_chains:
          - [foo, bar, baz, 42]

The ``!read_only`` tag wraps the tagged value with read_only().
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from mockobject.api import create_mock
from mockobject.errors import MockError
from mockobject.mock import Mock
from mockobject.readonly import read_only
from mockobject.registry import MockRegistry

logger = logging.getLogger(__name__)


class FixtureError(MockError):
    """Raised when a fixture file cannot be turned into mocks."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid mock fixtures in {source}: {reason}")


class FixtureLoader(yaml.SafeLoader):
    """SafeLoader that understands the !read_only tag."""


def _construct_read_only(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    if isinstance(node, yaml.MappingNode):
        value: Any = loader.construct_mapping(node, deep=True)
    elif isinstance(node, yaml.SequenceNode):
        value = loader.construct_sequence(node, deep=True)
    else:
        # Resolve the scalar as if it were untagged so !read_only 42 stays an int
        implicit = (node.style is None, node.style is not None)
        tag = loader.resolve(yaml.ScalarNode, node.value, implicit)
        value = loader.construct_object(
            yaml.ScalarNode(tag, node.value, node.start_mark, node.end_mark, node.style)
        )
    return read_only(value)


FixtureLoader.add_constructor("!read_only", _construct_read_only)


@dataclass
class MockDefinition:
    """One mock declared in a fixture file."""

    package: str
    methods: dict[str, Any] = field(default_factory=dict)
    method_chains: list[list[Any]] = field(default_factory=list)
    suppress_real_load: bool | None = None

    def build(self, registry: MockRegistry | None = None) -> Mock:
        """Create the mock this definition describes."""
        return create_mock(
            self.package,
            self.methods,
            self.method_chains,
            suppress_real_load=self.suppress_real_load,
            registry=registry,
        )


def parse_definitions(text: str, source: str = "<string>") -> list[MockDefinition]:
    """
    Parse mock definitions from YAML text.

    Raises:
        FixtureError: If the document is not valid YAML or not shaped as
            a list of mock definitions
    """
    try:
        data = yaml.load(text, Loader=FixtureLoader) or {}
    except yaml.YAMLError as e:
        raise FixtureError(source, str(e)) from e

    if not isinstance(data, dict) or not isinstance(data.get("mocks", []), list):
        raise FixtureError(source, "expected a top-level 'mocks' list")

    definitions = []
    for index, entry in enumerate(data.get("mocks", [])):
        if not isinstance(entry, dict):
            raise FixtureError(source, f"mock #{index + 1} is not a mapping")
        if not entry.get("package"):
            raise FixtureError(source, f"mock #{index + 1} has no package")

        methods = entry.get("methods") or {}
        chains = entry.get("method_chains") or []
        if not isinstance(methods, dict):
            raise FixtureError(source, f"methods of {entry['package']} must be a mapping")
        if not isinstance(chains, list) or not all(isinstance(c, list) for c in chains):
            raise FixtureError(
                source, f"method_chains of {entry['package']} must be a list of lists"
            )
        if not all(isinstance(name, str) for name in methods):
            raise FixtureError(source, f"method names of {entry['package']} must be strings")
        if not all(isinstance(name, str) for chain in chains for name in chain[:-1]):
            raise FixtureError(
                source, f"method_chains of {entry['package']}: method names must be strings"
            )

        definitions.append(
            MockDefinition(
                package=str(entry["package"]),
                methods=methods,
                method_chains=chains,
                suppress_real_load=entry.get("suppress_real_load"),
            )
        )

    logger.debug(f"Parsed {len(definitions)} mock definitions from {source}")
    return definitions


def load_definitions(path: Path) -> list[MockDefinition]:
    """Load mock definitions from a YAML file."""
    if not path.exists():
        raise FixtureError(str(path), "file not found")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FixtureError(str(path), f"cannot read file: {e}") from e
    return parse_definitions(text, source=str(path))


def build_mocks(
    definitions: list[MockDefinition],
    registry: MockRegistry | None = None,
) -> list[Mock]:
    """Create one mock per definition, in order."""
    return [definition.build(registry) for definition in definitions]


def load_mocks(path: Path, registry: MockRegistry | None = None) -> list[Mock]:
    """Load a fixture file and create its mocks."""
    return build_mocks(load_definitions(path), registry)
