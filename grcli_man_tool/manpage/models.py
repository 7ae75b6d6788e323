"""
Type models for grammar nodes and manual pages.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from .constants import (
    DEFAULT_SOCK_PATH,
    DEFAULT_VERSION,
    ENV_DPRC_DESCRIPTION,
    ENV_SOCK_PATH,
    ENV_SOCK_PATH_DESCRIPTION,
    HELP_ATTR,
    MAN_SECTION,
    NO_ID,
    PRODUCT_NAME,
    REPORTING_BUGS,
    SHELL_NAME,
)
from .exceptions import ChildLookupError
from .logging_config import get_logger

logger = get_logger(__name__)


class NodeType(Enum):
    """Grammar node types, keyed by the parser's type name."""

    LITERAL = "str"
    UINT = "uint"
    INT = "int"
    DYNAMIC = "dyn"
    REGEX = "re"
    ALTERNATION = "or"
    SEQUENCE = "seq"
    COMMAND = "cmd"
    OPTIONAL = "option"
    REPEATED = "many"
    SUBSET = "subset"
    UNKNOWN = "unknown"

    @classmethod
    def from_type_name(cls, type_name: str | None) -> "NodeType":
        """
        Map a parser type name to a node type.

        Args:
            type_name: Type name carried by the grammar (e.g., 'seq', 'uint')

        Returns:
            Matching node type, UNKNOWN for anything unrecognized
        """
        if type_name is None or type_name == cls.UNKNOWN.value:
            return cls.UNKNOWN
        try:
            return cls(type_name)
        except ValueError:
            return cls.UNKNOWN


# Types documented as arguments of a command
ARGUMENT_TYPES = frozenset({NodeType.UINT, NodeType.INT, NodeType.DYNAMIC, NodeType.REGEX})


@dataclass(frozen=True)
class UnresolvedChild:
    """Child slot whose reference could not be resolved."""

    ref: str


@dataclass(frozen=True)
class GrammarNode:
    """Read-only view over one node of the command grammar tree."""

    type_name: str
    id: str | None = None
    attrs: dict[str, str] = field(default_factory=dict)
    desc: str | None = None
    children: tuple["GrammarNode | UnresolvedChild", ...] = ()

    @property
    def type(self) -> NodeType:
        return NodeType.from_type_name(self.type_name)

    @property
    def has_id(self) -> bool:
        return self.id is not None and self.id != NO_ID

    @property
    def help(self) -> str | None:
        return self.attrs.get(HELP_ATTR)

    @property
    def children_count(self) -> int:
        return len(self.children)

    def description(self) -> str | None:
        return self.desc

    def get_child(self, index: int) -> "GrammarNode":
        """
        Look up a child by position.

        Args:
            index: Child position

        Returns:
            Child node

        Raises:
            ChildLookupError: If index is out of range or the child is dangling
        """
        if index < 0 or index >= len(self.children):
            raise ChildLookupError(f"No child at index {index} (count: {len(self.children)})")
        child = self.children[index]
        if isinstance(child, UnresolvedChild):
            raise ChildLookupError(f"Unresolved child reference '{child.ref}'")
        return child

    def iter_children(self) -> Iterator[tuple[int, "GrammarNode"]]:
        """Yield (index, child) pairs, skipping children that fail lookup."""
        for index in range(len(self.children)):
            try:
                yield index, self.get_child(index)
            except ChildLookupError as e:
                logger.debug(f"Skipping child {index} of '{self.id or self.type_name}': {e}")


@dataclass(frozen=True)
class ArgumentEntry:
    """Named argument collected under a command."""

    id: str
    node: GrammarNode


@dataclass(frozen=True)
class ResolvedCommand:
    """Subtree matched for a requested command name."""

    name: str
    variants: tuple[GrammarNode, ...]
    blurb: str | None = None
    # Set for the command shape: the id remainder after the first space
    command_tail: str | None = None
    standalone: bool = False


@dataclass(frozen=True)
class CrossReferences:
    """Semantic categories mentioned by a command's arguments."""

    mentions_interface: bool = False
    mentions_vrf: bool = False
    mentions_nexthop: bool = False
    mentions_address: bool = False


def _default_environment() -> dict[str, str]:
    return {
        "DPRC": ENV_DPRC_DESCRIPTION,
        ENV_SOCK_PATH: ENV_SOCK_PATH_DESCRIPTION,
    }


@dataclass
class ManPageConfig:
    """Static strings describing the documented shell."""

    shell: str = SHELL_NAME
    product: str = PRODUCT_NAME
    version: str = DEFAULT_VERSION
    section: str = MAN_SECTION
    sock_path: str = DEFAULT_SOCK_PATH
    # Variable name -> description; '{sock_path}' is substituted
    environment: dict[str, str] = field(default_factory=_default_environment)
    reporting_bugs: str = REPORTING_BUGS


@dataclass(frozen=True)
class Grammar:
    """Top-level trees of the shell grammar."""

    commands: GrammarNode
    options: GrammarNode | None = None
