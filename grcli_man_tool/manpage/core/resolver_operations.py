"""
Command lookup in the top-level grammar.

Two top-level shapes document a command:

- sequence shape: (Literal, Alternation) where the alternation id is the
  command name and each alternation member is one variant;
- command shape: a single command whose id starts with the command name,
  followed by its arguments after the first space.
"""

from collections.abc import Iterable

from ..exceptions import ChildLookupError, CommandNotFoundError
from ..logging_config import get_logger
from ..models import GrammarNode, NodeType, ResolvedCommand
from ..utils import command_head

logger = get_logger(__name__)


def _match_sequence(node: GrammarNode, name: str) -> ResolvedCommand | None:
    if node.children_count < 2:
        return None
    try:
        str_node = node.get_child(0)
        or_node = node.get_child(1)
    except ChildLookupError as e:
        logger.debug(f"Skipping malformed sequence: {e}")
        return None

    if not or_node.has_id or or_node.id != name:
        return None

    variants = tuple(child for _, child in or_node.iter_children())
    return ResolvedCommand(name=name, variants=variants, blurb=str_node.help)


def _match_command(node: GrammarNode, name: str) -> ResolvedCommand | None:
    if not node.has_id or not node.id:
        return None

    head, tail = command_head(node.id)
    if head != name:
        return None

    return ResolvedCommand(
        name=head,
        variants=(node,),
        blurb=node.help,
        command_tail=tail,
        standalone=True,
    )


def resolve_command(top_level: Iterable[GrammarNode], name: str) -> ResolvedCommand:
    """
    Find the subtree documenting a command.

    Top-level nodes are tried in order and the first match wins. Names are
    compared exactly (case-sensitive); for the command shape only the part
    of the id before the first space is compared.

    Args:
        top_level: Children of the top-level command list
        name: Requested command name

    Returns:
        Resolved command with its variants and descriptive blurb

    Raises:
        CommandNotFoundError: If no top-level node matches
    """
    for node in top_level:
        node_type = node.type
        if node_type == NodeType.SEQUENCE:
            resolved = _match_sequence(node, name)
        elif node_type == NodeType.COMMAND:
            resolved = _match_command(node, name)
        else:
            continue

        if resolved is not None:
            logger.info(
                f"Resolved '{name}' to {len(resolved.variants)} variant(s)"
                f" ({'command' if resolved.standalone else 'sequence'} shape)"
            )
            return resolved

    raise CommandNotFoundError(name)


def list_command_names(top_level: Iterable[GrammarNode]) -> list[str]:
    """
    List the command names that resolve_command accepts, in tree order.

    Args:
        top_level: Children of the top-level command list

    Returns:
        Unique command names
    """
    names: list[str] = []
    for node in top_level:
        name = None
        if node.type == NodeType.SEQUENCE and node.children_count >= 2:
            try:
                or_node = node.get_child(1)
            except ChildLookupError:
                continue
            if or_node.has_id:
                name = or_node.id
        elif node.type == NodeType.COMMAND and node.has_id and node.id:
            name = command_head(node.id)[0]

        if name and name not in names:
            names.append(name)
    return names
