"""
Argument collection over grammar subtrees.
"""

from collections.abc import Iterable

from ..exceptions import ArgumentCollectionError
from ..logging_config import get_logger
from ..models import ARGUMENT_TYPES, ArgumentEntry, GrammarNode

logger = get_logger(__name__)


def collect_arguments(
    node: GrammarNode, entries: dict[str, ArgumentEntry] | None = None
) -> dict[str, ArgumentEntry]:
    """
    Collect named argument nodes under a subtree.

    Walks the subtree pre-order, depth first. A node is collected when it
    has a real id, is a value type (uint, int, dyn, re) and its id was not
    collected before. Children are always visited, collected or not.

    Args:
        node: Subtree root
        entries: Entries collected so far, shared to dedup across subtrees

    Returns:
        Entries keyed by id, in first-occurrence order

    Raises:
        ArgumentCollectionError: If the entry store cannot grow
    """
    if entries is None:
        entries = {}

    node_id = node.id if node.has_id else None
    if node_id is not None and node.type in ARGUMENT_TYPES and node_id not in entries:
        try:
            entries[node_id] = ArgumentEntry(id=node_id, node=node)
        except MemoryError as e:
            raise ArgumentCollectionError("memory allocation failed") from e
        logger.debug(f"Collected argument '{node_id}' ({node.type.name})")

    for _, child in node.iter_children():
        collect_arguments(child, entries)

    return entries


def collect_variant_arguments(variants: Iterable[GrammarNode]) -> list[ArgumentEntry]:
    """
    Collect the arguments of all variants of a command.

    Deduplication spans all variants: an id documented by an earlier
    variant is not repeated for a later one.

    Args:
        variants: Variant subtrees, in documentation order

    Returns:
        Argument entries in first-occurrence order

    Raises:
        ArgumentCollectionError: If the entry store cannot grow
    """
    entries: dict[str, ArgumentEntry] = {}
    for variant in variants:
        collect_arguments(variant, entries)
    return list(entries.values())
