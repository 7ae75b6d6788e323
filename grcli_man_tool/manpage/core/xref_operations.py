"""
Cross-references between command pages.
"""

from collections.abc import Iterable

from ..constants import (
    SHELL_NAME,
    XREF_ADDRESS_IDS,
    XREF_INTERFACE_IDS,
    XREF_NEXTHOP_IDS,
    XREF_VRF_IDS,
)
from ..models import ArgumentEntry, CrossReferences
from ..utils import man_reference


def classify_arguments(entries: Iterable[ArgumentEntry]) -> CrossReferences:
    """
    Tag the categories mentioned by a command's arguments.

    Matching is on the argument id only.

    Args:
        entries: Collected argument entries

    Returns:
        Category flags
    """
    ids = {entry.id for entry in entries}
    return CrossReferences(
        mentions_interface=not ids.isdisjoint(XREF_INTERFACE_IDS),
        mentions_vrf=not ids.isdisjoint(XREF_VRF_IDS),
        mentions_nexthop=not ids.isdisjoint(XREF_NEXTHOP_IDS),
        mentions_address=not ids.isdisjoint(XREF_ADDRESS_IDS),
    )


def see_also(name: str, refs: CrossReferences, shell: str = SHELL_NAME) -> list[str]:
    """
    Build the SEE ALSO references of a command page.

    The shell page always comes first. A sibling page is never referenced
    from itself. VRF arguments point to the route page.

    Args:
        name: Documented command name
        refs: Category flags of the command's arguments
        shell: Shell name used as page prefix

    Returns:
        Formatted references, in output order
    """
    references = [man_reference(shell)]
    topics = [
        (refs.mentions_interface, "interface"),
        (refs.mentions_address, "address"),
        (refs.mentions_nexthop, "nexthop"),
        (refs.mentions_vrf, "route"),
    ]
    for mentioned, topic in topics:
        if mentioned and name != topic:
            references.append(man_reference(f"{shell}-{topic}"))
    return references
