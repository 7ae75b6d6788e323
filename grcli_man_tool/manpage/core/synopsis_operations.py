"""
Synopsis rendering for grammar subtrees.

Two renderings exist: the usage line of a command, built recursively from
its grammar, and the per-option lines of the shell's global page.
"""

from enum import Enum

from ..constants import PLACEHOLDER_ARG, PLACEHOLDER_NUM
from ..exceptions import ChildLookupError
from ..logging_config import get_logger
from ..models import GrammarNode, NodeType
from ..utils import bold, italic

logger = get_logger(__name__)


class SyntaxMode(Enum):
    """Rendering context for option syntax."""

    SYNOPSIS = "synopsis"
    OPTION = "option"


def _placeholder(node: GrammarNode, fallback: str) -> str:
    return " " + italic(node.id if node.has_id and node.id else fallback)


def render_synopsis(node: GrammarNode, depth: int = 0) -> str:
    """
    Render the usage-line fragment of a grammar node.

    Every token is emitted with a leading space so fragments concatenate
    directly. Help text is never part of the fragment.

    Args:
        node: Grammar node
        depth: Recursion depth, 0 for the variant root

    Returns:
        Usage fragment (possibly empty)
    """
    node_type = node.type
    fragment = ""

    if node_type == NodeType.LITERAL:
        desc = node.description()
        if desc is not None:
            fragment = f" {desc}"

    elif node_type in (NodeType.UINT, NodeType.INT):
        fragment = _placeholder(node, PLACEHOLDER_NUM)

    elif node_type in (NodeType.DYNAMIC, NodeType.REGEX):
        fragment = _placeholder(node, PLACEHOLDER_ARG)

    elif node_type == NodeType.ALTERNATION:
        if node.children_count > 0:
            fragment = " ("
            for index, child in node.iter_children():
                if index > 0:
                    fragment += " |"
                fragment += render_synopsis(child, depth + 1)
            fragment += " )"

    elif node_type in (NodeType.SEQUENCE, NodeType.COMMAND):
        for _, child in node.iter_children():
            fragment += render_synopsis(child, depth + 1)

    elif node_type in (NodeType.OPTIONAL, NodeType.REPEATED):
        if node.children_count > 0:
            fragment = " ["
            for _, child in node.iter_children():
                fragment += render_synopsis(child, depth + 1)
            fragment += " ]"

    elif node_type == NodeType.SUBSET:
        for _, child in node.iter_children():
            fragment += " [" + render_synopsis(child, depth + 1) + " ]"

    else:
        logger.debug(f"No synopsis for '{node.type_name}' node at depth {depth}")

    return fragment


def _flag_names(or_node: GrammarNode, mode: SyntaxMode) -> str:
    """Render the flag spellings of an option, first only in synopsis mode."""
    names: list[str] = []
    for _, flag_node in or_node.iter_children():
        desc = flag_node.description()
        if desc is None:
            continue
        names.append(bold(desc))
        if mode == SyntaxMode.SYNOPSIS:
            break
    return ", ".join(names)


def render_option_syntax(option_node: GrammarNode, mode: SyntaxMode) -> str:
    """
    Render one option of the shell's global option list.

    Only the first child of the option is inspected. An alternation child
    holds the flag spellings; a sequence child holds the spellings first and
    the option argument second.

    Args:
        option_node: Top-level option node
        mode: SYNOPSIS for the bracketed usage line, OPTION for the entry
            of the OPTIONS section

    Returns:
        Rendered text, newline terminated; empty if the option has no
        resolvable first child
    """
    try:
        child = option_node.get_child(0)
    except ChildLookupError as e:
        logger.debug(f"Skipping option without syntax: {e}")
        return ""

    flags = ""
    arg_name = None

    if child.type == NodeType.ALTERNATION:
        flags = _flag_names(child, mode)
    elif child.type == NodeType.SEQUENCE and child.children_count >= 2:
        children = dict(child.iter_children())
        or_node = children.get(0)
        if or_node is not None and or_node.type == NodeType.ALTERNATION:
            flags = _flag_names(or_node, mode)
        arg_node = children.get(1)
        if arg_node is not None and arg_node.has_id and arg_node.id:
            arg_name = arg_node.id

    text = flags
    if arg_name is not None:
        text += " " + italic(arg_name.upper())

    if mode == SyntaxMode.SYNOPSIS:
        return f"[{text}]\n"

    text = f"#### {text}\n\n"
    if option_node.help is not None:
        text += f"{option_node.help}\n\n"
    return text
