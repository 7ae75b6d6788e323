"""
Grammar document loading.

The grammar of the shell is exported by its command parser as a JSON
document::

    {
      "nodes": {"IFACE_ARG": {"type": "dyn", "id": "IFACE", "help": "..."}},
      "commands": {"type": "or", "children": [...]},
      "options": {"type": "or", "children": [...]}
    }

A child given as a string refers to an entry of "nodes". A reference
that does not exist is kept as an unresolved child and skipped while
rendering.
"""

import json
from pathlib import Path
from typing import Any

from ..constants import HELP_ATTR
from ..exceptions import GrammarLoadError
from ..logging_config import get_logger
from ..models import Grammar, GrammarNode, NodeType, UnresolvedChild

logger = get_logger(__name__)


def _optional_str(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        raise GrammarLoadError(f"Grammar node '{key}' must be a string: {raw!r}")
    return value


class _NodeBuilder:
    """Builds node views, sharing named nodes between references."""

    def __init__(self, named: dict[str, Any]):
        self.named = named
        self.built: dict[str, GrammarNode] = {}
        self.pending: set[str] = set()

    def child(self, raw: Any) -> GrammarNode | UnresolvedChild:
        if not isinstance(raw, str):
            return self.node(raw)

        if raw in self.built:
            return self.built[raw]
        if raw not in self.named:
            logger.info(f"Unresolved grammar reference '{raw}'")
            return UnresolvedChild(ref=raw)
        if raw in self.pending:
            raise GrammarLoadError(f"Grammar reference cycle through '{raw}'")

        self.pending.add(raw)
        node = self.node(self.named[raw])
        self.pending.discard(raw)
        self.built[raw] = node
        return node

    def node(self, raw: Any) -> GrammarNode:
        if not isinstance(raw, dict):
            raise GrammarLoadError(f"Grammar node must be an object, got {type(raw).__name__}")

        type_name = raw.get("type")
        if not isinstance(type_name, str):
            raise GrammarLoadError(f"Grammar node without type: {raw!r}")

        raw_attrs = raw.get("attrs", {})
        if not isinstance(raw_attrs, dict):
            raise GrammarLoadError(f"Grammar node 'attrs' must be an object: {raw!r}")
        attrs = {str(k): str(v) for k, v in raw_attrs.items()}
        help_text = _optional_str(raw, "help")
        if help_text is not None:
            attrs[HELP_ATTR] = help_text

        desc = _optional_str(raw, "desc")
        if desc is None:
            node_type = NodeType.from_type_name(type_name)
            if node_type == NodeType.LITERAL:
                desc = _optional_str(raw, "token")
            elif node_type == NodeType.REGEX:
                desc = _optional_str(raw, "pattern")

        raw_children = raw.get("children", [])
        if not isinstance(raw_children, list):
            raise GrammarLoadError(f"Grammar node 'children' must be a list: {raw!r}")

        children = tuple(self.child(c) for c in raw_children)
        return GrammarNode(
            type_name=type_name,
            id=_optional_str(raw, "id"),
            attrs=attrs,
            desc=desc,
            children=children,
        )


def parse_grammar(data: dict[str, Any]) -> Grammar:
    """
    Build the grammar trees from a decoded grammar document.

    Args:
        data: Decoded JSON document

    Returns:
        Grammar with the command tree and, if present, the option tree

    Raises:
        GrammarLoadError: If the document has no command tree or a node is malformed
    """
    if not isinstance(data, dict) or "commands" not in data:
        raise GrammarLoadError("Grammar document has no 'commands' tree")

    named = data.get("nodes", {})
    if not isinstance(named, dict):
        raise GrammarLoadError("Grammar 'nodes' must be an object")

    builder = _NodeBuilder(named)
    commands = builder.node(data["commands"])
    options = builder.node(data["options"]) if data.get("options") is not None else None

    logger.debug(
        f"Loaded grammar: {commands.children_count} top-level command node(s), "
        f"{options.children_count if options else 0} option(s)"
    )
    return Grammar(commands=commands, options=options)


def load_grammar(path: str | Path) -> Grammar:
    """
    Load a grammar document from disk.

    Args:
        path: Path to the JSON grammar document

    Returns:
        Parsed grammar

    Raises:
        GrammarLoadError: If the file cannot be read or parsed
    """
    logger.info(f"Loading grammar from {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise GrammarLoadError(f"Cannot read grammar '{path}': {e.strerror}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise GrammarLoadError(f"Invalid grammar JSON in '{path}': {e}") from e
    return parse_grammar(data)
