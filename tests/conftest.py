"""Shared test fixtures."""

import json
from typing import Any

import pytest

from grcli_man_tool.manpage.core.grammar_loader import parse_grammar
from grcli_man_tool.manpage.models import Grammar, ManPageConfig


@pytest.fixture
def sample_grammar_data() -> dict[str, Any]:
    """Grammar document with both top-level shapes and a global option list."""
    return {
        "nodes": {
            "IFACE": {"type": "dyn", "id": "IFACE", "help": "Interface name."},
        },
        "commands": {
            "type": "or",
            "children": [
                {
                    "type": "seq",
                    "children": [
                        {"type": "str", "token": "route", "help": "Manage IP routes."},
                        {
                            "type": "or",
                            "id": "route",
                            "children": [
                                {
                                    "type": "seq",
                                    "children": [
                                        {"type": "str", "token": "add", "help": "Add a new route."},
                                        {"type": "re", "id": "DEST", "help": "Destination prefix."},
                                        {"type": "str", "token": "via"},
                                        {"type": "re", "id": "NH"},
                                        {
                                            "type": "option",
                                            "children": [
                                                {
                                                    "type": "seq",
                                                    "children": [
                                                        {"type": "str", "token": "vrf"},
                                                        {
                                                            "type": "uint",
                                                            "id": "VRF",
                                                            "help": "L3 routing domain ID.",
                                                        },
                                                    ],
                                                }
                                            ],
                                        },
                                    ],
                                },
                                {
                                    "type": "seq",
                                    "children": [
                                        {"type": "str", "token": "del", "help": "Delete a route."},
                                        {"type": "re", "id": "DEST"},
                                        {
                                            "type": "option",
                                            "children": [
                                                {
                                                    "type": "seq",
                                                    "children": [
                                                        {"type": "str", "token": "vrf"},
                                                        {"type": "uint", "id": "VRF"},
                                                    ],
                                                }
                                            ],
                                        },
                                    ],
                                },
                                {
                                    "type": "cmd",
                                    "id": "show",
                                    "help": "Show routes.",
                                    "children": [{"type": "str", "token": "show"}],
                                },
                            ],
                        },
                    ],
                },
                {
                    "type": "seq",
                    "children": [
                        {"type": "str", "token": "interface", "help": "Manage interfaces."},
                        {
                            "type": "or",
                            "id": "interface",
                            "children": [
                                {
                                    "type": "seq",
                                    "children": [
                                        {
                                            "type": "str",
                                            "token": "show",
                                            "help": "Show interface details.",
                                        },
                                        "IFACE",
                                    ],
                                },
                                {
                                    "type": "seq",
                                    "children": [
                                        {"type": "str", "token": "set"},
                                        "IFACE",
                                        {
                                            "type": "subset",
                                            "children": [
                                                {
                                                    "type": "seq",
                                                    "children": [
                                                        {"type": "str", "token": "mtu"},
                                                        {"type": "uint", "id": "MTU"},
                                                    ],
                                                },
                                                {
                                                    "type": "seq",
                                                    "children": [
                                                        {"type": "str", "token": "vrf"},
                                                        {"type": "uint", "id": "VRF"},
                                                    ],
                                                },
                                            ],
                                        },
                                    ],
                                },
                            ],
                        },
                    ],
                },
                {"type": "cmd", "id": "ping IFACE", "help": "Send ICMP echo requests."},
                {"type": "str", "token": "quit"},
            ],
        },
        "options": {
            "type": "or",
            "children": [
                {
                    "type": "option",
                    "help": "Show usage help and exit.",
                    "children": [
                        {
                            "type": "or",
                            "children": [
                                {"type": "str", "token": "-h"},
                                {"type": "str", "token": "--help"},
                            ],
                        }
                    ],
                },
                {
                    "type": "option",
                    "help": "Path to the control plane API socket.",
                    "children": [
                        {
                            "type": "seq",
                            "children": [
                                {
                                    "type": "or",
                                    "children": [
                                        {"type": "str", "token": "-s"},
                                        {"type": "str", "token": "--socket"},
                                    ],
                                },
                                {"type": "dyn", "id": "path"},
                            ],
                        }
                    ],
                },
            ],
        },
    }


@pytest.fixture
def sample_grammar(sample_grammar_data) -> Grammar:
    """Parsed sample grammar."""
    return parse_grammar(sample_grammar_data)


@pytest.fixture
def grammar_file(tmp_path, sample_grammar_data):
    """Sample grammar written to a JSON file."""
    path = tmp_path / "grcli.json"
    path.write_text(json.dumps(sample_grammar_data))
    return path


@pytest.fixture
def config() -> ManPageConfig:
    """Page configuration with a fixed version."""
    return ManPageConfig(version="0.9.1")
