"""Tests for command resolution."""

import pytest

from grcli_man_tool.manpage.core.resolver_operations import list_command_names, resolve_command
from grcli_man_tool.manpage.exceptions import CommandNotFoundError
from grcli_man_tool.manpage.models import GrammarNode, UnresolvedChild


def _top_level(grammar) -> list[GrammarNode]:
    return [node for _, node in grammar.commands.iter_children()]


def _seq_shape(name: str, *variants, help=None) -> GrammarNode:
    attrs = {"help": help} if help else {}
    return GrammarNode(
        "seq",
        children=(
            GrammarNode("str", desc=name, attrs=attrs),
            GrammarNode("or", id=name, children=tuple(variants)),
        ),
    )


class TestResolveCommand:
    """Test resolve_command."""

    def test_sequence_shape(self, sample_grammar):
        """Test that the alternation members become the variants."""
        resolved = resolve_command(_top_level(sample_grammar), "route")

        assert not resolved.standalone
        assert resolved.blurb == "Manage IP routes."
        assert len(resolved.variants) == 3
        assert resolved.variants[2].id == "show"

    def test_sequence_shape_wins_over_substring_ids(self):
        """Test that ids merely containing the name do not match."""
        variant = GrammarNode("str", desc="list")
        forest = [
            GrammarNode("cmd", id="router-id ID"),
            GrammarNode("cmd", id="show route"),
            _seq_shape("routes"),
            _seq_shape("route", variant),
        ]

        resolved = resolve_command(forest, "route")

        assert resolved.variants == (variant,)

    def test_first_match_wins(self):
        """Test that the first matching top-level node is used."""
        forest = [
            _seq_shape("nexthop", GrammarNode("str", desc="one"), help="first"),
            _seq_shape("nexthop", GrammarNode("str", desc="two"), help="second"),
        ]
        assert resolve_command(forest, "nexthop").blurb == "first"

    def test_name_is_case_sensitive(self, sample_grammar):
        """Test that the comparison is exact."""
        with pytest.raises(CommandNotFoundError):
            resolve_command(_top_level(sample_grammar), "Route")

    def test_command_shape_matches_leading_word(self, sample_grammar):
        """Test that only the word before the first space is compared."""
        resolved = resolve_command(_top_level(sample_grammar), "ping")

        assert resolved.standalone
        assert resolved.blurb == "Send ICMP echo requests."
        assert resolved.command_tail == " IFACE"
        assert resolved.variants[0].id == "ping IFACE"

    def test_command_shape_rejects_full_id(self, sample_grammar):
        """Test that the full multi-word id is not a command name."""
        with pytest.raises(CommandNotFoundError):
            resolve_command(_top_level(sample_grammar), "ping IFACE")

    def test_command_shape_single_word(self):
        """Test a command id without arguments."""
        resolved = resolve_command([GrammarNode("cmd", id="quit")], "quit")
        assert resolved.command_tail is None

    def test_other_types_are_skipped(self, sample_grammar):
        """Test that a literal top-level node never matches."""
        with pytest.raises(CommandNotFoundError, match="unknown command 'quit'"):
            resolve_command(_top_level(sample_grammar), "quit")

    def test_malformed_sequences_are_skipped(self):
        """Test that short or dangling sequences do not match."""
        forest = [
            GrammarNode("seq", children=(GrammarNode("or", id="route"),)),
            GrammarNode("seq", children=(GrammarNode("str"), UnresolvedChild("route"))),
            GrammarNode("seq", children=(GrammarNode("str"), GrammarNode("or", id="no-id"))),
        ]
        with pytest.raises(CommandNotFoundError):
            resolve_command(forest, "route")

    def test_not_found_carries_name(self):
        """Test that the error names the requested command."""
        with pytest.raises(CommandNotFoundError) as excinfo:
            resolve_command([], "bogus")
        assert excinfo.value.name == "bogus"


class TestListCommandNames:
    """Test list_command_names."""

    def test_lists_both_shapes_in_order(self, sample_grammar):
        """Test that every resolvable name is listed once."""
        assert list_command_names(_top_level(sample_grammar)) == ["route", "interface", "ping"]

    def test_every_listed_name_resolves(self, sample_grammar):
        """Test that listed names are accepted by resolve_command."""
        top_level = _top_level(sample_grammar)
        for name in list_command_names(top_level):
            assert resolve_command(top_level, name).name == name
