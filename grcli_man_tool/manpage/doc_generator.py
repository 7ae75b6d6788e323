"""
Manual page generator for the grcli shell.

Pages are produced as markdown in the layout expected by the man page
converter: a title line and '=' rule, '#' section headings, bold command
names and italic placeholders.
"""

from typing import TextIO

import click

from .core.argument_operations import collect_variant_arguments
from .core.resolver_operations import resolve_command
from .core.synopsis_operations import SyntaxMode, render_option_syntax, render_synopsis
from .core.xref_operations import classify_arguments, see_also
from .exceptions import ChildLookupError
from .logging_config import get_logger
from .models import ArgumentEntry, GrammarNode, ManPageConfig, NodeType, ResolvedCommand
from .utils import bold, italic, man_reference, title_underline

logger = get_logger(__name__)

# Default sentence for arguments without help text
TYPE_DEFAULT_HELP = {
    NodeType.UINT: "Unsigned integer.",
    NodeType.INT: "Integer.",
    NodeType.LITERAL: "String.",
    NodeType.DYNAMIC: "Dynamic value.",
}


def generate_page_header(cmd_name: str, help_text: str | None, config: ManPageConfig) -> str:
    """
    Generate the title and NAME section of a command page.

    Args:
        cmd_name: Command name
        help_text: One-line description, may be missing
        config: Page configuration

    Returns:
        Markdown header
    """
    title = f'{config.shell.upper()}-{cmd_name} {config.section} "{config.product} {config.version}"'
    doc = f"{title}\n"
    doc += title_underline(title)
    doc += "# NAME\n\n"
    doc += f"{bold(f'{config.shell}-{cmd_name}')} -- {help_text or ''}\n\n"
    return doc


def _variant_help(variant: GrammarNode) -> str | None:
    """Help of a variant, taken from the leading keyword of a sequence."""
    if variant.type == NodeType.SEQUENCE:
        if variant.children_count < 2:
            return None
        try:
            return variant.get_child(0).help
        except ChildLookupError:
            return None
    return variant.help


def _first_variant_help(variants: tuple[GrammarNode, ...]) -> str | None:
    for variant in variants:
        if variant.help is not None:
            return variant.help
    return None


def generate_argument_help(entry: ArgumentEntry) -> str:
    """
    Generate the ARGUMENTS entry of one argument.

    Args:
        entry: Collected argument

    Returns:
        Markdown entry
    """
    doc = f"#### {italic(entry.id)}\n\n"

    help_text = entry.node.help
    if help_text is not None:
        return doc + f"{help_text}\n\n"

    default = TYPE_DEFAULT_HELP.get(entry.node.type)
    if default is not None:
        doc += f"{default}\n\n"
    return doc


def generate_command_details(resolved: ResolvedCommand, config: ManPageConfig) -> str:
    """
    Generate SYNOPSIS, ARGUMENTS and SEE ALSO of a multi-variant command.

    Args:
        resolved: Command resolved to its sequence shape
        config: Page configuration

    Returns:
        Markdown sections

    Raises:
        ArgumentCollectionError: If argument collection fails
    """
    name = resolved.name
    doc = "# SYNOPSIS\n\n"

    for variant in resolved.variants:
        doc += f"{bold(name)} {render_synopsis(variant)}\n"
        child_help = _variant_help(variant)
        if child_help is not None:
            doc += f"    {child_help}\n"
        doc += "\n"

    doc += "# ARGUMENTS\n\n"

    entries = collect_variant_arguments(resolved.variants)
    logger.info(f"Documenting {len(entries)} argument(s) for '{name}'")
    refs = classify_arguments(entries)

    for entry in entries:
        doc += generate_argument_help(entry)

    doc += "# SEE ALSO\n\n"
    doc += ", ".join(see_also(name, refs, config.shell))
    doc += "\n"
    return doc


def generate_standalone_command(resolved: ResolvedCommand, config: ManPageConfig) -> str:
    """
    Generate SYNOPSIS and SEE ALSO of a single command.

    Args:
        resolved: Command resolved to its command shape
        config: Page configuration

    Returns:
        Markdown sections
    """
    doc = "# SYNOPSIS\n\n"
    doc += f"{bold(resolved.name)}{resolved.command_tail or ''}\n\n"
    doc += "# SEE ALSO\n\n"
    doc += f"{man_reference(config.shell)}\n"
    return doc


def generate_command_page(
    commands: GrammarNode, requested_cmd: str, config: ManPageConfig | None = None
) -> str:
    """
    Generate the manual page of one command.

    Args:
        commands: Top-level command list of the grammar
        requested_cmd: Command name to document
        config: Page configuration (defaults apply when omitted)

    Returns:
        Complete markdown page

    Raises:
        CommandNotFoundError: If the command is unknown
        ArgumentCollectionError: If argument collection fails
    """
    config = config or ManPageConfig()
    top_level = [node for _, node in commands.iter_children()]
    resolved = resolve_command(top_level, requested_cmd)

    help_text = resolved.blurb
    if help_text is None and not resolved.standalone:
        help_text = _first_variant_help(resolved.variants)

    doc = generate_page_header(requested_cmd, help_text, config)
    if resolved.standalone:
        doc += generate_standalone_command(resolved, config)
    else:
        doc += generate_command_details(resolved, config)
    return doc


def generate_options_sections(options: GrammarNode, config: ManPageConfig) -> str:
    """
    Generate SYNOPSIS and OPTIONS of the shell page.

    Args:
        options: Top-level option list of the grammar
        config: Page configuration

    Returns:
        Markdown sections
    """
    doc = "# SYNOPSIS\n\n"
    doc += f"{bold(config.shell)}\n"
    for _, opt_node in options.iter_children():
        doc += render_option_syntax(opt_node, SyntaxMode.SYNOPSIS)
    doc += "...\n\n"

    doc += "# OPTIONS\n\n"
    for _, opt_node in options.iter_children():
        doc += render_option_syntax(opt_node, SyntaxMode.OPTION)
    return doc


def generate_main_page(options: GrammarNode | None, config: ManPageConfig | None = None) -> str:
    """
    Generate the manual page of the shell itself.

    Args:
        options: Top-level option list of the grammar, may be missing
        config: Page configuration (defaults apply when omitted)

    Returns:
        Complete markdown page
    """
    config = config or ManPageConfig()
    title = f'{config.shell.upper()} {config.section} "{config.product} {config.version}"'
    doc = f"{title}\n"
    doc += title_underline(title)
    doc += "# NAME\n\n"
    doc += f"{bold(config.shell)} -- {config.product} command line interface\n\n"

    if options is not None:
        doc += generate_options_sections(options, config)
    else:
        logger.warning("Grammar has no option tree, OPTIONS section omitted")
        doc += "# SYNOPSIS\n\n"
        doc += f"{bold(config.shell)}\n...\n\n"

    doc += "# ENVIRONMENT\n\n"
    for var, description in config.environment.items():
        doc += f"#### {bold(var)}\n\n"
        doc += description.replace("{sock_path}", config.sock_path) + "\n\n"

    doc += "# SEE ALSO\n\n"
    doc += f"{man_reference(config.product, '8')}\n\n"

    doc += "# REPORTING BUGS\n\n"
    doc += f"{config.reporting_bugs}\n"
    return doc


def display_doc(doc_content: str, output: TextIO | None = None) -> None:
    """
    Write a generated page.

    Args:
        doc_content: Markdown page
        output: Destination stream (stdout when omitted)
    """
    click.echo(doc_content, file=output, nl=False)
