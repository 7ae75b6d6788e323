"""
Manual page commands.
"""

from collections.abc import Callable
from typing import Any, TextIO

import click

from ..constants import DEFAULT_SOCK_PATH, DEFAULT_VERSION, ENV_GRAMMAR, ENV_SOCK_PATH, ENV_VERSION
from ..core.grammar_loader import load_grammar
from ..core.resolver_operations import list_command_names
from ..doc_generator import display_doc, generate_command_page, generate_main_page
from ..exceptions import ManPageError
from ..logging_config import get_logger, setup_logging
from ..models import ManPageConfig
from ..utils import output_error

logger = get_logger(__name__)


def grammar_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every manual page command."""
    func = click.option(
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v INFO, -vv DEBUG)",
    )(func)
    func = click.option(
        "--sock-path",
        envvar=ENV_SOCK_PATH,
        default=DEFAULT_SOCK_PATH,
        show_default=True,
        help="Default control socket path shown in the ENVIRONMENT section",
    )(func)
    func = click.option(
        "--grout-version",
        envvar=ENV_VERSION,
        default=DEFAULT_VERSION,
        show_default=True,
        help="grout version shown in page titles",
    )(func)
    func = click.option(
        "--output",
        "-o",
        type=click.File("w"),
        default="-",
        help="Write the page to FILE instead of stdout",
    )(func)
    func = click.option(
        "--grammar",
        envvar=ENV_GRAMMAR,
        required=True,
        type=click.Path(dir_okay=False),
        help="JSON grammar exported by grcli",
    )(func)
    return func


@click.command("page")
@click.argument("command")
@grammar_options
@click.pass_context
def page_command(
    ctx: click.Context,
    command: str,
    grammar: str,
    output: TextIO,
    grout_version: str,
    sock_path: str,
    verbose: int,
) -> None:
    """Render the manual page of one grcli command.

    Examples:

    \b
        # Page of the route command
        grcli-man page route --grammar grcli.json

    \b
        # Convert to roff
        grcli-man page interface | go-md2man > grcli-interface.1
    """
    setup_logging(verbose)

    try:
        logger.info(f"Generating page for '{command}'")
        logger.debug(f"Grammar: {grammar}, Version: {grout_version}")

        tree = load_grammar(grammar)
        config = ManPageConfig(version=grout_version, sock_path=sock_path)
        doc = generate_command_page(tree.commands, command, config)
        display_doc(doc, output)

    except ManPageError as e:
        output_error(ctx, str(e))


@click.command("main")
@grammar_options
@click.pass_context
def main_page_command(
    ctx: click.Context,
    grammar: str,
    output: TextIO,
    grout_version: str,
    sock_path: str,
    verbose: int,
) -> None:
    """Render the grcli(1) page with the global options.

    Examples:

    \b
        grcli-man main --grammar grcli.json --grout-version 0.10.0
    """
    setup_logging(verbose)

    try:
        logger.info("Generating main page")
        tree = load_grammar(grammar)
        config = ManPageConfig(version=grout_version, sock_path=sock_path)
        display_doc(generate_main_page(tree.options, config), output)

    except ManPageError as e:
        output_error(ctx, str(e))


@click.command("list")
@grammar_options
@click.pass_context
def list_command(
    ctx: click.Context,
    grammar: str,
    output: TextIO,
    grout_version: str,
    sock_path: str,
    verbose: int,
) -> None:
    """List the command names that have a manual page.

    Examples:

    \b
        # Render every page
        for cmd in $(grcli-man list); do
            grcli-man page "$cmd" > "grcli-$cmd.1.md"
        done
    """
    setup_logging(verbose)

    try:
        tree = load_grammar(grammar)
        names = list_command_names(node for _, node in tree.commands.iter_children())
        logger.info(f"Found {len(names)} command(s)")
        for name in names:
            click.echo(name, file=output)

    except ManPageError as e:
        output_error(ctx, str(e))
