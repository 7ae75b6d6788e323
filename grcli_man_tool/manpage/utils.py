"""
Formatting helpers for manual pages.
"""

import click


def bold(text: str) -> str:
    """Wrap text in bold markers."""
    return f"**{text}**"


def italic(text: str) -> str:
    """Wrap text in italic markers (used for placeholders)."""
    return f"_{text}_"


def man_reference(page: str, section: str = "1") -> str:
    """
    Format a reference to another manual page.

    Args:
        page: Page name (e.g., 'grcli-route')
        section: Manual section

    Returns:
        Reference such as '**grcli-route**(1)'
    """
    return f"{bold(page)}({section})"


def title_underline(title: str) -> str:
    """
    Underline rule for a page title.

    Args:
        title: Title line

    Returns:
        '=' repeated to the title length, followed by a blank line
    """
    return "=" * len(title) + "\n\n"


def command_head(command_id: str) -> tuple[str, str | None]:
    """
    Split a command path id at its first space.

    Args:
        command_id: Command id (e.g., 'ping IFACE')

    Returns:
        Tuple of (leading word, remainder including the space or None)
    """
    head, sep, rest = command_id.partition(" ")
    if not sep:
        return head, None
    return head, sep + rest


def error_text(error: str) -> str:
    """
    Format error as a single diagnostic line.

    Args:
        error: Error message

    Returns:
        Formatted error message
    """
    return f"Error: {error}"


def output_error(ctx: click.Context, error: str, exit_code: int = 1) -> None:
    """
    Write a diagnostic line to stderr and exit.

    Args:
        ctx: Click context of the running command
        error: Error message
        exit_code: Exit code
    """
    click.echo(error_text(error), err=True)
    ctx.exit(exit_code)
