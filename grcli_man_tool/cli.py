"""CLI entry point for grcli-man-tool."""

import click

from grcli_man_tool.manpage.commands.man_commands import (
    list_command,
    main_page_command,
    page_command,
)


@click.group()
@click.version_option(version="0.1.0")
def main() -> None:
    """Generate grcli manual pages from the shell's command grammar"""
    pass


# Register manual page commands
main.add_command(page_command)
main.add_command(main_page_command)
main.add_command(list_command)

if __name__ == "__main__":
    main()
