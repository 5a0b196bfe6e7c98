"""Subcommand modules for gigtags.

Provides register_commands() which uses deferred imports to keep
``gigtags --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from gigtags.commands.build import build
    from gigtags.commands.check import check
    from gigtags.commands.split import split

    cli.add_command(check)
    cli.add_command(split)
    cli.add_command(build)
