"""``gigtags`` entry point.

Global flags are collected into :class:`GigtagsSettings` before any
subcommand runs; subcommands receive the resulting :class:`AppContext`.
"""

from __future__ import annotations

from typing import Any

import click

from gigtags import __version__
from gigtags.commands import register_commands
from gigtags.commands._context import AppContext
from gigtags.config.settings import GigtagsSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="gigtags")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only OK/ERROR or the built facet.")
@click.option("-v", "--verbose", is_flag=True, help="Show all fields and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Read settings from this TOML file instead of gigtags.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """Validate facets and work with their ~YYYYMMDD date suffixes."""
    ctx.obj = AppContext(GigtagsSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
