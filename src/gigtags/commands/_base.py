"""``--examples`` support for gigtags commands.

``--help`` stays short; ``--examples`` prints sample invocations of the
command and exits before its arguments are parsed.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import click

F = TypeVar("F", bound=Callable[..., object])


def with_examples(examples: str) -> Callable[[F], F]:
    """Decorate a Click command callback with an eager ``--examples`` flag."""

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )
