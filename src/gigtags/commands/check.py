"""Command: inspect a single facet."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gigtags.commands._base import with_examples

if TYPE_CHECKING:
    from gigtags.commands._context import AppContext


@click.command()
@with_examples(
    """\
  gigtags check 'release~20220625'
  gigtags check 'release ~20220625'
  gigtags --json check genre"""
)
@click.argument("facet")
@click.pass_obj
def check(app: AppContext, facet: str) -> None:
    """Check FACET for validity and a date suffix."""
    app.emit(app.facets.inspect(facet))
