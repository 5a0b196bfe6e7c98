"""Command: split a facet into prefix and date suffix."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gigtags.commands._base import with_examples

if TYPE_CHECKING:
    from gigtags.commands._context import AppContext


@click.command()
@with_examples(
    """\
  gigtags split 'release~20220625'
  gigtags --json split 'gig~19700230'"""
)
@click.argument("facet")
@click.pass_obj
def split(app: AppContext, facet: str) -> None:
    """Split FACET into a prefix and its trailing date suffix.

    The last 9 characters are always treated as the suffix; the date is
    empty when they do not form a valid ~YYYYMMDD date.
    """
    app.emit(app.facets.split(facet))
