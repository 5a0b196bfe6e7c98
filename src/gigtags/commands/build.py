"""Command: build a facet from a prefix and a date."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from gigtags.commands._base import with_examples

if TYPE_CHECKING:
    from gigtags.commands._context import AppContext


@click.command()
@with_examples(
    """\
  gigtags build release 2022-06-25
  gigtags -q build '' 2022-06-25"""
)
@click.argument("prefix")
@click.argument("date", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.pass_obj
def build(app: AppContext, prefix: str, date: datetime) -> None:
    """Append DATE (YYYY-MM-DD) as a ~YYYYMMDD suffix to PREFIX."""
    app.emit(app.facets.build(prefix, date.date()))
