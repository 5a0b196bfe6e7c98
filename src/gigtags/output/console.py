"""Rich Console factory and theme for gigtags output.

Consoles render into a StringIO buffer so formatters keep a
``format_result() -> str`` contract.  Rich disables color codes on
non-TTY outputs (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GIGTAGS_THEME = Theme(
    {
        "gigtags.ok": "bold green",
        "gigtags.error": "bold red",
        "gigtags.op": "bold cyan",
        "gigtags.key": "dim",
        "gigtags.facet": "bold",
        "gigtags.prefix": "blue",
        "gigtags.suffix": "magenta",
        "gigtags.date": "green",
        "gigtags.no_date": "dim red",
    }
)


def create_console() -> Console:
    """Create a 120-column Console that renders to a StringIO buffer."""
    return Console(file=StringIO(), theme=GIGTAGS_THEME, highlight=False, width=120)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
