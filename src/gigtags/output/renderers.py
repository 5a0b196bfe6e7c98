"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.

Facet text is always shown via ``repr`` so that leading or trailing
whitespace in prefixes stays visible.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from gigtags.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from gigtags.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    facet = result.data.get("facet")
    if result.op == "build_facet" and facet is not None:
        return str(facet)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="gigtags.ok")
    op = Text(f"  {result.op}", style="gigtags.op")
    console.print(label, op, sep="")


_FIELD_STYLES: dict[str, str] = {
    "facet": "gigtags.facet",
    "prefix": "gigtags.prefix",
    "date_suffix": "gigtags.suffix",
    "date": "gigtags.date",
}


def _field(console: Console, key: str, value: Any, *, quote: bool = False) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="gigtags.key")
    shown = repr(value) if quote and isinstance(value, str) else str(value)
    v = Text(shown, style=_FIELD_STYLES.get(key, ""))
    console.print(k, v, sep="")


def _missing_date(console: Console) -> None:
    """Print the date field for a suffix that is not a calendar date."""
    console.print(Text("  date: ", style="gigtags.key"), Text("-", style="gigtags.no_date"), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="gigtags.error")
    op = Text(f"  {result.op}", style="gigtags.op")
    console.print(label, op, Text(" - "), Text(msg), sep="")

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v!r}"))


# ── Facet renderers ───────────────────────────────────────────────────


def _render_facet_split(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render split_facet and build_facet results."""
    _status_line(console, result)
    d = result.data
    for key in ("facet", "prefix", "date_suffix"):
        if key in d:
            _field(console, key, d[key], quote=True)
    if "date" in d:
        if d["date"] is None:
            _missing_date(console)
        else:
            _field(console, "date", d["date"])
    if verbose and "valid" in d:
        _field(console, "valid", d["valid"])


def _render_facet_inspect(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render inspect_facet results: flags, then the split if one was found."""
    _status_line(console, result)
    d = result.data
    _field(console, "facet", d.get("facet", ""), quote=True)
    for key in ("empty", "has_date_like_suffix", "has_invalid_date_like_suffix"):
        if key in d and (verbose or d[key]):
            _field(console, key, d[key])
    if d.get("date_suffix") is not None:
        _field(console, "prefix", d.get("prefix", ""), quote=True)
        _field(console, "date_suffix", d["date_suffix"], quote=True)
        if d.get("date") is None:
            _missing_date(console)
        else:
            _field(console, "date", d["date"])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "inspect_facet": _render_facet_inspect,
    "split_facet": _render_facet_split,
    "build_facet": _render_facet_split,
}
