"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from patterncraft.output.console import create_console, get_output, style_for_severity
from patterncraft.output.sinks import ConsoleSink

if TYPE_CHECKING:
    from rich.console import Console

    from patterncraft.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Reports print their bare lines and journal reads their raw entries so
    quiet output can be piped; everything else collapses to ``OK: <op>``.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "build_report":
        return "\n".join(result.data.get("lines", []))
    if result.op == "log_read":
        return "\n".join(_entry_line(e) for e in result.data.get("entries", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _entry_line(entry: dict[str, Any]) -> str:
    # One entry per output line, even for multi-line messages.
    message = str(entry.get("message", "")).replace("\r", "\\r").replace("\n", "\\n")
    return f"{entry.get('severity', '')}: {message}"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="pc.ok")
    op = Text(f"  {result.op}", style="pc.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pc.key")
    v = Text(str(value), style="pc.name" if key == "name" else "")
    console.print(k, v, end="")
    console.print()


def _report_lines(console: Console, lines: list[str]) -> None:
    sink = ConsoleSink(console)
    for line in lines:
        sink.write(line)


def _entries_table(entries: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Message")
    for entry in entries:
        sev = str(entry.get("severity", ""))
        message = Text(str(entry.get("message", "")))
        table.add_row(Text(sev, style=style_for_severity(sev)), message)
    return table


def _character_table(original: dict[str, Any], copy: dict[str, Any]) -> Table:
    """Side-by-side comparison of a character and its clone."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="pc.key")
    table.add_column("Original")
    table.add_column("Clone")
    for key in ("name", "health", "strength", "agility", "intelligence"):
        table.add_row(key, Text(str(original.get(key, ""))), Text(str(copy.get(key, ""))))
    for part, stat in (("weapon", "damage"), ("armor", "defense")):
        src = original.get(part) or {}
        dst = copy.get(part) or {}
        table.add_row(
            part,
            Text(f"{src.get('name', '')} ({stat} {src.get(stat, '')})"),
            Text(f"{dst.get('name', '')} ({stat} {dst.get(stat, '')})"),
        )
    return table


def _render_aliasing(console: Console, aliasing: dict[str, Any]) -> None:
    shared = [part.removesuffix("_shared") for part, flag in aliasing.items() if flag]
    if shared:
        console.print(Text(f"  shared instances: {', '.join(shared)}", style="pc.error"))
    else:
        console.print(Text("  no shared equipment instances", style="pc.ok"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pc.error")
    op = Text(f"  {result.op}", style="pc.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_report(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render build_report: status line, then the report verbatim."""
    _status_line(console, result)
    if verbose:
        _field(console, "sections", result.data.get("section_count", 0))
        _field(console, "styled", result.data.get("styled", False))
    console.print()
    _report_lines(console, result.data.get("lines", []))


def _render_clone(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    console.print(_character_table(d.get("original", {}), d.get("clone", {})))
    _render_aliasing(console, d.get("aliasing", {}))


def _render_log_write(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "recorded", d.get("recorded"))
    _field(console, "severity", d.get("severity"))
    if verbose or not d.get("recorded"):
        _field(console, "min_severity", d.get("min_severity"))
    if verbose:
        _field(console, "path", d.get("path"))


def _render_log_read(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    entries = result.data.get("entries", [])
    if entries:
        console.print(_entries_table(entries))
    console.print(f"\n{result.data.get('count', len(entries))} entries")
    if verbose:
        _field(console, "path", result.data.get("path"))


def _render_demo(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the demo walkthrough step by step."""
    _status_line(console, result)
    d = result.data

    console.print()
    console.print(Text("Journal", style="pc.name"))
    _field(console, "logged", d.get("logged", 0))
    entries = d.get("error_entries", [])
    if entries:
        console.print(_entries_table(entries))

    console.print()
    console.print(Text("Report", style="pc.name"))
    _report_lines(console, d.get("report_lines", []))

    console.print()
    console.print(Text("Clone", style="pc.name"))
    copy = d.get("clone", {})
    _field(console, "name", copy.get("name", ""))
    _render_aliasing(console, d.get("aliasing", {}))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus flat key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS = {
    "build_report": _render_report,
    "clone_character": _render_clone,
    "log_write": _render_log_write,
    "log_read": _render_log_read,
    "demo": _render_demo,
}
