"""RenderSink implementations.

Each sink receives one ``write(line)`` call per rendered report line and
decides where the line goes. Sinks never reformat a line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.text import Text

from patterncraft.domain.errors import WriteFailedError

if TYPE_CHECKING:
    from rich.console import Console


class ListSink:
    """Collects lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)


class ConsoleSink:
    """Prints lines to a Rich Console as literal text (no markup parsing)."""

    def __init__(self, console: Console, *, style: str = "") -> None:
        self._console = console
        self._style = style

    def write(self, line: str) -> None:
        self._console.print(Text(line, style=self._style), soft_wrap=True)


class StreamSink:
    """Writes newline-terminated lines to a text stream.

    Raises:
        WriteFailedError: The underlying stream rejected the write.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write(self, line: str) -> None:
        try:
            self._stream.write(line + "\n")
        except OSError as exc:
            raise WriteFailedError(f"Cannot write report line: {exc}") from exc
