"""Journal — the process-wide, severity-gated event log.

Entries are appended to a flat text file as ``"<SEVERITY>: <message>"``
lines. Line breaks and backslashes in a message are escaped (``\\n``,
``\\r``, ``\\\\``) so every entry stays on exactly one line.

One Journal is built by the CLI context and handed to every service that
records events; nothing reaches it through a global accessor.

INVARIANT: An entry is written only when its severity is at least
``min_severity`` (INFO < WARNING < ERROR).
INVARIANT: File errors surface as WriteFailedError / ReadFailedError. They are
never printed and discarded.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from patterncraft.domain.errors import ReadFailedError, WriteFailedError
from patterncraft.domain.severity import Severity

logger = logging.getLogger(__name__)

_SEPARATOR = ": "
_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {"\\": "\\", "n": "\n", "r": "\r"}
_ESCAPE_RE = re.compile(r"\\(.)")


def _escape(message: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in message)


def _unescape(text: str) -> str:
    # Unknown escapes are kept verbatim so hand-written lines like C:\temp survive.
    return _ESCAPE_RE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(0)), text)


@dataclass(frozen=True)
class JournalEntry:
    """A single recorded journal line."""

    severity: Severity
    message: str

    def to_line(self) -> str:
        return f"{self.severity}{_SEPARATOR}{_escape(self.message)}"

    @classmethod
    def from_line(cls, line: str) -> JournalEntry | None:
        """Parse a stored line, or return None when it is not a journal entry."""
        name, sep, message = line.partition(_SEPARATOR)
        if not sep or name not in Severity.__members__:
            return None
        return cls(severity=Severity(name), message=_unescape(message))


class Journal:
    """Append-only journal file with a minimum-severity gate.

    Usage::

        journal = Journal(Path("logs.txt"), min_severity=Severity.WARNING)
        journal.log("disk almost full", Severity.WARNING)   # recorded
        journal.log("started", Severity.INFO)               # gated out
    """

    def __init__(self, path: Path, *, min_severity: Severity = Severity.INFO) -> None:
        self._path = path
        self._min_severity = min_severity

    @property
    def path(self) -> Path:
        return self._path

    @property
    def min_severity(self) -> Severity:
        return self._min_severity

    def set_min_severity(self, severity: Severity) -> None:
        self._min_severity = severity

    def log(self, message: str, severity: Severity = Severity.INFO) -> JournalEntry | None:
        """Record *message* if *severity* passes the gate.

        Returns:
            The recorded entry, or None when the severity was gated out.

        Raises:
            WriteFailedError: The journal file could not be appended to.
        """
        if not severity.is_at_least(self._min_severity):
            return None

        entry = JournalEntry(severity=severity, message=message)
        try:
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(entry.to_line() + "\n")
        except OSError as exc:
            raise WriteFailedError(f"Cannot write journal {self._path}: {exc}") from exc

        logger.debug("Journal entry recorded: %s -> %s", severity, self._path)
        return entry

    def read(self, severity: Severity | None = None) -> list[JournalEntry]:
        """Return recorded entries, optionally only those of *severity*.

        A journal that has never been written reads as empty.

        Raises:
            ReadFailedError: The journal file exists but could not be read or
                is not UTF-8 text.
        """
        if not self._path.exists():
            return []
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadFailedError(f"Cannot read journal {self._path}: {exc}") from exc

        entries: list[JournalEntry] = []
        for line in text.split("\n"):
            entry = JournalEntry.from_line(line)
            if entry is None:
                continue
            if severity is None or entry.severity == severity:
                entries.append(entry)
        return entries
