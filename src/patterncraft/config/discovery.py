"""Config file discovery and loading.

Resolution order for the config file:

1. ``-c/--config`` on the command line (must exist).
2. ``PATTERNCRAFT_CONFIG`` environment variable.
3. Walk up from the start directory looking for ``patterncraft.toml``,
   the way git finds ``.git/``.

:func:`load_config` is the only place a config file is parsed; the settings
TOML source feeds its result into :class:`~patterncraft.config.settings.PcSettings`.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from patterncraft.config.models import PcConfig

CONFIG_FILENAME = "patterncraft.toml"
CONFIG_ENV_VAR = "PATTERNCRAFT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for patterncraft.toml.

    Returns the path to the config file, or None if not found.
    A ``PATTERNCRAFT_CONFIG`` pointing at a missing file finds nothing.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | None, start: Path | None = None) -> Path | None:
    """Pick the config file for a CLI invocation.

    An *explicit* ``--config`` path bypasses discovery and must name an
    existing file.
    """
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            msg = f"Config file not found: {explicit}"
            raise click.ClickException(msg)
        return path
    return find_config(start)


def load_config(path: Path) -> dict[str, Any]:
    """Parse and validate *path*, returning only the values it sets.

    The result is sparse so lower-priority defaults and higher-priority
    env vars merge around it.

    Raises:
        click.ClickException: The file is unreadable, is not valid TOML,
            or holds values the config models reject.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read config {path}: {exc}"
        raise click.ClickException(msg) from exc

    try:
        data: dict[str, Any] = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc

    try:
        config = PcConfig.model_validate(data)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        msg = f"Invalid config in {path}: {fields}"
        raise click.ClickException(msg) from exc
    return config.model_dump(exclude_unset=True)
