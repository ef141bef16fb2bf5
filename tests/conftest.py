"""Shared pytest fixtures and test helpers for patterncraft tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from patterncraft.domain.prototype import Armor, Character, Weapon
from patterncraft.domain.severity import Severity
from patterncraft.infrastructure.journal import Journal


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and package logger state after each test.

    CLI invocations reconfigure logging with a handler bound to the runner's
    stderr, which is closed once the invocation returns.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pc = logging.getLogger("patterncraft")
    pc_level = pc.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pc.setLevel(pc_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def journal(tmp_path: Path) -> Journal:
    """Journal writing to a temp file, recording every severity."""
    return Journal(tmp_path / "logs.txt", min_severity=Severity.INFO)


@pytest.fixture
def knight() -> Character:
    """A fully equipped character."""
    return Character(
        name="Knight",
        health=100,
        strength=20,
        agility=15,
        intelligence=10,
        weapon=Weapon(name="Sword", damage=50),
        armor=Armor(name="Shield", defense=30),
    )


@pytest.fixture
def _isolated_workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI journal and config are isolated.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command test
    classes. Tests that need the path can also request ``tmp_path`` directly
    (pytest deduplicates — it's the same directory).
    """
    for var in (
        "PATTERNCRAFT_CONFIG",
        "PATTERNCRAFT_JOURNAL__PATH",
        "PATTERNCRAFT_JOURNAL__MIN_SEVERITY",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
