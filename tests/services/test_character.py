"""Tests for CharacterService."""

from __future__ import annotations

import pytest

from patterncraft.domain.prototype import Character, Weapon
from patterncraft.domain.severity import Severity
from patterncraft.infrastructure.journal import Journal
from patterncraft.services.character import CharacterService


class TestCloneCharacter:
    def test_success(self, knight: Character) -> None:
        result = CharacterService().clone_character(knight)
        assert result.ok
        assert result.op == "clone_character"
        assert result.data["clone"] == result.data["original"]
        assert result.data["equal"] is True
        assert result.data["aliasing"] == {"weapon_shared": False, "armor_shared": False}

    def test_reports_shallow_copy(self, knight: Character, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(Character, "clone", lambda self: self.model_copy())
        result = CharacterService().clone_character(knight)
        assert result.data["aliasing"] == {"weapon_shared": True, "armor_shared": True}

    def test_dump_contains_equipment(self, knight: Character) -> None:
        result = CharacterService().clone_character(knight)
        assert result.data["clone"]["weapon"] == {"name": "Sword", "damage": 50}
        assert result.data["clone"]["armor"] == {"name": "Shield", "defense": 30}

    def test_source_untouched(self, knight: Character) -> None:
        CharacterService().clone_character(knight)
        assert knight.weapon.damage == 50

    def test_clone_failure(self, knight: Character) -> None:
        knight.weapon = Weapon.model_construct(name="Broken", damage=-1)
        result = CharacterService().clone_character(knight)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CLONE_FAILED"
        assert result.error.detail == {"name": "Knight"}

    def test_records_journal_entry(self, knight: Character, journal: Journal) -> None:
        CharacterService(journal).clone_character(knight)
        entries = journal.read(Severity.INFO)
        assert [e.message for e in entries] == ["Character cloned: Knight"]
