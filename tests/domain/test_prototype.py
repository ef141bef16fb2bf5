"""Tests for the Cloneable capability and deep-clone guarantees."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from patterncraft.domain.errors import CloneFailedError
from patterncraft.domain.prototype import Armor, Character, Cloneable, Weapon


class TestCloneable:
    def test_abstract(self) -> None:
        with pytest.raises(TypeError):
            Cloneable()  # type: ignore[abstract]

    @pytest.mark.parametrize("cls", [Weapon, Armor, Character])
    def test_entities_are_cloneable(self, cls: type) -> None:
        assert issubclass(cls, Cloneable)


class TestWeapon:
    def test_clone_is_equal_but_distinct(self) -> None:
        sword = Weapon(name="Sword", damage=50)
        copy = sword.clone()
        assert copy == sword
        assert copy is not sword

    def test_negative_damage_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Weapon(name="Sword", damage=-1)

    def test_assignment_validated(self) -> None:
        sword = Weapon(name="Sword", damage=50)
        with pytest.raises(ValidationError):
            sword.damage = -5

    def test_clone_of_invalid_state_fails(self) -> None:
        broken = Weapon.model_construct(name="Broken", damage=-1)
        with pytest.raises(CloneFailedError, match="Broken"):
            broken.clone()


class TestArmor:
    def test_clone_is_equal_but_distinct(self) -> None:
        shield = Armor(name="Shield", defense=30)
        copy = shield.clone()
        assert copy == shield
        assert copy is not shield

    def test_clone_of_invalid_state_fails(self) -> None:
        broken = Armor.model_construct(name="Cracked", defense=-3)
        with pytest.raises(CloneFailedError):
            broken.clone()


class TestCharacterClone:
    def test_value_equal(self, knight: Character) -> None:
        assert knight.clone() == knight

    def test_distinct_instance(self, knight: Character) -> None:
        assert knight.clone() is not knight

    def test_equipment_not_aliased(self, knight: Character) -> None:
        copy = knight.clone()
        assert copy.weapon is not knight.weapon
        assert copy.armor is not knight.armor
        assert copy.weapon == knight.weapon
        assert copy.armor == knight.armor

    def test_mutating_clone_weapon_leaves_source(self, knight: Character) -> None:
        copy = knight.clone()
        copy.weapon.damage = 999
        assert knight.weapon.damage == 50

    def test_mutating_clone_armor_leaves_source(self, knight: Character) -> None:
        copy = knight.clone()
        copy.armor.name = "Tower Shield"
        assert knight.armor.name == "Shield"

    def test_mutating_source_leaves_clone(self, knight: Character) -> None:
        copy = knight.clone()
        knight.weapon.damage = 1
        knight.health = 5
        assert copy.weapon.damage == 50
        assert copy.health == 100

    def test_scalar_fields_copied(self, knight: Character) -> None:
        copy = knight.clone()
        assert (copy.name, copy.health, copy.strength, copy.agility, copy.intelligence) == (
            "Knight",
            100,
            20,
            15,
            10,
        )

    def test_clone_of_clone_is_independent(self, knight: Character) -> None:
        first = knight.clone()
        second = first.clone()
        assert second == knight
        assert second.weapon is not first.weapon
        assert second.weapon is not knight.weapon

    def test_shared_equipment(self, knight: Character) -> None:
        assert knight.shared_equipment(knight.clone()) == {"weapon": False, "armor": False}
        shallow = knight.model_copy()
        assert knight.shared_equipment(shallow) == {"weapon": True, "armor": True}

    def test_broken_equipment_surfaces_clone_failed(self, knight: Character) -> None:
        knight.weapon = Weapon.model_construct(name="Broken", damage=-1)
        with pytest.raises(CloneFailedError):
            knight.clone()
