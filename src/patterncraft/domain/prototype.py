"""Prototype entities — weapons, armor, and the characters that own them.

Every entity implements :class:`Cloneable`. A clone is a new instance whose
primitive fields equal the source and whose owned sub-objects are themselves
cloned.

INVARIANT: ``c.clone().weapon is not c.weapon`` and
``c.clone().armor is not c.armor`` for every character ``c``, while both
compare equal by value. A member-wise copy that reuses sub-object references
breaks this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

from pydantic import BaseModel, Field, ValidationError

from patterncraft.domain.errors import CloneFailedError


class Cloneable(ABC):
    """Capability for producing an independent deep copy."""

    @abstractmethod
    def clone(self) -> Self:
        """Return a deep copy sharing no owned instances with ``self``.

        Raises:
            CloneFailedError: The copy could not be constructed.
        """


def _failed(kind: str, name: str, exc: ValidationError) -> CloneFailedError:
    return CloneFailedError(f"Cannot clone {kind} {name!r}: {exc.error_count()} invalid field(s)")


class Weapon(BaseModel, Cloneable):
    """A weapon. Mutable; assignments are validated."""

    model_config = {"validate_assignment": True}

    name: str
    damage: int = Field(ge=0)

    def clone(self) -> Self:
        try:
            return type(self)(name=self.name, damage=self.damage)
        except ValidationError as exc:
            raise _failed("weapon", self.name, exc) from exc


class Armor(BaseModel, Cloneable):
    """A piece of armor. Mutable; assignments are validated."""

    model_config = {"validate_assignment": True}

    name: str
    defense: int = Field(ge=0)

    def clone(self) -> Self:
        try:
            return type(self)(name=self.name, defense=self.defense)
        except ValidationError as exc:
            raise _failed("armor", self.name, exc) from exc


class Character(BaseModel, Cloneable):
    """A game character with exclusive ownership of one weapon and one armor.

    Attributes:
        name: Display name.
        health: Hit points.
        strength: Physical power.
        agility: Speed and reflexes.
        intelligence: Mental power.
        weapon: Owned weapon, never shared with another character.
        armor: Owned armor, never shared with another character.
    """

    model_config = {"validate_assignment": True}

    name: str
    health: int
    strength: int
    agility: int
    intelligence: int
    weapon: Weapon
    armor: Armor

    def clone(self) -> Self:
        weapon = self.weapon.clone()
        armor = self.armor.clone()
        try:
            return type(self)(
                name=self.name,
                health=self.health,
                strength=self.strength,
                agility=self.agility,
                intelligence=self.intelligence,
                weapon=weapon,
                armor=armor,
            )
        except ValidationError as exc:
            raise _failed("character", self.name, exc) from exc

    def shared_equipment(self, other: Character) -> dict[str, bool]:
        """Report, per equipment slot, whether *other* holds the very same instance."""
        return {"weapon": self.weapon is other.weapon, "armor": self.armor is other.armor}
