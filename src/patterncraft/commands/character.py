"""Command group: character prototypes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patterncraft.commands._base import PcGroup

if TYPE_CHECKING:
    from patterncraft.commands._context import AppContext

_CHARACTER_EXAMPLES = """\
  patterncraft character clone Knight
  patterncraft character clone Rogue --agility 30 --weapon Dagger --damage 12
  patterncraft --json character clone Mage --intelligence 40 --armor Robe --defense 2"""


@click.group(cls=PcGroup, examples=_CHARACTER_EXAMPLES)
@click.pass_obj
def character(app: AppContext) -> None:
    """Create characters and clone them."""


@character.command(
    examples="""\
  patterncraft character clone Knight --health 100 --strength 20 --agility 15 --intelligence 10
  patterncraft character clone Knight --weapon Sword --damage 50 --armor Shield --defense 30"""
)
@click.argument("name")
@click.option("--health", type=int, default=100, show_default=True)
@click.option("--strength", type=int, default=10, show_default=True)
@click.option("--agility", type=int, default=10, show_default=True)
@click.option("--intelligence", type=int, default=10, show_default=True)
@click.option("--weapon", "weapon_name", default="Sword", show_default=True, help="Weapon name.")
@click.option("--damage", type=click.IntRange(min=0), default=50, show_default=True)
@click.option("--armor", "armor_name", default="Shield", show_default=True, help="Armor name.")
@click.option("--defense", type=click.IntRange(min=0), default=30, show_default=True)
@click.pass_obj
def clone(
    app: AppContext,
    name: str,
    health: int,
    strength: int,
    agility: int,
    intelligence: int,
    weapon_name: str,
    damage: int,
    armor_name: str,
    defense: int,
) -> None:
    """Build a character and deep-clone it."""
    from patterncraft.domain.prototype import Armor, Character, Weapon
    from patterncraft.services.character import CharacterService

    source = Character(
        name=name,
        health=health,
        strength=strength,
        agility=agility,
        intelligence=intelligence,
        weapon=Weapon(name=weapon_name, damage=damage),
        armor=Armor(name=armor_name, defense=defense),
    )
    app.emit(CharacterService(app.journal).clone_character(source))
