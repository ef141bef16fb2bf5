"""CharacterService — clone characters and verify the copy is independent."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patterncraft.domain.errors import CloneFailedError
from patterncraft.services.base import BaseService
from patterncraft.services.result import ServiceResult

if TYPE_CHECKING:
    from patterncraft.domain.prototype import Character


class CharacterService(BaseService):
    """Prototype operations on characters."""

    def clone_character(self, character: Character) -> ServiceResult:
        """Deep-clone *character*.

        Returns:
            ``clone_character`` result with ``original`` and ``clone`` field
            dumps plus an ``aliasing`` report (``weapon_shared``,
            ``armor_shared``), both False for a correct clone.
        """
        op = "clone_character"
        warnings: list[str] = []
        try:
            copy = character.clone()
        except CloneFailedError as exc:
            return ServiceResult.failure(op, "CLONE_FAILED", str(exc), name=character.name)

        aliasing = {
            f"{part}_shared": shared
            for part, shared in character.shared_equipment(copy).items()
        }
        self._record(f"Character cloned: {character.name}", warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "original": character.model_dump(),
                "clone": copy.model_dump(),
                "equal": copy == character,
                "aliasing": aliasing,
            },
            warnings=warnings,
        )
