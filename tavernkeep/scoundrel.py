"""Scoundrels: characters with a dagger, a faction and perhaps a disguise."""

from __future__ import annotations

import string
from enum import Enum

from tavernkeep.character import DEFAULT_NAME, Character, Race

FACTIONS = ("NONE", "CUTPURSE", "SHADOWBLADE", "SILVERTONGUE")
NO_FACTION = "NONE"


def _letters_upper(text: str) -> str:
    return "".join(c.upper() for c in text if c in string.ascii_letters)


class Dagger(str, Enum):
    """The materials a scoundrel's dagger may be made of."""

    WOOD = "WOOD"
    BRONZE = "BRONZE"
    IRON = "IRON"
    STEEL = "STEEL"
    MITHRIL = "MITHRIL"
    ADAMANT = "ADAMANT"
    RUNE = "RUNE"

    def __str__(self) -> str:
        return self.value


class Scoundrel(Character):
    """A character with a dagger, a faction and a disguise.

    An unknown dagger becomes a wooden one. An unknown faction is refused
    and leaves the current faction in place; when given to the constructor
    it leaves the faction as ``NONE``.
    """

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        race: Race | str = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
        dagger: Dagger | str = Dagger.WOOD,
        faction: str = NO_FACTION,
        disguise: bool = False,
    ) -> None:
        super().__init__(name, race, vitality, armor, level, enemy)
        self._dagger = Dagger.WOOD
        self._faction = NO_FACTION
        self.set_dagger(dagger)
        self.set_faction(faction)
        self.disguise = disguise

    @property
    def dagger(self) -> Dagger:
        return self._dagger

    @property
    def faction(self) -> str:
        return self._faction

    @property
    def disguise(self) -> bool:
        return self._disguise

    @disguise.setter
    def disguise(self, value: bool) -> None:
        self._disguise = bool(value)

    def set_dagger(self, dagger: Dagger | str) -> None:
        """Set the dagger by name; an unknown name gives a wooden dagger."""
        if isinstance(dagger, Dagger):
            self._dagger = dagger
            return
        try:
            self._dagger = Dagger(_letters_upper(dagger))
        except ValueError:
            self._dagger = Dagger.WOOD

    def set_faction(self, faction: str) -> bool:
        """Set the faction; return False if it is not a known faction."""
        parsed = _letters_upper(faction)
        if parsed not in FACTIONS:
            return False
        self._faction = parsed
        return True