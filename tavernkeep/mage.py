"""Mages: characters who study a school of magic and cast through a weapon."""

from __future__ import annotations

import string

from tavernkeep.character import DEFAULT_NAME, Character, Race

NO_CHOICE = "NONE"
SCHOOLS = frozenset({"ELEMENTAL", "NECROMANCY", "ILLUSION"})
CASTING_WEAPONS = frozenset({"WAND", "STAFF"})


def _letters_upper(text: str) -> str:
    return "".join(c.upper() for c in text if c in string.ascii_letters)


class Mage(Character):
    """A character with a school of magic, a casting weapon and a summoning gift.

    Names of schools and weapons are matched on their letters alone, in any
    case. An unknown name is refused and leaves the current value in place.
    When given to the constructor, it leaves the value as ``NONE``.
    """

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        race: Race | str = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
        school: str = NO_CHOICE,
        weapon: str = NO_CHOICE,
        can_summon_incarnate: bool = False,
    ) -> None:
        super().__init__(name, race, vitality, armor, level, enemy)
        self._school = NO_CHOICE
        self._casting_weapon = NO_CHOICE
        self.set_school(school)
        self.set_casting_weapon(weapon)
        self.can_summon_incarnate = can_summon_incarnate

    @property
    def school(self) -> str:
        return self._school

    @property
    def casting_weapon(self) -> str:
        return self._casting_weapon

    @property
    def can_summon_incarnate(self) -> bool:
        return self._can_summon_incarnate

    @can_summon_incarnate.setter
    def can_summon_incarnate(self, value: bool) -> None:
        self._can_summon_incarnate = bool(value)

    def set_school(self, school: str) -> bool:
        """Set the school of magic; return False if it is not a known school."""
        parsed = _letters_upper(school)
        if parsed not in SCHOOLS:
            return False
        self._school = parsed
        return True

    def set_casting_weapon(self, weapon: str) -> bool:
        """Set the casting weapon; return False if it is not a wand or staff."""
        parsed = _letters_upper(weapon)
        if parsed not in CASTING_WEAPONS:
            return False
        self._casting_weapon = parsed
        return True