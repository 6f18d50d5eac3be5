"""Barbarians: characters who fight with two weapons and can fly into a rage."""

from __future__ import annotations

import string

from tavernkeep.character import DEFAULT_NAME, Character, Race

NO_WEAPON = "NONE"


def _weapon_name(text: str) -> str | None:
    """Upper-case ``text`` if it is a non-empty run of ASCII letters, else None."""
    if not text or any(c not in string.ascii_letters for c in text):
        return None
    return text.upper()


class Barbarian(Character):
    """A character with a main and a secondary weapon and an enraged state.

    A weapon name must be made of letters only. Any other name is refused
    and leaves the current weapon in place. When given to the constructor,
    it leaves the weapon as ``NONE``.
    """

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        race: Race | str = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
        main_weapon: str = NO_WEAPON,
        secondary_weapon: str = NO_WEAPON,
        enraged: bool = False,
    ) -> None:
        super().__init__(name, race, vitality, armor, level, enemy)
        self._main_weapon = NO_WEAPON
        self._secondary_weapon = NO_WEAPON
        self.set_main_weapon(main_weapon)
        self.set_secondary_weapon(secondary_weapon)
        self.enraged = enraged

    @property
    def main_weapon(self) -> str:
        return self._main_weapon

    @property
    def secondary_weapon(self) -> str:
        return self._secondary_weapon

    @property
    def enraged(self) -> bool:
        return self._enraged

    @enraged.setter
    def enraged(self, value: bool) -> None:
        self._enraged = bool(value)

    def set_main_weapon(self, weapon: str) -> bool:
        """Set the main weapon; return False if the name is not all letters."""
        parsed = _weapon_name(weapon)
        if parsed is None:
            return False
        self._main_weapon = parsed
        return True

    def set_secondary_weapon(self, weapon: str) -> bool:
        """Set the secondary weapon; return False if the name is not all letters."""
        parsed = _weapon_name(weapon)
        if parsed is None:
            return False
        self._secondary_weapon = parsed
        return True

    def toggle_enrage(self) -> None:
        """Flip the enraged state."""
        self._enraged = not self._enraged