"""Characters: the shared base for every adventurer and monster."""

from __future__ import annotations

import string
from enum import Enum

DEFAULT_NAME = "NAMELESS"


class Race(str, Enum):
    """The races a character may belong to."""

    NONE = "NONE"
    HUMAN = "HUMAN"
    ELF = "ELF"
    DWARF = "DWARF"
    LIZARD = "LIZARD"
    UNDEAD = "UNDEAD"

    def __str__(self) -> str:
        return self.value


def _letters_upper(text: str) -> str:
    """Keep only ASCII letters from ``text``, upper-cased."""
    return "".join(c.upper() for c in text if c in string.ascii_letters)


def _parse_race(race: Race | str) -> Race:
    """Map a race name (any case) to a Race, falling back to Race.NONE."""
    if isinstance(race, Race):
        return race
    try:
        return Race(str(race).upper())
    except ValueError:
        return Race.NONE


class Character:
    """A named character with a race, vitality, armor, level and allegiance.

    Invalid names become ``NAMELESS``, unknown races become ``Race.NONE`` and
    negative numbers given to the constructor become 0. Assigning a negative
    number to an existing character leaves the old value in place.
    """

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        race: Race | str = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
    ) -> None:
        self.name = name
        self.race = race
        self._vitality = max(vitality, 0)
        self._armor = max(armor, 0)
        self._level = max(level, 0)
        self._enemy = bool(enemy)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _letters_upper(value) or DEFAULT_NAME

    @property
    def race(self) -> Race:
        return self._race

    @race.setter
    def race(self, value: Race | str) -> None:
        self._race = _parse_race(value)

    @property
    def vitality(self) -> int:
        return self._vitality

    @vitality.setter
    def vitality(self, value: int) -> None:
        if value >= 0:
            self._vitality = value

    @property
    def armor(self) -> int:
        return self._armor

    @armor.setter
    def armor(self, value: int) -> None:
        if value >= 0:
            self._armor = value

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        if value >= 0:
            self._level = value

    @property
    def enemy(self) -> bool:
        return self._enemy

    def make_enemy(self) -> None:
        """Mark this character as an enemy."""
        self._enemy = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Character):
            return NotImplemented
        return (
            self.name == other.name
            and self.race == other.race
            and self.level == other.level
            and self.enemy == other.enemy
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        allegiance = "They are an enemy." if self.enemy else "They are not an enemy."
        return (
            f"{self.name} is Level {self.level} {self.race.value}.\n"
            f"Vitality: {self.vitality}\n"
            f"Max Armor: {self.armor}\n"
            f"{allegiance}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, race={self.race.value!r}, "
            f"vitality={self.vitality}, armor={self.armor}, level={self.level}, "
            f"enemy={self.enemy})"
        )