"""A tavern: a bag of characters that keeps running tallies."""

from __future__ import annotations

import math

from tavernkeep.bag import DEFAULT_CAPACITY, ArrayBag
from tavernkeep.character import Character, Race


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


class Tavern(ArrayBag[Character]):
    """A bag of characters tracking the sum of levels and number of enemies.

    The tallies change only through :meth:`enter` and :meth:`leave`; items
    put in with the plain bag operations are not counted in them.
    """

    def __init__(self) -> None:
        super().__init__(DEFAULT_CAPACITY)
        self._level_sum = 0
        self._enemy_count = 0

    @property
    def level_sum(self) -> int:
        return self._level_sum

    @property
    def enemy_count(self) -> int:
        return self._enemy_count

    def enter(self, character: Character) -> bool:
        """Let ``character`` in; return False if the tavern is full."""
        if not self.add(character):
            return False
        self._level_sum += character.level
        if character.enemy:
            self._enemy_count += 1
        return True

    def leave(self, character: Character) -> bool:
        """Let ``character`` out; return False if no such character is inside."""
        if not self.remove(character):
            return False
        self._level_sum -= character.level
        if character.enemy:
            self._enemy_count -= 1
        return True

    def average_level(self) -> int:
        """Return the level sum divided by the head count, rounded.

        Raises ZeroDivisionError when the tavern is empty.
        """
        return int(_round_half_away(self._level_sum / len(self)))

    def enemy_percentage(self) -> float:
        """Return the share of enemies as a percentage with two decimals.

        Raises ZeroDivisionError when the tavern is empty.
        """
        share = self._enemy_count / len(self)
        return _round_half_away(share * 10000) / 100

    def tally_race(self, race: Race | str) -> int:
        """Count the characters of ``race``; an unknown race name counts 0."""
        if not isinstance(race, Race):
            try:
                race = Race(race)
            except ValueError:
                return 0
        return sum(1 for character in self if character.race == race)

    def report(self) -> str:
        """Return a summary of races, average level and enemy share."""
        return (
            f"Humans: {self.tally_race(Race.HUMAN)}\n"
            f"Elves: {self.tally_race(Race.ELF)}\n"
            f"Dwarves: {self.tally_race(Race.DWARF)}\n"
            f"Lizards: {self.tally_race(Race.LIZARD)}\n"
            f"Undead: {self.tally_race(Race.UNDEAD)}\n"
            f"\n"
            f"The average level is: {self.average_level()}\n"
            f"{self.enemy_percentage():g}% are enemies.\n"
        )