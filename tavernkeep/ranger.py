"""Rangers: characters who carry quivers of arrows and elemental affinities."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass

from tavernkeep.character import DEFAULT_NAME, Character, Race

ARROW_TYPES = ("WOOD", "FIRE", "WATER", "POISON", "BLOOD")
AFFINITIES = ("FIRE", "WATER", "POISON", "BLOOD")


def _letters_upper(text: str) -> str:
    return "".join(c.upper() for c in text if c in string.ascii_letters)


@dataclass(frozen=True)
class Arrows:
    """A stack of arrows of one type."""

    type: str
    quantity: int


class Ranger(Character):
    """A character with a quiver of arrows, affinities and an animal companion.

    Arrow types and affinities are matched on their letters alone, in any
    case. The quiver keeps one stack per arrow type, in the order the types
    were first added; affinities are kept without duplicates.
    """

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        race: Race | str = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
        arrows: Iterable[Arrows] = (),
        affinities: Iterable[str] = (),
        companion: bool = False,
    ) -> None:
        super().__init__(name, race, vitality, armor, level, enemy)
        self._quiver: dict[str, int] = {}
        self._affinities: list[str] = []
        for stack in arrows:
            self.add_arrows(stack.type, stack.quantity)
        for affinity in affinities:
            self.add_affinity(affinity)
        self.companion = companion

    @property
    def arrows(self) -> list[Arrows]:
        """The stacks of arrows in the quiver, as a fresh list."""
        return [Arrows(kind, count) for kind, count in self._quiver.items()]

    @property
    def affinities(self) -> list[str]:
        """The ranger's affinities, as a fresh list."""
        return list(self._affinities)

    @property
    def companion(self) -> bool:
        return self._companion

    @companion.setter
    def companion(self, value: bool) -> None:
        self._companion = bool(value)

    def add_arrows(self, arrow_type: str, count: int) -> bool:
        """Add ``count`` arrows of ``arrow_type`` to the quiver.

        A type already in the quiver has ``count`` added to its stack. A new
        stack needs a known type and a positive count. Returns whether the
        quiver changed.
        """
        kind = _letters_upper(arrow_type)
        if kind in self._quiver:
            self._quiver[kind] += count
            return True
        if count > 0 and kind in ARROW_TYPES:
            self._quiver[kind] = count
            return True
        return False

    def fire_arrow(self, arrow_type: str) -> bool:
        """Fire one arrow of ``arrow_type``; return False if none is left."""
        kind = _letters_upper(arrow_type)
        if self._quiver.get(kind, 0) > 0:
            self._quiver[kind] -= 1
            return True
        return False

    def add_affinity(self, affinity: str) -> bool:
        """Add an affinity; return False if it is unknown or already held."""
        parsed = _letters_upper(affinity)
        if parsed not in AFFINITIES or parsed in self._affinities:
            return False
        self._affinities.append(parsed)
        return True