"""Command-line showcase of characters, their classes and a tavern."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from tavernkeep.barbarian import Barbarian
from tavernkeep.character import Character
from tavernkeep.mage import Mage
from tavernkeep.ranger import Ranger
from tavernkeep.scoundrel import Scoundrel
from tavernkeep.tavern import Tavern

SCENARIOS = ("characters", "party", "tavern")


def _flag_line(label: str, value: bool) -> str:
    """Render a labelled boolean as an upper-case TRUE/FALSE line."""
    return f"{label}: {str(bool(value)).upper()}"


def describe_character(character: Character) -> str:
    """Describe the attributes every character shares."""
    allegiance = "an enemy" if character.enemy else "not an enemy"
    return (
        f"{character.name} is a Level {character.level} {character.race.value}.\n"
        f"Vitality: {character.vitality}\n"
        f"Armor: {character.armor}\n"
        f"They are {allegiance}"
    )


def describe_mage(mage: Mage) -> str:
    """Describe the attributes that only a mage has."""
    return (
        f"School of Magic: {mage.school}\n"
        f"Weapon: {mage.casting_weapon}\n"
        f"{_flag_line('Summon Incarnate', mage.can_summon_incarnate)}"
    )


def describe_scoundrel(scoundrel: Scoundrel) -> str:
    """Describe the attributes that only a scoundrel has."""
    return (
        f"Dagger: {scoundrel.dagger.value}\n"
        f"Faction: {scoundrel.faction}\n"
        f"{_flag_line('Disguise', scoundrel.disguise)}"
    )


def _describe_arrows(ranger: Ranger) -> str:
    stacks = ranger.arrows
    if not stacks:
        return "NONE"
    return ", ".join(f"{stack.type}, {stack.quantity}" for stack in stacks)


def _describe_affinities(ranger: Ranger) -> str:
    return ", ".join(ranger.affinities) or "NONE"


def describe_ranger(ranger: Ranger) -> str:
    """Describe the attributes that only a ranger has."""
    return (
        f"Vector of arrows: {_describe_arrows(ranger)}\n"
        f"Affinities: {_describe_affinities(ranger)}\n"
        f"{_flag_line('Animal Companion', ranger.companion)}"
    )


def describe_barbarian(barbarian: Barbarian) -> str:
    """Describe the attributes that only a barbarian has."""
    return (
        f"Main Weapon: {barbarian.main_weapon}\n"
        f"Offhand Weapon: {barbarian.secondary_weapon}\n"
        f"{_flag_line('Enraged', barbarian.enraged)}"
    )


def _profile(character: Character) -> str:
    return (
        f"Name: {character.name}\n"
        f"Race: {character.race.value}\n"
        f"Vitality: {character.vitality}\n"
        f"Armor: {character.armor}\n"
        f"Level: {character.level}\n"
        f"Enemy: {int(character.enemy)}"
    )


def _characters_demo() -> str:
    frodo = Character("Frodo1954", "NONE", 100, 67, 25, False)
    witch_king = Character("", "989hif243bo", -10, 15, -2, True)
    sauron = Character()
    before = _profile(sauron)
    sauron.name = "Sauron"
    sauron.race = "UNDEAD"
    sauron.vitality = 100
    sauron.armor = 150
    sauron.level = 75
    sauron.make_enemy()
    rand_check = Character("03985915", "LiZaRD", 3, 3, 3, False)
    rand_check1 = Character("laknflkern", "dwarf", 6, 7, 8, True)
    blocks = [
        _profile(frodo),
        _profile(witch_king),
        before,
        _profile(sauron),
        _profile(rand_check),
        _profile(rand_check1),
    ]
    return "\n\n".join(blocks) + "\n"


def _configure(character: Character, name: str, race: str,
               vitality: int, armor: int, level: int) -> None:
    character.name = name
    character.race = race
    character.vitality = vitality
    character.armor = armor
    character.level = level
    character.make_enemy()


def _party_demo() -> str:
    blocks: list[str] = []

    default_mage = Mage()
    _configure(default_mage, "DEFAULTMAGE", "ELF", 5, 3, 2)
    blocks.append(f"{describe_character(default_mage)}\n{describe_mage(default_mage)}")

    spynach = Mage("SPYNACH", "ELF", 6, 4, 4, False)
    spynach.set_school("ILLUSION")
    spynach.set_casting_weapon("WAND")
    spynach.can_summon_incarnate = True
    blocks.append(f"{describe_character(spynach)}\n{describe_mage(spynach)}")

    default_scoundrel = Scoundrel()
    _configure(default_scoundrel, "DEFAULTSCOUNDREL", "HUMAN", 6, 4, 3)
    blocks.append(
        f"{describe_character(default_scoundrel)}\n{describe_scoundrel(default_scoundrel)}"
    )

    flea = Scoundrel("FLEA", "DWARF", 12, 7, 5, False)
    flea.set_dagger("ADAMANT")
    flea.set_faction("CUTPURSE")
    flea.disguise = True
    blocks.append(f"{describe_character(flea)}\n{describe_scoundrel(flea)}")

    default_ranger = Ranger()
    _configure(default_ranger, "DEFAULTRANGER", "UNDEAD", 8, 4, 5)
    blocks.append(f"{describe_character(default_ranger)}\n{describe_ranger(default_ranger)}")

    marrow = Ranger("MARROW", "UNDEAD", 9, 6, 5, True)
    marrow.add_arrows("WOOD", 30)
    marrow.add_arrows("FIRE", 5)
    marrow.add_arrows("WATER", 5)
    marrow.add_arrows("POISON", 5)
    marrow.add_affinity("FIRE")
    marrow.add_affinity("POISON")
    marrow.companion = True
    blocks.append(f"{describe_character(marrow)}\n{describe_ranger(marrow)}")

    marrow.fire_arrow("fire")
    blocks.append(f"Remaining Arrows: {_describe_arrows(marrow)}")

    default_barbarian = Barbarian()
    _configure(default_barbarian, "defaultBarbarian", "HUMAN", 10, 5, 5)
    blocks.append(
        f"{describe_character(default_barbarian)}\n{describe_barbarian(default_barbarian)}"
    )

    bonk = Barbarian("BONK", "HUMAN", 11, 5, 5, True)
    bonk.set_main_weapon("MACE")
    bonk.set_secondary_weapon("ANOTHERMACE")
    bonk.enraged = True
    blocks.append(f"{describe_character(bonk)}\n{describe_barbarian(bonk)}")

    bonk.toggle_enrage()
    blocks.append(_flag_line("Enraged", bonk.enraged))
    return "\n\n".join(blocks) + "\n"


def _entry_line(tavern: Tavern, character: Character, who: str, where: str) -> str:
    if tavern.enter(character):
        return f"{who} successfully entered {where}"
    return f"{who} has not entered {where}"


def _tavern_demo() -> str:
    pony = Tavern()
    tavern_too = Tavern()
    empty = Tavern()

    frodo = Character("Frodo", "NONE", 100, 99, 25, False)
    frodo2 = Character("Frodo", "NONE", 23, 47, 25, False)
    samwise = Character("Samwise", "NONE", 100, 99, 25, False)
    aragorn = Character("Aragorn", "HUMAN", 100, 50, 87, False)
    gimli = Character("Gimli", "DWARF", 100, 75, 139, False)
    legolas = Character("Legolas", "ELF", 100, 100, 2931, False)
    witch_king = Character("Witch King", "UNDEAD", 100, 50, 4000, True)
    sauron = Character("Sauron", "UNDEAD", 100, 100, 50000, True)
    saruman = Character("Saruman", "HUMAN", 100, 100, 2001, True)

    cast = [frodo, frodo2, samwise, aragorn, gimli, legolas, witch_king, sauron, saruman]
    lines = [str(character) for character in cast]

    lines.append(
        "Frodo is the same as Frodo2" if frodo == frodo2
        else "Frodo is not the same as Frodo2"
    )
    lines.append(
        "Frodo is not the same as Samwise" if frodo != samwise
        else "Frodo is the same as Samwise"
    )

    pony_name = "The Prancing Pony"
    for character, who in (
        (frodo, "Frodo"),
        (aragorn, "Aragorn"),
        (gimli, "Gimli"),
        (legolas, "Legolas"),
        (witch_king, "The Witch King"),
        (sauron, "Sauron"),
        (saruman, "Saruman"),
    ):
        lines.append(_entry_line(pony, character, who, pony_name))

    lines.append(f"Average Level: {pony.average_level()}")
    lines.append(f"Enemy Count: {pony.enemy_count}")

    left = pony.leave(sauron)
    lines.append(
        f"\nSauron successfully left {pony_name}" if left
        else f"\nSauron has not left {pony_name}"
    )
    lines.append(f"\nAverage Level: {pony.average_level()}")
    lines.append(f"Enemy Count: {pony.enemy_count}")

    for character, who in ((frodo2, "Frodo2"), (samwise, "Samwise"), (sauron, "Sauron")):
        lines.append(_entry_line(tavern_too, character, who, "Tavern Too"))

    lines.append(
        f"Level Sum: {pony.level_sum}\n"
        f"Average Level: {pony.average_level()}\n"
        f"Enemy Count: {pony.enemy_count}\n"
        f"Percent enemies: {pony.enemy_percentage():g}\n"
        f"Number of Characters in tavern: {len(pony)}\n"
    )
    lines.append(pony.report())

    empty += pony

    lines.append("Combining The Prancing Pony and Tavern Too, no duplicates")
    pony /= tavern_too
    lines.append(pony.report())

    lines.append("Combining The Prancing Pony and Tavern Too, duplicates allowed")
    empty.add(sauron)
    empty += tavern_too
    lines.append(empty.report())
    return "\n".join(lines)


_RUNNERS = {
    "characters": _characters_demo,
    "party": _party_demo,
    "tavern": _tavern_demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print one showcase scenario, or all of them."""
    parser = argparse.ArgumentParser(
        prog="tavernkeep",
        description="Show characters, their classes and a tavern at work.",
    )
    parser.add_argument(
        "scenario",
        nargs="?",
        choices=(*SCENARIOS, "all"),
        default="all",
        help="which showcase to run (default: all)",
    )
    args = parser.parse_args(argv)
    chosen = SCENARIOS if args.scenario == "all" else (args.scenario,)
    print("\n".join(_RUNNERS[name]() for name in chosen), end="")
    return 0