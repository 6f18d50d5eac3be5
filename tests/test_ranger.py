import pytest

from tavernkeep.character import Race
from tavernkeep.ranger import Arrows, Ranger


def test_default_ranger_has_empty_quiver():
    ranger = Ranger()
    assert ranger.arrows == []
    assert ranger.affinities == []
    assert ranger.companion is False
    assert ranger.name == "NAMELESS"


def test_add_arrows_in_order():
    ranger = Ranger("MARROW", "UNDEAD", 9, 6, 5, True)
    assert ranger.add_arrows("WOOD", 30)
    assert ranger.add_arrows("FIRE", 5)
    assert ranger.add_arrows("WATER", 5)
    assert ranger.add_arrows("POISON", 5)
    assert ranger.arrows == [
        Arrows("WOOD", 30),
        Arrows("FIRE", 5),
        Arrows("WATER", 5),
        Arrows("POISON", 5),
    ]
    assert ranger.race is Race.UNDEAD


def test_add_arrows_normalises_type():
    ranger = Ranger()
    assert ranger.add_arrows("f1ire", 2)
    assert ranger.arrows == [Arrows("FIRE", 2)]


def test_add_arrows_merges_existing_stack():
    ranger = Ranger()
    ranger.add_arrows("WOOD", 3)
    ranger.add_arrows("wood", 4)
    stacks = ranger.arrows
    assert len(stacks) == 1
    assert stacks[0].quantity == 3 + 4


@pytest.mark.parametrize("arrow_type, count", [("STONE", 5), ("WOOD", 0), ("FIRE", -3), ("", 2)])
def test_add_arrows_rejects_new_invalid(arrow_type, count):
    ranger = Ranger()
    assert ranger.add_arrows(arrow_type, count) is False
    assert ranger.arrows == []


def test_fire_arrow_decrements_stack():
    ranger = Ranger()
    ranger.add_arrows("FIRE", 5)
    assert ranger.fire_arrow("fire") is True
    assert ranger.arrows[0].quantity == 5 - 1


def test_fire_arrow_until_empty():
    ranger = Ranger()
    ranger.add_arrows("BLOOD", 1)
    assert ranger.fire_arrow("BLOOD") is True
    assert ranger.fire_arrow("BLOOD") is False
    assert ranger.arrows == [Arrows("BLOOD", 0)]


def test_fire_missing_arrow_fails():
    ranger = Ranger()
    assert ranger.fire_arrow("WATER") is False


def test_add_affinity_valid_and_duplicate():
    ranger = Ranger()
    assert ranger.add_affinity("FIRE") is True
    assert ranger.add_affinity("poison") is True
    assert ranger.add_affinity("Fire") is False
    assert ranger.affinities == ["FIRE", "POISON"]


def test_add_affinity_rejects_wood():
    ranger = Ranger()
    assert ranger.add_affinity("WOOD") is False
    assert ranger.affinities == []


def test_constructor_uses_arrows_and_affinities():
    ranger = Ranger(
        "LEAF",
        "ELF",
        arrows=[Arrows("wood", 10), Arrows("STONE", 4), Arrows("water", 2)],
        affinities=["water", "WATER", "earth"],
        companion=True,
    )
    assert ranger.arrows == [Arrows("WOOD", 10), Arrows("WATER", 2)]
    assert ranger.affinities == ["WATER"]
    assert ranger.companion is True


def test_returned_lists_are_copies():
    ranger = Ranger()
    ranger.add_affinity("BLOOD")
    ranger.affinities.append("FIRE")
    ranger.arrows.append(Arrows("WOOD", 1))
    assert ranger.affinities == ["BLOOD"]
    assert ranger.arrows == []