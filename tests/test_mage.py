import pytest

from tavernkeep.character import Race
from tavernkeep.mage import Mage


def test_default_mage():
    mage = Mage()
    assert mage.name == "NAMELESS"
    assert mage.race is Race.NONE
    assert mage.school == "NONE"
    assert mage.casting_weapon == "NONE"
    assert mage.can_summon_incarnate is False


def test_default_mage_configured_through_setters():
    mage = Mage()
    mage.name = "DEFAULTMAGE"
    mage.race = "ELF"
    mage.vitality = 5
    mage.armor = 3
    mage.level = 2
    mage.make_enemy()
    assert mage.name == "DEFAULTMAGE"
    assert mage.race is Race.ELF
    assert (mage.vitality, mage.armor, mage.level) == (5, 3, 2)
    assert mage.enemy is True


def test_spynach():
    spynach = Mage("SPYNACH", "ELF", 6, 4, 4, False)
    assert spynach.set_school("ILLUSION") is True
    assert spynach.set_casting_weapon("WAND") is True
    spynach.can_summon_incarnate = True
    assert spynach.school == "ILLUSION"
    assert spynach.casting_weapon == "WAND"
    assert spynach.can_summon_incarnate is True
    assert spynach.race is Race.ELF


@pytest.mark.parametrize(
    "given, expected",
    [
        ("elemental", "ELEMENTAL"),
        ("Necromancy", "NECROMANCY"),
        ("il1lu sion", "ILLUSION"),
    ],
)
def test_school_matches_letters_in_any_case(given, expected):
    mage = Mage()
    assert mage.set_school(given) is True
    assert mage.school == expected


@pytest.mark.parametrize("given, expected", [("staff", "STAFF"), ("W-a-n-d", "WAND")])
def test_casting_weapon_matches_letters_in_any_case(given, expected):
    mage = Mage()
    assert mage.set_casting_weapon(given) is True
    assert mage.casting_weapon == expected


@pytest.mark.parametrize("school", ["", "NONE", "fire", "illusions"])
def test_unknown_school_refused_and_previous_kept(school):
    mage = Mage(school="ILLUSION")
    assert mage.set_school(school) is False
    assert mage.school == "ILLUSION"


@pytest.mark.parametrize("weapon", ["", "NONE", "sword", "wands"])
def test_unknown_weapon_refused_and_previous_kept(weapon):
    mage = Mage(weapon="STAFF")
    assert mage.set_casting_weapon(weapon) is False
    assert mage.casting_weapon == "STAFF"


def test_unknown_values_in_constructor_become_none():
    mage = Mage("SPYNACH", "ELF", school="fire", weapon="sword", can_summon_incarnate=True)
    assert mage.school == "NONE"
    assert mage.casting_weapon == "NONE"
    assert mage.can_summon_incarnate is True


def test_equality_ignores_magic():
    first = Mage("SPYNACH", "ELF", 6, 4, 4, False, "ILLUSION", "WAND")
    second = Mage("SPYNACH", "ELF", 1, 1, 4, False, "ELEMENTAL", "STAFF")
    third = Mage("SPYNACH", "ELF", 6, 4, 5, False, "ILLUSION", "WAND")
    assert first == second
    assert not first == third