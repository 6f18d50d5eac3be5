# tavernkeep

A small role-playing toolkit: characters with a name, race, vitality, armor,
level and enemy flag; four character classes built on them; and a tavern that
keeps count of who walks in and out.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Characters

`tavernkeep.character` holds `Race` and `Character`.

- `name` keeps only the ASCII letters it is given, upper-cased; a name with no
  letters becomes `NAMELESS`.
- `race` accepts a `Race` or a race name in any case; an unknown name becomes
  `Race.NONE`.
- `vitality`, `armor` and `level` given negative to the constructor become 0.
  Assigning a negative value to an existing character leaves the old value in
  place.
- `enemy` is read-only; `make_enemy()` marks a character as an enemy.

```python
from tavernkeep.character import Character

frodo = Character("Frodo1954", "NONE", 100, 67, 25, False)
print(frodo.name)   # FRODO
print(frodo)
```

`str()` of a character gives a short description of its level, race, vitality,
armor and allegiance. Characters compare equal when their name, race, level and
enemy flag match; they are not hashable.

## Character classes

- `tavernkeep.barbarian.Barbarian`: a `main_weapon` and a `secondary_weapon`,
  set with `set_main_weapon` and `set_secondary_weapon`, which accept only
  names made of letters and return whether they succeeded; an `enraged` flag
  that `toggle_enrage()` flips.
- `tavernkeep.mage.Mage`: a `school` (ELEMENTAL, NECROMANCY or ILLUSION) set
  with `set_school`, a `casting_weapon` (WAND or STAFF) set with
  `set_casting_weapon`, and a `can_summon_incarnate` flag. Unknown names are
  refused and the setters return False.
- `tavernkeep.ranger.Ranger`: a quiver read through `arrows` as a list of
  `Arrows(type, quantity)` (types WOOD, FIRE, WATER, POISON, BLOOD),
  `affinities` (FIRE, WATER, POISON, BLOOD, without duplicates) and a
  `companion` flag. `add_arrows`, `fire_arrow` and `add_affinity` return
  whether they succeeded.
- `tavernkeep.scoundrel.Scoundrel`: a `Dagger` (WOOD, BRONZE, IRON, STEEL,
  MITHRIL, ADAMANT, RUNE) set with `set_dagger`, where an unknown name gives a
  wooden dagger; a `faction` (NONE, CUTPURSE, SHADOWBLADE, SILVERTONGUE) set
  with `set_faction`, which returns False for an unknown faction; and a
  `disguise` flag.

## Bags and taverns

`tavernkeep.bag.ArrayBag` is an unordered bag with a fixed capacity (100 by
default) that allows duplicates. It supports `len()`, iteration and `in`;
`add` and `remove` return whether they worked, `clear` empties it and
`frequency_of` counts an item. `+=` adds every item of another bag and `/=`
adds only those not already present; both leave the bag unchanged when the two
together would reach its capacity.

`tavernkeep.tavern.Tavern` is a bag of characters that keeps `level_sum` and
`enemy_count` up to date through `enter` and `leave`:

```python
from tavernkeep.character import Character
from tavernkeep.tavern import Tavern

pony = Tavern()
pony.enter(Character("Aragorn", "HUMAN", 100, 50, 87, False))
pony.enter(Character("Sauron", "UNDEAD", 100, 100, 50000, True))
print(pony.average_level(), pony.enemy_percentage())
print(pony.tally_race("UNDEAD"))
print(pony.report())
```

`average_level()` and `enemy_percentage()` raise `ZeroDivisionError` on an
empty tavern. `report()` returns the summary as a string. Characters put in
with the plain bag operations (`add`, `+=`, `/=`) are not counted in the
tallies.

## Demo

A walk-through that builds characters of every class and fills a few taverns:

    tavernkeep-demo

It takes an optional scenario: `characters`, `party`, `tavern` or `all` (the
default).

## What it does not do

There is no game loop, no combat and no storage: characters and taverns live
only in memory for as long as your program holds them.