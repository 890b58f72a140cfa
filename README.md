# tavernquest

A small role-playing game in pure Python. Characters gather in a tavern,
the enemies among them line up in a combat queue, and your main character
fights them turn by turn. A separate inventory keeps the items you pick up,
ordered by name in a binary search tree.

It needs nothing beyond the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The command

Installing the package provides the `tavernquest` command with two
subcommands:

```
tavernquest combat [CSV] [--filter {NONE,LVLASC,LVLDES,HPASC,HPDES}] [--seed N]
tavernquest inventory
```

`combat` fills a tavern from `CSV` (default `enemies.csv`), prints the combat
queue and starts a fight with a level 10 human hero called RIO (vitality 10,
armor 10). Your action choices are read as numbers from standard input;
`--seed` makes the enemies' random choices repeatable. If input runs out
before the fight ends, the command stops with exit status 1.

`inventory` adds a fixed set of sample items to an inventory and prints the
total gold value, the items sorted in several ways, and the results of a
removal, two searches and a refused duplicate.

## Characters and the tavern

```python
from tavernquest.character import Character
from tavernquest.tavern import Tavern

hero = Character("Rio", "HUMAN", 10, 10, 10, False)
grub = Character("Grub", "LIZARD", 6, 2, 3, True)

tavern = Tavern()
tavern.enter(hero)
tavern.enter(grub)

print(tavern.average_level())      # rounded to the nearest integer
print(tavern.enemy_percentage())   # rounded up to two decimals
print(tavern.tally_race("LIZARD"))
print(tavern.report())

tavern.create_combat_queue("HPDES")
print(tavern.target())
print(tavern.format_combat_queue())
```

A character's name keeps only its ASCII letters, upper-cased, and becomes
`NAMELESS` if none are left; an unknown race becomes `Race.NONE`; negative
vitality, armor or level fall back to 0 in the constructor and are ignored by
the property setters. Two characters are equal when their name, race, level
and enemy flag match.

A tavern holds at most 100 characters and tracks them by identity; `enter`
returns `False` when it is full and `exit` returns `False` for someone who is
not there. It can also be filled from a CSV file whose first line is a
header and whose other lines read `name,race,vitality,armor,level,enemy`,
with `enemy` written as `0` or `1`:

```python
tavern = Tavern.from_csv("enemies.csv")
```

Combat queue filters are `NONE` (tavern order), `LVLASC`, `LVLDES`, `HPASC`
and `HPDES`; any other filter leaves the queue empty.

`tavernquest.array_bag.ArrayBag`, the bounded bag the tavern is built on, can
be used on its own: `add`, `remove`, `frequency_of`, `to_list`, `+=` (with
duplicates) and `union_update` (without).

## Combat

```python
import io
import random
from tavernquest.combat import Combat

tavern.main_character = hero
tavern.create_combat_queue()
choices = iter([3, 3, 3] * 20)
out = io.StringIO()
Combat(tavern, read_action=lambda: next(choices), out=out, rng=random.Random(1)).run()
```

`Combat` runs the fight between `tavern.main_character` and the combat queue.
Each round `action_selection` reads three choices (1 heal, 2 mend metal,
3 strike, 4 throw tomato; numbers outside 0–4 are asked for again),
`turn_resolution` carries them out against the enemy at the front of the
queue, removing defeated enemies from the queue and the tavern, and
`enemy_turn` lets that enemy pick one action at random. Buffs stay on a
character's stack for a number of turns. A throw tomato is announced but
changes nothing. `run` ends with `YOU HAVE PERISHED.` or `NO MORE ENEMIES.`.
Without `read_action` the choices are read from standard input; without
`out`, results go to standard output.

## Inventory

```python
from tavernquest.item import Item, ItemType
from tavernquest.inventory import Inventory, format_item

inventory = Inventory()
inventory.add_item(Item("SWORD", ItemType.WEAPON, 150, 75, 1))
inventory.add_item(Item("POTION", ItemType.CONSUMABLE, 35, 100, 5))
inventory.add_item(Item("POTION", ItemType.CONSUMABLE, 35, 100, 2))  # stacks to 7

print(inventory.total_gold_value())   # sum of gold value times quantity
for item in inventory.sorted_items(False, "LEVEL"):
    print(format_item(item))

inventory.remove_item("POTION")   # a consumable loses one from its stack
print(inventory.find_item("SWORD"))
```

Item names keep ASCII letters and spaces, upper-cased, and become `UNKNOWN`
if empty. Level and gold value below 1 become 1; only consumables hold a
quantity above 1. Items compare by name, and each records when it was picked
up in milliseconds.

Weapons, armour and unknown items are unique: adding one whose name is
already held is refused. Items can be listed by `NAME`, `TYPE`, `LEVEL`,
`VALUE` or `TIME`, ascending or descending; `print_in_order` and
`print_inventory` write the same descriptions to a stream.

`tavernquest.bst.BinarySearchTree` is a general unbalanced tree that allows
duplicates, with `add`, `remove`, `find`, `height`, `copy` and `preorder`,
`inorder` and `postorder` generators.

## What it does not do

Nothing is saved: characters, taverns and inventories live only in memory,
and the only file read is the tavern CSV. The inventory is not connected to
combat, and the `inventory` command walks through a fixed sample rather than
letting you manage your own items.