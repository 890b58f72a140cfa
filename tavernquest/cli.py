"""Command-line entry points: a tavern brawl and an inventory walkthrough."""

from __future__ import annotations

import argparse
import random
import sys
from typing import TextIO

from tavernquest.character import Character
from tavernquest.combat import Combat
from tavernquest.inventory import Inventory
from tavernquest.item import Item, ItemType
from tavernquest.tavern import (
    FILTER_LEVEL_ASCENDING,
    FILTER_LEVEL_DESCENDING,
    FILTER_NONE,
    FILTER_VITALITY_ASCENDING,
    FILTER_VITALITY_DESCENDING,
    Tavern,
)

_FILTERS = (
    FILTER_NONE,
    FILTER_LEVEL_ASCENDING,
    FILTER_LEVEL_DESCENDING,
    FILTER_VITALITY_ASCENDING,
    FILTER_VITALITY_DESCENDING,
)


def _write_outcome(out: TextIO, heading: str, success: bool) -> None:
    """Write ``heading`` followed by whether the operation succeeded."""
    verdict = "SUCCESSFUL" if success else "UNSUCCESSFUL"
    out.write(f"{heading}: {verdict}\n")


def _write_search(out: TextIO, inventory: Inventory, name: str) -> None:
    """Look ``name`` up in ``inventory`` and write whether it was found."""
    verdict = "FOUND" if inventory.find_item(name) is not None else "NOT FOUND"
    out.write(f"\nSEARCHING FOR ITEM ({name}): {verdict}\n")


def _run_combat(args: argparse.Namespace, out: TextIO) -> int:
    hero = Character("Rio", "HUMAN", 10, 10, 10, False)
    try:
        tavern = Tavern.from_csv(args.csv)
    except OSError as error:
        print(f"cannot read {args.csv}: {error.strerror or error}", file=sys.stderr)
        return 1
    tavern.create_combat_queue(args.filter)
    out.write(tavern.format_combat_queue())
    tavern.main_character = hero
    rng = random.Random(args.seed) if args.seed is not None else None
    fight = Combat(tavern, out=out, rng=rng)
    try:
        fight.run()
    except EOFError:
        out.write("\n")
        print("input ended before the fight was over", file=sys.stderr)
        return 1
    out.write("\n")
    return 0


def _run_inventory(out: TextIO) -> int:
    inventory = Inventory()
    sword = Item("SWORD", ItemType.WEAPON, 150, 75, 1)
    gauntlet = Item("GAUNTLET", ItemType.ARMOR, 73, 95, 1)
    shield = Item("SHIELD", ItemType.ARMOR, 95, 40, 1)
    potion = Item("POTION", ItemType.CONSUMABLE, 35, 100, 5)
    substance = Item("MYSTERIOUS_SUBSTANCE", ItemType.UNKNOWN, 25, 5, 1)

    for label, item in (
        ("SWORD", sword),
        ("GAUNTLET", gauntlet),
        ("SHIELD", shield),
        ("POTION", potion),
        ("MYSTERIOUS SUBSTANCE", substance),
    ):
        _write_outcome(out, f"ADDING {label}", inventory.add_item(item))

    out.write(f"TOTAL GOLD: {inventory.total_gold_value()}\n")
    for attribute in ("NAME", "LEVEL", "VALUE", "TIME"):
        out.write(f"\nPRINT BY {attribute}\n")
        inventory.print_inventory(True, attribute, out)

    out.write("\nPRINT IN ORDER\n")
    inventory.print_in_order(out)

    _write_outcome(out, "\nREMOVING SWORD", inventory.remove_item("SWORD"))
    _write_search(out, inventory, "SHIELD")
    _write_search(out, inventory, "SWORD")
    _write_outcome(out, "\nADDING DUPLICATE", inventory.add_item(shield))
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tavernquest", description="Tavern brawls and adventurers' inventories."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    combat = commands.add_parser("combat", help="fight the enemies listed in a CSV file")
    combat.add_argument("csv", nargs="?", default="enemies.csv", help="tavern CSV file")
    combat.add_argument(
        "--filter", choices=_FILTERS, default=FILTER_NONE, help="combat queue order"
    )
    combat.add_argument("--seed", type=int, default=None, help="seed for enemy choices")

    commands.add_parser("inventory", help="walk through a sample inventory")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command named in ``argv`` and return its exit status."""
    args = _parser().parse_args(argv)
    out = sys.stdout
    if args.command == "combat":
        return _run_combat(args, out)
    return _run_inventory(out)


if __name__ == "__main__":
    sys.exit(main())