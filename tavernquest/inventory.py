"""An inventory of items kept in a binary search tree ordered by name."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from tavernquest.bst import BinarySearchTree
from tavernquest.item import Item, ItemType

_SORT_KEYS: dict[str, Callable[[Item], object]] = {
    "NAME": lambda item: item.name,
    "TYPE": lambda item: item.item_type.value,
    "LEVEL": lambda item: item.level,
    "VALUE": lambda item: item.gold_value,
    "TIME": lambda item: item.time_picked_up,
}


def format_item(item: Item) -> str:
    """Describe ``item``; the quantity line appears for consumables only."""
    text = (
        f"{item.name} ({item.item_type.value})\n"
        f"Level: {item.level}\n"
        f"Value: {item.gold_value}\n"
    )
    if item.item_type is ItemType.CONSUMABLE:
        text += f"Quantity: {item.quantity}\n"
    return text


class Inventory(BinarySearchTree[Item]):
    """Items held in ascending order of name."""

    def add_item(self, item: Item | None) -> bool:
        """Add ``item``, merging it into an existing consumable of the same name.

        Return False for None or for a non-consumable already present.
        """
        if item is None:
            return False
        current = self.find_item(item.name)
        if current is None:
            self.add(item)
            return True
        if current.item_type is not ItemType.CONSUMABLE:
            return False
        current.quantity = current.quantity + item.quantity
        current.time_picked_up = item.time_picked_up
        return True

    def remove_item(self, name: str) -> bool:
        """Remove one unit of the named item; False if it is not held."""
        item = self.find_item(name)
        if item is None:
            return False
        if item.item_type is ItemType.CONSUMABLE and item.quantity > 1:
            item.quantity = item.quantity - 1
        else:
            self.remove(item)
        return True

    def find_item(self, name: str) -> Item | None:
        found = None
        for item in self.inorder():
            if item.name == name:
                found = item
        return found

    def total_gold_value(self) -> int:
        return sum(item.gold_value * item.quantity for item in self.inorder())

    def sorted_items(self, ascending: bool, attribute: str) -> list[Item]:
        """Items ordered by ``attribute`` (NAME, TYPE, LEVEL, VALUE or TIME).

        An unrecognised attribute leaves the items in name order.
        """
        items = list(self.inorder())
        key = _SORT_KEYS.get(attribute)
        if key is None:
            return items
        return sorted(items, key=key, reverse=not ascending)

    def print_in_order(self, out: TextIO | None = None) -> None:
        stream = out or sys.stdout
        for item in self.inorder():
            stream.write(format_item(item))

    def print_inventory(
        self, ascending: bool, attribute: str, out: TextIO | None = None
    ) -> None:
        stream = out or sys.stdout
        for item in self.sorted_items(ascending, attribute):
            stream.write(format_item(item))