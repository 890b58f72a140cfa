"""Items that can be picked up and carried in an inventory."""

from __future__ import annotations

import time
from enum import Enum


class ItemType(str, Enum):
    UNKNOWN = "UNKNOWN"
    WEAPON = "WEAPON"
    ARMOR = "ARMOR"
    CONSUMABLE = "CONSUMABLE"

    @classmethod
    def parse(cls, value: str | ItemType) -> ItemType:
        """Return the type named by ``value``, or UNKNOWN if it names none."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


def _clean_name(name: str) -> str:
    cleaned = "".join(
        c.upper() for c in name if (c.isascii() and c.isalpha()) or c == " "
    )
    return cleaned or "UNKNOWN"


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


class Item:
    """A named item with a type, level, gold value and quantity.

    Items compare and order by name alone.
    """

    def __init__(
        self,
        name: str = "UNKNOWN",
        item_type: str | ItemType = ItemType.UNKNOWN,
        level: int = 0,
        gold_value: int = 0,
        quantity: int = 1,
    ) -> None:
        self.name = name
        self.item_type = item_type
        self._level = level if level > 0 else 1
        self._gold_value = gold_value if gold_value > 0 else 1
        self._quantity = 1
        self.quantity = quantity
        self.time_picked_up = 0
        self.update_time_picked_up()

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _clean_name(value)

    @property
    def item_type(self) -> ItemType:
        return self._item_type

    @item_type.setter
    def item_type(self, value: str | ItemType) -> None:
        self._item_type = ItemType.parse(value)

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        if value >= 1:
            self._level = value

    @property
    def gold_value(self) -> int:
        return self._gold_value

    @gold_value.setter
    def gold_value(self, value: int) -> None:
        if value >= 1:
            self._gold_value = value

    @property
    def quantity(self) -> int:
        return self._quantity

    @quantity.setter
    def quantity(self, value: int) -> None:
        """Positive values are kept for consumables; other items hold exactly one."""
        if value >= 1:
            self._quantity = value if self._item_type is ItemType.CONSUMABLE else 1

    def update_time_picked_up(self) -> None:
        """Stamp the item with the current time in milliseconds."""
        self.time_picked_up = _now_millis()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: Item) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.name < other.name

    def __gt__(self, other: Item) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.name > other.name

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Item({self.name!r}, {self.item_type.value!r}, {self.level}, "
            f"{self.gold_value}, {self.quantity})"
        )