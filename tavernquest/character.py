"""Characters that populate the tavern and fight in it."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TextIO


class Race(str, Enum):
    NONE = "NONE"
    HUMAN = "HUMAN"
    ELF = "ELF"
    DWARF = "DWARF"
    LIZARD = "LIZARD"
    UNDEAD = "UNDEAD"

    @classmethod
    def parse(cls, value: str | Race) -> Race:
        """Return the race named by ``value``, or NONE if it names none."""
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


class Action(IntEnum):
    """Combat actions, numbered as the player chooses them."""

    HEAL = 1
    MEND_METAL = 2
    STRIKE = 3
    THROW_TOMATO = 4

    @property
    def label(self) -> str:
        return {
            Action.HEAL: "BUFF_Heal",
            Action.MEND_METAL: "BUFF_MendMetal",
            Action.STRIKE: "ATT_Strike",
            Action.THROW_TOMATO: "ATT_ThrowTomato",
        }[self]

    @property
    def short_name(self) -> str:
        return {
            Action.HEAL: "Heal",
            Action.MEND_METAL: "MendMetal",
            Action.STRIKE: "Strike",
            Action.THROW_TOMATO: "ThrowTomato",
        }[self]


@dataclass
class Buff:
    """An effect on a character's stack lasting a number of turns."""

    name: str = ""
    turns: int = 0
    applied: bool = False


def _clean_name(name: str) -> str:
    letters = "".join(c.upper() for c in name if c.isascii() and c.isalpha())
    return letters or "NAMELESS"


class Character:
    """A named tavern-goer with vitality, armor and level."""

    def __init__(
        self,
        name: str = "NAMELESS",
        race: str | Race = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
    ) -> None:
        self.name = name
        self.race = race
        self._vitality = max(vitality, 0) if vitality >= 0 else 0
        self._armor = armor if armor >= 0 else 0
        self._level = level if level >= 0 else 0
        self.enemy = bool(enemy)
        self.action_queue: deque[int] = deque()
        self.buff_stack: list[Buff] = []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _clean_name(value)

    @property
    def race(self) -> Race:
        return self._race

    @race.setter
    def race(self, value: str | Race) -> None:
        self._race = Race.parse(value)

    @property
    def vitality(self) -> int:
        return self._vitality

    @vitality.setter
    def vitality(self, value: int) -> None:
        if value >= 0:
            self._vitality = value

    @property
    def armor(self) -> int:
        return self._armor

    @armor.setter
    def armor(self, value: int) -> None:
        if value >= 0:
            self._armor = value

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        if value >= 0:
            self._level = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Character):
            return NotImplemented
        return (
            self.name == other.name
            and self.race is other.race
            and self.level == other.level
            and self.enemy == other.enemy
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Character({self.name!r}, {self.race.value!r}, {self.vitality}, "
            f"{self.armor}, {self.level}, {self.enemy})"
        )

    def __str__(self) -> str:
        stance = "They are an enemy.\n" if self.enemy else "They are not an enemy.\n"
        return (
            f"{self.name} is a Level {self.level} {self.race.value}. \n"
            f"Vitality: {self.vitality}\n"
            f"Max Armor: {self.armor} \n"
            f"{stance}"
        )

    def display(self, out: TextIO | None = None) -> None:
        """Write the character's description to ``out`` (stdout by default)."""
        (out or sys.stdout).write(str(self))

    def heal(self) -> None:
        self._vitality += 2

    def mend_metal(self) -> None:
        self._armor += 2

    def strike(self, target: Character) -> None:
        """Deal 2 damage to ``target``; armor absorbs it first."""
        if target._armor > 0:
            target._armor -= 2
            if target._armor < 0:
                damage = -target._armor
                target._armor = 0
                target._vitality -= damage
        else:
            target._vitality -= 2

    def throw_tomato(self, target: Character) -> None:
        """Deal 1 damage to ``target`` and gain 1 vitality."""
        if target._armor > 0:
            target._armor -= 1
        else:
            target._vitality -= 1
        self._vitality += 1