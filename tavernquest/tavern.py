"""The tavern: a bounded bag of characters with statistics and a combat queue."""

from __future__ import annotations

import math
import re
import sys
from collections import deque
from os import PathLike
from typing import TextIO

from tavernquest.array_bag import ArrayBag
from tavernquest.character import Character, Race

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

FILTER_NONE = "NONE"
FILTER_LEVEL_ASCENDING = "LVLASC"
FILTER_LEVEL_DESCENDING = "LVLDES"
FILTER_VITALITY_ASCENDING = "HPASC"
FILTER_VITALITY_DESCENDING = "HPDES"

_SORT_ORDERS = {
    FILTER_LEVEL_ASCENDING: (lambda c: c.level, False),
    FILTER_LEVEL_DESCENDING: (lambda c: c.level, True),
    FILTER_VITALITY_ASCENDING: (lambda c: c.vitality, False),
    FILTER_VITALITY_DESCENDING: (lambda c: c.vitality, True),
}


def level_is_less(first: Character, second: Character) -> bool:
    return first.level < second.level


def level_is_greater(first: Character, second: Character) -> bool:
    return first.level > second.level


def vitality_is_less(first: Character, second: Character) -> bool:
    return first.vitality < second.vitality


def vitality_is_greater(first: Character, second: Character) -> bool:
    return first.vitality > second.vitality


def _parse_int(text: str) -> int:
    """Read a leading integer from ``text``; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _enemy_line(character: Character) -> str:
    return (
        f"(ENEMY) {character.name}: LEVEL {character.level} {character.race.value}.\n"
        f"VITALITY: {character.vitality}\n"
        f"ARMOR: {character.armor}\n"
    )


class Tavern(ArrayBag[Character]):
    """Characters gathered in a tavern, tracked by identity."""

    def __init__(self) -> None:
        super().__init__()
        self._level_sum = 0
        self._enemy_count = 0
        self.main_character: Character | None = None
        self.combat_queue: deque[Character] = deque()

    def _matches(self, stored: Character, entry: object) -> bool:
        return stored is entry

    @classmethod
    def from_csv(cls, path: str | PathLike[str]) -> Tavern:
        """Build a tavern from a CSV file with a header line.

        Columns are name, race, vitality, armor, level and enemy (0 or 1).
        """
        tavern = cls()
        with open(path, encoding="utf-8") as stream:
            next(stream, None)
            for line in stream:
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                fields = (line.split(",") + [""] * 6)[:6]
                name, race, vitality, armor, level, enemy = fields
                tavern.enter(
                    Character(
                        name,
                        race,
                        _parse_int(vitality),
                        _parse_int(armor),
                        _parse_int(level),
                        _parse_int(enemy) != 0,
                    )
                )
        return tavern

    @property
    def level_sum(self) -> int:
        return self._level_sum

    @property
    def enemy_count(self) -> int:
        return self._enemy_count

    def enter(self, character: Character) -> bool:
        """Admit ``character``; return False if the tavern is full."""
        if not self.add(character):
            return False
        self._level_sum += character.level
        if character.enemy:
            self._enemy_count += 1
        return True

    def exit(self, character: Character) -> bool:
        """Let ``character`` leave; return False if they are not here."""
        if not self.remove(character):
            return False
        self._level_sum -= character.level
        if character.enemy:
            self._enemy_count -= 1
        return True

    def average_level(self) -> int:
        """Average level of everyone present, rounded half away from zero."""
        if self._level_sum <= 0 or not len(self):
            return 0
        return math.floor(self._level_sum / len(self) + 0.5)

    def enemy_percentage(self) -> float:
        """Share of enemies in percent, rounded up to two decimals."""
        if self._enemy_count <= 0 or not len(self):
            return 0.0
        percent = self._enemy_count / len(self) * 100
        return math.ceil(percent * 100.0) / 100.0

    def tally_race(self, race: str | Race) -> int:
        key = race.value if isinstance(race, Race) else race
        return sum(1 for character in self if character.race.value == key)

    def report(self) -> str:
        """Summarise races, average level and enemy share."""
        return (
            f"Humans: {self.tally_race(Race.HUMAN)}\n"
            f"Elves: {self.tally_race(Race.ELF)}\n"
            f"Dwarves: {self.tally_race(Race.DWARF)}\n"
            f"Lizards: {self.tally_race(Race.LIZARD)}\n"
            f"Undead: {self.tally_race(Race.UNDEAD)}\n"
            f"\nThe average level is: {self.average_level()}\n"
            f"{self.enemy_percentage():.2f}% are enemies.\n\n"
        )

    def display_characters(self, out: TextIO | None = None) -> None:
        stream = out or sys.stdout
        for character in self:
            character.display(stream)

    def display_race(self, race: str | Race, out: TextIO | None = None) -> None:
        key = race.value if isinstance(race, Race) else race
        stream = out or sys.stdout
        for character in self:
            if character.race.value == key:
                character.display(stream)

    def empty(self) -> None:
        """Make everyone leave the tavern."""
        self.clear()
        self._level_sum = 0
        self._enemy_count = 0

    def create_combat_queue(self, filter: str = FILTER_NONE) -> None:
        """Queue every enemy present, ordered by ``filter``.

        An unrecognised filter leaves the queue empty.
        """
        self.combat_queue = deque()
        enemies = [character for character in self if character.enemy]
        if filter == FILTER_NONE:
            self.combat_queue.extend(enemies)
            return
        order = _SORT_ORDERS.get(filter)
        if order is None:
            return
        key, reverse = order
        self.combat_queue.extend(sorted(enemies, key=key, reverse=reverse))

    def target(self) -> Character | None:
        """The enemy at the front of the combat queue, if any."""
        return self.combat_queue[0] if self.combat_queue else None

    def format_combat_queue(self) -> str:
        return "".join(_enemy_line(enemy) for enemy in self.combat_queue)