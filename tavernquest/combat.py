"""Turn-based combat between the tavern's main character and its enemies."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Iterator
from typing import Protocol, TextIO

from tavernquest.character import Action, Buff, Character
from tavernquest.tavern import Tavern

ACTION_PROMPT = (
    "Choose an action(1-4):\n"
    "1: BUFF_Heal\t\t2: BUFF_MendMetal\t\t3: ATT_Strike\t\t4: ATT_ThrowTomato\n"
)
INVALID_INPUT = "Invalid input. Please enter a number between 1 and 4 inclusive.\n"
ACTIONS_PER_TURN = 3

_BUFF_TURNS = {
    Action.HEAL: 3,
    Action.MEND_METAL: 2,
    Action.STRIKE: 1,
    Action.THROW_TOMATO: 1,
}
_BY_LABEL = {action.label: action for action in Action}


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _stdin_actions() -> Iterator[int]:
    """Yield whitespace-separated numbers typed on stdin; -1 for anything else."""
    for line in sys.stdin:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                yield -1


def _status(tag: str, character: Character) -> str:
    return (
        f"\n({tag}) {character.name}: LEVEL {character.level} {character.race.value}."
        f"\nVITALITY: {character.vitality}\nARMOR: {character.armor}\n"
    )


class Combat:
    """Runs fights between ``tavern.main_character`` and the tavern's combat queue."""

    def __init__(
        self,
        tavern: Tavern,
        read_action: Callable[[], int] | None = None,
        out: TextIO | None = None,
        rng: _RandomSource | None = None,
    ) -> None:
        self.tavern = tavern
        self._read_action = read_action or self._stdin_reader()
        self.out = out or sys.stdout
        self.rng = rng or random.Random()

    @staticmethod
    def _stdin_reader() -> Callable[[], int]:
        numbers = _stdin_actions()

        def read() -> int:
            try:
                return next(numbers)
            except StopIteration:
                raise EOFError("no more input") from None

        return read

    @property
    def _hero(self) -> Character:
        hero = self.tavern.main_character
        if hero is None:
            raise RuntimeError("the tavern has no main character")
        return hero

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _opponent(self, friendly: bool) -> Character:
        return self.tavern.combat_queue[0] if friendly else self._hero

    def _push(self, character: Character, action: Action) -> None:
        character.buff_stack.append(Buff(action.label, _BUFF_TURNS[action]))

    def _apply(self, character: Character, action: Action, friendly: bool) -> None:
        """Use the buff on top of ``character``'s stack and report the result."""
        top = character.buff_stack[-1]
        if not top.applied:
            if action is Action.HEAL:
                character.heal()
            elif action is Action.MEND_METAL:
                character.mend_metal()
            elif action is Action.STRIKE:
                character.strike(self._opponent(friendly))
            # ThrowTomato is announced but carries no effect.
        top.turns -= 1
        top.applied = True
        if top.turns <= 0:
            character.buff_stack.pop()
        self._report(action, friendly)

    def _report(self, action: Action, friendly: bool) -> None:
        hero = self._hero
        enemy = self.tavern.combat_queue[0]
        if friendly:
            self._write(
                f"{hero.name} used {action.short_name}!"
                + _status("YOU", hero)
                + _status("ENEMY", enemy)
            )
        else:
            self._write(
                f"{enemy.name} used {action.short_name}!"
                + _status("ENEMY", enemy)
                + _status("YOU", hero)
            )

    def _apply_top_buff(self, character: Character, friendly: bool) -> None:
        if character.buff_stack:
            action = _BY_LABEL.get(character.buff_stack[-1].name)
            if action is not None:
                self._apply(character, action, friendly)

    def action_selection(self) -> None:
        """Read the main character's actions for the coming turn."""
        enemy = self.tavern.target()
        if enemy is None:
            return
        hero = self._hero
        hero.action_queue.clear()
        self._write(
            f"YOUR TURN\n(ENEMY) {enemy.name}: LEVEL {enemy.level} {enemy.race.value}. "
            f"\nVITALITY: {enemy.vitality} \nARMOR: {enemy.armor}\n\n"
        )
        for _ in range(ACTIONS_PER_TURN):
            self._write(ACTION_PROMPT)
            choice = self._read_action()
            while choice < 0 or choice > 4:
                self._write(INVALID_INPUT)
                choice = self._read_action()
            hero.action_queue.append(choice)

    def turn_resolution(self) -> None:
        """Carry out the main character's queued actions against the front enemy."""
        hero = self._hero
        queue = self.tavern.combat_queue
        if not hero.action_queue or not queue:
            return
        self._apply_top_buff(hero, True)
        while hero.action_queue:
            if not queue:
                return
            choice = hero.action_queue[0]
            if 1 <= choice <= 4:
                action = Action(choice)
                self._push(hero, action)
                self._apply(hero, action, True)
            target = queue[0]
            if target.vitality <= 0:
                self._write(f"{target.name} DEFEATED\n\n")
                self.tavern.exit(target)
                queue.popleft()
            hero.action_queue.popleft()
        self._write("END OF YOUR TURN\n\n")

    def enemy_turn(self, enemy: Character | None) -> None:
        """Let ``enemy`` use its top buff and then one random action."""
        if not self.tavern.combat_queue or enemy is None:
            return
        self._write("\nENEMY TURN\n")
        self._apply_top_buff(enemy, False)
        action = Action(self.rng.randint(1, 4))
        self._push(enemy, action)
        self._apply(enemy, action, False)
        self._write("END OF ENEMY TURN\n\n")

    def run(self) -> None:
        """Fight until the main character falls or the combat queue empties."""
        hero = self._hero
        while hero.vitality > 0 and self.tavern.combat_queue:
            self.action_selection()
            self.turn_resolution()
            self.enemy_turn(self.tavern.target())
        if hero.vitality <= 0:
            self._write("YOU HAVE PERISHED.")
        else:
            self._write("NO MORE ENEMIES.")