import io
import itertools
import sys

import pytest

from tavernquest.character import Buff, Character
from tavernquest.combat import ACTION_PROMPT, INVALID_INPUT, Combat
from tavernquest.tavern import Tavern


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


def scripted(values):
    it = iter(values)
    return lambda: next(it)


def setup(hero_vitality=10, hero_armor=0, enemy_vitality=5, enemy_armor=0):
    tavern = Tavern()
    hero = Character("Hero", "HUMAN", hero_vitality, hero_armor, 3, False)
    goblin = Character("Goblin", "ELF", enemy_vitality, enemy_armor, 2, True)
    tavern.enter(goblin)
    tavern.create_combat_queue()
    tavern.main_character = hero
    return tavern, hero, goblin


def test_action_selection_with_empty_queue_does_nothing():
    tavern = Tavern()
    tavern.main_character = Character("Hero", "HUMAN", 10)
    out = io.StringIO()
    calls = []
    combat = Combat(tavern, read_action=lambda: calls.append(1) or 1, out=out)
    combat.action_selection()
    assert out.getvalue() == ""
    assert calls == []
    assert list(tavern.main_character.action_queue) == []


def test_action_selection_reads_three_actions_and_reprompts():
    tavern, hero, _ = setup()
    out = io.StringIO()
    combat = Combat(tavern, read_action=scripted([5, 1, -1, 3, 0]), out=out)
    combat.action_selection()
    text = out.getvalue()
    assert list(hero.action_queue) == [1, 3, 0]
    assert text.startswith(
        "YOUR TURN\n(ENEMY) GOBLIN: LEVEL 2 ELF. \nVITALITY: 5 \nARMOR: 0\n\n"
    )
    assert text.count(INVALID_INPUT) == 2
    assert text.count(ACTION_PROMPT) == 3


def test_action_selection_replaces_previous_actions():
    tavern, hero, _ = setup()
    hero.action_queue.extend([4, 4])
    combat = Combat(tavern, read_action=scripted([2, 2, 2]), out=io.StringIO())
    combat.action_selection()
    assert list(hero.action_queue) == [2, 2, 2]


def test_default_reader_uses_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x 7 2\n3 1\n"))
    tavern, hero, _ = setup()
    out = io.StringIO()
    Combat(tavern, out=out).action_selection()
    assert list(hero.action_queue) == [2, 3, 1]
    assert out.getvalue().count(INVALID_INPUT) == 2


def test_default_reader_raises_eof_on_exhausted_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    tavern, _, _ = setup()
    with pytest.raises(EOFError):
        Combat(tavern, out=io.StringIO()).action_selection()


def test_turn_resolution_without_actions_does_nothing():
    tavern, hero, goblin = setup()
    out = io.StringIO()
    Combat(tavern, out=out).turn_resolution()
    assert out.getvalue() == ""
    assert goblin.vitality == 5


def test_strikes_defeat_enemy_at_end_of_turn():
    tavern, hero, goblin = setup(enemy_vitality=5)
    hero.action_queue.extend([3, 3, 3])
    out = io.StringIO()
    Combat(tavern, out=out).turn_resolution()
    text = out.getvalue()
    assert "GOBLIN DEFEATED\n\n" in text
    assert text.endswith("END OF YOUR TURN\n\n")
    assert goblin not in tavern
    assert len(tavern.combat_queue) == 0
    assert tavern.enemy_count == 0
    assert text.count("HERO used Strike!") == 3


def test_early_defeat_leaves_remaining_actions():
    tavern, hero, goblin = setup(enemy_vitality=2)
    hero.action_queue.extend([3, 3, 3])
    out = io.StringIO()
    Combat(tavern, out=out).turn_resolution()
    assert len(hero.action_queue) == 2
    assert "END OF YOUR TURN" not in out.getvalue()
    assert goblin not in tavern


def test_armor_absorbs_strike():
    tavern, hero, goblin = setup(enemy_vitality=5, enemy_armor=10)
    hero.action_queue.append(3)
    Combat(tavern, out=io.StringIO()).turn_resolution()
    assert goblin.vitality == 5
    assert goblin.armor < 10
    assert hero.buff_stack == []


def test_heal_actions_stack_buffs():
    tavern, hero, _ = setup(hero_vitality=10)
    hero.action_queue.extend([1, 1, 1])
    Combat(tavern, out=io.StringIO()).turn_resolution()
    assert hero.vitality > 10
    assert len(hero.buff_stack) == 3
    assert all(b.name == "BUFF_Heal" and b.turns == 2 and b.applied for b in hero.buff_stack)


def test_applied_buff_at_turn_start_only_counts_down():
    tavern, hero, _ = setup(hero_vitality=10)
    hero.buff_stack.append(Buff("BUFF_Heal", 1, True))
    hero.action_queue.append(0)
    out = io.StringIO()
    Combat(tavern, out=out).turn_resolution()
    assert hero.buff_stack == []
    assert hero.vitality == 10
    assert "HERO used Heal!" in out.getvalue()


def test_throw_tomato_is_announced_without_effect():
    tavern, hero, goblin = setup(hero_vitality=10, enemy_vitality=5)
    hero.action_queue.append(4)
    out = io.StringIO()
    Combat(tavern, out=out).turn_resolution()
    assert "HERO used ThrowTomato!" in out.getvalue()
    assert goblin.vitality == 5
    assert hero.vitality == 10


def test_enemy_turn_strikes_main_character():
    tavern, hero, goblin = setup(hero_vitality=10)
    rng = FixedRng(3)
    out = io.StringIO()
    Combat(tavern, out=out, rng=rng).enemy_turn(goblin)
    text = out.getvalue()
    assert rng.calls == [(1, 4)]
    assert hero.vitality < 10
    assert text.startswith("\nENEMY TURN\n")
    assert "GOBLIN used Strike!\n(ENEMY) GOBLIN: LEVEL 2 ELF." in text
    assert text.endswith("END OF ENEMY TURN\n\n")
    assert goblin.buff_stack == []


def test_enemy_turn_mend_metal_stays_on_stack():
    tavern, hero, goblin = setup(enemy_armor=0)
    Combat(tavern, out=io.StringIO(), rng=FixedRng(2)).enemy_turn(goblin)
    assert goblin.armor > 0
    assert [b.name for b in goblin.buff_stack] == ["BUFF_MendMetal"]
    assert goblin.buff_stack[0].turns == 1


def test_enemy_turn_uses_existing_buff_first():
    tavern, hero, goblin = setup(enemy_vitality=5, enemy_armor=4)
    goblin.buff_stack.append(Buff("BUFF_MendMetal", 1, True))
    out = io.StringIO()
    Combat(tavern, out=out, rng=FixedRng(1)).enemy_turn(goblin)
    text = out.getvalue()
    assert text.count("GOBLIN used ") == 2
    assert text.index("used MendMetal!") < text.index("used Heal!")
    assert goblin.armor == 4
    assert goblin.vitality > 5


def test_enemy_turn_with_empty_queue_does_nothing():
    tavern, hero, goblin = setup()
    tavern.combat_queue.clear()
    rng = FixedRng(3)
    out = io.StringIO()
    Combat(tavern, out=out, rng=rng).enemy_turn(goblin)
    assert out.getvalue() == ""
    assert rng.calls == []


def test_run_ends_with_no_more_enemies():
    tavern, hero, goblin = setup(hero_vitality=10, enemy_vitality=2)
    rng = FixedRng(1)
    out = io.StringIO()
    Combat(tavern, read_action=itertools.repeat(3).__next__, out=out, rng=rng).run()
    assert out.getvalue().endswith("NO MORE ENEMIES.")
    assert rng.calls == []
    assert goblin not in tavern


def test_run_ends_when_main_character_perishes():
    tavern, hero, goblin = setup(hero_vitality=1, enemy_vitality=50, enemy_armor=50)
    out = io.StringIO()
    Combat(
        tavern, read_action=itertools.repeat(4).__next__, out=out, rng=FixedRng(3)
    ).run()
    assert out.getvalue().endswith("YOU HAVE PERISHED.")
    assert hero.vitality <= 0
    assert goblin in tavern


def test_run_with_no_enemies_reports_immediately():
    tavern = Tavern()
    tavern.main_character = Character("Hero", "HUMAN", 10)
    out = io.StringIO()
    Combat(tavern, read_action=scripted([]), out=out).run()
    assert out.getvalue() == "NO MORE ENEMIES."


def test_missing_main_character_raises():
    tavern = Tavern()
    tavern.enter(Character("Goblin", "ELF", 5, 0, 2, True))
    tavern.create_combat_queue()
    with pytest.raises(RuntimeError):
        Combat(tavern, out=io.StringIO()).turn_resolution()