# quake/core/spawning.py
# Factories for new roster entries

import copy
import random

from quake.core.combat_rules import CombatRules
from quake.core.models.character import Character

DEFAULT_TURN_ROLL = 10
DEFAULT_CHARACTER_NAME = "New Character"
DEFAULT_CHARACTER_HP = 100
FALLBACK_MONSTER_NAME = "monster"
NEW_CHARACTER_HP_MAX = 20


def default_character():
    """The single character a brand new save file starts with."""
    return Character(name=DEFAULT_CHARACTER_NAME, turn_roll=DEFAULT_TURN_ROLL, hp=DEFAULT_CHARACTER_HP)


def new_character_from_name(name, rng=None):
    """
    Create a character typed in by the user.

    Returns None for an empty name. Turn roll starts at 10 and hit points
    are rolled 1-20.
    """
    if not name or not name.strip():
        return None
    rng = rng or random
    return Character(name=name, turn_roll=DEFAULT_TURN_ROLL, hp=rng.randint(1, NEW_CHARACTER_HP_MAX))


def new_character_from_monster(monster, rng=None):
    """
    Create a character from a catalog monster.

    The monster is deep-copied so the character keeps its own snapshot.
    Negative catalog hit points start the character at 0.
    """
    return Character(
        name=monster.name or FALLBACK_MONSTER_NAME,
        turn_roll=CombatRules.roll_d20(rng),
        hp=max(0, monster.hit_points),
        monster_details=copy.deepcopy(monster),
    )
