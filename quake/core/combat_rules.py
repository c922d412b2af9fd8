"""
Turn and combat rules for the combat tracker.

Covers:
1. Advancing the turn pointer around the roster
2. Rolling turn order (1d20 per character)
3. Applying damage with hit points clamped at zero
"""

import random

from quake.core.roster import SortType

TURN_ROLL_MIN = 1
TURN_ROLL_MAX = 20


class CombatRules:
    """
    Value transformations used by the combat tracker controller.
    """

    @staticmethod
    def roll_d20(rng=None):
        """
        Roll a uniformly random turn roll.

        Args:
            rng: Optional random.Random instance (module random if None)

        Returns:
            int in [1, 20]
        """
        rng = rng or random
        return rng.randint(TURN_ROLL_MIN, TURN_ROLL_MAX)

    @staticmethod
    def next_turn_index(current_index, count):
        """
        Get the index of the next combatant.

        Args:
            current_index: Index of the combatant whose turn just ended
            count: Number of combatants in the roster

        Returns:
            The next index, wrapping to 0; current_index unchanged if count is 0
        """
        if count <= 0:
            return current_index
        return (current_index + 1) % count

    @staticmethod
    def subtract_hp(hp, amount):
        """
        Apply damage to a hit point total.

        Args:
            hp: Current hit points
            amount: Damage to apply; amounts <= 0 are ignored

        Returns:
            New hit points, never below 0
        """
        if amount <= 0:
            return hp
        return max(0, hp - amount)

    @staticmethod
    def randomize_turn_rolls(roster, rng=None):
        """
        Give every character a fresh 1d20 turn roll, then order by turn roll.

        Args:
            roster: Roster to update in place
            rng: Optional random.Random instance
        """
        for character in roster:
            character.turn_roll = CombatRules.roll_d20(rng)
        roster.sort(SortType.TURN_ROLL)
