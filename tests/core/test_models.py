"""
Unit tests for the Character and Monster models.
"""

import unittest
import uuid

from quake.core.models.character import Character, new_character_id
from quake.core.models.monster import (
    DEFAULT_CHALLENGE_RATING, DEFAULT_HIT_POINTS, Monster, MonsterAction, MonsterSpeed
)


class TestMonster(unittest.TestCase):
    """Test cases for Monster decoding"""

    def test_from_dict_applies_defaults(self):
        """Test null and missing fields are replaced with defaults"""
        monster = Monster.from_dict({"name": None, "hit_points": None, "armor_class": None})

        self.assertEqual(monster.name, "")
        self.assertEqual(monster.hit_points, DEFAULT_HIT_POINTS)
        self.assertEqual(monster.armor_class, 0)
        self.assertEqual(monster.challenge_rating, DEFAULT_CHALLENGE_RATING)
        self.assertEqual(monster.actions, ())
        self.assertEqual(monster.speed_json, MonsterSpeed())

    def test_from_dict_reads_nested_records(self):
        monster = Monster.from_dict({
            "name": "Bandit",
            "hit_points": 11,
            "challenge_rating": "1/8",
            "actions": [
                {"name": "Scimitar", "attack_bonus": 3, "damage_dice": "1d6", "damage_bonus": 1},
                "not an action",
            ],
            "speed_json": {"walk": 30},
        })

        self.assertEqual(monster.name, "Bandit")
        self.assertEqual(monster.hit_points, 11)
        self.assertEqual(monster.challenge_rating, "1/8")
        self.assertEqual(len(monster.actions), 1)
        self.assertEqual(monster.actions[0], MonsterAction(
            name="Scimitar", attack_bonus=3, damage_dice="1d6", damage_bonus=1
        ))
        self.assertEqual(monster.speed_json.walk, 30)
        self.assertEqual(monster.speed_json.swim, 0)

    def test_numeric_strings_and_floats(self):
        """Test loosely typed catalog numbers are coerced"""
        monster = Monster.from_dict({"armor_class": "13", "hit_points": 22.0, "challenge_rating": 2})

        self.assertEqual(monster.armor_class, 13)
        self.assertEqual(monster.hit_points, 22)
        self.assertEqual(monster.challenge_rating, "2")

    def test_from_dict_rejects_non_objects(self):
        with self.assertRaises(TypeError):
            Monster.from_dict(["Goblin"])

    def test_to_dict_round_trip(self):
        """Test a monster survives a trip through its dictionary form"""
        original = Monster.from_dict({
            "name": "Owlbear", "hit_points": 59, "strength": 20,
            "special_abilities": [{"name": "Keen Sight and Smell", "desc": "Advantage."}],
        })
        copy = Monster.from_dict(original.to_dict())

        self.assertEqual(copy, original)
        self.assertNotIn("id", original.to_dict())

    def test_id_not_part_of_equality(self):
        first = Monster(name="Wolf")
        second = Monster(name="Wolf")

        self.assertNotEqual(first.id, second.id)
        self.assertEqual(first, second)


class TestCharacter(unittest.TestCase):
    """Test cases for Character serialization"""

    def test_new_ids_are_upper_case_uuids(self):
        character_id = new_character_id()

        self.assertEqual(character_id, character_id.upper())
        uuid.UUID(character_id)

    def test_to_dict_uses_save_file_keys(self):
        character = Character(name="Fighter", turn_roll=12, hp=30)

        data = character.to_dict()

        self.assertEqual(
            set(data), {"id", "name", "turnRoll", "hp", "reactionUsed", "monsterDetails"}
        )
        self.assertEqual(data["turnRoll"], 12)
        self.assertFalse(data["reactionUsed"])
        self.assertIsNone(data["monsterDetails"])

    def test_round_trip_with_monster(self):
        monster = Monster.from_dict({"name": "Goblin", "hit_points": 7})
        character = Character(name="Goblin", turn_roll=15, hp=7, reaction_used=True,
                              monster_details=monster)

        restored = Character.from_dict(character.to_dict())

        self.assertEqual(restored, character)
        self.assertEqual(restored.monster_details.hit_points, 7)

    def test_from_dict_keeps_id_spelling(self):
        """Test existing ids are kept exactly as written"""
        lower_id = str(uuid.uuid4())
        character = Character.from_dict(
            {"id": lower_id, "name": "Rogue", "turnRoll": 3, "hp": 9}
        )

        self.assertEqual(character.id, lower_id)
        self.assertFalse(character.reaction_used)
        self.assertIsNone(character.monster_details)

    def test_from_dict_rejects_bad_records(self):
        """Test malformed records raise instead of loading partially"""
        valid = {"id": new_character_id(), "name": "Cleric", "turnRoll": 5, "hp": 20}

        bad_records = [
            dict(valid, id="not-a-uuid"),
            dict(valid, name=None),
            dict(valid, turnRoll="5"),
            dict(valid, hp=True),
            dict(valid, hp=-1),
            dict(valid, reactionUsed="yes"),
            {k: v for k, v in valid.items() if k != "hp"},
        ]
        for record in bad_records:
            with self.assertRaises(ValueError):
                Character.from_dict(record)

        with self.assertRaises(TypeError):
            Character.from_dict("Cleric")


if __name__ == '__main__':
    unittest.main()
