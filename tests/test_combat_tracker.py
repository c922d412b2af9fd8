"""
Tests for the combat tracker controller.
"""

import json
from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QThreadPool

from quake.core.combat_tracker import NO_FILE_SELECTED, CombatTracker
from quake.core.models.character import Character
from quake.core.models.monster import Monster
from quake.core.spawning import DEFAULT_CHARACTER_NAME
from quake.data.save_file_manager import LOAD_FAILED, LOAD_OK, SAVE_FAILED, SAVE_OK, SaveFileManager


def write_roster(path, characters):
    path.write_text(json.dumps([c.to_dict() for c in characters]), encoding='utf-8')


def read_names(path):
    return [record["name"] for record in json.loads(path.read_text(encoding='utf-8'))]


@pytest.fixture
def campaign(documents_dir):
    """A save file holding characters A (hp 10) and B (hp 5)"""
    path = documents_dir / "Campaign.json"
    write_roster(path, [
        Character(name="A", turn_roll=12, hp=10),
        Character(name="B", turn_roll=8, hp=5),
    ])
    return path


@pytest.fixture
def opened(tracker, campaign):
    assert tracker.open_file(campaign)
    return tracker


def test_open_file(opened, campaign):
    assert opened.selected_file == campaign
    assert opened.selected_file_name == "Campaign.json"
    assert [c.name for c in opened.characters] == ["A", "B"]
    assert opened.current_index == 0
    assert opened.status == LOAD_OK


def test_open_file_emits_signals(tracker, campaign):
    selected, turns, changes = [], [], []
    tracker.file_selected.connect(selected.append)
    tracker.turn_changed.connect(turns.append)
    tracker.roster_changed.connect(lambda: changes.append(True))

    tracker.open_file(campaign)

    assert selected == ["Campaign.json"]
    assert turns == [0]
    assert changes == [True]


def test_failed_open_keeps_state(opened, documents_dir, campaign):
    broken = documents_dir / "Broken.json"
    broken.write_text("{not json", encoding='utf-8')

    assert not opened.open_file(broken)

    assert opened.status == LOAD_FAILED
    assert opened.selected_file == campaign
    assert [c.name for c in opened.characters] == ["A", "B"]


def test_open_deeply_nested_file_keeps_state(opened, documents_dir, campaign):
    deep = documents_dir / "Deep.json"
    deep.write_text("[" * 100000 + "]" * 100000, encoding='utf-8')

    assert not opened.open_file(deep)

    assert opened.status == LOAD_FAILED
    assert opened.selected_file == campaign
    assert [c.name for c in opened.characters] == ["A", "B"]


def test_subtract_hp_scenario(opened, campaign):
    """Subtracting 100 from A clamps it to 0 and leaves B alone"""
    a, b = opened.characters

    opened.subtract_hp(a.id, 100)

    assert a.hp == 0
    assert b.hp == 5
    saved = json.loads(campaign.read_text(encoding='utf-8'))
    assert [record["hp"] for record in saved] == [0, 5]
    assert opened.status == SAVE_OK


@pytest.mark.parametrize("amount", [0, -3])
def test_subtract_hp_ignores_non_positive(opened, amount):
    a = opened.characters[0]

    opened.subtract_hp(a.id, amount)

    assert a.hp == 10


def test_pending_damage(opened):
    a = opened.characters[0]
    assert opened.pending_damage(a.id) == 0

    opened.set_pending_damage(a.id, 4)
    assert opened.pending_damage(a.id) == 4

    opened.apply_pending_damage(a.id)
    assert a.hp == 6
    assert opened.pending_damage(a.id) == 0


def test_adjust_turn_roll_saves(opened, campaign):
    a = opened.characters[0]

    opened.adjust_turn_roll(a.id, 1)
    opened.adjust_turn_roll(a.id, 1)
    opened.adjust_turn_roll(a.id, -1)

    assert a.turn_roll == 13
    saved = json.loads(campaign.read_text(encoding='utf-8'))
    assert saved[0]["turnRoll"] == 13


def test_adjust_turn_roll_is_not_clamped(opened, campaign):
    a = opened.characters[0]

    opened.adjust_turn_roll(a.id, -50)
    assert a.turn_roll == -38

    opened.adjust_turn_roll(a.id, 1000)
    assert a.turn_roll == 962
    saved = json.loads(campaign.read_text(encoding='utf-8'))
    assert saved[0]["turnRoll"] == 962


def test_toggle_reaction(opened, campaign):
    b = opened.characters[1]

    opened.toggle_reaction(b.id, True)

    assert b.reaction_used
    saved = json.loads(campaign.read_text(encoding='utf-8'))
    assert saved[1]["reactionUsed"] is True

    opened.toggle_reaction(b.id, False)
    assert not b.reaction_used


def test_unknown_id_is_ignored(opened, campaign):
    before = campaign.read_text(encoding='utf-8')

    opened.subtract_hp("missing", 5)
    opened.adjust_turn_roll("missing", 1)
    opened.toggle_reaction("missing", True)

    assert campaign.read_text(encoding='utf-8') == before


def test_advance_turn_cycles(opened):
    opened.add_character("C")
    count = len(opened.characters)

    seen = [opened.advance_turn() for _ in range(count)]

    assert seen == [1, 2, 0]
    assert opened.current_index == 0


def test_advance_turn_empty_roster(tracker):
    assert tracker.advance_turn() == 0


def test_add_character(opened, campaign):
    character = opened.add_character("Cleric")

    assert character.turn_roll == 10
    assert 1 <= character.hp <= 20
    assert read_names(campaign) == ["A", "B", "Cleric"]


def test_add_character_empty_name(opened, campaign):
    changes = []
    opened.roster_changed.connect(lambda: changes.append(True))

    assert opened.add_character("") is None

    assert len(opened.characters) == 2
    assert changes == []


def test_add_monster(opened, campaign):
    monster = Monster.from_dict({"name": "Goblin", "hit_points": 7})

    character = opened.add_monster(monster)

    assert character.name == "Goblin"
    assert character.hp == 7
    assert 1 <= character.turn_roll <= 20
    assert character.monster_details == monster
    assert read_names(campaign) == ["A", "B", "Goblin"]


def test_add_monster_without_name(opened):
    character = opened.add_monster(Monster.from_dict({"name": None, "hit_points": None}))

    assert character.name == "monster"
    assert character.hp == 100


def test_add_monster_negative_hit_points(opened, campaign):
    character = opened.add_monster(Monster.from_dict({"name": "Odd", "hit_points": -5}))

    assert character.hp == 0
    saved = json.loads(campaign.read_text(encoding='utf-8'))
    assert saved[-1]["hp"] == 0


def test_remove_character(opened, campaign):
    opened.remove_character(0)

    assert read_names(campaign) == ["B"]


def test_remove_character_out_of_range(opened, campaign):
    before = campaign.read_text(encoding='utf-8')

    assert opened.remove_character(5) is None
    assert opened.remove_character(-1) is None

    assert len(opened.characters) == 2
    assert campaign.read_text(encoding='utf-8') == before


def test_remove_current_last_character_resets_index(opened):
    opened.advance_turn()
    assert opened.current_index == 1

    opened.remove_character(1)

    assert opened.current_index == 0
    assert opened.current_character().name == "A"


def test_sort_is_not_saved(opened, campaign):
    opened.add_character("c")
    before = campaign.read_text(encoding='utf-8')

    opened.sort_characters("hp")
    opened.sort_characters("turn_roll")
    opened.sort_characters("name")

    assert [c.name for c in opened.characters] == ["A", "B", "c"]
    assert campaign.read_text(encoding='utf-8') == before


def test_sort_by_hp(opened):
    opened.sort_characters("hp")

    assert [c.hp for c in opened.characters] == [10, 5]


def test_randomize_turn_rolls(opened, campaign):
    for name in ["C", "D", "E"]:
        opened.add_character(name)

    opened.randomize_turn_rolls()

    rolls = [c.turn_roll for c in opened.characters]
    assert all(1 <= roll <= 20 for roll in rolls)
    assert rolls == sorted(rolls, reverse=True)
    saved = json.loads(campaign.read_text(encoding='utf-8'))
    assert [record["turnRoll"] for record in saved] == rolls


def test_mutation_without_file(tracker):
    statuses = []
    tracker.status_changed.connect(statuses.append)

    tracker.add_character("Lonely")

    assert len(tracker.characters) == 1
    assert tracker.status == NO_FILE_SELECTED
    assert statuses == [NO_FILE_SELECTED]


def test_create_new_file(tracker, documents_dir):
    files = []
    tracker.files_changed.connect(files.append)

    path = tracker.create_new_file()

    assert path.exists()
    assert tracker.selected_file == path
    assert [c.name for c in tracker.characters] == [DEFAULT_CHARACTER_NAME]
    assert tracker.characters[0].hp == 100
    assert tracker.characters[0].turn_roll == 10
    assert read_names(path) == [DEFAULT_CHARACTER_NAME]
    assert files[-1] == [path]


def test_list_save_files_skips_catalog(tracker, documents_dir, catalog_path, campaign):
    files = tracker.list_save_files()

    assert files == [campaign]
    assert tracker.save_files == [campaign]


def test_no_leftover_temporary_files(opened, documents_dir):
    a = opened.characters[0]
    opened.subtract_hp(a.id, 1)
    opened.toggle_reaction(a.id, True)
    opened.add_character("X")

    assert not list(documents_dir.glob("*.tmp"))


def test_monsters_loaded_slot(tracker, qapp):
    received = []
    tracker.monsters_changed.connect(received.append)
    monsters = [Monster(name="Wolf")]

    tracker._on_monsters_loaded(monsters)

    assert tracker.monsters == monsters
    assert received == [monsters]


def test_load_monsters_async(qapp, documents_dir, catalog_path):
    pool = QThreadPool()
    tracker = CombatTracker(SaveFileManager(documents_dir), catalog_path, thread_pool=pool)
    received = []
    tracker.monsters_changed.connect(received.append)

    tracker.load_monsters_async()
    assert pool.waitForDone(5000)
    # Results arrive as queued signals on the GUI thread
    for _ in range(50):
        qapp.processEvents()
        if received:
            break

    assert [m.name for m in tracker.monsters] == ["Goblin", ""]
    assert len(received) == 1


def test_failed_save_keeps_roster(qapp, documents_dir):
    manager = MagicMock()
    manager.load.return_value = (True, [Character(name="A", turn_roll=1, hp=3)], LOAD_OK)
    manager.save.return_value = (False, SAVE_FAILED)
    tracker = CombatTracker(manager, documents_dir / "monsters.json")
    tracker.open_file(documents_dir / "Locked.json")

    tracker.subtract_hp(tracker.characters[0].id, 1)

    assert tracker.status == SAVE_FAILED
    assert tracker.characters[0].hp == 2
    assert tracker.selected_file == documents_dir / "Locked.json"
    manager.save.assert_called_once()
