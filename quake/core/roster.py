"""
Roster model for the combat tracker.

Holds the ordered list of characters for the open save file.
"""

from enum import Enum


class SortType(Enum):
    """Available roster orderings"""
    NAME = "name"
    HP = "hp"
    TURN_ROLL = "turn_roll"


class Roster:
    """
    Ordered in-memory list of Character objects.

    The roster knows nothing about files; the controller decides when to save.
    """

    def __init__(self, characters=None):
        self._characters = list(characters or [])

    def __len__(self):
        return len(self._characters)

    def __iter__(self):
        return iter(self._characters)

    def __getitem__(self, index):
        return self._characters[index]

    @property
    def characters(self):
        """A copy of the current character list"""
        return list(self._characters)

    def replace(self, characters):
        """Replace the whole roster, e.g. after loading a file"""
        self._characters = list(characters)

    def append(self, character):
        self._characters.append(character)

    def remove_at(self, index):
        """
        Remove and return the character at index.

        Raises:
            IndexError: if index is outside 0 <= index < len
        """
        if not 0 <= index < len(self._characters):
            raise IndexError(f"Roster index {index} out of range (size {len(self._characters)})")
        return self._characters.pop(index)

    def find_by_id(self, character_id):
        """Return the index of the character with the given id, or -1"""
        for index, character in enumerate(self._characters):
            if character.id == character_id:
                return index
        return -1

    def get_by_id(self, character_id):
        """Return the character with the given id, or None"""
        index = self.find_by_id(character_id)
        return self._characters[index] if index != -1 else None

    def sort(self, by):
        """
        Reorder the roster in place.

        Args:
            by (SortType): NAME sorts case-insensitively ascending,
                HP and TURN_ROLL sort descending.
        """
        if by == SortType.NAME:
            self._characters.sort(key=lambda c: c.name.lower())
        elif by == SortType.HP:
            self._characters.sort(key=lambda c: c.hp, reverse=True)
        elif by == SortType.TURN_ROLL:
            self._characters.sort(key=lambda c: c.turn_roll, reverse=True)
        else:
            raise ValueError(f"Unknown sort type: {by!r}")
