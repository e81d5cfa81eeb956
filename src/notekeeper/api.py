"""Provides the main entry point for using the library, :class:`NoteManager`"""

from __future__ import annotations
from typing import Iterable, List, Optional, Tuple
from notekeeper.models import Note
from notekeeper.serializers.base import Serializer


def _is_valid_list_index(index, items: list) -> bool:
    # bool is a subclass of int
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(items)


class NoteManager:
    """Holds an ordered collection of notes in memory and persists it through a serializer.

    A note is identified by its index, which is simply its current position in the collection. Indices are
    **not** stable: deleting a note shifts every later note down by one, so an index obtained before a
    :meth:`delete` may refer to a different note afterward.

    Invalid indices are never an error; the affected methods return False or None instead. Only :meth:`load`
    and :meth:`store` raise, with a :exc:`notekeeper.serializers.base.PersistenceError`.

    .. attribute:: serializer
       :type: notekeeper.serializers.base.Serializer

    Here's an example of how to use this class:

    .. code-block:: python

       from notekeeper.api import NoteManager
       from notekeeper.models import Note
       from notekeeper.serializers.jsonfile import JSONSerializer

       manager = NoteManager(JSONSerializer('notes.json'))
       manager.add(Note('Buy milk', 1, 'Home'))
       manager.archive(0)
       manager.store()
    """

    def __init__(self, serializer: Serializer):
        self.serializer = serializer
        self._notes: List[Note] = []

    @property
    def notes(self) -> List[Note]:
        """A shallow copy of the collection, in index order."""
        return list(self._notes)

    def add(self, note: Note) -> bool:
        """Appends the note to the end of the collection. Always returns True."""
        self._notes.append(note)
        return True

    def delete(self, index: int) -> Optional[Note]:
        """Removes and returns the note at the given index, or returns None if the index is invalid."""
        if self.is_valid_index(index):
            return self._notes.pop(index)
        return None

    def update(self, index: int, note: Optional[Note]) -> bool:
        """Copies the title, priority and category of ``note`` onto the note stored at the given index.

        The stored note's archived flag is left alone. Returns False, changing nothing, if the index is invalid
        or ``note`` is None.
        """
        found = self.find(index)
        if found is None or note is None:
            return False
        found.title = note.title
        found.priority = note.priority
        found.category = note.category
        return True

    def archive(self, index: int) -> bool:
        """Marks the note at the given index as archived.

        Returns False if the index is invalid or the note was already archived.
        """
        found = self.find(index)
        if found is None or found.archived:
            return False
        found.archived = True
        return True

    def list_all(self) -> str:
        if not self._notes:
            return 'No notes stored'
        return self._format(enumerate(self._notes))

    def list_active(self) -> str:
        if self.count_active() == 0:
            return 'No active notes stored'
        return self._format((i, n) for i, n in enumerate(self._notes) if not n.archived)

    def list_archived(self) -> str:
        if self.count_archived() == 0:
            return 'No archived notes stored'
        return self._format((i, n) for i, n in enumerate(self._notes) if n.archived)

    def list_by_priority(self, priority: int) -> str:
        """Lists the notes with the given priority, preceded by a line giving how many there are."""
        if not self._notes:
            return 'No notes stored'
        listing = self._format((i, n) for i, n in enumerate(self._notes) if n.priority == priority)
        if not listing:
            return f'No notes with priority: {priority}'
        return f'{self.count_by_priority(priority)} notes with priority {priority}: {listing}'

    def count(self) -> int:
        return len(self._notes)

    def count_archived(self) -> int:
        return sum(1 for n in self._notes if n.archived)

    def count_active(self) -> int:
        return sum(1 for n in self._notes if not n.archived)

    def count_by_priority(self, priority: int) -> int:
        return sum(1 for n in self._notes if n.priority == priority)

    def find(self, index: int) -> Optional[Note]:
        """Returns the note at the given index, or None if the index is invalid."""
        if self.is_valid_index(index):
            return self._notes[index]
        return None

    def is_valid_index(self, index: int) -> bool:
        return _is_valid_list_index(index, self._notes)

    def search_by_title(self, text: str) -> str:
        """Lists notes whose title contains ``text``, ignoring case.

        Unlike the ``list_*`` methods, this returns an empty string when nothing matches.
        """
        text = text.casefold()
        return self._format((i, n) for i, n in enumerate(self._notes) if text in n.title.casefold())

    def load(self) -> None:
        """Replaces the whole collection with the notes read from the serializer.

        If the serializer raises, the exception propagates and the current collection is kept.
        """
        self._notes = list(self.serializer.read())

    def store(self) -> None:
        """Overwrites the serializer's backing store with the current collection.

        Exceptions from the serializer propagate.
        """
        self.serializer.write(self._notes)

    @staticmethod
    def _format(indexed: Iterable[Tuple[int, Note]]) -> str:
        return '\n'.join(f'{i}: {n}' for i, n in indexed)
