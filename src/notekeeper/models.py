"""Defines the :class:`Note` class, the record type managed by :class:`notekeeper.api.NoteManager`."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Note:
    """A titled, prioritized, categorized note.

    ``str(note)`` gives the rendering used in the listings produced by :class:`notekeeper.api.NoteManager`,
    for example ``Note(title='Buy milk', priority=1, category='Home', archived=False)``.
    """

    title: str
    """Should be non-empty, but this is not enforced."""

    priority: int
    """Used only as a filter key; no particular range is enforced."""

    category: str
    """Free-form label such as "Home" or "Work"."""

    archived: bool = False
    """Archived notes are hidden from the active view.

    :meth:`notekeeper.api.NoteManager.archive` only ever sets this from False to True; there is no unarchive
    operation.
    """

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'title': self.title,
            'priority': self.priority,
            'category': self.category,
            'archived': self.archived
        }

    @classmethod
    def from_json(cls, data) -> Note:
        """Creates an instance from a dict like the ones returned by :meth:`as_json`.

        Keys other than the four fields are ignored.

        Raises :exc:`ValueError` if ``data`` is not a dict, a field is missing, or a field has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f'Expected a note record but got: {data!r}')
        missing = [k for k in ('title', 'priority', 'category', 'archived') if k not in data]
        if missing:
            raise ValueError(f'Note record is missing fields {missing}: {data!r}')
        title, priority, category, archived = data['title'], data['priority'], data['category'], data['archived']
        if not isinstance(title, str):
            raise ValueError(f'Note title must be a string: {title!r}')
        # bool is a subclass of int
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise ValueError(f'Note priority must be an integer: {priority!r}')
        if not isinstance(category, str):
            raise ValueError(f'Note category must be a string: {category!r}')
        if not isinstance(archived, bool):
            raise ValueError(f'Note archived flag must be a boolean: {archived!r}')
        return cls(title, priority, category, archived)
