"""Defines the API for reading and writing a whole collection of notes to durable storage.

The most important class is :class:`Serializer`.
"""

import logging
from typing import List

from notekeeper.models import Note

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when a :class:`Serializer` is unable to read or write its backing store."""
    def __init__(self, message: str, path: str = None, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause


class StoreNotFoundError(PersistenceError):
    """Raised by :meth:`Serializer.read` when the backing store does not exist yet."""
    pass


class FormatError(PersistenceError):
    """Raised by :meth:`Serializer.read` when the stored data is malformed or is not a collection of notes."""
    pass


class Serializer:
    """Base class for serializers, which are responsible for persisting the entire collection of notes at once.

    :class:`notekeeper.api.NoteManager` only depends on :meth:`read` and :meth:`write`, so any backend
    implementing them is interchangeable. Subclasses normally override :meth:`_read` and :meth:`_write`, which
    deal in plain records (see :meth:`notekeeper.models.Note.as_json`) rather than :class:`Note` instances.

    .. attribute:: path
       :type: str

       Location of the backing store. May be None for backends that do not use one.
    """
    def __init__(self, path: str = None):
        self.path = path

    def read(self) -> List[Note]:
        """Returns all the notes in the backing store, in their stored order.

        Raises :exc:`StoreNotFoundError` if there is nothing stored yet, :exc:`FormatError` if the stored data
        cannot be parsed or does not describe a list of notes, and :exc:`PersistenceError` for other failures.
        """
        try:
            records = self._read()
        except PersistenceError:
            raise
        except FileNotFoundError as e:
            raise StoreNotFoundError('No notes stored yet', self.path, e)
        except OSError as e:
            raise PersistenceError('Cannot read notes', self.path, e)
        except (ValueError, TypeError, KeyError) as e:
            raise FormatError('Cannot parse notes', self.path, e)

        if not isinstance(records, list):
            raise FormatError(f'Expected a list of notes but found {type(records).__name__}', self.path)
        try:
            notes = [Note.from_json(r) for r in records]
        except ValueError as e:
            raise FormatError(str(e), self.path, e)
        logger.debug('Read %d notes from %s', len(notes), self.path)
        return notes

    def write(self, notes: List[Note]) -> None:
        """Replaces the contents of the backing store with the given notes.

        Raises :exc:`PersistenceError` if the notes cannot be written.
        """
        try:
            self._write([n.as_json() for n in notes])
        except PersistenceError:
            raise
        except (OSError, ValueError, TypeError) as e:
            raise PersistenceError('Cannot write notes', self.path, e)
        logger.debug('Wrote %d notes to %s', len(notes), self.path)

    def _read(self) -> list:
        """Subclasses should override this instead of :meth:`read`.

        It should return a list of records. The base class converts them to :class:`Note` instances and
        turns common exceptions into :exc:`PersistenceError` subclasses.
        """
        raise NotImplementedError()

    def _write(self, records: List[dict]) -> None:
        """Subclasses should override this instead of :meth:`write`."""
        raise NotImplementedError()
