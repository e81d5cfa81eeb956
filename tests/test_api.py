from pathlib import Path
import pytest
from notekeeper.api import NoteManager
from notekeeper.models import Note
from notekeeper.serializers.base import Serializer, FormatError, PersistenceError, StoreNotFoundError
from notekeeper.serializers.jsonfile import JSONSerializer


def manager_with(*notes, serializer=None) -> NoteManager:
    manager = NoteManager(serializer)
    for note in notes:
        manager.add(note)
    return manager


def sample() -> NoteManager:
    return manager_with(Note('Buy milk', 1, 'Home'),
                        Note('Write report', 3, 'Work'),
                        Note('MILK run', 1, 'Home'),
                        Note('Groceries', 2, 'Home'))


def test_add():
    manager = NoteManager(None)
    note = Note('Buy milk', 1, 'Home')
    assert manager.add(note)
    assert manager.count() == 1
    assert manager.find(0) is note
    assert manager.list_all() == f'0: {note}'


def test_add_keeps_insertion_order():
    manager = sample()
    assert [n.title for n in manager.notes] == ['Buy milk', 'Write report', 'MILK run', 'Groceries']


def test_notes_is_a_copy():
    manager = sample()
    manager.notes.clear()
    assert manager.count() == 4


def test_delete_shifts_later_indices():
    manager = sample()
    removed = manager.delete(1)
    assert removed == Note('Write report', 3, 'Work')
    assert manager.count() == 3
    assert manager.find(1).title == 'MILK run'
    assert manager.find(2).title == 'Groceries'
    assert manager.find(3) is None


@pytest.mark.parametrize('index', [-1, 4, 100])
def test_delete_invalid_index(index):
    manager = sample()
    assert manager.delete(index) is None
    assert manager.count() == 4


def test_update():
    manager = sample()
    manager.archive(0)
    assert manager.update(0, Note('Buy oat milk', 5, 'Shopping'))
    assert manager.find(0) == Note('Buy oat milk', 5, 'Shopping', archived=True)


def test_update_does_not_copy_archived_flag():
    manager = sample()
    assert manager.update(1, Note('Write report', 3, 'Work', archived=True))
    assert not manager.find(1).archived


def test_update_modifies_stored_note_in_place():
    manager = sample()
    original = manager.find(2)
    manager.update(2, Note('Milk', 4, 'Errands'))
    assert original.title == 'Milk'


@pytest.mark.parametrize('index,note', [
    (4, Note('New', 1, 'Home')),
    (-1, Note('New', 1, 'Home')),
    (0, None),
])
def test_update_invalid(index, note):
    manager = sample()
    before = [Note(**n.as_json()) for n in manager.notes]
    assert not manager.update(index, note)
    assert manager.notes == before


def test_archive():
    manager = sample()
    assert manager.count_archived() == 0
    assert manager.archive(2)
    assert manager.find(2).archived
    assert manager.count_archived() == 1
    assert not manager.archive(2)
    assert manager.count_archived() == 1


def test_archive_invalid_index():
    manager = sample()
    assert not manager.archive(4)
    assert manager.count_archived() == 0


def test_list_all_empty():
    assert NoteManager(None).list_all() == 'No notes stored'


def test_list_all():
    manager = sample()
    notes = manager.notes
    assert manager.list_all() == '\n'.join(f'{i}: {n}' for i, n in enumerate(notes))


def test_list_active_and_archived():
    first = Note('Buy milk', 1, 'Home')
    second = Note('Write report', 3, 'Work')
    manager = manager_with(first, second)
    manager.archive(0)
    assert manager.list_active() == f'1: {second}'
    assert manager.list_archived() == f'0: {first}'


def test_list_active_and_archived_empty():
    manager = NoteManager(None)
    assert manager.list_active() == 'No active notes stored'
    assert manager.list_archived() == 'No archived notes stored'
    manager.add(Note('Buy milk', 1, 'Home'))
    assert manager.list_archived() == 'No archived notes stored'
    manager.archive(0)
    assert manager.list_active() == 'No active notes stored'


def test_list_uses_position_for_equal_notes():
    note = Note('Buy milk', 1, 'Home')
    manager = manager_with(note, Note('Buy milk', 1, 'Home'))
    assert manager.list_all() == f'0: {note}\n1: {note}'


def test_list_by_priority():
    manager = sample()
    notes = manager.notes
    assert manager.list_by_priority(1) == f'2 notes with priority 1: 0: {notes[0]}\n2: {notes[2]}'
    assert manager.list_by_priority(3) == f'1 notes with priority 3: 1: {notes[1]}'


def test_list_by_priority_no_matches():
    assert sample().list_by_priority(5) == 'No notes with priority: 5'


def test_list_by_priority_empty():
    assert NoteManager(None).list_by_priority(5) == 'No notes stored'


def test_counts():
    manager = sample()
    manager.archive(1)
    manager.archive(3)
    assert manager.count() == 4
    assert manager.count_archived() == 2
    assert manager.count_active() == 2
    assert manager.count_by_priority(1) == 2
    assert manager.count_by_priority(2) == 1
    assert manager.count_by_priority(5) == 0
    assert manager.count_active() + manager.count_archived() == manager.count()


def test_find():
    manager = sample()
    assert manager.find(3).title == 'Groceries'
    assert manager.find(4) is None
    assert manager.find(-1) is None


def test_is_valid_index():
    manager = sample()
    assert manager.is_valid_index(0)
    assert manager.is_valid_index(3)
    assert not manager.is_valid_index(4)
    assert not manager.is_valid_index(-1)
    assert not manager.is_valid_index(True)
    assert not manager.is_valid_index('0')
    assert not NoteManager(None).is_valid_index(0)


def test_search_by_title():
    manager = sample()
    notes = manager.notes
    assert manager.search_by_title('milk') == f'0: {notes[0]}\n2: {notes[2]}'
    assert manager.search_by_title('REPORT') == f'1: {notes[1]}'


def test_search_by_title_no_matches():
    assert sample().search_by_title('nothing') == ''
    assert NoteManager(None).search_by_title('milk') == ''


def test_load(mocker):
    serializer = mocker.Mock(spec=Serializer)
    serializer.read.return_value = [Note('Buy milk', 1, 'Home')]
    manager = manager_with(Note('Old', 2, 'Work'), serializer=serializer)
    manager.load()
    assert manager.notes == [Note('Buy milk', 1, 'Home')]


@pytest.mark.parametrize('error', [
    StoreNotFoundError('No notes stored yet', '/notes.json'),
    FormatError('Cannot parse notes', '/notes.json'),
    PersistenceError('Cannot read notes', '/notes.json'),
])
def test_load_failure_keeps_notes(mocker, error):
    serializer = mocker.Mock(spec=Serializer)
    serializer.read.side_effect = error
    manager = manager_with(Note('Old', 2, 'Work'), serializer=serializer)
    with pytest.raises(type(error)):
        manager.load()
    assert manager.notes == [Note('Old', 2, 'Work')]


def test_store(mocker):
    serializer = mocker.Mock(spec=Serializer)
    manager = manager_with(Note('Buy milk', 1, 'Home'), serializer=serializer)
    manager.store()
    serializer.write.assert_called_once_with([Note('Buy milk', 1, 'Home')])


def test_store_failure_propagates(mocker):
    serializer = mocker.Mock(spec=Serializer)
    serializer.write.side_effect = PersistenceError('Cannot write notes', '/notes.json')
    manager = manager_with(Note('Buy milk', 1, 'Home'), serializer=serializer)
    with pytest.raises(PersistenceError):
        manager.store()


def test_store_and_load_with_fresh_manager(fs):
    manager = sample()
    manager.archive(2)
    manager.serializer = JSONSerializer('/notes.json')
    manager.store()
    assert Path('/notes.json').exists()

    fresh = NoteManager(JSONSerializer('/notes.json'))
    fresh.load()
    assert fresh.notes == manager.notes
    assert fresh.list_all() == manager.list_all()


def test_load_malformed_file_keeps_notes(fs):
    fs.create_file('/notes.json', contents='[{"title": "Buy milk"')
    manager = manager_with(Note('Old', 2, 'Work'), serializer=JSONSerializer('/notes.json'))
    with pytest.raises(FormatError):
        manager.load()
    assert manager.notes == [Note('Old', 2, 'Work')]
