"""Command-line interface for notekeeper."""


import argparse
import json
import logging
import sys
from typing import List, Tuple
from terminaltables import AsciiTable
from notekeeper.api import NoteManager
from notekeeper.conf import NotekeeperConf, DelegatingSerializerConf
from notekeeper.models import Note
from notekeeper.serializers.base import PersistenceError, StoreNotFoundError

logger = logging.getLogger(__name__)


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _selected(args, manager: NoteManager) -> List[Tuple[int, Note]]:
    pairs = list(enumerate(manager.notes))
    if args.active:
        pairs = [(i, n) for i, n in pairs if not n.archived]
    elif args.archived:
        pairs = [(i, n) for i, n in pairs if n.archived]
    elif args.priority is not None:
        pairs = [(i, n) for i, n in pairs if n.priority == args.priority]
    return pairs


def _add(args, manager: NoteManager) -> int:
    manager.add(Note(args.title[0], args.priority, args.category))
    manager.store()
    print(f'Added note {manager.count() - 1}')
    return 0


def _list(args, manager: NoteManager) -> int:
    if args.json:
        print(json.dumps([dict(index=i, **n.as_json()) for i, n in _selected(args, manager)]))
    elif args.table:
        data = [('Index', 'Title', 'Priority', 'Category', 'Archived')]
        data += [(i, n.title, n.priority, n.category, 'yes' if n.archived else 'no')
                 for i, n in _selected(args, manager)]
        table = AsciiTable(data)
        table.justify_columns[0] = 'right'
        table.justify_columns[2] = 'right'
        print(table.table)
    elif args.active:
        print(manager.list_active())
    elif args.archived:
        print(manager.list_archived())
    elif args.priority is not None:
        print(manager.list_by_priority(args.priority))
    else:
        print(manager.list_all())
    return 0


def _show(args, manager: NoteManager) -> int:
    note = manager.find(args.index)
    if note is None:
        return _error(f'No note at index {args.index}')
    print(note)
    return 0


def _update(args, manager: NoteManager) -> int:
    found = manager.find(args.index)
    if found is None:
        return _error(f'No note at index {args.index}')
    replacement = Note(title=args.title[0] if args.title else found.title,
                       priority=args.priority if args.priority is not None else found.priority,
                       category=args.category if args.category is not None else found.category)
    manager.update(args.index, replacement)
    manager.store()
    print(f'Updated note {args.index}')
    return 0


def _delete(args, manager: NoteManager) -> int:
    removed = manager.delete(args.index)
    if removed is None:
        return _error(f'No note at index {args.index}')
    manager.store()
    print(f'Deleted note {args.index}: {removed}')
    return 0


def _archive(args, manager: NoteManager) -> int:
    if not manager.is_valid_index(args.index):
        return _error(f'No note at index {args.index}')
    if not manager.archive(args.index):
        return _error(f'Note {args.index} is already archived')
    manager.store()
    print(f'Archived note {args.index}')
    return 0


def _search(args, manager: NoteManager) -> int:
    text = args.text[0]
    print(manager.search_by_title(text) or f'No notes match: {text}')
    return 0


def _count(args, manager: NoteManager) -> int:
    if args.active:
        print(manager.count_active())
    elif args.archived:
        print(manager.count_archived())
    elif args.priority is not None:
        print(manager.count_by_priority(args.priority))
    else:
        print(manager.count())
    return 0


def _add_filter_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--active', action='store_true', help='Only notes that are not archived.')
    group.add_argument('--archived', action='store_true', help='Only archived notes.')
    group.add_argument('--priority', type=int, help='Only notes with this priority.')


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.set_defaults(func=None)
    parser.add_argument('-f', '--file',
                        help='File to store notes in, instead of the one configured in ~/.notekeeper.conf.py. '
                             'The format is chosen from the extension: .json, .yaml, .yml or .xml.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debugging information to stderr.')

    subs = parser.add_subparsers(title='Commands')

    p_add = subs.add_parser('add', help='Add a note. Its index is printed.')
    p_add.add_argument('title', nargs=1)
    p_add.add_argument('-p', '--priority', type=int, required=True, help='Priority of the note, e.g. 1 to 5.')
    p_add.add_argument('-c', '--category', required=True, help='Category of the note, e.g. "Home".')
    p_add.set_defaults(func=_add)

    p_list = subs.add_parser(
        'list',
        help='List notes, each preceded by its index. Note that indices shift down when an earlier note is '
             'deleted.')
    _add_filter_args(p_list)
    p_list_formats = p_list.add_mutually_exclusive_group()
    p_list_formats.add_argument('-j', '--json', action='store_true',
                                help='Output as JSON. The output is an array of objects, each including the '
                                     'note\'s index.')
    p_list_formats.add_argument('-t', '--table', action='store_true', help='Format output as a table.')
    p_list.set_defaults(func=_list)

    p_show = subs.add_parser('show', help='Show the note at an index.')
    p_show.add_argument('index', type=int)
    p_show.set_defaults(func=_show)

    p_update = subs.add_parser('update',
                               help='Change the title, priority or category of a note. Fields that are not '
                                    'specified keep their current values.')
    p_update.add_argument('index', type=int)
    p_update.add_argument('--title', nargs=1, help='New title.')
    p_update.add_argument('-p', '--priority', type=int, help='New priority.')
    p_update.add_argument('-c', '--category', help='New category.')
    p_update.set_defaults(func=_update)

    p_delete = subs.add_parser('delete', help='Delete the note at an index.')
    p_delete.add_argument('index', type=int)
    p_delete.set_defaults(func=_delete)

    p_archive = subs.add_parser('archive', help='Archive the note at an index. Archived notes cannot be '
                                                'unarchived.')
    p_archive.add_argument('index', type=int)
    p_archive.set_defaults(func=_archive)

    p_search = subs.add_parser('search', help='List notes whose title contains the given text, ignoring case.')
    p_search.add_argument('text', nargs=1)
    p_search.set_defaults(func=_search)

    p_count = subs.add_parser('count', help='Print the number of notes.')
    _add_filter_args(p_count)
    p_count.set_defaults(func=_count)

    return parser


def _manager(args) -> NoteManager:
    if args.file:
        conf = NotekeeperConf(serializer_conf=DelegatingSerializerConf(args.file))
    else:
        conf = NotekeeperConf.for_user()
    return conf.instantiate()


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')
    if not args.func:
        parser.print_help()
        return 1
    manager = _manager(args)
    try:
        try:
            manager.load()
        except StoreNotFoundError:
            logger.info('Nothing stored at %s yet, starting with no notes', manager.serializer.path)
        return args.func(args, manager)
    except PersistenceError as e:
        detail = f': {e.cause}' if e.cause else ''
        print(f'{e.message} ({e.path}){detail}', file=sys.stderr)
        return 2
