"""Provides the :class:`XMLSerializer` class."""

from typing import List

from lxml import etree

from notekeeper.serializers.base import Serializer, FormatError

_FIELDS = ('title', 'priority', 'category', 'archived')


def _text(note_el, name: str) -> str:
    child = note_el.find(name)
    if child is None:
        raise ValueError(f'<note> element is missing <{name}>')
    return child.text or ''


def _parse_bool(text: str) -> bool:
    if text == 'true':
        return True
    if text == 'false':
        return False
    raise ValueError(f'Expected "true" or "false" but got: {text!r}')


def _record(note_el) -> dict:
    return {
        'title': _text(note_el, 'title'),
        'priority': int(_text(note_el, 'priority')),
        'category': _text(note_el, 'category'),
        'archived': _parse_bool(_text(note_el, 'archived'))
    }


class XMLSerializer(Serializer):
    """Stores notes in an XML file.

    Here's an example file:

    .. code-block:: xml

       <?xml version='1.0' encoding='UTF-8'?>
       <notes>
         <note>
           <title>Buy milk</title>
           <priority>1</priority>
           <category>Home</category>
           <archived>false</archived>
         </note>
       </notes>

    lxml is used for parsing and writing; formatting of an existing file is not preserved.
    """
    def _read(self) -> list:
        with open(self.path, 'rb') as file:
            content = file.read()
        try:
            root = etree.fromstring(content)
        except etree.XMLSyntaxError as e:
            raise FormatError('Cannot parse XML', self.path, e)
        if not root.tag == 'notes':
            raise FormatError(f'Expected a <notes> root element but found <{root.tag}>', self.path)
        return [_record(el) for el in root.iterchildren('note')]

    def _write(self, records: List[dict]):
        root = etree.Element('notes')
        for record in records:
            note_el = etree.SubElement(root, 'note')
            for name in _FIELDS:
                value = record[name]
                if isinstance(value, bool):
                    value = 'true' if value else 'false'
                etree.SubElement(note_el, name).text = str(value)
        content = etree.tostring(root, pretty_print=True, xml_declaration=True, encoding='UTF-8')
        with open(self.path, 'wb') as file:
            file.write(content)
