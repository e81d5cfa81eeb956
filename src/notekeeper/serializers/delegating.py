"""Provides the :class:`DelegatingSerializer` class."""

from typing import List

from notekeeper.models import Note
from notekeeper.serializers.base import Serializer
from notekeeper.serializers.jsonfile import JSONSerializer
from notekeeper.serializers.xmlfile import XMLSerializer
from notekeeper.serializers.yamlfile import YAMLSerializer


class DelegatingSerializer(Serializer):
    """Responsible for choosing what :class:`notekeeper.serializers.base.Serializer` subclass to use for a file.

    This selects a serializer based on the path's file extension, and delegates method calls to it.

    Currently, the mapping is hardcoded:

    * ``.json`` -> :class:`JSONSerializer`
    * ``.yaml`` or ``.yml`` -> :class:`YAMLSerializer`
    * ``.xml`` -> :class:`XMLSerializer`

    Raises :exc:`ValueError` for any other extension.
    """
    def __init__(self, path: str):
        super().__init__(path)
        lower = path.lower()
        if lower.endswith('.json'):
            self.serializer = JSONSerializer(path)
        elif lower.endswith('.yaml') or lower.endswith('.yml'):
            self.serializer = YAMLSerializer(path)
        elif lower.endswith('.xml'):
            self.serializer = XMLSerializer(path)
        else:
            raise ValueError(f'Unsupported file type for notes (use .json, .yaml, .yml or .xml): {path}')

    def read(self) -> List[Note]:
        return self.serializer.read()

    def write(self, notes: List[Note]) -> None:
        self.serializer.write(notes)
