"""Provides the :class:`YAMLSerializer` class."""

import yaml

from notekeeper.serializers.base import Serializer, FormatError


class YAMLSerializer(Serializer):
    """Stores notes in a file as a YAML sequence of mappings.

    Here's an example file:

    .. code-block:: yaml

       - archived: false
         category: Home
         priority: 1
         title: Buy milk

    An empty file is read as an empty collection.
    """
    def _read(self) -> list:
        with open(self.path, 'r', encoding='utf-8') as file:
            try:
                records = yaml.safe_load(file)
            except yaml.YAMLError as e:
                raise FormatError('Cannot parse YAML', self.path, e)
        return [] if records is None else records

    def _write(self, records):
        with open(self.path, 'w', encoding='utf-8') as file:
            yaml.safe_dump(records, file, allow_unicode=True)
