"""Provides the :class:`JSONSerializer` class."""

import json

from notekeeper.serializers.base import Serializer


class JSONSerializer(Serializer):
    """Stores notes in a file as a JSON array of objects.

    Each object has the keys ``title``, ``priority``, ``category`` and ``archived``.
    """
    def _read(self) -> list:
        with open(self.path, 'r', encoding='utf-8') as file:
            return json.load(file)

    def _write(self, records):
        with open(self.path, 'w', encoding='utf-8') as file:
            json.dump(records, file, indent=2)
            file.write('\n')
