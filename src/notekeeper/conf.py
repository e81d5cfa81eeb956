from __future__ import annotations
from dataclasses import dataclass, replace
import os.path


class Error(Exception):
    pass


@dataclass
class SerializerConf:
    """Base class for serializer config. Use a subclass such as :class:`DelegatingSerializerConf`."""

    path: str
    """Required. Path of the file the notes are stored in.

    The file does not need to exist yet; it is created the first time notes are stored.
    """

    def instantiate(self):
        raise NotImplementedError("Please use a subclass like DelegatingSerializerConf instead!")

    def standardize(self):
        return replace(
            self,
            path=os.path.abspath(os.path.expanduser(self.path))
        )


@dataclass
class DelegatingSerializerConf(SerializerConf):
    """Configures notekeeper to pick a serializer from the extension of :attr:`path`.

    See :class:`notekeeper.serializers.delegating.DelegatingSerializer` for the supported extensions.
    """
    def instantiate(self):
        from notekeeper.serializers.delegating import DelegatingSerializer
        return DelegatingSerializer(self.path)


@dataclass
class JSONSerializerConf(SerializerConf):
    """Configures notekeeper to store notes as JSON, via :class:`notekeeper.serializers.jsonfile.JSONSerializer`."""
    def instantiate(self):
        from notekeeper.serializers.jsonfile import JSONSerializer
        return JSONSerializer(self.path)


@dataclass
class YAMLSerializerConf(SerializerConf):
    """Configures notekeeper to store notes as YAML, via :class:`notekeeper.serializers.yamlfile.YAMLSerializer`."""
    def instantiate(self):
        from notekeeper.serializers.yamlfile import YAMLSerializer
        return YAMLSerializer(self.path)


@dataclass
class XMLSerializerConf(SerializerConf):
    """Configures notekeeper to store notes as XML, via :class:`notekeeper.serializers.xmlfile.XMLSerializer`."""
    def instantiate(self):
        from notekeeper.serializers.xmlfile import XMLSerializer
        return XMLSerializer(self.path)


@dataclass
class NotekeeperConf:
    serializer_conf: SerializerConf
    """Configures where and how your notes are stored.

    For example, in ``~/.notekeeper.conf.py``:

    .. code-block:: python

       from notekeeper.conf import *
       conf = NotekeeperConf(serializer_conf=YAMLSerializerConf(path='~/notes.yaml'))
    """

    @classmethod
    def user_config_path(cls) -> str:
        """Returns the path to the user's config file, ``~/.notekeeper.conf.py``"""
        return os.path.expanduser(os.path.join('~', '.notekeeper.conf.py'))

    @classmethod
    def for_user(cls) -> NotekeeperConf:
        """Loads the config assigned to the variable ``conf`` in :meth:`user_config_path`.

        Raises :exc:`Error` if the file does not exist or does not define ``conf``.
        """
        path = cls.user_config_path()
        if not os.path.exists(path):
            raise Error(f'You need to create the config file: {path}')
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise Error('You need to assign an instance of NotekeeperConf to the variable `conf` '
                        f'in your config file: {path}')
        return context['conf']

    def standardize(self):
        return replace(
            self,
            serializer_conf=self.serializer_conf.standardize()
        )

    def instantiate(self):
        from notekeeper.api import NoteManager
        return NoteManager(self.standardize().serializer_conf.instantiate())
