"""Handles persisting a collection of notes.

:class:`notekeeper.serializers.base.Serializer` defines the API.
:class:`notekeeper.serializers.delegating.DelegatingSerializer` picks one of the file-based implementations
(:class:`notekeeper.serializers.jsonfile.JSONSerializer`, :class:`notekeeper.serializers.yamlfile.YAMLSerializer`,
:class:`notekeeper.serializers.xmlfile.XMLSerializer`) from the file extension, and is what you usually want to use.
"""
