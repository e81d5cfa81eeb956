"""Keeps a prioritized, categorized list of notes and stores it in a JSON, YAML or XML file.

If you installed via ``pip``, run ``notekeeper -h`` to get help.

To use the Python API, look at :class:`notekeeper.api.NoteManager`
"""
