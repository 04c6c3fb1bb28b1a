"""A small terminal notebook that keeps each note in its own plain text file.

If you installed via ``pip``, run ``termnotes`` to start the interactive shell,
or ``termnotes -h`` to see the one-shot commands.

To use the Python API, look at :class:`termnotes.conf.NotesConf` and :class:`termnotes.store.NoteStore`
"""
