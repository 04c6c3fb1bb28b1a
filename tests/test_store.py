from pathlib import Path
import pytest
from termnotes.conf import NotesConf
from termnotes.errors import NoteIOError, NoteNotFoundError, SaveDirMissingError
from termnotes.models import LoadMode, Note, NoteInfo


def store_setup(fs):
    fs.create_dir('/notes')
    return NotesConf(save_dir='/notes').instantiate()


def test_path_for():
    store = NotesConf(save_dir='/notes').instantiate()
    assert store.path_for('foo') == '/notes/foo.note'
    assert store.path_for('a.b') == '/notes/a.b.note'


def test_save(fs):
    store = store_setup(fs)
    store.save(Note.new('foo', 'then'))
    assert Path('/notes/foo.note').read_text() == 'foo | then\n\n'
    assert store.exists('foo')
    assert not store.exists('bar')


def test_save_replaces_whole_file(fs):
    store = store_setup(fs)
    fs.create_file('/notes/foo.note', contents='foo | then\n\na much longer body than the new one\n')
    note = Note('foo', 'then')
    note.rebuild('short\n')
    store.save(note)
    assert Path('/notes/foo.note').read_text() == 'foo | then\n\nshort\n'


def test_save_failure(fs):
    store = NotesConf(save_dir='/missing').instantiate()
    with pytest.raises(NoteIOError) as info:
        store.save(Note.new('foo', 'then'))
    assert info.value.name == 'foo'
    assert isinstance(info.value.cause, OSError)
    assert info.value.message == 'ERROR: foo failed to save.'


def test_load_append(fs):
    store = store_setup(fs)
    fs.create_file('/notes/foo.note', contents='foo | 2012-05-02 [03:04]\n\nhello\n\nworld\n')
    note = store.load('foo', LoadMode.APPEND)
    assert note.name == 'foo'
    assert note.timestamp == '2012-05-02 [03:04]'
    assert note.body == 'hello\n\nworld\n'
    assert note.content == 'foo | 2012-05-02 [03:04]\n\nhello\n\nworld\n'


def test_load_adds_missing_final_newline(fs):
    store = store_setup(fs)
    fs.create_file('/notes/foo.note', contents='foo | then\n\nno newline at end')
    assert store.load('foo').body == 'no newline at end\n'


def test_load_overwrite(fs):
    store = store_setup(fs)
    fs.create_file('/notes/foo.note', contents='foo | then\n\nhello\n')
    note = store.load('foo', LoadMode.OVERWRITE)
    assert note.timestamp == 'then'
    assert note.body == ''
    assert note.content == 'foo | then\n\n'


def test_load_regenerates_head(fs):
    store = store_setup(fs)
    fs.create_file('/notes/foo.note', contents='renamed elsewhere | then\n\nhello\n')
    assert store.load('foo').content == 'foo | then\n\nhello\n'


def test_load_missing(fs):
    store = store_setup(fs)
    with pytest.raises(NoteNotFoundError) as info:
        store.load('foo')
    assert info.value.message == "ERROR: 'foo' does not exist or failed to load."


def test_load_head_without_timestamp(fs):
    store = store_setup(fs)
    fs.create_file('/notes/foo.note', contents='just some text\n')
    with pytest.raises(NoteNotFoundError):
        store.load('foo')


def test_timestamp_stable_across_saves(fs):
    store = store_setup(fs)
    store.save(Note.new('foo', '2001-02-03 [04:05]'))
    for i in range(3):
        note = store.load('foo')
        note.rebuild(note.body + f'line {i}\n')
        store.save(note)
    assert Path('/notes/foo.note').read_text() == \
        'foo | 2001-02-03 [04:05]\n\nline 0\nline 1\nline 2\n'


def test_delete(fs):
    store = store_setup(fs)
    fs.create_file('/notes/foo.note', contents='foo | then\n\n')
    assert store.delete('foo')
    assert not Path('/notes/foo.note').exists()
    assert not store.delete('foo')


def test_delete_directory_fails(fs):
    store = store_setup(fs)
    fs.create_dir('/notes/odd.note')
    assert not store.delete('odd')
    assert Path('/notes/odd.note').is_dir()


def test_names(fs):
    store = store_setup(fs)
    assert store.names() == []
    fs.create_file('/notes/one.note')
    fs.create_file('/notes/two.three.note')
    fs.create_file('/notes/ignored.txt')
    fs.create_file('/notes/.note')
    fs.create_dir('/notes/subdir.note')
    assert sorted(store.names()) == ['one', 'two.three']


def test_names_missing_dir(fs):
    store = NotesConf(save_dir='/missing').instantiate()
    with pytest.raises(SaveDirMissingError) as info:
        store.names()
    assert info.value.path == '/missing'


def test_infos(fs):
    store = store_setup(fs)
    fs.create_file('/notes/one.note', contents='one | 2001-02-03 [04:05]\n\nbody\n')
    fs.create_file('/notes/two.note', contents='no head\n')
    assert sorted(store.infos(), key=lambda i: i.name) == [
        NoteInfo('one', '2001-02-03 [04:05]'),
        NoteInfo('two', None),
    ]


def test_null_byte_in_name(tmp_path):
    store = NotesConf(save_dir=str(tmp_path)).instantiate()
    assert not store.exists('a\x00b')
    assert not store.delete('a\x00b')
    with pytest.raises(NoteNotFoundError):
        store.load('a\x00b')
    with pytest.raises(NoteIOError) as info:
        store.save(Note.new('a\x00b', 'then'))
    assert isinstance(info.value.cause, ValueError)
