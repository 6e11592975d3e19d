import os
import tempfile

from ideagen._impl.support.timestampfile import TimeStampFile, file_mtime, needs_update


def _touch(path, mtime):
    with open(path, 'w') as fp:
        fp.write(os.path.basename(path))
    os.utime(path, (mtime, mtime))


def test_file_mtime():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, 'a')
        assert file_mtime(path) is None
        _touch(path, 1000)
        assert file_mtime(path) == 1000


def test_newest():
    clock = {'a': 1.0, 'b': 3.0, 'c': 2.0}
    assert TimeStampFile.newest(['a', 'b', 'c', 'missing'], clock.get).path == 'b'
    assert TimeStampFile.newest(['missing'], clock.get) is None
    assert TimeStampFile.newest([], clock.get) is None


def test_needs_update_with_real_files():
    with tempfile.TemporaryDirectory() as tmp:
        descriptor = os.path.join(tmp, 'app-7x.iml')
        build_file = os.path.join(tmp, 'Buildfile')
        _touch(build_file, 1000)
        assert needs_update(descriptor, [build_file]) == descriptor + ' does not exist'

        _touch(descriptor, 2000)
        assert needs_update(descriptor, [build_file]) is None

        _touch(build_file, 3000)
        reason = needs_update(descriptor, [build_file])
        assert reason is not None and 'is older than' in reason


def test_no_inputs_means_up_to_date():
    clock = {'app-7x.iml': 5.0}
    assert needs_update('app-7x.iml', [], clock.get) is None
