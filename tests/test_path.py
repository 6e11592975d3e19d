import os

import pytest

from ideagen._impl.support.errors import InvalidRelativePathError
from ideagen._impl.support.path import (
    FILE_PATH_PREFIX,
    MODULE_DIR,
    PROJECT_DIR,
    REPOSITORY_DIR,
    file_url,
    is_under,
    module_path,
    module_url,
    normalize_path,
    project_path,
    relative_path,
    repository_path,
)

WORK = normalize_path('/work')
REPO = normalize_path('/home/dev/.repo')


def test_normalize_path():
    assert normalize_path('a/../b/./c', WORK) == os.path.join(WORK, 'b', 'c')
    assert normalize_path('x', WORK, 'core') == os.path.join(WORK, 'core', 'x')
    assert normalize_path(os.path.join(WORK, 'y'), '/elsewhere') == os.path.join(WORK, 'y')
    assert normalize_path('~') == os.path.normpath(os.path.expanduser('~'))


def test_relative_path():
    assert relative_path(os.path.join(WORK, 'core', 'src', 'main'), WORK) == 'core/src/main'
    assert relative_path(WORK, WORK) == '.'
    assert relative_path(os.path.join(WORK, 'other'), os.path.join(WORK, 'core')) == '../other'


def test_relative_path_round_trip():
    base = os.path.join(WORK, 'core', 'util')
    for rel in ('src/main/java', 'target/classes', '../lib/build'):
        path = normalize_path(rel, base)
        assert normalize_path(relative_path(path, base), base) == path


def test_relative_path_without_common_base():
    with pytest.raises(InvalidRelativePathError) as e:
        relative_path('relative/path', WORK)
    assert e.value.path == 'relative/path'
    assert e.value.base == WORK
    assert 'different prefix' in str(e.value)


def test_is_under():
    assert is_under(os.path.join(REPO, 'org', 'x', 'x-1.0.jar'), REPO)
    assert is_under(REPO, REPO)
    assert is_under(os.path.join(REPO, 'a'), REPO + os.sep)
    # a shared string prefix is not a shared directory
    assert not is_under(REPO + '-old' + os.sep + 'x.jar', REPO)
    assert not is_under(WORK, os.path.join(WORK, 'core'))


def test_repository_path():
    jar = os.path.join(REPO, 'org', 'x', 'x-1.0.jar')
    assert repository_path(jar, REPO) == REPOSITORY_DIR + '/org/x/x-1.0.jar'
    outside = os.path.join(WORK, 'lib', 'y.jar')
    assert repository_path(outside, REPO) == outside


def test_token_paths():
    base = os.path.join(WORK, 'core')
    src = os.path.join(base, 'src', 'main')
    assert module_path(src, base) == MODULE_DIR + '/src/main'
    assert module_url(src, base) == FILE_PATH_PREFIX + MODULE_DIR + '/src/main'
    assert project_path(src, WORK) == PROJECT_DIR + '/core/src/main'
    assert file_url(src).startswith(FILE_PATH_PREFIX)
    assert file_url(src).endswith('/core/src/main')
