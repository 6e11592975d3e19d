import json
import os
import tempfile

import pytest

from ideagen._impl.build.graph import load_graph, parse_graph
from ideagen._impl.support.errors import BuildGraphError
from ideagen._impl.support.options import set_defaults
from ideagen._impl.support.path import normalize_path

WORK = normalize_path('/work')


def _doc(**kwargs):
    doc = {
        'localRepository': '/repo',
        'buildFiles': ['build.yaml'],
        'buildfile': 'Buildfile',
        'modules': [{
            'name': 'core',
            'packages': ['target/core-1.0.jar'],
            'modules': [
                {
                    'name': 'lib',
                    'sources': ['src/main/java'],
                    'target': 'target/classes',
                    'packages': ['target/core-lib-1.0.jar'],
                },
                {
                    'name': 'util',
                    'baseDir': 'utilities',
                    'sources': ['src/main/java'],
                    'testSources': ['src/test/java'],
                    'target': 'target/classes',
                    'testTarget': 'target/test-classes',
                    'classpath': [{'project': 'core:lib'}, '/repo/org/x/x-1.0.jar'],
                    'packages': ['target/core-util-1.0.jar'],
                    'buildFile': 'util.yaml',
                },
            ],
        }],
    }
    doc.update(kwargs)
    return doc


def test_parse_graph():
    graph = parse_graph(_doc(), WORK)
    assert [m.name for m in graph.modules()] == ['core', 'core:lib', 'core:util']
    core = graph.module('core')
    lib = graph.module('core:lib')
    util = graph.module('core:util')
    assert core.base_dir == WORK
    assert lib.base_dir == os.path.join(WORK, 'lib')
    assert lib.parent is core
    assert util.base_dir == os.path.join(WORK, 'utilities')
    assert util.sources == [os.path.join(WORK, 'utilities', 'src', 'main', 'java')]
    assert util.test_sources == [[os.path.join(WORK, 'utilities', 'src', 'test', 'java')]]
    assert util.classpath == [lib.packages[0], normalize_path('/repo/org/x/x-1.0.jar')]
    assert graph.local_repository == normalize_path('/repo')


def test_sources():
    graph = parse_graph(_doc(), WORK)
    util = graph.module('core:util')
    common = [os.path.join(WORK, 'build.yaml'), os.path.join(WORK, 'Buildfile')]
    assert graph.module_sources(util) == common + [os.path.join(WORK, 'utilities', 'util.yaml')]
    assert graph.module_sources(graph.module('core:lib')) == common
    assert graph.tree_sources(graph.module('core')) == common + [os.path.join(WORK, 'utilities', 'util.yaml')]


def test_local_repository_override():
    graph = parse_graph(_doc(), WORK, local_repository='/elsewhere')
    assert graph.local_repository == normalize_path('/elsewhere')


def test_local_repository_from_environment(monkeypatch):
    doc = _doc()
    del doc['localRepository']
    monkeypatch.setenv('IDEAGEN_LOCAL_REPOSITORY', '/env/repo')
    assert parse_graph(doc, WORK).local_repository == normalize_path('/env/repo')


def test_grouped_test_sources():
    doc = _doc()
    doc['modules'][0]['modules'][1]['testSources'] = [['src/test/java'], ['src/it/java', 'src/it/gen']]
    util = parse_graph(doc, WORK).module('core:util')
    assert len(util.test_sources) == 2
    assert util.test_sources[1] == [
        os.path.join(WORK, 'utilities', 'src', 'it', 'java'),
        os.path.join(WORK, 'utilities', 'src', 'it', 'gen'),
    ]


def test_invalid_graphs():
    with pytest.raises(BuildGraphError):
        parse_graph([], WORK)
    with pytest.raises(BuildGraphError):
        parse_graph({'modules': []}, WORK)

    unknown_ref = _doc()
    unknown_ref['modules'][0]['modules'][1]['classpath'] = [{'project': 'core:nothing'}]
    with pytest.raises(BuildGraphError):
        parse_graph(unknown_ref, WORK)

    duplicate = _doc()
    duplicate['modules'][0]['modules'].append({'name': 'lib'})
    with pytest.raises(BuildGraphError):
        parse_graph(duplicate, WORK)

    with pytest.raises(BuildGraphError):
        parse_graph(_doc(), WORK).module('core:nothing')


def test_load_graph():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, 'buildgraph.json')
        with open(path, 'w') as fp:
            json.dump(_doc(), fp)
        graph = load_graph(path)
        assert graph.module('core').base_dir == normalize_path(tmp)

        with open(path, 'w') as fp:
            fp.write('{ not json')
        with pytest.raises(BuildGraphError):
            load_graph(path)

        with pytest.raises(BuildGraphError):
            load_graph(os.path.join(tmp, 'missing.json'))


def test_unsupported_attributes_are_reported(capsys):
    set_defaults()
    doc = _doc()
    doc['modules'][0]['modules'][0]['manifest'] = {'Main-Class': 'x.Main'}
    parse_graph(doc, WORK)
    err = capsys.readouterr().err
    assert 'WARNING:' in err
    assert 'unsupported attributes: manifest' in err
    assert 'in definition of module core:lib' in err
