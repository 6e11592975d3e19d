import os
import tempfile

import pytest

from ideagen._impl.build.module import Module
from ideagen._impl.ide.classpath import TreeIndex, classify
from ideagen._impl.ide.module_descriptor import (
    ModuleDescriptorWriter,
    OrderEntry,
    module_file_name,
    order_entries,
    render_module,
)
from ideagen._impl.support.errors import DescriptorWriteError
from ideagen._impl.support.path import normalize_path

WORK = normalize_path('/work')
REPO = normalize_path('/home/dev/.repo')

_expected_util_iml = """<?xml version="1.0" encoding="UTF-8"?>
<module relativePaths="true" type="JAVA_MODULE" version="4">
  <component inherit-compiler-output="false" name="NewModuleRootManager">
    <output url="file://$MODULE_DIR$/target/classes"/>
    <output-test url="file://$MODULE_DIR$/target/test-classes"/>
    <content url="file://$MODULE_DIR$">
      <sourceFolder isTestSource="false" url="file://$MODULE_DIR$/src/main"/>
      <sourceFolder isTestSource="true" url="file://$MODULE_DIR$/src/test"/>
      <excludeFolder url="file://$MODULE_DIR$/target/classes"/>
    </content>
    <orderEntry forTests="false" type="sourceFolder"/>
    <orderEntry type="inheritedJdk"/>
    <orderEntry module-name="core-lib-7x" type="module"/>
    <orderEntry type="module-library">
      <library>
        <CLASSES>
          <root url="jar://$M2_REPO$/org/x/x-1.0.jar!/"/>
        </CLASSES>
        <JAVADOC/>
        <SOURCES/>
      </library>
    </orderEntry>
    <orderEntryProperties/>
  </component>
</module>
"""


def _core_tree(work=WORK, repo=REPO):
    core = Module('core', os.path.join(work, 'core'))
    lib = Module('core:lib', os.path.join(work, 'core', 'lib'), parent=core,
                 sources=[os.path.join(work, 'core', 'lib', 'src', 'main')],
                 target=os.path.join(work, 'core', 'lib', 'target', 'classes'),
                 packages=[os.path.join(work, 'core', 'lib', 'target', 'core-lib-1.0.jar')])
    util = Module('core:util', os.path.join(work, 'core', 'util'), parent=core,
                  sources=[os.path.join(work, 'core', 'util', 'src', 'main')],
                  test_sources=[[os.path.join(work, 'core', 'util', 'src', 'test')]],
                  target=os.path.join(work, 'core', 'util', 'target', 'classes'),
                  test_target=os.path.join(work, 'core', 'util', 'target', 'test-classes'),
                  classpath=[lib.packages[0], os.path.join(repo, 'org', 'x', 'x-1.0.jar')],
                  packages=[os.path.join(work, 'core', 'util', 'target', 'core-util-1.0.jar')])
    return core, lib, util


def test_module_file_name():
    core, lib, util = _core_tree()
    assert module_file_name(util) == 'core-util-7x.iml'
    assert module_file_name(core) == 'core-7x.iml'


def test_render_example_module():
    core, lib, util = _core_tree()
    index = TreeIndex.of(core)
    assert render_module(util, classify(util, index, REPO), REPO) == _expected_util_iml


def test_render_is_deterministic():
    core, lib, util = _core_tree()
    writer = ModuleDescriptorWriter(TreeIndex.of(core), REPO)
    assert writer.render(util) == writer.render(util)


def test_order_entries():
    core = Module('core', os.path.join(WORK, 'core'))
    b = Module('core:b', os.path.join(WORK, 'core', 'b'), parent=core, packages=[os.path.join(WORK, 'b.jar')])
    a = Module('core:a', os.path.join(WORK, 'core', 'a'), parent=core, packages=[os.path.join(WORK, 'a.jar')])
    external = os.path.join(WORK, 'core', 'app', '..', 'libs', 'ext.jar')
    app = Module('core:app', os.path.join(WORK, 'core', 'app'), parent=core, classpath=[
        os.path.join(REPO, 'r.jar'),
        b.packages[0],
        normalize_path(external),
        a.packages[0],
        b.packages[0],
    ])
    entries = order_entries(app, classify(app, TreeIndex.of(core), REPO), REPO)
    assert entries == [
        OrderEntry('sourceFolder'),
        OrderEntry('inheritedJdk'),
        OrderEntry('module', 'core-a-7x'),
        OrderEntry('module', 'core-b-7x'),
        OrderEntry('module-library', '$MODULE_DIR$/../libs/ext.jar'),
        OrderEntry('module-library', '$M2_REPO$/r.jar'),
    ]


def test_module_without_packages_is_skipped():
    with tempfile.TemporaryDirectory() as tmp:
        docs = Module('docs', os.path.join(tmp, 'docs'))
        writer = ModuleDescriptorWriter(TreeIndex.of(docs), REPO)
        assert not writer.write_if_stale(docs, [])
        assert not os.path.exists(os.path.join(tmp, 'docs', 'docs-7x.iml'))


def test_write_if_stale_with_synthetic_clock():
    with tempfile.TemporaryDirectory() as tmp:
        core, lib, util = _core_tree(work=tmp)
        writer_file = os.path.join(util.base_dir, 'core-util-7x.iml')
        build_file = os.path.join(tmp, 'Buildfile')
        clock = {build_file: 10.0}
        writer = ModuleDescriptorWriter(TreeIndex.of(core), REPO, mtime=clock.get)

        # missing descriptor
        assert writer.write_if_stale(util, [build_file])
        assert os.path.isfile(writer_file)

        # descriptor newer than every input
        clock[writer_file] = 20.0
        assert not writer.write_if_stale(util, [build_file])

        # equal time stamps do not trigger regeneration
        clock[build_file] = 20.0
        assert not writer.write_if_stale(util, [build_file])

        # missing inputs are ignored
        assert not writer.write_if_stale(util, [build_file, os.path.join(tmp, 'missing.yaml')])

        # touching any input forces regeneration
        other = os.path.join(tmp, 'build.yaml')
        clock[other] = 21.0
        assert writer.write_if_stale(util, [build_file, other])


def test_force_ignores_time_stamps():
    with tempfile.TemporaryDirectory() as tmp:
        core, lib, util = _core_tree(work=tmp)
        descriptor = os.path.join(util.base_dir, 'core-util-7x.iml')
        clock = {descriptor: 20.0}
        writer = ModuleDescriptorWriter(TreeIndex.of(core), REPO, mtime=clock.get, force=True)
        assert writer.write_if_stale(util, [])
        assert os.path.isfile(descriptor)


def test_write_failure_is_reported():
    with tempfile.TemporaryDirectory() as tmp:
        core, lib, util = _core_tree(work=tmp)
        # a file where the module directory should be
        os.makedirs(os.path.dirname(util.base_dir))
        with open(util.base_dir, 'w') as fp:
            fp.write('not a directory')
        writer = ModuleDescriptorWriter(TreeIndex.of(core), REPO)
        with pytest.raises(DescriptorWriteError) as e:
            writer.write_if_stale(util, [])
        assert e.value.path == os.path.join(util.base_dir, 'core-util-7x.iml')
