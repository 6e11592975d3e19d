import os

from ideagen._impl.build.module import Module
from ideagen._impl.ide.classpath import (
    ExternalFilePath,
    GeneratedOutputPath,
    ProjectReference,
    RepositoryArtifactPath,
    TreeIndex,
    classify,
)
from ideagen._impl.support.path import normalize_path

WORK = normalize_path('/work')
REPO = normalize_path('/home/dev/.repo')


def _core_tree():
    core = Module('core', os.path.join(WORK, 'core'))
    lib = Module('core:lib', os.path.join(WORK, 'core', 'lib'), parent=core,
                 sources=[os.path.join(WORK, 'core', 'lib', 'src', 'main')],
                 target=os.path.join(WORK, 'core', 'lib', 'target', 'classes'),
                 packages=[os.path.join(WORK, 'core', 'lib', 'target', 'core-lib-1.0.jar')])
    util = Module('core:util', os.path.join(WORK, 'core', 'util'), parent=core,
                  sources=[os.path.join(WORK, 'core', 'util', 'src', 'main')],
                  test_sources=[[os.path.join(WORK, 'core', 'util', 'src', 'test')]],
                  target=os.path.join(WORK, 'core', 'util', 'target', 'classes'),
                  test_target=os.path.join(WORK, 'core', 'util', 'target', 'test-classes'),
                  classpath=[lib.packages[0], os.path.join(REPO, 'org', 'x', 'x-1.0.jar')],
                  packages=[os.path.join(WORK, 'core', 'util', 'target', 'core-util-1.0.jar')])
    return core, lib, util


def test_classify_example():
    core, lib, util = _core_tree()
    result = classify(util, TreeIndex.of(core), REPO)
    assert [ref.module for ref in result.project_refs] == [lib]
    assert result.repository_libs == [RepositoryArtifactPath(os.path.join(REPO, 'org', 'x', 'x-1.0.jar'))]
    assert result.generated == []
    assert result.external_libs == []


def test_classify_all_kinds():
    core, lib, util = _core_tree()
    generated = os.path.join(util.base_dir, 'target', 'generated', 'antlr')
    external = normalize_path('/opt/tools/tool.jar')
    util.classpath = [external, generated, util.target, lib.packages[0], os.path.join(REPO, 'a.jar'), external]
    result = classify(util, TreeIndex.of(core), REPO)

    assert result.project_refs == [ProjectReference(lib.packages[0], lib)]
    assert result.repository_libs == [RepositoryArtifactPath(os.path.join(REPO, 'a.jar'))]
    assert result.generated == [GeneratedOutputPath(generated)]
    # duplicates and classpath order are kept
    assert result.external_libs == [ExternalFilePath(external), ExternalFilePath(external)]


def test_classification_is_complete_and_disjoint():
    core, lib, util = _core_tree()
    util.classpath = [
        lib.packages[0],
        os.path.join(REPO, 'b.jar'),
        os.path.join(util.base_dir, 'gen'),
        normalize_path('/opt/c.jar'),
        os.path.join(REPO, 'a.jar'),
    ]
    result = classify(util, TreeIndex.of(core), REPO)
    classified = [ref.path for partition in result for ref in partition]
    assert sorted(classified) == sorted(util.classpath)
    assert len(classified) == len(util.classpath)


def test_own_compile_output_is_excluded():
    core, lib, util = _core_tree()
    util.classpath = [util.target, util.target]
    result = classify(util, TreeIndex.of(core), REPO)
    assert result == ([], [], [], [])


def test_package_in_repository_is_a_project_reference():
    core = Module('core', os.path.join(WORK, 'core'))
    installed = os.path.join(REPO, 'org', 'core', 'lib-1.0.jar')
    lib = Module('core:lib', os.path.join(WORK, 'core', 'lib'), parent=core, packages=[installed])
    app = Module('core:app', os.path.join(WORK, 'core', 'app'), parent=core, classpath=[installed])
    result = classify(app, TreeIndex.of(core), REPO)
    assert [ref.module for ref in result.project_refs] == [lib]
    assert result.repository_libs == []


def test_first_module_owning_a_package_wins():
    core = Module('core', os.path.join(WORK, 'core'))
    shared = os.path.join(WORK, 'dist', 'shared.jar')
    first = Module('core:a', os.path.join(WORK, 'core', 'a'), parent=core, packages=[shared])
    Module('core:b', os.path.join(WORK, 'core', 'b'), parent=core, packages=[shared])
    index = TreeIndex.of(core)
    assert index.module_for_package(shared) is first


def test_non_packageable_modules_are_not_referenced():
    core = Module('core', os.path.join(WORK, 'core'))
    Module('core:docs', os.path.join(WORK, 'core', 'docs'), parent=core)
    index = TreeIndex.of(core)
    assert index.module_for_package(os.path.join(WORK, 'core', 'docs')) is None


def test_nested_module_output_counts_as_generated_in_parent():
    # The output of a module nested in its parent's directory lies under the
    # parent's base directory, so the parent sees it as generated output.
    core = Module('core', os.path.join(WORK, 'core'), target=os.path.join(WORK, 'core', 'target', 'classes'))
    nested_output = os.path.join(WORK, 'core', 'nested', 'target', 'classes')
    Module('core:nested', os.path.join(WORK, 'core', 'nested'), parent=core, target=nested_output)
    core.classpath = [nested_output]
    result = classify(core, TreeIndex.of(core), REPO)
    assert result.generated == [GeneratedOutputPath(nested_output)]
    assert result.external_libs == []
