"""End-to-end build over the fixture project."""

from pathlib import Path

import pytest

from ts_depgraph import RootDirectoryError, build_graph
from ts_depgraph.config import AppConfig
from ts_depgraph.diagnostics import AliasMatched, DiagnosticCollector
from ts_depgraph.models import GraphConfig

PROJECT = Path(__file__).parent / "fixtures" / "project"


@pytest.fixture
def graph():
    config = AppConfig(exclude_patterns=[r"\.test\."]).to_graph_config(root_dir=PROJECT)
    return build_graph(config)


def test_nodes(graph):
    assert set(graph.nodes) == {
        "src/app.ts",
        "src/circular/module1.ts",
        "src/circular/module2.ts",
        "src/circular/module3.ts",
        "src/components/Button.tsx",
        "src/example/a.ts",
        "src/example/b.ts",
        "src/lib/common.ts",
        "src/utils/index.ts",
    }


def test_alias_base_url_and_index_resolution(graph):
    assert set(graph.nodes["src/app.ts"].imports) == {
        "src/components/Button.tsx",
        "src/lib/common.ts",
        "src/example/a.ts",
        "src/utils/index.ts",
        "src/circular/module1.ts",
    }


def test_common_module_is_one_node(graph):
    assert sorted(graph.nodes["src/lib/common.ts"].imported_by) == [
        "src/app.ts", "src/example/a.ts", "src/example/b.ts",
    ]


def test_externals_and_unresolved(graph):
    assert graph.nodes["src/example/b.ts"].unresolved == ["./missing"]
    assert graph.nodes["src/example/a.ts"].unresolved == []
    assert graph.nodes["src/app.ts"].unresolved == []


def test_circular_edges(graph):
    circular = {e.pair for e in graph.circular_edges}
    assert circular == {
        ("src/circular/module1.ts", "src/circular/module2.ts"),
        ("src/circular/module2.ts", "src/circular/module3.ts"),
        ("src/circular/module3.ts", "src/circular/module1.ts"),
    }


def test_excluded_test_file_without_exclude():
    graph = build_graph(AppConfig().to_graph_config(root_dir=PROJECT))
    assert graph.nodes["src/example/a.test.ts"].imports == ["src/example/a.ts"]


def test_alias_diagnostics():
    collector = DiagnosticCollector()
    config = AppConfig().to_graph_config(root_dir=PROJECT, verbose=True)
    build_graph(config, sink=collector)
    matched = {(e.alias, e.specifier) for e in collector.of_type(AliasMatched)}
    assert ("@lib", "@lib") in matched
    assert ("@/*", "@/lib/common") in matched
    assert ("@components/*", "@components/Button") in matched


def test_missing_root(tmp_path):
    with pytest.raises(RootDirectoryError, match="Directory not found"):
        build_graph(GraphConfig(root_dir=tmp_path / "nope"))


def test_root_is_a_file(tmp_path):
    path = tmp_path / "file.ts"
    path.write_text("")
    with pytest.raises(RootDirectoryError, match="not a directory"):
        build_graph(GraphConfig(root_dir=path))
