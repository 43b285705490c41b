import pytest


@pytest.fixture
def write_tree(tmp_path):
    """Write ``{relative_path: content}`` under tmp_path and return the root."""
    def _write(files):
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return tmp_path.resolve()
    return _write


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point config lookup at a file that does not exist."""
    monkeypatch.setenv("DEPENDENCY_GRAPH_CONFIG", str(tmp_path / "absent-config.json"))
    return tmp_path / "absent-config.json"
