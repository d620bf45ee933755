import json

import pytest

from basedata.app import App, data_plugin


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """A working directory with a package.json and a fixtures/ tree of data files."""
    (tmp_path / "package.json").write_text(json.dumps({"name": "base-data", "version": "0.1.0"}))

    fixtures = tmp_path / "fixtures"
    fixtures.mkdir()
    (fixtures / "a.json").write_text(json.dumps({"a": "b"}))
    (fixtures / "data.json").write_text(json.dumps({"me": "I'm at the root!"}))
    (fixtures / "c.yml").write_text("c:\n  - d\n  - e\n  - f\n")
    (fixtures / "data.yml").write_text("me2: I'm a yml file at the root!\n")
    (fixtures / "data.yaml").write_text("me1: I'm a yaml file at the root!\n")
    (fixtures / "notes.md").write_text("# not data\n")
    for name in ("one", "two", "three"):
        (fixtures / name).mkdir()
        (fixtures / name / "index.json").write_text(json.dumps({"name": name}))

    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def app():
    """An App with a data store attached at the default cache path."""
    instance = App()
    instance.use(data_plugin())
    return instance
