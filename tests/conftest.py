"""Shared test fixtures for md5state."""

import pytest

from md5state.config.models import Md5StateConfig
from md5state.policy import Policy


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep user-level and env-selected config files out of every test."""
    monkeypatch.delenv("MD5STATE_CONFIG", raising=False)
    fake_home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr("pathlib.Path.home", lambda: fake_home)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """A temp working directory so relative paths resolve inside it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_tree(workdir):
    """Two readable files, a directory, and nothing at missing.txt."""
    (workdir / "a.txt").write_text("hi")
    (workdir / "b.txt").write_text("second file\n")
    (workdir / "subdir").mkdir()
    return workdir


@pytest.fixture
def default_policy():
    return Policy()


@pytest.fixture
def sample_config():
    return Md5StateConfig()
