from pathlib import Path

from kappa import config


def test_paths_from_env_defaults(monkeypatch):
    monkeypatch.delenv("KAPPA_TEST_PATH", raising=False)
    assert config.paths_from_env("KAPPA_TEST_PATH", ["/a"]) == [Path("/a")]


def test_paths_from_env_splits(monkeypatch):
    sep = config._sep()
    monkeypatch.setenv("KAPPA_TEST_PATH", f"/one{sep} /two {sep}")
    assert config.paths_from_env("KAPPA_TEST_PATH", []) == [Path("/one"), Path("/two")]


def test_load_path_default_is_empty(monkeypatch):
    monkeypatch.delenv("KAPPA_LOAD_PATH", raising=False)
    assert config.get_load_path() == []


def test_prelude_path_default(monkeypatch):
    monkeypatch.delenv("KAPPA_PRELUDE", raising=False)
    path = config.get_prelude_path()
    assert path.name == "stdlib.scm"
    assert path.is_file()


def test_prompt(monkeypatch):
    monkeypatch.delenv("KAPPA_PROMPT", raising=False)
    assert config.get_prompt() == "Lisp>>> "
    monkeypatch.setenv("KAPPA_PROMPT", "> ")
    assert config.get_prompt() == "> "


def test_recursion_limit(monkeypatch):
    monkeypatch.delenv("KAPPA_RECURSION_LIMIT", raising=False)
    assert config.get_recursion_limit() == config.DEFAULT_RECURSION_LIMIT == 5000
    monkeypatch.setenv("KAPPA_RECURSION_LIMIT", " 12000 ")
    assert config.get_recursion_limit() == 12000
    monkeypatch.setenv("KAPPA_RECURSION_LIMIT", "lots")
    assert config.get_recursion_limit() == 5000
