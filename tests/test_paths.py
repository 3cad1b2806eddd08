import os

import pytest

from hostkit.fs.paths import expand_tilde, is_path_syntax, is_tilde_notation, resolve
from hostkit.models import DirContext

LINUX = DirContext(platform="linux", env={"HOME": "/home/ada"})


@pytest.mark.parametrize("value", ["~", "~/x", "~\\x"])
def test_tilde_notation_detected(value):
    assert is_tilde_notation(value)


@pytest.mark.parametrize("value", ["/x", "x", "a~"])
def test_tilde_notation_rejected(value):
    assert not is_tilde_notation(value)


def test_expand_tilde_alone_is_home():
    assert expand_tilde("~", LINUX) == "/home/ada"


def test_expand_tilde_joins_remainder():
    assert expand_tilde("~/a/b", LINUX) == "/home/ada/a/b"
    assert expand_tilde("~/a//b/", LINUX) == "/home/ada/a/b"


def test_expand_tilde_on_windows():
    ctx = DirContext(platform="win32", env={"USERPROFILE": "C:\\Users\\ada"})
    assert expand_tilde("~\\docs", ctx) == "C:\\Users\\ada\\docs"


def test_resolve_delegates(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve("~/conf", LINUX) == "/home/ada/conf"
    assert resolve("data/file.txt") == os.path.join(os.getcwd(), "data", "file.txt")


def test_is_path_syntax():
    assert is_path_syntax("a/b")
    assert is_path_syntax("~")
    assert not is_path_syntax("plain")
