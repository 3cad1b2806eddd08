import hashlib

from hostkit import main


def test_sha256_command(tmp_path, capsys):
    target = tmp_path / "f.txt"
    target.write_bytes(b"abc")

    assert main.run(main.parse_args(["sha256", str(target)])) == 0

    assert capsys.readouterr().out.strip() == hashlib.sha256(b"abc").hexdigest()


def test_dirs_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("HOME", "/home/ada")

    assert main.run(main.parse_args(["dirs"])) == 0

    out = capsys.readouterr().out
    assert "/home/ada/.local/bin" in out


def test_dirs_command_unsupported_platform(monkeypatch):
    monkeypatch.setattr("sys.platform", "plan9")

    assert main.run(main.parse_args(["dirs"])) == 1


def test_get_and_download_commands(server_url, tmp_path, capsys):
    assert main.run(main.parse_args(["get", server_url + "/json", "--json"])) == 0
    assert '"a": 1' in capsys.readouterr().out

    dest = tmp_path / "out" / "hello.txt"
    assert main.run(main.parse_args(["download", server_url, str(dest)])) == 0
    assert dest.read_text() == "Hello World\n"


def test_timeout_from_environment(monkeypatch):
    monkeypatch.setenv("HOSTKIT_HTTP_TIMEOUT", "2.5")

    args = main.parse_args(["get", "http://a.test"])

    assert args.timeout == 2.5


def test_get_command_method(server_url, capsys):
    assert main.run(main.parse_args(["get", server_url + "/echo", "--json", "--method", "POST"])) == 0
    assert '"method": "POST"' in capsys.readouterr().out
