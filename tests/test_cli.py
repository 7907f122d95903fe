"""Command line entry point."""

import pytest

from stylecascade.__main__ import main


@pytest.fixture
def dirs(tmp_path):
    """Empty system and user filedefs directories."""
    system = tmp_path / "system"
    user = tmp_path / "user"
    system.mkdir()
    user.mkdir()
    return system, user


def _run(dirs, *args):
    system, user = dirs
    return main([*args, "--system-dir", str(system), "--user-dir", str(user)])


def test_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "javascript" in out
    assert "common" in out
    assert "docbook" in out and "vhdl" in out
    assert out.splitlines()[0].startswith("common")


def test_common_table(dirs, capsys):
    assert _run(dirs, "common") == 0
    out = capsys.readouterr().out
    assert "[common]" in out
    assert "brace_bad" in out
    assert "folding: box straight line=below" in out


def test_filetype_table(dirs, capsys):
    assert _run(dirs, "python") == 0
    out = capsys.readouterr().out
    assert "[python] lexer=python" in out
    assert "fg=#600080" in out
    assert "keywords.primary:" in out


def test_user_override_shown(dirs, capsys):
    _, user = dirs
    (user / "filetypes.python").write_text("[styling]\nword=0x123456;0xffffff;false;true\n")
    assert _run(dirs, "python") == 0
    out = capsys.readouterr().out
    assert "word" in out and "fg=#123456" in out and "italic" in out


def test_pass_through(dirs, capsys):
    assert _run(dirs, "html") == 0
    out = capsys.readouterr().out
    assert "styles borrowed from: python, xml" in out


def test_symbols_merged(dirs, capsys):
    assert _run(dirs, "c", "--symbols", "Node", "list_t") == 0
    out = capsys.readouterr().out
    assert "merged class 1: Node list_t" in out


def test_unknown_filetype(dirs, capsys):
    with pytest.raises(SystemExit) as excinfo:
        _run(dirs, "cobol")
    assert excinfo.value.code == 2
    assert "Unknown filetype: cobol" in capsys.readouterr().err
