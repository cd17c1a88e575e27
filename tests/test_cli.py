from cade6502.cli import main


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_bytes(text.encode("ascii"))
    return str(path)


def test_prints_tokens_of_simple_file(tmp_path, capsys):
    path = _write(tmp_path, "simple.cade", "LDA #$10\n")
    assert main([path]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0] == "IDENT 'LDA'"
    assert lines[-1] == "EOF ' '"


def test_multiple_files_in_order(tmp_path, capsys):
    first = _write(tmp_path, "a.cade", "INX")
    second = _write(tmp_path, "b.cade", "DEX ; done")
    assert main([first, second]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["IDENT 'INX'", "EOF ' '", "IDENT 'DEX'", "EOF ' '"]


def test_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.cade")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing.cade" in captured.err


def test_missing_second_file_prints_nothing(tmp_path, capsys):
    good = _write(tmp_path, "good.cade", "RTS")
    assert main([good, str(tmp_path / "absent.cade")]) == 1
    assert capsys.readouterr().out == ""


def test_illegal_character_fails(tmp_path, capsys):
    path = _write(tmp_path, "bad.cade", "LDA ,X")
    assert main([path]) == 1
    assert "bad.cade" in capsys.readouterr().err