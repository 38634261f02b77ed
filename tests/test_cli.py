import io

from infiniteloop.io.cli import main


def test_prints_every_solution(puzzles_dir, capsys):
    assert main([str(puzzles_dir / "double_corner.txt"), "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("-- SOLUTION --\n") == 2
    assert "╶──╮  ╭──╴\n   │  │\n╶──╯  ╰──╴\n" in out


def test_max_solutions(puzzles_dir, capsys):
    assert main([str(puzzles_dir / "double_corner.txt"), "--max-solutions", "1"]) == 0
    assert capsys.readouterr().out.count("-- SOLUTION --") == 1


def test_puzzle_options_apply(puzzles_dir, capsys):
    assert main([str(puzzles_dir / "dominoes.yaml")]) == 0
    assert capsys.readouterr().out.count("-- SOLUTION --") == 5


def test_command_line_beats_puzzle_options(puzzles_dir, capsys):
    assert main([str(puzzles_dir / "dominoes.yaml"), "--max-solutions", "2"]) == 0
    assert capsys.readouterr().out.count("-- SOLUTION --") == 2


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("11"))
    assert main([]) == 0
    assert capsys.readouterr().out == "-- SOLUTION --\n╶──╴\n"


def test_unsolvable_puzzle_prints_nothing(tmp_path, capsys):
    path = tmp_path / "lonely.txt"
    path.write_text("1", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_parse_failure(tmp_path, capsys):
    path = tmp_path / "wide.txt"
    path.write_text("1" * 20, encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Failed to parse input" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "Failed to read input" in capsys.readouterr().err


def test_render_failure(puzzles_dir, capsys):
    assert main([str(puzzles_dir / "double_corner.txt"), "--capacity", "5"]) == 1
    captured = capsys.readouterr()
    assert "Failed to print solution" in captured.err
    assert captured.out == ""


def test_invalid_settings(puzzles_dir, capsys):
    assert main([str(puzzles_dir / "double_corner.txt"), "--axis", "1"]) == 1
    assert "Invalid settings" in capsys.readouterr().err


def test_config_file(tmp_path, puzzles_dir, capsys):
    config = tmp_path / "settings.yaml"
    config.write_text("max_solutions: 1\nseed: 2\n", encoding="utf-8")
    assert main([str(puzzles_dir / "double_corner.txt"), "--config", str(config)]) == 0
    assert capsys.readouterr().out.count("-- SOLUTION --") == 1


def test_file_that_is_not_utf8(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"1\xff1\n")
    assert main([str(path)]) == 1
    assert "Failed to parse input" in capsys.readouterr().err


def test_stdin_that_is_not_utf8(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"1\xff1"), encoding="utf-8"))
    assert main([]) == 1
    assert "Failed to parse input" in capsys.readouterr().err


def test_missing_config_file(tmp_path, puzzles_dir, capsys):
    assert main([str(puzzles_dir / "double_corner.txt"), "--config", str(tmp_path / "nope.yaml")]) == 1
    err = capsys.readouterr().err
    assert "Invalid settings" in err
    assert "Failed to read input" not in err


def test_config_file_that_is_not_utf8(tmp_path, puzzles_dir, capsys):
    config = tmp_path / "settings.yaml"
    config.write_bytes(b"seed: \xff\n")
    assert main([str(puzzles_dir / "double_corner.txt"), "--config", str(config)]) == 1
    assert "Invalid settings" in capsys.readouterr().err
