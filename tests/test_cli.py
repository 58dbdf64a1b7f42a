import pytest
from pydantic import ValidationError

from seekfind import main
from seekfind.config import GeneratorConfig


def test_main_writes_html(tmp_path, word_file, capsys):
    out = tmp_path / "puzzle.html"
    status = main([str(word_file), "--size", "10", "--output", str(out), "--seed", "7"])
    assert status == 0
    html = out.read_text(encoding="utf-8")
    assert "<li>cat</li>" in html
    assert "<li>sea lion</li>" in html
    stdout = capsys.readouterr().out
    assert f"{out} saved with board size: 10" in stdout
    assert "['cat', 'Dog', 'sea lion']" in stdout
    assert "Placed 3 words: " in stdout


def test_main_is_reproducible_with_a_seed(tmp_path, word_file):
    first, second = tmp_path / "a.html", tmp_path / "b.html"
    assert main([str(word_file), "--size", "8", "--output", str(first), "--seed", "x"]) == 0
    assert main([str(word_file), "--size", "8", "--output", str(second), "--seed", "x"]) == 0
    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_main_missing_word_list(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt"), "--output", str(tmp_path / "out.html")]) == 1
    assert "Error:" in capsys.readouterr().out
    assert not (tmp_path / "out.html").exists()


def test_main_words_do_not_fit(tmp_path, word_file, capsys):
    out = tmp_path / "out.html"
    status = main([str(word_file), "--size", "3", "--attempts", "50", "--output", str(out)])
    assert status == 1
    assert "Error: couldn't fit words" in capsys.readouterr().out
    assert not out.exists()


def test_main_grows_the_board(tmp_path, word_file, capsys):
    out = tmp_path / "out.html"
    argv = [str(word_file), "--size", "3", "--grow", "--max-size", "13", "--step", "5"]
    assert main([*argv, "--attempts", "200", "--output", str(out), "--seed", "1"]) == 0
    assert "saved with board size: 3" not in capsys.readouterr().out
    assert out.exists()


def test_main_word_list_not_utf8(tmp_path, capsys):
    words = tmp_path / "latin1.txt"
    words.write_bytes(b"caf\xe9\ndog\n")
    out = tmp_path / "out.html"
    assert main([str(words), "--output", str(out)]) == 1
    assert "Error:" in capsys.readouterr().out
    assert not out.exists()


@pytest.mark.parametrize("option", ["--size", "--attempts", "--max-size", "--step"])
@pytest.mark.parametrize("value", ["0", "-3", "ten"])
def test_main_rejects_non_positive_counts(tmp_path, word_file, capsys, option, value):
    out = tmp_path / "out.html"
    with pytest.raises(SystemExit) as exc_info:
        main([str(word_file), option, value, "--output", str(out)])
    assert exc_info.value.code == 2
    assert option in capsys.readouterr().err
    assert not out.exists()


def test_main_output_error(tmp_path, word_file, capsys):
    out = tmp_path / "missing" / "out.html"
    assert main([str(word_file), "--size", "10", "--output", str(out), "--seed", "7"]) == 1
    assert "Error:" in capsys.readouterr().out


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("SEEKFIND_BOARD_SIZE", "12")
    monkeypatch.setenv("SEEKFIND_GROW_BOARD", "true")
    settings = GeneratorConfig()
    assert settings.board_size == 12
    assert settings.grow_board is True
    assert settings.fit_word_attempts == 10_000
    assert settings.alphabet == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


@pytest.mark.parametrize(
    "name", ["BOARD_SIZE", "FIT_WORD_ATTEMPTS", "MAX_BOARD_SIZE", "GROW_STEP"]
)
def test_config_rejects_zero_from_environment(monkeypatch, name):
    monkeypatch.setenv(f"SEEKFIND_{name}", "0")
    with pytest.raises(ValidationError):
        GeneratorConfig()


def test_config_rejects_zero_board_size():
    with pytest.raises(ValidationError):
        GeneratorConfig(board_size=0)


def test_config_rejects_unknown_settings():
    with pytest.raises(ValidationError):
        GeneratorConfig(unknown_setting=1)
