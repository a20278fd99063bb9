import os
import tempfile
import pytest
from bytepair.cli import main

@pytest.fixture
def corpus_path():
    text = "hello world\nhello test\nworld test\n" * 20
    with tempfile.NamedTemporaryFile(delete=False, mode="w", encoding="utf-8", suffix=".txt") as f:
        f.write(text)
        path = f.name
    yield path
    os.remove(path)

def test_cli_encodes_text(corpus_path, capsys):
    exit_code = main(["--data", corpus_path, "--vocab-size", "300", "--text", "hello<|endoftext|>world", "--text", "test"])
    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Decoded: hello<|endoftext|>world" in out
    assert "Decoded: test" in out
    assert out.count("Encoded:") == 2

def test_cli_prompts_until_quit(corpus_path, capsys, monkeypatch):
    answers = iter(["hello", "q", "never read"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--data", corpus_path, "--vocab-size", "280", "--stop-early", "--verbose"]) == 0
    out = capsys.readouterr().out
    assert out.count("Decoded: hello") == 1

def test_cli_stops_on_eof(corpus_path, capsys, monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError
    monkeypatch.setattr("builtins.input", raise_eof)
    assert main(["--data", corpus_path, "--vocab-size", "280"]) == 0
    assert "Encoded:" not in capsys.readouterr().out

def test_cli_empty_corpus():
    with tempfile.NamedTemporaryFile(delete=False, mode="w", encoding="utf-8") as f:
        path = f.name
    try:
        assert main(["--data", path, "--text", "x"]) == 1
    finally:
        os.remove(path)

def test_cli_missing_corpus(tmp_path):
    assert main(["--data", str(tmp_path / "missing.txt"), "--text", "x"]) == 1

def test_cli_invalid_vocab_size(corpus_path):
    assert main(["--data", corpus_path, "--vocab-size", "256", "--text", "x"]) == 1

def test_cli_trains_on_invalid_utf8_corpus(capsys):
    with tempfile.NamedTemporaryFile(delete=False, mode="wb") as f:
        f.write(b"ab\xffab\xfeab")
        path = f.name
    try:
        assert main(["--data", path, "--vocab-size", "260", "--text", "ab"]) == 0
    finally:
        os.remove(path)
    assert "Decoded: ab" in capsys.readouterr().out

def test_cli_empty_special_token(corpus_path):
    assert main(["--data", corpus_path, "--special-tokens", "", "--text", "x"]) == 1
