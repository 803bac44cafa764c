"""
Тесты для интерфейса командной строки.
"""

import json

from russian_analyser.cli import main
from russian_analyser.components.stemmer import SnowballStemmer


def run(capsys, tmp_path, *argv):
    code = main(["--config", str(tmp_path / "config.yaml"), *argv])
    return code, capsys.readouterr()


def test_analyze_text(capsys, tmp_path):
    code, out = run(capsys, tmp_path, "analyze", "И кошка сидела на окне")
    assert code == 0
    lines = out.out.strip().splitlines()
    assert len(lines) == 3
    stem = SnowballStemmer("russian").stem("кошка")
    assert lines[0] == f"{stem}\t2-7\t+2"


def test_analyze_json(capsys, tmp_path):
    code, out = run(capsys, tmp_path, "analyze", "бегать", "--exclude", "бегать", "--json")
    assert code == 0
    tokens = json.loads(out.out)
    assert tokens == [{
        "text": "бегать",
        "start_offset": 0,
        "end_offset": 6,
        "position_increment": 1,
        "is_keyword": True,
        "type": "<ALPHANUM>",
    }]


def test_analyze_file(capsys, tmp_path):
    source = tmp_path / "input.txt"
    source.write_text("Кошка\nи собака", encoding="utf-8")
    code, out = run(capsys, tmp_path, "analyze", "--file", str(source))
    assert code == 0
    assert len(out.out.strip().splitlines()) == 2


def test_analyze_custom_stopwords(capsys, tmp_path):
    stop = tmp_path / "stop.txt"
    stop.write_text("кошка\n", encoding="utf-8")
    code, out = run(capsys, tmp_path, "analyze", "кошка и", "--stopwords", str(stop),
                    "--stopwords-format", "plain")
    assert code == 0
    assert out.out.strip().splitlines() == ["и\t6-7\t+2"]


def test_missing_stopwords_file_is_an_error(capsys, tmp_path):
    code, out = run(capsys, tmp_path, "analyze", "кошка", "--stopwords", str(tmp_path / "missing.txt"))
    assert code == 1
    assert "missing.txt" in out.err


def test_missing_input_file_is_an_error(capsys, tmp_path):
    code, out = run(capsys, tmp_path, "analyze", "--file", str(tmp_path / "missing.txt"))
    assert code == 1


def test_stopwords_command(capsys, tmp_path):
    code, out = run(capsys, tmp_path, "stopwords")
    assert code == 0
    words = out.out.splitlines()
    assert "и" in words
    assert words == sorted(words)


def test_no_command_prints_help(capsys, tmp_path):
    code, out = run(capsys, tmp_path)
    assert code == 2
    assert "analyze" in out.out


def test_config_option_after_analyze(capsys, tmp_path):
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("analysis:\n  stem_exclusion: [бегать]\n", encoding="utf-8")
    code = main(["analyze", "бегать", "--config", str(config_path), "--json"])
    out = capsys.readouterr()
    assert code == 0
    assert json.loads(out.out)[0]["is_keyword"] is True
