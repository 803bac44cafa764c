"""
Тесты для сборки анализатора по конфигурации.
"""

import logging
import textwrap

import pytest

from russian_analyser.analyzer import RussianAnalyzer, get_default_stop_set
from russian_analyser.config import Config
from russian_analyser.exceptions import InvalidConfiguration, ResourceLoadError
from russian_analyser.factory import create_analyzer


def make_config(tmp_path, text=""):
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(text).strip(), encoding="utf-8")
    return Config(config_path=str(path), configure_logging=False)


def test_default_configuration(tmp_path):
    analyzer = create_analyzer(make_config(tmp_path))
    assert isinstance(analyzer, RussianAnalyzer)
    assert analyzer.stopwords is get_default_stop_set()
    assert not analyzer.stem_exclusion_set


def test_stem_exclusion_from_config(tmp_path):
    analyzer = create_analyzer(make_config(tmp_path, """
        analysis:
          stem_exclusion: [бегать]
    """))
    tokens = list(analyzer.analyze("body", "бегать"))
    assert tokens[0].text == "бегать"
    assert tokens[0].is_keyword


def test_stem_exclusion_from_config_ignores_case(tmp_path):
    analyzer = create_analyzer(make_config(tmp_path, """
        analysis:
          stem_exclusion: [Москва]
    """))
    tokens = list(analyzer.analyze("body", "Москва"))
    assert tokens[0].text == "москва"
    assert tokens[0].is_keyword


def test_stem_exclusion_file(tmp_path):
    (tmp_path / "keep.txt").write_text("прыгать\n", encoding="utf-8")
    analyzer = create_analyzer(make_config(tmp_path, f"""
        analysis:
          stem_exclusion: [бегать]
          stem_exclusion_file: "{(tmp_path / 'keep.txt').as_posix()}"
    """))
    assert set(analyzer.stem_exclusion_set) == {"бегать", "прыгать"}


def test_user_stopwords_plain_format(tmp_path):
    (tmp_path / "stop.txt").write_text("кошка\nокне\n", encoding="utf-8")
    analyzer = create_analyzer(make_config(tmp_path, f"""
        analysis:
          stopwords:
            file: "{(tmp_path / 'stop.txt').as_posix()}"
            format: plain
    """))
    assert analyzer.terms("body", "Кошка на окне") == ["на"]


def test_missing_user_stopwords_falls_back_to_default(tmp_path, caplog):
    cfg = make_config(tmp_path, """
        analysis:
          stopwords:
            file: missing_stop.txt
    """)
    with caplog.at_level(logging.WARNING, logger="russian_analyser.factory"):
        analyzer = create_analyzer(cfg)
    assert analyzer.stopwords is get_default_stop_set()
    assert "missing_stop.txt" in caplog.text


def test_missing_user_stopwords_without_fallback(tmp_path):
    cfg = make_config(tmp_path, """
        analysis:
          stopwords:
            file: missing_stop.txt
            fallback_to_default: false
    """)
    with pytest.raises(ResourceLoadError):
        create_analyzer(cfg)


@pytest.mark.parametrize("text", [
    "analysis:\n  language: klingon",
    "analysis:\n  tokenizer: whitespace",
    "analysis:\n  version: '4.x'",
    "analysis:\n  stopwords:\n    file: stop.txt\n    format: csv",
    "analysis:\n  version: '4.7'\n  enable_position_increments: false",
])
def test_invalid_configuration(tmp_path, text):
    with pytest.raises(InvalidConfiguration):
        create_analyzer(make_config(tmp_path, text))


def test_spacy_tokenizer_from_config(tmp_path):
    pytest.importorskip("spacy")
    analyzer = create_analyzer(make_config(tmp_path, "analysis:\n  tokenizer: spacy"))
    tokens = list(analyzer.analyze("body", "Кошка, на окне!"))
    assert [(t.start_offset, t.end_offset) for t in tokens] == [(0, 5), (10, 14)]
