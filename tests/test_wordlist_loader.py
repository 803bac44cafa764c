"""
Тесты для загрузки списков слов.
"""

import pytest

from russian_analyser.components.wordlist_loader import (
    FileResourceLoader,
    PackageResourceLoader,
    WordlistLoader,
    parse_snowball_word_list,
    parse_word_list,
)
from russian_analyser.exceptions import ResourceLoadError
from russian_analyser.interfaces import ResourceLoader


class DictResourceLoader(ResourceLoader):
    """Ресурсы в памяти."""

    def __init__(self, resources):
        self.resources = resources

    def read(self, name):
        try:
            return self.resources[name]
        except KeyError:
            raise ResourceLoadError(name, "нет такого ресурса")


def test_parse_word_list_skips_comments_and_blank_lines():
    text = "# комментарий\nи\n\n  на  \n#в\nили\n"
    assert parse_word_list(text) == ["и", "на", "или"]


def test_parse_word_list_custom_comment_marker():
    assert parse_word_list("; заметка\nи\n#на", comment=";") == ["и", "#на"]


def test_parse_word_list_strips_inline_comments():
    assert parse_word_list("и      | and\nна\n| только комментарий\n") == ["и", "на"]


def test_parse_snowball_word_list():
    text = (
        " | Русские стоп-слова\n"
        "и              | and\n"
        "в  во          | in\n"
        "# служебная строка\n"
        "\n"
        "  | я  меня  мне\n"
        "не|not\n"
    )
    assert parse_snowball_word_list(text) == ["и", "в", "во", "не"]


def test_get_snowball_word_set_from_loader():
    loader = WordlistLoader(DictResourceLoader({"stop.txt": "и | and\nна | on\n".encode("utf-8")}))
    words = loader.get_snowball_word_set("stop.txt", ignore_case=True)
    assert set(words) == {"и", "на"}
    assert "НА" in words


def test_get_word_set_plain_format():
    loader = WordlistLoader(DictResourceLoader({"words.txt": "бегать\n# прыгать\nплавать\n".encode("utf-8")}))
    words = loader.get_word_set("words.txt")
    assert set(words) == {"бегать", "плавать"}
    assert words.ignore_case is False


def test_loading_is_deterministic():
    data = "и\nна\nв | in\n".encode("utf-8")
    loader = WordlistLoader(DictResourceLoader({"a": data, "b": data}))
    assert loader.get_snowball_word_set("a") == loader.get_snowball_word_set("b")


def test_bom_is_tolerated():
    loader = WordlistLoader(DictResourceLoader({"bom.txt": "\ufeffи\nна\n".encode("utf-8")}))
    assert set(loader.get_word_set("bom.txt")) == {"и", "на"}


def test_malformed_encoding_raises_resource_error():
    loader = WordlistLoader(DictResourceLoader({"bad.txt": "и\n".encode("cp1251")}))
    with pytest.raises(ResourceLoadError) as exc_info:
        loader.get_word_set("bad.txt")
    assert exc_info.value.resource == "bad.txt"


def test_missing_file_raises_resource_error(tmp_path):
    loader = WordlistLoader(FileResourceLoader(tmp_path))
    with pytest.raises(ResourceLoadError):
        loader.get_word_set("missing.txt")


def test_file_loader_resolves_relative_to_base_dir(tmp_path):
    (tmp_path / "stop.txt").write_text("и\nна\n", encoding="utf-8")
    loader = WordlistLoader(FileResourceLoader(tmp_path))
    assert set(loader.get_word_set("stop.txt")) == {"и", "на"}


def test_package_loader_reads_bundled_list():
    data = PackageResourceLoader().read("russian_stop.txt")
    assert "и" in parse_snowball_word_list(data.decode("utf-8"))


def test_package_loader_missing_resource():
    with pytest.raises(ResourceLoadError):
        PackageResourceLoader().read("no_such_list.txt")
