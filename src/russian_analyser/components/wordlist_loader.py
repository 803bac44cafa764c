"""
Компонент для загрузки списков слов (стоп-слов и исключений стемминга).

Поддерживаются два формата UTF-8:
- простой: одно слово на строку, строки с '#' в начале пропускаются,
  хвост строки после '|' отбрасывается
- Snowball: всё после '|' - комментарий, в строке может быть несколько слов
"""

import logging
from importlib import resources
from pathlib import Path
from typing import List, Optional, Union

from ..exceptions import ResourceLoadError
from ..interfaces.stemmer import ResourceLoader
from .word_set import WordSet

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = 'russian_analyser.resources'


class PackageResourceLoader(ResourceLoader):
    """Читает ресурсы, поставляемые вместе с пакетом."""

    def __init__(self, package: str = RESOURCE_PACKAGE):
        self.package = package

    def read(self, name: str) -> bytes:
        try:
            return resources.files(self.package).joinpath(name).read_bytes()
        except (OSError, ModuleNotFoundError) as e:
            raise ResourceLoadError(f"{self.package}/{name}", str(e)) from e


class FileResourceLoader(ResourceLoader):
    """Читает ресурсы с файловой системы."""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        self.base_dir = Path(base_dir) if base_dir else None

    def read(self, name: str) -> bytes:
        path = Path(name).expanduser()
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        try:
            return path.read_bytes()
        except OSError as e:
            raise ResourceLoadError(str(path), str(e)) from e


def decode_word_list(data: bytes, resource: str = '<bytes>') -> str:
    """Декодирует список слов как UTF-8 (BOM допускается)."""
    try:
        return data.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        raise ResourceLoadError(resource, f"некорректная кодировка UTF-8: {e}") from e


def parse_word_list(text: str, comment: str = '#') -> List[str]:
    """
    Разбирает простой список: одно слово на строку.

    Текст после '|' считается комментарием, как и в формате Snowball.

    Args:
        text: Содержимое списка
        comment: Префикс строк-комментариев

    Returns:
        Слова в порядке появления
    """
    words = []
    for line in text.splitlines():
        word = line.split('|', 1)[0].strip()
        if not word or word.startswith(comment):
            continue
        words.append(word)
    return words


def parse_snowball_word_list(text: str) -> List[str]:
    """Разбирает список в формате Snowball."""
    words = []
    for line in text.splitlines():
        if line.lstrip().startswith('#'):
            continue
        # Всё после '|' - комментарий
        content = line.split('|', 1)[0]
        words.extend(content.split())
    return words


class WordlistLoader:
    """Строит WordSet из именованных ресурсов."""

    def __init__(self, resource_loader: Optional[ResourceLoader] = None):
        """
        Args:
            resource_loader: Источник ресурсов (по умолчанию - файловая система)
        """
        self.resource_loader = resource_loader or FileResourceLoader()

    def _read_text(self, name: str) -> str:
        return decode_word_list(self.resource_loader.read(name), name)

    def get_word_set(self, name: str, ignore_case: bool = False, comment: str = '#') -> WordSet:
        """
        Загружает список в простом формате.

        Raises:
            ResourceLoadError: ресурс не читается или не в UTF-8
        """
        words = WordSet(parse_word_list(self._read_text(name), comment), ignore_case=ignore_case)
        logger.debug(f"Загружен список слов '{name}': {len(words)} записей")
        return words

    def get_snowball_word_set(self, name: str, ignore_case: bool = False) -> WordSet:
        """
        Загружает список в формате Snowball.

        Raises:
            ResourceLoadError: ресурс не читается или не в UTF-8
        """
        words = WordSet(parse_snowball_word_list(self._read_text(name)), ignore_case=ignore_case)
        logger.debug(f"Загружен Snowball-список '{name}': {len(words)} записей")
        return words
