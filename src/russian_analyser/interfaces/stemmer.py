"""
Интерфейсы внешних участников: стеммер и загрузчик ресурсов.
"""

from abc import ABC, abstractmethod


class Stemmer(ABC):
    """Алгоритм стемминга: детерминированная чистая функция слова."""

    @abstractmethod
    def stem(self, word: str) -> str:
        """Возвращает основу слова."""
        pass


class ResourceLoader(ABC):
    """Источник байтов именованных ресурсов (списков слов)."""

    @abstractmethod
    def read(self, name: str) -> bytes:
        """
        Читает ресурс целиком.

        Raises:
            ResourceLoadError: ресурс недоступен
        """
        pass
