"""
Абстрактные интерфейсы стадий пайплайна анализа.

Каждая стадия реализует единственный метод pull(): следующий токен
или None, когда поток исчерпан. Фильтр владеет ровно одной
вышестоящей стадией, поэтому цепочка всегда линейна.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Iterator, Optional, Union

from ..models.token import Token

TextSource = Union[str, IO[str]]


class TokenStream(ABC):
    """Ленивый поток токенов с вытягиванием (pull)."""

    @abstractmethod
    def pull(self) -> Optional[Token]:
        """Возвращает следующий токен или None в конце потока."""
        pass

    def reset(self) -> None:
        """Готовит поток к новому проходу."""
        pass

    def close(self) -> None:
        """Освобождает ресурсы потока."""
        pass

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.pull()
            if token is None:
                return
            yield token


class Tokenizer(TokenStream):
    """Источник токенов: разбивает входной текст на сырые токены."""

    def __init__(self) -> None:
        self._source: Optional[TextSource] = None
        self._text: Optional[str] = None

    def set_reader(self, source: TextSource) -> None:
        """
        Задаёт новый вход.

        Args:
            source: Строка или текстовый файловый объект
        """
        self._source = source
        self._text = None

    def _read_input(self) -> str:
        """Читает вход целиком при первом обращении; ошибки чтения пробрасываются."""
        if self._text is None:
            if self._source is None:
                raise RuntimeError("Вход токенизатора не задан: вызовите set_reader()")
            if isinstance(self._source, str):
                self._text = self._source
            else:
                self._text = self._source.read()
        return self._text

    def close(self) -> None:
        close = getattr(self._source, 'close', None)
        if callable(close):
            close()
        self._source = None
        self._text = None


class TokenFilter(TokenStream):
    """Фильтр: вытягивает токены из вышестоящей стадии и преобразует их."""

    def __init__(self, input: TokenStream) -> None:
        self.input = input

    def reset(self) -> None:
        self.input.reset()

    def close(self) -> None:
        self.input.close()
