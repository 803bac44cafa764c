"""
Фильтры токенов.

Каждый фильтр вытягивает токены из вышестоящей стадии и изменяет
их на месте либо не выдаёт совсем. Порядок стадий в анализаторе:
регистр → стоп-слова → защита ключевых слов → стемминг.
"""

import logging
from typing import Optional

from ..interfaces.stemmer import Stemmer
from ..interfaces.token_stream import TokenFilter, TokenStream
from ..models.token import Token
from .word_set import WordSet

logger = logging.getLogger(__name__)


class LowerCaseFilter(TokenFilter):
    """Приводит текст токена к нижнему регистру; смещения не меняются."""

    def pull(self) -> Optional[Token]:
        token = self.input.pull()
        if token is not None:
            token.text = token.text.lower()
        return token


class StopFilter(TokenFilter):
    """Удаляет токены, входящие в множество стоп-слов."""

    def __init__(self, input: TokenStream, stop_words: WordSet, enable_position_increments: bool = True):
        """
        Args:
            input: Вышестоящая стадия
            stop_words: Множество стоп-слов
            enable_position_increments: Переносить ли позиции удалённых токенов на следующий
        """
        super().__init__(input)
        self.stop_words = stop_words
        self.enable_position_increments = enable_position_increments

    def pull(self) -> Optional[Token]:
        skipped = 0
        while True:
            token = self.input.pull()
            if token is None:
                return None
            if token.text in self.stop_words:
                skipped += token.position_increment
                continue
            if self.enable_position_increments and skipped:
                token.position_increment += skipped
            return token


class KeywordMarkerFilter(TokenFilter):
    """Помечает токены из множества исключений как ключевые (is_keyword)."""

    def __init__(self, input: TokenStream, keywords: WordSet):
        super().__init__(input)
        self.keywords = keywords

    def pull(self) -> Optional[Token]:
        token = self.input.pull()
        if token is not None and token.text in self.keywords:
            token.is_keyword = True
        return token


class StemmerFilter(TokenFilter):
    """Заменяет текст токена основой слова, если токен не помечен как ключевой."""

    def __init__(self, input: TokenStream, stemmer: Stemmer):
        super().__init__(input)
        self.stemmer = stemmer

    def pull(self) -> Optional[Token]:
        token = self.input.pull()
        if token is not None and not token.is_keyword:
            token.text = self.stemmer.stem(token.text)
        return token
