"""Вспомогательные стадии для тестов фильтров и анализатора."""

from typing import List, Optional

from russian_analyser.interfaces import Stemmer, TokenStream
from russian_analyser.models import Token


class FakeStemmer(Stemmer):
    """Детерминированный стеммер: отрезает последний символ у слов длиннее трёх."""

    def __init__(self):
        self.calls: List[str] = []

    def stem(self, word: str) -> str:
        self.calls.append(word)
        return word[:-1] if len(word) > 3 else word


class ListTokenStream(TokenStream):
    """Источник токенов из готового списка."""

    def __init__(self, tokens: List[Token]):
        self.tokens = list(tokens)
        self._pos = 0
        self.closed = False
        self.reset_calls = 0

    def pull(self) -> Optional[Token]:
        if self._pos >= len(self.tokens):
            return None
        token = self.tokens[self._pos]
        self._pos += 1
        return token

    def reset(self) -> None:
        self.reset_calls += 1
        self._pos = 0

    def close(self) -> None:
        self.closed = True


def make_tokens(*words: str) -> List[Token]:
    """Токены с последовательными смещениями, как будто слова разделены одним пробелом."""
    tokens = []
    offset = 0
    for word in words:
        tokens.append(Token(text=word, start_offset=offset, end_offset=offset + len(word)))
        offset += len(word) + 1
    return tokens


class IdentityStemmer(Stemmer):
    """Стеммер, не меняющий слова."""

    def stem(self, word: str) -> str:
        return word
