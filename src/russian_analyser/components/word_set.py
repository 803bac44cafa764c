"""
Неизменяемое множество слов с политикой регистра.

Используется и для стоп-слов, и для слов, исключённых из стемминга.
Множество создаётся один раз и разделяется по ссылке между всеми
анализаторами с одинаковой конфигурацией.
"""

from collections.abc import Set
from typing import Iterable, Iterator, Optional


class WordSet(Set):
    """Неизменяемое множество строк."""

    __slots__ = ('_words', '_ignore_case')

    EMPTY: "WordSet"

    def __init__(self, words: Iterable[str] = (), ignore_case: bool = False):
        """
        Args:
            words: Слова множества
            ignore_case: Приводить ли слова к нижнему регистру перед сравнением
        """
        if ignore_case:
            normalized = frozenset(w.lower() for w in words)
        else:
            normalized = frozenset(words)
        object.__setattr__(self, '_words', normalized)
        object.__setattr__(self, '_ignore_case', ignore_case)

    def __setattr__(self, name, value):
        raise AttributeError("WordSet неизменяем")

    @property
    def ignore_case(self) -> bool:
        return self._ignore_case

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        if self._ignore_case:
            word = word.lower()
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f"WordSet(size={len(self._words)}, ignore_case={self._ignore_case})"

    @classmethod
    def copy(cls, words: Optional[Iterable[str]], ignore_case: Optional[bool] = None) -> "WordSet":
        """
        Возвращает неизменяемое множество для произвольного набора слов.

        Args:
            words: Слова или готовый WordSet
            ignore_case: Политика регистра; None - сохранить политику WordSet
                (для прочих наборов - учитывать регистр)
        """
        if words is None:
            return cls.EMPTY
        if isinstance(words, WordSet) and ignore_case in (None, words.ignore_case):
            return words
        if isinstance(words, str):
            raise TypeError("Ожидается набор слов, а не одна строка")
        return cls(words, ignore_case=bool(ignore_case))


WordSet.EMPTY = WordSet()
