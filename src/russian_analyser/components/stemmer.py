"""
Адаптер стеммеров Snowball из NLTK.
"""

from typing import Callable, List

from nltk.stem.snowball import SnowballStemmer as NltkSnowballStemmer

from ..exceptions import InvalidConfiguration
from ..interfaces.stemmer import Stemmer

StemmerFactory = Callable[[], Stemmer]


def available_languages() -> List[str]:
    """Языки, для которых есть стеммер Snowball."""
    return [lang for lang in NltkSnowballStemmer.languages if lang != 'porter']


class SnowballStemmer(Stemmer):
    """Стеммер Snowball для заданного языка."""

    def __init__(self, language: str = 'russian'):
        """
        Args:
            language: Название языка в терминах NLTK ("russian", "english", ...)

        Raises:
            InvalidConfiguration: язык не поддерживается
        """
        if language not in available_languages():
            raise InvalidConfiguration(
                f"Стеммер для языка '{language}' недоступен. Поддерживаются: {', '.join(available_languages())}"
            )
        self.language = language
        self._stemmer = NltkSnowballStemmer(language)

    def stem(self, word: str) -> str:
        if not word:
            return word
        return self._stemmer.stem(word)

    def __repr__(self) -> str:
        return f"SnowballStemmer({self.language!r})"


def snowball_stemmer_factory(language: str = 'russian') -> StemmerFactory:
    """
    Фабрика стеммеров для анализатора: каждый прогон получает свой экземпляр.

    Язык проверяется сразу, чтобы ошибка конфигурации не откладывалась до анализа.
    """
    SnowballStemmer(language)
    return lambda: SnowballStemmer(language)
