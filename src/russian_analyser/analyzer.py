"""
Анализаторы: сборка источника токенов и цепочки фильтров.

Каждый вызов analyze() строит собственное дерево стадий, поэтому
параллельные прогоны не разделяют изменяемое состояние. Общими
остаются только неизменяемые множества слов и конфигурация.
"""

import logging
import threading
from abc import ABC, abstractmethod
from functools import partial
from typing import Callable, Iterable, List, Optional, Union

from .components.filters import KeywordMarkerFilter, LowerCaseFilter, StemmerFilter, StopFilter
from .components.stemmer import StemmerFactory, snowball_stemmer_factory
from .components.tokenizer import DEFAULT_MAX_TOKEN_LENGTH, StandardTokenizer, validate_max_token_length
from .components.word_set import WordSet
from .components.wordlist_loader import PackageResourceLoader, WordlistLoader
from .exceptions import InvalidConfiguration, ResourceLoadError
from .interfaces.stemmer import ResourceLoader
from .interfaces.token_stream import TextSource, Tokenizer, TokenStream
from .models.token import Token
from .models.version import Version

logger = logging.getLogger(__name__)

DEFAULT_STOPWORD_FILE = 'russian_stop.txt'

TokenizerFactory = Callable[[], Tokenizer]

_default_stop_set: Optional[WordSet] = None
_default_stop_set_lock = threading.Lock()


def get_default_stop_set() -> WordSet:
    """
    Возвращает стандартное множество русских стоп-слов.

    Загружается один раз на процесс при первом обращении. Список входит
    в состав пакета, поэтому ошибка загрузки фатальна.

    Raises:
        RuntimeError: стандартный список недоступен
    """
    global _default_stop_set
    if _default_stop_set is None:
        with _default_stop_set_lock:
            if _default_stop_set is None:
                try:
                    loader = WordlistLoader(PackageResourceLoader())
                    stop_set = loader.get_snowball_word_set(DEFAULT_STOPWORD_FILE, ignore_case=True)
                except ResourceLoadError as e:
                    raise RuntimeError("Не удалось загрузить стандартный список стоп-слов") from e
                logger.info(f"Стандартные стоп-слова загружены: {len(stop_set)} слов")
                _default_stop_set = stop_set
    return _default_stop_set


class TokenStreamComponents:
    """Источник токенов и последняя стадия цепочки одного прогона."""

    def __init__(self, source: Tokenizer, sink: Optional[TokenStream] = None):
        self.source = source
        self.sink = sink if sink is not None else source


class TokenStreamHandle:
    """
    Итератор итоговых токенов одного прогона.

    Ресурсы (входной поток) освобождаются при выходе из with,
    явном close() или когда поток исчерпан.
    """

    def __init__(self, components: TokenStreamComponents):
        self._components = components
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> "TokenStreamHandle":
        return self

    def __next__(self) -> Token:
        if self._closed:
            raise StopIteration
        token = self._components.sink.pull()
        if token is None:
            self.close()
            raise StopIteration
        return token

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._components.sink.close()

    def __enter__(self) -> "TokenStreamHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class Analyzer(ABC):
    """Базовый анализатор: фабрика независимых цепочек стадий."""

    @abstractmethod
    def create_components(self, field_name: str) -> TokenStreamComponents:
        """Строит новый источник и цепочку фильтров для поля."""
        pass

    def analyze(self, field_name: str, text: TextSource) -> TokenStreamHandle:
        """
        Запускает анализ текста.

        Args:
            field_name: Имя поля (зарезервировано, на поведение не влияет)
            text: Строка или текстовый файловый объект

        Returns:
            Ленивый поток итоговых токенов
        """
        components = self.create_components(field_name)
        components.source.set_reader(text)
        components.sink.reset()
        return TokenStreamHandle(components)

    def terms(self, field_name: str, text: TextSource) -> List[str]:
        """Возвращает тексты итоговых токенов списком."""
        with self.analyze(field_name, text) as stream:
            return [token.text for token in stream]


class StopwordAnalyzerBase(Analyzer):
    """Анализатор с версией совместимости и множеством стоп-слов."""

    def __init__(self, version: Union[str, Version, None] = None, stopwords: Optional[Iterable[str]] = None):
        self.version = Version.parse(version)
        self.stopwords = WordSet.copy(stopwords)

    @staticmethod
    def load_stopword_set(name: str, loader: Optional[ResourceLoader] = None,
                          ignore_case: bool = True, snowball: bool = True) -> WordSet:
        """
        Загружает пользовательский список стоп-слов.

        Args:
            name: Имя ресурса (путь к файлу для загрузчика по умолчанию)
            loader: Источник ресурса
            ignore_case: Сравнивать без учёта регистра
            snowball: Формат Snowball, иначе простой список

        Raises:
            ResourceLoadError: список не прочитан; вызывающий решает, откатиться ли на стандартный
        """
        wordlist_loader = WordlistLoader(loader)
        if snowball:
            return wordlist_loader.get_snowball_word_set(name, ignore_case=ignore_case)
        return wordlist_loader.get_word_set(name, ignore_case=ignore_case)


class RussianAnalyzer(StopwordAnalyzerBase):
    """
    Анализатор русского текста.

    Цепочка: StandardTokenizer → LowerCaseFilter → StopFilter →
    KeywordMarkerFilter (если задано множество исключений) → StemmerFilter.
    Стоп-слова сравниваются с исходными словоформами, поэтому
    стемминг идёт последним.
    """

    DEFAULT_STOPWORD_FILE = DEFAULT_STOPWORD_FILE

    def __init__(self,
                 version: Union[str, Version, None] = None,
                 stopwords: Optional[Iterable[str]] = None,
                 stem_exclusion_set: Optional[Iterable[str]] = None,
                 stemmer_factory: Optional[StemmerFactory] = None,
                 tokenizer_factory: Optional[TokenizerFactory] = None,
                 max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH,
                 enable_position_increments: bool = True):
        """
        Инициализирует анализатор.

        Args:
            version: Тег совместимости (по умолчанию Version.LATEST)
            stopwords: Стоп-слова (None - стандартный список)
            stem_exclusion_set: Слова, которые не нужно стеммировать. Обычная
                коллекция сравнивается без учёта регистра, WordSet - по своей политике
            stemmer_factory: Фабрика стеммеров (по умолчанию Snowball для русского)
            tokenizer_factory: Фабрика источников токенов
            max_token_length: Максимальная длина токена
            enable_position_increments: Учитывать позиции удалённых стоп-слов

        Raises:
            InvalidConfiguration: некорректная версия или параметры
        """
        super().__init__(version, get_default_stop_set() if stopwords is None else stopwords)
        # Фильтр исключений стоит после LowerCaseFilter
        exclusion_case = None if isinstance(stem_exclusion_set, WordSet) else True
        self.stem_exclusion_set = WordSet.copy(stem_exclusion_set, ignore_case=exclusion_case)
        self.max_token_length = validate_max_token_length(max_token_length)
        if not enable_position_increments and self.version.on_or_after(Version.POSITION_INCREMENTS_REQUIRED):
            raise InvalidConfiguration(
                f"Отключение приращений позиций не поддерживается начиная с версии "
                f"{Version.POSITION_INCREMENTS_REQUIRED} (задана {self.version})"
            )
        self.enable_position_increments = enable_position_increments
        self.stemmer_factory = stemmer_factory or snowball_stemmer_factory('russian')
        self.tokenizer_factory = tokenizer_factory or partial(StandardTokenizer, self.max_token_length)
        logger.debug(
            f"RussianAnalyzer: версия {self.version}, стоп-слов {len(self.stopwords)}, "
            f"исключений {len(self.stem_exclusion_set)}"
        )

    @staticmethod
    def get_default_stop_set() -> WordSet:
        """Возвращает неизменяемое стандартное множество стоп-слов."""
        return get_default_stop_set()

    def create_components(self, field_name: str) -> TokenStreamComponents:
        source = self.tokenizer_factory()
        result: TokenStream = LowerCaseFilter(source)
        result = StopFilter(result, self.stopwords, self.enable_position_increments)
        if self.stem_exclusion_set:
            result = KeywordMarkerFilter(result, self.stem_exclusion_set)
        result = StemmerFilter(result, self.stemmer_factory())
        return TokenStreamComponents(source, result)
