"""
Фабрика анализаторов по конфигурации.
"""

import logging
from functools import partial
from typing import Optional

from .analyzer import RussianAnalyzer, StopwordAnalyzerBase, TokenizerFactory
from .components.spacy_tokenizer import SpacyTokenizer
from .components.tokenizer import StandardTokenizer
from .components.word_set import WordSet
from .components.wordlist_loader import WordlistLoader
from .config import Config, get_config
from .exceptions import InvalidConfiguration, ResourceLoadError

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = {
    'russian': ('ru', RussianAnalyzer),
}
STOPWORD_FORMATS = ('snowball', 'plain')


def _tokenizer_factory(name: str, spacy_language: str, max_token_length: int) -> TokenizerFactory:
    if name == 'standard':
        return partial(StandardTokenizer, max_token_length)
    if name == 'spacy':
        # Пайплайн spaCy создаётся сразу, чтобы ошибка не откладывалась до анализа
        try:
            SpacyTokenizer(spacy_language, max_token_length)
        except RuntimeError as e:
            raise InvalidConfiguration(str(e)) from e
        return partial(SpacyTokenizer, spacy_language, max_token_length)
    raise InvalidConfiguration(f"Неизвестный токенизатор: '{name}' (ожидается standard или spacy)")


def _load_stopwords(cfg: Config) -> Optional[WordSet]:
    """Загружает пользовательский список; None означает стандартный список."""
    path = cfg.get_stopwords_file()
    if not path:
        return None
    fmt = cfg.get_stopwords_format()
    if fmt not in STOPWORD_FORMATS:
        raise InvalidConfiguration(f"Неизвестный формат списка стоп-слов: '{fmt}'")
    try:
        stopwords = StopwordAnalyzerBase.load_stopword_set(
            path, ignore_case=cfg.is_stopwords_ignore_case(), snowball=(fmt == 'snowball')
        )
    except ResourceLoadError as e:
        if not cfg.is_stopwords_fallback_enabled():
            raise
        logger.warning(f"{e}. Используется стандартный список стоп-слов")
        return None
    logger.info(f"Пользовательские стоп-слова загружены из {path}: {len(stopwords)} слов")
    return stopwords


def _load_stem_exclusion(cfg: Config) -> WordSet:
    words = list(cfg.get_stem_exclusion())
    path = cfg.get_stem_exclusion_file()
    if path:
        words.extend(WordlistLoader().get_word_set(path))
    return WordSet(words, ignore_case=True)


def create_analyzer(cfg: Optional[Config] = None) -> RussianAnalyzer:
    """
    Создаёт анализатор по конфигурации.

    Args:
        cfg: Конфигурация (по умолчанию общая конфигурация процесса)

    Returns:
        Готовый анализатор

    Raises:
        InvalidConfiguration: некорректные параметры анализа
        ResourceLoadError: пользовательский список не прочитан и откат запрещён
    """
    cfg = cfg or get_config()
    language = cfg.get_language()
    if language not in SUPPORTED_LANGUAGES:
        raise InvalidConfiguration(
            f"Язык '{language}' не поддерживается. Доступны: {', '.join(SUPPORTED_LANGUAGES)}"
        )
    spacy_language, analyzer_cls = SUPPORTED_LANGUAGES[language]

    max_token_length = cfg.get_max_token_length()
    analyzer = analyzer_cls(
        version=cfg.get_version(),
        stopwords=_load_stopwords(cfg),
        stem_exclusion_set=_load_stem_exclusion(cfg),
        tokenizer_factory=_tokenizer_factory(cfg.get_tokenizer(), spacy_language, max_token_length),
        max_token_length=max_token_length,
        enable_position_increments=cfg.is_position_increments_enabled(),
    )
    logger.debug(f"Создан анализатор {analyzer_cls.__name__} (токенизатор {cfg.get_tokenizer()})")
    return analyzer
