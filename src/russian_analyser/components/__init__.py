"""
Компоненты пайплайна анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- WordSet - неизменяемое множество слов
- WordlistLoader - загрузка списков стоп-слов
- StandardTokenizer / SpacyTokenizer - токенизация текста
- LowerCaseFilter, StopFilter, KeywordMarkerFilter, StemmerFilter - фильтры
- SnowballStemmer - адаптер стеммера
"""

from .word_set import WordSet
from .wordlist_loader import (
    WordlistLoader,
    PackageResourceLoader,
    FileResourceLoader,
    parse_word_list,
    parse_snowball_word_list,
)
from .tokenizer import StandardTokenizer, DEFAULT_MAX_TOKEN_LENGTH
from .spacy_tokenizer import SpacyTokenizer
from .filters import LowerCaseFilter, StopFilter, KeywordMarkerFilter, StemmerFilter
from .stemmer import SnowballStemmer, snowball_stemmer_factory

__all__ = [
    'WordSet',
    'WordlistLoader',
    'PackageResourceLoader',
    'FileResourceLoader',
    'parse_word_list',
    'parse_snowball_word_list',
    'StandardTokenizer',
    'DEFAULT_MAX_TOKEN_LENGTH',
    'SpacyTokenizer',
    'LowerCaseFilter',
    'StopFilter',
    'KeywordMarkerFilter',
    'StemmerFilter',
    'SnowballStemmer',
    'snowball_stemmer_factory',
]
