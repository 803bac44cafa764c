"""
Russian Analyser - пайплайн анализа русского текста для индексации

Преобразует исходный текст в поток нормализованных токенов:
- Токенизация с сохранением смещений
- Приведение к нижнему регистру
- Удаление стоп-слов
- Защита слов от стемминга
- Стемминг Snowball
"""

__version__ = "0.1.0"

from .analyzer import (
    Analyzer,
    RussianAnalyzer,
    StopwordAnalyzerBase,
    TokenStreamComponents,
    TokenStreamHandle,
    get_default_stop_set,
)
from .components.word_set import WordSet
from .exceptions import AnalysisError, InvalidConfiguration, ResourceLoadError
from .factory import create_analyzer
from .models import Token, Version

__all__ = [
    "Analyzer",
    "RussianAnalyzer",
    "StopwordAnalyzerBase",
    "TokenStreamComponents",
    "TokenStreamHandle",
    "get_default_stop_set",
    "WordSet",
    "AnalysisError",
    "InvalidConfiguration",
    "ResourceLoadError",
    "create_analyzer",
    "Token",
    "Version",
]
