"""
Интерфейсы стадий пайплайна и внешних участников.

Определяет абстрактные базовые классы, обеспечивая единообразный API
и возможность замены реализаций.
"""

from .token_stream import TokenStream, Tokenizer, TokenFilter, TextSource
from .stemmer import Stemmer, ResourceLoader

__all__ = [
    'TokenStream',
    'Tokenizer',
    'TokenFilter',
    'TextSource',
    'Stemmer',
    'ResourceLoader',
]
