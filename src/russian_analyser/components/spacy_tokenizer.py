"""
Источник токенов на базе токенизатора spaCy.

Используется пустой (blank) пайплайн языка: модели не нужны,
работают только правила токенизации. spaCy - необязательная
зависимость (extra "nlp").
"""

import logging
import threading
from typing import Dict, Iterator, Optional

try:
    import spacy
except Exception:  # pragma: no cover
    spacy = None  # type: ignore

from ..interfaces.token_stream import Tokenizer
from ..models.token import Token, ALPHANUM, NUM
from .tokenizer import DEFAULT_MAX_TOKEN_LENGTH, validate_max_token_length

logger = logging.getLogger(__name__)


class SpacyManager:
    """
    Кэш пустых пайплайнов spaCy по языкам.

    Пайплайн создаётся один раз на язык и только читается при токенизации.
    """

    _pipelines: Dict[str, "spacy.Language"] = {}
    _lock = threading.Lock()

    @classmethod
    def get_blank(cls, language: str) -> "spacy.Language":
        if spacy is None:
            raise RuntimeError("Библиотека spaCy не установлена. Установите: pip install spacy")
        nlp = cls._pipelines.get(language)
        if nlp is None:
            with cls._lock:
                nlp = cls._pipelines.get(language)
                if nlp is None:
                    try:
                        nlp = spacy.blank(language)
                    except Exception as e:
                        raise RuntimeError(f"Не удалось создать пайплайн spaCy для языка '{language}'") from e
                    cls._pipelines[language] = nlp
                    logger.info(f"spaCy: создан пустой пайплайн '{language}'")
        return nlp


class SpacyTokenizer(Tokenizer):
    """Токенизатор spaCy; пунктуация и пробелы не выдаются."""

    def __init__(self, language: str = 'ru', max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH):
        super().__init__()
        self.language = language
        self.max_token_length = validate_max_token_length(max_token_length)
        self._nlp = SpacyManager.get_blank(language)
        self._tokens: Optional[Iterator] = None
        self._skipped = 0

    def reset(self) -> None:
        self._tokens = None
        self._skipped = 0

    def pull(self) -> Optional[Token]:
        if self._tokens is None:
            self._tokens = iter(self._nlp.make_doc(self._read_input()))

        for sp_token in self._tokens:
            if sp_token.is_space or sp_token.is_punct or not any(ch.isalnum() for ch in sp_token.text):
                continue
            if len(sp_token.text) > self.max_token_length:
                self._skipped += 1
                continue
            token = Token(
                text=sp_token.text,
                start_offset=sp_token.idx,
                end_offset=sp_token.idx + len(sp_token.text),
                position_increment=1 + self._skipped,
                type=NUM if sp_token.like_num and not sp_token.is_alpha else ALPHANUM,
            )
            self._skipped = 0
            return token
        return None

    def close(self) -> None:
        super().close()
        self.reset()
