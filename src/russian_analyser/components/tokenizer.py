"""
Компонент для токенизации текста.

Отвечает за разбивку входа на токены с начальными смещениями
и приращениями позиций. Флаг is_keyword источник не выставляет.
"""

import logging
import re
from typing import Iterator, Optional

from ..exceptions import InvalidConfiguration
from ..interfaces.token_stream import Tokenizer
from ..models.token import Token, ALPHANUM, NUM

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKEN_LENGTH = 255

# Числа с разделителями ("3.14", "1,5") либо слова из букв/цифр,
# склеенные апострофом или точкой внутри слова ("т.е", "д'Артаньян").
# Комбинируемые диакритики (ударение, разложенные й/ё) остаются в слове
WORD_CHAR = r"\w[\u0300-\u036f]*"
TOKEN_PATTERN = re.compile(rf"\d+(?:[.,]\d+)+|(?:{WORD_CHAR})+(?:['’.](?:{WORD_CHAR})+)*")
NUMBER_PATTERN = re.compile(r"^\d+(?:[.,]\d+)*$")


def validate_max_token_length(max_token_length: int) -> int:
    if not isinstance(max_token_length, int) or isinstance(max_token_length, bool) or max_token_length < 1:
        raise InvalidConfiguration(f"max_token_length должен быть целым >= 1, получено {max_token_length!r}")
    return max_token_length


class StandardTokenizer(Tokenizer):
    """Токенизатор по границам слов Unicode."""

    def __init__(self, max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH):
        """
        Инициализирует токенизатор.

        Args:
            max_token_length: Токены длиннее пропускаются (позиция при этом учитывается)
        """
        super().__init__()
        self.max_token_length = validate_max_token_length(max_token_length)
        self._matches: Optional[Iterator[re.Match]] = None
        self._skipped = 0

    def reset(self) -> None:
        self._matches = None
        self._skipped = 0

    def pull(self) -> Optional[Token]:
        if self._matches is None:
            self._matches = TOKEN_PATTERN.finditer(self._read_input())

        for match in self._matches:
            word = match.group()
            if len(word) > self.max_token_length:
                logger.debug(f"Пропущен слишком длинный токен ({len(word)} символов) на позиции {match.start()}")
                self._skipped += 1
                continue
            token = Token(
                text=word,
                start_offset=match.start(),
                end_offset=match.end(),
                position_increment=1 + self._skipped,
                type=NUM if NUMBER_PATTERN.match(word) else ALPHANUM,
            )
            self._skipped = 0
            return token
        return None

    def close(self) -> None:
        super().close()
        self.reset()
