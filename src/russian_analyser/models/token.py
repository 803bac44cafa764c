"""
Токен - единица вывода пайплайна.

Источник токенов создаёт по одному токену на лексическую единицу,
фильтры изменяют его атрибуты на месте.
"""

from __future__ import annotations

from dataclasses import dataclass

ALPHANUM = "<ALPHANUM>"
NUM = "<NUM>"


@dataclass
class Token:
    """Фрагмент текста с изменяемыми атрибутами."""
    text: str
    start_offset: int  # Позиция в исходном тексте
    end_offset: int
    position_increment: int = 1  # Разрыв относительно предыдущего токена
    is_keyword: bool = False  # Защищён от стемминга
    type: str = ALPHANUM

    def __post_init__(self) -> None:
        if self.start_offset < 0 or self.end_offset < self.start_offset:
            raise ValueError(
                f"Некорректные смещения токена '{self.text}': "
                f"{self.start_offset}..{self.end_offset}"
            )
        if self.position_increment < 0:
            raise ValueError(f"position_increment не может быть отрицательным: {self.position_increment}")

    def to_dict(self) -> dict:
        """Представление для JSON-вывода."""
        return {
            'text': self.text,
            'start_offset': self.start_offset,
            'end_offset': self.end_offset,
            'position_increment': self.position_increment,
            'is_keyword': self.is_keyword,
            'type': self.type,
        }
