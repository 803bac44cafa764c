"""
Тег совместимости, управляющий различиями в поведении стадий.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from ..exceptions import InvalidConfiguration

_DOTTED = re.compile(r'^(\d+)[._](\d+)$')
_COMPACT = re.compile(r'^LUCENE_(\d)(\d+)$', re.IGNORECASE)


@dataclass(frozen=True, order=True)
class Version:
    """Версия совместимости вида major.minor."""
    major: int
    minor: int

    LATEST: ClassVar["Version"]
    MINIMUM: ClassVar["Version"]
    POSITION_INCREMENTS_REQUIRED: ClassVar["Version"]

    @classmethod
    def parse(cls, tag: Optional[Union[str, "Version"]]) -> "Version":
        """
        Разбирает тег совместимости.

        Args:
            tag: "4.7", "4_7", "LUCENE_47", "latest"/"current", Version или None

        Returns:
            Версия (None и "latest" дают Version.LATEST)

        Raises:
            InvalidConfiguration: тег не распознан или версия не поддерживается
        """
        if tag is None:
            return cls.LATEST
        if isinstance(tag, Version):
            version = tag
        elif isinstance(tag, str):
            raw = tag.strip()
            if raw.lower() in ('latest', 'current', 'lucene_current'):
                return cls.LATEST
            match = _DOTTED.match(raw) or _COMPACT.match(raw)
            if not match:
                raise InvalidConfiguration(f"Некорректный тег версии: {tag!r}")
            version = cls(int(match.group(1)), int(match.group(2)))
        else:
            raise InvalidConfiguration(f"Тег версии должен быть строкой, получено {type(tag).__name__}")

        if version < cls.MINIMUM:
            raise InvalidConfiguration(
                f"Версия {version} не поддерживается (минимальная {cls.MINIMUM})"
            )
        return version

    def on_or_after(self, other: "Version") -> bool:
        return self >= other

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


Version.LATEST = Version(4, 7)
Version.MINIMUM = Version(3, 1)
# С этой версии выключить приращения позиций в StopFilter нельзя
Version.POSITION_INCREMENTS_REQUIRED = Version(4, 4)
