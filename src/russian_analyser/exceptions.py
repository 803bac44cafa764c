"""
Исключения пайплайна анализа текста.

Ошибки конфигурации и загрузки ресурсов возникают только при построении
анализатора; при выдаче токенов собственных ошибок пайплайн не создаёт.
"""


class AnalysisError(Exception):
    """Базовое исключение пакета."""


class ResourceLoadError(AnalysisError):
    """Не удалось прочитать или декодировать словарь (список стоп-слов и т.п.)."""

    def __init__(self, resource: str, reason: str):
        self.resource = resource
        self.reason = reason
        super().__init__(f"Не удалось загрузить ресурс '{resource}': {reason}")


class InvalidConfiguration(AnalysisError):
    """Некорректная конфигурация пайплайна (версия, длина токена, язык...)."""
